from ninja import NinjaAPI
from ninja.errors import ValidationError
from ninja.responses import Response
from pydantic import ValidationError as PydanticValidationError

from backoffice.api.district_api import district_router
from backoffice.api.location_api import state_router, city_router
from backoffice.api.product_package_api import product_package_router
from backoffice.utils.custom_logger import CustomLogger

logger = CustomLogger("backoffice")

src_api = NinjaAPI(
    urls_namespace="api",
    title="Backoffice apis",
    description="Administration of product packages and the state / city / district hierarchy",
    docs_url="/api/docs",
)


@src_api.exception_handler(ValidationError)
def ninja_validation_error_handler(request, exc):  # pylint: disable=unused-argument
    """
    Handle any ninja validation errors raised in the apis
    These are raised during request payload validation
    exc.errors is correct
    """
    return Response({"detail": exc.errors}, status=422)


@src_api.exception_handler(PydanticValidationError)
def pydantic_validation_error_handler(
    request, exc: PydanticValidationError
):  # pylint: disable=unused-argument
    """
    Handle any pydantic errors raised in the apis
    These are raised during response payload validation
    exc.errors() is correct
    """
    return Response({"detail": exc.errors()}, status=500)


@src_api.exception_handler(Exception)
def ninja_default_error_handler(request, exc: Exception):  # pylint: disable=unused-argument
    """Handle any other exception raised in the apis"""
    logger.exception(exc)
    return Response({"detail": "something went wrong"}, status=500)


# tag routes to specify sections in docs
state_router.tags = ["State"]
city_router.tags = ["City"]
district_router.tags = ["District"]
product_package_router.tags = ["ProductPackage"]

src_api.add_router("/api/states/", state_router)
src_api.add_router("/api/cities/", city_router)
src_api.add_router("/api/districts/", district_router)
src_api.add_router("/api/product_packages/", product_package_router)
