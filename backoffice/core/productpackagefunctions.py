from typing import Optional, Tuple
from backoffice.models.product_package import ProductPackage
from backoffice.utils.custom_logger import CustomLogger

logger = CustomLogger("backoffice.product_packages")


def create_product_package() -> ProductPackage:
    """a new package row, the database assigns the id"""
    package = ProductPackage.objects.create()
    logger.info("created product package %s", package.id)
    return package


def delete_product_package(package_id: int) -> Tuple[Optional[str], None]:
    """deletes a product package"""
    deleted, _ = ProductPackage.objects.filter(id=package_id).delete()
    if deleted == 0:
        return "product package not found", None
    logger.info("deleted product package %s", package_id)
    return None, None
