from typing import List
from ninja import Router
from ninja.errors import HttpError

from backoffice import auth
from backoffice.auth import has_permission
from backoffice.core import productpackagefunctions
from backoffice.models.product_package import ProductPackage
from backoffice.schemas.product_package_schema import ProductPackageSchema

product_package_router = Router()


@product_package_router.get("/", response=List[ProductPackageSchema], auth=auth.StaffSessionAuth())
@has_permission(["backoffice.view_productpackage"])
def get_product_packages(request):
    """all product packages"""
    return ProductPackage.objects.order_by("id")


@product_package_router.post("/", auth=auth.StaffSessionAuth())
@has_permission(["backoffice.add_productpackage"])
def post_product_package(request):
    """creates a product package"""
    package = productpackagefunctions.create_product_package()
    return {"success": True, "res": package.to_json()}


@product_package_router.delete("/{package_id}", auth=auth.StaffSessionAuth())
@has_permission(["backoffice.delete_productpackage"])
def delete_product_package(request, package_id: int):
    """deletes a product package"""
    error, _ = productpackagefunctions.delete_product_package(package_id)
    if error:
        raise HttpError(404, error)
    return {"success": True}
