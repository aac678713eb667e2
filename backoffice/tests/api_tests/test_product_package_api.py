import os
from unittest.mock import Mock
import django
import pytest
from ninja.errors import HttpError

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "backoffice.settings")
django.setup()

from backoffice.api.product_package_api import (
    get_product_packages,
    post_product_package,
    delete_product_package,
)
from backoffice.models.product_package import ProductPackage

pytestmark = pytest.mark.django_db


def mock_request(user=None):
    request = Mock()
    request.user = user
    return request


def test_post_and_list_product_packages(admin_user):
    first = post_product_package(mock_request(admin_user))
    second = post_product_package(mock_request(admin_user))
    assert second["res"]["id"] > first["res"]["id"]

    ids = [package.id for package in get_product_packages(mock_request(admin_user))]
    assert ids == [first["res"]["id"], second["res"]["id"]]


def test_delete_product_package(admin_user):
    package = ProductPackage.objects.create()
    assert delete_product_package(mock_request(admin_user), package.id) == {"success": True}
    assert ProductPackage.objects.count() == 0


def test_delete_product_package_not_found(admin_user):
    with pytest.raises(HttpError) as excinfo:
        delete_product_package(mock_request(admin_user), 9999)
    assert excinfo.value.status_code == 404


def test_product_packages_endpoint(admin_client):
    package = ProductPackage.objects.create()
    response = admin_client.get("/api/product_packages/")
    assert response.status_code == 200
    assert response.json() == [{"id": package.id}]
