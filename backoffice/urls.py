# main urls
from django.contrib import admin
from django.urls import path
from django.http import HttpResponse

from backoffice.routes import src_api
from backoffice.admin.views.district_views import (
    district_index_view,
    district_show_view,
    district_create_view,
    district_edit_view,
    district_destroy_view,
)
from backoffice.admin.views.city_views import city_edit_view


def healthcheck(request):  # pylint:disable=unused-argument
    """Healthcheck endpoint for load balancers"""
    return HttpResponse("OK")


urlpatterns = [
    path("django-admin/", admin.site.urls),
    path("healthcheck", healthcheck),
    path("admin/districts/", district_index_view, name="admin-district-index"),
    path("admin/districts/create/", district_create_view, name="admin-district-create"),
    path("admin/districts/<int:district_id>/", district_show_view, name="admin-district-show"),
    path(
        "admin/districts/<int:district_id>/edit/", district_edit_view, name="admin-district-edit"
    ),
    path(
        "admin/districts/<int:district_id>/delete/",
        district_destroy_view,
        name="admin-district-destroy",
    ),
    path("admin/cities/<int:city_id>/edit/", city_edit_view, name="admin-city-edit"),
    path("", src_api.urls),
]
