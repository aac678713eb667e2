"""named admin routes resolved to paths"""

from django.urls import reverse

DISTRICT_INDEX_ROUTE = "admin-district-index"
DISTRICT_CREATE_ROUTE = "admin-district-create"
DISTRICT_EDIT_ROUTE = "admin-district-edit"
DISTRICT_DESTROY_ROUTE = "admin-district-destroy"
DISTRICT_SHOW_ROUTE = "admin-district-show"
CITY_EDIT_ROUTE = "admin-city-edit"


def district_index_url() -> str:
    return reverse(DISTRICT_INDEX_ROUTE)


def district_edit_url(district_id: int) -> str:
    """edit target of the district grid's edit control"""
    return reverse(DISTRICT_EDIT_ROUTE, args=[district_id])


def district_destroy_url(district_id: int) -> str:
    return reverse(DISTRICT_DESTROY_ROUTE, args=[district_id])


def district_show_url(district_id: int) -> str:
    return reverse(DISTRICT_SHOW_ROUTE, args=[district_id])


def city_edit_url(city_id: int) -> str:
    return reverse(CITY_EDIT_ROUTE, args=[city_id])
