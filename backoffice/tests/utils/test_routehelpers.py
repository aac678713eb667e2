import os
import django

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "backoffice.settings")
django.setup()

from backoffice.utils.routehelpers import (
    district_index_url,
    district_edit_url,
    district_destroy_url,
    district_show_url,
    city_edit_url,
)


def test_district_urls():
    assert district_index_url() == "/admin/districts/"
    assert district_edit_url(7) == "/admin/districts/7/edit/"
    assert district_destroy_url(7) == "/admin/districts/7/delete/"
    assert district_show_url(7) == "/admin/districts/7/"


def test_city_edit_url():
    assert city_edit_url(3) == "/admin/cities/3/edit/"
