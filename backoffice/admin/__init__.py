"""django.contrib.admin registrations; the custom admin pages live in backoffice.admin.views"""

from django.contrib import admin

from backoffice.models.product_package import ProductPackage
from backoffice.models.state import State
from backoffice.models.city import City
from backoffice.models.district import District


@admin.register(ProductPackage)
class ProductPackageAdmin(admin.ModelAdmin):
    list_display = ["id"]


@admin.register(State)
class StateAdmin(admin.ModelAdmin):
    list_display = ["id", "name", "created_at"]
    search_fields = ["name"]


@admin.register(City)
class CityAdmin(admin.ModelAdmin):
    list_display = ["id", "name", "state"]
    list_select_related = ["state"]
    list_filter = ["state"]
    search_fields = ["name"]


@admin.register(District)
class DistrictAdmin(admin.ModelAdmin):
    list_display = ["id", "name", "city", "parent"]
    list_select_related = ["city__state", "parent"]
    list_filter = ["city__state"]
    search_fields = ["name", "city__name"]
    raw_id_fields = ["parent"]
