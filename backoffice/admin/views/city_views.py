from django.contrib import messages
from django.contrib.admin.views.decorators import staff_member_required
from django.contrib.auth.decorators import permission_required
from django.shortcuts import get_object_or_404, redirect, render

from backoffice.admin.forms import CityForm
from backoffice.models.city import City
from backoffice.utils.custom_logger import CustomLogger
from backoffice.utils.routehelpers import DISTRICT_INDEX_ROUTE

logger = CustomLogger("backoffice.admin")


@staff_member_required
@permission_required("backoffice.change_city", raise_exception=True)
def city_edit_view(request, city_id: int):
    """edit a city"""
    city = get_object_or_404(City.objects.select_related("state"), id=city_id)
    form = CityForm(request.POST or None, instance=city)
    if request.method == "POST" and form.is_valid():
        city = form.save()
        logger.info("updated city %s", city.id)
        messages.success(request, f"City {city.name} updated")
        return redirect(DISTRICT_INDEX_ROUTE)
    return render(request, "admin/city/form.html", {"form": form, "city": city})
