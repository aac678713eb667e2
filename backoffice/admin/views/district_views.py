from django.conf import settings
from django.contrib import messages
from django.contrib.admin.views.decorators import staff_member_required
from django.contrib.auth.decorators import permission_required
from django.core.paginator import Paginator
from django.http import HttpResponseNotAllowed
from django.shortcuts import get_object_or_404, redirect, render

from backoffice.admin.forms import DistrictForm
from backoffice.core import districtfunctions
from backoffice.core.districtfunctions import to_grid_item
from backoffice.models.city import City
from backoffice.models.district import District
from backoffice.utils.custom_logger import CustomLogger
from backoffice.utils.routehelpers import DISTRICT_INDEX_ROUTE, DISTRICT_SHOW_ROUTE, city_edit_url

logger = CustomLogger("backoffice.admin")


def _grid_context(queryset, page_number):
    """paginate the queryset and map the current page to grid rows"""
    paginator = Paginator(queryset.for_grid(), settings.DISTRICT_GRID_PAGE_SIZE)
    page = paginator.get_page(page_number)
    return {
        "page": page,
        "districts": [to_grid_item(district) for district in page.object_list],
        "placeholder_image": settings.DISTRICT_PLACEHOLDER_IMAGE,
    }


@staff_member_required
def district_index_view(request):
    """grid of the districts that are not nested under another district"""
    city = None
    city_id = request.GET.get("city")
    if city_id and city_id.isdigit():
        city = get_object_or_404(City.objects.select_related("state"), id=city_id)

    queryset = districtfunctions.filter_districts(
        city_id=city.id if city else None, roots_only=True
    )
    context = _grid_context(queryset, request.GET.get("page"))
    context["city"] = city
    context["city_edit_url"] = city_edit_url(city.id) if city else None
    return render(request, "admin/district/index.html", context)


@staff_member_required
def district_show_view(request, district_id: int):
    """a district and the grid of its nested districts"""
    district = get_object_or_404(District.objects.for_grid(), id=district_id)
    queryset = districtfunctions.filter_districts(parent_id=district.id)
    context = _grid_context(queryset, request.GET.get("page"))
    context["district"] = to_grid_item(district)
    return render(request, "admin/district/show.html", context)


@staff_member_required
@permission_required("backoffice.add_district", raise_exception=True)
def district_create_view(request):
    """create a district"""
    form = DistrictForm(request.POST or None, initial={"parent": request.GET.get("parent")})
    if request.method == "POST" and form.is_valid():
        district = form.save()
        logger.info("created district %s", district.id)
        messages.success(request, f"District {district.name} created")
        return redirect(DISTRICT_INDEX_ROUTE)
    return render(request, "admin/district/form.html", {"form": form, "district": None})


@staff_member_required
@permission_required("backoffice.change_district", raise_exception=True)
def district_edit_view(request, district_id: int):
    """edit a district"""
    district = get_object_or_404(District, id=district_id)
    form = DistrictForm(request.POST or None, instance=district)
    if request.method == "POST" and form.is_valid():
        district = form.save()
        logger.info("updated district %s", district.id)
        messages.success(request, f"District {district.name} updated")
        return redirect(DISTRICT_INDEX_ROUTE)
    return render(request, "admin/district/form.html", {"form": form, "district": district})


@staff_member_required
@permission_required("backoffice.delete_district", raise_exception=True)
def district_destroy_view(request, district_id: int):
    """
    delete a district
    browsers submit this as a POST carrying _method=DELETE
    """
    is_delete = request.method == "DELETE" or (
        request.method == "POST" and request.POST.get("_method", "").upper() == "DELETE"
    )
    if not is_delete:
        return HttpResponseNotAllowed(["POST", "DELETE"])

    district = get_object_or_404(District, id=district_id)
    parent_id = district.parent_id
    error, _ = districtfunctions.delete_district(district.id)
    if error:
        messages.error(request, error)
    else:
        messages.success(request, f"District {district.name} deleted")

    if parent_id is not None and District.objects.filter(id=parent_id).exists():
        return redirect(DISTRICT_SHOW_ROUTE, parent_id)
    return redirect(DISTRICT_INDEX_ROUTE)
