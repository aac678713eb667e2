"""functions backing the district grid, the admin pages and the districts api"""

from typing import Optional, Tuple, List
from django.db import transaction
from django.db.models import QuerySet

from backoffice.models.city import City
from backoffice.models.district import District
from backoffice.schemas.location_schema import (
    DistrictGridItem,
    CreateDistrictSchema,
    UpdateDistrictSchema,
)
from backoffice.utils.custom_logger import CustomLogger
from backoffice.utils.routehelpers import (
    district_edit_url,
    district_destroy_url,
    district_show_url,
)

logger = CustomLogger("backoffice.districts")


def to_grid_item(district: District) -> DistrictGridItem:
    """
    map a district fetched via District.objects.for_grid() to its grid row
    city and state come from the joined row, has_district from the annotation
    """
    city = district.city
    state = city.state
    return DistrictGridItem(
        id=district.id,
        name=district.name,
        city_id=city.id,
        city_name=city.name,
        state_id=state.id,
        state_name=state.name,
        parent_id=district.parent_id,
        has_district=bool(district.has_district),
        edit_url=district_edit_url(district.id),
        destroy_url=district_destroy_url(district.id),
        show_url=district_show_url(district.id),
    )


def get_district_grid_items(queryset: Optional[QuerySet] = None) -> List[DistrictGridItem]:
    """
    one query for the whole grid, rows returned in queryset order
    defaults to every district ordered by id
    """
    if queryset is None:
        queryset = District.objects.all()
    return [to_grid_item(district) for district in queryset.for_grid()]


def filter_districts(
    city_id: Optional[int] = None, parent_id: Optional[int] = None, roots_only: bool = False
) -> QuerySet:
    """districts narrowed by city and / or parent"""
    queryset = District.objects.all()
    if city_id is not None:
        queryset = queryset.filter(city_id=city_id)
    if parent_id is not None:
        queryset = queryset.filter(parent_id=parent_id)
    elif roots_only:
        queryset = queryset.roots()
    return queryset.order_by("id")


def get_grid_item(district_id: int) -> Tuple[Optional[str], Optional[DistrictGridItem]]:
    """a single grid row"""
    district = District.objects.for_grid().filter(id=district_id).first()
    if district is None:
        return "district not found", None
    return None, to_grid_item(district)


def _resolve_parent(
    parent_id: Optional[int], city: City, district: Optional[District] = None
) -> Tuple[Optional[str], Optional[District]]:
    """validate the parent of a new or moved district"""
    if parent_id is None:
        return None, None

    parent = District.objects.filter(id=parent_id).first()
    if parent is None:
        return "parent district not found", None
    if parent.city_id != city.id:
        return "parent district must belong to the same city", None

    if district is not None:
        # walk up from the new parent, the district being moved must not be on the path
        ancestor = parent
        while ancestor is not None:
            if ancestor.id == district.id:
                return "a district cannot be nested under itself", None
            ancestor = ancestor.parent

    return None, parent


def create_district(payload: CreateDistrictSchema) -> Tuple[Optional[str], Optional[District]]:
    """creates a district under a city and optionally under a parent district"""
    city = City.objects.filter(id=payload.city_id).first()
    if city is None:
        return "city not found", None

    error, parent = _resolve_parent(payload.parent_id, city)
    if error:
        return error, None

    district = District.objects.create(name=payload.name, city=city, parent=parent)
    logger.info("created district %s in city %s", district.id, city.id)
    return None, district


def update_district(
    district_id: int, payload: UpdateDistrictSchema
) -> Tuple[Optional[str], Optional[District]]:
    """renames or moves a district"""
    district = District.objects.filter(id=district_id).first()
    if district is None:
        return "district not found", None

    fields = payload.model_dump(exclude_unset=True)

    city = district.city
    if fields.get("city_id") is not None:
        city = City.objects.filter(id=fields["city_id"]).first()
        if city is None:
            return "city not found", None
    if city.id != district.city_id and district.children.exists():
        return "a district with nested districts cannot move to another city", None

    parent_id = fields["parent_id"] if "parent_id" in fields else district.parent_id
    error, parent = _resolve_parent(parent_id, city, district)
    if error:
        return error, None

    if fields.get("name") is not None:
        district.name = fields["name"]
    district.city = city
    district.parent = parent
    district.save()
    logger.info("updated district %s", district.id)
    return None, district


@transaction.atomic
def delete_district(district_id: int) -> Tuple[Optional[str], None]:
    """deletes a district, nested districts go with it"""
    district = District.objects.filter(id=district_id).first()
    if district is None:
        return "district not found", None

    district.delete()
    logger.info("deleted district %s", district_id)
    return None, None
