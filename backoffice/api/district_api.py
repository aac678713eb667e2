from typing import List, Optional
from ninja import Router
from ninja.errors import HttpError

from backoffice import auth
from backoffice.auth import has_permission
from backoffice.core import districtfunctions
from backoffice.schemas.location_schema import (
    DistrictGridItem,
    CreateDistrictSchema,
    UpdateDistrictSchema,
)

district_router = Router()


def _status_for(error: str) -> int:
    """not-found errors map to 404, the rest are validation failures"""
    return 404 if error.endswith("not found") else 400


@district_router.get("/", response=List[DistrictGridItem], auth=auth.StaffSessionAuth())
@has_permission(["backoffice.view_district"])
def get_districts(request, city_id: Optional[int] = None, parent_id: Optional[int] = None):
    """districts as pre-joined grid rows, optionally narrowed by city or parent"""
    queryset = districtfunctions.filter_districts(city_id=city_id, parent_id=parent_id)
    return districtfunctions.get_district_grid_items(queryset)


@district_router.get("/{district_id}", response=DistrictGridItem, auth=auth.StaffSessionAuth())
@has_permission(["backoffice.view_district"])
def get_district(request, district_id: int):
    """a single district as a grid row"""
    error, item = districtfunctions.get_grid_item(district_id)
    if error:
        raise HttpError(404, error)
    return item


@district_router.post("/", auth=auth.StaffSessionAuth())
@has_permission(["backoffice.add_district"])
def post_district(request, payload: CreateDistrictSchema):
    """creates a district"""
    error, district = districtfunctions.create_district(payload)
    if error:
        raise HttpError(_status_for(error), error)
    return {"success": True, "res": district.to_json()}


@district_router.put("/{district_id}", auth=auth.StaffSessionAuth())
@has_permission(["backoffice.change_district"])
def put_district(request, district_id: int, payload: UpdateDistrictSchema):
    """renames or moves a district"""
    error, district = districtfunctions.update_district(district_id, payload)
    if error:
        raise HttpError(_status_for(error), error)
    return {"success": True, "res": district.to_json()}


@district_router.delete("/{district_id}", auth=auth.StaffSessionAuth())
@has_permission(["backoffice.delete_district"])
def delete_district(request, district_id: int):
    """deletes a district and its nested districts"""
    error, _ = districtfunctions.delete_district(district_id)
    if error:
        raise HttpError(404, error)
    return {"success": True}
