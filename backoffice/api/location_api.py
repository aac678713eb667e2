from typing import List, Optional
from ninja import Router
from ninja.errors import HttpError

from backoffice import auth
from backoffice.auth import has_permission
from backoffice.core import locationfunctions
from backoffice.models.state import State
from backoffice.models.city import City
from backoffice.schemas.location_schema import (
    StateSchema,
    CreateStateSchema,
    CitySchema,
    CreateCitySchema,
    UpdateCitySchema,
)

state_router = Router()
city_router = Router()


def _status_for(error: str) -> int:
    return 404 if error.endswith("not found") else 400


def _city_row(city: City) -> dict:
    return {
        "id": city.id,
        "name": city.name,
        "state_id": city.state_id,
        "state_name": city.state.name,
    }


@state_router.get("/", response=List[StateSchema], auth=auth.StaffSessionAuth())
@has_permission(["backoffice.view_state"])
def get_states(request):
    """all states"""
    return State.objects.order_by("name")


@state_router.post("/", auth=auth.StaffSessionAuth())
@has_permission(["backoffice.add_state"])
def post_state(request, payload: CreateStateSchema):
    """creates a state"""
    error, state = locationfunctions.create_state(payload)
    if error:
        raise HttpError(_status_for(error), error)
    return {"success": True, "res": state.to_json()}


@state_router.put("/{state_id}", auth=auth.StaffSessionAuth())
@has_permission(["backoffice.change_state"])
def put_state(request, state_id: int, payload: CreateStateSchema):
    """renames a state"""
    error, state = locationfunctions.update_state(state_id, payload)
    if error:
        raise HttpError(_status_for(error), error)
    return {"success": True, "res": state.to_json()}


@state_router.delete("/{state_id}", auth=auth.StaffSessionAuth())
@has_permission(["backoffice.delete_state"])
def delete_state(request, state_id: int):
    """deletes a state without cities"""
    error, _ = locationfunctions.delete_state(state_id)
    if error:
        raise HttpError(_status_for(error), error)
    return {"success": True}


@city_router.get("/", response=List[CitySchema], auth=auth.StaffSessionAuth())
@has_permission(["backoffice.view_city"])
def get_cities(request, state_id: Optional[int] = None):
    """all cities, optionally of one state"""
    cities = City.objects.select_related("state").order_by("id")
    if state_id is not None:
        cities = cities.filter(state_id=state_id)
    return [_city_row(city) for city in cities]


@city_router.post("/", auth=auth.StaffSessionAuth())
@has_permission(["backoffice.add_city"])
def post_city(request, payload: CreateCitySchema):
    """creates a city"""
    error, city = locationfunctions.create_city(payload)
    if error:
        raise HttpError(_status_for(error), error)
    return {"success": True, "res": city.to_json()}


@city_router.put("/{city_id}", auth=auth.StaffSessionAuth())
@has_permission(["backoffice.change_city"])
def put_city(request, city_id: int, payload: UpdateCitySchema):
    """renames a city or moves it to another state"""
    error, city = locationfunctions.update_city(city_id, payload)
    if error:
        raise HttpError(_status_for(error), error)
    return {"success": True, "res": city.to_json()}


@city_router.delete("/{city_id}", auth=auth.StaffSessionAuth())
@has_permission(["backoffice.delete_city"])
def delete_city(request, city_id: int):
    """deletes a city without districts"""
    error, _ = locationfunctions.delete_city(city_id)
    if error:
        raise HttpError(_status_for(error), error)
    return {"success": True}
