from typing import Optional, Tuple
from django.db import IntegrityError, transaction
from django.db.models import ProtectedError

from backoffice.models.state import State
from backoffice.models.city import City
from backoffice.schemas.location_schema import (
    CreateStateSchema,
    CreateCitySchema,
    UpdateCitySchema,
)
from backoffice.utils.custom_logger import CustomLogger

logger = CustomLogger("backoffice.locations")


def create_state(payload: CreateStateSchema) -> Tuple[Optional[str], Optional[State]]:
    """creates a state"""
    if State.objects.filter(name=payload.name).exists():
        return f"state {payload.name} already exists", None
    state = State.objects.create(name=payload.name)
    logger.info("created state %s", state.id)
    return None, state


def update_state(
    state_id: int, payload: CreateStateSchema
) -> Tuple[Optional[str], Optional[State]]:
    """renames a state"""
    state = State.objects.filter(id=state_id).first()
    if state is None:
        return "state not found", None
    if State.objects.filter(name=payload.name).exclude(id=state_id).exists():
        return f"state {payload.name} already exists", None
    state.name = payload.name
    state.save()
    logger.info("updated state %s", state.id)
    return None, state


def delete_state(state_id: int) -> Tuple[Optional[str], None]:
    """deletes a state which has no cities"""
    state = State.objects.filter(id=state_id).first()
    if state is None:
        return "state not found", None
    try:
        with transaction.atomic():
            state.delete()
    except ProtectedError:
        return "state has cities and cannot be deleted", None
    logger.info("deleted state %s", state_id)
    return None, None


def create_city(payload: CreateCitySchema) -> Tuple[Optional[str], Optional[City]]:
    """creates a city in a state"""
    state = State.objects.filter(id=payload.state_id).first()
    if state is None:
        return "state not found", None
    if City.objects.filter(state=state, name=payload.name).exists():
        return f"city {payload.name} already exists in {state.name}", None
    city = City.objects.create(name=payload.name, state=state)
    logger.info("created city %s in state %s", city.id, state.id)
    return None, city


def update_city(city_id: int, payload: UpdateCitySchema) -> Tuple[Optional[str], Optional[City]]:
    """renames a city or moves it to another state"""
    city = City.objects.select_related("state").filter(id=city_id).first()
    if city is None:
        return "city not found", None

    if payload.state_id is not None:
        state = State.objects.filter(id=payload.state_id).first()
        if state is None:
            return "state not found", None
        city.state = state
    if payload.name is not None:
        city.name = payload.name

    try:
        with transaction.atomic():
            city.save()
    except IntegrityError:
        return f"city {city.name} already exists in {city.state.name}", None
    logger.info("updated city %s", city.id)
    return None, city


def delete_city(city_id: int) -> Tuple[Optional[str], None]:
    """deletes a city which has no districts"""
    city = City.objects.filter(id=city_id).first()
    if city is None:
        return "city not found", None
    try:
        with transaction.atomic():
            city.delete()
    except ProtectedError:
        return "city has districts and cannot be deleted", None
    logger.info("deleted city %s", city_id)
    return None, None
