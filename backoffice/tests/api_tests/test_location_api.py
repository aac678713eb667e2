import os
from unittest.mock import Mock
import django
import pytest
from ninja.errors import HttpError

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "backoffice.settings")
django.setup()

from backoffice.api.location_api import (
    get_states,
    post_state,
    put_state,
    delete_state,
    get_cities,
    post_city,
    put_city,
    delete_city,
)
from backoffice.models.state import State
from backoffice.models.city import City
from backoffice.schemas.location_schema import (
    CreateStateSchema,
    CreateCitySchema,
    UpdateCitySchema,
)

pytestmark = pytest.mark.django_db


def mock_request(user=None):
    request = Mock()
    request.user = user
    return request


def test_get_states(admin_user, state):
    State.objects.create(name="East")
    assert [s.name for s in get_states(mock_request(admin_user))] == ["East", "North"]


def test_post_state(admin_user):
    response = post_state(mock_request(admin_user), CreateStateSchema(name="South"))
    assert response["success"] is True
    assert response["res"]["name"] == "South"


def test_post_state_duplicate(admin_user, state):
    with pytest.raises(HttpError) as excinfo:
        post_state(mock_request(admin_user), CreateStateSchema(name="North"))
    assert excinfo.value.status_code == 400


def test_put_state_not_found(admin_user):
    with pytest.raises(HttpError) as excinfo:
        put_state(mock_request(admin_user), 9999, CreateStateSchema(name="South"))
    assert excinfo.value.status_code == 404


def test_delete_state_with_cities(admin_user, city):
    with pytest.raises(HttpError) as excinfo:
        delete_state(mock_request(admin_user), city.state_id)
    assert excinfo.value.status_code == 400
    assert str(excinfo.value) == "state has cities and cannot be deleted"


def test_get_cities(admin_user, city, other_city):
    south = State.objects.create(name="South")
    City.objects.create(name="Dune", state=south)

    rows = get_cities(mock_request(admin_user), state_id=city.state_id)
    assert rows == [
        {"id": city.id, "name": "Metro", "state_id": city.state_id, "state_name": "North"},
        {"id": other_city.id, "name": "Harbor", "state_id": city.state_id, "state_name": "North"},
    ]
    assert len(get_cities(mock_request(admin_user))) == 3


def test_post_city(admin_user, state):
    response = post_city(mock_request(admin_user), CreateCitySchema(name="Metro", state_id=state.id))
    assert response["res"]["state"] == {"id": state.id, "name": "North"}


def test_put_city(admin_user, city):
    response = put_city(mock_request(admin_user), city.id, UpdateCitySchema(name="Capital"))
    assert response["res"]["name"] == "Capital"


def test_delete_city_with_districts(admin_user, district):
    with pytest.raises(HttpError) as excinfo:
        delete_city(mock_request(admin_user), district.city_id)
    assert excinfo.value.status_code == 400


def test_delete_city(admin_user, city):
    assert delete_city(mock_request(admin_user), city.id) == {"success": True}


def test_states_endpoint(admin_client, state):
    response = admin_client.get("/api/states/")
    assert response.status_code == 200
    assert response.json() == [{"id": state.id, "name": "North"}]
