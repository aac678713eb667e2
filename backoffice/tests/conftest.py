"""fixtures shared by the backoffice tests"""

import pytest
from django.contrib.auth.models import Permission

from backoffice.models.state import State
from backoffice.models.city import City
from backoffice.models.district import District


@pytest.fixture
def state():
    """a State object"""
    return State.objects.create(name="North")


@pytest.fixture
def city(state):
    """a City in the North state"""
    return City.objects.create(name="Metro", state=state)


@pytest.fixture
def other_city(state):
    """a second City in the North state"""
    return City.objects.create(name="Harbor", state=state)


@pytest.fixture
def district(city):
    """a root-level District without nested districts"""
    return District.objects.create(name="Central", city=city)


@pytest.fixture
def nested_district(district):
    """a District nested under the Central district"""
    return District.objects.create(name="Old Town", city=district.city, parent=district)


@pytest.fixture
def staff_user(django_user_model):
    """a staff account that can only view districts"""
    user = django_user_model.objects.create_user(
        username="staffuser", email="staffuser@test.com", password="testpassword", is_staff=True
    )
    user.user_permissions.add(Permission.objects.get(codename="view_district"))
    return user


@pytest.fixture
def plain_user(django_user_model):
    """an account without staff access"""
    return django_user_model.objects.create_user(
        username="plainuser", email="plainuser@test.com", password="testpassword"
    )
