from typing import Optional
from ninja import Schema


class StateSchema(Schema):
    """Schema for a state returned by the api"""

    id: int
    name: str


class CreateStateSchema(Schema):
    """Schema for creating or renaming a state"""

    name: str


class CitySchema(Schema):
    """Schema for a city returned by the api"""

    id: int
    name: str
    state_id: int
    state_name: str


class CreateCitySchema(Schema):
    """Schema for creating a city"""

    name: str
    state_id: int


class UpdateCitySchema(Schema):
    """Schema for updating a city"""

    name: Optional[str] = None
    state_id: Optional[int] = None


class CreateDistrictSchema(Schema):
    """Schema for creating a district"""

    name: str
    city_id: int
    parent_id: Optional[int] = None


class UpdateDistrictSchema(Schema):
    """Schema for updating a district"""

    name: Optional[str] = None
    city_id: Optional[int] = None
    parent_id: Optional[int] = None


class DistrictGridItem(Schema):
    """One pre-joined row of the district grid"""

    id: int
    name: str
    city_id: int
    city_name: str
    state_id: int
    state_name: str
    parent_id: Optional[int] = None
    has_district: bool
    edit_url: str
    destroy_url: str
    show_url: str
