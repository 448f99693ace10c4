"""Pydantic schemas for API responses.

Hotel payloads use camelCase keys (``createdAt``, ``hotelId``, ``Rooms``)
because that is the shape existing clients consume. Python attribute names
stay snake_case; aliases are applied on serialization.
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class _CamelModel(BaseModel):
    model_config = ConfigDict(
        from_attributes=True,
        populate_by_name=True,
        alias_generator=to_camel,
    )


class RoomResponse(_CamelModel):
    id: int
    name: str
    capacity: int
    hotel_id: int
    created_at: datetime
    updated_at: datetime


class HotelResponse(_CamelModel):
    id: int
    name: str
    image: str
    created_at: datetime
    updated_at: datetime


class HotelWithRoomsResponse(HotelResponse):
    """Single hotel with its rooms in store order."""

    rooms: list[RoomResponse] = Field(default_factory=list, alias="Rooms")


class HealthResponse(BaseModel):
    status: str
    service: str
