from collections.abc import Iterable
from typing import TypeVar

from pydantic import BaseModel, ConfigDict, field_validator

T = TypeVar("T")


def unique(items: Iterable[T]) -> list[T]:
    """Ordered set: keep the first occurrence of each item."""
    return list(dict.fromkeys(items))


class Location(BaseModel):
    address: str | None = None
    city: str | None = None
    country: str | None = None
    lat: float | None = None
    lng: float | None = None


class Amenities(BaseModel):
    general: list[str] = []
    room: list[str] = []

    @field_validator("general", "room")
    @classmethod
    def dedupe(cls, value: list[str]) -> list[str]:
        return unique(value)


class Image(BaseModel):
    # frozen: hashed and compared by value
    model_config = ConfigDict(frozen=True)

    link: str
    description: str = ""


class Images(BaseModel):
    rooms: list[Image] = []
    site: list[Image] = []
    amenities: list[Image] = []

    @field_validator("rooms", "site", "amenities")
    @classmethod
    def dedupe(cls, value: list[Image]) -> list[Image]:
        return unique(value)


class Hotel(BaseModel):
    id: str
    destination_id: int | str | None = None
    name: str = ""
    location: Location = Location()
    description: str = ""
    amenities: Amenities = Amenities()
    images: Images = Images()
    booking_conditions: list[str] = []

    @field_validator("booking_conditions")
    @classmethod
    def dedupe(cls, value: list[str]) -> list[str]:
        return unique(value)
