from typing import Annotated, Any

from pydantic import BaseModel, BeforeValidator, WrapValidator

from hotel_catalog.schemas.common import Identifier, StrList, Text, objects_only, or_none


class PatagoniaImage(BaseModel):
    url: Text = None
    description: Text = None


ImageList = Annotated[list[PatagoniaImage], BeforeValidator(objects_only)]


class PatagoniaImages(BaseModel):
    rooms: ImageList = []
    site: ImageList = []
    amenities: ImageList = []


class PatagoniaHotel(BaseModel):
    id: Identifier = None
    destination: Identifier = None
    name: Text = None
    lat: Any = None
    lng: Any = None
    address: Text = None
    info: Text = None
    amenities: StrList = []
    images: Annotated[PatagoniaImages | None, WrapValidator(or_none)] = None
