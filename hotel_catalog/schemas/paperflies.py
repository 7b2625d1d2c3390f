from typing import Annotated

from pydantic import BaseModel, BeforeValidator, WrapValidator

from hotel_catalog.schemas.common import Identifier, StrList, Text, objects_only, or_none


class PaperfliesLocation(BaseModel):
    address: Text = None
    country: Text = None


class PaperfliesAmenities(BaseModel):
    general: StrList = []
    room: StrList = []


class PaperfliesImage(BaseModel):
    link: Text = None
    caption: Text = None


ImageList = Annotated[list[PaperfliesImage], BeforeValidator(objects_only)]


class PaperfliesImages(BaseModel):
    rooms: ImageList = []
    site: ImageList = []
    amenities: ImageList = []


class PaperfliesHotel(BaseModel):
    hotel_id: Identifier = None
    destination_id: Identifier = None
    hotel_name: Text = None
    location: Annotated[PaperfliesLocation | None, WrapValidator(or_none)] = None
    details: Text = None
    amenities: Annotated[PaperfliesAmenities | None, WrapValidator(or_none)] = None
    images: Annotated[PaperfliesImages | None, WrapValidator(or_none)] = None
    booking_conditions: StrList = []
