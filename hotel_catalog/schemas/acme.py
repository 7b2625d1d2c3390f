from typing import Any

from pydantic import BaseModel

from hotel_catalog.schemas.common import Identifier, StrList, Text


class AcmeHotel(BaseModel):
    Id: Identifier = None
    DestinationId: Identifier = None
    Name: Text = None
    Latitude: Any = None  # number, numeric string or ""
    Longitude: Any = None
    Address: Text = None
    City: Text = None
    Country: Text = None
    Description: Text = None
    Facilities: StrList = []
