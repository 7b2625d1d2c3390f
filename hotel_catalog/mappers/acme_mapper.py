from hotel_catalog.mappers.normalize import (
    clean_destination,
    clean_id,
    clean_list,
    clean_text,
    parse_coordinate,
)
from hotel_catalog.schemas.acme import AcmeHotel
from hotel_catalog.schemas.hotel import Amenities, Hotel, Location


def map_acme_hotel(dto: AcmeHotel) -> Hotel | None:
    """Map an Acme DTO to a Hotel. Returns None when the DTO has no Id."""
    hotel_id = clean_id(dto.Id)
    if hotel_id is None:
        return None

    return Hotel(
        id=hotel_id,
        destination_id=clean_destination(dto.DestinationId),
        name=clean_text(dto.Name) or "",
        description=clean_text(dto.Description) or "",
        location=Location(
            address=clean_text(dto.Address),
            city=clean_text(dto.City),
            country=clean_text(dto.Country),
            lat=parse_coordinate(dto.Latitude),
            lng=parse_coordinate(dto.Longitude),
        ),
        amenities=Amenities(general=clean_list(dto.Facilities)),
    )
