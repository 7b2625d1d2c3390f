from hotel_catalog.mappers.normalize import (
    clean_destination,
    clean_id,
    clean_list,
    clean_text,
)
from hotel_catalog.schemas.hotel import Amenities, Hotel, Image, Images, Location
from hotel_catalog.schemas.paperflies import PaperfliesHotel, PaperfliesImage


def _map_images(images: list[PaperfliesImage]) -> list[Image]:
    mapped: list[Image] = []
    for image in images:
        link = clean_text(image.link)
        if not link:
            continue
        mapped.append(Image(link=link, description=clean_text(image.caption) or ""))
    return mapped


def map_paperflies_hotel(dto: PaperfliesHotel) -> Hotel | None:
    """Map a Paperflies DTO to a Hotel. Returns None when the DTO has no hotel_id.

    Paperflies carries no coordinates and no city.
    """
    hotel_id = clean_id(dto.hotel_id)
    if hotel_id is None:
        return None

    location = Location()
    if dto.location is not None:
        location = Location(
            address=clean_text(dto.location.address),
            country=clean_text(dto.location.country),
        )

    amenities = Amenities()
    if dto.amenities is not None:
        amenities = Amenities(
            general=clean_list(dto.amenities.general),
            room=clean_list(dto.amenities.room),
        )

    images = Images()
    if dto.images is not None:
        images = Images(
            rooms=_map_images(dto.images.rooms),
            site=_map_images(dto.images.site),
            amenities=_map_images(dto.images.amenities),
        )

    return Hotel(
        id=hotel_id,
        destination_id=clean_destination(dto.destination_id),
        name=clean_text(dto.hotel_name) or "",
        description=clean_text(dto.details) or "",
        location=location,
        amenities=amenities,
        images=images,
        booking_conditions=clean_list(dto.booking_conditions),
    )
