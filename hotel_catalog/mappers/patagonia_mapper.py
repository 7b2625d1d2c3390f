from hotel_catalog.mappers.normalize import (
    clean_destination,
    clean_id,
    clean_list,
    clean_text,
    parse_coordinate,
)
from hotel_catalog.schemas.hotel import Amenities, Hotel, Image, Images, Location
from hotel_catalog.schemas.patagonia import PatagoniaHotel, PatagoniaImage


def _map_images(images: list[PatagoniaImage]) -> list[Image]:
    mapped: list[Image] = []
    for image in images:
        link = clean_text(image.url)
        if not link:
            continue
        mapped.append(Image(link=link, description=clean_text(image.description) or ""))
    return mapped


def map_patagonia_hotel(dto: PatagoniaHotel) -> Hotel | None:
    """Map a Patagonia DTO to a Hotel. Returns None when the DTO has no id."""
    hotel_id = clean_id(dto.id)
    if hotel_id is None:
        return None

    images = Images()
    if dto.images is not None:
        images = Images(
            rooms=_map_images(dto.images.rooms),
            site=_map_images(dto.images.site),
            amenities=_map_images(dto.images.amenities),
        )

    return Hotel(
        id=hotel_id,
        destination_id=clean_destination(dto.destination),
        name=clean_text(dto.name) or "",
        description=clean_text(dto.info) or "",
        location=Location(
            address=clean_text(dto.address),
            lat=parse_coordinate(dto.lat),
            lng=parse_coordinate(dto.lng),
        ),
        amenities=Amenities(general=clean_list(dto.amenities)),
        images=images,
    )
