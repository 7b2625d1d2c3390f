import logging
from collections.abc import Iterable

from hotel_catalog.schemas.hotel import Amenities, Hotel, Images, unique

logger = logging.getLogger(__name__)


def _first_non_empty(existing: str, incoming: str) -> str:
    return existing if existing else incoming


def merge_hotel(existing: Hotel, incoming: Hotel) -> Hotel:
    """Fold ``incoming`` into ``existing`` and return the merged hotel.

    ``existing`` is the base record: its id, destination and whole location
    are kept as-is. Name and description take the first non-empty value.
    Every collection is an ordered union, existing items first.
    Neither argument is modified.
    """
    return Hotel(
        id=existing.id,
        destination_id=existing.destination_id,
        name=_first_non_empty(existing.name, incoming.name),
        location=existing.location.model_copy(),
        description=_first_non_empty(existing.description, incoming.description),
        amenities=Amenities(
            general=unique([*existing.amenities.general, *incoming.amenities.general]),
            room=unique([*existing.amenities.room, *incoming.amenities.room]),
        ),
        images=Images(
            rooms=unique([*existing.images.rooms, *incoming.images.rooms]),
            site=unique([*existing.images.site, *incoming.images.site]),
            amenities=unique([*existing.images.amenities, *incoming.images.amenities]),
        ),
        booking_conditions=unique(
            [*existing.booking_conditions, *incoming.booking_conditions]
        ),
    )


def merge_hotels(hotels: Iterable[Hotel]) -> list[Hotel]:
    """Reconcile hotels sharing an id into one record each.

    The first hotel seen for an id is the base record; later ones are merged
    into it in iteration order. The result keeps first-appearance order.
    """
    merged: dict[str, Hotel] = {}
    for hotel in hotels:
        existing = merged.get(hotel.id)
        if existing is None:
            merged[hotel.id] = hotel.model_copy(deep=True)
            continue
        logger.debug("Merging duplicate hotel %s", hotel.id)
        merged[hotel.id] = merge_hotel(existing, hotel)
    return list(merged.values())
