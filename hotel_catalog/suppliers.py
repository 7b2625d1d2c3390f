"""Supplier adapters: one per supplier, each mapping a raw DTO to a Hotel."""

from typing import Any, Protocol

from hotel_catalog.config import Settings
from hotel_catalog.mappers.acme_mapper import map_acme_hotel
from hotel_catalog.mappers.paperflies_mapper import map_paperflies_hotel
from hotel_catalog.mappers.patagonia_mapper import map_patagonia_hotel
from hotel_catalog.schemas.acme import AcmeHotel
from hotel_catalog.schemas.hotel import Hotel
from hotel_catalog.schemas.paperflies import PaperfliesHotel
from hotel_catalog.schemas.patagonia import PatagoniaHotel


class SupplierAdapter(Protocol):
    def identify(self) -> str: ...

    def normalize(self, raw: Any) -> Hotel | None: ...


def _as_object(raw: Any) -> dict:
    return raw if isinstance(raw, dict) else {}


class AcmeAdapter:
    def identify(self) -> str:
        return "acme"

    def normalize(self, raw: Any) -> Hotel | None:
        return map_acme_hotel(AcmeHotel.model_validate(_as_object(raw)))


class PatagoniaAdapter:
    def identify(self) -> str:
        return "patagonia"

    def normalize(self, raw: Any) -> Hotel | None:
        return map_patagonia_hotel(PatagoniaHotel.model_validate(_as_object(raw)))


class PaperfliesAdapter:
    def identify(self) -> str:
        return "paperflies"

    def normalize(self, raw: Any) -> Hotel | None:
        return map_paperflies_hotel(PaperfliesHotel.model_validate(_as_object(raw)))


def default_endpoints(settings: Settings) -> list[tuple[SupplierAdapter, str]]:
    """Registered suppliers in processing order, paired with their endpoint."""
    return [
        (AcmeAdapter(), settings.acme_url),
        (PatagoniaAdapter(), settings.patagonia_url),
        (PaperfliesAdapter(), settings.paperflies_url),
    ]
