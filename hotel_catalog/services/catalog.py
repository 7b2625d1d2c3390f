import asyncio
import logging
from collections.abc import Iterable, Iterator
from itertools import chain

import httpx

from hotel_catalog.exceptions.custom import RateLimitError, SupplierError
from hotel_catalog.mappers.hotel_merger import merge_hotels
from hotel_catalog.schemas.hotel import Hotel
from hotel_catalog.services.supplier_client import SupplierClient
from hotel_catalog.suppliers import SupplierAdapter

logger = logging.getLogger(__name__)


def parse_id_list(value: str | None) -> list[str]:
    """Parse a comma-separated id filter. ``none`` or blank means no filter."""
    if value is None or value.strip().lower() in ("", "none"):
        return []
    return [part.strip() for part in value.split(",") if part.strip()]


def _matches_destination(hotel: Hotel, wanted: set[str]) -> bool:
    if not wanted:
        return True
    if hotel.destination_id is None:
        return False
    return str(hotel.destination_id) in wanted


class HotelCatalog:
    """Reconciled, read-only hotel catalog in first-appearance order.

    Hotels are copied in and handed out as copies, so callers cannot change
    the stored entries.
    """

    def __init__(self, hotels: Iterable[Hotel], failed_suppliers: Iterable[str] = ()):
        self._hotels = tuple(hotel.model_copy(deep=True) for hotel in hotels)
        self._by_id = {hotel.id: hotel for hotel in self._hotels}
        self.failed_suppliers = tuple(failed_suppliers)

    def __len__(self) -> int:
        return len(self._hotels)

    def __iter__(self) -> Iterator[Hotel]:
        return (hotel.model_copy(deep=True) for hotel in self._hotels)

    def get(self, hotel_id: str) -> Hotel | None:
        hotel = self._by_id.get(hotel_id)
        return hotel.model_copy(deep=True) if hotel is not None else None

    def find(
        self,
        hotel_ids: Iterable[str] = (),
        destination_ids: Iterable[str] = (),
    ) -> list[Hotel]:
        """Filter by hotel and destination ids; an empty filter matches all.

        Destinations compare as strings so numeric ids match "5"-style filters.
        Hotels without a destination never match a destination filter.
        """
        wanted_hotels = set(hotel_ids)
        wanted_destinations = {str(d) for d in destination_ids}
        return [
            hotel.model_copy(deep=True)
            for hotel in self._hotels
            if (not wanted_hotels or hotel.id in wanted_hotels)
            and _matches_destination(hotel, wanted_destinations)
        ]


class CatalogService:
    def __init__(
        self,
        client: httpx.AsyncClient,
        suppliers: list[tuple[SupplierAdapter, str]],
        skip_failed_suppliers: bool = False,
    ):
        self._client = client
        self._suppliers = suppliers
        self._skip_failed = skip_failed_suppliers

    @property
    def suppliers(self) -> list[tuple[str, str]]:
        return [(adapter.identify(), url) for adapter, url in self._suppliers]

    async def _collect(self, adapter: SupplierAdapter, url: str) -> list[Hotel]:
        name = adapter.identify()
        raw_items = await SupplierClient(self._client, name, url).fetch()

        hotels: list[Hotel] = []
        for raw in raw_items:
            hotel = adapter.normalize(raw)
            if hotel is None:
                logger.warning("Skipping %s record without an id", name)
                continue
            hotels.append(hotel)
        return hotels

    async def build_catalog(self) -> HotelCatalog:
        """Fetch every supplier concurrently, then reconcile in registration order."""
        results = await asyncio.gather(
            *(self._collect(adapter, url) for adapter, url in self._suppliers),
            return_exceptions=self._skip_failed,
        )

        batches: list[list[Hotel]] = []
        failed: list[str] = []
        for (adapter, _url), result in zip(self._suppliers, results):
            if isinstance(result, BaseException):
                if not isinstance(result, (SupplierError, RateLimitError)):
                    raise result
                logger.error(
                    "Supplier %s failed, continuing without it",
                    adapter.identify(), exc_info=result,
                )
                failed.append(adapter.identify())
                continue
            batches.append(result)

        catalog = HotelCatalog(merge_hotels(chain.from_iterable(batches)), failed)
        logger.info(
            "Catalog built: %d hotels from %d suppliers",
            len(catalog), len(batches),
        )
        return catalog

    async def find(
        self,
        hotel_ids: Iterable[str] = (),
        destination_ids: Iterable[str] = (),
    ) -> list[Hotel]:
        catalog = await self.build_catalog()
        return catalog.find(hotel_ids, destination_ids)
