"""Command line entry point: print the filtered hotel catalog as JSON."""

import asyncio
import json
import logging
import sys

import httpx

from hotel_catalog.config import Settings, configure_logging
from hotel_catalog.exceptions.custom import RateLimitError, SupplierError
from hotel_catalog.schemas.hotel import Hotel
from hotel_catalog.services.catalog import CatalogService, parse_id_list
from hotel_catalog.suppliers import default_endpoints

logger = logging.getLogger(__name__)

USAGE = "Usage: hotel-catalog <hotel_ids> <destination_ids>"


async def fetch_hotels(
    hotel_ids: list[str],
    destination_ids: list[str],
    settings: Settings,
) -> list[Hotel]:
    async with httpx.AsyncClient(timeout=settings.http_timeout) as client:
        service = CatalogService(
            client,
            default_endpoints(settings),
            skip_failed_suppliers=settings.skip_failed_suppliers,
        )
        return await service.find(hotel_ids, destination_ids)


def render(hotels: list[Hotel]) -> str:
    return json.dumps(
        [hotel.model_dump(mode="json") for hotel in hotels],
        indent=2,
        ensure_ascii=False,
    )


def main(argv: list[str] | None = None) -> int:
    args = sys.argv[1:] if argv is None else argv
    if len(args) < 2:
        print(USAGE, file=sys.stderr)
        return 1

    settings = Settings()
    configure_logging(settings.log_level, stream=sys.stderr)

    try:
        hotels = asyncio.run(
            fetch_hotels(parse_id_list(args[0]), parse_id_list(args[1]), settings)
        )
    except (SupplierError, RateLimitError) as exc:
        logger.error("Could not build hotel catalog: %s", exc)
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    print(render(hotels))
    return 0


if __name__ == "__main__":
    sys.exit(main())
