import logging
from typing import Any

import httpx

from hotel_catalog.exceptions.custom import RateLimitError, SupplierError

logger = logging.getLogger(__name__)


class SupplierClient:
    """Fetches the raw DTO list of one supplier endpoint."""

    def __init__(self, client: httpx.AsyncClient, supplier: str, url: str):
        self._client = client
        self.supplier = supplier
        self.url = url

    async def fetch(self) -> list[Any]:
        try:
            resp = await self._client.get(self.url)
        except httpx.HTTPError as exc:
            raise SupplierError(self.supplier, f"request failed: {exc}") from exc

        if resp.status_code == 429:
            raise RateLimitError(self.supplier)
        if resp.status_code >= 400:
            raise SupplierError(self.supplier, resp.text, status_code=resp.status_code)

        try:
            data = resp.json()
        except ValueError as exc:
            raise SupplierError(
                self.supplier, "response body is not valid JSON",
                status_code=resp.status_code,
            ) from exc

        if not isinstance(data, list):
            raise SupplierError(
                self.supplier,
                f"expected a JSON array, got {type(data).__name__}",
                status_code=resp.status_code,
            )

        logger.info("Fetched %d records from %s", len(data), self.supplier)
        return data
