from contextlib import asynccontextmanager

import httpx
from fastapi import FastAPI

from hotel_catalog.config import Settings, configure_logging
from hotel_catalog.exceptions.custom import RateLimitError, SupplierError
from hotel_catalog.exceptions.handlers import (
    rate_limit_error_handler,
    supplier_error_handler,
)
from hotel_catalog.routers.hotels import router as hotels_router
from hotel_catalog.services.catalog import CatalogService
from hotel_catalog.suppliers import default_endpoints


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings = Settings()
    configure_logging(settings.log_level)

    async with httpx.AsyncClient(timeout=settings.http_timeout) as client:
        app.state.catalog_service = CatalogService(
            client,
            default_endpoints(settings),
            skip_failed_suppliers=settings.skip_failed_suppliers,
        )
        yield


app = FastAPI(title="Hotel Catalog", lifespan=lifespan)

app.add_exception_handler(SupplierError, supplier_error_handler)
app.add_exception_handler(RateLimitError, rate_limit_error_handler)

app.include_router(hotels_router)
