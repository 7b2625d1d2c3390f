import logging

from fastapi import Request
from fastapi.responses import JSONResponse

from .custom import RateLimitError, SupplierError

logger = logging.getLogger(__name__)


async def supplier_error_handler(_request: Request, exc: SupplierError) -> JSONResponse:
    logger.error(
        "Supplier error from %s: %s (status=%s)",
        exc.supplier, exc.message, exc.status_code,
    )
    return JSONResponse(
        status_code=502,
        content={"detail": f"Supplier {exc.supplier} error: {exc.message}"},
    )


async def rate_limit_error_handler(_request: Request, exc: RateLimitError) -> JSONResponse:
    logger.warning("Rate limit hit for %s", exc.service)
    return JSONResponse(
        status_code=429,
        content={"detail": f"Rate limit exceeded for {exc.service}"},
    )
