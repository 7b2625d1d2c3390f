from typing import Annotated

from fastapi import Depends, Request

from hotel_catalog.services.catalog import CatalogService


def get_catalog_service(request: Request) -> CatalogService:
    return request.app.state.catalog_service


CatalogDep = Annotated[CatalogService, Depends(get_catalog_service)]
