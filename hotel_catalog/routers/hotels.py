from fastapi import APIRouter
from pydantic import BaseModel

from hotel_catalog.dependencies import CatalogDep
from hotel_catalog.schemas.hotel import Hotel
from hotel_catalog.services.catalog import parse_id_list

router = APIRouter()


class SupplierInfo(BaseModel):
    name: str
    url: str


@router.get("/hotels", response_model=list[Hotel])
async def list_hotels(
    service: CatalogDep,
    hotel_ids: str | None = None,
    destination_ids: str | None = None,
) -> list[Hotel]:
    return await service.find(
        parse_id_list(hotel_ids), parse_id_list(destination_ids)
    )


@router.get("/suppliers", response_model=list[SupplierInfo])
async def list_suppliers(service: CatalogDep) -> list[SupplierInfo]:
    return [SupplierInfo(name=name, url=url) for name, url in service.suppliers]
