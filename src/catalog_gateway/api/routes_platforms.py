"""Data platform endpoints: /api/v1/platforms."""

from __future__ import annotations

from fastapi import APIRouter, status
from fastapi.responses import JSONResponse

from catalog_gateway.api.deps import CatalogServiceDep, LimitQuery, OffsetQuery, UrnPath
from catalog_gateway.domain.params import DEFAULT_LIMIT, DEFAULT_OFFSET
from catalog_gateway.models import Dataset, Item, Page, Platform

router = APIRouter(prefix="/api/v1/platforms", tags=["platforms"])


@router.get("")
async def list_platforms(service: CatalogServiceDep, limit: LimitQuery = DEFAULT_LIMIT) -> Page[Platform]:
    """Platforms known to the catalog, as listed on the DataHub home page."""
    return await service.list_platforms(limit)


@router.get("/{urn:path}/datasets")
async def list_platform_datasets(
    urn: UrnPath,
    service: CatalogServiceDep,
    offset: OffsetQuery = DEFAULT_OFFSET,
    limit: LimitQuery = DEFAULT_LIMIT,
) -> Page[Dataset]:
    return await service.datasets_by_platform(urn, offset, limit)


@router.get("/{urn:path}", responses={404: {"description": "Platform not found"}})
async def get_platform(urn: UrnPath, service: CatalogServiceDep) -> Item[Platform]:
    item = await service.get_platform(urn)
    if item.data is None:
        return JSONResponse(status_code=status.HTTP_404_NOT_FOUND, content={"data": None})
    return item
