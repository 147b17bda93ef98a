"""Tag endpoints: /api/v1/tags."""

from __future__ import annotations

from fastapi import APIRouter, Response, status
from fastapi.responses import JSONResponse

from catalog_gateway.api.deps import CatalogServiceDep, LimitQuery, OffsetQuery, SearchParamsDep, UrnPath
from catalog_gateway.api.schemas import CreateTagRequest
from catalog_gateway.domain.params import DEFAULT_LIMIT, DEFAULT_OFFSET
from catalog_gateway.models import Dataset, Item, Page, Tag

router = APIRouter(prefix="/api/v1/tags", tags=["tags"])


@router.get("", responses={400: {"description": "Unsupported filter"}})
async def list_tags(service: CatalogServiceDep, params: SearchParamsDep) -> Page[Tag]:
    return await service.list_tags(params)


@router.post("", status_code=201)
async def create_tag(body: CreateTagRequest, service: CatalogServiceDep) -> Tag:
    return await service.create_tag(body.name, body.description)


@router.get("/{urn:path}/datasets")
async def list_tag_datasets(
    urn: UrnPath,
    service: CatalogServiceDep,
    offset: OffsetQuery = DEFAULT_OFFSET,
    limit: LimitQuery = DEFAULT_LIMIT,
) -> Page[Dataset]:
    return await service.datasets_by_tag(urn, offset, limit)


@router.get("/{urn:path}", responses={404: {"description": "Tag not found"}})
async def get_tag(urn: UrnPath, service: CatalogServiceDep) -> Item[Tag]:
    item = await service.get_tag(urn)
    if item.data is None:
        return JSONResponse(status_code=status.HTTP_404_NOT_FOUND, content={"data": None})
    return item


@router.delete("/{urn:path}", status_code=204)
async def delete_tag(urn: UrnPath, service: CatalogServiceDep) -> Response:
    await service.delete_tag(urn)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
