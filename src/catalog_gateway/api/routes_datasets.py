"""Dataset endpoints: /api/v1/datasets."""

from __future__ import annotations

from fastapi import APIRouter, Response, status
from fastapi.responses import JSONResponse

from catalog_gateway.api.deps import CatalogServiceDep, SearchParamsDep, UrnPath
from catalog_gateway.api.schemas import AddTagRequest
from catalog_gateway.models import Dataset, Item, Page

router = APIRouter(prefix="/api/v1/datasets", tags=["datasets"])

_MUTATION_RESPONSES: dict[int | str, dict[str, str]] = {
    204: {"description": "Association changed"},
    422: {"description": "DataHub did not confirm the change"},
}


@router.get("")
async def list_datasets(service: CatalogServiceDep, params: SearchParamsDep) -> Page[Dataset]:
    return await service.list_datasets(params)


@router.get("/{urn:path}", responses={404: {"description": "Dataset not found"}})
async def get_dataset(urn: UrnPath, service: CatalogServiceDep) -> Item[Dataset]:
    item = await service.get_dataset(urn)
    if item.data is None:
        return JSONResponse(status_code=status.HTTP_404_NOT_FOUND, content={"data": None})
    return item


@router.post("/{urn:path}/tags", status_code=204, responses=_MUTATION_RESPONSES)
async def add_dataset_tag(urn: UrnPath, body: AddTagRequest, service: CatalogServiceDep) -> Response:
    return Response(status_code=await service.add_tag(urn, body.tag))


@router.delete("/{urn:path}/tags/{tag_urn}", status_code=204, responses=_MUTATION_RESPONSES)
async def remove_dataset_tag(urn: UrnPath, tag_urn: UrnPath, service: CatalogServiceDep) -> Response:
    return Response(status_code=await service.remove_tag(urn, tag_urn))
