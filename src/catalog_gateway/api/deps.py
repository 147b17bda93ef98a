"""FastAPI dependency injection."""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends, Path, Query, Request

from catalog_gateway.domain.catalog_service import CatalogService
from catalog_gateway.domain.params import DEFAULT_LIMIT, DEFAULT_OFFSET, MAX_LIMIT, SearchParams

_MODIFIERS = ("query", "name", "tags", "offset", "limit")


def get_catalog_service(request: Request) -> CatalogService:
    return request.app.state.catalog_service


def get_search_params(
    request: Request,
    query: str | None = None,
    name: str | None = None,
    tags: str | None = None,
    offset: Annotated[int, Query(ge=0)] = DEFAULT_OFFSET,
    limit: Annotated[int, Query(ge=1, le=MAX_LIMIT)] = DEFAULT_LIMIT,
) -> SearchParams:
    # A bare key such as ``?finance`` is shorthand for ``?query=finance``
    if query is None and name is None and tags is None:
        bare = [key for key, value in request.query_params.multi_items() if not value and key not in _MODIFIERS]
        if bare:
            query = bare[0]
    return SearchParams(query=query, name=name, tags=tags, offset=offset, limit=limit)


CatalogServiceDep = Annotated[CatalogService, Depends(get_catalog_service)]
SearchParamsDep = Annotated[SearchParams, Depends(get_search_params)]
OffsetQuery = Annotated[int, Query(ge=0)]
LimitQuery = Annotated[int, Query(ge=1, le=MAX_LIMIT)]
UrnPath = Annotated[str, Path(min_length=1)]
