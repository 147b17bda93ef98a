"""Normalized catalog entities and REST envelopes.

These shapes are the same whichever GraphQL operation produced them.
"""

from __future__ import annotations

from typing import Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field


class CatalogModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True, frozen=True)


class Tag(CatalogModel):
    id: str
    name: str | None = None
    description: str | None = None


class Platform(CatalogModel):
    id: str
    name: str
    title: str
    type: str


class SchemaField(CatalogModel):
    path: str
    type: str
    native_type: str = Field(alias="nativeType")


class Dataset(CatalogModel):
    id: str
    path: str
    name: str | None = None
    origin: str | None = None
    type: str | None = None
    platform: Platform | None = None
    tags: list[Tag] = Field(default_factory=list)
    schema_fields: list[SchemaField] | None = Field(default=None, alias="fields")


class Paging(CatalogModel):
    offset: int
    limit: int
    total: int


EntityT = TypeVar("EntityT", Tag, Dataset, Platform)


class Page(BaseModel, Generic[EntityT]):
    """List envelope; ``paging`` is set only for counted searches."""

    data: list[EntityT]
    paging: Paging | None = None


class Item(BaseModel, Generic[EntityT]):
    """Single-entity envelope; ``data`` is null when the URN is unknown."""

    data: EntityT | None = None
