"""Typed views of DataHub GraphQL responses.

Union members are picked by the discriminator the payload carries
(``__typename`` for results and entities, ``id`` for recommendation modules),
never by probing which fields happen to be present. Sub-objects DataHub may
omit are optional; identifiers and discriminators are required.
"""

from __future__ import annotations

from typing import Annotated, Any, Literal, Union

from pydantic import BaseModel, ConfigDict, Discriminator, Field, Tag


class UpstreamModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True, frozen=True, extra="ignore")


# ─── Entities ────────────────────────────────────────────


class TagProperties(UpstreamModel):
    name: str | None = None
    description: str | None = None


class TagEntity(UpstreamModel):
    typename: Literal["Tag"] = Field(alias="__typename")
    urn: str
    properties: TagProperties | None = None


class PlatformProperties(UpstreamModel):
    display_name: str = Field(alias="displayName")
    type: str


class PlatformEntity(UpstreamModel):
    typename: Literal["DataPlatform"] = Field(alias="__typename")
    urn: str
    name: str
    properties: PlatformProperties


class DatasetProperties(UpstreamModel):
    name: str | None = None
    origin: str | None = None


class SchemaField(UpstreamModel):
    field_path: str = Field(alias="fieldPath")
    type: str
    native_data_type: str = Field(alias="nativeDataType")


class SchemaMetadata(UpstreamModel):
    fields: list[SchemaField]


class SubTypes(UpstreamModel):
    type_names: list[str] = Field(alias="typeNames")


class TagAssociation(UpstreamModel):
    tag: TagEntity


class GlobalTags(UpstreamModel):
    tags: list[TagAssociation] = Field(default_factory=list)


class DatasetEntity(UpstreamModel):
    typename: Literal["Dataset"] = Field(alias="__typename")
    urn: str
    name: str
    platform: PlatformEntity | None = None
    properties: DatasetProperties | None = None
    schema_metadata: SchemaMetadata | None = Field(default=None, alias="schemaMetadata")
    sub_types: SubTypes | None = Field(default=None, alias="subTypes")
    tags: GlobalTags | None = None


Entity = Annotated[Union[TagEntity, DatasetEntity, PlatformEntity], Field(discriminator="typename")]


# ─── Query results ───────────────────────────────────────


class SearchEntry(UpstreamModel):
    entity: Entity


class AutocompleteResult(UpstreamModel):
    """``AutoCompleteResults``: matches only, no paging."""

    typename: Literal["AutoCompleteResults"] = Field(alias="__typename")
    entities: list[Entity]

    @property
    def items(self) -> list[Entity]:
        return list(self.entities)


class SearchResult(UpstreamModel):
    """``SearchResults``: one counted page of matches."""

    typename: Literal["SearchResults"] = Field(alias="__typename")
    start: int
    count: int
    total: int
    entities: list[SearchEntry]

    @property
    def items(self) -> list[Entity]:
        return [entry.entity for entry in self.entities]


QueryResult = Annotated[Union[AutocompleteResult, SearchResult], Field(discriminator="typename")]


class SingleEntity(UpstreamModel):
    """Lookup by URN. A null ``entity`` means "not found", not a failure."""

    entity: Entity | None = None


# ─── Recommendations ─────────────────────────────────────

PLATFORMS_MODULE = "Platforms"


class PlatformContent(UpstreamModel):
    entity: PlatformEntity


class PlatformsModule(UpstreamModel):
    id: Literal["Platforms"]
    content: list[PlatformContent] | None = None


class IgnoredModule(UpstreamModel):
    """Any module other than the platform listing (recently viewed, top tags...)."""

    id: str


def _module_tag(value: Any) -> str | None:
    module_id = value.get("id") if isinstance(value, dict) else getattr(value, "id", None)
    if not isinstance(module_id, str):
        return None
    return "platforms" if module_id == PLATFORMS_MODULE else "ignored"


RecommendationModule = Annotated[
    Union[Annotated[PlatformsModule, Tag("platforms")], Annotated[IgnoredModule, Tag("ignored")]],
    Discriminator(_module_tag),
]


class RecommendationModules(UpstreamModel):
    modules: list[RecommendationModule]

    @property
    def items(self) -> list[PlatformEntity]:
        return [
            content.entity
            for module in self.modules
            if isinstance(module, PlatformsModule)
            for content in module.content or ()
        ]


# ─── Mutations ───────────────────────────────────────────


class GraphQLErrorMessage(UpstreamModel):
    message: str


class MutationData(UpstreamModel):
    success: bool | None = None


class MutationResult(UpstreamModel):
    data: MutationData | None = None
    errors: list[GraphQLErrorMessage] | None = None

    @property
    def succeeded(self) -> bool:
        return self.data is not None and self.data.success is True


# ─── Top-level envelopes ─────────────────────────────────


class _QueryData(UpstreamModel):
    results: QueryResult


class QueryResponse(UpstreamModel):
    data: _QueryData


class LookupResponse(UpstreamModel):
    data: SingleEntity


class _RecommendationsData(UpstreamModel):
    results: RecommendationModules


class RecommendationsResponse(UpstreamModel):
    data: _RecommendationsData
