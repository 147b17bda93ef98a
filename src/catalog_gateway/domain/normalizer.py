"""Project decoded DataHub entities onto the normalized REST shapes."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from catalog_gateway.datahub.models import (
    AutocompleteResult,
    DatasetEntity,
    Entity,
    PlatformEntity,
    RecommendationModules,
    SearchResult,
    SingleEntity,
    TagEntity,
)
from catalog_gateway.enums import EntityKind
from catalog_gateway.exceptions import DecodeError
from catalog_gateway.models import Dataset, Item, Page, Paging, Platform, SchemaField, Tag


def normalize_tag(entity: TagEntity) -> Tag:
    props = entity.properties
    return Tag(
        id=entity.urn,
        name=props.name if props else None,
        description=props.description if props else None,
    )


def normalize_platform(entity: PlatformEntity) -> Platform:
    return Platform(
        id=entity.urn,
        name=entity.name,
        title=entity.properties.display_name,
        type=entity.properties.type,
    )


def normalize_dataset(entity: DatasetEntity) -> Dataset:
    props = entity.properties
    # subTypes is never empty in well-formed data, but an empty list still means "no label"
    subtype = entity.sub_types.type_names[0] if entity.sub_types and entity.sub_types.type_names else None
    fields = None
    if entity.schema_metadata is not None:
        fields = [
            SchemaField(path=f.field_path, type=f.type, native_type=f.native_data_type)
            for f in entity.schema_metadata.fields
        ]

    return Dataset(
        id=entity.urn,
        path=entity.name,
        name=props.name if props else None,
        origin=props.origin if props else None,
        type=subtype,
        platform=normalize_platform(entity.platform) if entity.platform else None,
        tags=[normalize_tag(assoc.tag) for assoc in entity.tags.tags] if entity.tags else [],
        schema_fields=fields,
    )


_NORMALIZERS: dict[str, Callable[[Any], Tag | Dataset | Platform]] = {
    EntityKind.TAG: normalize_tag,
    EntityKind.DATASET: normalize_dataset,
    EntityKind.DATA_PLATFORM: normalize_platform,
}


def normalize_entity(entity: Entity, kind: EntityKind | None = None) -> Tag | Dataset | Platform:
    """Normalize any entity variant.

    When ``kind`` is given the entity must be of that kind; anything else
    means the upstream answered a different question than the one asked.
    """
    if kind is not None and entity.typename != kind:
        raise DecodeError(f"Expected a {kind} entity, got {entity.typename} ({entity.urn})")
    return _NORMALIZERS[entity.typename](entity)


def paging_of(result: AutocompleteResult | SearchResult | RecommendationModules) -> Paging | None:
    """Paging exists only for counted searches."""
    if isinstance(result, SearchResult):
        return Paging(offset=result.start, limit=result.count, total=result.total)
    return None


def to_page(result: AutocompleteResult | SearchResult | RecommendationModules, kind: EntityKind) -> Page[Any]:
    return Page(
        data=[normalize_entity(entity, kind) for entity in result.items],
        paging=paging_of(result),
    )


def to_item(result: SingleEntity, kind: EntityKind) -> Item[Any]:
    if result.entity is None:
        return Item(data=None)
    return Item(data=normalize_entity(result.entity, kind))
