"""Catalog enums shared by the query builder, decoder and REST layer."""

from enum import StrEnum


class EntityType(StrEnum):
    """Upstream search entity types (GraphQL ``EntityType`` enum values)."""

    DATASET = "DATASET"
    TAG = "TAG"
    DATA_PLATFORM = "DATA_PLATFORM"


class LookupField(StrEnum):
    """Root query fields that fetch one entity by URN."""

    DATASET = "dataset"
    TAG = "tag"
    DATA_PLATFORM = "dataPlatform"


class EntityKind(StrEnum):
    """Upstream ``__typename`` of the entities this gateway exposes."""

    TAG = "Tag"
    DATASET = "Dataset"
    DATA_PLATFORM = "DataPlatform"


class QueryIntent(StrEnum):
    """Which GraphQL operation serves a REST read."""

    LOOKUP = "lookup"
    AUTOCOMPLETE = "autocomplete"
    FULL_TEXT_SEARCH = "full_text_search"
    TAG_FILTERED_SEARCH = "tag_filtered_search"
    PLATFORM_FILTERED_SEARCH = "platform_filtered_search"
    RECOMMENDATIONS = "recommendations"


class SearchFilterField(StrEnum):
    """Facet fields used for structured equality filters."""

    TAGS = "tags"
    PLATFORM = "platform"
