"""Catalog read and write pipelines.

Each public method is one pipeline: build a GraphQL document (or an ingestion
snapshot), send it once, decode the typed response and normalize it.
"""

from __future__ import annotations

import logging

from catalog_gateway.datahub import queries
from catalog_gateway.datahub.decoder import decode_entity, decode_recommendations, decode_results
from catalog_gateway.datahub.ingest import create_tag_snapshot, remove_tag_snapshot, tag_urn
from catalog_gateway.datahub.queries import GraphQLRequest, SearchFilter
from catalog_gateway.datahub.selections import DATASET_SELECTION, PLATFORM_SELECTION, TAG_SELECTION
from catalog_gateway.datahub.transport import DataHubTransport
from catalog_gateway.domain.mutations import interpret_mutation
from catalog_gateway.domain.normalizer import to_item, to_page
from catalog_gateway.domain.params import SearchParams
from catalog_gateway.enums import EntityKind, EntityType, LookupField, QueryIntent, SearchFilterField
from catalog_gateway.exceptions import UnsupportedFilterError, UpstreamStatusError
from catalog_gateway.models import Dataset, Item, Page, Platform, Tag

logger = logging.getLogger(__name__)


class CatalogService:
    """Serves tags, datasets and platforms from DataHub."""

    def __init__(self, transport: DataHubTransport, actor_urn: str) -> None:
        self.transport = transport
        self.actor_urn = actor_urn

    async def _execute(self, request: GraphQLRequest) -> bytes:
        response = await self.transport.graphql(request)
        if not response.ok:
            raise UpstreamStatusError(response.status_code, response.content)
        return response.content

    async def _list(
        self,
        entity_type: EntityType,
        kind: EntityKind,
        selection: str,
        params: SearchParams,
    ) -> Page:
        intent = params.intent
        if intent is QueryIntent.AUTOCOMPLETE:
            request = queries.autocomplete(entity_type, selection, params.name or "", params.limit)
        elif intent is QueryIntent.TAG_FILTERED_SEARCH:
            if kind is EntityKind.TAG:
                raise UnsupportedFilterError("The tags filter is not supported when listing tags")
            request = queries.tag_search(entity_type, selection, params.tags or "", params.offset, params.limit)
        else:
            request = queries.search(
                entity_type, selection, params.query or queries.WILDCARD, params.offset, params.limit
            )
        logger.debug("Listing %s via %s", kind, intent)
        return to_page(decode_results(await self._execute(request)), kind)

    async def _lookup(self, field: LookupField, kind: EntityKind, selection: str, urn: str) -> Item:
        logger.debug("Fetching %s %s via %s", kind, urn, QueryIntent.LOOKUP)
        request = queries.lookup(field, selection, urn)
        return to_item(decode_entity(await self._execute(request)), kind)

    async def _filtered_datasets(self, field: SearchFilterField, value: str, offset: int, limit: int) -> Page:
        if field is SearchFilterField.PLATFORM:
            intent = QueryIntent.PLATFORM_FILTERED_SEARCH
        else:
            intent = QueryIntent.TAG_FILTERED_SEARCH
        logger.debug("Listing datasets with %s=%s via %s", field, value, intent)
        request = queries.search(
            EntityType.DATASET,
            DATASET_SELECTION,
            queries.WILDCARD,
            offset,
            limit,
            SearchFilter(field=field, value=value),
        )
        return to_page(decode_results(await self._execute(request)), EntityKind.DATASET)

    # ─── Tags ─────────────────────────────────────────────

    async def list_tags(self, params: SearchParams) -> Page[Tag]:
        return await self._list(EntityType.TAG, EntityKind.TAG, TAG_SELECTION, params)

    async def get_tag(self, urn: str) -> Item[Tag]:
        return await self._lookup(LookupField.TAG, EntityKind.TAG, TAG_SELECTION, urn)

    async def create_tag(self, name: str, description: str | None = None) -> Tag:
        description = description or ""
        response = await self.transport.ingest(create_tag_snapshot(name, description))
        if not response.ok:
            raise UpstreamStatusError(response.status_code, response.content)
        logger.info("Created tag %s", name)
        return Tag(id=tag_urn(name), name=name, description=description)

    async def delete_tag(self, urn: str) -> None:
        response = await self.transport.ingest(remove_tag_snapshot(urn))
        if not response.ok:
            raise UpstreamStatusError(response.status_code, response.content)
        logger.info("Removed tag %s", urn)

    async def datasets_by_tag(self, urn: str, offset: int, limit: int) -> Page[Dataset]:
        return await self._filtered_datasets(SearchFilterField.TAGS, urn, offset, limit)

    # ─── Datasets ─────────────────────────────────────────

    async def list_datasets(self, params: SearchParams) -> Page[Dataset]:
        return await self._list(EntityType.DATASET, EntityKind.DATASET, DATASET_SELECTION, params)

    async def get_dataset(self, urn: str) -> Item[Dataset]:
        return await self._lookup(LookupField.DATASET, EntityKind.DATASET, DATASET_SELECTION, urn)

    async def add_tag(self, resource_urn: str, tag: str) -> int:
        """Associate ``tag`` with a resource; returns the REST status to answer with."""
        response = await self.transport.graphql(queries.add_tag_association(resource_urn, tag))
        return interpret_mutation(response)

    async def remove_tag(self, resource_urn: str, tag: str) -> int:
        response = await self.transport.graphql(queries.remove_tag_association(resource_urn, tag))
        return interpret_mutation(response)

    # ─── Platforms ────────────────────────────────────────

    async def list_platforms(self, limit: int) -> Page[Platform]:
        logger.debug("Listing platforms via %s", QueryIntent.RECOMMENDATIONS)
        request = queries.recommendations(PLATFORM_SELECTION, self.actor_urn, limit)
        return to_page(decode_recommendations(await self._execute(request)), EntityKind.DATA_PLATFORM)

    async def get_platform(self, urn: str) -> Item[Platform]:
        return await self._lookup(LookupField.DATA_PLATFORM, EntityKind.DATA_PLATFORM, PLATFORM_SELECTION, urn)

    async def datasets_by_platform(self, urn: str, offset: int, limit: int) -> Page[Dataset]:
        return await self._filtered_datasets(SearchFilterField.PLATFORM, urn, offset, limit)
