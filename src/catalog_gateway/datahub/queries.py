"""GraphQL request builders for the DataHub API.

Every builder is pure: it renders a document and a typed variables object and
never touches the network. User-supplied values only ever travel in
``variables``, so the rendered document text depends on the entity type and
selection alone.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from catalog_gateway.enums import EntityType, LookupField, SearchFilterField

WILDCARD = "*"
HOME_SCENARIO = "HOME"


class GraphQLRequest(BaseModel):
    """Body POSTed to the GraphQL endpoint."""

    query: str
    variables: dict[str, Any] = Field(default_factory=dict)


class _Input(BaseModel):
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    def dump(self) -> dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


class SearchFilter(_Input):
    """Equality constraint on a search facet (``FacetFilterInput``)."""

    field: SearchFilterField
    value: str


class SearchInput(_Input):
    type: EntityType
    query: str
    start: int
    count: int
    filters: list[SearchFilter] | None = None


class AutoCompleteInput(_Input):
    type: EntityType
    query: str
    limit: int


class TagAssociationInput(_Input):
    tag_urn: str = Field(alias="tagUrn")
    resource_urn: str = Field(alias="resourceUrn")


class RequestContext(_Input):
    scenario: str = HOME_SCENARIO


class ListRecommendationsInput(_Input):
    user_urn: str = Field(alias="userUrn")
    limit: int
    request_context: RequestContext = Field(default_factory=RequestContext, alias="requestContext")


def _document(text: str) -> str:
    """Collapse a multi-line GraphQL document to a single line."""
    return " ".join(text.split())


def wildcard(query: str) -> str:
    """Wrap a free-text query as ``*query*``; the all-match wildcard is kept as-is.

    An empty query means "match everything". Whitespace is not trimmed here;
    request parameters arrive already stripped.
    """
    if query in ("", WILDCARD):
        return WILDCARD
    return f"{WILDCARD}{query}{WILDCARD}"


def tag_query(tags: str) -> str:
    """Render comma-separated tag names as a field-qualified search query.

    >>> tag_query("finance,pii")
    'tags:finance OR tags:pii'
    """
    names = [name.strip() for name in tags.split(",") if name.strip()]
    return " OR ".join(f"tags:{name}" for name in names)


# ─── Queries ─────────────────────────────────────────────


def lookup(entity_field: LookupField | str, selection: str, urn: str) -> GraphQLRequest:
    """Fetch a single entity by URN."""
    field = LookupField(entity_field)
    document = f"""
        query lookup($urn: String!) {{
            entity: {field}(urn: $urn) {{ {selection} }}
        }}
    """
    return GraphQLRequest(query=_document(document), variables={"urn": urn})


def autocomplete(entity_type: EntityType | str, selection: str, query: str, limit: int) -> GraphQLRequest:
    """Name autocomplete: limit only, no offset and no total."""
    document = f"""
        query autocomplete($input: AutoCompleteInput!) {{
            results: autoComplete(input: $input) {{
                __typename
                entities {{ {selection} }}
            }}
        }}
    """
    variables = AutoCompleteInput(type=EntityType(entity_type), query=query, limit=limit)
    return GraphQLRequest(query=_document(document), variables={"input": variables.dump()})


def _search_document(selection: str) -> str:
    return _document(
        f"""
        query search($input: SearchInput!) {{
            results: search(input: $input) {{
                __typename start count total
                entities: searchResults {{ entity {{ {selection} }} }}
            }}
        }}
        """
    )


def _search_request(
    entity_type: EntityType | str,
    selection: str,
    query: str,
    offset: int,
    limit: int,
    search_filter: SearchFilter | None,
) -> GraphQLRequest:
    variables = SearchInput(
        type=EntityType(entity_type),
        query=query,
        start=offset,
        count=limit,
        filters=[search_filter] if search_filter is not None else None,
    )
    return GraphQLRequest(query=_search_document(selection), variables={"input": variables.dump()})


def search(
    entity_type: EntityType | str,
    selection: str,
    query: str,
    offset: int,
    limit: int,
    search_filter: SearchFilter | None = None,
) -> GraphQLRequest:
    """Counted free-text search, optionally narrowed by a facet filter.

    ``query`` is wrapped in wildcards unless it is the all-match ``*``.
    """
    return _search_request(entity_type, selection, wildcard(query), offset, limit, search_filter)


def tag_search(entity_type: EntityType | str, selection: str, tags: str, offset: int, limit: int) -> GraphQLRequest:
    """Counted search for entities carrying any of the comma-separated tags."""
    return _search_request(entity_type, selection, tag_query(tags), offset, limit, None)


def recommendations(selection: str, actor_urn: str, limit: int) -> GraphQLRequest:
    """HOME recommendation listing; only its platform module is consumed."""
    document = f"""
        query recommendations($input: ListRecommendationsInput!) {{
            results: listRecommendations(input: $input) {{
                modules {{
                    id: moduleId
                    content {{ entity {{ {selection} }} }}
                }}
            }}
        }}
    """
    variables = ListRecommendationsInput(user_urn=actor_urn, limit=limit)
    return GraphQLRequest(query=_document(document), variables={"input": variables.dump()})


# ─── Mutations ───────────────────────────────────────────


def _tag_association(mutation: str, resource_urn: str, tag_urn: str) -> GraphQLRequest:
    document = f"""
        mutation {mutation}($input: TagAssociationInput!) {{
            success: {mutation}(input: $input)
        }}
    """
    variables = TagAssociationInput(tag_urn=tag_urn, resource_urn=resource_urn)
    return GraphQLRequest(query=_document(document), variables={"input": variables.dump()})


def add_tag_association(resource_urn: str, tag_urn: str) -> GraphQLRequest:
    return _tag_association("addTag", resource_urn, tag_urn)


def remove_tag_association(resource_urn: str, tag_urn: str) -> GraphQLRequest:
    return _tag_association("removeTag", resource_urn, tag_urn)
