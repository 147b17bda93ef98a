"""REST list parameters and the GraphQL operation they select."""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator

from catalog_gateway.enums import QueryIntent

DEFAULT_OFFSET = 0
DEFAULT_LIMIT = 10
MAX_LIMIT = 1000


class SearchParams(BaseModel):
    """List parameters for a collection read.

    At most one modifier is honored, in this order: ``query`` (free text),
    then ``name`` (autocomplete), then ``tags`` (tag-qualified search). With
    none of them the collection is listed through an all-match search.
    """

    query: str | None = None
    name: str | None = None
    tags: str | None = None
    offset: int = Field(default=DEFAULT_OFFSET, ge=0)
    limit: int = Field(default=DEFAULT_LIMIT, ge=1, le=MAX_LIMIT)

    @field_validator("query", "name", "tags")
    @classmethod
    def _blank_is_absent(cls, value: str | None) -> str | None:
        if value is None or not value.strip():
            return None
        return value.strip()

    @property
    def intent(self) -> QueryIntent:
        if self.query is not None:
            return QueryIntent.FULL_TEXT_SEARCH
        if self.name is not None:
            return QueryIntent.AUTOCOMPLETE
        if self.tags is not None:
            return QueryIntent.TAG_FILTERED_SEARCH
        return QueryIntent.FULL_TEXT_SEARCH
