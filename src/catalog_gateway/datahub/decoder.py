"""Decode raw DataHub responses into the typed result shapes."""

from __future__ import annotations

import logging
from typing import TypeVar

from pydantic import BaseModel, ValidationError

from catalog_gateway.datahub.models import (
    AutocompleteResult,
    LookupResponse,
    MutationResult,
    QueryResponse,
    RecommendationModules,
    RecommendationsResponse,
    SearchResult,
    SingleEntity,
)
from catalog_gateway.exceptions import DecodeError

logger = logging.getLogger(__name__)

M = TypeVar("M", bound=BaseModel)

Payload = bytes | str | dict


def _decode(model: type[M], payload: Payload) -> M:
    try:
        if isinstance(payload, dict):
            return model.model_validate(payload)
        return model.model_validate_json(payload)
    except ValidationError as e:
        problems = "; ".join(
            f"{'.'.join(str(part) for part in err['loc']) or '<root>'}: {err['msg']}" for err in e.errors()
        )
        logger.error("Upstream %s payload rejected: %s", model.__name__, problems)
        raise DecodeError(f"Malformed upstream {model.__name__}: {problems}") from e


def decode_results(payload: Payload) -> AutocompleteResult | SearchResult:
    """Decode an ``autoComplete`` or ``search`` response.

    The variant follows the ``__typename`` of ``data.results``, whichever
    operation was sent.
    """
    return _decode(QueryResponse, payload).data.results


def decode_entity(payload: Payload) -> SingleEntity:
    """Decode a lookup-by-URN response; a null entity decodes fine."""
    return _decode(LookupResponse, payload).data


def decode_recommendations(payload: Payload) -> RecommendationModules:
    return _decode(RecommendationsResponse, payload).data.results


def decode_mutation(payload: Payload) -> MutationResult:
    return _decode(MutationResult, payload)
