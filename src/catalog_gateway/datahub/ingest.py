"""Snapshot envelopes for the GMS ingestion endpoint (``/entities?action=ingest``)."""

from __future__ import annotations

from typing import Any

TAG_SNAPSHOT = "com.linkedin.metadata.snapshot.TagSnapshot"
TAG_PROPERTIES_ASPECT = "com.linkedin.tag.TagProperties"
STATUS_ASPECT = "com.linkedin.common.Status"

TAG_URN_PREFIX = "urn:li:tag:"


def tag_urn(name: str) -> str:
    return f"{TAG_URN_PREFIX}{name}"


def _tag_snapshot(urn: str, aspects: list[dict[str, Any]]) -> dict[str, Any]:
    return {"entity": {"value": {TAG_SNAPSHOT: {"urn": urn, "aspects": aspects}}}}


def create_tag_snapshot(name: str, description: str = "") -> dict[str, Any]:
    """Ingestion body creating (or overwriting) a tag named ``name``."""
    return _tag_snapshot(
        tag_urn(name),
        [{TAG_PROPERTIES_ASPECT: {"name": name, "description": description}}],
    )


def remove_tag_snapshot(urn: str) -> dict[str, Any]:
    """Ingestion body soft-deleting the tag ``urn``."""
    return _tag_snapshot(urn, [{STATUS_ASPECT: {"removed": True}}])
