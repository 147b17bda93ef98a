"""Async HTTP transport to DataHub GMS.

One POST per call, with the configured actor identity header. The transport
reports the raw status and body; interpreting them is left to the caller.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

import httpx
from opentelemetry import metrics, trace

from catalog_gateway.datahub.queries import GraphQLRequest
from catalog_gateway.exceptions import UpstreamConnectionError, UpstreamTimeoutError
from catalog_gateway.settings import DataHubSettings

logger = logging.getLogger(__name__)

_tracer = trace.get_tracer("catalog_gateway.datahub")
_meter = metrics.get_meter("catalog_gateway.datahub")
_call_counter = _meter.create_counter(
    name="catalog_gateway.upstream.calls",
    description="Calls made to DataHub GMS by endpoint and outcome",
    unit="calls",
)


@dataclass(frozen=True)
class UpstreamResponse:
    status_code: int
    content: bytes

    @property
    def ok(self) -> bool:
        return self.status_code == httpx.codes.OK


class DataHubTransport:
    """POSTs GraphQL documents and ingestion snapshots to DataHub GMS.

    Example:
        >>> async with DataHubTransport(DataHubSettings()) as transport:
        ...     response = await transport.graphql(queries.lookup("tag", TAG_SELECTION, "urn:li:tag:pii"))

    Args:
        settings: GMS location, endpoint paths, actor identity and timeout
    """

    def __init__(self, settings: DataHubSettings):
        self.settings = settings
        self._client = httpx.AsyncClient(
            base_url=settings.gms_url.rstrip("/"),
            headers={
                settings.actor_header: settings.actor_urn,
                "Accept": "application/json",
            },
            timeout=settings.timeout,
        )
        logger.info("DataHub transport initialized: GMS=%s actor=%s", settings.gms_url, settings.actor_urn)

    async def __aenter__(self) -> DataHubTransport:
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        await self.close()

    async def close(self) -> None:
        await self._client.aclose()

    async def graphql(self, request: GraphQLRequest) -> UpstreamResponse:
        """Execute a GraphQL query or mutation."""
        return await self._post("graphql", self.settings.graphql_path, request.model_dump())

    async def ingest(self, snapshot: dict[str, Any]) -> UpstreamResponse:
        """Submit an entity snapshot to the ingestion endpoint."""
        return await self._post("ingest", self.settings.ingest_path, snapshot, params={"action": "ingest"})

    async def _post(
        self,
        endpoint: str,
        path: str,
        body: dict[str, Any],
        params: dict[str, str] | None = None,
    ) -> UpstreamResponse:
        with _tracer.start_as_current_span(f"datahub.{endpoint}") as span:
            span.set_attribute("datahub.path", path)
            try:
                response = await self._client.post(path, json=body, params=params)
            except httpx.TimeoutException as e:
                _call_counter.add(1, attributes={"endpoint": endpoint, "outcome": "timeout"})
                raise UpstreamTimeoutError(f"DataHub {endpoint} call timed out: {e}") from e
            except httpx.HTTPError as e:
                _call_counter.add(1, attributes={"endpoint": endpoint, "outcome": "connection_error"})
                raise UpstreamConnectionError(f"Failed to reach DataHub {endpoint} endpoint: {e}") from e
            span.set_attribute("http.status_code", response.status_code)

        _call_counter.add(1, attributes={"endpoint": endpoint, "outcome": str(response.status_code)})
        logger.debug("DataHub %s %s -> %d", endpoint, path, response.status_code)
        if response.status_code != httpx.codes.OK:
            logger.warning("DataHub %s call returned %d", endpoint, response.status_code)
        return UpstreamResponse(status_code=response.status_code, content=response.content)
