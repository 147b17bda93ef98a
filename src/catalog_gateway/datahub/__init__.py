"""DataHub GMS integration: GraphQL builders, transport and response decoding."""

from catalog_gateway.datahub.transport import DataHubTransport, UpstreamResponse

__all__ = ["DataHubTransport", "UpstreamResponse"]
