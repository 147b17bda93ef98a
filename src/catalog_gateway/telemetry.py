"""Tracing and metrics export.

Spans and the upstream call counter are created through the global OTel API
(``trace.get_tracer`` / ``metrics.get_meter``); this module only decides
where they are shipped.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from opentelemetry import metrics, trace
from opentelemetry.exporter.otlp.proto.grpc.metric_exporter import OTLPMetricExporter
from opentelemetry.exporter.otlp.proto.grpc.trace_exporter import OTLPSpanExporter
from opentelemetry.instrumentation.fastapi import FastAPIInstrumentor
from opentelemetry.instrumentation.httpx import HTTPXClientInstrumentor
from opentelemetry.sdk.metrics import MeterProvider
from opentelemetry.sdk.metrics.export import PeriodicExportingMetricReader
from opentelemetry.sdk.resources import SERVICE_NAME, SERVICE_VERSION, Resource
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import BatchSpanProcessor

from catalog_gateway import __version__
from catalog_gateway.settings import OTelSettings

if TYPE_CHECKING:
    from fastapi import FastAPI

logger = logging.getLogger(__name__)

_tracer_provider: TracerProvider | None = None
_meter_provider: MeterProvider | None = None


def _build_tracer_provider(resource: Resource, settings: OTelSettings) -> TracerProvider:
    provider = TracerProvider(resource=resource)
    exporter = OTLPSpanExporter(endpoint=settings.exporter_otlp_endpoint, insecure=settings.exporter_insecure)
    provider.add_span_processor(BatchSpanProcessor(exporter))
    return provider


def _build_meter_provider(resource: Resource, settings: OTelSettings) -> MeterProvider:
    reader = PeriodicExportingMetricReader(
        OTLPMetricExporter(endpoint=settings.exporter_otlp_endpoint, insecure=settings.exporter_insecure),
        export_interval_millis=settings.metric_export_interval_ms,
    )
    return MeterProvider(resource=resource, metric_readers=[reader])


def init_telemetry(service_name: str | None = None, settings: OTelSettings | None = None) -> None:
    """Start shipping spans and metrics over OTLP gRPC.

    Idempotent, and a no-op when ``OTEL_ENABLED`` is false. Outbound httpx
    calls to DataHub are traced from here on.
    """
    global _tracer_provider, _meter_provider

    if _tracer_provider is not None:
        return

    settings = settings or OTelSettings()
    if not settings.enabled:
        logger.info("Telemetry export disabled (OTEL_ENABLED=false)")
        return

    name = service_name or settings.service_name
    resource = Resource.create({SERVICE_NAME: name, SERVICE_VERSION: __version__})
    _tracer_provider = _build_tracer_provider(resource, settings)
    _meter_provider = _build_meter_provider(resource, settings)
    trace.set_tracer_provider(_tracer_provider)
    metrics.set_meter_provider(_meter_provider)

    HTTPXClientInstrumentor().instrument()

    logger.info("Exporting telemetry for %s to %s", name, settings.exporter_otlp_endpoint)


def shutdown_telemetry() -> None:
    """Flush pending spans and metrics, then drop the providers."""
    global _tracer_provider, _meter_provider

    for provider in (_tracer_provider, _meter_provider):
        if provider is not None:
            provider.shutdown()
    _tracer_provider = None
    _meter_provider = None

    logger.info("Telemetry export stopped")


def instrument_fastapi(app: FastAPI) -> None:
    """Trace every inbound REST request."""
    FastAPIInstrumentor.instrument_app(app)
