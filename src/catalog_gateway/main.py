"""Catalog Gateway FastAPI application."""

from __future__ import annotations

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.responses import PlainTextResponse

from catalog_gateway import __version__
from catalog_gateway.api.errors import install_exception_handlers
from catalog_gateway.api.routes_datasets import router as datasets_router
from catalog_gateway.api.routes_platforms import router as platforms_router
from catalog_gateway.api.routes_tags import router as tags_router
from catalog_gateway.datahub.transport import DataHubTransport
from catalog_gateway.domain.catalog_service import CatalogService
from catalog_gateway.settings import DataHubSettings, ServerSettings
from catalog_gateway.telemetry import init_telemetry, instrument_fastapi, shutdown_telemetry

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None]:  # pragma: no cover
    """Manage application lifecycle: OTel + DataHub transport startup/shutdown."""
    init_telemetry("catalog-gateway")

    datahub_settings = DataHubSettings()
    transport = DataHubTransport(datahub_settings)
    app.state.catalog_service = CatalogService(transport, actor_urn=datahub_settings.actor_urn)

    yield

    await transport.close()
    shutdown_telemetry()


app = FastAPI(
    title="Catalog Gateway",
    version=__version__,
    description="REST access to the DataHub metadata catalog: tags, datasets and platforms",
    lifespan=lifespan,
)

instrument_fastapi(app)
install_exception_handlers(app)

app.include_router(tags_router)
app.include_router(datasets_router)
app.include_router(platforms_router)


@app.get("/", response_class=PlainTextResponse)
async def root() -> str:
    return "Catalog gateway is alive!"


@app.get("/health")
async def health() -> dict[str, str]:
    return {"status": "ok"}


@app.get("/ready")
async def ready() -> dict[str, str]:
    return {"status": "ready"}


def run() -> None:  # pragma: no cover
    settings = ServerSettings()
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    logger.info("Starting catalog gateway on %s:%d", settings.host, settings.port)
    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level.lower())


if __name__ == "__main__":
    run()
