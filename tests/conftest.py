"""Shared fixtures: a DataHub transport aimed at a mocked GMS and the test app."""

from __future__ import annotations

from collections.abc import AsyncGenerator, Generator

import pytest
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient

from catalog_gateway.api.deps import get_catalog_service
from catalog_gateway.datahub.transport import DataHubTransport
from catalog_gateway.domain.catalog_service import CatalogService
from catalog_gateway.settings import DataHubSettings

from payloads import ACTOR_URN, GMS_URL


@pytest.fixture
def datahub_settings() -> DataHubSettings:
    return DataHubSettings(gms_url=GMS_URL, actor_urn=ACTOR_URN)


@pytest.fixture
async def transport(datahub_settings: DataHubSettings) -> AsyncGenerator[DataHubTransport]:
    async with DataHubTransport(datahub_settings) as t:
        yield t


@pytest.fixture
def catalog_service(transport: DataHubTransport, datahub_settings: DataHubSettings) -> CatalogService:
    return CatalogService(transport, actor_urn=datahub_settings.actor_urn)


@pytest.fixture
def app(catalog_service: CatalogService) -> Generator[FastAPI]:
    """The gateway app with its catalog service wired to the mocked GMS."""
    from catalog_gateway.main import app as main_app

    main_app.dependency_overrides[get_catalog_service] = lambda: catalog_service
    yield main_app
    main_app.dependency_overrides.clear()


@pytest.fixture
async def client(app: FastAPI) -> AsyncGenerator[AsyncClient]:
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac
