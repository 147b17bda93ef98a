"""Tests for environment-driven settings."""

from __future__ import annotations

import pytest

from catalog_gateway.settings import DataHubSettings, OTelSettings, ServerSettings


class TestDataHubSettings:
    def test_defaults(self) -> None:
        s = DataHubSettings()
        assert s.gms_url == "http://localhost:8080"
        assert s.graphql_path == "/api/graphql"
        assert s.ingest_path == "/entities"
        assert s.actor_urn == "urn:li:corpuser:datahub"
        assert s.actor_header == "X-DataHub-Actor"
        assert s.timeout == 30.0

    def test_env_override(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("DATAHUB_GMS_URL", "http://datahub-gms:8080")
        monkeypatch.setenv("DATAHUB_ACTOR_URN", "urn:li:corpuser:catalog-bot")
        monkeypatch.setenv("DATAHUB_TIMEOUT", "5")

        s = DataHubSettings()
        assert s.gms_url == "http://datahub-gms:8080"
        assert s.actor_urn == "urn:li:corpuser:catalog-bot"
        assert s.timeout == 5.0


class TestOTelSettings:
    def test_defaults(self) -> None:
        s = OTelSettings()
        assert s.exporter_otlp_endpoint == "http://localhost:4317"
        assert s.exporter_insecure is True
        assert s.metric_export_interval_ms == 15_000
        assert s.service_name == "catalog-gateway"
        assert s.enabled is True

    def test_disabled_via_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("OTEL_ENABLED", "false")
        assert OTelSettings().enabled is False


class TestServerSettings:
    def test_defaults(self) -> None:
        s = ServerSettings()
        assert (s.host, s.port, s.log_level) == ("127.0.0.1", 3000, "INFO")

    def test_env_override(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("SERVER_PORT", "8088")
        monkeypatch.setenv("SERVER_HOST", "0.0.0.0")
        s = ServerSettings()
        assert s.port == 8088
        assert s.host == "0.0.0.0"
