"""Application settings via Pydantic Settings."""

from pydantic_settings import BaseSettings, SettingsConfigDict


class DataHubSettings(BaseSettings):
    """DataHub GMS connection settings."""

    model_config = SettingsConfigDict(env_prefix="DATAHUB_")

    gms_url: str = "http://localhost:8080"
    graphql_path: str = "/api/graphql"
    ingest_path: str = "/entities"
    actor_urn: str = "urn:li:corpuser:datahub"
    actor_header: str = "X-DataHub-Actor"
    timeout: float = 30.0


class OTelSettings(BaseSettings):
    """OpenTelemetry settings."""

    model_config = SettingsConfigDict(env_prefix="OTEL_")

    exporter_otlp_endpoint: str = "http://localhost:4317"
    exporter_insecure: bool = True
    metric_export_interval_ms: int = 15_000
    service_name: str = "catalog-gateway"
    enabled: bool = True


class ServerSettings(BaseSettings):
    """HTTP listener settings."""

    model_config = SettingsConfigDict(env_prefix="SERVER_")

    host: str = "127.0.0.1"
    port: int = 3000
    log_level: str = "INFO"
