"""Central environment-driven settings for the local payment server.

The process loads this once at startup. Every value has a default matching the
development setup (port 8080, Vite/CRA dev origins), so no `.env` is required.
"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class CommonSettings(BaseSettings):
    """Typed view of runtime configuration from environment variables."""

    service_name: str = "localpay"
    log_level: str = "INFO"
    host: str = "0.0.0.0"
    port: int = 8080
    processing_delay_ms: int = 1500
    cors_allowed_origins: list[str] = ["http://localhost:5173", "http://localhost:3000"]
    tracing_enabled: bool = False
    otel_exporter_otlp_endpoint: str = "http://otel-collector:4318/v1/traces"
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")


settings = CommonSettings()
