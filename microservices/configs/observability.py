"""
Observability configuration settings.

Settings for OpenTelemetry tracing export.

Dependencies: pydantic_settings
System role: Observability configuration for tracing
"""

from pydantic import Field
from pydantic_settings import BaseSettings


class ObservabilitySettings(BaseSettings):
    """OpenTelemetry exporter configuration."""

    exporter_otlp_endpoint: str | None = Field(
        default=None,
        description="OTLP/HTTP collector endpoint; traces are exported there when set",
    )
    enable_tracing: bool = Field(
        default=True,
        description="Enable OpenTelemetry tracing",
    )
    console_exporter: bool = Field(
        default=True,
        description="Print spans to stdout in development when no collector is configured",
    )

    class Config:
        """Pydantic config for environment variable loading."""

        env_prefix = "OTEL_"
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = False
        extra = "ignore"
