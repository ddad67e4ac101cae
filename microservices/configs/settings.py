"""
Unified application settings.

Aggregates all configuration modules into a per-service Settings class.
Provides the cached factory used at application startup.

Dependencies: All config modules
System role: Central configuration aggregator for the application
"""

from functools import lru_cache

from pydantic import AliasChoices, Field

from microservices.configs.base import BaseSettings
from microservices.configs.health import HealthSettings, ServiceBHealthSettings
from microservices.configs.observability import ObservabilitySettings
from microservices.configs.processing import ProcessingSettings

SERVICE_VERSION = "1.0.0"


class Settings(BaseSettings):
    """Unified application settings aggregating all config modules."""

    service_name: str = Field(
        default="service-a",
        validation_alias=AliasChoices("otel_service_name", "service_name"),
        description="Logical service name used in logs, traces and transformed items",
    )
    service_version: str = Field(default=SERVICE_VERSION)

    # Aggregated settings
    observability: ObservabilitySettings = Field(default_factory=ObservabilitySettings)
    processing: ProcessingSettings = Field(default_factory=ProcessingSettings)
    health: HealthSettings = Field(default_factory=HealthSettings)


class ServiceASettings(Settings):
    """User management service settings."""

    service_name: str = Field(
        default="service-a",
        validation_alias=AliasChoices("otel_service_name", "service_name"),
    )
    port: int = Field(default=3000, ge=1, le=65535)


class ServiceBSettings(Settings):
    """Product catalog and batch processing service settings."""

    service_name: str = Field(
        default="service-b",
        validation_alias=AliasChoices("otel_service_name", "service_name"),
    )
    port: int = Field(default=3001, ge=1, le=65535)
    health: HealthSettings = Field(default_factory=ServiceBHealthSettings)


_SETTINGS_CLASSES: dict[str, type[Settings]] = {
    "service-a": ServiceASettings,
    "service-b": ServiceBSettings,
}


@lru_cache
def get_settings(service: str = "service-a") -> Settings:
    """
    Get application settings singleton for a service.

    Environment variables loaded once per service at startup.

    Args:
        service: Service key ("service-a" or "service-b")

    Returns:
        Settings: Application settings instance

    Raises:
        ValueError: If the service key is unknown

    Usage:
        from microservices.configs import get_settings
        settings = get_settings("service-b")
    """
    try:
        settings_cls = _SETTINGS_CLASSES[service]
    except KeyError:
        raise ValueError(f"Unknown service: {service}") from None
    return settings_cls()
