"""
Base configuration settings.

Provides common configuration inherited by both services.
Handles environment detection, validation of shared values and defaults.

Dependencies: pydantic_settings
System role: Foundation for all configuration classes
"""

from pydantic import AliasChoices, Field, field_validator
from pydantic_settings import BaseSettings as PydanticBaseSettings, SettingsConfigDict

ENVIRONMENTS = ("development", "production", "test", "staging")
LOG_LEVELS = ("error", "warn", "warning", "info", "debug")


class BaseSettings(PydanticBaseSettings):
    """Base configuration class with common settings."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        populate_by_name=True,
    )

    environment: str = Field(
        default="development",
        validation_alias=AliasChoices("environment", "node_env"),
        description="Application environment (development, production, test, staging)",
    )
    debug: bool = Field(
        default=False,
        description="Enable debug mode",
    )
    log_level: str = Field(
        default="info",
        description="Logging level (error, warn, info, debug)",
    )
    log_file: str | None = Field(
        default=None,
        description="Optional path of a JSON-lines log file",
    )
    port: int = Field(
        default=3000,
        ge=1,
        le=65535,
        description="HTTP port the service listens on",
    )
    cors_origins: str = Field(
        default="*",
        description="Comma-separated list of allowed CORS origins",
    )

    @field_validator("environment")
    @classmethod
    def validate_environment(cls, value: str) -> str:
        value = value.strip().lower()
        if value not in ENVIRONMENTS:
            raise ValueError(f"environment must be one of {', '.join(ENVIRONMENTS)}")
        return value

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        value = value.strip().lower()
        if value not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(LOG_LEVELS)}")
        return value

    @property
    def is_production(self) -> bool:
        return self.environment == "production"

    @property
    def cors_origin_list(self) -> list[str]:
        """Split the configured CORS origins into a list."""
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]
