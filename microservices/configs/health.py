"""
Health check configuration settings.

Thresholds used by the memory and storage health indicators.

Dependencies: pydantic, pydantic_settings
System role: Health indicator tuning
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class HealthSettings(BaseSettings):
    """Health indicator thresholds."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="HEALTH_",
        case_sensitive=False,
        extra="ignore",
    )

    memory_rss_mb: int = Field(default=300, gt=0, description="RSS limit for /health")
    ready_memory_rss_mb: int = Field(default=500, gt=0, description="RSS limit for /health/ready")
    live_memory_rss_mb: int = Field(default=200, gt=0, description="RSS limit for /health/live")
    storage_path: str = Field(default="/", description="Filesystem checked by the storage indicator")
    storage_threshold_percent: float = Field(
        default=0.9,
        gt=0,
        le=1,
        description="Maximum used fraction of the checked filesystem",
    )


class ServiceBHealthSettings(HealthSettings):
    """Tighter RSS limit for the catalog and processing service."""

    memory_rss_mb: int = Field(default=150, gt=0, description="RSS limit for /health")
