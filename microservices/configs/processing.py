"""
Batch processing configuration settings.

Chunking and time budget for the in-memory job tracker.

Dependencies: pydantic, pydantic_settings
System role: JobTracker tuning
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class ProcessingSettings(BaseSettings):
    """Job tracker configuration."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    batch_size: int = Field(default=100, ge=1, description="Items per chunk")
    max_processing_time: int = Field(
        default=30000,
        gt=0,
        description="Wall-clock budget per job in milliseconds",
    )
    chunk_processing_delay: int = Field(
        default=100,
        ge=0,
        description="Simulated work per chunk in milliseconds",
    )
