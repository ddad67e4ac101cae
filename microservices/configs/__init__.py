"""
Configuration management module.

Provides centralized, type-safe configuration using Pydantic Settings.
All config modules support environment variable mapping with validation.
"""

from microservices.configs.settings import (
    ServiceASettings,
    ServiceBSettings,
    Settings,
    get_settings,
)

__all__ = ["ServiceASettings", "ServiceBSettings", "Settings", "get_settings"]
