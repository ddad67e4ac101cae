"""API-specific dependencies."""

# Re-export common dependencies
from .dependencies import (
    get_health_service,
    get_job_tracker,
    get_processing_service,
    get_product_service,
    get_service_cache,
    get_settings_dependency,
    get_user_service,
)

__all__ = [
    "get_health_service",
    "get_job_tracker",
    "get_processing_service",
    "get_product_service",
    "get_service_cache",
    "get_settings_dependency",
    "get_user_service",
]
