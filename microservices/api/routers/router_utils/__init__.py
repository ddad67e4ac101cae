"""
Router utility functions.

Contains helpers shared by the router endpoints to keep them clean.
"""

from microservices.api.routers.router_utils.error_handling import (
    error_response,
    handle_service_errors,
)

__all__ = [
    "error_response",
    "handle_service_errors",
]
