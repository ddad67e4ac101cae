"""Service orchestrators."""

from .health_service import HealthService
from .processing_service import ProcessingService
from .product_service import ProductService
from .user_service import UserService

__all__ = [
    "HealthService",
    "ProcessingService",
    "ProductService",
    "UserService",
]
