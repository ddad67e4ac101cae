"""API routers."""

from .health import router as health_router
from .info import router as info_router
from .processing import router as processing_router
from .products import router as products_router
from .users import router as users_router

__all__ = [
    "health_router",
    "info_router",
    "processing_router",
    "products_router",
    "users_router",
]
