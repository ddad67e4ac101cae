"""
Service B: product catalog and batch processing API.

Dependencies: fastapi, uvicorn, microservices.api.routers
System role: service-b entry point and server launch
"""

import uvicorn
from fastapi import FastAPI

from microservices.api.app_factory import create_app as build_app
from microservices.api.routers import (
    health_router,
    info_router,
    processing_router,
    products_router,
)
from microservices.configs import Settings, get_settings

DESCRIPTION = "Product catalog and batch data processing service"


def create_app(settings: Settings | None = None) -> FastAPI:
    """
    Create the service-b application.

    Args:
        settings: Settings override (defaults to the cached service-b settings)
    """
    return build_app(
        settings or get_settings("service-b"),
        routers=[info_router, health_router, products_router, processing_router],
        title="Service B API",
        description=DESCRIPTION,
    )


def main() -> None:
    """Run service-b with uvicorn."""
    settings = get_settings("service-b")
    uvicorn.run(create_app(settings), host="0.0.0.0", port=settings.port)


if __name__ == "__main__":
    main()
