"""
FastAPI application factory.

Builds a service application from its settings and routers: lifespan
(logging, telemetry, background work shutdown), middleware stack and
versioned router registration.

Dependencies: fastapi, microservices.observability, microservices.api.deps
System role: Shared application assembly for both services
"""

from contextlib import asynccontextmanager

from fastapi import APIRouter, FastAPI
from fastapi.middleware.cors import CORSMiddleware

from microservices.api.deps.dependencies import ServiceCache
from microservices.configs import Settings
from microservices.core.exceptions import ObservabilityError
from microservices.observability import configure_logging, get_logger
from microservices.observability.middleware import (
    CorrelationMiddleware,
    RequestLoggingMiddleware,
    SecurityHeadersMiddleware,
    TracingMiddleware,
)
from microservices.observability.telemetry import setup_telemetry, shutdown_telemetry

API_PREFIX = "/api/v1"


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan context manager.

    Handles startup and shutdown events.
    """
    settings: Settings = app.state.settings

    # Startup
    configure_logging(
        level=settings.log_level,
        service_name=settings.service_name,
        environment=settings.environment,
        json_format=settings.is_production,
        log_file=settings.log_file,
    )
    logger = get_logger(__name__)
    try:
        setup_telemetry(settings)
    except ObservabilityError as e:
        logger.error("Tracing disabled: %s", e, extra={"details": e.details})
    logger.info(
        f"{settings.service_name} started",
        extra={"port": settings.port, "environment": settings.environment},
    )

    yield

    # Shutdown
    cache: ServiceCache = app.state.services
    await cache.shutdown()
    cache.clear()
    shutdown_telemetry()
    logger.info(f"{settings.service_name} stopped")


def create_app(
    settings: Settings,
    routers: list[APIRouter],
    title: str,
    description: str,
) -> FastAPI:
    """
    Create and configure a FastAPI application.

    Args:
        settings: Service settings, stored on app.state
        routers: Routers registered under the /api/v1 prefix
        title: OpenAPI title
        description: Service description, also returned by the info endpoint

    Returns:
        FastAPI: Configured application instance
    """
    docs_enabled = not settings.is_production
    app = FastAPI(
        title=title,
        description=description,
        version=settings.service_version,
        debug=settings.debug,
        lifespan=lifespan,
        docs_url="/api/docs" if docs_enabled else None,
        redoc_url=None,
        openapi_url="/api/openapi.json" if docs_enabled else None,
    )
    app.state.settings = settings
    app.state.services = ServiceCache(settings)

    # Innermost first: add_middleware wraps the existing stack
    app.add_middleware(TracingMiddleware)
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(SecurityHeadersMiddleware)
    app.add_middleware(CorrelationMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origin_list,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    for router in routers:
        app.include_router(router, prefix=API_PREFIX)

    return app
