"""
Service A: user management API.

Dependencies: fastapi, uvicorn, microservices.api.routers
System role: service-a entry point and server launch
"""

import uvicorn
from fastapi import FastAPI

from microservices.api.app_factory import create_app as build_app
from microservices.api.routers import health_router, info_router, users_router
from microservices.configs import Settings, get_settings

DESCRIPTION = "User management service"


def create_app(settings: Settings | None = None) -> FastAPI:
    """
    Create the service-a application.

    Args:
        settings: Settings override (defaults to the cached service-a settings)
    """
    return build_app(
        settings or get_settings("service-a"),
        routers=[info_router, health_router, users_router],
        title="Service A API",
        description=DESCRIPTION,
    )


def main() -> None:
    """Run service-a with uvicorn."""
    settings = get_settings("service-a")
    uvicorn.run(create_app(settings), host="0.0.0.0", port=settings.port)


if __name__ == "__main__":
    main()
