"""
Dependency injection container.

Factory functions for FastAPI dependencies. Stateful services live in a
ServiceCache attached to the application, so each app instance owns its
own in-memory stores.

Dependencies: microservices.configs, microservices.application, microservices.core
System role: DI container for service injection
"""

import time

from fastapi import Depends, Request

from microservices.application.services import (
    HealthService,
    ProcessingService,
    ProductService,
    UserService,
)
from microservices.configs import Settings
from microservices.core.job_tracker import JobTracker


class ServiceCache:
    """Container for cached service instances."""

    def __init__(self, settings: Settings):
        self.settings = settings
        self.started_at = time.monotonic()
        self._user_service = None
        self._product_service = None
        self._job_tracker = None

    @property
    def user_service(self) -> UserService:
        """Get cached user service."""
        if self._user_service is None:
            self._user_service = UserService()
        return self._user_service

    @property
    def product_service(self) -> ProductService:
        """Get cached product service."""
        if self._product_service is None:
            self._product_service = ProductService()
        return self._product_service

    @property
    def job_tracker(self) -> JobTracker:
        """Get cached job tracker."""
        if self._job_tracker is None:
            self._job_tracker = JobTracker.from_settings(self.settings)
        return self._job_tracker

    async def shutdown(self) -> None:
        """Stop background work owned by cached services."""
        if self._job_tracker is not None:
            await self._job_tracker.shutdown()

    def clear(self) -> None:
        """Clear all cached instances."""
        self._user_service = None
        self._product_service = None
        self._job_tracker = None


def get_service_cache(request: Request) -> ServiceCache:
    """Get the service cache of the running application."""
    return request.app.state.services


def get_settings_dependency(request: Request) -> Settings:
    """Get settings the application was created with."""
    return request.app.state.settings


def get_user_service(cache: ServiceCache = Depends(get_service_cache)) -> UserService:
    """
    Get user service instance.

    Args:
        cache: Application service cache (injected via Depends)

    Returns:
        UserService: Shared in-memory user service
    """
    return cache.user_service


def get_product_service(cache: ServiceCache = Depends(get_service_cache)) -> ProductService:
    """
    Get product service instance.

    Args:
        cache: Application service cache (injected via Depends)

    Returns:
        ProductService: Shared in-memory product service
    """
    return cache.product_service


def get_job_tracker(cache: ServiceCache = Depends(get_service_cache)) -> JobTracker:
    """Get the process-wide job tracker."""
    return cache.job_tracker


def get_processing_service(
    tracker: JobTracker = Depends(get_job_tracker),
) -> ProcessingService:
    """
    Get processing service instance.

    Args:
        tracker: Job tracker (injected via Depends)

    Returns:
        ProcessingService: Processing service bound to the tracker
    """
    return ProcessingService(tracker=tracker)


def get_health_service(cache: ServiceCache = Depends(get_service_cache)) -> HealthService:
    """
    Get health service instance.

    Args:
        cache: Application service cache (injected via Depends)

    Returns:
        HealthService: Health checks using the app settings and start time
    """
    return HealthService(settings=cache.settings, started_at=cache.started_at)
