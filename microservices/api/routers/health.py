"""
Health check API endpoints.

Routes: GET /health, GET /health/ready, GET /health/live

Dependencies: microservices.application.services.health_service
System role: Health check HTTP API
"""

from fastapi import APIRouter, Depends, Response, status

from microservices.api.deps import get_health_service
from microservices.application.services.health_service import HealthService
from microservices.models.health import HealthReport

router = APIRouter(prefix="/health", tags=["health"])


def _respond(report: HealthReport, response: Response) -> HealthReport:
    if report.status != "ok":
        response.status_code = status.HTTP_503_SERVICE_UNAVAILABLE
    return report


@router.get("", response_model=HealthReport)
async def health_check(
    response: Response,
    health_service: HealthService = Depends(get_health_service),
) -> HealthReport:
    """Full health check; 503 when any indicator is down."""
    return _respond(health_service.health(), response)


@router.get("/ready", response_model=HealthReport)
async def readiness_check(
    response: Response,
    health_service: HealthService = Depends(get_health_service),
) -> HealthReport:
    """Readiness probe."""
    return _respond(health_service.readiness(), response)


@router.get("/live", response_model=HealthReport)
async def liveness_check(
    response: Response,
    health_service: HealthService = Depends(get_health_service),
) -> HealthReport:
    """Liveness probe."""
    return _respond(health_service.liveness(), response)
