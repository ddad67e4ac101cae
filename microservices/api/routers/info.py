"""
Service information endpoint.

Routes: GET /

Dependencies: microservices.configs
System role: Service discovery HTTP API
"""

from datetime import datetime, timezone

from fastapi import APIRouter, Depends, Request

from microservices.api.deps import get_settings_dependency
from microservices.configs import Settings
from microservices.models.common import ServiceInfoResponse

router = APIRouter(tags=["info"])


@router.get("/", response_model=ServiceInfoResponse)
async def get_service_info(
    request: Request,
    settings: Settings = Depends(get_settings_dependency),
) -> ServiceInfoResponse:
    """Return name, version, description and environment of this service."""
    return ServiceInfoResponse(
        name=settings.service_name,
        version=settings.service_version,
        description=request.app.description,
        environment=settings.environment,
        timestamp=datetime.now(timezone.utc),
    )
