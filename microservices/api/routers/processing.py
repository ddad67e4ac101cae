"""
Batch processing API endpoints.

Routes:
- POST /processing/batch - Submit a batch for background processing
- GET /processing/jobs - List jobs, newest first
- GET /processing/jobs/{id} - Get job status for polling
- GET /processing/stats - Processing statistics

Dependencies: microservices.application.services.processing_service, microservices.models
System role: Batch processing HTTP API
"""

from fastapi import APIRouter, Depends

from microservices.api.deps import get_processing_service
from microservices.application.services.processing_service import ProcessingService
from microservices.models.common import ErrorResponse
from microservices.models.job import (
    JobAcceptedResponse,
    ProcessDataRequest,
    ProcessingJob,
    ProcessingStats,
)

from .router_utils import handle_service_errors

router = APIRouter(prefix="/processing", tags=["processing"])


@router.post("/batch", response_model=JobAcceptedResponse, status_code=201)
@handle_service_errors
async def submit_batch(
    request: ProcessDataRequest,
    processing_service: ProcessingService = Depends(get_processing_service),
) -> JobAcceptedResponse:
    """
    Submit a batch for asynchronous processing.

    Returns immediately; poll GET /processing/jobs/{job_id} for progress.

    Example Response:
        {"job_id": "job_1735732800000_k3j9x0a1b", "status": "accepted"}
    """
    return await processing_service.submit_batch(request)


@router.get("/jobs", response_model=list[ProcessingJob])
@handle_service_errors
async def list_jobs(
    processing_service: ProcessingService = Depends(get_processing_service),
) -> list[ProcessingJob]:
    """List all jobs ordered by creation time, newest first."""
    return await processing_service.list_jobs()


@router.get(
    "/jobs/{job_id}",
    response_model=ProcessingJob,
    responses={404: {"model": ErrorResponse, "description": "Job not found"}},
)
@handle_service_errors
async def get_job_status(
    job_id: str,
    processing_service: ProcessingService = Depends(get_processing_service),
) -> ProcessingJob:
    """
    Get job status and progress for polling.

    Returns status, items_processed/total_items and, once terminal,
    either result or error.

    Raises:
        404: Job not found
    """
    return await processing_service.get_job_status(job_id)


@router.get("/stats", response_model=ProcessingStats)
@handle_service_errors
async def get_processing_stats(
    processing_service: ProcessingService = Depends(get_processing_service),
) -> ProcessingStats:
    """Get aggregate processing statistics."""
    return await processing_service.get_stats()
