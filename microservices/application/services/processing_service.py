"""
Processing service orchestrator.

Thin use-case layer over the JobTracker: submission, job polling and
statistics for the batch processing API.

Dependencies: microservices.core.job_tracker, microservices.models.job
System role: Batch processing orchestration (service-b)
"""

import logging

from microservices.core.job_tracker import JobTracker
from microservices.models.job import (
    JobAcceptedResponse,
    ProcessDataRequest,
    ProcessingJob,
    ProcessingStats,
)

logger = logging.getLogger(__name__)


class ProcessingService:
    """
    Processing service orchestrator.

    Provides abstraction over JobTracker for the HTTP layer.
    """

    def __init__(self, tracker: JobTracker) -> None:
        """
        Initialize processing service.

        Args:
            tracker: Process-wide job tracker
        """
        self.tracker = tracker

    async def submit_batch(self, request: ProcessDataRequest) -> JobAcceptedResponse:
        """
        Submit a batch for background processing.

        Args:
            request: Validated processing request

        Returns:
            JobAcceptedResponse: Job ID and "accepted" status
        """
        accepted = await self.tracker.submit(request)
        logger.info(
            "Batch accepted",
            extra={"job_id": accepted.job_id, "total_items": len(request.data)},
        )
        return accepted

    async def list_jobs(self) -> list[ProcessingJob]:
        """List jobs, newest first."""
        return self.tracker.get_jobs()

    async def get_job_status(self, job_id: str) -> ProcessingJob:
        """
        Get job status details for polling.

        Args:
            job_id: Job ID

        Returns:
            ProcessingJob: Job snapshot

        Raises:
            JobNotFoundError: If job doesn't exist
        """
        return self.tracker.get_job(job_id)

    async def get_stats(self) -> ProcessingStats:
        """Get processing statistics."""
        return self.tracker.get_stats()
