"""
Job state management logic.

Accepts batch processing requests, runs each one as an independent asyncio
task in sequential chunks, and keeps per-job progress plus process-wide
statistics in memory.

Dependencies: asyncio, microservices.core.chunk_processors, microservices.models.job
System role: Batch job tracking business logic
"""

import asyncio
import logging
import time
import uuid
from collections.abc import Callable
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any

from opentelemetry.trace import Status, StatusCode

from microservices.configs import Settings
from microservices.core.chunk_processors import chunk_items, process_chunk
from microservices.core.exceptions import JobNotFoundError, ProcessingTimeoutError
from microservices.models.job import (
    JobAcceptedResponse,
    JobStatus,
    ProcessDataRequest,
    ProcessingJob,
    ProcessingStats,
)
from microservices.observability.log_utils import (
    log_exception_with_context,
    log_processing_event,
)
from microservices.observability.telemetry import get_tracer

logger = logging.getLogger(__name__)

DEFAULT_PRIORITY = 3


@dataclass
class _Counters:
    total_jobs: int = 0
    completed_jobs: int = 0
    failed_jobs: int = 0
    average_processing_time: float = 0.0


class JobTracker:
    """
    In-memory batch job tracker.

    Every submission spawns its own task; there is no queue, no worker
    limit and no per-job cancellation. Chunks of one job run strictly in order.
    The tracker is the only writer of its job map and counters; readers
    receive copies.
    """

    def __init__(
        self,
        batch_size: int = 100,
        max_processing_time_ms: int = 30000,
        chunk_delay_ms: int = 100,
        service_name: str = "service-b",
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        """
        Initialize job tracker.

        Args:
            batch_size: Items per chunk
            max_processing_time_ms: Wall-clock budget per job
            chunk_delay_ms: Simulated work awaited before each chunk
            service_name: Name stamped on transformed items
            clock: Monotonic clock in seconds
        """
        if batch_size < 1:
            raise ValueError("batch_size must be at least 1")
        self.batch_size = batch_size
        self.max_processing_time_ms = max_processing_time_ms
        self.chunk_delay_ms = chunk_delay_ms
        self.service_name = service_name
        self._clock = clock
        self._jobs: dict[str, ProcessingJob] = {}
        self._counters = _Counters()
        self._tasks: set[asyncio.Task] = set()

    @classmethod
    def from_settings(cls, settings: Settings) -> "JobTracker":
        """Build a tracker from service settings."""
        return cls(
            batch_size=settings.processing.batch_size,
            max_processing_time_ms=settings.processing.max_processing_time,
            chunk_delay_ms=settings.processing.chunk_processing_delay,
            service_name=settings.service_name,
        )

    async def submit(self, request: ProcessDataRequest) -> JobAcceptedResponse:
        """
        Register a job and start processing it in the background.

        Returns as soon as the job is recorded; callers poll get_job.

        Args:
            request: Validated processing request

        Returns:
            JobAcceptedResponse: New job ID with status "accepted"
        """
        job_id = self._generate_job_id()
        job = ProcessingJob(
            id=job_id,
            type=request.type,
            total_items=len(request.data),
            priority=request.priority or DEFAULT_PRIORITY,
            created_at=datetime.now(timezone.utc),
        )
        self._jobs[job_id] = job
        self._counters.total_jobs += 1

        log_processing_event(
            logger,
            "batch_started",
            job_id=job_id,
            processing_type=request.type.value,
            total_items=job.total_items,
            batch_size=self.batch_size,
            priority=job.priority,
        )

        task = asyncio.create_task(
            self._execute(job_id, list(request.data), request.options or {}),
            name=f"processing-{job_id}",
        )
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)

        return JobAcceptedResponse(job_id=job_id)

    def get_jobs(self) -> list[ProcessingJob]:
        """
        List all jobs, newest first.

        Returns:
            list[ProcessingJob]: Snapshots ordered by created_at descending
        """
        # reversed() keeps newest-first order among equal timestamps
        jobs = sorted(
            reversed(list(self._jobs.values())),
            key=lambda job: job.created_at,
            reverse=True,
        )
        return [job.model_copy(deep=True) for job in jobs]

    def get_job(self, job_id: str) -> ProcessingJob:
        """
        Get a snapshot of one job.

        Args:
            job_id: Job ID

        Returns:
            ProcessingJob: Job snapshot

        Raises:
            JobNotFoundError: If the job doesn't exist
        """
        job = self._jobs.get(job_id)
        if job is None:
            raise JobNotFoundError(job_id)
        return job.model_copy(deep=True)

    def get_stats(self) -> ProcessingStats:
        """Compute aggregate statistics over all jobs."""
        return ProcessingStats(
            total_jobs=self._counters.total_jobs,
            completed_jobs=self._counters.completed_jobs,
            failed_jobs=self._counters.failed_jobs,
            average_processing_time=self._counters.average_processing_time,
            active_jobs=sum(1 for job in self._jobs.values() if job.status == JobStatus.PROCESSING),
            total_jobs_in_memory=len(self._jobs),
        )

    @property
    def pending_tasks(self) -> int:
        return len(self._tasks)

    async def shutdown(self) -> None:
        """Cancel in-flight work at process shutdown."""
        tasks = list(self._tasks)
        for task in tasks:
            task.cancel()
        if tasks:
            await asyncio.gather(*tasks, return_exceptions=True)
            logger.info("Cancelled in-flight processing jobs", extra={"count": len(tasks)})

        # Tasks cancelled before their first step never reach _execute
        for job in self._jobs.values():
            self._fail(job, "Processing cancelled by shutdown")

    async def _execute(self, job_id: str, data: list[Any], options: dict[str, Any]) -> None:
        job = self._jobs[job_id]
        start = self._clock()

        tracer = get_tracer(__name__)
        with tracer.start_as_current_span(
            "processing.job",
            attributes={
                "processing.job_id": job_id,
                "processing.type": job.type.value,
                "processing.total_items": job.total_items,
            },
        ) as span:
            try:
                results = await self._run_chunks(job, data, options, start)
            except asyncio.CancelledError:
                self._fail(job, "Processing cancelled by shutdown")
                raise
            except Exception as e:
                self._fail(job, str(e))
                span.record_exception(e)
                span.set_status(Status(StatusCode.ERROR, str(e)))
                log_exception_with_context(
                    logger,
                    "Processing job failed",
                    e,
                    job_id=job_id,
                    items_processed=job.items_processed,
                )
                return

            processing_time = (self._clock() - start) * 1000
            self._complete(job, results, processing_time)
            span.set_attribute("processing.duration_ms", processing_time)

            log_processing_event(
                logger,
                "batch_completed",
                job_id=job_id,
                total_items=job.total_items,
                processing_time=round(processing_time, 2),
                throughput=job.total_items / (processing_time / 1000) if processing_time > 0 else None,
            )

    async def _run_chunks(
        self,
        job: ProcessingJob,
        data: list[Any],
        options: dict[str, Any],
        start: float,
    ) -> list[Any]:
        results: list[Any] = []

        for index, chunk in enumerate(chunk_items(data, self.batch_size)):
            elapsed_ms = (self._clock() - start) * 1000
            if elapsed_ms > self.max_processing_time_ms:
                raise ProcessingTimeoutError(job.id, elapsed_ms, self.max_processing_time_ms)

            await asyncio.sleep(self.chunk_delay_ms / 1000)
            results.extend(process_chunk(chunk, job.type, options, self.service_name))

            job.items_processed = min((index + 1) * self.batch_size, job.total_items)

            log_processing_event(
                logger,
                "chunk_processed",
                job_id=job.id,
                chunk_index=index,
                chunk_size=len(chunk),
                progress=job.items_processed / job.total_items * 100,
            )

        return results

    def _complete(self, job: ProcessingJob, results: list[Any], processing_time: float) -> None:
        job.status = JobStatus.COMPLETED
        job.completed_at = datetime.now(timezone.utc)
        job.result = results

        counters = self._counters
        counters.completed_jobs += 1
        counters.average_processing_time = (
            counters.average_processing_time * (counters.completed_jobs - 1) + processing_time
        ) / counters.completed_jobs

    def _fail(self, job: ProcessingJob, error: str) -> None:
        if job.is_terminal:
            return
        job.status = JobStatus.FAILED
        job.completed_at = datetime.now(timezone.utc)
        job.error = error
        self._counters.failed_jobs += 1

    @staticmethod
    def _generate_job_id() -> str:
        return f"job_{int(time.time() * 1000)}_{uuid.uuid4().hex[:9]}"
