"""
Test suite for JobTracker.

Covers submission, chunked progress, terminal transitions, ordering,
statistics, timeouts and shutdown.

System role: Verification of batch job tracking logic
"""

import asyncio
import logging
import math

import pytest

from microservices.core.exceptions import JobNotFoundError
from microservices.core.job_tracker import JobTracker
from microservices.models.job import JobStatus, ProcessDataRequest, ProcessingType


def _request(processing_type: str, data: list, options: dict | None = None, **kwargs) -> ProcessDataRequest:
    return ProcessDataRequest(type=processing_type, data=data, options=options, **kwargs)


def _chunk_events(caplog: pytest.LogCaptureFixture, job_id: str) -> list[logging.LogRecord]:
    return [
        record for record in caplog.records
        if getattr(record, "event", None) == "chunk_processed"
        and getattr(record, "job_id", None) == job_id
    ]


class TestSubmit:
    """Test suite for job submission."""

    @pytest.mark.asyncio
    async def test_submit_should_return_accepted_job_id(self, tracker: JobTracker) -> None:
        """Test submit returns accepted response and registers job."""
        # Act
        accepted = await tracker.submit(_request("validate", [{"id": 1}]))

        # Assert
        assert accepted.status == "accepted"
        assert accepted.job_id.startswith("job_")
        job = tracker.get_job(accepted.job_id)
        assert job.total_items == 1
        assert job.type == ProcessingType.VALIDATE

    @pytest.mark.asyncio
    async def test_submit_should_record_job_before_processing_finishes(self) -> None:
        """Test job is visible as processing right after submission."""
        # Arrange
        tracker = JobTracker(batch_size=1, chunk_delay_ms=50)

        # Act
        accepted = await tracker.submit(_request("validate", [{"id": 1}, {"id": 2}]))
        job = tracker.get_job(accepted.job_id)

        # Assert
        assert job.status == JobStatus.PROCESSING
        assert job.items_processed == 0
        assert tracker.get_stats().active_jobs == 1
        await tracker.shutdown()

    @pytest.mark.asyncio
    async def test_submit_should_default_priority(self, tracker: JobTracker, job_waiter) -> None:
        """Test priority defaults to 3 and is kept when given."""
        # Act
        default = await tracker.submit(_request("validate", [{"id": 1}]))
        explicit = await tracker.submit(_request("validate", [{"id": 1}], priority=5))

        # Assert
        assert (await job_waiter(tracker, default.job_id)).priority == 3
        assert (await job_waiter(tracker, explicit.job_id)).priority == 5

    @pytest.mark.asyncio
    async def test_job_ids_should_be_unique(self, tracker: JobTracker) -> None:
        """Test many submissions in the same millisecond get distinct IDs."""
        # Act
        ids = [(await tracker.submit(_request("validate", []))).job_id for _ in range(50)]

        # Assert
        assert len(set(ids)) == 50


class TestProcessing:
    """Test suite for chunked job execution."""

    @pytest.mark.asyncio
    async def test_aggregate_sum_should_produce_single_record(self, job_waiter) -> None:
        """Test aggregate sum over one chunk."""
        # Arrange
        tracker = JobTracker(batch_size=10, chunk_delay_ms=0)
        data = [{"value": 1}, {"value": 2}, {"value": 3}]

        # Act
        accepted = await tracker.submit(_request("aggregate", data, {"field": "value", "operation": "sum"}))
        job = await job_waiter(tracker, accepted.job_id)

        # Assert
        assert job.status == JobStatus.COMPLETED
        assert job.result == [{"value": 6}]

    @pytest.mark.asyncio
    async def test_aggregate_avg_should_produce_mean(self, job_waiter) -> None:
        """Test aggregate avg over one chunk."""
        # Arrange
        tracker = JobTracker(batch_size=10, chunk_delay_ms=0)
        data = [{"value": 1}, {"value": 2}, {"value": 3}]

        # Act
        accepted = await tracker.submit(_request("aggregate", data, {"operation": "avg"}))
        job = await job_waiter(tracker, accepted.job_id)

        # Assert
        assert job.result == [{"value": 2}]

    @pytest.mark.asyncio
    async def test_aggregate_should_emit_one_record_per_chunk(self, tracker: JobTracker, job_waiter) -> None:
        """Test aggregation is per chunk, not global."""
        # Arrange
        data = [{"value": v} for v in (1, 2, 3, 4, 5)]

        # Act
        accepted = await tracker.submit(_request("aggregate", data))
        job = await job_waiter(tracker, accepted.job_id)

        # Assert
        assert job.result == [{"value": 3}, {"value": 7}, {"value": 5}]

    @pytest.mark.asyncio
    async def test_validate_should_drop_items_without_id(self, tracker: JobTracker, job_waiter) -> None:
        """Test validate keeps only items with the default required field."""
        # Act
        accepted = await tracker.submit(_request("validate", [{"id": 1}, {"name": "x"}]))
        job = await job_waiter(tracker, accepted.job_id)

        # Assert
        assert job.result == [{"id": 1}]

    @pytest.mark.asyncio
    async def test_transform_should_stamp_items(self, tracker: JobTracker, job_waiter) -> None:
        """Test transform marks items processed with the service name."""
        # Act
        accepted = await tracker.submit(
            _request("transform", [{"id": 1}], {"additionalFields": {"source": "test"}})
        )
        job = await job_waiter(tracker, accepted.job_id)

        # Assert
        [item] = job.result
        assert item["id"] == 1
        assert item["processed"] is True
        assert item["transformed_by"] == "service-b"
        assert item["source"] == "test"

    @pytest.mark.asyncio
    async def test_empty_data_should_complete_with_empty_result(self, tracker: JobTracker, job_waiter) -> None:
        """Test a job without items completes immediately."""
        # Act
        accepted = await tracker.submit(_request("filter", []))
        job = await job_waiter(tracker, accepted.job_id)

        # Assert
        assert job.status == JobStatus.COMPLETED
        assert job.result == []
        assert job.items_processed == 0
        assert job.total_items == 0

    @pytest.mark.asyncio
    @pytest.mark.parametrize("total,batch_size", [(5, 2), (4, 2), (1, 10), (7, 1)])
    async def test_progress_should_update_once_per_chunk(
        self,
        caplog: pytest.LogCaptureFixture,
        job_waiter,
        total: int,
        batch_size: int,
    ) -> None:
        """Test ceil(N/B) monotonic, bounded progress updates."""
        # Arrange
        caplog.set_level(logging.INFO, logger="microservices.core.job_tracker")
        tracker = JobTracker(batch_size=batch_size, chunk_delay_ms=0)
        data = [{"id": i} for i in range(total)]

        # Act
        accepted = await tracker.submit(_request("validate", data))
        job = await job_waiter(tracker, accepted.job_id)

        # Assert
        events = _chunk_events(caplog, accepted.job_id)
        assert len(events) == math.ceil(total / batch_size)
        progress = [record.progress for record in events]
        assert progress == sorted(progress)
        assert progress[-1] == 100
        assert job.items_processed == total

    @pytest.mark.asyncio
    async def test_transform_of_non_object_items_should_complete(self, tracker: JobTracker, job_waiter) -> None:
        """Test scalar items are transformed into stamped objects."""
        # Act
        accepted = await tracker.submit(_request("transform", [{"id": 1}, 42, "x"]))
        job = await job_waiter(tracker, accepted.job_id)

        # Assert
        assert job.status == JobStatus.COMPLETED
        assert len(job.result) == 3
        assert job.result[0]["id"] == 1
        assert all(item["processed"] is True for item in job.result)
        assert "id" not in job.result[1]

    @pytest.mark.asyncio
    async def test_validate_with_empty_required_fields_should_keep_all(
        self, tracker: JobTracker, job_waiter
    ) -> None:
        """Test an explicit empty field list keeps every item."""
        # Act
        accepted = await tracker.submit(_request("validate", [{"id": 1}, {"name": "x"}], {"requiredFields": []}))
        job = await job_waiter(tracker, accepted.job_id)

        # Assert
        assert job.status == JobStatus.COMPLETED
        assert job.result == [{"id": 1}, {"name": "x"}]

    @pytest.mark.asyncio
    async def test_unusable_options_should_fail_job(self, tracker: JobTracker, job_waiter) -> None:
        """Test a strategy error fails the job with an error message."""
        # Act
        accepted = await tracker.submit(_request("validate", [{"id": 1}, {"id": 2}], {"requiredFields": 5}))
        job = await job_waiter(tracker, accepted.job_id)

        # Assert
        assert job.status == JobStatus.FAILED
        assert "not iterable" in job.error
        assert job.result is None
        assert job.items_processed == 0
        assert tracker.get_stats().failed_jobs == 1

    @pytest.mark.asyncio
    async def test_terminal_job_should_carry_result_xor_error(self, tracker: JobTracker, job_waiter) -> None:
        """Test completed jobs carry result only, failed jobs error only."""
        # Arrange
        bad_request = _request("validate", [{"id": 1}], {"requiredFields": 5})

        # Act
        ok = await job_waiter(tracker, (await tracker.submit(_request("filter", [{"a": 1}]))).job_id)
        bad = await job_waiter(tracker, (await tracker.submit(bad_request)).job_id)

        # Assert
        assert ok.result is not None and ok.error is None
        assert bad.result is None and bad.error is not None
        assert ok.completed_at is not None
        assert bad.completed_at is not None


class TestTimeout:
    """Test suite for the per-job wall-clock budget."""

    @pytest.mark.asyncio
    async def test_timeout_should_fail_job_between_chunks(self, fake_clock, job_waiter) -> None:
        """Test exceeding the budget fails the job before the next chunk."""
        # Arrange: start, first check at 0ms, second check at 100ms
        tracker = JobTracker(
            batch_size=1,
            max_processing_time_ms=50,
            chunk_delay_ms=0,
            clock=fake_clock(0.0, 0.0, 0.1),
        )

        # Act
        accepted = await tracker.submit(_request("validate", [{"id": 1}, {"id": 2}, {"id": 3}]))
        job = await job_waiter(tracker, accepted.job_id)

        # Assert
        assert job.status == JobStatus.FAILED
        assert job.error == "Processing timeout exceeded"
        assert job.items_processed == 1
        stats = tracker.get_stats()
        assert stats.completed_jobs == 0
        assert stats.failed_jobs == 1

    @pytest.mark.asyncio
    async def test_real_delay_should_trip_timeout(self, job_waiter) -> None:
        """Test chunk delay longer than the budget fails a multi-chunk job."""
        # Arrange
        tracker = JobTracker(batch_size=1, max_processing_time_ms=10, chunk_delay_ms=30)

        # Act
        accepted = await tracker.submit(_request("validate", [{"id": 1}, {"id": 2}]))
        job = await job_waiter(tracker, accepted.job_id)

        # Assert
        assert job.status == JobStatus.FAILED
        assert job.error == "Processing timeout exceeded"


class TestQueries:
    """Test suite for job listing, lookup and statistics."""

    @pytest.mark.asyncio
    async def test_get_jobs_should_list_newest_first(self, tracker: JobTracker, job_waiter) -> None:
        """Test jobs are ordered by creation time descending."""
        # Arrange
        ids = []
        for _ in range(3):
            ids.append((await tracker.submit(_request("validate", []))).job_id)
            await asyncio.sleep(0.002)

        # Act
        jobs = tracker.get_jobs()

        # Assert
        assert [job.id for job in jobs] == list(reversed(ids))
        created = [job.created_at for job in jobs]
        assert created == sorted(created, reverse=True)

    @pytest.mark.asyncio
    async def test_get_job_should_return_copy(self, tracker: JobTracker, job_waiter) -> None:
        """Test callers cannot mutate tracked state through snapshots."""
        # Arrange
        accepted = await tracker.submit(_request("validate", [{"id": 1}]))
        job = await job_waiter(tracker, accepted.job_id)

        # Act
        job.result.append({"id": 99})
        job.status = JobStatus.FAILED

        # Assert
        fresh = tracker.get_job(accepted.job_id)
        assert fresh.result == [{"id": 1}]
        assert fresh.status == JobStatus.COMPLETED

    def test_get_job_should_raise_for_unknown_id(self, tracker: JobTracker) -> None:
        """Test unknown job IDs raise not-found."""
        # Act / Assert
        with pytest.raises(JobNotFoundError, match="job_missing"):
            tracker.get_job("job_missing")

    def test_stats_should_start_empty(self, tracker: JobTracker) -> None:
        """Test initial statistics are zero."""
        # Act
        stats = tracker.get_stats()

        # Assert
        assert stats.total_jobs == 0
        assert stats.completed_jobs == 0
        assert stats.failed_jobs == 0
        assert stats.average_processing_time == 0
        assert stats.active_jobs == 0
        assert stats.total_jobs_in_memory == 0

    @pytest.mark.asyncio
    async def test_average_processing_time_should_be_running_mean(self, fake_clock, job_waiter) -> None:
        """Test 100ms and 300ms jobs average to 200ms."""
        # Arrange: (start, check, end) per single-chunk job
        tracker = JobTracker(
            batch_size=10,
            chunk_delay_ms=0,
            clock=fake_clock(0.0, 0.0, 0.1, 1.0, 1.0, 1.3),
        )

        # Act
        first = await tracker.submit(_request("validate", [{"id": 1}]))
        await job_waiter(tracker, first.job_id)
        second = await tracker.submit(_request("validate", [{"id": 2}]))
        await job_waiter(tracker, second.job_id)

        # Assert
        stats = tracker.get_stats()
        assert stats.completed_jobs == 2
        assert stats.average_processing_time == pytest.approx(200)
        assert stats.total_jobs == 2
        assert stats.total_jobs_in_memory == 2
        assert stats.active_jobs == 0

    @pytest.mark.asyncio
    async def test_counters_should_stay_consistent(self, tracker: JobTracker, job_waiter) -> None:
        """Test completed plus failed never exceeds total."""
        # Arrange
        requests = [
            _request("validate", [{"id": 1}]),
            _request("validate", [{"id": 1}], {"requiredFields": 5}),
            _request("filter", [{"a": 1}], {"conditions": {"a": 1}}),
        ]

        # Act
        ids = [(await tracker.submit(r)).job_id for r in requests]
        for job_id in ids:
            await job_waiter(tracker, job_id)

        # Assert
        stats = tracker.get_stats()
        assert stats.total_jobs == 3
        assert stats.completed_jobs == 2
        assert stats.failed_jobs == 1
        assert stats.completed_jobs + stats.failed_jobs <= stats.total_jobs


class TestShutdown:
    """Test suite for tracker shutdown."""

    @pytest.mark.asyncio
    async def test_shutdown_should_fail_in_flight_jobs(self) -> None:
        """Test in-flight jobs are marked failed when the process stops."""
        # Arrange
        tracker = JobTracker(batch_size=1, chunk_delay_ms=1000)
        accepted = await tracker.submit(_request("validate", [{"id": 1}, {"id": 2}]))
        await asyncio.sleep(0)

        # Act
        await tracker.shutdown()

        # Assert
        job = tracker.get_job(accepted.job_id)
        assert job.status == JobStatus.FAILED
        assert job.error == "Processing cancelled by shutdown"
        assert tracker.pending_tasks == 0

    def test_batch_size_should_be_positive(self) -> None:
        """Test invalid chunk size is rejected."""
        with pytest.raises(ValueError):
            JobTracker(batch_size=0)
