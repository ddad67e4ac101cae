"""
Shared test fixtures and configuration for entire test suite.

Provides: Settings without env files, per-service apps and clients, job tracker
helpers, fake clocks
Dependencies: pytest, fastapi
System role: Test infrastructure and fixture management
"""

import asyncio

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from microservices.api import service_a, service_b
from microservices.configs import ServiceASettings, ServiceBSettings, get_settings
from microservices.configs.observability import ObservabilitySettings
from microservices.configs.processing import ProcessingSettings
from microservices.core.job_tracker import JobTracker
from microservices.models.job import JobStatus, ProcessingJob


class FakeClock:
    """
    Monotonic clock returning scripted readings.

    The last reading repeats once the script is exhausted.
    """

    def __init__(self, *readings: float) -> None:
        self._readings = list(readings)
        self.calls = 0

    def __call__(self) -> float:
        self.calls += 1
        if len(self._readings) > 1:
            return self._readings.pop(0)
        return self._readings[0]


async def wait_for_job(tracker: JobTracker, job_id: str, timeout: float = 2.0) -> ProcessingJob:
    """Poll the tracker until the job leaves the processing state."""
    loop = asyncio.get_running_loop()
    deadline = loop.time() + timeout
    while True:
        job = tracker.get_job(job_id)
        if job.status != JobStatus.PROCESSING:
            return job
        if loop.time() > deadline:
            raise AssertionError(f"Job {job_id} still processing after {timeout}s")
        await asyncio.sleep(0.005)


@pytest.fixture(autouse=True)
def clear_settings_cache():
    """Reset cached settings between tests."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def service_a_settings() -> ServiceASettings:
    """Provide service-a settings isolated from .env files."""
    return ServiceASettings(
        _env_file=None,
        environment="test",
        observability=ObservabilitySettings(enable_tracing=False),
    )


@pytest.fixture
def service_b_settings() -> ServiceBSettings:
    """Provide service-b settings with instant chunk processing."""
    return ServiceBSettings(
        _env_file=None,
        environment="test",
        observability=ObservabilitySettings(enable_tracing=False),
        processing=ProcessingSettings(batch_size=2, chunk_processing_delay=0),
    )


@pytest.fixture
def service_a_app(service_a_settings: ServiceASettings) -> FastAPI:
    """Create service-a application."""
    return service_a.create_app(service_a_settings)


@pytest.fixture
def service_b_app(service_b_settings: ServiceBSettings) -> FastAPI:
    """Create service-b application."""
    return service_b.create_app(service_b_settings)


@pytest.fixture
def client_a(service_a_app: FastAPI) -> TestClient:
    """Provide TestClient for service-a."""
    return TestClient(service_a_app)


@pytest.fixture
def client_b(service_b_app: FastAPI) -> TestClient:
    """Provide TestClient for service-b."""
    return TestClient(service_b_app)


@pytest.fixture
def tracker() -> JobTracker:
    """Provide job tracker with small chunks and no simulated delay."""
    return JobTracker(batch_size=2, chunk_delay_ms=0)


@pytest.fixture
def job_waiter():
    """Provide coroutine function awaiting a terminal job snapshot."""
    return wait_for_job


@pytest.fixture
def fake_clock():
    """Provide factory for scripted monotonic clocks."""
    return FakeClock
