"""
Processing job domain models and schemas.

Request/response schemas for batch processing and job tracking.

Dependencies: pydantic
System role: Processing job API contracts
"""

from datetime import datetime
from enum import Enum
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field


class ProcessingType(str, Enum):
    TRANSFORM = "transform"
    VALIDATE = "validate"
    AGGREGATE = "aggregate"
    FILTER = "filter"


class JobStatus(str, Enum):
    PROCESSING = "processing"
    COMPLETED = "completed"
    FAILED = "failed"


class ProcessDataRequest(BaseModel):
    """Request schema for submitting a batch processing job."""

    model_config = ConfigDict(extra="forbid")

    type: ProcessingType = Field(description="Type of processing to perform")
    data: list[Any] = Field(description="Array of data items to process")
    options: dict[str, Any] | None = Field(
        default=None,
        description="Processing options, interpreted per processing type",
    )
    priority: int | None = Field(
        default=None,
        ge=1,
        le=5,
        description="Priority level (1-5); recorded only",
    )


class JobAcceptedResponse(BaseModel):
    """Response schema for an accepted batch submission."""

    job_id: str
    status: Literal["accepted"] = "accepted"


class ProcessingJob(BaseModel):
    """Tracks the lifecycle of a batch processing job."""

    id: str = Field(description="Job ID")
    status: JobStatus = Field(default=JobStatus.PROCESSING, description="Job status")
    type: ProcessingType = Field(description="Processing type")
    items_processed: int = Field(default=0, ge=0, description="Number of items processed")
    total_items: int = Field(ge=0, description="Total number of items")
    priority: int = Field(default=3, ge=1, le=5, description="Advisory priority")
    created_at: datetime = Field(description="Job creation timestamp")
    completed_at: datetime | None = Field(default=None, description="Job completion timestamp")
    result: list[Any] | None = Field(default=None, description="Processing result")
    error: str | None = Field(default=None, description="Error message if failed")

    @property
    def is_terminal(self) -> bool:
        return self.status != JobStatus.PROCESSING


class ProcessingStats(BaseModel):
    """Aggregate statistics over every job submitted to this process."""

    total_jobs: int = 0
    completed_jobs: int = 0
    failed_jobs: int = 0
    average_processing_time: float = Field(
        default=0.0,
        description="Mean wall-clock duration of completed jobs in milliseconds",
    )
    active_jobs: int = 0
    total_jobs_in_memory: int = 0
