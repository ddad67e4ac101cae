"""
Exception hierarchy for the microservices.

Provides layered exception structure for domain-specific errors.
All exceptions include context for observability and debugging.

Dependencies: None (pure domain layer)
System role: Centralized exception handling across both services
"""

from typing import Any


class ServiceError(Exception):
    """Base exception for all service errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        """
        Initialize base exception with message and optional context.

        Args:
            message: Human-readable error message
            details: Optional dictionary of additional context for debugging
        """
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def __str__(self) -> str:
        """Return the human-readable message."""
        return self.message


class ValidationError(ServiceError):
    """Raised when input validation fails."""

    def __init__(
        self,
        message: str,
        field: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize validation error.

        Args:
            message: Error message
            field: Field name that failed validation
            details: Additional context
        """
        details = details or {}
        if field:
            details["field"] = field
        super().__init__(message, details)


class NotFoundError(ServiceError):
    """Raised when a resource cannot be found."""

    resource = "Resource"

    def __init__(self, resource_id: str, details: dict[str, Any] | None = None) -> None:
        """
        Initialize not found error.

        Args:
            resource_id: ID of the missing resource
            details: Additional context
        """
        details = details or {}
        details["id"] = resource_id
        self.resource_id = resource_id
        super().__init__(f"{self.resource} with ID {resource_id} not found", details)


class UserNotFoundError(NotFoundError):
    resource = "User"


class ProductNotFoundError(NotFoundError):
    resource = "Product"


class JobNotFoundError(NotFoundError):
    resource = "Job"


class ProcessingError(ServiceError):
    """Base exception for batch processing failures."""

    def __init__(
        self,
        message: str,
        job_id: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize processing error.

        Args:
            message: Error message
            job_id: ID of the job that failed
            details: Additional context
        """
        details = details or {}
        if job_id:
            details["job_id"] = job_id
        super().__init__(message, details)


class ProcessingTimeoutError(ProcessingError):
    """Raised when a job exceeds its wall-clock processing budget."""

    def __init__(
        self,
        job_id: str | None = None,
        elapsed_ms: float | None = None,
        limit_ms: int | None = None,
    ) -> None:
        details: dict[str, Any] = {}
        if elapsed_ms is not None:
            details["elapsed_ms"] = round(elapsed_ms, 2)
        if limit_ms is not None:
            details["limit_ms"] = limit_ms
        super().__init__("Processing timeout exceeded", job_id, details)


class ChunkProcessingError(ProcessingError):
    """Raised when a chunk cannot be processed."""

    def __init__(
        self,
        message: str,
        chunk_index: int | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        details = details or {}
        if chunk_index is not None:
            details["chunk_index"] = chunk_index
        super().__init__(message, details=details)


class ObservabilityError(ServiceError):
    """Raised when observability operations fail (non-critical)."""

    pass
