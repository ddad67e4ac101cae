"""
Service error handling utilities.

Provides a decorator that maps domain exceptions raised by the service
layer onto HTTP responses with a uniform ErrorResponse body.

Dependencies: fastapi, microservices.core.exceptions, microservices.models.common
System role: HTTP error mapping for all routers
"""

import functools
import logging
from typing import Any, Callable, TypeVar

from fastapi import status
from fastapi.responses import JSONResponse

from microservices.core.exceptions import NotFoundError, ServiceError, ValidationError
from microservices.models.common import ErrorResponse

logger = logging.getLogger(__name__)

# Type for the decorated function
F = TypeVar("F", bound=Callable[..., Any])


def error_response(status_code: int, error: str, details: dict | None = None) -> JSONResponse:
    """Build a JSON error response in the shared ErrorResponse shape."""
    body = ErrorResponse(error=error, details=details or None)
    return JSONResponse(status_code=status_code, content=body.model_dump())


def handle_service_errors(func: F) -> F:
    """
    Decorator to turn service-layer errors into HTTP error responses.

    This centralizes:
    - Logging of errors with their context
    - Mapping exception types to HTTP status codes
    - Uniform error response bodies
    """
    @functools.wraps(func)
    async def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return await func(*args, **kwargs)

        except NotFoundError as e:
            logger.warning(
                "Resource not found",
                extra={"resource": e.resource, "resource_id": e.resource_id},
            )
            return error_response(status.HTTP_404_NOT_FOUND, str(e), e.details)

        except ValidationError as e:
            logger.warning("Invalid request", extra={"field": e.details.get("field"), "error": str(e)})
            return error_response(status.HTTP_400_BAD_REQUEST, str(e), e.details)

        except ValueError as e:
            logger.warning("Invalid request (ValueError)", extra={"error": str(e)})
            return error_response(status.HTTP_400_BAD_REQUEST, str(e))

        except ServiceError as e:
            logger.exception("Service operation failed", extra={"error": str(e)})
            return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, str(e), e.details)

    return wrapper  # type: ignore
