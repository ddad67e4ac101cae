"""
Logger configuration.

Provides configured logger with JSON formatting and correlation ID injection.
JSON lines, one object per record, for file sinks and log shippers.

Dependencies: logging (stdlib), opentelemetry
System role: Centralized logging configuration
"""

import json
import logging
import sys
from datetime import datetime, timezone

from opentelemetry import trace

from microservices.observability.correlation import get_correlation_id

# Attributes every LogRecord has; anything else arrived through ``extra=``.
_RESERVED_ATTRS = frozenset(
    vars(logging.LogRecord("", logging.INFO, "", 0, "", None, None)).keys()
) | {"message", "asctime", "service", "environment", "correlation_id", "trace_id"}

_LEVELS = {
    "error": logging.ERROR,
    "warn": logging.WARNING,
    "warning": logging.WARNING,
    "info": logging.INFO,
    "debug": logging.DEBUG,
}


class ServiceContextFilter(logging.Filter):
    """Stamps service metadata and the current correlation ID on each record."""

    def __init__(self, service_name: str, environment: str) -> None:
        super().__init__()
        self.service_name = service_name
        self.environment = environment

    def filter(self, record: logging.LogRecord) -> bool:
        record.service = self.service_name
        record.environment = self.environment
        record.correlation_id = get_correlation_id() or "-"
        span_context = trace.get_current_span().get_span_context()
        record.trace_id = format(span_context.trace_id, "032x") if span_context.is_valid else None
        return True


class JsonFormatter(logging.Formatter):
    """Render records as one JSON object per line, including ``extra`` fields."""

    def format(self, record: logging.LogRecord) -> str:
        payload = {
            "timestamp": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname.lower(),
            "logger": record.name,
            "message": record.getMessage(),
            "service": getattr(record, "service", None),
            "environment": getattr(record, "environment", None),
            "correlation_id": getattr(record, "correlation_id", None),
            "trace_id": getattr(record, "trace_id", None),
        }
        for key, value in record.__dict__.items():
            if key not in _RESERVED_ATTRS and not key.startswith("_"):
                payload[key] = value
        if record.exc_info:
            payload["trace"] = self.formatException(record.exc_info)
        return json.dumps(payload, default=str)


def resolve_level(level: str | int) -> int:
    """Map a configured level name ("warn", "info", ...) to a logging level."""
    if isinstance(level, int):
        return level
    return _LEVELS.get(level.lower(), logging.INFO)


def configure_logging(
    level: str | int = "info",
    service_name: str = "service",
    environment: str = "development",
    json_format: bool = False,
    log_file: str | None = None,
) -> None:
    """
    Configure Python logging with ISO timestamp and structured format.

    Args:
        level: Root log level name or number
        service_name: Service stamped on every record
        environment: Deployment environment stamped on every record
        json_format: Emit JSON lines on stdout instead of the human format
        log_file: Optional path of an additional JSON-lines file handler
    """
    # Remove any existing handlers to avoid duplicates
    root_logger = logging.getLogger()
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    context_filter = ServiceContextFilter(service_name, environment)

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(logging.DEBUG)
    if json_format:
        handler.setFormatter(JsonFormatter())
    else:
        handler.setFormatter(
            logging.Formatter(
                "%(asctime)s - [%(service)s] [%(correlation_id)s] %(name)s - %(levelname)s - %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S",
            )
        )
    handler.addFilter(context_filter)
    root_logger.addHandler(handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setFormatter(JsonFormatter())
        file_handler.addFilter(context_filter)
        root_logger.addHandler(file_handler)

    root_logger.setLevel(resolve_level(level))

    # Reduce noise from verbose third-party libraries
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("opentelemetry").setLevel(logging.WARNING)


def get_logger(name: str) -> logging.Logger:
    """
    Get configured logger.

    Args:
        name: Logger name (usually __name__)

    Returns:
        logging.Logger: Configured logger instance
    """
    return logging.getLogger(name)
