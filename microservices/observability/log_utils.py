"""
Logging utilities for safe structured logging.

Provides helpers for safe logging without string concatenation errors,
redaction of sensitive fields and structured processing events.

Dependencies: logging (stdlib)
System role: Logging helper functions
"""

import logging
from typing import Any

SENSITIVE_FIELDS = ("password", "token", "secret", "key", "authorization")
REDACTED = "[REDACTED]"


def safe_log_value(value: Any, max_length: int = 500) -> str:
    """
    Safely convert any value to a string for logging.

    Handles lists, dicts, None, and other types safely.

    Args:
        value: Value to convert
        max_length: Maximum length before truncating

    Returns:
        str: Safe string representation
    """
    try:
        if value is None:
            return "None"
        if isinstance(value, str):
            val_str = value
        elif isinstance(value, (list, tuple)):
            val_str = f"{type(value).__name__}({len(value)} items)"
        elif isinstance(value, dict):
            val_str = f"dict({len(value)} keys)"
        else:
            val_str = str(value)

        if len(val_str) > max_length:
            return val_str[:max_length] + f"... (truncated, {len(val_str)} total)"
        return val_str
    except Exception as e:
        return f"<unable to log: {type(e).__name__}>"


def sanitize_for_logging(obj: Any) -> Any:
    """
    Recursively redact values whose key looks sensitive.

    Args:
        obj: Arbitrary structure (dicts, lists, scalars)

    Returns:
        Any: Copy of obj with sensitive values replaced by "[REDACTED]"
    """
    if isinstance(obj, list):
        return [sanitize_for_logging(item) for item in obj]
    if not isinstance(obj, dict):
        return obj

    sanitized = {}
    for key, value in obj.items():
        if any(field in str(key).lower() for field in SENSITIVE_FIELDS):
            sanitized[key] = REDACTED
        elif isinstance(value, (dict, list)):
            sanitized[key] = sanitize_for_logging(value)
        else:
            sanitized[key] = value
    return sanitized


def log_with_context(
    logger: logging.Logger,
    level: int,
    message: str,
    **context,
) -> None:
    """
    Log a message with structured context, safely converting all values.

    Args:
        logger: Logger instance
        level: Log level (logging.INFO, etc.)
        message: Log message
        **context: Context dict with arbitrary key-value pairs
    """
    safe_context = {
        key: safe_log_value(val) for key, val in sanitize_for_logging(context).items()
    }
    logger.log(level, message, extra=safe_context)


def log_exception_with_context(
    logger: logging.Logger,
    message: str,
    exc: Exception,
    **context,
) -> None:
    """
    Log an exception with full context.

    Args:
        logger: Logger instance
        message: Log message
        exc: Exception instance
        **context: Additional context dict
    """
    safe_context = {
        key: safe_log_value(val) for key, val in sanitize_for_logging(context).items()
    }
    safe_context.update({
        "error_type": type(exc).__name__,
        "error_msg": str(exc),
    })
    logger.error(message, exc_info=exc, extra=safe_context)


def log_processing_event(logger: logging.Logger, event: str, **details) -> None:
    """
    Log a batch processing lifecycle event.

    The event name is attached as ``event_type="processing_event"`` and
    ``event=<name>`` so log pipelines can filter on it.

    Args:
        logger: Logger instance
        event: Event name (batch_started, chunk_processed, batch_completed)
        **details: Event payload
    """
    logger.info(
        f"Processing event: {event}",
        extra={"event_type": "processing_event", "event": event, **details},
    )
