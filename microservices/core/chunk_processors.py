"""
Per-type chunk processing strategies.

Each strategy works on one chunk at a time; nothing is carried across
chunks of the same job.

Dependencies: microservices.models.job, microservices.core.exceptions
System role: Batch transformation primitives for the JobTracker
"""

from collections.abc import Mapping
from datetime import datetime, timezone
from typing import Any

from microservices.core.exceptions import ChunkProcessingError
from microservices.models.job import ProcessingType

DEFAULT_REQUIRED_FIELDS = ["id"]
DEFAULT_AGGREGATE_FIELD = "value"
DEFAULT_AGGREGATE_OPERATION = "sum"


def chunk_items(items: list[Any], size: int) -> list[list[Any]]:
    """
    Split items into consecutive chunks, preserving order.

    Args:
        items: Input sequence
        size: Maximum chunk length (the last chunk may be shorter)

    Returns:
        list[list[Any]]: Chunks in input order
    """
    if size < 1:
        raise ValueError("Chunk size must be at least 1")
    return [items[i:i + size] for i in range(0, len(items), size)]


def transform_chunk(
    chunk: list[Any],
    options: Mapping[str, Any],
    service_name: str,
) -> list[dict[str, Any]]:
    """
    Copy each item and stamp it as processed, merging ``additionalFields``.

    Items that are not objects contribute no keys of their own; a non-object
    ``additionalFields`` is ignored.
    """
    additional_fields = options.get("additionalFields")
    if not isinstance(additional_fields, Mapping):
        additional_fields = {}

    processed_at = datetime.now(timezone.utc).isoformat()
    transformed = []
    for item in chunk:
        transformed.append({
            **(item if isinstance(item, Mapping) else {}),
            "processed": True,
            "processed_at": processed_at,
            "transformed_by": service_name,
            **additional_fields,
        })
    return transformed


def validate_chunk(chunk: list[Any], options: Mapping[str, Any]) -> list[Any]:
    """Keep items carrying every field listed in ``requiredFields`` (default ``["id"]``)."""
    required_fields = options.get("requiredFields")
    if required_fields is None:
        required_fields = DEFAULT_REQUIRED_FIELDS
    if isinstance(required_fields, str):
        required_fields = [required_fields]

    return [
        item for item in chunk
        if not required_fields
        or (isinstance(item, Mapping) and all(field in item for field in required_fields))
    ]


def aggregate_chunk(chunk: list[Any], options: Mapping[str, Any]) -> dict[str, Any]:
    """
    Collapse a chunk into a single ``{field: value}`` record.

    Only numeric values of ``field`` take part. ``operation`` is one of
    sum, avg, max, min; anything else counts the numeric values. avg, max
    and min of a chunk without numeric values yield None.
    """
    field = options.get("field") or DEFAULT_AGGREGATE_FIELD
    operation = options.get("operation") or DEFAULT_AGGREGATE_OPERATION

    values = [
        item[field] for item in chunk
        if isinstance(item, Mapping) and _is_number(item.get(field))
    ]

    if operation == "sum":
        return {field: sum(values)}
    if operation == "avg":
        return {field: sum(values) / len(values) if values else None}
    if operation == "max":
        return {field: max(values) if values else None}
    if operation == "min":
        return {field: min(values) if values else None}
    return {field: len(values)}


def filter_chunk(chunk: list[Any], options: Mapping[str, Any]) -> list[Any]:
    """Keep items whose key/value pairs match every entry of ``conditions``."""
    conditions = options.get("conditions") or {}
    if not isinstance(conditions, Mapping):
        raise ChunkProcessingError("conditions must be an object")
    if not conditions:
        return list(chunk)

    return [
        item for item in chunk
        if isinstance(item, Mapping)
        and all(key in item and _strict_equals(item[key], value) for key, value in conditions.items())
    ]


def process_chunk(
    chunk: list[Any],
    processing_type: ProcessingType,
    options: Mapping[str, Any] | None = None,
    service_name: str = "service-b",
) -> list[Any]:
    """
    Apply the strategy for ``processing_type`` to one chunk.

    Args:
        chunk: Items of the chunk
        processing_type: Processing type of the job
        options: Job options (may be None)
        service_name: Name stamped by the transform strategy

    Returns:
        list[Any]: Output items of the chunk

    Raises:
        ChunkProcessingError: If the options are unusable for the strategy
    """
    options = options or {}

    if processing_type == ProcessingType.TRANSFORM:
        return transform_chunk(chunk, options, service_name)
    if processing_type == ProcessingType.VALIDATE:
        return validate_chunk(chunk, options)
    if processing_type == ProcessingType.AGGREGATE:
        return [aggregate_chunk(chunk, options)]
    if processing_type == ProcessingType.FILTER:
        return filter_chunk(chunk, options)
    # Unreachable through the request model
    return list(chunk)


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _strict_equals(left: Any, right: Any) -> bool:
    # True must not match 1
    if isinstance(left, bool) or isinstance(right, bool):
        return type(left) is type(right) and left == right
    return left == right
