"""
Helpers shared by the in-memory record stores.

Dependencies: None
System role: ID generation and timestamps for seeded in-memory collections
"""

import time
from datetime import datetime, timezone


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def generate_record_id(existing: dict) -> str:
    """
    Generate an epoch-millisecond string ID not yet present in ``existing``.

    Args:
        existing: Mapping keyed by current IDs

    Returns:
        str: Unused ID
    """
    candidate = int(time.time() * 1000)
    while str(candidate) in existing:
        candidate += 1
    return str(candidate)
