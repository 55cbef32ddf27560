"""
UTC datetime utilities for engine timestamps.

Flowable serializes timestamps as ISO 8601 strings, usually with a
``+0000`` style offset (no colon) and millisecond precision. Records keep
the raw strings; these helpers turn them into timezone-aware UTC values.
"""

import re
from datetime import UTC, datetime

_COMPACT_OFFSET = re.compile(r"([+-]\d{2})(\d{2})$")


def ensure_utc(dt: datetime | None) -> datetime | None:
    """
    Ensure a datetime is UTC-aware.

    - If None, returns None
    - If naive, assumes UTC and attaches timezone
    - If aware, converts to UTC

    Args:
        dt: A datetime that may be naive or aware

    Returns:
        UTC-aware datetime or None
    """
    if dt is None:
        return None

    if dt.tzinfo is None:
        return dt.replace(tzinfo=UTC)

    return dt.astimezone(UTC)


def parse_flowable_datetime(value: str | None) -> datetime | None:
    """
    Parse an engine timestamp into a UTC-aware datetime.

    Accepts ``2013-04-17T10:17:43.902+0000``, ``...+00:00``, ``...Z`` and
    naive values (treated as UTC). Empty values return None.

    Args:
        value: Raw timestamp string from a response body

    Returns:
        UTC-aware datetime or None

    Raises:
        ValueError: If the string is not an ISO 8601 timestamp
    """
    if not value:
        return None
    text = value.strip()
    if text.endswith("Z"):
        text = text[:-1] + "+00:00"
    text = _COMPACT_OFFSET.sub(r"\1:\2", text)
    return ensure_utc(datetime.fromisoformat(text))
