"""Shared utilities: datetime."""

from flowable_client.shared.utils.datetime import (
    ensure_utc,
    parse_flowable_datetime,
)

__all__ = [
    "ensure_utc",
    "parse_flowable_datetime",
]
