"""Shared utilities: enums, telemetry, and cross-cutting helpers.

Used by application and infrastructure. No business logic.
"""

from flowable_client.shared.enums import ProcessState, TaskState, finished_filter
from flowable_client.shared.utils import (
    ensure_utc,
    parse_flowable_datetime,
)

__all__ = [
    "ProcessState",
    "TaskState",
    "finished_filter",
    "ensure_utc",
    "parse_flowable_datetime",
]
