"""Task schemas (runtime and historic task instances)."""

from datetime import datetime
from typing import Any

from flowable_client.schemas.base import FlowableModel
from flowable_client.schemas.user import UserInfo
from flowable_client.shared.utils.datetime import parse_flowable_datetime


class FormVariable(FlowableModel):
    """Single name/value row of task variables or action variables."""

    name: str
    value: Any = None


class Task(FlowableModel):
    """Task record.

    ``assignee_user`` is filled by identity enrichment and is never part of
    the engine's response; it stays None when enrichment did not run or the
    assignee is unknown to the directory.
    """

    id: str
    name: str | None = None
    assignee: str | None = None
    assignee_user: UserInfo | None = None
    form_key: str | None = None
    task_definition_key: str | None = None
    execution_id: str | None = None
    process_instance_id: str | None = None
    process_definition_id: str | None = None
    description: str | None = None
    create_time: str | None = None
    start_time: str | None = None
    claim_time: str | None = None
    due_date: str | None = None
    end_time: str | None = None
    variables: list[FormVariable] = []

    @property
    def is_finished(self) -> bool:
        return bool(self.end_time)

    @property
    def form_values(self) -> dict[str, Any]:
        """Submitted variables by name; a resubmitted name keeps its last value."""
        return {v.name: v.value for v in self.variables}

    @property
    def created_at(self) -> datetime | None:
        return parse_flowable_datetime(self.create_time or self.start_time)

    @property
    def claimed_at(self) -> datetime | None:
        return parse_flowable_datetime(self.claim_time)

    @property
    def due_at(self) -> datetime | None:
        return parse_flowable_datetime(self.due_date)

    @property
    def ended_at(self) -> datetime | None:
        return parse_flowable_datetime(self.end_time)
