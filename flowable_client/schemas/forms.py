"""Request schemas: query parameters and request bodies sent to the engine."""

from collections.abc import Iterable
from typing import Any

from pydantic import Field

from flowable_client.schemas.base import FlowableModel
from flowable_client.schemas.task import FormVariable


class StartProcessForm(FlowableModel):
    """Body for starting a process instance from a definition id."""

    process_definition_id: str = Field(..., min_length=1)
    business_key: str | None = None
    variables: list[FormVariable] | None = None


class FormProperty(FlowableModel):
    """One submitted form field (form-data API uses ``id``, not ``name``)."""

    id: str = Field(..., min_length=1)
    value: Any = None


class SubmitTaskForm(FlowableModel):
    """Form values submitted for a task, in the order they were entered."""

    task_id: str = Field(..., min_length=1)
    properties: list[FormProperty] = []

    @classmethod
    def from_pairs(
        cls, task_id: str, pairs: Iterable[tuple[str, Any]]
    ) -> "SubmitTaskForm":
        """Build from ordered (field, value) pairs."""
        return cls(
            task_id=task_id,
            properties=[FormProperty(id=name, value=value) for name, value in pairs],
        )


class SubmitTaskActionForm(FlowableModel):
    """Task action body (complete, claim, delegate, resolve)."""

    action: str = Field(..., min_length=1, max_length=64)
    assignee: str | None = None
    variables: list[FormVariable] = []


class TaskListQuery(FlowableModel):
    """Query parameters for historic task listings."""

    process_instance_id: str | None = None
    task_assignee: str | None = None
    start: int = Field(default=0, ge=0)
    size: int = Field(default=10, gt=0)
    sort: str | None = None
    order: str | None = None


class ProcessListQuery(FlowableModel):
    """Query parameters for historic process instance listings."""

    involved_user: str | None = None
    start: int = Field(default=0, ge=0)
    size: int = Field(default=10, gt=0)
    sort: str | None = None
    order: str | None = None
