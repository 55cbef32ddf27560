"""Service interface (port) for the engine client.

One Protocol with one implementation (FlowableService); callers type
against the Protocol so tests can substitute a fake.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import TYPE_CHECKING, Any, BinaryIO, Protocol

if TYPE_CHECKING:
    from flowable_client.schemas import (
        Attachment,
        NewUserForm,
        Page,
        Process,
        ProcessListQuery,
        StartProcessForm,
        SubmitTaskActionForm,
        SubmitTaskForm,
        Task,
        TaskListQuery,
        UserInfo,
    )


class IFlowableService(Protocol):
    """Protocol for task, process, identity and attachment operations."""

    def get_task_form(self, task_id: str, form_definition_key: str) -> dict[str, Any]:
        """Return the form instance model of a task as untyped JSON."""

    def start_process(self, form: StartProcessForm) -> str:
        """Start a process instance and return its id."""

    def get_user_tasks(self, state: str, query: TaskListQuery) -> Page[Task]:
        """List tasks filtered by state (open, completed, all), enriched with assignees."""

    def get_process_tasks(self, query: TaskListQuery) -> Page[Task]:
        """List tasks of a process instance, enriched with assignees."""

    def get_user_processes(self, state: str, query: ProcessListQuery) -> Page[Process]:
        """List process instances filtered by state (running, completed, all), enriched with starters."""

    def get_process(self, process_id: str) -> Process:
        """Return one process instance, enriched with its starter when possible."""

    def submit_task(self, form: SubmitTaskForm) -> None:
        """Submit form values for a task."""

    def submit_task_action(self, task_id: str, form: SubmitTaskActionForm) -> Task | None:
        """Perform a task action and return the task snapshot the engine sends back."""

    def create_user(self, form: NewUserForm) -> UserInfo:
        """Create a user in the identity store."""

    def get_users(self) -> list[UserInfo]:
        """Return the whole user directory."""

    def get_users_by_ids(self, user_ids: Iterable[str]) -> list[UserInfo]:
        """Return directory users whose id is in user_ids."""

    def create_attachment(
        self,
        task_id: str,
        field_name: str,
        file_name: str,
        mime_type: str,
        content: bytes | BinaryIO,
    ) -> Attachment:
        """Upload a content item for a task."""

    def get_task_attachments(self, task_id: str) -> Page[Attachment]:
        """List content items attached to a task."""
