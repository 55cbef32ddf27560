"""FlowableService: the engine's REST resources as typed calls (implements IFlowableService).

Each operation is one HTTP exchange through FlowableRESTClient (directory
listing walks pages when the directory is larger than one page). Task and
process listings are then passed through IdentityEnricher, which never
fails the enclosing call.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import Any, BinaryIO, TypeVar

from pydantic import BaseModel, ValidationError

from flowable_client.application.services.identity_enrichment import IdentityEnricher
from flowable_client.core.constants import DEFAULT_DIRECTORY_PAGE_SIZE
from flowable_client.domain.exceptions import FlowableDecodeError, ValidationException
from flowable_client.infrastructure.cache.cache_protocol import DirectoryCacheProtocol
from flowable_client.infrastructure.flowable._rest_client import FlowableRESTClient
from flowable_client.infrastructure.flowable.endpoints import (
    CONTENT_ITEMS,
    FORM_DATA,
    FORM_INSTANCE_MODEL,
    HISTORIC_PROCESS_INSTANCES,
    HISTORIC_TASK_INSTANCES,
    IDENTITY_USERS,
    PROCESS_INSTANCES,
    historic_process_instance,
    runtime_task,
)
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
from flowable_client.shared.enums import finished_filter

logger = logging.getLogger(__name__)

M = TypeVar("M", bound=BaseModel)


def _require(value: str | None, field: str) -> None:
    if not value or not value.strip():
        raise ValidationException(f"{field} must not be empty", field=field)


def _parse(model: type[M], payload: Any, path: str) -> M:
    """Validate a decoded body into model; shape mismatches become FlowableDecodeError."""
    try:
        return model.model_validate(payload)
    except ValidationError as e:
        raise FlowableDecodeError(
            path, f"does not match {model.__name__} ({e.error_count()} errors)"
        ) from e


def _parse_page(item: type[M], payload: Any, path: str) -> Page[M]:
    page = _parse(Page[item], payload, path)
    if not page.is_consistent:
        logger.warning(
            "Inconsistent page from %s: start=%d len(data)=%d total=%d",
            path,
            page.start,
            len(page.data),
            page.total,
        )
    return page


class FlowableService:
    """Task, process, identity and attachment operations against one engine.

    Configuration arrives through the injected FlowableRESTClient; nothing is
    read from global state. The user directory is fetched again for every
    enrichment unless a directory cache is passed in.
    """

    def __init__(
        self,
        client: FlowableRESTClient,
        *,
        directory_cache: DirectoryCacheProtocol | None = None,
        directory_page_size: int = DEFAULT_DIRECTORY_PAGE_SIZE,
    ) -> None:
        if directory_page_size <= 0:
            raise ValueError("directory_page_size must be positive")
        self._client = client
        self._directory_cache = directory_cache
        self._directory_page_size = directory_page_size
        self._enricher = IdentityEnricher(self._load_directory)

    def _load_directory(self) -> list[UserInfo]:
        if self._directory_cache is None:
            return self.get_users()
        return list(self._directory_cache.get_or_load(self.get_users))

    # Forms and process start

    def get_task_form(self, task_id: str, form_definition_key: str) -> dict[str, Any]:
        """Return the form instance model of a task as untyped JSON.

        Raises:
            ValidationException: task_id is empty.
            FlowableDecodeError: The engine did not answer with a JSON object.
        """
        _require(task_id, "task_id")
        payload = self._client.post_json(
            FORM_INSTANCE_MODEL,
            {"taskId": task_id, "formDefinitionKey": form_definition_key},
        )
        if not isinstance(payload, dict):
            raise FlowableDecodeError(FORM_INSTANCE_MODEL, "expected a JSON object")
        return payload

    def start_process(self, form: StartProcessForm) -> str:
        """Start a process instance and return the new instance id.

        Raises:
            FlowableDecodeError: The response carries no instance id.
        """
        payload = self._client.post_json(PROCESS_INSTANCES, form.to_wire())
        instance_id = payload.get("id") if isinstance(payload, dict) else None
        if not isinstance(instance_id, str) or not instance_id:
            raise FlowableDecodeError(
                PROCESS_INSTANCES, "response has no process instance id"
            )
        logger.info(
            "Started process instance %s (definition %s)",
            instance_id,
            form.process_definition_id,
        )
        return instance_id

    # Tasks

    def _list_tasks(self, params: dict[str, Any]) -> Page[Task]:
        payload = self._client.get_json(HISTORIC_TASK_INSTANCES, params=params)
        page = _parse_page(Task, payload, HISTORIC_TASK_INSTANCES)
        self._enricher.enrich_tasks(page.data)
        return page

    def get_user_tasks(self, state: str, query: TaskListQuery) -> Page[Task]:
        """List historic tasks, filtered by state, with assignees resolved.

        ``open`` returns unfinished tasks, ``completed`` finished ones; any
        other state returns both.
        """
        params = query.to_wire()
        finished = finished_filter(state)
        if finished is not None:
            params["finished"] = finished
        return self._list_tasks(params)

    def get_process_tasks(self, query: TaskListQuery) -> Page[Task]:
        """List historic tasks of a process instance with assignees resolved."""
        return self._list_tasks(query.to_wire())

    def submit_task(self, form: SubmitTaskForm) -> None:
        """Submit form values for a task. The response body is ignored."""
        self._client.post_json(FORM_DATA, form.to_wire(exclude_none=False))
        logger.info(
            "Submitted %d form values for task %s", len(form.properties), form.task_id
        )

    def submit_task_action(
        self, task_id: str, form: SubmitTaskActionForm
    ) -> Task | None:
        """Perform a task action (complete, claim, ...).

        Returns the task snapshot the engine sends back, or None when it
        answers with an empty body.

        Raises:
            ValidationException: task_id is empty.
            FlowableDecodeError: The body is not a task.
        """
        _require(task_id, "task_id")
        path = runtime_task(task_id)
        payload = self._client.post_json(path, form.to_wire())
        logger.info("Action %r performed on task %s", form.action, task_id)
        if payload is None:
            return None
        return _parse(Task, payload, path)

    # Processes

    def get_user_processes(self, state: str, query: ProcessListQuery) -> Page[Process]:
        """List historic process instances, filtered by state, with starters resolved.

        ``running`` returns unfinished instances, ``completed`` finished ones;
        any other state returns both.
        """
        params = query.to_wire()
        finished = finished_filter(state)
        if finished is not None:
            params["finished"] = finished
        payload = self._client.get_json(HISTORIC_PROCESS_INSTANCES, params=params)
        page = _parse_page(Process, payload, HISTORIC_PROCESS_INSTANCES)
        self._enricher.enrich_processes(page.data)
        return page

    def get_process(self, process_id: str) -> Process:
        """Return one historic process instance with its starter resolved when possible."""
        _require(process_id, "process_id")
        path = historic_process_instance(process_id)
        process = _parse(Process, self._client.get_json(path), path)
        return self._enricher.enrich_process(process)

    # Identity

    def create_user(self, form: NewUserForm) -> UserInfo:
        payload = self._client.post_json(IDENTITY_USERS, form.to_wire())
        user = _parse(UserInfo, payload, IDENTITY_USERS)
        logger.info("Created user %s", user.id)
        return user

    def get_users(self) -> list[UserInfo]:
        """Return the whole user directory, following pages until total is reached.

        The offset is advanced by what was received, never by the ``start``
        the engine echoes back; an empty page ends the walk.
        """
        users: list[UserInfo] = []
        start = 0
        while True:
            payload = self._client.get_json(
                IDENTITY_USERS,
                params={"start": start, "size": self._directory_page_size},
            )
            page = _parse_page(UserInfo, payload, IDENTITY_USERS)
            users.extend(page.data)
            start += len(page.data)
            if not page.data or start >= page.total:
                break
        return users

    def get_users_by_ids(self, user_ids: Iterable[str]) -> list[UserInfo]:
        wanted = set(user_ids)
        return [user for user in self.get_users() if user.id in wanted]

    # Attachments

    def create_attachment(
        self,
        task_id: str,
        field_name: str,
        file_name: str,
        mime_type: str,
        content: bytes | BinaryIO,
    ) -> Attachment:
        """Upload content as a multipart file field plus metadata fields."""
        _require(task_id, "task_id")
        _require(field_name, "field_name")
        _require(file_name, "file_name")
        data = {"taskId": task_id, "name": field_name, "mimeType": mime_type}
        files = {field_name: (file_name, content, mime_type)}
        payload = self._client.post_multipart(CONTENT_ITEMS, data=data, files=files)
        attachment = _parse(Attachment, payload, CONTENT_ITEMS)
        logger.info("Attached %s to task %s (%s)", file_name, task_id, attachment.id)
        return attachment

    def get_task_attachments(self, task_id: str) -> Page[Attachment]:
        _require(task_id, "task_id")
        payload = self._client.get_json(CONTENT_ITEMS, params={"taskId": task_id})
        return _parse_page(Attachment, payload, CONTENT_ITEMS)
