"""Typed client for the Flowable REST API with user identity enrichment.

Example:
    from flowable_client import TaskListQuery, create_flowable_service

    service = create_flowable_service()
    page = service.get_user_tasks("open", TaskListQuery(task_assignee="kermit"))
"""

from flowable_client.application.interfaces import IFlowableService
from flowable_client.domain.exceptions import (
    FlowableDecodeError,
    FlowableException,
    FlowableNotConfiguredException,
    FlowableRemoteError,
    FlowableTransportError,
    ValidationException,
)
from flowable_client.infrastructure.flowable import (
    FlowableRESTClient,
    FlowableService,
    create_flowable_service,
)
from flowable_client.schemas import (
    Attachment,
    FormProperty,
    FormVariable,
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
from flowable_client.shared.enums import ProcessState, TaskState

__all__ = [
    "Attachment",
    "FlowableDecodeError",
    "FlowableException",
    "FlowableNotConfiguredException",
    "FlowableRESTClient",
    "FlowableRemoteError",
    "FlowableService",
    "FlowableTransportError",
    "FormProperty",
    "FormVariable",
    "IFlowableService",
    "NewUserForm",
    "Page",
    "Process",
    "ProcessListQuery",
    "ProcessState",
    "StartProcessForm",
    "SubmitTaskActionForm",
    "SubmitTaskForm",
    "Task",
    "TaskListQuery",
    "TaskState",
    "UserInfo",
    "ValidationException",
    "create_flowable_service",
]
