"""Pydantic records exchanged with the engine."""

from flowable_client.schemas.attachment import Attachment
from flowable_client.schemas.forms import (
    FormProperty,
    ProcessListQuery,
    StartProcessForm,
    SubmitTaskActionForm,
    SubmitTaskForm,
    TaskListQuery,
)
from flowable_client.schemas.pagination import Page
from flowable_client.schemas.process import Process
from flowable_client.schemas.task import FormVariable, Task
from flowable_client.schemas.user import NewUserForm, UserInfo

__all__ = [
    "Attachment",
    "FormProperty",
    "FormVariable",
    "NewUserForm",
    "Page",
    "Process",
    "ProcessListQuery",
    "StartProcessForm",
    "SubmitTaskActionForm",
    "SubmitTaskForm",
    "Task",
    "TaskListQuery",
    "UserInfo",
]
