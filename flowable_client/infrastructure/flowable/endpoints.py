"""Engine REST endpoints (paths relative to ``<addr>/<context root>/``).

Single source of truth for the resources the client talks to. Collection
paths keep the trailing slash the engine's REST servlets expect.

Example:
    from flowable_client.infrastructure.flowable.endpoints import HISTORIC_TASK_INSTANCES

    client.get_json(HISTORIC_TASK_INSTANCES, params={"taskAssignee": "kermit"})
"""

from urllib.parse import quote

# Form engine
FORM_INSTANCE_MODEL = "form-api/form/form-instance-model"

# Process engine: runtime
PROCESS_INSTANCES = "process-api/runtime/process-instances/"
RUNTIME_TASKS = "process-api/runtime/tasks/"
FORM_DATA = "process-api/form/form-data/"

# Process engine: history
HISTORIC_TASK_INSTANCES = "process-api/history/historic-task-instances/"
HISTORIC_PROCESS_INSTANCES = "process-api/history/historic-process-instances/"

# Identity
IDENTITY_USERS = "process-api/identity/users/"

# Content engine
CONTENT_ITEMS = "content-api/content-service/content-items/"


def _segment(value: str) -> str:
    return quote(value, safe="")


def runtime_task(task_id: str) -> str:
    """Path of a single runtime task (task actions are POSTed here)."""
    return f"{RUNTIME_TASKS}{_segment(task_id)}"


def historic_process_instance(process_id: str) -> str:
    """Path of a single historic process instance."""
    return f"{HISTORIC_PROCESS_INSTANCES}{_segment(process_id)}"
