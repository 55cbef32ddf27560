"""Print a user's tasks with resolved assignee names.

Usage:
    python -m scripts.list_user_tasks <assignee> [open|completed|all] [size]
State defaults to open, size to 10.
Connection settings come from FLOWABLE_* environment variables or .env.
"""

import sys

from flowable_client.domain.exceptions import FlowableException
from flowable_client.infrastructure.flowable.client import create_flowable_service
from flowable_client.schemas import TaskListQuery
from flowable_client.shared.enums import TaskState
from flowable_client.shared.telemetry import setup_logging


def main() -> None:
    """List tasks for the assignee given in argv."""
    if len(sys.argv) < 2:
        print(
            "Usage: python -m scripts.list_user_tasks <assignee> [open|completed|all] [size]",
            file=sys.stderr,
        )
        sys.exit(1)
    assignee = sys.argv[1]
    state = sys.argv[2] if len(sys.argv) > 2 else TaskState.OPEN.value
    if state not in TaskState.values():
        print(f"Unknown state {state!r}; use one of {TaskState.values()}", file=sys.stderr)
        sys.exit(1)
    size = int(sys.argv[3]) if len(sys.argv) > 3 else 10

    setup_logging()
    try:
        service = create_flowable_service()
        page = service.get_user_tasks(
            state, TaskListQuery(task_assignee=assignee, start=0, size=size)
        )
    except FlowableException as e:
        print(f"{e.error_code}: {e.message}", file=sys.stderr)
        sys.exit(1)

    print(f"{len(page.data)} of {page.total} {state} tasks for {assignee}")
    for task in page.data:
        who = task.assignee_user.display_name if task.assignee_user else task.assignee
        status = "done" if task.is_finished else "open"
        print(f"  {task.id}  [{status}]  {task.name or '-'}  ({who or 'unassigned'})")


if __name__ == "__main__":
    main()
