"""Identity enrichment: attach directory users to task and process records.

The engine only returns user ids (task assignee, process starter). This
service fetches the user directory once per call, indexes it by id and
sets ``Task.assignee_user`` / ``Process.started_by``. It is best-effort:
a directory failure is logged and the records are returned unenriched.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Sequence

from flowable_client.domain.exceptions import FlowableException
from flowable_client.schemas.process import Process
from flowable_client.schemas.task import Task
from flowable_client.schemas.user import UserInfo

logger = logging.getLogger(__name__)

DirectoryLoader = Callable[[], Sequence[UserInfo]]


def index_directory(users: Iterable[UserInfo]) -> dict[str, UserInfo]:
    """Map user id to user. The first entry wins when an id repeats."""
    index: dict[str, UserInfo] = {}
    for user in users:
        if user.id:
            index.setdefault(user.id, user)
    return index


class IdentityEnricher:
    """Resolve user ids against the directory and attach the matches.

    Records whose id is empty or unknown to the directory are left as they
    are. Running it again over the same records and directory attaches the
    same users.
    """

    def __init__(self, load_directory: DirectoryLoader) -> None:
        self._load_directory = load_directory

    def resolve(self, user_ids: Iterable[str | None]) -> dict[str, UserInfo]:
        """Return the known users among user_ids; empty dict on directory failure.

        The directory is not fetched when no non-empty id is given.
        """
        wanted = {uid for uid in user_ids if uid}
        if not wanted:
            return {}
        try:
            directory = self._load_directory()
        except FlowableException as e:
            logger.warning(
                "User directory unavailable, skipping enrichment: %s (%s)",
                e.message,
                e.error_code,
            )
            return {}
        index = index_directory(directory)
        resolved = {uid: index[uid] for uid in wanted if uid in index}
        if len(resolved) < len(wanted):
            logger.debug(
                "%d of %d referenced users not in directory",
                len(wanted) - len(resolved),
                len(wanted),
            )
        return resolved

    def enrich_tasks(self, tasks: Sequence[Task]) -> Sequence[Task]:
        """Set assignee_user on every task whose assignee is in the directory."""
        users = self.resolve(task.assignee for task in tasks)
        for task in tasks:
            if task.assignee and task.assignee in users:
                task.assignee_user = users[task.assignee]
        return tasks

    def enrich_processes(self, processes: Sequence[Process]) -> Sequence[Process]:
        """Set started_by on every process whose starter is in the directory."""
        users = self.resolve(proc.start_user_id for proc in processes)
        for proc in processes:
            if proc.start_user_id and proc.start_user_id in users:
                proc.started_by = users[proc.start_user_id]
        return processes

    def enrich_process(self, process: Process) -> Process:
        self.enrich_processes([process])
        return process
