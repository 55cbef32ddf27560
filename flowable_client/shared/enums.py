"""Shared enumerations for the Flowable client.

State filters accepted by the list operations. Values outside these enums
are still accepted by the service and mean "no filter".
"""

from enum import Enum


class _ValuesMixin:
    """Mixin that adds a values() classmethod to str Enums."""

    @classmethod
    def values(cls) -> list[str]:
        """Return all valid values as strings."""
        return [member.value for member in cls]


class TaskState(_ValuesMixin, str, Enum):
    """State filter for task listings."""

    OPEN = "open"
    COMPLETED = "completed"
    ALL = "all"


class ProcessState(_ValuesMixin, str, Enum):
    """State filter for process instance listings."""

    RUNNING = "running"
    COMPLETED = "completed"
    ALL = "all"


_UNFINISHED = {TaskState.OPEN.value, ProcessState.RUNNING.value}
_FINISHED = {TaskState.COMPLETED.value, ProcessState.COMPLETED.value}


def finished_filter(state: str | Enum | None) -> bool | None:
    """Map a state filter to the engine's ``finished`` query parameter.

    ``open``/``running`` -> False, ``completed`` -> True, anything else
    (``all``, unknown, None) -> None, meaning the parameter is omitted.
    """
    if isinstance(state, Enum):
        state = state.value
    if state in _UNFINISHED:
        return False
    if state in _FINISHED:
        return True
    return None
