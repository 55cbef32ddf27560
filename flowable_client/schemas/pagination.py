"""Paginated list envelope shared by every list endpoint."""

from typing import Generic, TypeVar

from pydantic import Field

from flowable_client.schemas.base import FlowableModel

T = TypeVar("T")


class Page(FlowableModel, Generic[T]):
    """``{data, total, start, size, sort, order}`` as returned by the engine.

    ``size`` is what the engine reports (normally ``len(data)``); ``sort`` and
    ``order`` echo the ordering the engine applied.
    """

    data: list[T] = Field(default_factory=list)
    total: int = 0
    start: int = 0
    size: int = 0
    sort: str | None = None
    order: str | None = None

    @property
    def next_start(self) -> int:
        """Offset of the page that follows this one."""
        return self.start + len(self.data)

    @property
    def has_more(self) -> bool:
        return bool(self.data) and self.next_start < self.total

    @property
    def is_consistent(self) -> bool:
        """start + len(data) never exceeds total."""
        return self.next_start <= self.total
