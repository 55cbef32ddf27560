"""Directory cache protocol (DIP). Only used when caching is opted into."""

from collections.abc import Callable, Sequence
from typing import Protocol

from flowable_client.schemas.user import UserInfo


class DirectoryCacheProtocol(Protocol):
    """Protocol for caching the user directory used by identity enrichment."""

    def get_or_load(
        self, loader: Callable[[], Sequence[UserInfo]]
    ) -> Sequence[UserInfo]:
        """Return the cached directory, calling loader when missing or stale."""
        ...

    def invalidate(self) -> None:
        """Drop the cached directory so the next lookup reloads it."""
        ...
