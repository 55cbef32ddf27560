"""In-memory TTL cache for the user directory.

Opt-in only: without it every enrichment fetches the directory again.
Loader failures propagate and leave the previous entry untouched.
"""

from __future__ import annotations

import logging
import threading
import time
from collections.abc import Callable, Sequence

from flowable_client.schemas.user import UserInfo

logger = logging.getLogger(__name__)


class TTLDirectoryCache:
    """Holds one directory snapshot for ``ttl_seconds``."""

    def __init__(
        self,
        ttl_seconds: float,
        *,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        """Initialize the cache.

        Args:
            ttl_seconds: How long a loaded directory is reused. Must be positive.
            clock: Monotonic time source (injectable for tests).
        """
        if ttl_seconds <= 0:
            raise ValueError("ttl_seconds must be positive")
        self._ttl = ttl_seconds
        self._clock = clock
        self._lock = threading.Lock()
        self._users: tuple[UserInfo, ...] | None = None
        self._loaded_at = 0.0

    def get_or_load(
        self, loader: Callable[[], Sequence[UserInfo]]
    ) -> Sequence[UserInfo]:
        with self._lock:
            now = self._clock()
            if self._users is not None and now - self._loaded_at < self._ttl:
                return self._users
            users = tuple(loader())
            self._users = users
            self._loaded_at = now
            logger.debug("User directory cached (%d users)", len(users))
            return users

    def invalidate(self) -> None:
        with self._lock:
            self._users = None
