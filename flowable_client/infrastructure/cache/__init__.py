"""Cache: opt-in user directory cache for identity enrichment."""

from flowable_client.infrastructure.cache.cache_protocol import DirectoryCacheProtocol
from flowable_client.infrastructure.cache.directory_cache import TTLDirectoryCache

__all__ = [
    "DirectoryCacheProtocol",
    "TTLDirectoryCache",
]
