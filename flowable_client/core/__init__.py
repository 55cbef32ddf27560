"""Core: settings loading.

Single place for connection settings.
"""

from flowable_client.core.config import Settings, get_settings

__all__ = ["Settings", "get_settings"]
