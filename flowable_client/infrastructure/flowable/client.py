"""Service factory: builds FlowableService from settings.

Reads FLOWABLE_ADDR, FLOWABLE_REST_ACCOUNT and FLOWABLE_REST_PASSWD (plus
the optional timeout, context root and directory cache settings) and
passes them explicitly to the transport and service. Every call returns a
new service; there is no module-level instance.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import httpx

from flowable_client.domain.exceptions import FlowableNotConfiguredException
from flowable_client.infrastructure.cache.directory_cache import TTLDirectoryCache
from flowable_client.infrastructure.flowable._rest_client import FlowableRESTClient
from flowable_client.infrastructure.flowable.service import FlowableService

if TYPE_CHECKING:
    from flowable_client.core.config import Settings

logger = logging.getLogger(__name__)


def create_flowable_service(
    settings: "Settings | None" = None,
    *,
    http_client: httpx.Client | None = None,
) -> FlowableService:
    """Create a FlowableService from settings.

    Args:
        settings: Client settings; if None, uses get_settings().
        http_client: Optional httpx.Client to reuse for every request
            (e.g. a client with a MockTransport in tests). Not closed by us.

    Returns:
        FlowableService wired with its own FlowableRESTClient.

    Raises:
        FlowableNotConfiguredException: Settings could not be loaded.
    """
    if settings is None:
        from pydantic import ValidationError

        from flowable_client.core.config import get_settings

        try:
            settings = get_settings()
        except ValidationError as e:
            raise FlowableNotConfiguredException(
                f"invalid settings ({e.error_count()} errors)"
            ) from e

    client = FlowableRESTClient(
        settings.flowable_addr,
        settings.flowable_rest_account,
        settings.flowable_rest_passwd.get_secret_value(),
        context_root=settings.flowable_context_root,
        timeout=settings.flowable_timeout_seconds,
        http_client=http_client,
    )
    directory_cache = None
    if settings.flowable_directory_cache_ttl > 0:
        directory_cache = TTLDirectoryCache(settings.flowable_directory_cache_ttl)
        logger.info(
            "User directory cache enabled (ttl=%ss)",
            settings.flowable_directory_cache_ttl,
        )
    return FlowableService(
        client,
        directory_cache=directory_cache,
        directory_page_size=settings.flowable_directory_page_size,
    )
