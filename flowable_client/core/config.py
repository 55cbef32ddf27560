"""Client configuration (settings and environment).

Single source of truth for connection settings. Uses pydantic-settings
with .env support. FLOWABLE_ADDR is validated at load time. Settings are
only read by the service factory; the transport and service receive plain
values at construction.
"""

from functools import lru_cache

from pydantic import SecretStr, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from flowable_client.core.constants import (
    DEFAULT_CONTEXT_ROOT,
    DEFAULT_DIRECTORY_PAGE_SIZE,
    DEFAULT_TIMEOUT_SECONDS,
)


class Settings(BaseSettings):
    """Client settings loaded from environment and .env.

    All settings are optional with defaults except flowable_addr, which is
    validated in validate_required.
    """

    # App
    app_name: str = "flowable-client"
    debug: bool = False

    # Remote engine: base address (scheme + host + optional prefix) and REST account
    flowable_addr: str = ""
    flowable_rest_account: str = ""
    flowable_rest_passwd: SecretStr = SecretStr("")
    # Web application the REST APIs are mounted under (e.g. flowable-task, flowable-rest)
    flowable_context_root: str = DEFAULT_CONTEXT_ROOT
    flowable_timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS

    # Identity directory
    flowable_directory_page_size: int = DEFAULT_DIRECTORY_PAGE_SIZE
    # Seconds to reuse a fetched directory for enrichment; 0 disables the cache.
    flowable_directory_cache_ttl: int = 0

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
    )

    @model_validator(mode="after")
    def validate_required(self) -> "Settings":
        """Validate the base address and numeric limits."""
        if not self.flowable_addr:
            raise ValueError(
                "FLOWABLE_ADDR is required (e.g. http://localhost:8080/). "
                "Set in environment or .env file."
            )
        if not self.flowable_addr.startswith(("http://", "https://")):
            raise ValueError(
                f"FLOWABLE_ADDR must start with http:// or https://, got: {self.flowable_addr!r}"
            )
        if self.flowable_timeout_seconds <= 0:
            raise ValueError("FLOWABLE_TIMEOUT_SECONDS must be positive")
        if self.flowable_directory_page_size <= 0:
            raise ValueError("FLOWABLE_DIRECTORY_PAGE_SIZE must be positive")
        if self.flowable_directory_cache_ttl < 0:
            raise ValueError("FLOWABLE_DIRECTORY_CACHE_TTL must be >= 0")
        return self


@lru_cache
def get_settings() -> Settings:
    """Return cached client settings (single instance per process).

    Validation runs on first call, not at import time. In tests, call
    get_settings.cache_clear() before overriding env vars so the next
    get_settings() uses the new values.

    Returns:
        Loaded and validated Settings instance.
    """
    return Settings()
