"""Application services: identity enrichment."""

from flowable_client.application.services.identity_enrichment import (
    DirectoryLoader,
    IdentityEnricher,
    index_directory,
)

__all__ = [
    "DirectoryLoader",
    "IdentityEnricher",
    "index_directory",
]
