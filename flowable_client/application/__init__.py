"""Application layer: service interface and identity enrichment.

Depends only on domain and schemas. Infrastructure implements the interface.
"""

from flowable_client.application.interfaces import IFlowableService
from flowable_client.application.services import IdentityEnricher, index_directory

__all__ = [
    "IFlowableService",
    "IdentityEnricher",
    "index_directory",
]
