"""Application interfaces (ports).

No runtime imports from flowable_client.infrastructure.
"""

from flowable_client.application.interfaces.services import IFlowableService

__all__ = ["IFlowableService"]
