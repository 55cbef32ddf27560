"""Domain layer: exceptions shared by every other layer.

No dependencies on infrastructure.
"""

from flowable_client.domain.exceptions import (
    FlowableDecodeError,
    FlowableException,
    FlowableNotConfiguredException,
    FlowableRemoteError,
    FlowableTransportError,
    ValidationException,
)

__all__ = [
    "FlowableException",
    "ValidationException",
    "FlowableNotConfiguredException",
    "FlowableTransportError",
    "FlowableDecodeError",
    "FlowableRemoteError",
]
