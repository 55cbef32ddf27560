"""Flowable REST integration: transport, endpoints, service and factory."""

from flowable_client.infrastructure.flowable._rest_client import (
    FlowableRESTClient,
    basic_auth_header,
)
from flowable_client.infrastructure.flowable.client import create_flowable_service
from flowable_client.infrastructure.flowable.service import FlowableService

__all__ = [
    "FlowableRESTClient",
    "FlowableService",
    "basic_auth_header",
    "create_flowable_service",
]
