"""Pytest configuration and fixtures for flowable_client.

HTTP is never sent over the network: FlowableRESTClient gets an
httpx.Client whose MockTransport routes requests to FakeEngine.
"""

from collections.abc import Callable
from typing import Any

import httpx
import pytest

from flowable_client.infrastructure.flowable._rest_client import FlowableRESTClient
from flowable_client.infrastructure.flowable.service import FlowableService

BASE_URL = "http://flowable.test"
CONTEXT_ROOT = "flowable-task"

Handler = Callable[[httpx.Request], httpx.Response]


def _raw_path(request: httpx.Request) -> str:
    """Request path as sent on the wire (percent-escapes kept, no query)."""
    return request.url.raw_path.decode("ascii").split("?", 1)[0]


class FakeEngine:
    """Routes (method, path) to canned responses and records every request."""

    def __init__(self) -> None:
        self.routes: dict[tuple[str, str], Handler] = {}
        self.requests: list[httpx.Request] = []

    @staticmethod
    def path(endpoint: str) -> str:
        return f"/{CONTEXT_ROOT}/{endpoint.lstrip('/')}"

    def on(
        self,
        method: str,
        endpoint: str,
        json: Any = None,
        *,
        status: int = 200,
        content: bytes | None = None,
        handler: Handler | None = None,
    ) -> None:
        """Register a response (or a handler) for method + endpoint."""
        if handler is None:

            def handler(request: httpx.Request) -> httpx.Response:
                if content is not None:
                    return httpx.Response(status, content=content)
                return httpx.Response(status, json=json)

        self.routes[(method, self.path(endpoint))] = handler

    def fail(self, method: str, endpoint: str) -> None:
        """Make method + endpoint raise a connection error."""

        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        self.routes[(method, self.path(endpoint))] = handler

    def requests_to(self, method: str, endpoint: str) -> list[httpx.Request]:
        target = self.path(endpoint)
        return [r for r in self.requests if r.method == method and _raw_path(r) == target]

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        handler = self.routes.get((request.method, _raw_path(request)))
        if handler is None:
            return httpx.Response(
                404,
                json={"message": f"No route for {_raw_path(request)}", "exception": "NotFound"},
            )
        return handler(request)


@pytest.fixture
def engine() -> FakeEngine:
    """Fake engine with no routes registered."""
    return FakeEngine()


@pytest.fixture
def http_client(engine: FakeEngine) -> httpx.Client:
    """httpx.Client that answers from the fake engine."""
    with httpx.Client(transport=httpx.MockTransport(engine)) as client:
        yield client


@pytest.fixture
def rest_client(http_client: httpx.Client) -> FlowableRESTClient:
    return FlowableRESTClient(
        BASE_URL,
        "kermit",
        "kermit-pw",
        context_root=CONTEXT_ROOT,
        http_client=http_client,
    )


@pytest.fixture
def service(rest_client: FlowableRESTClient) -> FlowableService:
    """FlowableService without a directory cache."""
    return FlowableService(rest_client)


def users_page(*users: dict[str, Any], start: int = 0, total: int | None = None) -> dict[str, Any]:
    """Identity API envelope around the given user dicts."""
    return {
        "data": list(users),
        "total": len(users) if total is None else total,
        "start": start,
        "size": len(users),
        "sort": "id",
        "order": "asc",
    }


@pytest.fixture
def make_users_page() -> Callable[..., dict[str, Any]]:
    return users_page
