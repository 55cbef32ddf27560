"""Thin Flowable REST API client.

Every call is one synchronous HTTP exchange authenticated with HTTP Basic.
Unless an httpx.Client is injected, each request opens and closes its own
client, so no connection state outlives a call. Nothing is retried.
"""

from __future__ import annotations

import base64
import json
import logging
from typing import Any

import httpx

from flowable_client.core.constants import DEFAULT_CONTEXT_ROOT, DEFAULT_TIMEOUT_SECONDS
from flowable_client.domain.exceptions import (
    FlowableDecodeError,
    FlowableNotConfiguredException,
    FlowableRemoteError,
    FlowableTransportError,
)

logger = logging.getLogger(__name__)

_MAX_ERROR_TEXT = 500


def basic_auth_header(account: str, password: str) -> str:
    """Return the ``Authorization`` value for ``account:password``."""
    token = base64.b64encode(f"{account}:{password}".encode("utf-8")).decode("ascii")
    return f"Basic {token}"


def _remote_error(resp: httpx.Response, path: str) -> FlowableRemoteError:
    """Build a FlowableRemoteError from whatever the engine put in the body."""
    remote_message: str | None = None
    remote_exception: str | None = None
    try:
        body = resp.json()
    except ValueError:
        body = None
    if isinstance(body, dict):
        remote_message = body.get("message") or body.get("errorMessage")
        remote_exception = body.get("exception")
    if remote_message is None and resp.text:
        remote_message = resp.text[:_MAX_ERROR_TEXT]
    return FlowableRemoteError(resp.status_code, path, remote_message, remote_exception)


def _decode(resp: httpx.Response, path: str) -> Any:
    """Decode a JSON body. Empty bodies (e.g. 204) decode to None."""
    raw = resp.content
    if not raw or not raw.strip():
        return None
    try:
        return json.loads(raw)
    except ValueError as e:
        raise FlowableDecodeError(path, f"body is not valid JSON ({e})") from e


class FlowableRESTClient:
    """Lightweight client for the engine's REST APIs.

    All paths are relative to ``<base_url>/<context_root>/`` (see endpoints.py).
    """

    def __init__(
        self,
        base_url: str,
        account: str,
        password: str,
        *,
        context_root: str = DEFAULT_CONTEXT_ROOT,
        timeout: float = DEFAULT_TIMEOUT_SECONDS,
        http_client: httpx.Client | None = None,
    ) -> None:
        if not base_url:
            raise FlowableNotConfiguredException("base address is empty")
        root = base_url.rstrip("/") + "/"
        if context_root.strip("/"):
            root += context_root.strip("/") + "/"
        self._root = root
        self._auth = basic_auth_header(account, password)
        self._timeout = timeout
        self._http = http_client

    @property
    def root(self) -> str:
        return self._root

    def url_for(self, path: str) -> str:
        return self._root + path.lstrip("/")

    def request(
        self,
        method: str,
        path: str,
        *,
        params: dict[str, Any] | None = None,
        json_body: Any = None,
        data: dict[str, Any] | None = None,
        files: dict[str, Any] | None = None,
    ) -> Any:
        """Perform one request and return the decoded JSON body (or None).

        Raises:
            FlowableTransportError: The request could not be completed (network, timeout, redirects or URL).
            FlowableRemoteError: The engine answered with status >= 400.
            FlowableDecodeError: The body cannot be decompressed or is not JSON.
        """
        url = self.url_for(path)
        headers = {"Accept": "application/json", "Authorization": self._auth}
        try:
            if self._http is not None:
                resp = self._http.request(
                    method,
                    url,
                    headers=headers,
                    params=params,
                    json=json_body,
                    data=data,
                    files=files,
                )
            else:
                with httpx.Client(timeout=self._timeout) as client:
                    resp = client.request(
                        method,
                        url,
                        headers=headers,
                        params=params,
                        json=json_body,
                        data=data,
                        files=files,
                    )
        except httpx.DecodingError as e:
            raise FlowableDecodeError(path, f"body could not be decoded ({e})") from e
        except (httpx.RequestError, httpx.InvalidURL) as e:
            raise FlowableTransportError(method, path, str(e) or type(e).__name__) from e
        logger.debug("%s %s -> %s", method, path, resp.status_code)
        if resp.status_code >= 400:
            raise _remote_error(resp, path)
        return _decode(resp, path)

    def get_json(self, path: str, params: dict[str, Any] | None = None) -> Any:
        return self.request("GET", path, params=params)

    def post_json(self, path: str, body: Any) -> Any:
        return self.request("POST", path, json_body=body)

    def post_multipart(
        self, path: str, data: dict[str, Any], files: dict[str, Any]
    ) -> Any:
        return self.request("POST", path, data=data, files=files)
