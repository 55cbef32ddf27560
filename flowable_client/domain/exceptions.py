"""Exceptions raised by the Flowable client.

Every failure the client surfaces is a FlowableException subclass so callers
can catch one type. Transport, decode and remote-side failures are kept
apart because callers react to them differently; none of them is retried.
"""

from typing import Any


class FlowableException(Exception):
    """Base exception for all Flowable client errors.

    Attributes:
        message: Human-readable error description.
        error_code: Machine-readable error code.
        details: Additional error context (e.g. path, status_code).
    """

    def __init__(
        self,
        message: str,
        error_code: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize the exception.

        Args:
            message: Human-readable error description.
            error_code: Optional machine-readable code; defaults to class name.
            details: Optional dict of extra context.
        """
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}
        super().__init__(self.message)


class ValidationException(FlowableException):
    """Raised when caller input is rejected before any request is sent."""

    def __init__(self, message: str, field: str | None = None) -> None:
        """Initialize with message and optional field name.

        Args:
            message: Description of the validation failure.
            field: Optional argument or attribute that failed validation.
        """
        details = {"field": field} if field else {}
        super().__init__(message, "VALIDATION_ERROR", details)


class FlowableNotConfiguredException(FlowableException):
    """Raised when the service is built without a usable base address."""

    def __init__(self, reason: str) -> None:
        super().__init__(
            f"Flowable client is not configured: {reason}",
            "NOT_CONFIGURED",
            {"reason": reason},
        )


class FlowableTransportError(FlowableException):
    """Network-level failure (connect, read, timeout). Never retried."""

    def __init__(self, method: str, path: str, reason: str) -> None:
        super().__init__(
            f"{method} {path} failed: {reason}",
            "TRANSPORT_ERROR",
            {"method": method, "path": path, "reason": reason},
        )


class FlowableDecodeError(FlowableException):
    """Response body does not have the shape the operation expects."""

    def __init__(self, path: str, reason: str) -> None:
        super().__init__(
            f"Unexpected response from {path}: {reason}",
            "DECODE_ERROR",
            {"path": path, "reason": reason},
        )


class FlowableRemoteError(FlowableException):
    """The engine answered with an error status.

    Carries whatever the engine reported (Flowable's ``message`` and
    ``exception`` fields, or the raw body text) without interpreting it.
    """

    def __init__(
        self,
        status_code: int,
        path: str,
        remote_message: str | None = None,
        remote_exception: str | None = None,
    ) -> None:
        message = f"Flowable returned {status_code} for {path}"
        if remote_message:
            message = f"{message}: {remote_message}"
        details: dict[str, Any] = {"status_code": status_code, "path": path}
        if remote_message:
            details["remote_message"] = remote_message
        if remote_exception:
            details["remote_exception"] = remote_exception
        self.status_code = status_code
        super().__init__(message, "REMOTE_ERROR", details)
