"""Tests for client exceptions (error_code, message, details)."""

from flowable_client.domain.exceptions import (
    FlowableDecodeError,
    FlowableException,
    FlowableNotConfiguredException,
    FlowableRemoteError,
    FlowableTransportError,
    ValidationException,
)


def test_flowable_exception_default_error_code() -> None:
    """Base FlowableException uses class name as error_code when not provided."""
    exc = FlowableException("Something failed")
    assert exc.message == "Something failed"
    assert exc.error_code == "FlowableException"
    assert exc.details == {}


def test_flowable_exception_custom_error_code_and_details() -> None:
    exc = FlowableException("Oops", error_code="CUSTOM", details={"key": "value"})
    assert exc.error_code == "CUSTOM"
    assert exc.details == {"key": "value"}
    assert str(exc) == "Oops"


def test_validation_exception() -> None:
    exc = ValidationException("task_id must not be empty", field="task_id")
    assert exc.error_code == "VALIDATION_ERROR"
    assert exc.details == {"field": "task_id"}


def test_validation_exception_without_field() -> None:
    exc = ValidationException("Invalid")
    assert exc.details == {}


def test_transport_error() -> None:
    exc = FlowableTransportError("GET", "process-api/x", "connection refused")
    assert exc.error_code == "TRANSPORT_ERROR"
    assert exc.message == "GET process-api/x failed: connection refused"
    assert exc.details == {"method": "GET", "path": "process-api/x", "reason": "connection refused"}


def test_decode_error() -> None:
    exc = FlowableDecodeError("process-api/x", "response has no process instance id")
    assert exc.error_code == "DECODE_ERROR"
    assert "process-api/x" in exc.message


def test_remote_error_with_remote_details() -> None:
    exc = FlowableRemoteError(400, "process-api/x", "Bad request", "FlowableIllegalArgumentException")
    assert exc.status_code == 400
    assert exc.error_code == "REMOTE_ERROR"
    assert exc.message == "Flowable returned 400 for process-api/x: Bad request"
    assert exc.details == {
        "status_code": 400,
        "path": "process-api/x",
        "remote_message": "Bad request",
        "remote_exception": "FlowableIllegalArgumentException",
    }


def test_remote_error_without_body() -> None:
    exc = FlowableRemoteError(502, "process-api/x")
    assert exc.message == "Flowable returned 502 for process-api/x"
    assert exc.details == {"status_code": 502, "path": "process-api/x"}


def test_not_configured() -> None:
    exc = FlowableNotConfiguredException("base address is empty")
    assert exc.error_code == "NOT_CONFIGURED"
    assert exc.details == {"reason": "base address is empty"}


def test_all_errors_share_base_class() -> None:
    for exc in (
        ValidationException("x"),
        FlowableTransportError("GET", "p", "r"),
        FlowableDecodeError("p", "r"),
        FlowableRemoteError(500, "p"),
        FlowableNotConfiguredException("r"),
    ):
        assert isinstance(exc, FlowableException)
