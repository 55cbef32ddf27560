"""Tests for setup_logging."""

import logging

import pytest

from flowable_client.core.config import get_settings
from flowable_client.shared import telemetry
from flowable_client.shared.telemetry import setup_logging


@pytest.fixture(autouse=True)
def settings_env(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv("FLOWABLE_ADDR", "http://engine")
    get_settings.cache_clear()
    httpx_logger = logging.getLogger("httpx")
    level = httpx_logger.level
    yield
    httpx_logger.setLevel(level)
    get_settings.cache_clear()


def test_setup_logging_quiets_httpx_without_debug(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("DEBUG", "false")
    logging.getLogger("httpx").setLevel(logging.NOTSET)

    setup_logging()

    assert logging.getLogger("httpx").level == logging.WARNING


def test_setup_logging_leaves_httpx_alone_when_debugging(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("DEBUG", "true")
    logging.getLogger("httpx").setLevel(logging.NOTSET)

    setup_logging()

    assert logging.getLogger("httpx").level == logging.NOTSET


def test_telemetry_exports_only_setup_logging() -> None:
    assert telemetry.__all__ == ["setup_logging"]
