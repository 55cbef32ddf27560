"""Shared telemetry: logging setup."""

from flowable_client.shared.telemetry.logging import setup_logging

__all__ = ["setup_logging"]
