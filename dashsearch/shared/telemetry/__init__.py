"""Shared telemetry: logging setup, OpenTelemetry config, and tracing helpers."""

from dashsearch.shared.telemetry.logging import get_logger, setup_logging
from dashsearch.shared.telemetry.telemetry import TelemetryConfig, setup_telemetry
from dashsearch.shared.telemetry.tracing import (
    add_span_attributes,
    add_span_event,
    traced,
)

__all__ = [
    "setup_logging",
    "get_logger",
    "TelemetryConfig",
    "setup_telemetry",
    "traced",
    "add_span_attributes",
    "add_span_event",
]
