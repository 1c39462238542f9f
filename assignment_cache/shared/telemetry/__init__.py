"""Shared telemetry: logging setup, OpenTelemetry config, and tracing helpers."""

from assignment_cache.shared.telemetry.logging import get_logger, setup_logging
from assignment_cache.shared.telemetry.telemetry import (
    TelemetryConfig,
    get_telemetry,
    get_tracer,
    set_telemetry,
)
from assignment_cache.shared.telemetry.tracing import TracedOperation

__all__ = [
    "setup_logging",
    "get_logger",
    "TelemetryConfig",
    "get_telemetry",
    "set_telemetry",
    "get_tracer",
    "TracedOperation",
]
