"""Telemetry package - OpenTelemetry metrics and tracing handles."""

from .metrics import (
    record_validation,
    shape_mismatch_total,
    transform_command_total,
    validate_latency_ms,
    validate_total,
)
from .runtime import get_tracer, meter

__all__ = [
    "get_tracer",
    "meter",
    "record_validation",
    "shape_mismatch_total",
    "transform_command_total",
    "validate_latency_ms",
    "validate_total",
]
