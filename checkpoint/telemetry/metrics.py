# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""Metric instrument definitions for checkpoint."""

from __future__ import annotations

import time

from .runtime import meter

validate_total = meter.create_counter(
    name="checkpoint.validate.total",
    description="Counts validate() calls partitioned by result shape and outcome.",
    unit="1",
)

validate_latency_ms = meter.create_histogram(
    name="checkpoint.validate.latency.ms",
    description="Time taken to build one validation result tree.",
    unit="ms",
)

shape_mismatch_total = meter.create_counter(
    name="checkpoint.shape_mismatch.total",
    description="Counts validate() calls rejected because the data shape disagreed with the descriptor.",
    unit="1",
)

transform_command_total = meter.create_counter(
    name="checkpoint.transform.command.total",
    description="Counts transform commands applied, partitioned by command name.",
    unit="1",
)


def record_validation(shape: str, passed: bool, started_at: float) -> None:
    """Record outcome and latency for one validate() call.

    Args:
        shape: Result variant discriminant ("object", "arrayOfPrimitive", ...)
        passed: Top-level pass flag of the result
        started_at: Timestamp from time.perf_counter() when validation started
    """
    duration_ms = (time.perf_counter() - started_at) * 1000.0
    outcome = "pass" if passed else "fail"
    validate_latency_ms.record(duration_ms, {"shape": shape, "outcome": outcome})
    validate_total.add(1, {"shape": shape, "outcome": outcome})


__all__ = [
    "record_validation",
    "shape_mismatch_total",
    "transform_command_total",
    "validate_latency_ms",
    "validate_total",
]
