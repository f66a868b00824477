# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""Validator - checks a value against a descriptor and returns a result tree.

Processing order:
1. Descriptor parsing (malformed descriptor -> ConfigurationError)
2. Shape dispatch     (declared vs actual shape -> ShapeMismatchError)
3. Constraint evaluation per unit and aggregation into a result variant

Validation NEVER modifies the value and never raises for content-level
failures; those are reported through ``ValidationResult.pass_`` and reasons.
"""

from __future__ import annotations

import time
from typing import Any, Optional

from ..descriptors.parser import DescriptorLike, parse_descriptor
from ..messages import MessageTable
from ..telemetry import get_tracer, record_validation
from .builder import ResultBuilder
from .constraints import ConstraintEvaluator
from .results import ValidationResult
from .shapes import dispatch_shape


class Validator:
    """Validate values against declarative descriptors.

    Example:
        ```python
        validator = Validator()
        result = validator.validate(
            {"type": "object",
             "schema": {"status": {"isRequired": True, "stringValidation": {"isIn": ["ok", "error"]}},
                        "count": {"type": "number"}}},
            {"status": "ok", "count": 42},
        )
        assert result.pass_ is True
        ```
    """

    def __init__(self, messages: Optional[MessageTable] = None):
        self._evaluator = ConstraintEvaluator(messages)
        self._builder = ResultBuilder(self._evaluator)

    def validate(self, descriptor: DescriptorLike, value: Any) -> ValidationResult:
        parsed = parse_descriptor(descriptor)
        started_at = time.perf_counter()

        with get_tracer().start_as_current_span(
            "checkpoint.validate",
            attributes={"checkpoint.type": parsed.type.value},
        ) as span:
            kind = dispatch_shape(value, parsed)
            result = self._builder.build(kind, value, parsed)
            span.set_attribute("checkpoint.pass", result.pass_)

        record_validation(kind.value, result.pass_, started_at)
        return result


__all__ = ["Validator"]
