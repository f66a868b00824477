# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""Assemble evaluator outcomes into one of the four result variants.

Require modes:
- ``none``: only the constraints themselves decide.
- ``all``: every schema field (or array element) must be present; absence
  fails with the "required" reason even when the constraint never declared
  ``is_required``.
- ``atLeastOne``: at least one schema field (or element) must be present;
  otherwise a synthetic failure is reported under ``requireMode``.

``exit_asap`` stops at the first unit with a failing reason. Units already
produced are kept; skipped units are not backfilled.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Dict, List, Mapping, Sequence, Tuple

from ..messages import ErrorCode
from .base import (
    ABSENT,
    BARE_CONTEXT,
    REQUIRE_MODE_KEY,
    Constraint,
    FieldResult,
    RequireMode,
    ResultKind,
    ValidationDescriptor,
    ValidationOptions,
    field_context,
    is_mapping,
)
from .constraints import ConstraintEvaluator
from .results import (
    ArrayOfObjectValidationResult,
    ArrayOfPrimitiveValidationResult,
    ArrayResults,
    ObjectResults,
    ObjectValidationResult,
    PrimitiveResults,
    PrimitiveValidationResult,
    ValidationResult,
)

logger = logging.getLogger(__name__)

_ObjectOutcome = Tuple[Dict[str, FieldResult], List[str]]


class ResultBuilder:
    """Run the evaluator over every unit of a value and aggregate the outcome."""

    def __init__(self, evaluator: ConstraintEvaluator):
        self._evaluator = evaluator
        self._builders: Dict[ResultKind, Callable[[Any, ValidationDescriptor], ValidationResult]] = {
            ResultKind.PRIMITIVE: self._build_primitive,
            ResultKind.OBJECT: self._build_object,
            ResultKind.ARRAY_OF_PRIMITIVE: self._build_primitive_array,
            ResultKind.ARRAY_OF_OBJECT: self._build_object_array,
        }

    def build(self, kind: ResultKind, value: Any, descriptor: ValidationDescriptor) -> ValidationResult:
        logger.debug("Building %s result (options=%s)", kind.value, descriptor.options)
        return self._builders[kind](value, descriptor)

    # ------------------------------------------------------------------
    # Variants
    # ------------------------------------------------------------------

    def _build_primitive(self, value: Any, descriptor: ValidationDescriptor) -> ValidationResult:
        outcome = self._evaluator.evaluate(
            value,
            descriptor.unit_constraint(),
            BARE_CONTEXT,
            exit_asap=descriptor.options.exit_asap,
        )
        return PrimitiveValidationResult(outcome.pass_, value, PrimitiveResults(data=outcome))

    def _build_object(self, value: Any, descriptor: ValidationDescriptor) -> ValidationResult:
        outcomes, missing = self._evaluate_object(value, descriptor.field_constraints(), descriptor.options)
        passed = all(outcome.pass_ for outcome in outcomes.values())
        return ObjectValidationResult(passed, value, ObjectResults(data=outcomes, missing=missing))

    def _build_primitive_array(self, value: Sequence[Any], descriptor: ValidationDescriptor) -> ValidationResult:
        options = descriptor.options
        constraint = descriptor.unit_constraint()
        results = ArrayResults()

        for index, element in enumerate(value):
            outcome = self._evaluator.evaluate(
                element,
                constraint,
                BARE_CONTEXT,
                exit_asap=options.exit_asap,
                force_required=options.require_mode is RequireMode.ALL,
            )
            results.data.append(outcome)
            if outcome.missing_only:
                results.missing.append(index)
            if options.exit_asap and not outcome.pass_:
                logger.debug("exitASAP: stopping primitive array at index %d", index)
                break
        else:
            if options.require_mode is RequireMode.AT_LEAST_ONE and all(element is ABSENT for element in value):
                results.require_mode = self._at_least_one_failure()

        results.pass_ = results.require_mode is None and all(outcome.pass_ for outcome in results.data)
        return ArrayOfPrimitiveValidationResult(results.pass_, value, results)

    def _build_object_array(self, value: Sequence[Mapping[str, Any]], descriptor: ValidationDescriptor) -> ValidationResult:
        options = descriptor.options
        fields = descriptor.field_constraints()
        results = ArrayResults()

        for index, element in enumerate(value):
            outcomes, missing = self._evaluate_object(element, fields, options)
            results.data.append(outcomes)
            results.missing.extend((index, name) for name in missing)
            if options.exit_asap and not all(outcome.pass_ for outcome in outcomes.values()):
                logger.debug("exitASAP: stopping object array at index %d", index)
                break

        results.pass_ = all(outcome.pass_ for element in results.data for outcome in element.values())
        return ArrayOfObjectValidationResult(results.pass_, value, results)

    # ------------------------------------------------------------------
    # Shared object algorithm
    # ------------------------------------------------------------------

    def _evaluate_object(
        self,
        value: Any,
        fields: Mapping[str, Constraint],
        options: ValidationOptions,
    ) -> _ObjectOutcome:
        source: Mapping[str, Any] = value if is_mapping(value) else {}
        force_required = options.require_mode is RequireMode.ALL
        outcomes: Dict[str, FieldResult] = {}
        missing: List[str] = []

        for name, constraint in fields.items():
            outcome = self._evaluator.evaluate(
                source.get(name, ABSENT),
                constraint,
                field_context(name),
                exit_asap=options.exit_asap,
                force_required=force_required,
            )
            outcomes[name] = outcome
            if outcome.missing_only:
                missing.append(name)
            if options.exit_asap and not outcome.pass_:
                logger.debug("exitASAP: stopping object at field '%s'", name)
                return outcomes, missing

        if options.require_mode is RequireMode.AT_LEAST_ONE and not any(
            source.get(name, ABSENT) is not ABSENT for name in fields
        ):
            outcomes[REQUIRE_MODE_KEY] = self._at_least_one_failure()

        return outcomes, missing

    def _at_least_one_failure(self) -> FieldResult:
        outcome = FieldResult()
        outcome.add(ErrorCode.REQUIRE_AT_LEAST_ONE, self._evaluator.message(ErrorCode.REQUIRE_AT_LEAST_ONE))
        return outcome


__all__ = ["ResultBuilder"]
