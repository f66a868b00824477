# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""Constraint evaluation for a single value.

The evaluator is shared by every result shape. It never raises for bad data;
each failing check appends one reason to the unit's ``FieldResult``.

Check order:
1. presence   (required but absent -> stop)
2. absence    (absent and optional -> pass, stop)
3. null       (forbidden null is reported, then the type check still runs;
               an allowed null skips every remaining check; a declared
               "null" type counts as allowing it)
4. type
5. string rules (isDate, isLength.min, isLength.max, isIn)
"""

from __future__ import annotations

import re
from datetime import datetime
from typing import Any, Iterator, List, Optional, Tuple

from ..messages import MESSAGES, ErrorCode, MessageTable
from .base import (
    ABSENT,
    Constraint,
    FieldResult,
    StringRules,
    ValidationContext,
    runtime_kind,
)

_DATE_PATTERN = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}")

# A check yields (code, message) pairs for every failure it finds.
_Failure = Tuple[int, str]


class ConstraintEvaluator:
    """Evaluate one value against one ``Constraint``."""

    def __init__(self, messages: Optional[MessageTable] = None):
        self._messages = messages if messages is not None else MESSAGES

    def message(self, code: int, *args: Any) -> str:
        return self._messages[code](*args)

    def evaluate(
        self,
        value: Any,
        constraint: Constraint,
        context: ValidationContext,
        *,
        exit_asap: bool = False,
        force_required: bool = False,
    ) -> FieldResult:
        """Return the ordered reasons ``value`` fails ``constraint`` with.

        ``force_required`` applies a presence check even when the constraint
        itself does not declare ``is_required`` (used by ``requireMode: all``).
        """

        result = FieldResult()

        if value is ABSENT:
            if constraint.is_required or force_required:
                result.add(ErrorCode.REQUIRED, self._render(ErrorCode.REQUIRED, context))
            return result

        for code, message in self._failures(value, constraint, context):
            result.add(code, message)
            if exit_asap:
                break

        return result

    # ------------------------------------------------------------------
    # Individual checks
    # ------------------------------------------------------------------

    def _failures(self, value: Any, constraint: Constraint, context: ValidationContext) -> Iterator[_Failure]:
        if value is None and constraint.type != "null":
            if constraint.allow_null:
                return
            yield ErrorCode.NULL_FORBIDDEN, self._render(ErrorCode.NULL_FORBIDDEN, context)

        if constraint.type is not None:
            received = runtime_kind(value)
            if received != constraint.type:
                yield ErrorCode.TYPE_MISMATCH, self._render(
                    ErrorCode.TYPE_MISMATCH, context, constraint.type, received
                )

        if isinstance(value, str) and constraint.string_validation is not None:
            yield from self._string_failures(value, constraint.string_validation, context)

    def _string_failures(self, value: str, rules: StringRules, context: ValidationContext) -> Iterator[_Failure]:
        if rules.is_date and not _is_calendar_date(value):
            yield ErrorCode.INVALID_DATE, self._render(ErrorCode.INVALID_DATE, context)

        if rules.is_length is not None:
            length = len(value)
            minimum, maximum = rules.is_length.min, rules.is_length.max
            if minimum is not None and length < minimum:
                yield ErrorCode.MIN_LENGTH, self._render(ErrorCode.MIN_LENGTH, context, minimum, length)
            if maximum is not None and length > maximum:
                yield ErrorCode.MAX_LENGTH, self._render(ErrorCode.MAX_LENGTH, context, maximum, length)

        if rules.is_in is not None and value not in rules.is_in:
            yield ErrorCode.NOT_IN_SET, self._render(ErrorCode.NOT_IN_SET, context, list(rules.is_in))

    def _render(self, code: int, context: ValidationContext, *args: Any) -> str:
        """Format a message with the label first and the context label last."""

        positional: List[Any] = [context.label, *args]
        if context.context is not None:
            positional.append(context.context)
        return self.message(code, *positional)


def _is_calendar_date(value: str) -> bool:
    if not _DATE_PATTERN.fullmatch(value):
        return False
    try:
        datetime.strptime(value, "%Y-%m-%d")
    except ValueError:
        return False
    return True


__all__ = ["ConstraintEvaluator"]
