# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""Default message catalog: numeric error code -> message formatter.

The validation engine only knows each code's positional arguments; the wording
lives here and can be replaced by passing another table to ``checkpoint()``.
"""

from __future__ import annotations

from enum import IntEnum
from typing import Any, Callable, Mapping, Optional, Sequence


class ErrorCode(IntEnum):
    REQUIRED = 0
    TYPE_MISMATCH = 1
    NULL_FORBIDDEN = 2
    REQUIRE_AT_LEAST_ONE = 3
    INVALID_DATE = 4
    MIN_LENGTH = 5
    MAX_LENGTH = 6
    NOT_IN_SET = 7


MessageTable = Mapping[int, Callable[..., str]]


def _where(context: Optional[str]) -> str:
    return f" in {context}" if context else ""


def _required(label: str, context: Optional[str] = None) -> str:
    return f"{label} is required{_where(context)}"


def _type_mismatch(label: str, expected: str, received: str, context: Optional[str] = None) -> str:
    return f'{label} only allows "{expected}" type. Received "{received}" type{_where(context)}.'


def _null_forbidden(label: str, context: Optional[str] = None) -> str:
    return f"{label} does not allow null{_where(context)}"


def _require_at_least_one() -> str:
    return "At least one value is required"


def _invalid_date(label: str, context: Optional[str] = None) -> str:
    return f"{label} is not a valid YYYY-MM-DD date{_where(context)}"


def _min_length(label: str, minimum: int, actual: int, context: Optional[str] = None) -> str:
    return f"{label} must be at least {minimum} characters long{_where(context)}. Received length {actual}."


def _max_length(label: str, maximum: int, actual: int, context: Optional[str] = None) -> str:
    return f"{label} must be at most {maximum} characters long{_where(context)}. Received length {actual}."


def _not_in_set(label: str, allowed: Sequence[Any], context: Optional[str] = None) -> str:
    choices = ", ".join(f'"{item}"' for item in allowed)
    return f"{label} must be one of [{choices}]{_where(context)}"


MESSAGES: MessageTable = {
    ErrorCode.REQUIRED: _required,
    ErrorCode.TYPE_MISMATCH: _type_mismatch,
    ErrorCode.NULL_FORBIDDEN: _null_forbidden,
    ErrorCode.REQUIRE_AT_LEAST_ONE: _require_at_least_one,
    ErrorCode.INVALID_DATE: _invalid_date,
    ErrorCode.MIN_LENGTH: _min_length,
    ErrorCode.MAX_LENGTH: _max_length,
    ErrorCode.NOT_IN_SET: _not_in_set,
}


__all__ = ["ErrorCode", "MESSAGES", "MessageTable"]
