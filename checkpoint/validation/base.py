# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""Core data structures shared by the validation engine."""

from __future__ import annotations

import numbers
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Mapping, Optional, Sequence, Tuple, Union

from ..messages import ErrorCode


class _Absent:
    """Marker for a value that is not there at all (as opposed to ``None``)."""

    _instance: Optional["_Absent"] = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "ABSENT"

    def __bool__(self) -> bool:
        return False

    def __copy__(self):
        return self

    def __deepcopy__(self, memo):
        return self

    def __reduce__(self):
        return (_Absent, ())


ABSENT = _Absent()


def is_sequence(value: Any) -> bool:
    return isinstance(value, Sequence) and not isinstance(value, (str, bytes, bytearray))


def is_mapping(value: Any) -> bool:
    return isinstance(value, Mapping)


KNOWN_KINDS = frozenset(
    {"string", "number", "boolean", "null", "object", "array", "bytes", "function", "undefined"}
)


def runtime_kind(value: Any) -> str:
    """Return the type tag a value is compared against."""

    if value is ABSENT:
        return "undefined"
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, numbers.Number):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, (bytes, bytearray)):
        return "bytes"
    if is_mapping(value):
        return "object"
    if is_sequence(value):
        return "array"
    if callable(value):
        return "function"
    return type(value).__name__


class ShapeKind(str, Enum):
    PRIMITIVE = "primitive"
    OBJECT = "object"
    ARRAY = "array"


class ArrayKind(str, Enum):
    PRIMITIVE = "primitive"
    OBJECT = "object"


class ResultKind(str, Enum):
    """Discriminant of the four result variants."""

    PRIMITIVE = "primitive"
    OBJECT = "object"
    ARRAY_OF_PRIMITIVE = "arrayOfPrimitive"
    ARRAY_OF_OBJECT = "arrayOfObject"


class RequireMode(str, Enum):
    NONE = "none"
    ALL = "all"
    AT_LEAST_ONE = "atLeastOne"


@dataclass(frozen=True)
class LengthRange:
    min: Optional[int] = None
    max: Optional[int] = None


@dataclass(frozen=True)
class StringRules:
    is_date: bool = False
    is_length: Optional[LengthRange] = None
    is_in: Optional[Tuple[str, ...]] = None


@dataclass(frozen=True)
class Constraint:
    """Rule set applied to one scalar field or array element."""

    is_required: bool = False
    allow_null: bool = False
    type: Optional[str] = None
    string_validation: Optional[StringRules] = None


@dataclass(frozen=True)
class ValidationOptions:
    exit_asap: bool = False
    require_mode: RequireMode = RequireMode.NONE


Schema = Union[Constraint, Mapping[str, Constraint]]


@dataclass(frozen=True)
class ValidationDescriptor:
    """Declared shape, constraints and options for one ``validate`` call."""

    type: ShapeKind
    array_type: Optional[ArrayKind] = None
    schema: Optional[Schema] = None
    options: ValidationOptions = field(default_factory=ValidationOptions)

    @property
    def is_keyed(self) -> bool:
        return self.type is ShapeKind.OBJECT or self.array_type is ArrayKind.OBJECT

    def unit_constraint(self) -> Constraint:
        if isinstance(self.schema, Constraint):
            return self.schema
        return Constraint()

    def field_constraints(self) -> Mapping[str, Constraint]:
        if isinstance(self.schema, Mapping):
            return self.schema
        return {}


@dataclass(frozen=True)
class ValidationContext:
    """Label and surrounding context threaded into every message."""

    label: str
    context: Optional[str] = None


BARE_CONTEXT = ValidationContext(label="Value")
OBJECT_CONTEXT_NAME = "object"


def field_context(field_name: str) -> ValidationContext:
    return ValidationContext(label=field_name, context=OBJECT_CONTEXT_NAME)


@dataclass
class FieldResult:
    """Outcome for one validated unit: pass/fail plus ordered reasons."""

    reasons: List[str] = field(default_factory=list)
    codes: List[int] = field(default_factory=list, repr=False)

    @property
    def pass_(self) -> bool:
        return not self.reasons

    @property
    def missing_only(self) -> bool:
        """True when the unit failed solely because it was required but absent."""

        return self.codes == [ErrorCode.REQUIRED]

    def add(self, code: int, message: str) -> None:
        self.codes.append(code)
        self.reasons.append(message)

    def to_dict(self) -> Dict[str, Any]:
        return {"pass": self.pass_, "reasons": list(self.reasons)}


REQUIRE_MODE_KEY = "requireMode"


__all__ = [
    "ABSENT",
    "ArrayKind",
    "BARE_CONTEXT",
    "Constraint",
    "FieldResult",
    "KNOWN_KINDS",
    "LengthRange",
    "REQUIRE_MODE_KEY",
    "RequireMode",
    "ResultKind",
    "Schema",
    "ShapeKind",
    "StringRules",
    "ValidationContext",
    "ValidationDescriptor",
    "ValidationOptions",
    "field_context",
    "is_mapping",
    "is_sequence",
    "runtime_kind",
]
