"""Validation package - constraint checking over primitives, objects and arrays.

This package provides pure validation (constraint checking). No transformation
happens here; see ``checkpoint.transforms`` for that.
"""

from .base import (
    ABSENT,
    ArrayKind,
    Constraint,
    FieldResult,
    LengthRange,
    RequireMode,
    ResultKind,
    ShapeKind,
    StringRules,
    ValidationContext,
    ValidationDescriptor,
    ValidationOptions,
)
from .builder import ResultBuilder
from .constraints import ConstraintEvaluator
from .results import (
    ArrayOfObjectValidationResult,
    ArrayOfPrimitiveValidationResult,
    ObjectValidationResult,
    PrimitiveValidationResult,
    ValidationResult,
)
from .shapes import dispatch_shape
from .validator import Validator

__all__ = [
    "ABSENT",
    "ArrayKind",
    "ArrayOfObjectValidationResult",
    "ArrayOfPrimitiveValidationResult",
    "Constraint",
    "ConstraintEvaluator",
    "FieldResult",
    "LengthRange",
    "ObjectValidationResult",
    "PrimitiveValidationResult",
    "RequireMode",
    "ResultBuilder",
    "ResultKind",
    "ShapeKind",
    "StringRules",
    "ValidationContext",
    "ValidationDescriptor",
    "ValidationOptions",
    "ValidationResult",
    "Validator",
    "dispatch_shape",
]
