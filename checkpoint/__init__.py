"""checkpoint - structural validation and post-validation transforms."""

__version__ = "0.1.0"

from .core import Checkpoint, checkpoint
from .descriptors import load_descriptor, parse_descriptor
from .exceptions import CheckpointError, ConfigurationError, ShapeMismatchError
from .messages import MESSAGES, ErrorCode
from .transforms import TransformPipeline
from .validation import (
    ABSENT,
    ArrayOfObjectValidationResult,
    ArrayOfPrimitiveValidationResult,
    Constraint,
    FieldResult,
    ObjectValidationResult,
    PrimitiveValidationResult,
    RequireMode,
    ValidationDescriptor,
    ValidationOptions,
    ValidationResult,
    Validator,
)

__all__ = [
    "ABSENT",
    "ArrayOfObjectValidationResult",
    "ArrayOfPrimitiveValidationResult",
    "Checkpoint",
    "CheckpointError",
    "ConfigurationError",
    "Constraint",
    "ErrorCode",
    "FieldResult",
    "MESSAGES",
    "ObjectValidationResult",
    "PrimitiveValidationResult",
    "RequireMode",
    "ShapeMismatchError",
    "TransformPipeline",
    "ValidationDescriptor",
    "ValidationOptions",
    "ValidationResult",
    "Validator",
    "checkpoint",
    "load_descriptor",
    "parse_descriptor",
]
