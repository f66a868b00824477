# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""Structural checks run before any constraint logic.

A descriptor/data disagreement is a contract error, so it is raised as
``ShapeMismatchError`` instead of being folded into the result tree.
"""

from __future__ import annotations

import logging
from typing import Any, Optional

from ..exceptions import ShapeMismatchError
from ..telemetry.metrics import shape_mismatch_total
from .base import (
    ABSENT,
    ArrayKind,
    ResultKind,
    ShapeKind,
    ValidationDescriptor,
    is_mapping,
    is_sequence,
    runtime_kind,
)

logger = logging.getLogger(__name__)


def _is_primitive(value: Any) -> bool:
    return not is_mapping(value) and not is_sequence(value)


def _mismatch(declared: str, value: Any, *, index: Optional[int] = None) -> ShapeMismatchError:
    actual = runtime_kind(value)
    logger.error(
        "Shape mismatch: declared '%s' but received '%s'%s",
        declared,
        actual,
        "" if index is None else f" at index {index}",
    )
    shape_mismatch_total.add(1, {"declared": declared, "actual": actual})
    return ShapeMismatchError(declared, actual, index=index)


def dispatch_shape(value: Any, descriptor: ValidationDescriptor) -> ResultKind:
    """Return the result variant for ``value`` or raise ``ShapeMismatchError``."""

    shape = descriptor.type

    if shape is ShapeKind.PRIMITIVE:
        if not _is_primitive(value):
            raise _mismatch(ShapeKind.PRIMITIVE.value, value)
        return ResultKind.PRIMITIVE

    if shape is ShapeKind.OBJECT:
        if value is not ABSENT and not is_mapping(value):
            raise _mismatch(ShapeKind.OBJECT.value, value)
        return ResultKind.OBJECT

    if not is_sequence(value):
        raise _mismatch(ShapeKind.ARRAY.value, value)

    if descriptor.array_type is ArrayKind.PRIMITIVE:
        for index, element in enumerate(value):
            if not _is_primitive(element):
                raise _mismatch(ArrayKind.PRIMITIVE.value, element, index=index)
        return ResultKind.ARRAY_OF_PRIMITIVE

    for index, element in enumerate(value):
        if not is_mapping(element):
            raise _mismatch(ArrayKind.OBJECT.value, element, index=index)
    return ResultKind.ARRAY_OF_OBJECT


__all__ = ["dispatch_shape"]
