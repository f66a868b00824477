# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""Unit tests for the structural shape dispatch."""

from __future__ import annotations

import pytest

from checkpoint import ABSENT, ShapeMismatchError, checkpoint
from checkpoint.descriptors import parse_descriptor
from checkpoint.validation import ResultKind, dispatch_shape


def _dispatch(value, **descriptor):
    return dispatch_shape(value, parse_descriptor(descriptor))


@pytest.mark.parametrize(
    ("value", "descriptor", "kind"),
    [
        ("x", {"type": "primitive"}, ResultKind.PRIMITIVE),
        (None, {"type": "primitive"}, ResultKind.PRIMITIVE),
        (ABSENT, {"type": "primitive"}, ResultKind.PRIMITIVE),
        ({}, {"type": "object"}, ResultKind.OBJECT),
        (ABSENT, {"type": "object"}, ResultKind.OBJECT),
        ([1, None, ABSENT], {"type": "array", "arrayType": "primitive"}, ResultKind.ARRAY_OF_PRIMITIVE),
        ([{}], {"type": "array", "arrayType": "object"}, ResultKind.ARRAY_OF_OBJECT),
    ],
)
def test_legal_shapes(value, descriptor, kind):
    assert _dispatch(value, **descriptor) is kind


@pytest.mark.parametrize(
    ("value", "descriptor", "actual"),
    [
        ({}, {"type": "primitive"}, "object"),
        ([], {"type": "primitive"}, "array"),
        (None, {"type": "object"}, "null"),
        ([], {"type": "object"}, "array"),
        ("x", {"type": "array", "arrayType": "primitive"}, "string"),
        ([[]], {"type": "array", "arrayType": "object"}, "array"),
    ],
)
def test_illegal_shapes_raise(value, descriptor, actual):
    with pytest.raises(ShapeMismatchError) as exc_info:
        _dispatch(value, **descriptor)

    assert exc_info.value.actual == actual


def test_two_dimensional_array_scenario():
    with pytest.raises(ShapeMismatchError):
        checkpoint([[]]).validate({"type": "array", "arrayType": "object"})
