# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""Unit tests for the single-value constraint evaluator and the message table."""

from __future__ import annotations

import pytest

from checkpoint import ABSENT, checkpoint
from checkpoint.messages import ErrorCode
from checkpoint.validation import Constraint, ConstraintEvaluator, LengthRange, StringRules
from checkpoint.validation.base import BARE_CONTEXT, field_context, runtime_kind


def _codes(value, constraint, **kwargs):
    return ConstraintEvaluator().evaluate(value, constraint, BARE_CONTEXT, **kwargs).codes


# ------------------------------------------------------------------
# Check ordering
# ------------------------------------------------------------------


def test_required_absent_skips_every_other_check():
    constraint = Constraint(is_required=True, type="string", string_validation=StringRules(is_in=()))

    assert _codes(ABSENT, constraint) == [ErrorCode.REQUIRED]


def test_optional_absent_passes_vacuously():
    constraint = Constraint(type="string", string_validation=StringRules(is_in=()))

    assert _codes(ABSENT, constraint) == []


def test_forced_presence_applies_without_is_required():
    assert _codes(ABSENT, Constraint(), force_required=True) == [ErrorCode.REQUIRED]


def test_null_then_type_mismatch():
    assert _codes(None, Constraint(type="string")) == [ErrorCode.NULL_FORBIDDEN, ErrorCode.TYPE_MISMATCH]


def test_allowed_null_bypasses_type_check():
    assert _codes(None, Constraint(allow_null=True, type="number")) == []


def test_type_then_string_rules():
    constraint = Constraint(
        type="number",
        string_validation=StringRules(is_date=True, is_length=LengthRange(min=20, max=1), is_in=("x",)),
    )

    assert _codes("abc", constraint) == [
        ErrorCode.TYPE_MISMATCH,
        ErrorCode.INVALID_DATE,
        ErrorCode.MIN_LENGTH,
        ErrorCode.MAX_LENGTH,
        ErrorCode.NOT_IN_SET,
    ]


def test_exit_asap_stops_at_first_failure():
    constraint = Constraint(type="number", string_validation=StringRules(is_date=True))

    assert _codes("abc", constraint, exit_asap=True) == [ErrorCode.TYPE_MISMATCH]


def test_pass_flag_mirrors_reasons():
    evaluator = ConstraintEvaluator()

    passed = evaluator.evaluate("a", Constraint(type="string"), BARE_CONTEXT)
    failed = evaluator.evaluate(1, Constraint(type="string"), BARE_CONTEXT)

    assert passed.pass_ is True and passed.reasons == []
    assert failed.pass_ is False and len(failed.reasons) == 1


# ------------------------------------------------------------------
# Runtime kinds
# ------------------------------------------------------------------


@pytest.mark.parametrize(
    ("value", "kind"),
    [
        ("s", "string"),
        (1, "number"),
        (1.5, "number"),
        (True, "boolean"),
        (None, "null"),
        (ABSENT, "undefined"),
        ({}, "object"),
        ([], "array"),
        ((1,), "array"),
        (b"x", "bytes"),
        (len, "function"),
    ],
)
def test_runtime_kind(value, kind):
    assert runtime_kind(value) == kind


# ------------------------------------------------------------------
# Message table
# ------------------------------------------------------------------


def test_field_context_appends_object_suffix():
    evaluator = ConstraintEvaluator()
    outcome = evaluator.evaluate(None, Constraint(), field_context("foo"))

    assert outcome.reasons == ["foo does not allow null in object"]


def test_custom_message_table_is_used():
    table = {
        ErrorCode.REQUIRED: lambda label, context=None: f"need {label}",
        ErrorCode.TYPE_MISMATCH: lambda label, expected, received, context=None: f"{label}:{expected}!={received}",
        ErrorCode.NULL_FORBIDDEN: lambda label, context=None: f"no null {label}",
        ErrorCode.REQUIRE_AT_LEAST_ONE: lambda: "need one",
        ErrorCode.INVALID_DATE: lambda label, context=None: "bad date",
        ErrorCode.MIN_LENGTH: lambda label, minimum, actual, context=None: "short",
        ErrorCode.MAX_LENGTH: lambda label, maximum, actual, context=None: "long",
        ErrorCode.NOT_IN_SET: lambda label, allowed, context=None: "nope",
    }

    result = checkpoint({"a": 1}, messages=table).validate(
        {"type": "object", "schema": {"a": {"type": "string"}, "b": {"isRequired": True}}}
    )

    assert result.show_failed_results() == ["a:string!=number", "need b"]
