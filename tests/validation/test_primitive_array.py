# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""Unit tests for arrays of primitive values sharing one element constraint."""

from __future__ import annotations

import pytest

from checkpoint import ABSENT, ShapeMismatchError, checkpoint
from checkpoint.messages import MESSAGES, ErrorCode
from checkpoint.validation import ArrayOfPrimitiveValidationResult

ERRS = MESSAGES


def _validate(value, schema=None, **options):
    descriptor = {"type": "array", "arrayType": "primitive"}
    if schema is not None:
        descriptor["schema"] = schema
    if options:
        descriptor["options"] = options
    return checkpoint(value).validate(descriptor)


# ------------------------------------------------------------------
# Shape checks
# ------------------------------------------------------------------


@pytest.mark.parametrize("value", [True, 123, "hey", None, ABSENT, {}])
def test_non_array_data_raises(value):
    with pytest.raises(ShapeMismatchError):
        _validate(value)


def test_object_elements_raise():
    with pytest.raises(ShapeMismatchError) as exc_info:
        _validate(["ok", {}])

    assert exc_info.value.index == 1


def test_nested_array_elements_raise():
    with pytest.raises(ShapeMismatchError):
        _validate([[]])


def test_empty_array_passes():
    result = _validate([])

    assert isinstance(result, ArrayOfPrimitiveValidationResult)
    assert result.pass_ is True
    assert result.results.data == []


def test_tuples_are_accepted_as_arrays():
    assert _validate(("a", "b"), {"type": "string"}).pass_ is True


# ------------------------------------------------------------------
# Element results
# ------------------------------------------------------------------


def test_basic_pass():
    result = _validate(["ABCD", "EFG"], {"type": "string"})

    assert len(result.results.data) == 2
    assert result.results.pass_ is True
    assert result.pass_ is True


def test_basic_failure():
    result = _validate(["ABCD", 123], {"type": "string"})

    assert len(result.results.data) == 2
    assert result.results.data[1].reasons == [ERRS[1]("Value", "string", "number")]
    assert result.results.pass_ is False
    assert result.pass_ is False


def test_exit_asap_stops_after_first_failing_element():
    result = _validate(["ABCD", 123, "EFG"], {"type": "string"}, exitASAP=True)

    assert len(result.results.data) == 2
    assert result.results.pass_ is False
    assert result.pass_ is False


def test_missing_indices_for_absent_required_elements():
    result = _validate(["ABCD", ABSENT, ABSENT, "EFG", "HIJK"], {"type": "string", "isRequired": True})

    assert len(result.results.data) == 5
    assert result.results.missing == [1, 2]
    assert result.results.pass_ is False
    assert result.pass_ is False


def test_null_element_is_not_missing():
    result = _validate(["ABCD", None], {"type": "string", "isRequired": True})

    assert result.results.missing == []
    assert result.results.data[1].codes == [ErrorCode.NULL_FORBIDDEN, ErrorCode.TYPE_MISMATCH]


def test_all_required_values_present():
    result = _validate(["ABCD", "imastring", "imastring2", "EFG", "HIJK"], {"type": "string", "isRequired": True})

    assert len(result.results.data) == 5
    assert result.results.missing == []
    assert result.pass_ is True


# ------------------------------------------------------------------
# requireMode
# ------------------------------------------------------------------


def test_at_least_one_fails_when_every_element_absent():
    result = _validate([ABSENT, ABSENT, ABSENT], {"type": "string"}, requireMode="atLeastOne")

    assert len(result.results.data) == 3
    assert result.results.require_mode.reasons == [ERRS[3]()]
    assert result.results.pass_ is False
    assert result.pass_ is False
    assert result.show_failed_results() == [ERRS[3]()]


def test_at_least_one_passes_with_one_present_element():
    result = _validate([ABSENT, "here", ABSENT], {"type": "string"}, requireMode="atLeastOne")

    assert len(result.results.data) == 3
    assert result.results.require_mode is None
    assert result.pass_ is True


def test_require_all_passes_when_every_element_present():
    result = _validate(["ABCD", 123, 456, "EFG", "HIJK", "bleh"], {}, requireMode="all")

    assert len(result.results.data) == 6
    assert result.results.pass_ is True
    assert result.pass_ is True


def test_require_all_fails_on_absent_elements():
    result = _validate(["ABCD", ABSENT, ABSENT, "EFG", "HIJK", "bleh"], {}, requireMode="all")

    assert len(result.results.data) == 6
    assert result.results.data[1].reasons[0] == ERRS[0]("Value")
    assert result.results.data[2].reasons[0] == ERRS[0]("Value")
    assert result.results.missing == [1, 2]
    assert result.pass_ is False


# ------------------------------------------------------------------
# Projections
# ------------------------------------------------------------------


def test_show_failed_results_prefixes_index():
    failed = _validate(["ABCD", 123, 456, "EFG", "HIJK", "bleh"], {"type": "string"}).showFailedResults()

    assert failed == [
        f"[1]: {ERRS[1]('Value', 'string', 'number')}",
        f"[2]: {ERRS[1]('Value', 'string', 'number')}",
    ]


def test_show_passed_results_returns_passing_values_in_order():
    passed = _validate(["ABCD", 123, 456, "EFG", "HIJK", "bleh"], {"type": "string"}).show_passed_results()

    assert passed == ["ABCD", "EFG", "HIJK", "bleh"]


def test_to_dict_includes_array_pass_flag():
    payload = _validate(["a", ABSENT], {"isRequired": True}).to_dict()

    assert payload["type"] == "arrayOfPrimitive"
    assert payload["results"]["pass"] is False
    assert payload["results"]["missing"] == [1]
