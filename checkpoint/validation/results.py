# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""Validation result variants and their projections.

Each variant carries the validated ``data``, the per-unit ``results`` tree
and the top-level ``pass_`` flag. ``show_passed_results`` and
``show_failed_results`` are read-only projections over the finished tree.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple, Union

from .base import FieldResult, ResultKind


@dataclass
class PrimitiveResults:
    data: FieldResult


@dataclass
class ObjectResults:
    data: Dict[str, FieldResult] = field(default_factory=dict)
    missing: List[str] = field(default_factory=list)


@dataclass
class ArrayResults:
    """Per-element results for primitive and object arrays.

    ``require_mode`` holds the synthetic failure produced when a primitive
    array has no present element under ``requireMode: atLeastOne``; it is kept
    apart from ``data`` so ``data`` stays index-aligned with the input. It is
    never appended as a trailing ``data`` entry; read it from ``require_mode``
    or from ``to_dict()["results"]["requireMode"]``.
    """

    data: List[Union[FieldResult, Dict[str, FieldResult]]] = field(default_factory=list)
    missing: List[Union[int, Tuple[int, str]]] = field(default_factory=list)
    pass_: bool = True
    require_mode: Optional[FieldResult] = None


class ValidationResult:
    """Common surface shared by the four result variants."""

    kind: ResultKind

    def __init__(self, pass_: bool, data: Any, results: Any):
        self.pass_ = pass_
        self.data = data
        self.results = results

    def show_passed_results(self) -> List[Any]:
        raise NotImplementedError

    def show_failed_results(self) -> List[str]:
        raise NotImplementedError

    # camelCase spellings kept for callers porting existing code
    def showPassedResults(self) -> List[Any]:  # noqa: N802
        return self.show_passed_results()

    def showFailedResults(self) -> List[str]:  # noqa: N802
        return self.show_failed_results()

    def to_dict(self) -> Dict[str, Any]:
        return {"type": self.kind.value, "pass": self.pass_, "results": self._results_dict()}

    def _results_dict(self) -> Dict[str, Any]:
        raise NotImplementedError

    def __repr__(self) -> str:
        return f"{type(self).__name__}(pass_={self.pass_!r}, results={self.results!r})"


class PrimitiveValidationResult(ValidationResult):
    kind = ResultKind.PRIMITIVE
    results: PrimitiveResults

    def show_passed_results(self) -> List[Any]:
        return [self.data] if self.results.data.pass_ else []

    def show_failed_results(self) -> List[str]:
        return list(self.results.data.reasons)

    def _results_dict(self) -> Dict[str, Any]:
        return {"data": self.results.data.to_dict()}


class ObjectValidationResult(ValidationResult):
    kind = ResultKind.OBJECT
    results: ObjectResults

    def show_passed_results(self) -> List[str]:
        return [name for name, outcome in self.results.data.items() if outcome.pass_]

    def show_failed_results(self) -> List[str]:
        return [reason for outcome in self.results.data.values() for reason in outcome.reasons]

    def _results_dict(self) -> Dict[str, Any]:
        return {
            "data": {name: outcome.to_dict() for name, outcome in self.results.data.items()},
            "missing": list(self.results.missing),
        }


class ArrayOfPrimitiveValidationResult(ValidationResult):
    kind = ResultKind.ARRAY_OF_PRIMITIVE
    results: ArrayResults

    def show_passed_results(self) -> List[Any]:
        return [self.data[index] for index, outcome in enumerate(self.results.data) if outcome.pass_]

    def show_failed_results(self) -> List[str]:
        failed = [
            f"[{index}]: {reason}"
            for index, outcome in enumerate(self.results.data)
            for reason in outcome.reasons
        ]
        if self.results.require_mode is not None:
            failed.extend(self.results.require_mode.reasons)
        return failed

    def _results_dict(self) -> Dict[str, Any]:
        payload: Dict[str, Any] = {
            "data": [outcome.to_dict() for outcome in self.results.data],
            "missing": list(self.results.missing),
            "pass": self.results.pass_,
        }
        if self.results.require_mode is not None:
            payload["requireMode"] = self.results.require_mode.to_dict()
        return payload


class ArrayOfObjectValidationResult(ValidationResult):
    kind = ResultKind.ARRAY_OF_OBJECT
    results: ArrayResults

    def show_passed_results(self) -> List[str]:
        return [
            f"[{index}]: {name}"
            for index, element in enumerate(self.results.data)
            for name, outcome in element.items()
            if outcome.pass_
        ]

    def show_failed_results(self) -> List[str]:
        return [
            f"[{index}]: {reason}"
            for index, element in enumerate(self.results.data)
            for outcome in element.values()
            for reason in outcome.reasons
        ]

    def _results_dict(self) -> Dict[str, Any]:
        return {
            "data": [
                {name: outcome.to_dict() for name, outcome in element.items()}
                for element in self.results.data
            ],
            "missing": [list(entry) for entry in self.results.missing],
            "pass": self.results.pass_,
        }


__all__ = [
    "ArrayOfObjectValidationResult",
    "ArrayOfPrimitiveValidationResult",
    "ArrayResults",
    "ObjectResults",
    "ObjectValidationResult",
    "PrimitiveResults",
    "PrimitiveValidationResult",
    "ValidationResult",
]
