# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""Entry façade: wrap a value, then validate it or transform a copy of it."""

from __future__ import annotations

import logging
from typing import Any, Optional

from .descriptors.parser import DescriptorLike
from .messages import MessageTable
from .transforms.pipeline import Commands, TransformPipeline
from .validation.base import ABSENT
from .validation.results import ValidationResult
from .validation.validator import Validator

logger = logging.getLogger(__name__)


class Checkpoint:
    """A wrapped value that can be validated and transformed.

    ``validate`` and ``transform`` are independent of each other and may be
    called any number of times; neither modifies the wrapped value.

    .. code-block:: python

        from checkpoint import checkpoint

        result = checkpoint({"name": " Ada ", "born": "1815-12-10"}).validate(
            {
                "type": "object",
                "schema": {
                    "name": {"isRequired": True, "type": "string"},
                    "born": {"stringValidation": {"isDate": True}},
                },
            }
        )
        if not result.pass_:
            print(result.show_failed_results())

        tidy = checkpoint({"name": " Ada "}).transform(["clean", "trim"]).output()
    """

    def __init__(self, value: Any = ABSENT, *, messages: Optional[MessageTable] = None):
        self._value = value
        self._validator = Validator(messages)

    @property
    def value(self) -> Any:
        return self._value

    def validate(self, descriptor: DescriptorLike) -> ValidationResult:
        return self._validator.validate(descriptor, self._value)

    def transform(self, commands: Commands) -> TransformPipeline:
        return TransformPipeline(self._value).transform(commands)

    def __repr__(self) -> str:
        return f"Checkpoint({self._value!r})"


def checkpoint(value: Any = ABSENT, *, messages: Optional[MessageTable] = None) -> Checkpoint:
    """Wrap *value*; omit it to validate an absent value."""

    return Checkpoint(value, messages=messages)


__all__ = ["Checkpoint", "checkpoint"]
