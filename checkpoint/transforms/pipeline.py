# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""Transform pipeline - ordered rewrite commands over a cloned mapping.

The pipeline is an immutable builder: ``transform()`` returns a new pipeline
with the extra commands appended and ``output()`` materialises the result.
The wrapped value itself is never modified.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Sequence, Tuple, Union

from ..exceptions import ShapeMismatchError
from ..telemetry.metrics import transform_command_total
from ..validation.base import is_mapping, is_sequence, runtime_kind
from .commands import Command, CommandLike, apply_command, normalize_command

logger = logging.getLogger(__name__)

Commands = Union[CommandLike, Sequence[CommandLike]]


def _normalize_all(commands: Commands) -> Tuple[Command, ...]:
    if is_sequence(commands):
        return tuple(normalize_command(command) for command in commands)
    return (normalize_command(commands),)


class TransformPipeline:
    """Pending list of commands bound to one source mapping.

    Example:
        ```python
        pipeline = TransformPipeline(raw).transform("clean").transform({"name": "trim"})
        cleaned = pipeline.output()
        ```
    """

    __slots__ = ("_source", "_commands")

    def __init__(self, source: Any, commands: Tuple[Command, ...] = ()):
        self._source = source
        self._commands = commands

    @property
    def commands(self) -> Tuple[Command, ...]:
        return self._commands

    def transform(self, commands: Commands) -> "TransformPipeline":
        return TransformPipeline(self._source, self._commands + _normalize_all(commands))

    def output(self) -> Dict[str, Any]:
        if not is_mapping(self._source):
            actual = runtime_kind(self._source)
            logger.error("Cannot transform non-object value of kind '%s'", actual)
            raise ShapeMismatchError("object", actual)

        working: Dict[str, Any] = dict(self._source)
        for command in self._commands:
            logger.debug("Applying transform command '%s' with options %s", command.name, command.options)
            working = apply_command(command, working)
            transform_command_total.add(1, {"command": command.name})
        return working

    def __repr__(self) -> str:
        names = ", ".join(command.name for command in self._commands)
        return f"TransformPipeline([{names}])"


__all__ = ["Commands", "TransformPipeline"]
