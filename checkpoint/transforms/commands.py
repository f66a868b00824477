# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""Built-in transform commands.

Each command takes the working copy plus its options and returns the rewritten
copy. Only ``clean`` removes keys; no command adds keys.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable, Dict, Mapping, Tuple, Union

from ..exceptions import ConfigurationError
from ..validation.base import ABSENT, is_mapping, is_sequence

logger = logging.getLogger(__name__)

CommandLike = Union[str, Mapping[str, Any], "Command"]


@dataclass(frozen=True)
class Command:
    name: str
    options: Tuple[Any, ...] = ()


def _strictly_equal(left: Any, right: Any) -> bool:
    if left is right:
        return True
    return type(left) is type(right) and left == right


def clean(data: Dict[str, Any]) -> Dict[str, Any]:
    return {key: value for key, value in data.items() if value is not ABSENT}


def replace(data: Dict[str, Any], old: Any, new: Any) -> Dict[str, Any]:
    return {key: (new if _strictly_equal(value, old) else value) for key, value in data.items()}


def trim(data: Dict[str, Any]) -> Dict[str, Any]:
    return {key: (value.strip() if isinstance(value, str) else value) for key, value in data.items()}


# name -> (function, number of options it takes)
COMMANDS: Dict[str, Tuple[Callable[..., Dict[str, Any]], int]] = {
    "clean": (clean, 0),
    "replace": (replace, 2),
    "trim": (trim, 0),
}


def _fail(message: str, *, key: str = "name", value: Any = None) -> ConfigurationError:
    logger.error("Invalid transform command: %s", message)
    return ConfigurationError(message, key=key, value=value)


def normalize_command(raw: CommandLike) -> Command:
    """Turn ``'trim'`` / ``{'name': 'replace', 'options': [a, b]}`` into a ``Command``."""

    if isinstance(raw, Command):
        command = raw
    elif isinstance(raw, str):
        command = Command(name=raw)
    elif is_mapping(raw):
        unknown = set(raw) - {"name", "options"}
        if unknown:
            raise _fail(f"Unknown key(s) in transform command: {sorted(unknown)}", key=sorted(unknown)[0])
        if "name" not in raw:
            raise _fail("Transform command is missing 'name'")
        options = raw.get("options") or ()
        if not is_sequence(options):
            raise _fail(f"Options for '{raw['name']}' must be a list, got {options!r}", key="options", value=options)
        command = Command(name=raw["name"], options=tuple(options))
    else:
        raise _fail(f"Transform command must be a name or a mapping, got {type(raw).__name__}", value=raw)

    if command.name not in COMMANDS:
        available = ", ".join(sorted(COMMANDS))
        raise _fail(f"Unknown transform command '{command.name}'. Available commands: {available}", value=command.name)

    _, arity = COMMANDS[command.name]
    if len(command.options) != arity:
        raise _fail(
            f"Transform command '{command.name}' takes {arity} option(s), got {len(command.options)}",
            key="options",
            value=list(command.options),
        )
    return command


def apply_command(command: Command, data: Dict[str, Any]) -> Dict[str, Any]:
    function, _ = COMMANDS[command.name]
    return function(data, *command.options)


__all__ = [
    "COMMANDS",
    "Command",
    "CommandLike",
    "apply_command",
    "clean",
    "normalize_command",
    "replace",
    "trim",
]
