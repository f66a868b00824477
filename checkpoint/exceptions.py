# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""Exception hierarchy for the checkpoint package.

Only contract errors are raised. Content-level validation failures are
reported through the result tree and never surface as exceptions.
"""

from __future__ import annotations

from typing import Any, Optional


class CheckpointError(Exception):
    """Base class for every error raised by checkpoint."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ShapeMismatchError(CheckpointError):
    """The declared descriptor shape disagrees with the actual data shape."""

    def __init__(self, declared: str, actual: str, *, index: Optional[int] = None):
        self.declared = declared
        self.actual = actual
        self.index = index
        if index is None:
            message = f"Expected data of shape '{declared}' but received '{actual}'"
        else:
            message = f"Expected element [{index}] of shape '{declared}' but received '{actual}'"
        super().__init__(message)


class ConfigurationError(CheckpointError):
    """A descriptor or transform command is malformed."""

    def __init__(self, message: str, *, key: Optional[str] = None, value: Any = None):
        super().__init__(message)
        self.key = key
        self.value = value


__all__ = [
    "CheckpointError",
    "ShapeMismatchError",
    "ConfigurationError",
]
