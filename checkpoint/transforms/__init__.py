"""Transforms package - post-validation rewrites of a cloned mapping.

Validation never changes data; the commands here do, always on a copy.
"""

from .commands import COMMANDS, Command, apply_command, clean, normalize_command, replace, trim
from .pipeline import TransformPipeline

__all__ = [
    "COMMANDS",
    "Command",
    "TransformPipeline",
    "apply_command",
    "clean",
    "normalize_command",
    "replace",
    "trim",
]
