"""Descriptor package - parsing and loading of validation descriptors."""

from .loader import DESCRIPTOR_FILE_ENV, load_descriptor
from .parser import (
    DescriptorLike,
    parse_constraint,
    parse_descriptor,
    parse_options,
    parse_string_rules,
)

__all__ = [
    "DESCRIPTOR_FILE_ENV",
    "DescriptorLike",
    "load_descriptor",
    "parse_constraint",
    "parse_descriptor",
    "parse_options",
    "parse_string_rules",
]
