# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""Strict parsing of descriptor mappings into ``ValidationDescriptor``.

Descriptors are written as camelCase mappings (in code, YAML or JSON):

    {
        "type": "array",
        "arrayType": "object",
        "schema": {
            "name": {"isRequired": True, "type": "string",
                     "stringValidation": {"isLength": {"min": 1, "max": 64}}},
            "born": {"stringValidation": {"isDate": True}},
        },
        "options": {"exitASAP": False, "requireMode": "all"},
    }

A typo such as ``isRequred`` would otherwise silently disable a rule, so every
unknown key, unknown type tag or wrongly typed value raises
``ConfigurationError`` with the valid alternatives listed. A
``ValidationDescriptor`` built in code goes through the same checks.
``requireMode`` is reserved and cannot name a schema field.
"""

from __future__ import annotations

import difflib
import logging
from typing import Any, Dict, Iterable, Mapping, Optional, Tuple, Union

from ..exceptions import ConfigurationError
from ..validation.base import (
    KNOWN_KINDS,
    REQUIRE_MODE_KEY,
    ArrayKind,
    Constraint,
    LengthRange,
    RequireMode,
    Schema,
    ShapeKind,
    StringRules,
    ValidationDescriptor,
    ValidationOptions,
    is_mapping,
    is_sequence,
)

logger = logging.getLogger(__name__)

DESCRIPTOR_KEYS = ("type", "arrayType", "schema", "options")
OPTION_KEYS = ("exitASAP", "requireMode")
CONSTRAINT_KEYS = ("isRequired", "allowNull", "type", "stringValidation")
STRING_RULE_KEYS = ("isDate", "isLength", "isIn")
LENGTH_KEYS = ("min", "max")

DescriptorLike = Union[ValidationDescriptor, Mapping[str, Any]]


def _fail(message: str, *, key: Optional[str] = None, value: Any = None) -> ConfigurationError:
    logger.error("Invalid descriptor: %s", message)
    return ConfigurationError(message, key=key, value=value)


def _check_keys(raw: Mapping[str, Any], allowed: Iterable[str], where: str) -> None:
    allowed = tuple(allowed)
    for key in raw:
        if key in allowed:
            continue
        hint = ""
        close = difflib.get_close_matches(str(key), allowed, n=1)
        if close:
            hint = f" Did you mean '{close[0]}'?"
        raise _fail(
            f"Unknown key '{key}' in {where}.{hint} Valid keys: {', '.join(allowed)}",
            key=str(key),
        )


def _expect_mapping(raw: Any, where: str) -> Mapping[str, Any]:
    if not is_mapping(raw):
        raise _fail(f"{where} must be a mapping, got {type(raw).__name__}", value=raw)
    return raw


def _flag(value: Any, key: str, where: str) -> bool:
    if not isinstance(value, bool):
        raise _fail(f"'{key}' in {where} must be a boolean, got {value!r}", key=key, value=value)
    return value


def _bool(raw: Mapping[str, Any], key: str, where: str) -> bool:
    return _flag(raw.get(key, False), key, where)


def _enum(enum_cls, value: Any, key: str, where: str):
    try:
        return enum_cls(value)
    except ValueError:
        valid = ", ".join(member.value for member in enum_cls)
        raise _fail(f"'{key}' in {where} must be one of: {valid}. Got {value!r}", key=key, value=value) from None


def _type_tag(type_tag: Any, where: str) -> Optional[str]:
    if type_tag is not None and type_tag not in KNOWN_KINDS:
        valid = ", ".join(sorted(KNOWN_KINDS))
        raise _fail(f"Unknown type '{type_tag}' in {where}. Available types: {valid}", key="type", value=type_tag)
    return type_tag


def _length_bound(value: Any, key: str, where: str) -> Optional[int]:
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        raise _fail(f"'{key}' in {where} must be a non-negative integer, got {value!r}", key=key, value=value)
    return value


def _length_range(raw: Any, where: str) -> LengthRange:
    if isinstance(raw, LengthRange):
        return LengthRange(min=_length_bound(raw.min, "min", where), max=_length_bound(raw.max, "max", where))
    raw = _expect_mapping(raw, where)
    _check_keys(raw, LENGTH_KEYS, where)
    return LengthRange(
        min=_length_bound(raw.get("min"), "min", where),
        max=_length_bound(raw.get("max"), "max", where),
    )


def _choices(choices: Any, where: str) -> Tuple[str, ...]:
    if not is_sequence(choices) or not all(isinstance(item, str) for item in choices):
        raise _fail(f"'isIn' in {where} must be a list of strings, got {choices!r}", key="isIn", value=choices)
    return tuple(choices)


def parse_string_rules(raw: Any, where: str = "stringValidation") -> StringRules:
    if isinstance(raw, StringRules):
        is_date, is_length, is_in = _flag(raw.is_date, "isDate", where), raw.is_length, raw.is_in
    else:
        raw = _expect_mapping(raw, where)
        _check_keys(raw, STRING_RULE_KEYS, where)
        is_date, is_length, is_in = _bool(raw, "isDate", where), raw.get("isLength"), raw.get("isIn")

    return StringRules(
        is_date=is_date,
        is_length=None if is_length is None else _length_range(is_length, f"{where}.isLength"),
        is_in=None if is_in is None else _choices(is_in, where),
    )


def parse_constraint(raw: Any, where: str = "schema") -> Constraint:
    """Parse one constraint mapping, or re-check a ``Constraint`` built in code."""

    if raw is None:
        return Constraint()
    if isinstance(raw, Constraint):
        is_required = _flag(raw.is_required, "isRequired", where)
        allow_null = _flag(raw.allow_null, "allowNull", where)
        type_tag, string_validation = raw.type, raw.string_validation
    else:
        raw = _expect_mapping(raw, where)
        _check_keys(raw, CONSTRAINT_KEYS, where)
        is_required = _bool(raw, "isRequired", where)
        allow_null = _bool(raw, "allowNull", where)
        type_tag, string_validation = raw.get("type"), raw.get("stringValidation")

    return Constraint(
        is_required=is_required,
        allow_null=allow_null,
        type=_type_tag(type_tag, where),
        string_validation=(
            None if string_validation is None else parse_string_rules(string_validation, f"{where}.stringValidation")
        ),
    )


def parse_options(raw: Any) -> ValidationOptions:
    if raw is None:
        return ValidationOptions()
    if isinstance(raw, ValidationOptions):
        exit_asap, require_mode = _flag(raw.exit_asap, "exitASAP", "options"), raw.require_mode
    else:
        raw = _expect_mapping(raw, "options")
        _check_keys(raw, OPTION_KEYS, "options")
        exit_asap = _bool(raw, "exitASAP", "options")
        require_mode = raw.get("requireMode", RequireMode.NONE.value)
    return ValidationOptions(
        exit_asap=exit_asap,
        require_mode=_enum(RequireMode, require_mode, "requireMode", "options"),
    )


def _parse_shape(type_value: Any, array_value: Any) -> Tuple[ShapeKind, Optional[ArrayKind]]:
    shape = _enum(ShapeKind, type_value, "type", "descriptor")
    if shape is ShapeKind.ARRAY:
        if array_value is None:
            raise _fail("'arrayType' is required when type is 'array'", key="arrayType")
        return shape, _enum(ArrayKind, array_value, "arrayType", "descriptor")
    if array_value is not None:
        raise _fail(f"'arrayType' is only valid when type is 'array', not '{shape.value}'", key="arrayType")
    return shape, None


def _parse_schema(raw: Any, keyed: bool) -> Optional[Schema]:
    if raw is None:
        return None
    if not keyed:
        return parse_constraint(raw, "schema")
    fields = _expect_mapping(raw, "schema")
    parsed: Dict[str, Constraint] = {}
    for name, constraint in fields.items():
        if name == REQUIRE_MODE_KEY:
            raise _fail(
                f"'{REQUIRE_MODE_KEY}' is reserved for the requireMode result and cannot be a schema field",
                key=REQUIRE_MODE_KEY,
            )
        parsed[str(name)] = parse_constraint(constraint, f"schema.{name}")
    return parsed


def parse_descriptor(raw: DescriptorLike) -> ValidationDescriptor:
    """Return a checked ``ValidationDescriptor`` for a mapping or a descriptor built in code.

    Descriptors built in code go through the same checks as mappings, so
    plain strings such as ``type="object"`` are coerced to their enum members
    and dict constraints are parsed.
    """

    if isinstance(raw, ValidationDescriptor):
        type_value, array_value, schema, options = raw.type, raw.array_type, raw.schema, raw.options
    else:
        raw = _expect_mapping(raw, "descriptor")
        _check_keys(raw, DESCRIPTOR_KEYS, "descriptor")
        type_value = raw.get("type", ShapeKind.OBJECT.value)
        array_value, schema, options = raw.get("arrayType"), raw.get("schema"), raw.get("options")

    shape, array_type = _parse_shape(type_value, array_value)
    keyed = shape is ShapeKind.OBJECT or array_type is ArrayKind.OBJECT
    descriptor = ValidationDescriptor(
        type=shape,
        array_type=array_type,
        schema=_parse_schema(schema, keyed),
        options=parse_options(options),
    )
    logger.debug("Parsed descriptor: %s", descriptor)
    return descriptor


__all__ = [
    "DescriptorLike",
    "parse_constraint",
    "parse_descriptor",
    "parse_options",
    "parse_string_rules",
]
