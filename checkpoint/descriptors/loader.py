# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""Load descriptors from YAML or JSON files."""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Any, Optional, Union

import yaml

from ..exceptions import ConfigurationError
from ..validation.base import ValidationDescriptor
from .parser import parse_descriptor

logger = logging.getLogger(__name__)

DESCRIPTOR_FILE_ENV = "CHECKPOINT_DESCRIPTOR_FILE"
_YAML_SUFFIXES = (".yaml", ".yml")


def _resolve_path(path: Optional[Union[str, Path]]) -> Path:
    if path is None:
        env_path = os.getenv(DESCRIPTOR_FILE_ENV)
        if not env_path:
            raise ConfigurationError(
                f"No descriptor path given and {DESCRIPTOR_FILE_ENV} is not set",
                key=DESCRIPTOR_FILE_ENV,
            )
        path = env_path
    return Path(path).expanduser()


def _read(path: Path) -> Any:
    try:
        content = path.read_text(encoding="utf-8")
    except OSError as exc:
        logger.error("Unable to read descriptor file %s: %s", path, exc)
        raise ConfigurationError(f"Unable to read descriptor file '{path}': {exc}", value=str(path)) from exc

    try:
        if path.suffix.lower() in _YAML_SUFFIXES:
            return yaml.safe_load(content)
        return json.loads(content)
    except (yaml.YAMLError, json.JSONDecodeError) as exc:
        logger.error("Descriptor file %s is not valid: %s", path, exc)
        raise ConfigurationError(f"Descriptor file '{path}' could not be parsed: {exc}", value=str(path)) from exc


def load_descriptor(path: Optional[Union[str, Path]] = None) -> ValidationDescriptor:
    """Read and parse a descriptor file.

    ``.yaml``/``.yml`` files are read with ``yaml.safe_load``; anything else is
    treated as JSON. Without *path*, ``CHECKPOINT_DESCRIPTOR_FILE`` is used.
    """

    resolved = _resolve_path(path)
    raw = _read(resolved)
    if raw is None:
        raise ConfigurationError(f"Descriptor file '{resolved}' is empty", value=str(resolved))

    descriptor = parse_descriptor(raw)
    logger.debug("Loaded %s descriptor from %s", descriptor.type.value, resolved)
    return descriptor


__all__ = ["DESCRIPTOR_FILE_ENV", "load_descriptor"]
