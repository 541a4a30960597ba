# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""Load preset definitions from a YAML file.

File format::

    presets:
      price: {allow: "0-9.,"}
      handle: {allow: "a-z0-9_"}
      plain: {block: "<>"}

A top-level mapping without the ``presets`` key is read as the preset
mapping itself. Every definition is validated while loading, so a bad
file fails at startup instead of at the first keystroke.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Union

import yaml

from ..exceptions import ConfigurationError
from ..rules import Rule
from .registry import MergeResult, PresetRegistry, get_preset_registry

logger = logging.getLogger(__name__)

PRESETS_FILE_ENV = "FORMSCRUB_PRESETS_FILE"
_PRESETS_KEY = "presets"


def load_presets_file(path: Union[str, Path]) -> Dict[str, Rule]:
    """Read and validate the presets defined in the YAML file at *path*.

    Raises:
        ConfigurationError: If the file cannot be read or parsed, or any
            preset definition is malformed.
    """
    file_path = Path(path)
    try:
        raw_text = file_path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigurationError(f"Cannot read preset file '{file_path}': {exc}") from exc

    try:
        document = yaml.safe_load(raw_text)
    except yaml.YAMLError as exc:
        raise ConfigurationError(f"Invalid YAML in preset file '{file_path}': {exc}") from exc

    if document is None:
        logger.debug("Preset file '%s' is empty", file_path)
        return {}
    if not isinstance(document, Mapping):
        raise ConfigurationError(
            f"Preset file '{file_path}' must contain a mapping, got {type(document).__name__}"
        )

    definitions: Any = document.get(_PRESETS_KEY, document)
    if definitions is None:
        return {}
    if not isinstance(definitions, Mapping):
        raise ConfigurationError(
            f"'{_PRESETS_KEY}' in '{file_path}' must be a mapping, got {type(definitions).__name__}"
        )

    presets: Dict[str, Rule] = {}
    for name, definition in definitions.items():
        if not isinstance(name, str) or not name:
            raise ConfigurationError(f"Preset names must be non-empty strings, got {name!r}")
        try:
            presets[name] = Rule.coerce(definition)
        except ConfigurationError as exc:
            raise ConfigurationError(f"{exc} (in '{file_path}')", preset=name) from exc

    logger.info("Loaded %d preset(s) from '%s'", len(presets), file_path)
    return presets


def configure_presets(
    path: Optional[Union[str, Path]] = None,
    *,
    registry: Optional[PresetRegistry] = None,
) -> Optional[MergeResult]:
    """Load presets from *path* (or ``$FORMSCRUB_PRESETS_FILE``) into *registry*.

    Intended to run once at startup. Returns None when no file is
    configured, otherwise the result of the merge.

    Raises:
        ConfigurationError: If the configured file is invalid.
    """
    if path is None:
        path = os.getenv(PRESETS_FILE_ENV) or None
    if path is None:
        logger.debug("No preset file configured (%s is unset)", PRESETS_FILE_ENV)
        return None

    presets = load_presets_file(path)
    target = registry if registry is not None else get_preset_registry()
    return target.merge(presets)


__all__ = ["PRESETS_FILE_ENV", "configure_presets", "load_presets_file"]
