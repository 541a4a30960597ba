# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""Sanitize configuration variants.

Callers pick a rule in one of three ways:

- ``ByPresetName("number")``: a preset from the registry
- ``ByCustomWhitelist("0-9./")``: an ad-hoc whitelist (CharSet or allow fragment)
- ``DEFAULT``: the default preset

The legacy call styles, a bare preset name or a ``{"type": ...}`` /
``{"allow": ...}`` mapping, are converted by :func:`normalize_config`.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Union

from ..rules import CharSet


@dataclass(frozen=True)
class ByPresetName:
    name: str


@dataclass(frozen=True)
class ByCustomWhitelist:
    spec: Union[CharSet, str]


@dataclass(frozen=True)
class Default:
    pass


DEFAULT = Default()

SanitizeConfig = Union[ByPresetName, ByCustomWhitelist, Default]

_CONFIG_TYPES = (ByPresetName, ByCustomWhitelist, Default)


def normalize_config(config: Any) -> SanitizeConfig:
    """Convert any accepted configuration form into a config variant.

    ``allow`` wins over ``type`` when a mapping carries both. Empty or
    unrecognised values select the default preset.
    """
    if isinstance(config, _CONFIG_TYPES):
        return config
    if isinstance(config, str):
        return ByPresetName(config)
    if isinstance(config, Mapping):
        allow = config.get("allow")
        if allow:
            return ByCustomWhitelist(allow)
        preset = config.get("type")
        if preset:
            return ByPresetName(preset)
    return DEFAULT


__all__ = [
    "ByCustomWhitelist",
    "ByPresetName",
    "DEFAULT",
    "Default",
    "SanitizeConfig",
    "normalize_config",
]
