"""Presets package - named rules, the registry that holds them and file loading."""

from .builtin import BUILTIN_PRESETS, DEFAULT_PRESET
from .loaders import PRESETS_FILE_ENV, configure_presets, load_presets_file
from .registry import (
    MergeResult,
    PresetRegistry,
    get_preset_registry,
    reset_preset_registry,
    set_presets,
)

__all__ = [
    "BUILTIN_PRESETS",
    "DEFAULT_PRESET",
    "MergeResult",
    "PRESETS_FILE_ENV",
    "PresetRegistry",
    "configure_presets",
    "get_preset_registry",
    "load_presets_file",
    "reset_preset_registry",
    "set_presets",
]
