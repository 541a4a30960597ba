"""Sanitization package - per-keystroke character stripping.

This package resolves a rule from a call-time configuration, applies it to
an input value and reports how many characters were removed, so callers can
put the text cursor back where the user left it.
"""

from .config import (
    DEFAULT,
    ByCustomWhitelist,
    ByPresetName,
    Default,
    SanitizeConfig,
    normalize_config,
)
from .result import LengthUnit, SanitizeResult
from .sanitizer import Resolution, Sanitizer, get_sanitizer, sanitize

__all__ = [
    "DEFAULT",
    "ByCustomWhitelist",
    "ByPresetName",
    "Default",
    "LengthUnit",
    "Resolution",
    "SanitizeConfig",
    "SanitizeResult",
    "Sanitizer",
    "get_sanitizer",
    "normalize_config",
    "sanitize",
]
