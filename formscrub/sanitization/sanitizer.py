# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""Keystroke sanitization - strips characters from form input values.

The sanitizer resolves one rule per call and applies it in a single pass:

1. Custom whitelist (``ByCustomWhitelist`` / ``{"allow": ...}``), if non-empty
2. Named preset (``ByPresetName`` / ``"number"`` / ``{"type": ...}``), if registered
3. The default preset (``text``)
4. Nothing removed, when even the default preset is missing

Malformed configuration never raises here. An invalid whitelist falls back
to the default preset, and the problem is logged and attached to the
result as a warning.
"""

from __future__ import annotations

import functools
import logging
from typing import Any, List, NamedTuple, Optional, Tuple

from ..exceptions import ConfigurationError
from ..presets import DEFAULT_PRESET, PresetRegistry, get_preset_registry
from ..rules import CharSet, Rule
from ..telemetry.metrics import record_sanitize
from .config import ByCustomWhitelist, ByPresetName, Default, normalize_config
from .result import EMPTY_RESULT, LengthUnit, SanitizeResult

logger = logging.getLogger(__name__)

_IDENTITY_RULE = Rule.identity()

# Rule sources reported to telemetry
SOURCE_CUSTOM = "custom"
SOURCE_PRESET = "preset"
SOURCE_DEFAULT = "default"
SOURCE_IDENTITY = "identity"


class Resolution(NamedTuple):
    rule: Rule
    source: str
    fallback_reason: Optional[str] = None
    warnings: Tuple[str, ...] = ()


@functools.lru_cache(maxsize=256)
def _whitelist_from_fragment(fragment: str) -> Rule:
    # The same fragment arrives on every keystroke of a field
    return Rule.whitelist(CharSet.from_fragment(fragment))


class Sanitizer:
    """Resolve a rule from a call-time configuration and apply it.

    Example:
        ```python
        sanitizer = Sanitizer()
        result = sanitizer.sanitize("ab-123", {"allow": "0-9./"})
        assert result.safe_value == "123"
        assert result.removed_count == 3
        ```
    """

    def __init__(
        self,
        registry: Optional[PresetRegistry] = None,
        *,
        length_unit: LengthUnit = LengthUnit.CODE_POINTS,
    ):
        self._registry = registry
        self.length_unit = LengthUnit(length_unit)

    @property
    def registry(self) -> PresetRegistry:
        # None means the process-wide registry
        return self._registry if self._registry is not None else get_preset_registry()

    def sanitize(self, value: Any, config: Any = None) -> SanitizeResult:
        """Strip characters from *value* according to *config*.

        Args:
            value: Raw input value. Anything that is not a ``str`` yields an
                empty result.
            config: A config variant, a preset name, a ``{"type": ...}`` or
                ``{"allow": ...}`` mapping, or None for the default preset.

        Returns:
            SanitizeResult with the cleaned value, removed count and warnings.
        """
        if not isinstance(value, str):
            return EMPTY_RESULT

        resolution = self.resolve(config)
        safe_value = resolution.rule.apply(value)
        removed_count = self.length_unit.measure(value) - self.length_unit.measure(safe_value)

        record_sanitize(resolution.source, removed_count, resolution.fallback_reason)
        return SanitizeResult(
            safe_value=safe_value,
            removed_count=removed_count,
            warnings=resolution.warnings,
        )

    def resolve(self, config: Any = None) -> Resolution:
        """Pick the rule for *config*. Never raises."""
        normalized = normalize_config(config)
        registry = self.registry
        warnings: List[str] = []
        fallback_reason: Optional[str] = None

        if isinstance(normalized, ByCustomWhitelist):
            rule = self._custom_whitelist(normalized.spec, warnings)
            if rule is not None:
                return Resolution(rule, SOURCE_CUSTOM)
            if warnings:
                fallback_reason = "invalid_allow"
        elif isinstance(normalized, ByPresetName):
            rule = registry.lookup(normalized.name)
            if rule is not None:
                return Resolution(rule, SOURCE_PRESET)
            logger.debug("Unknown preset %r; using default preset '%s'", normalized.name, DEFAULT_PRESET)
            fallback_reason = "unknown_preset"
        elif not isinstance(normalized, Default):  # pragma: no cover - normalize_config is exhaustive
            raise TypeError(f"Unhandled sanitize config {normalized!r}")

        default_rule = registry.lookup(DEFAULT_PRESET)
        if default_rule is None:
            logger.debug("Default preset '%s' is not registered; removing nothing", DEFAULT_PRESET)
            return Resolution(_IDENTITY_RULE, SOURCE_IDENTITY, "missing_default", tuple(warnings))
        return Resolution(default_rule, SOURCE_DEFAULT, fallback_reason, tuple(warnings))

    @staticmethod
    def _custom_whitelist(spec: Any, warnings: List[str]) -> Optional[Rule]:
        if isinstance(spec, CharSet):
            return Rule.whitelist(spec)
        if isinstance(spec, str) and not spec:
            return None
        try:
            if isinstance(spec, str):
                return _whitelist_from_fragment(spec)
            return Rule.whitelist(spec)
        except ConfigurationError as exc:
            logger.error(
                "Invalid allow specification; falling back to default '%s' preset: %s",
                DEFAULT_PRESET,
                exc,
            )
            warnings.append(
                f"Invalid allow specification; falling back to default '{DEFAULT_PRESET}' preset: {exc}"
            )
            return None


_DEFAULT_SANITIZER = Sanitizer()


def get_sanitizer() -> Sanitizer:
    """Return the process-wide sanitizer bound to the process-wide registry."""

    return _DEFAULT_SANITIZER


def sanitize(
    value: Any,
    config: Any = None,
    *,
    registry: Optional[PresetRegistry] = None,
    length_unit: LengthUnit = LengthUnit.CODE_POINTS,
) -> SanitizeResult:
    """Sanitize *value* with *config*; see :meth:`Sanitizer.sanitize`."""

    if registry is None and length_unit is LengthUnit.CODE_POINTS:
        return _DEFAULT_SANITIZER.sanitize(value, config)
    return Sanitizer(registry, length_unit=length_unit).sanitize(value, config)


__all__ = [
    "Resolution",
    "Sanitizer",
    "get_sanitizer",
    "sanitize",
]
