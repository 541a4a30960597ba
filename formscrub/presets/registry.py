# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""Preset registry: named rules, looked up on every keystroke.

Reads are lock-free. A merge builds a new dict and publishes it with a
single reference assignment, so a reader sees either the old mapping or
the new one, never a partial update. Writers are serialized by a lock.
"""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Dict, Iterator, Mapping, Optional, Tuple

from ..exceptions import ConfigurationError
from ..rules import Rule
from ..telemetry.metrics import record_merge
from .builtin import BUILTIN_PRESETS

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MergeResult:
    """Outcome of :meth:`PresetRegistry.merge`."""

    applied: bool
    names: Tuple[str, ...] = ()
    warnings: Tuple[str, ...] = field(default_factory=tuple)


class PresetRegistry:
    """Mapping of case-sensitive preset names to rules.

    Example:
        ```python
        registry = PresetRegistry()
        registry.merge({"number": {"allow": "0-9.,"}})
        registry.lookup("number").apply("12,345.67abc")  # '12,345.67'
        ```
    """

    def __init__(self, presets: Optional[Mapping[str, Any]] = None, *, include_builtins: bool = True):
        self._write_lock = threading.Lock()
        self._presets: Mapping[str, Rule] = MappingProxyType(
            dict(BUILTIN_PRESETS) if include_builtins else {}
        )
        if presets is not None:
            # Constructor input is configuration: fail loudly
            self._presets = MappingProxyType({**self._presets, **_coerce_presets(presets)})

    def lookup(self, name: Any) -> Optional[Rule]:
        """Return the rule registered under *name*, or None. Never raises."""
        if not isinstance(name, str):
            return None
        return self._presets.get(name)

    def merge(self, new_presets: Any) -> MergeResult:
        """Insert or overwrite presets; entries not mentioned are left as they are.

        The merge is all-or-nothing. If *new_presets* is not a mapping or any
        entry is invalid, nothing changes and the problems are reported in the
        returned :class:`MergeResult` and the log. This method never raises.
        """
        try:
            coerced = _coerce_presets(new_presets)
        except ConfigurationError as exc:
            logger.error("Rejected preset merge; registry left unchanged: %s", exc)
            record_merge("rejected")
            return MergeResult(applied=False, warnings=(str(exc),))

        with self._write_lock:
            self._presets = MappingProxyType({**self._presets, **coerced})

        names = tuple(coerced)
        logger.info("Merged %d preset(s): %s", len(names), ", ".join(names) or "-")
        record_merge("applied")
        return MergeResult(applied=True, names=names)

    def reset(self) -> None:
        """Restore the built-in presets and drop everything else."""
        with self._write_lock:
            self._presets = MappingProxyType(dict(BUILTIN_PRESETS))

    def snapshot(self) -> Mapping[str, Rule]:
        """Return a read-only view of the currently published presets."""
        return self._presets

    def names(self) -> Tuple[str, ...]:
        return tuple(self._presets)

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and name in self._presets

    def __len__(self) -> int:
        return len(self._presets)

    def __iter__(self) -> Iterator[str]:
        return iter(self._presets)

    def __repr__(self) -> str:
        return f"PresetRegistry(names={list(self._presets)!r})"


def _coerce_presets(new_presets: Any) -> Dict[str, Rule]:
    if not isinstance(new_presets, Mapping):
        raise ConfigurationError(
            f"Presets must be a mapping of name to rule, got {type(new_presets).__name__}"
        )

    coerced: Dict[str, Rule] = {}
    for name, definition in new_presets.items():
        if not isinstance(name, str) or not name:
            raise ConfigurationError(f"Preset names must be non-empty strings, got {name!r}")
        try:
            coerced[name] = Rule.coerce(definition)
        except ConfigurationError as exc:
            raise ConfigurationError(str(exc), preset=name) from exc
    return coerced


# Process-wide registry used when callers do not pass one explicitly
_REGISTRY = PresetRegistry()


def get_preset_registry() -> PresetRegistry:
    """Return the process-wide preset registry."""

    return _REGISTRY


def reset_preset_registry() -> None:
    """Restore the process-wide registry to the built-in presets."""

    _REGISTRY.reset()


def set_presets(new_presets: Any, *, registry: Optional[PresetRegistry] = None) -> None:
    """Merge *new_presets* into *registry* (the process-wide one by default).

    Invalid input is logged and ignored; the registry is left unchanged.
    Use :meth:`PresetRegistry.merge` directly to inspect the outcome.
    """

    target = registry if registry is not None else _REGISTRY
    target.merge(new_presets)


__all__ = [
    "MergeResult",
    "PresetRegistry",
    "get_preset_registry",
    "reset_preset_registry",
    "set_presets",
]
