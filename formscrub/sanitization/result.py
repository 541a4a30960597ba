# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""Result and length-unit types returned by the sanitizer."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Tuple


class LengthUnit(str, Enum):
    """How string lengths are counted for ``removed_count``.

    ``UTF16`` matches browser string indexing, where characters outside the
    Basic Multilingual Plane take two units. Use it when the count feeds
    cursor arithmetic done in JavaScript.
    """

    CODE_POINTS = "code_points"
    UTF16 = "utf16"

    def measure(self, text: str) -> int:
        if self is LengthUnit.UTF16:
            return len(text) + sum(1 for ch in text if ord(ch) > 0xFFFF)
        return len(text)


@dataclass(frozen=True)
class SanitizeResult:
    """Outcome of a sanitize call.

    ``removed_count`` is always ``length(original) - length(safe_value)``.
    ``warnings`` carries non-fatal diagnostics, for instance an invalid
    custom whitelist that was replaced by the default preset.
    """

    safe_value: str
    removed_count: int
    warnings: Tuple[str, ...] = ()

    @property
    def modified(self) -> bool:
        return self.removed_count > 0

    @property
    def has_warnings(self) -> bool:
        return bool(self.warnings)


EMPTY_RESULT = SanitizeResult(safe_value="", removed_count=0)

__all__ = ["EMPTY_RESULT", "LengthUnit", "SanitizeResult"]
