# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""Built-in presets seeded into every registry."""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

from ..rules import CharSet, Rule

DEFAULT_PRESET = "text"

_LETTERS_AND_DIGITS = (("a", "z"), ("A", "Z"), ("0", "9"))

BUILTIN_PRESETS: Mapping[str, Rule] = MappingProxyType(
    {
        # Blacklist of common markup/XSS characters
        "text": Rule.blacklist(CharSet.from_chars("'\"<>&/")),
        "number": Rule.whitelist(CharSet(ranges=(("0", "9"),))),
        "email": Rule.whitelist(CharSet(chars="@._-", ranges=_LETTERS_AND_DIGITS)),
        "url": Rule.whitelist(CharSet(chars="._-/:?=&%", ranges=_LETTERS_AND_DIGITS)),
    }
)

__all__ = ["BUILTIN_PRESETS", "DEFAULT_PRESET"]
