# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""Character-matching rules.

A rule decides, for one character at a time, whether it is removed:

- blacklist: remove characters that are in the set
- whitelist: remove characters that are not in the set

Rules compile their pattern once and keep no match state, so one rule
instance can be shared by every sanitize call.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Iterable, Mapping, Optional, Union

from ..exceptions import ConfigurationError
from .charset import CharSet

CharSetSpec = Union[CharSet, str, Iterable[str]]

# Keys accepted in mapping-style rule definitions
_ALLOW_KEY = "allow"
_BLOCK_KEY = "block"


class RuleKind(str, Enum):
    BLACKLIST = "blacklist"
    WHITELIST = "whitelist"


def to_charset(spec: CharSetSpec) -> CharSet:
    """Coerce a CharSet, legacy fragment string or iterable of chars to a CharSet."""

    if isinstance(spec, CharSet):
        return spec
    if isinstance(spec, str):
        return CharSet.from_fragment(spec)
    if isinstance(spec, Iterable) and not isinstance(spec, (bytes, bytearray, Mapping)):
        return CharSet.from_chars(spec)
    raise ConfigurationError(
        f"Expected a CharSet, an allow fragment or an iterable of characters, got {type(spec).__name__}"
    )


@dataclass(frozen=True)
class Rule:
    """A pure, stateless character-removal rule."""

    kind: RuleKind
    charset: CharSet = field(default_factory=CharSet)
    _regex: Optional[re.Pattern] = field(init=False, repr=False, compare=False, default=None)

    def __post_init__(self):
        try:
            kind = RuleKind(self.kind)
        except ValueError:
            raise ConfigurationError(f"Unknown rule kind {self.kind!r}") from None
        if not isinstance(self.charset, CharSet):
            raise ConfigurationError(
                f"Rule charset must be a CharSet, got {type(self.charset).__name__}"
            )
        object.__setattr__(self, "kind", kind)
        object.__setattr__(self, "_regex", _compile(kind, self.charset))

    @classmethod
    def blacklist(cls, spec: CharSetSpec) -> "Rule":
        return cls(RuleKind.BLACKLIST, to_charset(spec))

    @classmethod
    def whitelist(cls, spec: CharSetSpec) -> "Rule":
        return cls(RuleKind.WHITELIST, to_charset(spec))

    @classmethod
    def identity(cls) -> "Rule":
        """A rule that removes nothing."""
        return cls(RuleKind.BLACKLIST, CharSet())

    @classmethod
    def coerce(cls, value: Any) -> "Rule":
        """Build a rule from any supported definition.

        Accepted forms:
            - a ``Rule`` (returned unchanged)
            - an allow fragment string, e.g. ``"0-9.,"`` (whitelist)
            - ``{"allow": spec}`` (whitelist) or ``{"block": spec}`` (blacklist)

        Raises:
            ConfigurationError: If the definition is not understood or malformed.
        """
        if isinstance(value, Rule):
            return value
        if isinstance(value, str):
            return cls.whitelist(value)
        if isinstance(value, Mapping):
            keys = set(value.keys())
            if keys == {_ALLOW_KEY}:
                return cls.whitelist(value[_ALLOW_KEY])
            if keys == {_BLOCK_KEY}:
                return cls.blacklist(value[_BLOCK_KEY])
            raise ConfigurationError(
                f"Rule mapping must have exactly one of '{_ALLOW_KEY}' or '{_BLOCK_KEY}', got keys {sorted(map(str, keys))}"
            )
        raise ConfigurationError(f"Cannot build a rule from {type(value).__name__}")

    def removes(self, ch: str) -> bool:
        """Return True when *ch* would be stripped by this rule."""
        if self.kind is RuleKind.BLACKLIST:
            return self.charset.contains(ch)
        return not self.charset.contains(ch)

    def apply(self, text: str) -> str:
        """Remove every matching character from *text* in one pass."""
        if self._regex is None:
            return text
        return self._regex.sub("", text)


def _compile(kind: RuleKind, charset: CharSet) -> Optional[re.Pattern]:
    body = charset.pattern()
    if kind is RuleKind.BLACKLIST:
        return re.compile(f"[{body}]") if body else None
    # An empty whitelist allows nothing
    return re.compile(f"[^{body}]") if body else re.compile(r".", re.DOTALL)


__all__ = ["Rule", "RuleKind", "CharSetSpec", "to_charset"]
