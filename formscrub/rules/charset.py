# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""Typed character sets used by sanitization rules.

A :class:`CharSet` is an explicit description of allowed (or blocked)
characters: single characters, inclusive ranges and a few named classes.
It is validated when it is built, so a malformed set can never reach the
regex compiler at keystroke time.

Older configurations describe sets with a regex character-class body such
as ``"0-9./"`` or ``"a-zA-Z\\-"``. :meth:`CharSet.from_fragment` converts
that syntax (JavaScript flavour, non-unicode mode) into a CharSet and
rejects anything that would escape the class, e.g. an unescaped ``]``.
"""

from __future__ import annotations

import re
import string
from dataclasses import dataclass, field
from typing import FrozenSet, Iterable, List, Tuple

from ..exceptions import ConfigurationError

Range = Tuple[str, str]

# Named classes follow the JavaScript definitions, not Python's unicode-aware ones.
_CLASS_MEMBERS: dict[str, Tuple[Tuple[str, ...], Tuple[Range, ...]]] = {
    "digit": ((), (("0", "9"),)),
    "word": (("_",), (("0", "9"), ("A", "Z"), ("a", "z"))),
    "space": (
        tuple("\t\n\v\f\r \u00a0\u1680\u2028\u2029\u202f\u205f\u3000\ufeff"),
        (("\u2000", "\u200a"),),
    ),
}

_CLASS_ESCAPES = {"d": "digit", "w": "word", "s": "space"}
_NEGATED_CLASS_ESCAPES = frozenset("DWS")
_CONTROL_ESCAPES = {
    "n": "\n",
    "r": "\r",
    "t": "\t",
    "f": "\f",
    "v": "\v",
    "b": "\b",
}
_HEX_DIGITS = frozenset("0123456789abcdefABCDEF")
_OCTAL_DIGITS = frozenset("01234567")
# Inside a class, \c also accepts a digit or underscore
_CONTROL_LETTERS = frozenset(string.ascii_letters + string.digits + "_")

# Token kinds produced by the fragment tokenizer
_CHAR = "char"
_DASH = "dash"
_CLASS = "class"


def _is_single_char(value: object) -> bool:
    return isinstance(value, str) and len(value) == 1


@dataclass(frozen=True)
class CharSet:
    """An immutable set of characters made of chars, ranges and named classes."""

    chars: FrozenSet[str] = field(default_factory=frozenset)
    ranges: Tuple[Range, ...] = ()
    classes: FrozenSet[str] = field(default_factory=frozenset)

    def __post_init__(self):
        chars = self.chars
        if isinstance(chars, str):
            chars = tuple(chars)
        try:
            chars = frozenset(chars)
        except TypeError:
            raise ConfigurationError(
                f"Character set members must be single characters, got {self.chars!r}"
            ) from None
        for ch in chars:
            if not _is_single_char(ch):
                raise ConfigurationError(f"Character set members must be single characters, got {ch!r}")

        if not isinstance(self.ranges, Iterable) or isinstance(self.ranges, str):
            raise ConfigurationError(f"Ranges must be a sequence of (low, high) pairs, got {self.ranges!r}")
        ranges: List[Range] = []
        for item in self.ranges:
            try:
                low, high = item
            except (TypeError, ValueError):
                raise ConfigurationError(f"Range must be a (low, high) pair, got {item!r}") from None
            if not (_is_single_char(low) and _is_single_char(high)):
                raise ConfigurationError(f"Range bounds must be single characters, got {item!r}")
            if low > high:
                raise ConfigurationError(f"Range out of order: {low!r}-{high!r}")
            ranges.append((low, high))

        classes = self.classes
        if isinstance(classes, str):
            classes = (classes,)
        try:
            classes = frozenset(classes)
        except TypeError:
            raise ConfigurationError(f"Character classes must be names, got {self.classes!r}") from None
        unknown = classes - set(_CLASS_MEMBERS)
        if unknown:
            raise ConfigurationError(
                f"Unknown character class(es) {sorted(unknown)}; expected one of {sorted(_CLASS_MEMBERS)}"
            )

        object.__setattr__(self, "chars", chars)
        object.__setattr__(self, "ranges", tuple(ranges))
        object.__setattr__(self, "classes", classes)

    # ------------------------------------------------------------------
    # Construction helpers
    # ------------------------------------------------------------------

    @classmethod
    def from_chars(cls, chars: Iterable[str]) -> "CharSet":
        """Build a set containing exactly the given characters.

        Raises:
            ConfigurationError: If any member is not a single character.
        """
        if isinstance(chars, str):
            return cls(chars=chars)
        try:
            members = tuple(chars)
        except TypeError:
            raise ConfigurationError(
                f"Expected an iterable of characters, got {type(chars).__name__}"
            ) from None
        return cls(chars=members)

    @classmethod
    def from_fragment(cls, fragment: str) -> "CharSet":
        """Convert a regex character-class body (e.g. ``"0-9./"``) into a CharSet.

        Raises:
            ConfigurationError: If the fragment is not a string or is malformed.
        """
        if not isinstance(fragment, str):
            raise ConfigurationError(
                f"Allow fragment must be a string, got {type(fragment).__name__}"
            )

        tokens = _tokenize(fragment)
        chars: set[str] = set()
        ranges: List[Range] = []
        classes: set[str] = set()

        i = 0
        while i < len(tokens):
            kind, value = tokens[i]
            if kind == _CLASS:
                classes.add(value)
                i += 1
                continue

            is_range = (
                i + 2 < len(tokens)
                and tokens[i + 1][0] == _DASH
                and tokens[i + 2][0] != _CLASS
            )
            if is_range:
                high = tokens[i + 2][1]
                if value > high:
                    raise ConfigurationError(
                        f"Range out of order in allow fragment {fragment!r}: {value!r}-{high!r}"
                    )
                ranges.append((value, high))
                i += 3
            else:
                # A dash with nothing to join is a literal '-'
                chars.add(value)
                i += 1

        return cls(chars=frozenset(chars), ranges=tuple(ranges), classes=frozenset(classes))

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def __bool__(self) -> bool:
        return bool(self.chars or self.ranges or self.classes)

    def __contains__(self, ch: object) -> bool:
        return self.contains(ch)

    def contains(self, ch: object) -> bool:
        if not _is_single_char(ch):
            return False
        if ch in self.chars:
            return True
        if any(low <= ch <= high for low, high in self.ranges):
            return True
        for name in self.classes:
            members, ranges = _CLASS_MEMBERS[name]
            if ch in members or any(low <= ch <= high for low, high in ranges):
                return True
        return False

    def union(self, other: "CharSet") -> "CharSet":
        return CharSet(
            chars=self.chars | other.chars,
            ranges=self.ranges + tuple(r for r in other.ranges if r not in self.ranges),
            classes=self.classes | other.classes,
        )

    __or__ = union

    def pattern(self) -> str:
        """Return a Python ``re`` character-class body matching this set.

        Every member is escaped, so the result is safe to wrap in ``[...]``
        or ``[^...]``. An empty set yields an empty string.
        """
        chars = set(self.chars)
        ranges = list(self.ranges)
        for name in sorted(self.classes):
            members, class_ranges = _CLASS_MEMBERS[name]
            chars.update(members)
            ranges.extend(r for r in class_ranges if r not in ranges)

        parts = [f"{re.escape(low)}-{re.escape(high)}" for low, high in ranges]
        parts.extend(re.escape(ch) for ch in sorted(chars))
        return "".join(parts)


def _tokenize(fragment: str) -> List[Tuple[str, str]]:
    """Split a character-class body into (kind, value) tokens."""

    tokens: List[Tuple[str, str]] = []
    i = 0
    n = len(fragment)
    while i < n:
        ch = fragment[i]

        if ch == "\\":
            if i + 1 >= n:
                raise ConfigurationError(
                    f"Allow fragment {fragment!r} ends with an unterminated escape"
                )
            esc = fragment[i + 1]
            i += 2

            if esc in _CLASS_ESCAPES:
                tokens.append((_CLASS, _CLASS_ESCAPES[esc]))
            elif esc in _NEGATED_CLASS_ESCAPES:
                raise ConfigurationError(
                    f"Negated class escape '\\{esc}' is not supported in allow fragment {fragment!r}"
                )
            elif esc in _CONTROL_ESCAPES:
                tokens.append((_CHAR, _CONTROL_ESCAPES[esc]))
            elif esc in _OCTAL_DIGITS:
                # Legacy octal: up to three digits, value capped at \377
                end = i - 1
                limit = end + (3 if esc <= "3" else 2)
                while end < limit and end < n and fragment[end] in _OCTAL_DIGITS:
                    end += 1
                tokens.append((_CHAR, chr(int(fragment[i - 1:end], 8))))
                i = end
            elif esc in ("x", "u"):
                width = 2 if esc == "x" else 4
                digits = fragment[i:i + width]
                if len(digits) == width and set(digits) <= _HEX_DIGITS:
                    tokens.append((_CHAR, chr(int(digits, 16))))
                    i += width
                else:
                    # Incomplete hex escape is the letter itself
                    tokens.append((_CHAR, esc))
            elif esc == "c":
                letter = fragment[i:i + 1]
                if letter and letter in _CONTROL_LETTERS:
                    tokens.append((_CHAR, chr(ord(letter) % 32)))
                    i += 1
                else:
                    # No control letter: a literal backslash, then 'c' is read again
                    tokens.append((_CHAR, "\\"))
                    i -= 1
            else:
                tokens.append((_CHAR, esc))
            continue

        if ch in "[]":
            raise ConfigurationError(
                f"Unescaped '{ch}' in allow fragment {fragment!r}; escape it as '\\{ch}'"
            )

        tokens.append((_DASH, ch) if ch == "-" else (_CHAR, ch))
        i += 1

    return tokens


__all__ = ["CharSet", "Range"]
