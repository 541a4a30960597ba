"""Rules package - typed character sets and the rules built from them."""

from .charset import CharSet
from .rule import CharSetSpec, Rule, RuleKind, to_charset

__all__ = [
    "CharSet",
    "CharSetSpec",
    "Rule",
    "RuleKind",
    "to_charset",
]
