"""
Tokenizer — lowercase word tokens from raw resume / JD text.

Two variants:
- alphanumeric (default): keeps digits, so "b2b" and "2024" survive
- letters-only: strips digits too, for callers that only want words

Only ASCII whitespace separates tokens; control characters in the
0x1c-0x1f range are blanked like any other symbol.
"""

from __future__ import annotations

import re

_NON_ALNUM = re.compile(r"[^a-z0-9 \t\n\r\f\v]")
_NON_LETTER = re.compile(r"[^a-z]")
_WHITESPACE = re.compile(r"[ \t\n\r\f\v]+")


def normalize(text: str, letters_only: bool = False) -> str:
    """Lowercase text and blank out every character outside the token alphabet."""
    pattern = _NON_LETTER if letters_only else _NON_ALNUM
    return pattern.sub(" ", text.lower())


def tokenize(text: str, letters_only: bool = False) -> list[str]:
    """Split text into lowercase tokens. Empty input gives an empty list."""
    normalized = normalize(text, letters_only=letters_only)
    if letters_only:
        # non-letters are already spaces, so any space run is a separator
        return [t for t in normalized.split(" ") if t]
    return [t for t in _WHITESPACE.split(normalized) if t]


def word_set(text: str) -> set[str]:
    """Distinct alphanumeric tokens, for membership tests."""
    return set(tokenize(text))
