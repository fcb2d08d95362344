"""Small text helpers shared by the normalizers."""

from __future__ import annotations

import re

_WHITESPACE_RE = re.compile(r"\s+")

# Arabic-Indic, Persian (extended Arabic-Indic) and Devanagari digits.
_DIGIT_TRANSLATION = str.maketrans(
    {
        **{chr(0x0660 + offset): str(offset) for offset in range(10)},
        **{chr(0x06F0 + offset): str(offset) for offset in range(10)},
        **{chr(0x0966 + offset): str(offset) for offset in range(10)},
    }
)


def collapse_whitespace(value: str) -> str:
    """Collapse runs of whitespace into one space and trim."""
    return _WHITESPACE_RE.sub(" ", value).strip()


def transliterate_digits(value: str) -> str:
    """Replace Arabic-Indic, Persian and Devanagari digits with ASCII ones."""
    return value.translate(_DIGIT_TRANSLATION)


def unify_spaces(value: str) -> str:
    """Turn every Unicode whitespace character (NBSP, thin space...) into a plain space."""
    return _WHITESPACE_RE.sub(lambda match: " " * len(match.group(0)), value)
