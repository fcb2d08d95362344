"""Party label normalization.

Raw labels are resolved through a cascade, first hit wins:

- ``emoji``     elephant / donkey emoji on the untouched label
- ``empty``     nothing left after cleaning -> ``UNK``
- ``direct``    cleaned label looked up in the (default + custom) map
- ``stripped``  same lookup after dropping party/nominee/candidate/incumbent
- ``pattern``   ordered regex patterns for typos and keywords
- ``letters``   a leading R/D/I/G/L token such as ``R-NY``
- ``fallback``  the cleaned label upper-cased with underscores

The fallback guarantees every string maps to some stable code, so unknown
local parties survive a batch instead of failing it.
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Callable

from .patterns import (
    DEFAULT_PARTY_MAP,
    LETTER_CODES,
    MAJOR_PARTY_CODES,
    NON_PARTISAN_CODES,
    PARTY_DESCRIPTOR_RE,
    PARTY_EMOJI,
    PARTY_PATTERNS,
)
from .utils.normalize import collapse_whitespace

_PUNCTUATION_RE = re.compile(r"[^\w\s\-']")
_LEADING_LETTERS_RE = re.compile(r"^([a-z]{1,3})\b")


@dataclass(frozen=True)
class PartyMatch:
    code: str
    stage: str
    cleaned: str


def clean_party_label(label: str) -> str:
    """Lower-case, turn punctuation (except ``'`` and ``-``) into spaces, collapse whitespace."""
    return collapse_whitespace(_PUNCTUATION_RE.sub(" ", label.lower()))


def _lookup_direct(cleaned: str, party_map: Mapping[str, str]) -> str | None:
    return party_map.get(cleaned) or None


def _lookup_stripped(cleaned: str, party_map: Mapping[str, str]) -> str | None:
    stripped = collapse_whitespace(PARTY_DESCRIPTOR_RE.sub("", cleaned))
    if not stripped:
        return None
    return party_map.get(stripped) or None


def _match_patterns(cleaned: str, party_map: Mapping[str, str]) -> str | None:
    for pattern, code in PARTY_PATTERNS:
        if pattern.search(cleaned):
            return code
    return None


def _extract_letters(cleaned: str, party_map: Mapping[str, str]) -> str | None:
    match = _LEADING_LETTERS_RE.match(cleaned)
    if match and match.group(1).upper() in LETTER_CODES:
        return match.group(1).upper()
    return None


_CASCADE: tuple[tuple[str, Callable[[str, Mapping[str, str]], str | None]], ...] = (
    ("direct", _lookup_direct),
    ("stripped", _lookup_stripped),
    ("pattern", _match_patterns),
    ("letters", _extract_letters),
)


def _validate_custom_map(custom_map: object) -> Mapping[str, str]:
    if custom_map is None:
        return {}
    if not isinstance(custom_map, Mapping):
        raise TypeError(
            f"Custom party map must be a mapping, got {type(custom_map).__name__}. "
            'Try: normalize_party("Rep", {"rep": "R"})'
        )
    return custom_map


def match_party(label: str, custom_map: Mapping[str, str] | None = None) -> PartyMatch:
    """Resolve ``label`` to a party code and report which stage matched."""
    if label is None:
        raise TypeError('Party name required. Try: normalize_party("Republican")')
    if not isinstance(label, str):
        raise TypeError(
            f"Expected str for party, got {type(label).__name__}. "
            'Try: normalize_party("Republican")'
        )
    custom = _validate_custom_map(custom_map)
    party_map = {**DEFAULT_PARTY_MAP, **custom}

    original = label.strip()
    for emoji, code in PARTY_EMOJI:
        if emoji in original:
            return PartyMatch(code=code, stage="emoji", cleaned=original)

    cleaned = clean_party_label(original)
    if not cleaned:
        return PartyMatch(code="UNK", stage="empty", cleaned=cleaned)

    for stage, resolve in _CASCADE:
        code = resolve(cleaned, party_map)
        if code:
            return PartyMatch(code=code, stage=stage, cleaned=cleaned)

    return PartyMatch(code=cleaned.upper().replace(" ", "_"), stage="fallback", cleaned=cleaned)


def normalize_party(label: str, custom_map: Mapping[str, str] | None = None) -> str:
    """Normalize a raw party label to a short canonical code.

    ``custom_map`` entries are keyed by the cleaned (lower-case) label and
    override the built-in map on collision.

    Examples::

        normalize_party("REP")                         # "R"
        normalize_party("democatic")                   # "D"
        normalize_party("Weird Local", {"weird local": "WLP"})  # "WLP"
        normalize_party("Zorp Party")                  # "ZORP_PARTY"
    """
    return match_party(label, custom_map).code


def get_default_party_map() -> dict[str, str]:
    """Return a copy of the built-in label -> code map."""
    return dict(DEFAULT_PARTY_MAP)


def is_major_party(code: str) -> bool:
    return code in MAJOR_PARTY_CODES


def is_third_party(code: str) -> bool:
    """True for codes that are neither major nor a no-affiliation/placeholder code."""
    return code not in MAJOR_PARTY_CODES and code not in NON_PARTISAN_CODES
