"""Candidate name cleaning.

``clean_candidate_name`` runs a short pipeline and stops early when the
value turns out not to be a candidate at all:

1. ``None``/blank -> ``None``
2. profanity scan (warning; censoring only when opted in)
3. placeholder rows (``TOTAL VOTES``, ``Write-In``, ``N/A``, digit runs...) -> ``None``
4. comma policy (``"Smith, John"`` -> ``"John Smith"`` by default)
5. period policy (``smart`` keeps ``Jr.``/``Dr.``/... and drops the rest)
6. whitespace
7. capitalization policy
"""

from __future__ import annotations

import logging
import re
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Sequence

from .config import NameCleanConfig, coerce_options
from .patterns import (
    NON_CANDIDATE_PATTERNS,
    PROFANITY_PATTERNS,
    TITLE_ABBREVIATIONS,
    TITLE_CASE_PARTICLES,
)

_logger = logging.getLogger("election_helpers.names")

_COMMA_PAIR_RE = re.compile(r"^([^,]+),\s*([^,]+)$")
_SMART_PERIOD_RE = re.compile(
    r"\b(?:" + "|".join(TITLE_ABBREVIATIONS) + r")\.|\.",
    re.IGNORECASE,
)
_WORD_START_RE = re.compile(r"\b\w")
_PARTICLE_RE = re.compile(r"(?<=\s)(?:" + "|".join(TITLE_CASE_PARTICLES) + r")\b")
_AFTER_HYPHEN_RE = re.compile(r"-(\w)")
_AFTER_APOSTROPHE_RE = re.compile(r"'(\w)")
_WHITESPACE_RE = re.compile(r"\s+")

NameCleanOptions = NameCleanConfig | Mapping[str, Any] | None


@dataclass(frozen=True)
class ProfanityCheck:
    has_profanity: bool
    matches: tuple[str, ...]


@dataclass(frozen=True)
class NameConflict:
    cleaned: str
    originals: tuple[str, ...]


@dataclass(frozen=True)
class CleanedNames:
    cleaned: list[str]
    conflicts: list[NameConflict]
    non_candidates: list[str | None]

    def as_dict(self) -> dict[str, Any]:
        return {
            "cleaned": list(self.cleaned),
            "conflicts": [
                {"cleaned": item.cleaned, "originals": list(item.originals)}
                for item in self.conflicts
            ],
            "non_candidates": list(self.non_candidates),
        }


@dataclass
class _SeenName:
    count: int = 1
    originals: list[str] = field(default_factory=list)
    is_conflict: bool = False


def detect_profanity(text: object) -> ProfanityCheck:
    """Scan ``text`` for profanity and well-known troll tokens."""
    if not text or not isinstance(text, str):
        return ProfanityCheck(has_profanity=False, matches=())

    matches: list[str] = []
    for pattern in PROFANITY_PATTERNS:
        for match in pattern.finditer(text):
            token = match.group(0).lower()
            if token not in matches:
                matches.append(token)
    return ProfanityCheck(has_profanity=bool(matches), matches=tuple(matches))


def is_non_candidate(text: str) -> bool:
    """True when ``text`` is a placeholder row such as ``TOTAL VOTES`` or ``N/A``."""
    return any(pattern.fullmatch(text) for pattern in NON_CANDIDATE_PATTERNS)


def _censor(text: str, matches: Sequence[str]) -> str:
    for token in matches:
        text = re.sub(re.escape(token), "*" * len(token), text, flags=re.IGNORECASE)
    return text


def _apply_commas(text: str, policy: str) -> str:
    if policy == "reorder":
        match = _COMMA_PAIR_RE.match(text)
        if match:
            last, first = match.groups()
            return f"{first.strip()} {last.strip()}"
    elif policy == "remove":
        return text.replace(",", "")
    return text


def _apply_periods(text: str, policy: str) -> str:
    if policy == "smart":
        # A bare "." is the second alternative of the pattern; abbreviations keep theirs.
        return _SMART_PERIOD_RE.sub(
            lambda match: match.group(0) if len(match.group(0)) > 1 else "", text
        )
    if policy == "remove":
        return text.replace(".", "")
    return text


def _title_case(text: str, options: NameCleanConfig) -> str:
    text = _WORD_START_RE.sub(lambda match: match.group(0).upper(), text.lower())
    # Particles stay lower-case except as the first word ("Al Gore", "De Niro").
    text = _PARTICLE_RE.sub(lambda match: match.group(0).lower(), text)
    if options.separators.hyphenated_names:
        text = _AFTER_HYPHEN_RE.sub(lambda match: "-" + match.group(1).upper(), text)
    if options.separators.apostrophes:
        text = _AFTER_APOSTROPHE_RE.sub(lambda match: "'" + match.group(1).upper(), text)
    return text


def _apply_capitalization(text: str, options: NameCleanConfig) -> str:
    if options.capitalize == "title":
        return _title_case(text, options)
    if options.capitalize == "upper":
        return text.upper()
    if options.capitalize == "lower":
        return text.lower()
    return text


def clean_candidate_name(
    name: str | None,
    config: NameCleanOptions = None,
    *,
    logger: logging.Logger | None = None,
) -> str | None:
    """Clean a raw candidate name, or return ``None`` for placeholder rows.

    Examples::

        clean_candidate_name("JOHN SMITH JR.")   # "John Smith Jr."
        clean_candidate_name("smith, john")      # "John Smith"
        clean_candidate_name("TOTAL VOTES")      # None
        clean_candidate_name("María José", {"capitalize": "preserve"})  # "María José"
    """
    if name is None:
        return None
    if not isinstance(name, str):
        raise TypeError(
            f"Expected str for name, got {type(name).__name__}. "
            'Try: clean_candidate_name("John Smith")'
        )
    options = coerce_options(NameCleanConfig, config)
    log = logger or _logger

    cleaned = name.strip()
    if not cleaned:
        return None

    if options.security.detect_profanity:
        check = detect_profanity(cleaned)
        if check.has_profanity:
            log.warning(
                "Potential profanity/trolling in candidate name %r (matched: %s)",
                cleaned,
                ", ".join(check.matches),
            )
            if options.security.censor_profanity:
                cleaned = _censor(cleaned, check.matches)

    if options.detect_non_candidates and is_non_candidate(cleaned):
        return None

    cleaned = _apply_commas(cleaned, options.separators.commas)
    cleaned = _apply_periods(cleaned, options.separators.periods)

    if options.normalize_spaces:
        cleaned = _WHITESPACE_RE.sub(" ", cleaned)
    if options.trim_spaces:
        cleaned = cleaned.strip()

    cleaned = _apply_capitalization(cleaned, options)
    return cleaned or None


def clean_candidate_names(
    names: Sequence[str | None],
    config: NameCleanOptions = None,
    *,
    logger: logging.Logger | None = None,
) -> CleanedNames:
    """Clean a list of names, separating placeholders and reporting duplicates.

    Two raw names that clean to the same string are a conflict. With the
    ``preserve`` and ``merge`` strategies only the first one is kept; with
    ``number`` later ones become ``"John Smith (2)"``, ``"John Smith (3)"``...
    """
    if isinstance(names, (str, bytes)) or not isinstance(names, Sequence):
        raise TypeError(
            f"Expected a list of names, got {type(names).__name__}. "
            'Try: clean_candidate_names(["John Smith"])'
        )
    options = coerce_options(NameCleanConfig, config)

    cleaned: list[str] = []
    non_candidates: list[str | None] = []
    seen: dict[str, _SeenName] = {}
    conflict_order: list[str] = []

    for raw in names:
        result = clean_candidate_name(raw, options, logger=logger)
        if result is None:
            non_candidates.append(raw)
            continue

        entry = seen.get(result)
        if entry is None:
            cleaned.append(result)
            seen[result] = _SeenName(originals=[raw])
            continue

        entry.originals.append(raw)
        if options.conflict_strategy == "number":
            entry.count += 1
            cleaned.append(f"{result} ({entry.count})")
        if not entry.is_conflict:
            entry.is_conflict = True
            conflict_order.append(result)

    conflicts = [
        NameConflict(cleaned=key, originals=tuple(seen[key].originals)) for key in conflict_order
    ]
    return CleanedNames(cleaned=cleaned, conflicts=conflicts, non_candidates=non_candidates)
