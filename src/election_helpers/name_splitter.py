"""Split a full candidate name into first/last/suffix parts.

The split is heuristic. Every result carries a ``confidence`` between 0 and
1; values under ``SplitOptions.confidence_threshold`` (0.5 by default)
should be treated as low trust. The function itself never refuses a split.
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from .config import SplitOptions, coerce_options
from .patterns import NAME_PARTICLES, NAME_PREFIXES, NAME_SUFFIXES

_COMMA_PAIR_RE = re.compile(r"^([^,]+),\s*([^,]+)$")

SplitOptionsInput = SplitOptions | Mapping[str, Any] | None


@dataclass(frozen=True)
class NameSplit:
    first: str
    last: str
    confidence: float
    suffix: str | None = None
    note: str | None = None
    error: str | None = None

    def as_dict(self) -> dict[str, Any]:
        payload: dict[str, Any] = {
            "first": self.first,
            "last": self.last,
            "confidence": self.confidence,
        }
        for key in ("suffix", "note", "error"):
            value = getattr(self, key)
            if value is not None:
                payload[key] = value
        return payload


def _bare(word: str) -> str:
    return word.lower().replace(".", "")


def _take_prefixes(words: list[str]) -> list[str]:
    prefixes: list[str] = []
    while words and _bare(words[0]) in NAME_PREFIXES:
        prefixes.append(words.pop(0))
    return prefixes


def _take_suffixes(words: list[str]) -> list[str]:
    suffixes: list[str] = []
    while words and _bare(words[-1]) in NAME_SUFFIXES:
        suffixes.insert(0, words.pop())
    return suffixes


def _is_particle(word: str) -> bool:
    return word.lower() in NAME_PARTICLES


def split_name(name: str, options: SplitOptionsInput = None) -> NameSplit:
    """Split ``name`` into first and last name with a confidence score.

    Rules, in order:

    - ``"Last, First"`` is taken at face value (0.9).
    - Leading titles (``Dr``, ``Sen``...) are dropped and trailing suffixes
      (``Jr``, ``III``, ``PhD``...) move into ``suffix``.
    - One word is a first name only (0.3); two words split in the middle
      (0.9) unless the first is a particle (``"de Silva"``, 0.8).
    - Longer names put the first particle and everything after it in the
      last name (0.85), otherwise the last one or two words (0.7, lowered
      for long names and many first names).

    Examples::

        split_name("John Smith")                   # first="John", last="Smith"
        split_name("Jean-Pierre de la Fontaine")   # last="de la Fontaine", 0.85
        split_name("Martin Luther King Jr.")       # suffix="Jr."
    """
    if not isinstance(name, str):
        raise TypeError(
            f"Expected non-empty string for name, got {type(name).__name__}. "
            'Try: split_name("John Smith")'
        )
    cleaned = name.strip()
    if not cleaned:
        raise ValueError('Name cannot be empty. Try: split_name("John Smith")')
    opts = coerce_options(SplitOptions, options)

    comma = _COMMA_PAIR_RE.match(cleaned)
    if comma:
        last, first = comma.groups()
        return NameSplit(first=first.strip(), last=last.strip(), confidence=0.9)

    words = cleaned.split()
    # Titles are recognised so they do not pollute the first name; they are not returned.
    prefixes = _take_prefixes(words)
    suffixes = _take_suffixes(words) if opts.handle_suffixes else []
    suffix = " ".join(suffixes) or None

    if not words:
        return NameSplit(
            first=" ".join(prefixes),
            last=" ".join(suffixes),
            confidence=0.2,
            error="No main name parts found",
        )

    if len(words) == 1:
        return NameSplit(
            first=words[0],
            last="",
            suffix=suffix,
            confidence=0.3,
            note="Single name detected",
        )

    if len(words) == 2:
        if opts.keep_particles and _is_particle(words[0]):
            return NameSplit(
                first="",
                last=" ".join(words),
                suffix=suffix,
                confidence=0.8,
                note="Particle detected",
            )
        return NameSplit(first=words[0], last=words[1], suffix=suffix, confidence=0.9)

    if opts.keep_particles:
        for index, word in enumerate(words):
            if _is_particle(word):
                last_words = words[index:]
                return NameSplit(
                    first=" ".join(words[:index]),
                    last=" ".join(last_words),
                    suffix=suffix,
                    confidence=0.85,
                    note=f"Particle-based splitting: {len(last_words)} particle words",
                )

    last_count = min(2, len(words) // 2)
    first_words = words[:-last_count]
    last_words = words[-last_count:]

    confidence = 0.7
    if len(first_words) > opts.max_first_names:
        confidence *= 0.8
    if len(words) > 4:
        confidence *= 0.7

    return NameSplit(
        first=" ".join(first_words),
        last=" ".join(last_words),
        suffix=suffix,
        confidence=confidence,
        note=f"Position-based split: {len(first_words)} first, {len(last_words)} last",
    )
