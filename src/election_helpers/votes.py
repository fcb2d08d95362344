"""Vote-count parsing for heterogeneous international sources.

``parse_votes`` is total: every input, however malformed, yields a
non-negative integer. Bad rows in a results sheet must not stop a batch.

Separator conventions are disambiguated in a fixed order (first match wins):

1. Indian grouping          12,34,567
2. European thousands       1.234.567 / 1 234 567
3. US thousands             1,234,567
4. trailing 3-digit group   anything ending in [sep]ddd is read as thousands
5. European decimal         1.234,56
6. US decimal               1,234.56
7. fallback                 drop every separator
"""

from __future__ import annotations

import logging
import math
import re
from decimal import Decimal
from typing import Callable

from .patterns import ABBREVIATED_RE, MAGNITUDES, NO_DATA_RE
from .utils.normalize import transliterate_digits, unify_spaces

_logger = logging.getLogger("election_helpers.votes")

VoteInput = str | int | float | Decimal | None

_NON_NUMERIC_RE = re.compile(r"[^0-9.,\s-]")
_SEPARATORS_RE = re.compile(r"[.,\s]")
_INT_PREFIX_RE = re.compile(r"\s*([+-]?[0-9]+)")
_FLOAT_PREFIX_RE = re.compile(r"[0-9]+(?:\.[0-9]*)?|\.[0-9]+")

_INDIAN_RE = re.compile(r"[0-9]{1,2}(?:,[0-9]{2})*,[0-9]{3}")
_EUROPEAN_THOUSANDS_RE = re.compile(r"[0-9]{1,3}(?:[.\s][0-9]{3})+")
_US_THOUSANDS_RE = re.compile(r"[0-9]{1,3}(?:,[0-9]{3})+")
_TRAILING_GROUP_RE = re.compile(r"[.,\s][0-9]{3}\Z")
_EUROPEAN_DECIMAL_RE = re.compile(r"[0-9]{1,3}(?:[.\s][0-9]{3})*,[0-9]{1,2}")
_US_DECIMAL_RE = re.compile(r"[0-9]{1,3}(?:,[0-9]{3})*\.[0-9]{1,2}")


def _parse_int_prefix(text: str) -> int:
    """Read the leading integer of ``text`` the lenient way; no digits -> 0."""
    match = _INT_PREFIX_RE.match(text)
    if not match:
        return 0
    return abs(int(Decimal(match.group(1))))


def _strip_separators(text: str) -> int:
    return _parse_int_prefix(_SEPARATORS_RE.sub("", text))


def _strip_commas(text: str) -> int:
    return _parse_int_prefix(text.replace(",", ""))


def _european_decimal(text: str) -> int:
    number = re.sub(r"[.\s]", "", text).replace(",", ".")
    return int(Decimal(number))


def _us_decimal(text: str) -> int:
    return int(Decimal(text.replace(",", "")))


# (predicate, resolver) pairs, evaluated in order against the cleaned token.
_SEPARATOR_FORMATS: tuple[tuple[Callable[[str], object], Callable[[str], int]], ...] = (
    (_INDIAN_RE.fullmatch, _strip_commas),
    (_EUROPEAN_THOUSANDS_RE.fullmatch, _strip_separators),
    (_US_THOUSANDS_RE.fullmatch, _strip_commas),
    (_TRAILING_GROUP_RE.search, _strip_separators),
    (_EUROPEAN_DECIMAL_RE.fullmatch, _european_decimal),
    (_US_DECIMAL_RE.fullmatch, _us_decimal),
)


def _parse_number(value: int | float | Decimal, log: logging.Logger) -> int:
    if isinstance(value, Decimal):
        if not value.is_finite():
            log.warning("Vote value %r is not finite; counting 0.", value)
            return 0
        return abs(int(value))
    if isinstance(value, float) and not math.isfinite(value):
        log.warning("Vote value %r is not finite; counting 0.", value)
        return 0
    return math.floor(abs(value))


def _parse_abbreviated(number_part: str, suffix: str) -> int:
    match = _FLOAT_PREFIX_RE.match(re.sub(r"[,\s]", "", number_part))
    if not match:
        return 0
    return int(Decimal(match.group(0)) * MAGNITUDES[suffix.lower()])


def parse_votes(value: VoteInput, *, logger: logging.Logger | None = None) -> int:
    """Convert a raw vote token into a non-negative integer.

    Accepts ints, floats, ``Decimal`` and strings in US, European, Indian
    (lakh/crore grouping) and abbreviated (``1.2M``, ``45K``, ``2.5 lakh``)
    notation. Arabic-Indic, Persian and Devanagari digits are accepted too.
    Signs are discarded, decimals are floored, and anything unreadable
    (``N/A``, ``--``, percentages, empty strings, ``None``) counts as ``0``.

    Examples::

        parse_votes("1,234,567")   # 1234567
        parse_votes("1.234.567")   # 1234567
        parse_votes("12,34,567")   # 1234567
        parse_votes("2.5 lakh")    # 250000
        parse_votes(-50)           # 50
    """
    log = logger or _logger

    if value is None or isinstance(value, bool):
        return 0
    if isinstance(value, (int, float, Decimal)):
        return _parse_number(value, log)

    text = unify_spaces(transliterate_digits(str(value))).strip()
    if not text:
        return 0

    if NO_DATA_RE.fullmatch(text):
        return 0

    abbreviated = ABBREVIATED_RE.fullmatch(text)
    if abbreviated:
        return _parse_abbreviated(abbreviated.group(1), abbreviated.group(2))

    if "%" in text:
        log.debug("Vote value %r looks like a percentage; counting 0.", text)
        return 0

    cleaned = _NON_NUMERIC_RE.sub("", text).strip()
    if not cleaned:
        log.warning("Vote value %r has no digits; counting 0.", text)
        return 0

    for predicate, resolver in _SEPARATOR_FORMATS:
        if predicate(cleaned):
            return resolver(cleaned)

    return _strip_separators(cleaned)
