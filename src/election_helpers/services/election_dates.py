"""US federal election calendar arithmetic.

General elections fall on the first Tuesday after the first Monday in
November of even years. All helpers work on calendar dates (``date``);
datetimes are truncated and ISO strings (``YYYY-MM-DD``...) are accepted.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from datetime import date, datetime, timedelta
from types import MappingProxyType

FIRST_STANDARD_YEAR = 1845
FIRST_PRESIDENTIAL_YEAR = 1792
FIRST_MIDTERM_YEAR = 1794
MAX_YEAR = 9999

DATE_FORMATS = ("long", "short", "iso")
PRIMARY_PARTIES = ("D", "R", "both")

# Primaries that do not follow a state's usual pattern, keyed by year then state.
KNOWN_PRIMARY_DATES = MappingProxyType(
    {
        2024: MappingProxyType(
            {
                "IA": date(2024, 1, 15),
                "NH": date(2024, 1, 23),
                "SC": date(2024, 2, 3),
                "NV": date(2024, 2, 6),
            }
        ),
    }
)

_ISO_PREFIX_RE = re.compile(r"^(\d{4})-(\d{2})-(\d{2})")


@dataclass(frozen=True)
class ElectionDates:
    general: date
    primaries: dict[str, date] = field(default_factory=dict)
    is_presidential: bool = False
    is_midterm: bool = False

    def as_dict(self) -> dict[str, object]:
        return {
            "general": self.general.isoformat(),
            "primaries": {state: day.isoformat() for state, day in self.primaries.items()},
            "is_presidential": self.is_presidential,
            "is_midterm": self.is_midterm,
        }


def _validate_year(year: object, minimum: int, example: str) -> int:
    if isinstance(year, bool) or not isinstance(year, int):
        raise TypeError(f"Expected int for year, got {type(year).__name__}. Try: {example}")
    if year < minimum:
        raise ValueError(f"Year {year} is too early (minimum {minimum}). Try: {example}")
    if year > MAX_YEAR:
        raise ValueError(f"Year {year} is too far ahead (maximum {MAX_YEAR}). Try: {example}")
    return year


def _coerce_date(value: object, example: str) -> date:
    if value is None:
        raise ValueError(f"Date required. Try: {example}")
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        match = _ISO_PREFIX_RE.match(value.strip())
        if not match:
            raise ValueError(f"Invalid date {value!r}. Try: {example}")
        year, month, day = (int(part) for part in match.groups())
        try:
            return date(year, month, day)
        except ValueError as exc:
            raise ValueError(f"Invalid date {value!r}: {exc}. Try: {example}") from exc
    raise TypeError(f"Expected str or date, got {type(value).__name__}. Try: {example}")


def _start_date(from_date: object, example: str) -> date:
    return date.today() if from_date is None else _coerce_date(from_date, example)


def get_general_election_date(year: int) -> date:
    """First Tuesday after the first Monday in November of ``year``."""
    _validate_year(year, FIRST_STANDARD_YEAR, "get_general_election_date(2024)")
    november_first = date(year, 11, 1)
    # weekday(): Monday == 0
    first_monday = 1 + (7 - november_first.weekday()) % 7
    return date(year, 11, first_monday + 1)


def is_general_election_day(value: date | datetime | str) -> bool:
    """``"2024-11-05"`` -> True; odd years never qualify."""
    day = _coerce_date(value, 'is_general_election_day("2024-11-05")')
    if day.year % 2 != 0:
        return False
    return day == get_general_election_date(day.year)


def _next_election(start: date, example: str) -> date:
    if start.year < FIRST_STANDARD_YEAR:
        raise ValueError(
            f"Date {start.isoformat()} is before {FIRST_STANDARD_YEAR}, "
            f"when the general election day was fixed. Try: {example}"
        )
    year = start.year + start.year % 2
    if year <= MAX_YEAR and get_general_election_date(year) >= start:
        return get_general_election_date(year)
    if year + 2 > MAX_YEAR:
        raise ValueError(
            f"No general election after {start.isoformat()} up to year {MAX_YEAR}. Try: {example}"
        )
    return get_general_election_date(year + 2)


def get_next_election_date(from_date: date | datetime | str | None = None) -> date:
    """Next general election on or after ``from_date`` (today by default)."""
    example = 'get_next_election_date("2024-01-01")'
    return _next_election(_start_date(from_date, example), example)


def get_days_until_election(from_date: date | datetime | str | None = None) -> int:
    example = 'get_days_until_election("2024-01-01")'
    start = _start_date(from_date, example)
    return (_next_election(start, example) - start) // timedelta(days=1)


def is_presidential_election_year(year: int) -> bool:
    _validate_year(year, FIRST_PRESIDENTIAL_YEAR, "is_presidential_election_year(2024)")
    return year % 4 == 0


def is_midterm_election_year(year: int) -> bool:
    _validate_year(year, FIRST_MIDTERM_YEAR, "is_midterm_election_year(2026)")
    return year % 4 == 2


def get_primary_date(state_abbr: str, year: int, party: str = "both") -> date | None:
    """Known primary date for a state, or ``None`` when it is not on record."""
    example = 'get_primary_date("IA", 2024)'
    if not isinstance(state_abbr, str):
        raise TypeError(f"Expected str for state, got {type(state_abbr).__name__}. Try: {example}")
    cleaned = state_abbr.strip().upper()
    if not cleaned:
        raise ValueError(f"State abbreviation required. Try: {example}")
    if len(cleaned) != 2:
        raise ValueError(f"State abbreviation must be 2 letters, got {state_abbr!r}. Try: {example}")
    _validate_year(year, FIRST_STANDARD_YEAR, example)
    if party not in PRIMARY_PARTIES:
        raise ValueError(f'Party must be "D", "R", or "both", got {party!r}. Try: {example}')
    return KNOWN_PRIMARY_DATES.get(year, {}).get(cleaned)


def get_election_dates_for_year(year: int) -> ElectionDates:
    _validate_year(year, FIRST_STANDARD_YEAR, "get_election_dates_for_year(2024)")
    return ElectionDates(
        general=get_general_election_date(year),
        primaries=dict(KNOWN_PRIMARY_DATES.get(year, {})),
        is_presidential=is_presidential_election_year(year),
        is_midterm=is_midterm_election_year(year),
    )


def format_election_date(value: date | datetime, fmt: str = "long") -> str:
    """Render a date as ``long`` ("Tuesday, November 5, 2024"), ``short`` ("11/5/2024") or ``iso``."""
    example = "format_election_date(date(2024, 11, 5))"
    if value is None:
        raise ValueError(f"Date required. Try: {example}")
    if not isinstance(value, date):
        raise TypeError(f"Expected date, got {type(value).__name__}. Try: {example}")
    if isinstance(value, datetime):
        value = value.date()
    if fmt not in DATE_FORMATS:
        raise ValueError(f'Format must be "long", "short", or "iso", got {fmt!r}.')
    if fmt == "iso":
        return value.isoformat()
    if fmt == "short":
        return f"{value.month}/{value.day}/{value.year}"
    return f"{value:%A}, {value:%B} {value.day}, {value.year}"
