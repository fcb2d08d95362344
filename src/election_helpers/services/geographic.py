"""State FIPS / USPS abbreviation / name lookups.

Plain table lookups: the ``*_to_*`` helpers return ``None`` for unknown
input, the ``get_*`` helpers validate and report bad input.
"""

from __future__ import annotations

import logging
import re
from types import MappingProxyType

_logger = logging.getLogger("election_helpers.geographic")

# (FIPS, USPS abbreviation, name) for the 50 states and DC.
STATES: tuple[tuple[str, str, str], ...] = (
    ("01", "AL", "Alabama"),
    ("02", "AK", "Alaska"),
    ("04", "AZ", "Arizona"),
    ("05", "AR", "Arkansas"),
    ("06", "CA", "California"),
    ("08", "CO", "Colorado"),
    ("09", "CT", "Connecticut"),
    ("10", "DE", "Delaware"),
    ("11", "DC", "District of Columbia"),
    ("12", "FL", "Florida"),
    ("13", "GA", "Georgia"),
    ("15", "HI", "Hawaii"),
    ("16", "ID", "Idaho"),
    ("17", "IL", "Illinois"),
    ("18", "IN", "Indiana"),
    ("19", "IA", "Iowa"),
    ("20", "KS", "Kansas"),
    ("21", "KY", "Kentucky"),
    ("22", "LA", "Louisiana"),
    ("23", "ME", "Maine"),
    ("24", "MD", "Maryland"),
    ("25", "MA", "Massachusetts"),
    ("26", "MI", "Michigan"),
    ("27", "MN", "Minnesota"),
    ("28", "MS", "Mississippi"),
    ("29", "MO", "Missouri"),
    ("30", "MT", "Montana"),
    ("31", "NE", "Nebraska"),
    ("32", "NV", "Nevada"),
    ("33", "NH", "New Hampshire"),
    ("34", "NJ", "New Jersey"),
    ("35", "NM", "New Mexico"),
    ("36", "NY", "New York"),
    ("37", "NC", "North Carolina"),
    ("38", "ND", "North Dakota"),
    ("39", "OH", "Ohio"),
    ("40", "OK", "Oklahoma"),
    ("41", "OR", "Oregon"),
    ("42", "PA", "Pennsylvania"),
    ("44", "RI", "Rhode Island"),
    ("45", "SC", "South Carolina"),
    ("46", "SD", "South Dakota"),
    ("47", "TN", "Tennessee"),
    ("48", "TX", "Texas"),
    ("49", "UT", "Utah"),
    ("50", "VT", "Vermont"),
    ("51", "VA", "Virginia"),
    ("53", "WA", "Washington"),
    ("54", "WV", "West Virginia"),
    ("55", "WI", "Wisconsin"),
    ("56", "WY", "Wyoming"),
)

# Abbreviation -> name only; these have no entry in the state FIPS tables.
TERRITORIES: tuple[tuple[str, str], ...] = (
    ("AS", "American Samoa"),
    ("FM", "Federated States of Micronesia"),
    ("GU", "Guam"),
    ("MH", "Marshall Islands"),
    ("MP", "Northern Mariana Islands"),
    ("PR", "Puerto Rico"),
    ("PW", "Palau"),
    ("VI", "Virgin Islands"),
)

STATE_NAME_BY_FIPS = MappingProxyType({fips: name for fips, _, name in STATES})
STATE_ABBR_BY_FIPS = MappingProxyType({fips: abbr for fips, abbr, _ in STATES})
STATE_FIPS_BY_NAME = MappingProxyType({name: fips for fips, _, name in STATES})
STATE_NAME_BY_ABBR = MappingProxyType(
    {**{abbr: name for _, abbr, name in STATES}, **dict(TERRITORIES)}
)

_DIGITS_RE = re.compile(r"[0-9]+")


def _fips_key(value: object) -> str | None:
    """Two-digit string key for an int or digit-string FIPS code."""
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        text = str(value)
    elif isinstance(value, str):
        text = value.strip()
    else:
        return None
    if not _DIGITS_RE.fullmatch(text):
        return None
    return text.zfill(2)


def state_fips_to_name(state_fips: str | int) -> str | None:
    key = _fips_key(state_fips)
    return STATE_NAME_BY_FIPS.get(key) if key else None


def state_fips_to_abbr(state_fips: str | int) -> str | None:
    key = _fips_key(state_fips)
    return STATE_ABBR_BY_FIPS.get(key) if key else None


def state_name_to_fips(state_name: str) -> str | None:
    """Exact-match lookup: ``"New York"`` -> ``"36"``."""
    if not isinstance(state_name, str):
        return None
    return STATE_FIPS_BY_NAME.get(state_name)


def state_abbr_to_name(state_abbr: str) -> str | None:
    """``" ny "`` -> ``"New York"``; territories are included."""
    if not state_abbr or not isinstance(state_abbr, str):
        return None
    return STATE_NAME_BY_ABBR.get(state_abbr.strip().upper())


def state_abbr_to_fips(state_abbr: str) -> str | None:
    name = state_abbr_to_name(state_abbr)
    if name is None:
        return None
    return STATE_FIPS_BY_NAME.get(name)


def get_state_fips_from_state_abbr(
    state_abbr: object, *, logger: logging.Logger | None = None
) -> str | None:
    """Validated abbreviation -> FIPS lookup that logs why a value was rejected."""
    log = logger or _logger
    if not state_abbr or not isinstance(state_abbr, str):
        log.error(
            "Invalid state abbreviation %r (%s); expected a two-letter code such as 'NY'.",
            state_abbr,
            type(state_abbr).__name__,
        )
        return None
    cleaned = state_abbr.strip().upper()
    if len(cleaned) != 2:
        log.error("State abbreviation %r must be exactly 2 characters.", state_abbr)
        return None
    fips = state_abbr_to_fips(cleaned)
    if fips is None:
        log.error("Could not convert state abbreviation %r to FIPS.", state_abbr)
    return fips


def get_state_abbr_from_state_fips(state_fips: str | int) -> str:
    """FIPS -> abbreviation; ``6`` and ``"6"`` are padded to ``"06"``.

    Raises ``ValueError`` when the code is missing, longer than two digits
    or not a state FIPS code.
    """
    if state_fips is None or state_fips == "" or isinstance(state_fips, bool):
        raise ValueError("state_fips is required. Try: get_state_abbr_from_state_fips('36')")
    padded = str(state_fips).strip().zfill(2)
    if len(padded) != 2:
        raise ValueError(f"state_fips must be two characters, got {state_fips!r}.")
    abbr = STATE_ABBR_BY_FIPS.get(padded)
    if abbr is None:
        raise ValueError(f"state_fips {state_fips!r} is not a valid state FIPS code.")
    return abbr


def get_state_code_from_county_fips(county_fips: str) -> str:
    """``"36001"`` -> ``"36"``."""
    if not isinstance(county_fips, str):
        raise TypeError(
            f"County FIPS must be a string, got {type(county_fips).__name__}. "
            "Try: get_state_code_from_county_fips('36001')"
        )
    if not _DIGITS_RE.fullmatch(county_fips):
        raise ValueError(f"County FIPS code must contain only digits, got {county_fips!r}.")
    if len(county_fips) < 2:
        raise ValueError(f"County FIPS code {county_fips!r} is too short.")
    return county_fips[:2]
