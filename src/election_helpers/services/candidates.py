"""Candidate vote shares, ordering and race boundary availability."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from decimal import Decimal, InvalidOperation
from types import MappingProxyType
from typing import Any, Iterable

_logger = logging.getLogger("election_helpers.candidates")

RACE_BOUNDARIES: Mapping[str, tuple[str, ...]] = MappingProxyType({
    "president": ("state", "county"),
    "senate": ("county",),
    "house": ("district",),
})


def _as_number(value: object) -> Decimal | None:
    if isinstance(value, bool) or value is None:
        return None
    if isinstance(value, (int, float, Decimal)):
        number = Decimal(value)
    elif isinstance(value, str):
        try:
            number = Decimal(value.strip())
        except InvalidOperation:
            return None
    else:
        return None
    return number if number.is_finite() else None


def candidate_vote_percentage(
    candidate_votes: int | float | str,
    total_votes: int | float | str,
    decimal_places: int = 1,
    *,
    logger: logging.Logger | None = None,
) -> str | None:
    """Share of ``total_votes`` as a fixed-point string: ``(100, 200)`` -> ``"50.0"``.

    Returns ``None`` (and logs a warning) when either count is missing,
    non-numeric or negative, or when the total is zero.
    """
    log = logger or _logger
    if isinstance(decimal_places, bool) or not isinstance(decimal_places, int) or decimal_places < 0:
        raise ValueError(f"decimal_places must be a non-negative int, got {decimal_places!r}.")

    votes = _as_number(candidate_votes)
    total = _as_number(total_votes)
    if votes is None or total is None:
        log.warning(
            "Cannot compute vote percentage from %r / %r: not numeric.",
            candidate_votes,
            total_votes,
        )
        return None
    if votes < 0 or total < 0:
        log.warning(
            "Cannot compute vote percentage from negative counts %r / %r.",
            candidate_votes,
            total_votes,
        )
        return None
    if total == 0:
        log.warning("Cannot compute vote percentage: total votes is zero.")
        return None
    return f"{votes * 100 / total:.{decimal_places}f}"


def _candidate_votes(candidate: Any) -> Decimal:
    if isinstance(candidate, Mapping):
        value = candidate.get("candidatevotes")
    else:
        value = getattr(candidate, "candidatevotes", None)
    number = _as_number(value)
    return number if number is not None else Decimal(0)


def sort_candidates_by_votes(
    candidates: Iterable[Any] | None,
    descending: bool = True,
    *,
    logger: logging.Logger | None = None,
) -> list[Any]:
    """Return a new list ordered by each record's ``candidatevotes``.

    Records may be mappings or objects. Non-numeric counts sort as 0 and
    ties keep their input order.
    """
    log = logger or _logger
    if candidates is None:
        log.error("Trying to sort candidates but got nothing to sort.")
        return []
    records = list(candidates)
    if not records:
        log.warning("Trying to sort a candidate list with zero candidates.")
        return []
    if len(records) == 1:
        log.debug("Sorting a candidate list with a single candidate.")
    return sorted(records, key=_candidate_votes, reverse=descending)


def boundaries_available_for_race_type(race_type: str) -> list[str] | None:
    """Map boundaries results exist for: ``"senate"`` -> ``["county"]``."""
    boundaries = RACE_BOUNDARIES.get(race_type) if isinstance(race_type, str) else None
    return list(boundaries) if boundaries is not None else None


def is_boundary_available_for_race_type(race_type: str, boundary: str) -> bool:
    return boundary in (boundaries_available_for_race_type(race_type) or [])
