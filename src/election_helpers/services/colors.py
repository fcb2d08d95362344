"""Map party labels to display colors for charts and maps."""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType

from election_helpers.party import normalize_party

DEFAULT_COLOR = "#999999"

PARTY_COLORS = MappingProxyType(
    {
        "R": "#e41a1c",
        "D": "#377eb8",
        "I": "#984ea3",
        "G": "#4daf4a",
        "L": "#ffb300",
        "CONST": "#a65628",
        "WF": "#f781bf",
        "NP": "#636363",
        "NPP": "#636363",
        "UA": "#636363",
        "UNK": DEFAULT_COLOR,
    }
)


def get_party_color(
    party: str | None,
    custom_map: Mapping[str, str] | None = None,
    palette: Mapping[str, str] | None = None,
    default: str = DEFAULT_COLOR,
) -> str:
    """Color for a raw party label.

    The label is normalized first, so ``"Republican"``, ``"GOP"`` and
    ``"rep."`` share a color. ``palette`` overrides ``PARTY_COLORS`` per code
    and ``custom_map`` is passed through to ``normalize_party``.
    """
    if party is None or (isinstance(party, str) and not party.strip()):
        return default
    code = normalize_party(party, custom_map)
    if palette and code in palette:
        return palette[code]
    return PARTY_COLORS.get(code, default)
