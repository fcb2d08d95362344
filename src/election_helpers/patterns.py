"""Static pattern tables shared by the normalizers.

Everything here is read-only after import: mappings are wrapped in
``MappingProxyType``, word lists are frozensets and regex lists are tuples of
compiled patterns.
"""

from __future__ import annotations

import re
from types import MappingProxyType
from typing import Mapping

# ---------------------------------------------------------------------------
# Party labels
# ---------------------------------------------------------------------------

# Keys are compared against the cleaned label: lower-case, punctuation other
# than apostrophes/hyphens turned into spaces, whitespace collapsed.
DEFAULT_PARTY_MAP: Mapping[str, str] = MappingProxyType(
    {
        # Standard names
        "republican": "R",
        "democrat": "D",
        "democratic": "D",
        "independent": "I",
        "green": "G",
        "libertarian": "L",
        # Abbreviations
        "rep": "R",
        "gop": "R",
        "dem": "D",
        "ind": "I",
        "lib": "L",
        "grn": "G",
        # Typos seen in hand-entered sheets
        "democatic": "D",
        "democratc": "D",
        "democract": "D",
        "republcan": "R",
        "republicn": "R",
        "repulican": "R",
        "repbulican": "R",
        # International
        "labour": "LAB",
        "conservative": "CON",
        "liberal": "LIB",
        "social democratic": "SD",
        "social democrat": "SD",
        "christian democratic": "CD",
        "democratic socialist": "DS",
        "peoples party": "PP",
        "peoples": "PEP",
        "national": "NAT",
        "unity": "UNITY",
        "civic": "CIVIC",
        "citizens": "CIT",
        # US third parties
        "constitution": "CONST",
        "constitutional": "CONST",
        "working families": "WF",
        "working family": "WF",
        "socialist": "SOC",
        "communist": "COM",
        "reform": "REF",
        "tea party": "TEA",
        "american independent": "AI",
        "peace and freedom": "PF",
        "natural law": "NL",
        "prohibition": "PRO",
        # State-specific ballot lines
        "democratic-farmer-labor": "DFL",
        "conservative party": "CONS",
        "working families party": "WFP",
        "independence party": "IP",
        "liberal party": "LIB",
        "alaska independence": "AIP",
        "vermont progressive": "VPP",
        "mountain": "MTN",
        "prairie": "PRA",
        # No affiliation / placeholders
        "non-partisan": "NP",
        "nonpartisan": "NP",
        "no party": "NP",
        "none": "NP",
        "no party preference": "NPP",
        "decline to state": "DTS",
        "unaffiliated": "UA",
        "other": "OTH",
        "write-in": "WI",
        "write in": "WI",
        "writein": "WI",
        "unknown": "UNK",
        "na": "UNK",
        "n a": "UNK",
        "null": "UNK",
        "yes": "UNK",
        "no": "UNK",
        "true": "UNK",
        "false": "UNK",
        "0": "UNK",
        "1": "UNK",
        "2": "UNK",
        "test": "TEST",
        "sample": "SAMPLE",
        "example": "EXAMPLE",
        "tbd": "TBD",
        "pending": "PENDING",
        # Fusion voting and numbered ballot lines
        "republican conservative": "R",
        "democratic liberal": "D",
        "republican 1": "R",
        "republican 2": "R",
        "democratic 1": "D",
        "democratic 2": "D",
        "conservative 3": "CONS",
        "liberal 4": "LIB",
        "working families 5": "WF",
        # Descriptive additions
        "republican party": "R",
        "democratic party": "D",
        "republican party of": "R",
        "democratic party of": "D",
        "republican nominee": "R",
        "democratic nominee": "D",
        "republican candidate": "R",
        "democratic candidate": "D",
        "incumbent republican": "R",
        "incumbent democratic": "D",
        "incumbent democrat": "D",
        "republican_party": "R",
        "democratic_party": "D",
        "republican-party": "R",
        "democratic-party": "D",
        "green_party": "G",
        "libertarian_party": "L",
        # Encoding debris left after cleaning
        "republicanâ": "R",
        "democratâ": "D",
        # Historical
        "whig": "WHIG",
        "federalist": "FED",
        "anti-federalist": "ANTI-FED",
        "democratic-republican": "DR",
        "know nothing": "KN",
        "bull moose": "BULL",
        "progressive": "PROG",
        "populist": "POP",
        "dixiecrat": "DIX",
        "states rights": "SR",
        "american labor": "AL",
        # Spanish and French ballots
        "republicano": "R",
        "democrata": "D",
        "demócrata": "D",
        "democratico": "D",
        "democrático": "D",
        "independiente": "I",
        "républicain": "R",
        "démocrate": "D",
    }
)

# Checked on the raw (trimmed) label; cleaning would strip them.
PARTY_EMOJI: tuple[tuple[str, str], ...] = (
    ("\U0001F418", "R"),  # elephant
    ("\U0001F434", "D"),  # horse face, the closest thing to a donkey
)

# Ordered: the first pattern that searches positive wins.
PARTY_PATTERNS: tuple[tuple[re.Pattern[str], str], ...] = tuple(
    (re.compile(pattern, re.IGNORECASE), code)
    for pattern, code in (
        # Republican
        (r"^r[^a-z]*$", "R"),
        (r"rep[ub]*l*[ic]*[an]*", "R"),
        (r"^gop\b", "R"),
        (r"elephant", "R"),
        (r"red\s*(party|team)", "R"),
        (r"right\s*wing", "R"),
        (r"conservative(?!.*party)", "R"),
        # Democratic
        (r"^d[^a-z]*$", "D"),
        (r"dem[oc]*[ra]*[tic]*", "D"),
        (r"donkey", "D"),
        (r"blue\s*(party|team)", "D"),
        (r"left\s*wing", "D"),
        (r"liberal(?!.*party)", "D"),
        # Independent / unaffiliated
        (r"^i[^a-z]*$", "I"),
        (r"ind[ep]*[en]*[de]*[nt]*", "I"),
        (r"no\s*party", "NP"),
        (r"unaffiliated", "UA"),
        # Third parties
        (r"green", "G"),
        (r"libertarian", "L"),
        (r"constitution", "CONST"),
        (r"socialist", "SOC"),
        (r"communist", "COM"),
        # Placeholders
        (r"write.?in", "WI"),
        (r"other", "OTH"),
        (r"^x{1,3}$", "UNK"),
        (r"^\?+$", "UNK"),
        (r"^-+$", "UNK"),
        (r"^\.+$", "UNK"),
        (r"^n/?a$", "UNK"),
        (r"^tbd$", "TBD"),
        (r"^pending$", "PENDING"),
    )
)

PARTY_DESCRIPTOR_RE = re.compile(r"\b(party|nominee|candidate|incumbent)\b")

LETTER_CODES = frozenset({"R", "D", "I", "G", "L"})
MAJOR_PARTY_CODES = frozenset({"R", "D"})
NON_PARTISAN_CODES = frozenset({"NP", "NPP", "UA", "I", "UNK", "TBD", "PENDING"})

# ---------------------------------------------------------------------------
# Vote counts
# ---------------------------------------------------------------------------

NO_DATA_RE = re.compile(r"n/a|na|null|none|--|-|tbd|pending|\?+|\.+", re.IGNORECASE)

MAGNITUDES: Mapping[str, int] = MappingProxyType(
    {
        "k": 10**3,
        "m": 10**6,
        "b": 10**9,
        "t": 10**12,
        "lakh": 10**5,
        "crore": 10**7,
    }
)

ABBREVIATED_RE = re.compile(r"([0-9.,\s]+?)\s*(k|m|b|t|lakh|crore)\s*", re.IGNORECASE)

# ---------------------------------------------------------------------------
# Candidate names
# ---------------------------------------------------------------------------

PROFANITY_PATTERNS: tuple[re.Pattern[str], ...] = tuple(
    re.compile(pattern, re.IGNORECASE)
    for pattern in (
        r"\b\w*(?:fuck|shit)\w*\b",
        r"\b(?:fuck|shit|damn|hell|ass|bitch|bastard|crap)\b",
        r"\b(?:f+u+c+k+|s+h+i+t+|d+a+m+n+)\b",
        r"\b(?:fvck|sh1t|d4mn|h3ll)\b",
        r"\b(?:hitler|nazi|satan|666)\b",
        r"\b(?:ligma|sugma|deez|nuts)\b",
    )
)

# Placeholder rows that end up in the candidate column.
NON_CANDIDATE_PATTERNS: tuple[re.Pattern[str], ...] = tuple(
    re.compile(pattern, re.IGNORECASE)
    for pattern in (
        r"total\s*(votes?|ballots?)?",
        r"sum\s*(of\s*)?(votes?|ballots?)?",
        r"invalid\s*(votes?|ballots?)?",
        r"blank\s*(votes?|ballots?)?",
        r"spoiled\s*(votes?|ballots?)?",
        r"rejected\s*(votes?|ballots?)?",
        r"abstentions?",
        r"no\s*vote",
        r"undervotes?",
        r"overvotes?",
        r"write.?ins?",
        r"others?",
        r"candidates?\s*total",
        r"all\s*candidates",
        r"remaining\s*candidates",
        r"\d+",
        r"n/a",
        r"tbd",
        r"pending",
        r"unknown",
        r"-+",
        r"\.+",
        r"\?+",
    )
)

# Abbreviations whose trailing period survives the "smart" period policy.
TITLE_ABBREVIATIONS: tuple[str, ...] = (
    "Jr",
    "Sr",
    "Dr",
    "Mr",
    "Mrs",
    "Ms",
    "Prof",
    "Rev",
    "Hon",
    "St",
)

# Lower-cased again after title-casing.
TITLE_CASE_PARTICLES: tuple[str, ...] = (
    "De",
    "La",
    "Le",
    "Van",
    "Von",
    "Du",
    "Da",
    "Das",
    "Der",
    "El",
    "Al",
)

NAME_PARTICLES = frozenset(
    {
        "de",
        "da",
        "du",
        "del",
        "della",
        "delle",
        "degli",
        "dei",
        "la",
        "le",
        "les",
        "el",
        "al",
        "van",
        "von",
        "vander",
        "der",
        "den",
        "mac",
        "mc",
        "y",
        "bin",
        "ibn",
        "abu",
    }
)

NAME_SUFFIXES = frozenset(
    {
        "jr",
        "junior",
        "sr",
        "senior",
        "i",
        "ii",
        "iii",
        "iv",
        "v",
        "1st",
        "2nd",
        "3rd",
        "4th",
        "5th",
        "phd",
        "md",
        "esq",
        "cpa",
    }
)

NAME_PREFIXES = frozenset(
    {
        "dr",
        "doctor",
        "mr",
        "mister",
        "mrs",
        "miss",
        "ms",
        "prof",
        "professor",
        "rev",
        "reverend",
        "hon",
        "honorable",
        "sen",
        "senator",
        "rep",
        "representative",
        "gov",
        "governor",
        "mayor",
        "capt",
        "captain",
        "col",
        "colonel",
        "gen",
        "general",
        "lt",
        "lieutenant",
    }
)
