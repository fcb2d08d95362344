"""Short display forms of candidate names for graphics and tables."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from .config import DisplayOptions, coerce_options
from .name_splitter import NameSplit, split_name

DISPLAY_FORMATS = ("last-first-initial", "first-last-initial", "last-only", "first-only")

DisplayOptionsInput = DisplayOptions | Mapping[str, Any] | None


def _render(split: NameSplit, fmt: str, name: str) -> str:
    first, last = split.first, split.last
    if fmt == "last-first-initial":
        if not last:
            return first
        return f"{last}, {first[0].upper()}." if first else last
    if fmt == "first-last-initial":
        if not first:
            return last
        return f"{first} {last[0].lower()}." if last else first
    if fmt == "last-only":
        return last or first or name
    return first or last or name


def _truncate(formatted: str, max_length: int) -> str:
    if "," in formatted:
        # Only the surname before the comma is shortened; the initial stays.
        parts = formatted.split(", ")
        last_part = parts[0]
        first_part = parts[1] if len(parts) > 1 else ""
        if first_part and len(last_part) > max_length - len(first_part) - 2:
            keep = max(0, max_length - len(first_part) - 5)
            return f"{last_part[:keep]}..., {first_part}"
        return formatted
    return formatted[: max(0, max_length - 3)] + "..."


def format_name_for_display(
    name: str,
    fmt: str,
    options: DisplayOptionsInput = None,
) -> str:
    """Render ``name`` in one of ``DISPLAY_FORMATS``.

    Low-confidence splits fall back to the untouched name for ``last-only``
    and ``first-only`` when ``fallback_to_full`` is set. ``max_length``
    truncates with ``...``; in comma forms only the surname is cut.

    Examples::

        format_name_for_display("John Smith", "last-first-initial")        # "Smith, J."
        format_name_for_display("Jean-Pierre de la Fontaine", "first-last-initial")
        # "Jean-Pierre d."
    """
    if fmt not in DISPLAY_FORMATS:
        valid = ", ".join(f'"{item}"' for item in DISPLAY_FORMATS)
        raise ValueError(f'Unknown format "{fmt}". Use: {valid}')
    opts = coerce_options(DisplayOptions, options)
    split = split_name(name, opts.split)

    if (
        opts.fallback_to_full
        and split.confidence < opts.split.confidence_threshold
        and fmt in ("last-only", "first-only")
    ):
        return name

    formatted = _render(split, fmt, name)
    if opts.include_suffix and split.suffix:
        formatted = f"{formatted} {split.suffix}"
    if opts.max_length and len(formatted) > opts.max_length:
        formatted = _truncate(formatted, opts.max_length)
    return formatted
