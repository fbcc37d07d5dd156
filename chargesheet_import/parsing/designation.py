from __future__ import annotations

import re
from collections.abc import Sequence

"""Officer line splitting: "<designation><name>" -> (designation, name)."""

__all__ = [
    "DESIGNATIONS",
    "SPREADSHEET_DESIGNATIONS",
    "NUMBERED_DESIGNATION_BASES",
    "split_designation",
]

# Literal prefixes, tried in this order. Order is significant: the first
# prefix the text starts with wins, even when a longer one would also match.
DESIGNATIONS: tuple[str, ...] = (
    "P.I.",
    "PSI",
    "API",
    "पोउपनि",
    "मपोउपनि",
    "श्रेणी.पोउपनि",
    "सपोनि",
    "ASI",
    "स.फौ",
    "सफौ",
    "पोह",
    "मपोह",
    "पोना",
    "पोहे",
    "मपोना",
    "इतर",
)

SPREADSHEET_DESIGNATIONS: tuple[str, ...] = DESIGNATIONS + ("Sub-Inspector", "Inspector")

# Ranks that are written with a buckle number, e.g. "पोह क्र. 123 पाटील".
NUMBERED_DESIGNATION_BASES: tuple[str, ...] = (
    "पोह",
    "मपोह",
    "सफौ",
    "पोना",
    "मपोना",
    "पोहे",
    "मपोहे",
    "स.फौ",
)


def _numbered_pattern(bases: Sequence[str]) -> re.Pattern[str]:
    alternatives = "|".join(re.escape(b) for b in bases)
    return re.compile(rf"^({alternatives})[\s/.]*(?:क्र\.?)?[\s/.]*(\d+)")


def split_designation(
    text: str,
    designations: Sequence[str] = DESIGNATIONS,
    numbered_bases: Sequence[str] = NUMBERED_DESIGNATION_BASES,
) -> tuple[str, str]:
    """Split an officer cell into (designation, officer_name).

    A literal prefix from designations is tried first, then a numbered rank
    ("<base> <number>", designation returned as "<base> <number>"). When
    neither matches, the whole text is the officer name and the designation
    is empty.
    """
    text = text.strip()
    for prefix in designations:
        if text.startswith(prefix):
            return prefix, text[len(prefix):].strip()
    if numbered_bases:
        match = _numbered_pattern(numbered_bases).match(text)
        if match:
            return f"{match.group(1)} {match.group(2)}", text[match.end():].strip()
    return "", text
