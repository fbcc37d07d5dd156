from __future__ import annotations

import math
import re
from datetime import date, datetime, timedelta
from typing import Any

"""Date token parsing for report cells.

Report exports carry case dates as free text in several conventions
(15-03-2024, 15/03/2024, 5/3/2024, 15-03-24, 15.03.2024, 2024-03-15) or, when
the spreadsheet kept the cell typed, as a serial day number. parse_date_token
never raises: anything it cannot read is returned as None.
"""

__all__ = [
    "parse_date_token",
    "serial_to_date",
    "SERIAL_EPOCH",
]

# Spreadsheet serial day 0 (1900 date system, leap-year bug folded in)
SERIAL_EPOCH = date(1899, 12, 30)

# Two-digit years below this resolve to 20YY, otherwise 19YY.
TWO_DIGIT_YEAR_PIVOT = 50

# Tried in order, first match wins. Digit look-arounds keep a longer run of
# digits from matching a shorter pattern (2024-03-15 is not 24-03-15).
_DAY_FIRST_PATTERNS = (
    re.compile(r"(?<!\d)(\d{2})-(\d{2})-(\d{4})(?!\d)"),
    re.compile(r"(?<!\d)(\d{2})/(\d{2})/(\d{4})(?!\d)"),
    re.compile(r"(?<!\d)(\d{1,2})/(\d{1,2})/(\d{4})(?!\d)"),
    re.compile(r"(?<!\d)(\d{2})-(\d{2})-(\d{2})(?!\d)"),
)
_ISO_PATTERN = re.compile(r"(?<!\d)(\d{4})-(\d{2})-(\d{2})(?!\d)")

_NUMERIC_TOKEN = re.compile(r"^\d+(\.\d+)?$")
_DOT_SEPARATOR = re.compile(r"\s*\.\s*")


def _expand_year(year: int) -> int:
    if year < 100:
        return 2000 + year if year < TWO_DIGIT_YEAR_PIVOT else 1900 + year
    return year


def _build_date(year: int, month: int, day: int) -> date | None:
    try:
        return date(_expand_year(year), month, day)
    except ValueError:
        # 31-04-2024 and friends are rejected rather than rolled over
        return None


def serial_to_date(value: float) -> date | None:
    """Convert a spreadsheet serial day number to a calendar date.

    The fractional (time-of-day) part is dropped. Non-positive or out of range
    serials give None.
    """
    if isinstance(value, float) and (math.isnan(value) or math.isinf(value)):
        return None
    days = math.floor(value)
    if days <= 0:
        return None
    try:
        return SERIAL_EPOCH + timedelta(days=days)
    except OverflowError:
        return None


def parse_date_token(
    value: Any,
    *,
    allow_iso: bool = True,
    allow_serial: bool = True,
) -> date | None:
    """Normalize a report date cell into a calendar date.

    Args:
        value: raw cell value (str, number, datetime/date, None)
        allow_iso: also accept YYYY-MM-DD after the day-first patterns
        allow_serial: fall back to spreadsheet serial day numbers

    Returns:
        The date, or None when the value does not read as a date.
    """
    if value is None or isinstance(value, bool):
        return None
    # pandas Timestamp is a datetime subclass
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, (int, float)):
        if allow_serial:
            return serial_to_date(value)
        if isinstance(value, float) and math.isnan(value):
            return None
        value = str(int(value)) if float(value).is_integer() else str(value)

    token = str(value).strip()
    if not token:
        return None

    # Dots act as separators (15.03.2024) or trailing decoration (15/03/2024.)
    cleaned = _DOT_SEPARATOR.sub("-", token.strip(".").strip())

    for pattern in _DAY_FIRST_PATTERNS:
        match = pattern.search(cleaned)
        if match:
            day, month, year = (int(g) for g in match.groups())
            parsed = _build_date(year, month, day)
            if parsed is not None:
                return parsed
    if allow_iso:
        match = _ISO_PATTERN.search(cleaned)
        if match:
            year, month, day = (int(g) for g in match.groups())
            parsed = _build_date(year, month, day)
            if parsed is not None:
                return parsed

    if allow_serial and _NUMERIC_TOKEN.match(token):
        return serial_to_date(float(token))
    return None
