from __future__ import annotations

from collections.abc import Mapping
from datetime import date

from ..models.time_period import DeadlineClass, TimePeriod

"""Time-period bucket classification and deadline-class derivation.

Bucket labels are matched by substring containment, trying buckets in the
canonical order below; the first bucket with a contained phrase wins.
"""

__all__ = [
    "MARATHI_PHRASES",
    "MARATHI_ENGLISH_PHRASES",
    "DEADLINE_TABLE",
    "CSV_DEADLINE_TABLE",
    "classify_time_period",
    "deadline_class_for",
    "infer_time_period",
]

MARATHI_PHRASES: dict[TimePeriod, tuple[str, ...]] = {
    TimePeriod.OVER_ONE_YEAR: ("1 वर्षा वरील",),
    TimePeriod.SIX_TO_TWELVE_MONTHS: ("6 ते 12 महिने",),
    TimePeriod.THREE_TO_SIX_MONTHS: ("3 ते 6 महिने",),
    TimePeriod.ONE_TO_THREE_MONTHS: ("1 ते 3 महिने",),
    TimePeriod.ONE_TO_FOUR_MONTHS: ("1 ते 4 महिने",),
}

MARATHI_ENGLISH_PHRASES: dict[TimePeriod, tuple[str, ...]] = {
    TimePeriod.OVER_ONE_YEAR: ("1 वर्षा वरील", "Above 1 year"),
    TimePeriod.SIX_TO_TWELVE_MONTHS: ("6 ते 12 महिने", "6 to 12 months"),
    TimePeriod.THREE_TO_SIX_MONTHS: ("3 ते 6 महिने", "3 to 6 months"),
    TimePeriod.ONE_TO_THREE_MONTHS: ("1 ते 3 महिने", "1 to 3 months"),
    TimePeriod.ONE_TO_FOUR_MONTHS: ("1 ते 4 महिने", "1 to 4 months"),
}

# Spreadsheet uploads: every bucket has a class.
DEADLINE_TABLE: dict[TimePeriod, DeadlineClass] = {
    TimePeriod.OVER_ONE_YEAR: DeadlineClass.DAYS_90,
    TimePeriod.SIX_TO_TWELVE_MONTHS: DeadlineClass.DAYS_90,
    TimePeriod.THREE_TO_SIX_MONTHS: DeadlineClass.DAYS_60,
    TimePeriod.ONE_TO_THREE_MONTHS: DeadlineClass.DAYS_45,
    TimePeriod.ONE_TO_FOUR_MONTHS: DeadlineClass.DAYS_45,
}

# CSV bulk import never assigned 6-12 months a class; it stays undefined there.
CSV_DEADLINE_TABLE: dict[TimePeriod, DeadlineClass] = {
    period: klass
    for period, klass in DEADLINE_TABLE.items()
    if period is not TimePeriod.SIX_TO_TWELVE_MONTHS
}

# Canonical check order. Dict order of the phrase tables is not trusted.
_BUCKET_ORDER = (
    TimePeriod.OVER_ONE_YEAR,
    TimePeriod.SIX_TO_TWELVE_MONTHS,
    TimePeriod.THREE_TO_SIX_MONTHS,
    TimePeriod.ONE_TO_THREE_MONTHS,
    TimePeriod.ONE_TO_FOUR_MONTHS,
)

DAYS_PER_MONTH = 30


def classify_time_period(
    text: str | None,
    phrases: Mapping[TimePeriod, tuple[str, ...]] = MARATHI_ENGLISH_PHRASES,
) -> TimePeriod | None:
    """Return the bucket whose phrase is contained in text, or None."""
    if not text:
        return None
    for period in _BUCKET_ORDER:
        for phrase in phrases.get(period, ()):
            if phrase in text:
                return period
    return None


def deadline_class_for(
    period: TimePeriod | None,
    table: Mapping[TimePeriod, DeadlineClass] = DEADLINE_TABLE,
    default: DeadlineClass = DeadlineClass.DAYS_60,
) -> DeadlineClass | None:
    """Deadline class of a bucket.

    No bucket at all gives the default (60 days). A bucket the table does not
    list gives None.
    """
    if period is None:
        return default
    return table.get(period)


def infer_time_period(case_date: date, today: date) -> TimePeriod:
    """Guess the bucket of a case from its age (30-day months)."""
    months = (today - case_date).days // DAYS_PER_MONTH
    if months >= 12:
        return TimePeriod.OVER_ONE_YEAR
    if months >= 6:
        return TimePeriod.SIX_TO_TWELVE_MONTHS
    if months >= 3:
        return TimePeriod.THREE_TO_SIX_MONTHS
    # under one month is still reported as 1-3 months
    return TimePeriod.ONE_TO_THREE_MONTHS
