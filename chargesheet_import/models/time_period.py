from __future__ import annotations

from enum import Enum, IntEnum

"""Time-period buckets and deadline classes used by pending-case reports.

A report groups each officer's pending cases under a "time since filing"
bucket. The bucket decides the investigation deadline (45/60/90 days) the
case is tracked against.
"""

__all__ = [
    "TimePeriod",
    "DeadlineClass",
]


class TimePeriod(Enum):
    """Canonical time-period buckets, valued by their Marathi report label.

    ONE_TO_THREE_MONTHS and ONE_TO_FOUR_MONTHS overlap; both appear in real
    reports and both map to the 45-day class.
    """
    OVER_ONE_YEAR = "1 वर्षा वरील"
    SIX_TO_TWELVE_MONTHS = "6 ते 12 महिने"
    THREE_TO_SIX_MONTHS = "3 ते 6 महिने"
    ONE_TO_THREE_MONTHS = "1 ते 3 महिने"
    ONE_TO_FOUR_MONTHS = "1 ते 4 महिने"


class DeadlineClass(IntEnum):
    """Investigation deadline in days ("case type")."""
    DAYS_45 = 45
    DAYS_60 = 60
    DAYS_90 = 90
