from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Any

from ..models.case_status import CLOSED_STATUSES, CaseStatus, SeverityTier
from ..models.time_period import DeadlineClass

"""Deadline / severity calculation for pending cases.

Two independent policies coexist:

- classify_severity: class-specific tiers used by the station dashboard
  (60-day class by days elapsed, 90-day class by days remaining, 45-day class
  only counted as a total).
- color_tier: a uniform days-remaining scale used to color single cases.

Both are pure functions of (filing date, deadline class, today, status) and
must be recomputed whenever "today" moves.
"""

__all__ = [
    "TierThresholds",
    "SIXTY_DAY_ELAPSED",
    "NINETY_DAY_REMAINING",
    "UNIFORM_REMAINING",
    "days_elapsed",
    "days_remaining",
    "classify_severity",
    "color_tier",
    "TierCounts",
    "SeverityStats",
    "StationStats",
    "DivisionStats",
    "summarize_by_station",
]

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TierThresholds:
    critical: int
    warning: int
    caution: int


# 60-day class: compared against days elapsed (>=)
SIXTY_DAY_ELAPSED = TierThresholds(critical=55, warning=50, caution=45)
# 90-day class: compared against days remaining (>=)
NINETY_DAY_REMAINING = TierThresholds(critical=85, warning=80, caution=75)
# per-case coloring: compared against days remaining (<=)
UNIFORM_REMAINING = TierThresholds(critical=5, warning=10, caution=20)


def _as_date(value: date | datetime) -> date:
    # midnight normalization: only the calendar day counts
    return value.date() if isinstance(value, datetime) else value


def _is_closed(status: CaseStatus | str | None) -> bool:
    if status is None:
        return False
    if isinstance(status, CaseStatus):
        return status in CLOSED_STATUSES
    return status in {s.value for s in CLOSED_STATUSES}


def days_elapsed(filing_date: date | datetime, today: date | datetime | None = None) -> int:
    """Whole days between the filing date and today."""
    today = _as_date(today) if today is not None else date.today()
    return (today - _as_date(filing_date)).days


def days_remaining(
    filing_date: date | datetime,
    deadline_class: DeadlineClass | int,
    today: date | datetime | None = None,
) -> int:
    return int(deadline_class) - days_elapsed(filing_date, today)


def classify_severity(
    filing_date: date | datetime,
    deadline_class: DeadlineClass | int | None,
    today: date | datetime | None = None,
    status: CaseStatus | str | None = None,
    *,
    sixty_day: TierThresholds = SIXTY_DAY_ELAPSED,
    ninety_day: TierThresholds = NINETY_DAY_REMAINING,
) -> SeverityTier:
    """Dashboard tier of a case using the class-specific thresholds.

    Closed/archived cases and cases without a deadline class are
    NOT_APPLICABLE. The 45-day class has no sub-tiers and reports SAFE.
    """
    if _is_closed(status) or deadline_class is None:
        return SeverityTier.NOT_APPLICABLE

    klass = DeadlineClass(int(deadline_class))
    elapsed = days_elapsed(filing_date, today)
    remaining = int(klass) - elapsed

    if klass is DeadlineClass.DAYS_60:
        if elapsed > int(klass):
            return SeverityTier.OVERDUE
        if elapsed >= sixty_day.critical:
            return SeverityTier.CRITICAL
        if elapsed >= sixty_day.warning:
            return SeverityTier.WARNING
        if elapsed >= sixty_day.caution:
            return SeverityTier.CAUTION
        return SeverityTier.SAFE

    if klass is DeadlineClass.DAYS_90:
        if elapsed > int(klass):
            return SeverityTier.OVERDUE
        if remaining >= ninety_day.critical:
            return SeverityTier.CRITICAL
        if remaining >= ninety_day.warning:
            return SeverityTier.WARNING
        if remaining >= ninety_day.caution:
            return SeverityTier.CAUTION
        return SeverityTier.SAFE

    return SeverityTier.SAFE


def color_tier(
    filing_date: date | datetime,
    deadline_class: DeadlineClass | int | None,
    today: date | datetime | None = None,
    status: CaseStatus | str | None = None,
    *,
    thresholds: TierThresholds = UNIFORM_REMAINING,
) -> SeverityTier:
    """Per-case color on the uniform days-remaining scale (any class)."""
    if _is_closed(status) or deadline_class is None:
        return SeverityTier.NOT_APPLICABLE
    remaining = days_remaining(filing_date, deadline_class, today)
    if remaining < 0:
        return SeverityTier.OVERDUE
    if remaining <= thresholds.critical:
        return SeverityTier.CRITICAL
    if remaining <= thresholds.warning:
        return SeverityTier.WARNING
    if remaining <= thresholds.caution:
        return SeverityTier.CAUTION
    return SeverityTier.SAFE


@dataclass
class TierCounts:
    critical: int = 0
    warning: int = 0
    caution: int = 0
    overdue: int = 0
    safe: int = 0

    def add(self, tier: SeverityTier) -> None:
        if tier is SeverityTier.NOT_APPLICABLE:
            return
        setattr(self, tier.value, getattr(self, tier.value) + 1)

    @property
    def flagged(self) -> int:
        return self.critical + self.warning + self.caution + self.overdue


@dataclass
class SeverityStats:
    """Dashboard aggregate: 60/90-day tier counts plus the 45-day total."""
    days60: TierCounts = field(default_factory=TierCounts)
    days90: TierCounts = field(default_factory=TierCounts)
    days45_total: int = 0

    def add(self, deadline_class: DeadlineClass, tier: SeverityTier) -> None:
        if deadline_class is DeadlineClass.DAYS_45:
            self.days45_total += 1
        elif deadline_class is DeadlineClass.DAYS_60:
            self.days60.add(tier)
        else:
            self.days90.add(tier)

    @property
    def total_flagged(self) -> int:
        return self.days60.flagged + self.days90.flagged + self.days45_total

    @property
    def critical_count(self) -> int:
        return self.days60.critical + self.days90.critical

    @property
    def overdue_count(self) -> int:
        return self.days60.overdue + self.days90.overdue


@dataclass
class StationStats:
    station_name: str
    total_cases: int = 0
    stats: SeverityStats = field(default_factory=SeverityStats)


@dataclass
class DivisionStats:
    total_cases: int = 0
    stats: SeverityStats = field(default_factory=SeverityStats)
    stations: list[StationStats] = field(default_factory=list)


def summarize_by_station(cases: Iterable[Any], today: date | datetime | None = None) -> DivisionStats:
    """Aggregate open cases per office ("station") and for the whole division.

    Cases are duck-typed: office_name, case_date, deadline_class and an
    optional status attribute. Closed cases and cases without a deadline class
    are left out of the counts.
    """
    today = _as_date(today) if today is not None else date.today()
    division = DivisionStats()
    by_station: dict[str, StationStats] = {}

    for case in cases:
        status = getattr(case, "status", None)
        klass = case.deadline_class
        if _is_closed(status):
            continue
        if klass is None:
            logger.debug(f"case {case.case_number}: no deadline class, not counted")
            continue
        klass = DeadlineClass(int(klass))
        tier = classify_severity(case.case_date, klass, today, status)
        station = by_station.setdefault(case.office_name, StationStats(station_name=case.office_name))
        station.total_cases += 1
        station.stats.add(klass, tier)
        division.total_cases += 1
        division.stats.add(klass, tier)

    division.stations = sorted(by_station.values(), key=lambda s: s.station_name)
    return division
