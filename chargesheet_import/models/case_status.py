from __future__ import annotations

from enum import Enum

__all__ = [
    "CaseStatus",
    "SeverityTier",
    "CLOSED_STATUSES",
]


class CaseStatus(Enum):
    """Workflow status attached to a case by the persistence layer."""
    OPEN = "Open"
    IN_PROGRESS = "In Progress"
    UNDER_INVESTIGATION = "Under Investigation"
    PENDING_COURT = "Pending Court"
    CLOSED = "Closed"
    ARCHIVED = "Archived"


class SeverityTier(Enum):
    """Risk tier of an open case against its deadline. Computed, never stored."""
    CRITICAL = "critical"
    WARNING = "warning"
    CAUTION = "caution"
    OVERDUE = "overdue"
    SAFE = "safe"
    NOT_APPLICABLE = "not-applicable"


CLOSED_STATUSES = frozenset({CaseStatus.CLOSED, CaseStatus.ARCHIVED})
