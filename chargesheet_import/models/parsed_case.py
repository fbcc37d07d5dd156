from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Any

from .time_period import DeadlineClass, TimePeriod

"""ParsedCaseRecord and ParseContext models.

ParsedCaseRecord is the parser's output unit: one record per qualifying data
row of a pending-case report. ParseContext is the running state the row
interpreter carries from row to row (office -> officer -> time bucket).
"""

__all__ = [
    "ParsedCaseRecord",
    "ParseContext",
]


@dataclass(frozen=True)
class ParsedCaseRecord:
    """One case row recovered from a hierarchical report.

    deadline_class is denormalized from time_period at emission time using the
    parser profile's table; it is None only where that table leaves the bucket
    without a class.
    """
    office_name: str
    officer_name: str
    designation: str
    time_period: TimePeriod
    deadline_class: DeadlineClass | None
    case_number: str
    case_date: date
    serial_number: int | None = None
    row_number: int | None = None  # 1-based source row
    period_inferred: bool = False  # bucket synthesized from case_date

    @property
    def officer_label(self) -> str:
        return f"{self.designation} {self.officer_name}".strip()

    @property
    def investigation_office_name(self) -> str:
        """Display name "<office> - <designation> <officer>" (office only if no officer)."""
        if self.office_name and self.officer_name:
            return f"{self.office_name} - {self.officer_label}".strip()
        return self.office_name

    @property
    def title(self) -> str:
        return f"केस {self.case_number}"

    @property
    def description(self) -> str:
        if self.office_name and self.officer_name:
            return (
                f"तपासणी कार्यालय: {self.office_name}, "
                f"अधिकारी: {self.officer_label}, "
                f"कालावधी: {self.time_period.value}"
            )
        return f"तपासणी कार्यालय: {self.office_name or 'अज्ञात'}"

    def to_dict(self) -> dict[str, Any]:
        """JSON-ready representation used by the exporter."""
        return {
            "officeName": self.office_name,
            "officerName": self.officer_name,
            "designation": self.designation,
            "timePeriod": self.time_period.value,
            "caseType": int(self.deadline_class) if self.deadline_class is not None else None,
            "caseNumber": self.case_number,
            "caseDate": self.case_date.isoformat(),
            "serialNumber": self.serial_number,
            "investigationOfficeName": self.investigation_office_name,
            "title": self.title,
            "description": self.description,
            "location": self.office_name,
        }


@dataclass
class ParseContext:
    """Mutable scan state owned by exactly one parse call."""
    office_name: str = ""
    officer_name: str = ""
    designation: str = ""
    time_period: TimePeriod | None = None
    period_inferred: bool = False

    def set_time_period(self, period: TimePeriod, *, inferred: bool = False) -> None:
        self.time_period = period
        self.period_inferred = inferred

    def set_officer(self, designation: str, officer_name: str) -> None:
        self.designation = designation
        self.officer_name = officer_name

    def clear_time_period(self) -> None:
        self.time_period = None
        self.period_inferred = False

    def missing(self) -> list[str]:
        """Names of context fields a data row still lacks."""
        # designation may legitimately be empty; it is not checked here
        absent = []
        if not self.office_name:
            absent.append("office")
        if not self.officer_name:
            absent.append("officer")
        if self.time_period is None:
            absent.append("time_period")
        return absent
