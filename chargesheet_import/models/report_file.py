from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from pathlib import Path

from .parsed_case import ParsedCaseRecord
from .sheet_parse import SheetParse

"""ReportFile domain model and FileStatus enum.

ReportFile is the outcome of one source report (.xlsx/.xls/.csv): its parsed
sheets, or the decoder error that failed it.
"""


class FileStatus(Enum):
    """Outcome of a report file.

    A file fails only when it cannot be decoded; content problems never fail it.
    """
    SUCCESS = "success"
    FAILED = "failed"


@dataclass(frozen=True)
class ReportFile:
    """Processing context for a single report file."""
    path: Path
    name: str
    status: FileStatus
    sheets: list[SheetParse] = field(default_factory=list)
    start_time: datetime | None = None
    end_time: datetime | None = None
    error: str | None = None  # decoder failure summary

    @property
    def records(self) -> list[ParsedCaseRecord]:
        out: list[ParsedCaseRecord] = []
        for sheet in self.sheets:
            out.extend(sheet.records)
        return out

    @property
    def skipped_rows(self) -> int:
        return sum(s.skipped_rows for s in self.sheets)
