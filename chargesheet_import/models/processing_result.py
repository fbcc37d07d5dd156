from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime

from .parsed_case import ParsedCaseRecord

"""Processing result models for the report importer.

ImportResult aggregates one run over the source directory; FileStat keeps the
per-file numbers shown in debug output and used for the SUMMARY line.
"""


@dataclass(frozen=True)
class FileStat:
    """Per-file processing statistics."""
    file_name: str
    status: str  # success/failed
    records: int  # emitted case records
    skipped_rows: int  # rows that looked like case rows but were skipped
    elapsed_seconds: float
    sheets: int = 0
    standard_sheets: int = 0  # sheets routed to the standard-format interpreter


@dataclass(frozen=True)
class ImportResult:
    """Aggregated results of an import run."""
    success_files: int
    failed_files: int
    total_records: int
    skipped_rows: int
    start_time: datetime
    end_time: datetime
    elapsed_seconds: float
    file_stats: list[FileStat] | None = None
    records: list[ParsedCaseRecord] = field(default_factory=list)

    @property
    def total_files(self) -> int:
        return self.success_files + self.failed_files
