from __future__ import annotations

import json
from dataclasses import asdict, dataclass
from datetime import UTC, datetime

"""SkipRecord model for the row-skip diagnostics log.

Rows the interpreter passes over without emitting a case are normally silent.
When diagnostics are enabled each such row becomes a SkipRecord and is written
as one JSON line. row=-1 marks a file-level entry (e.g. an unreadable file).
"""

__all__ = [
    "SkipRecord",
    "SKIP_REASONS",
]

SKIP_REASONS = frozenset({
    "MISSING_OFFICE",
    "MISSING_OFFICER",
    "MISSING_TIME_PERIOD",
    "MISSING_CASE_NUMBER",
    "UNPARSEABLE_DATE",
    "TOO_FEW_CELLS",
    "READ_ERROR",
})


@dataclass(frozen=True)
class SkipRecord:
    """Structured skip entry for JSON Lines logging.

    Attributes:
        timestamp: ISO8601 UTC timestamp with 'Z' suffix
        file: report filename
        sheet: sheet name (CSV files use the file stem)
        row: 1-based row number, -1 when not row specific
        reason: UPPER_SNAKE_CASE reason code
        detail: free-text detail
    """
    timestamp: str
    file: str
    sheet: str
    row: int
    reason: str
    detail: str

    @staticmethod
    def create(file: str, sheet: str, row: int, reason: str, detail: str) -> SkipRecord:
        ts = datetime.now(UTC).isoformat().replace("+00:00", "Z")
        return SkipRecord(
            timestamp=ts,
            file=file,
            sheet=sheet,
            row=row,
            reason=reason,
            detail=detail,
        )

    def to_json_line(self) -> str:
        return json.dumps(asdict(self), ensure_ascii=False)
