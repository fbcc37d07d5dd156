from __future__ import annotations

from dataclasses import dataclass, field

from .parsed_case import ParsedCaseRecord

"""SheetParse model: result of running the row interpreter over one sheet."""

__all__ = [
    "SheetParse",
]


@dataclass(frozen=True)
class SheetParse:
    """Parse outcome of a single sheet (a CSV file counts as one sheet)."""
    sheet_name: str
    report_format: str  # "standard" | "generic"
    row_count: int
    records: list[ParsedCaseRecord] = field(default_factory=list)
    skipped_rows: int = 0
