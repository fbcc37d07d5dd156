from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import Enum

from .time_period import DeadlineClass, TimePeriod

"""Config dataclasses for the pending-case report importer.

ParserProfile holds every constant the row interpreter matches against
(phrases, markers, designation list, deadline table) so callers can inject
their own while the built-in presets keep the report conventions intact.
ImportConfig is the root object produced by config.loader.
"""

__all__ = [
    "BucketPolicy",
    "ParserProfile",
    "ImportConfig",
]


class BucketPolicy(Enum):
    """What to do with a case row that has no active time-period bucket.

    - STRICT_SKIP: skip the row
    - INFER_FROM_DATE: derive a bucket from the case date and keep the row
    """
    STRICT_SKIP = "strict-skip"
    INFER_FROM_DATE = "infer-bucket-from-date"


@dataclass(frozen=True)
class ParserProfile:
    """Matching tables for one family of reports.

    bucket_policy=None lets each interpreter use its own default
    (generic: STRICT_SKIP, standard: INFER_FROM_DATE).
    office_marker_columns=None means the office marker may sit in any cell.
    """
    name: str
    period_phrases: dict[TimePeriod, tuple[str, ...]]
    deadline_table: dict[TimePeriod, DeadlineClass]
    designations: tuple[str, ...]
    numbered_designation_bases: tuple[str, ...]
    office_markers: tuple[str, ...]
    officer_label_markers: tuple[str, ...]
    header_markers: tuple[str, ...]
    total_markers: tuple[str, ...]
    pending_suffixes: tuple[str, ...] = ()
    office_marker_columns: tuple[int, ...] | None = (1,)
    detect_standard_format: bool = True
    officer_resets_period: bool = True  # generic layout: a new officer line closes the bucket
    skip_marked_bucket_cells: bool = False  # header marker in column 2 wins over a bucket phrase
    min_cells: int = 0
    allow_iso_dates: bool = True
    allow_serial_dates: bool = True
    bucket_policy: BucketPolicy | None = None
    default_deadline: DeadlineClass = DeadlineClass.DAYS_60

    def with_overrides(
        self,
        *,
        designations: tuple[str, ...] | None = None,
        bucket_policy: BucketPolicy | None = None,
    ) -> ParserProfile:
        changes: dict[str, object] = {}
        if designations is not None:
            changes["designations"] = tuple(designations)
        if bucket_policy is not None:
            changes["bucket_policy"] = bucket_policy
        return replace(self, **changes) if changes else self


@dataclass(frozen=True)
class ImportConfig:
    """Root configuration object for an import run."""
    source_directory: str  # directory scanned for .xlsx/.xls/.csv reports
    profile: str = "spreadsheet"  # spreadsheet | csv
    output_file: str = "./output/cases.json"
    bucket_policy: BucketPolicy | None = None
    designations: tuple[str, ...] | None = None
    sheets: frozenset[str] | None = None  # None = every sheet
    keep_na_strings: list[str] = field(default_factory=list)
