from __future__ import annotations

import logging
import math
import re
from collections.abc import Iterable, Sequence
from datetime import date
from typing import Any

from ..models.config_models import BucketPolicy, ParserProfile
from ..models.parsed_case import ParseContext, ParsedCaseRecord
from .dates import parse_date_token
from .designation import split_designation
from .diagnostics import SkipCollector
from .profiles import SPREADSHEET_UPLOAD
from .time_period import classify_time_period, deadline_class_for, infer_time_period

"""Hierarchical row interpreter for pending-case reports.

A report is a flat grid that encodes a tree: office -> officer -> time-period
bucket -> case rows. The interpreter walks the rows once, keeping the current
office/officer/bucket in a ParseContext, and emits a ParsedCaseRecord for each
case row that has a full context. Rows that cannot produce a record are
skipped silently; pass a SkipCollector to see why.

Column positions (0-based):
    1: officer line / office header / column-header repeat
    2: time-period bucket or total line
    3: serial number within the bucket
    4: case number
    5: case date
"""

__all__ = [
    "interpret_generic",
    "interpret_standard",
    "cell_text",
    "extract_office_name",
]

logger = logging.getLogger(__name__)

OFFICE_HEADER_COL = 0
OFFICER_COL = 1
BUCKET_COL = 2
SERIAL_COL = 3
CASE_NUMBER_COL = 4
CASE_DATE_COL = 5

# Officer lines in the standard layout must be longer than this.
STANDARD_MIN_OFFICER_LEN = 2

_DIGITS_ONLY = re.compile(r"^\d+$")
_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")

_MISSING_REASONS = {
    "office": "MISSING_OFFICE",
    "officer": "MISSING_OFFICER",
    "time_period": "MISSING_TIME_PERIOD",
}


def cell_text(row: Sequence[Any], index: int) -> str:
    """Trimmed text of a cell; missing, None and NaN cells are ''."""
    if index >= len(row):
        return ""
    value = row[index]
    if value is None:
        return ""
    if isinstance(value, float):
        if math.isnan(value):
            return ""
        if value.is_integer():
            return str(int(value))
    return str(value).strip()


def _cell(row: Sequence[Any], index: int) -> Any:
    return row[index] if index < len(row) else None


def _is_blank(row: Sequence[Any]) -> bool:
    return all(cell_text(row, i) == "" for i in range(len(row)))


def _contains_any(text: str, markers: Iterable[str]) -> bool:
    return bool(text) and any(m in text for m in markers)


def _parse_serial(value: Any) -> int | None:
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return None if math.isnan(value) or math.isinf(value) else int(value)
    match = _LEADING_INT.match(str(value))
    return int(match.group(1)) if match else None


def extract_office_name(text: str, profile: ParserProfile) -> str:
    """Office name from a header cell: the text before the office marker.

    When nothing precedes the marker the markers and the "pending cases"
    suffix are removed and whatever remains is used.
    """
    text = text.strip()
    for marker in profile.office_markers:
        head, found, _ = text.partition(marker)
        if found and head.strip():
            return head.strip()
    for token in (*profile.office_markers, *profile.pending_suffixes):
        text = text.replace(token, "")
    return text.strip()


def _office_header_text(row: Sequence[Any], profile: ParserProfile) -> str | None:
    columns: Iterable[int] = (
        range(len(row)) if profile.office_marker_columns is None else profile.office_marker_columns
    )
    for index in columns:
        text = cell_text(row, index)
        if _contains_any(text, profile.office_markers):
            return text
    return None


def _is_officer_line(text: str, profile: ParserProfile) -> bool:
    return (
        bool(text)
        and not _DIGITS_ONLY.match(text)
        and classify_time_period(text, profile.period_phrases) is None
        and not _contains_any(text, profile.total_markers)
    )


class _RowEmitter:
    """Shared record building and skip reporting for one parse call."""

    def __init__(
        self,
        profile: ParserProfile,
        context: ParseContext,
        diagnostics: SkipCollector | None,
    ) -> None:
        self.profile = profile
        self.context = context
        self.diagnostics = diagnostics
        self.records: list[ParsedCaseRecord] = []

    def skip(self, row_number: int, reason: str, detail: str = "") -> None:
        logger.debug(f"row {row_number} skipped: {reason} {detail}".rstrip())
        if self.diagnostics is not None:
            self.diagnostics.skip(row_number, reason, detail)

    def parse_date(self, value: Any) -> date | None:
        return parse_date_token(
            value,
            allow_iso=self.profile.allow_iso_dates,
            allow_serial=self.profile.allow_serial_dates,
        )

    def emit(self, row_number: int, row: Sequence[Any], case_number: str, case_date: date) -> None:
        ctx = self.context
        if ctx.time_period is None:  # pragma: no cover
            raise RuntimeError("emit called without an active time period")
        record = ParsedCaseRecord(
            office_name=ctx.office_name,
            officer_name=ctx.officer_name,
            designation=ctx.designation,
            time_period=ctx.time_period,
            deadline_class=deadline_class_for(
                ctx.time_period, self.profile.deadline_table, self.profile.default_deadline
            ),
            case_number=case_number,
            case_date=case_date,
            serial_number=_parse_serial(_cell(row, SERIAL_COL)),
            row_number=row_number,
            period_inferred=ctx.period_inferred,
        )
        self.records.append(record)

    def update_officer(self, text: str) -> None:
        designation, name = split_designation(
            text, self.profile.designations, self.profile.numbered_designation_bases
        )
        self.context.set_officer(designation, name)


def interpret_generic(
    rows: Iterable[Sequence[Any]],
    profile: ParserProfile = SPREADSHEET_UPLOAD,
    *,
    diagnostics: SkipCollector | None = None,
    today: date | None = None,
) -> list[ParsedCaseRecord]:
    """Interpret a report whose office headers may appear anywhere.

    Each row is classified by the first rule that applies:
    1. office marker present        -> new office
    2. column-header repeat         -> ignored (column 1 only, unless the
                                       profile also skips marked bucket cells)
    3. officer text in column 1     -> new officer/designation (also closes
                                       the bucket if the profile says so)
    4. bucket phrase                -> new time-period bucket
    5. header marker in column 2    -> ignored
    6. total marker                 -> bucket cleared
    7. otherwise a case row         -> record if case number, date and
                                       office/officer/bucket are all present
    """
    context = ParseContext()
    emitter = _RowEmitter(profile, context, diagnostics)
    policy = profile.bucket_policy or BucketPolicy.STRICT_SKIP
    column_header_markers = (*profile.officer_label_markers, *profile.header_markers)

    for row_number, row in enumerate(rows, start=1):
        row = list(row) if row is not None else []
        if _is_blank(row):
            continue
        if profile.min_cells and len(row) < profile.min_cells:
            emitter.skip(row_number, "TOO_FEW_CELLS", f"{len(row)} < {profile.min_cells}")
            continue

        officer_text = cell_text(row, OFFICER_COL)
        bucket_text = cell_text(row, BUCKET_COL)

        header = _office_header_text(row, profile)
        if header is not None:
            context.office_name = extract_office_name(header, profile)
            logger.debug(f"row {row_number}: office '{context.office_name}'")
            continue

        if _contains_any(officer_text, column_header_markers):
            continue
        if profile.skip_marked_bucket_cells and _contains_any(bucket_text, profile.header_markers):
            continue

        if _is_officer_line(officer_text, profile):
            emitter.update_officer(officer_text)
            if profile.officer_resets_period:
                context.clear_time_period()
            continue

        period = classify_time_period(bucket_text, profile.period_phrases) or classify_time_period(
            officer_text, profile.period_phrases
        )
        if period is not None:
            context.set_time_period(period)
            continue

        if _contains_any(bucket_text, profile.header_markers):
            continue

        if _contains_any(bucket_text, profile.total_markers) or _contains_any(
            officer_text, profile.total_markers
        ):
            context.clear_time_period()
            continue

        case_number = cell_text(row, CASE_NUMBER_COL)
        if not case_number:
            emitter.skip(row_number, "MISSING_CASE_NUMBER")
            continue
        case_date = emitter.parse_date(_cell(row, CASE_DATE_COL))
        if case_date is None:
            emitter.skip(row_number, "UNPARSEABLE_DATE", cell_text(row, CASE_DATE_COL))
            continue
        if context.time_period is None and policy is BucketPolicy.INFER_FROM_DATE:
            context.set_time_period(infer_time_period(case_date, today or date.today()), inferred=True)
        missing = context.missing()
        if missing:
            emitter.skip(row_number, _MISSING_REASONS[missing[0]], case_number)
            continue
        emitter.emit(row_number, row, case_number, case_date)

    return emitter.records


def interpret_standard(
    rows: Sequence[Sequence[Any]],
    profile: ParserProfile = SPREADSHEET_UPLOAD,
    *,
    diagnostics: SkipCollector | None = None,
    today: date | None = None,
) -> list[ParsedCaseRecord]:
    """Interpret a single-station report in the standard layout.

    Row 0 names the office, row 1 is the column header, cases start at row 2.
    Unlike the generic layout a single row may update the officer, set the
    bucket and carry a case at once, and a case row without an active bucket
    gets one inferred from its date (kept for following rows) unless the
    profile asks for STRICT_SKIP. Officer context is not required.
    """
    rows = [list(r) if r is not None else [] for r in rows]
    if len(rows) < 3:
        return []

    context = ParseContext(office_name=extract_office_name(cell_text(rows[0], OFFICE_HEADER_COL), profile))
    emitter = _RowEmitter(profile, context, diagnostics)
    policy = profile.bucket_policy or BucketPolicy.INFER_FROM_DATE
    today = today or date.today()
    column_header_markers = (*profile.officer_label_markers, *profile.header_markers)

    for index in range(2, len(rows)):
        row_number = index + 1
        row = rows[index]
        if _is_blank(row):
            continue
        if profile.min_cells and len(row) < profile.min_cells:
            emitter.skip(row_number, "TOO_FEW_CELLS", f"{len(row)} < {profile.min_cells}")
            continue

        officer_text = cell_text(row, OFFICER_COL)
        bucket_text = cell_text(row, BUCKET_COL)
        case_number = cell_text(row, CASE_NUMBER_COL)
        date_text = cell_text(row, CASE_DATE_COL)

        if _contains_any(officer_text, column_header_markers):
            continue

        if _is_officer_line(officer_text, profile) and len(officer_text) > STANDARD_MIN_OFFICER_LEN:
            emitter.update_officer(officer_text)

        period = classify_time_period(bucket_text, profile.period_phrases)
        if period is not None:
            context.set_time_period(period)

        if _contains_any(bucket_text, profile.total_markers):
            context.clear_time_period()

        if not (case_number and date_text):
            if case_number:
                emitter.skip(row_number, "UNPARSEABLE_DATE", "")
            elif date_text:
                emitter.skip(row_number, "MISSING_CASE_NUMBER")
            continue

        case_date = emitter.parse_date(_cell(row, CASE_DATE_COL))
        if case_date is None:
            emitter.skip(row_number, "UNPARSEABLE_DATE", date_text)
            continue
        if context.time_period is None:
            if policy is BucketPolicy.STRICT_SKIP:
                emitter.skip(row_number, "MISSING_TIME_PERIOD", case_number)
                continue
            context.set_time_period(infer_time_period(case_date, today), inferred=True)
        emitter.emit(row_number, row, case_number, case_date)

    return emitter.records
