from __future__ import annotations

import logging
from collections.abc import Sequence
from datetime import date
from enum import Enum
from typing import Any

from ..models.config_models import ParserProfile
from ..models.parsed_case import ParsedCaseRecord
from .diagnostics import SkipCollector
from .interpreter import cell_text, interpret_generic, interpret_standard
from .profiles import SPREADSHEET_UPLOAD

__all__ = [
    "ReportFormat",
    "detect_format",
    "parse_rows",
]

logger = logging.getLogger(__name__)


class ReportFormat(Enum):
    STANDARD = "standard"  # office name in row 0, fixed two header rows
    GENERIC = "generic"  # office headers wherever they occur


def detect_format(rows: Sequence[Sequence[Any]], profile: ParserProfile = SPREADSHEET_UPLOAD) -> ReportFormat:
    """Standard layout iff the first cell of the first row holds an office marker."""
    if not rows or not profile.detect_standard_format:
        return ReportFormat.GENERIC
    first = cell_text(list(rows[0] or []), 0)
    if any(marker in first for marker in profile.office_markers):
        return ReportFormat.STANDARD
    return ReportFormat.GENERIC


def parse_rows(
    rows: Sequence[Sequence[Any]],
    profile: ParserProfile = SPREADSHEET_UPLOAD,
    *,
    diagnostics: SkipCollector | None = None,
    today: date | None = None,
    report_format: ReportFormat | None = None,
) -> list[ParsedCaseRecord]:
    """Parse one sheet's rows into case records, picking the layout first.

    Each call owns its own parse state; rows are consumed in order, once.
    A caller that already ran detect_format passes its result as report_format.
    """
    if report_format is None:
        report_format = detect_format(rows, profile)
    logger.debug(f"detected {report_format.value} layout ({len(rows)} rows, profile={profile.name})")
    if report_format is ReportFormat.STANDARD:
        return interpret_standard(rows, profile, diagnostics=diagnostics, today=today)
    return interpret_generic(rows, profile, diagnostics=diagnostics, today=today)
