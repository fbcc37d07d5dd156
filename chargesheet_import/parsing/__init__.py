"""Pending-case report parsing core.

Turns the rows of a hierarchical report (office -> officer -> time-period
bucket -> case) into flat ParsedCaseRecord objects. Pure and synchronous:
rows in, records out.
"""

from .dates import parse_date_token, serial_to_date
from .designation import split_designation
from .detector import ReportFormat, detect_format, parse_rows
from .diagnostics import RowSkip, SkipCollector
from .interpreter import interpret_generic, interpret_standard
from .profiles import CSV_IMPORT, SPREADSHEET_UPLOAD, get_profile
from .time_period import classify_time_period, deadline_class_for, infer_time_period

__all__ = [
    "parse_date_token",
    "serial_to_date",
    "split_designation",
    "ReportFormat",
    "detect_format",
    "parse_rows",
    "RowSkip",
    "SkipCollector",
    "interpret_generic",
    "interpret_standard",
    "CSV_IMPORT",
    "SPREADSHEET_UPLOAD",
    "get_profile",
    "classify_time_period",
    "deadline_class_for",
    "infer_time_period",
]
