"""Domain models for the pending-case report importer.

Frozen dataclasses and enums shared by the parser, the import services and
the CLI.
"""

from .case_status import CLOSED_STATUSES, CaseStatus, SeverityTier
from .config_models import BucketPolicy, ImportConfig, ParserProfile
from .parsed_case import ParseContext, ParsedCaseRecord
from .processing_result import FileStat, ImportResult
from .reminder import Reminder
from .report_file import FileStatus, ReportFile
from .sheet_parse import SheetParse
from .skip_record import SKIP_REASONS, SkipRecord
from .time_period import DeadlineClass, TimePeriod

__all__ = [
    # Report vocabulary
    "TimePeriod",
    "DeadlineClass",
    "CaseStatus",
    "SeverityTier",
    "CLOSED_STATUSES",
    # Configuration models
    "BucketPolicy",
    "ImportConfig",
    "ParserProfile",
    # Parsing models
    "ParseContext",
    "ParsedCaseRecord",
    "SkipRecord",
    "SKIP_REASONS",
    # Processing models
    "FileStat",
    "FileStatus",
    "ImportResult",
    "ReportFile",
    "SheetParse",
    "Reminder",
]
