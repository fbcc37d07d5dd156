from __future__ import annotations

import logging
from collections.abc import Sequence
from datetime import UTC, date, datetime
from pathlib import Path
from typing import Any

from ..excel.reader import CSV_SUFFIXES, SPREADSHEET_SUFFIXES, ReportReadError, read_report_file
from ..logging.skip_log import SkipLogBuffer, SkipRecord
from ..models.config_models import ImportConfig, ParserProfile
from ..models.processing_result import FileStat, ImportResult
from ..models.report_file import FileStatus, ReportFile
from ..models.sheet_parse import SheetParse
from ..parsing.detector import detect_format, parse_rows
from ..parsing.diagnostics import SkipCollector
from ..parsing.profiles import get_profile
from .progress import ProgressTracker, SheetProgressIndicator

"""Import run orchestration.

Scans the source directory for report files, decodes each one, runs the
parser over every sheet and aggregates the emitted records and counters into
an ImportResult. A file that cannot be decoded is marked failed and the run
continues with the next file; content problems only ever skip rows.
"""

__all__ = [
    "ProcessingError",
    "REPORT_SUFFIXES",
    "resolve_profile",
    "scan_report_files",
    "parse_sheet",
    "process_all",
]

logger = logging.getLogger(__name__)

REPORT_SUFFIXES = SPREADSHEET_SUFFIXES | CSV_SUFFIXES


class ProcessingError(Exception):
    """Fatal error that stops the whole run."""


def resolve_profile(config: ImportConfig) -> ParserProfile:
    """Built-in profile named by the config, with its overrides applied."""
    try:
        profile = get_profile(config.profile)
    except ValueError as e:
        raise ProcessingError(str(e)) from e
    return profile.with_overrides(designations=config.designations, bucket_policy=config.bucket_policy)


def scan_report_files(directory: Path) -> list[Path]:
    """Report files (.xlsx/.xls/.csv) directly inside directory, sorted by name.

    Raises:
        ProcessingError: directory missing, not a directory, or unreadable
    """
    if not directory.exists():
        raise ProcessingError(f"Directory not found: {directory}")

    if not directory.is_dir():
        raise ProcessingError(f"Path is not a directory: {directory}")

    try:
        return sorted(
            p for p in directory.iterdir()
            if p.is_file() and p.suffix.lower() in REPORT_SUFFIXES and not p.name.startswith("~$")
        )
    except OSError as e:
        raise ProcessingError(f"Error reading directory {directory}: {e}") from e


def parse_sheet(
    rows: Sequence[Sequence[Any]],
    sheet_name: str,
    profile: ParserProfile,
    *,
    collector: SkipCollector | None = None,
    today: date | None = None,
) -> SheetParse:
    collector = collector if collector is not None else SkipCollector()
    report_format = detect_format(rows, profile)
    records = parse_rows(rows, profile, diagnostics=collector, today=today, report_format=report_format)
    return SheetParse(
        sheet_name=sheet_name,
        report_format=report_format.value,
        row_count=len(rows),
        records=records,
        skipped_rows=len(collector),
    )


def process_all(
    config: ImportConfig,
    *,
    today: date | None = None,
    skip_log: SkipLogBuffer | None = None,
) -> ImportResult:
    """Import every report in the configured directory.

    Args:
        config: import configuration
        today: reference date for bucket inference (default: current date)
        skip_log: buffer receiving per-row skip records; None = no skip log

    Returns:
        ImportResult with all emitted records and per-file stats

    Raises:
        ProcessingError: unknown profile or unusable source directory
    """
    start_time = datetime.now(UTC)
    profile = resolve_profile(config)
    file_paths = scan_report_files(Path(config.source_directory))

    file_stats: list[FileStat] = []
    records = []
    success_count = 0
    failed_count = 0
    skipped_rows = 0

    with ProgressTracker(len(file_paths)) as progress:
        for file_path in file_paths:
            progress.start_file(file_path)

            file_start = datetime.now(UTC)
            report = _process_single_file(file_path, config, profile, skip_log, today)
            file_elapsed = (datetime.now(UTC) - file_start).total_seconds()

            if report.status is FileStatus.SUCCESS:
                success_count += 1
                records.extend(report.records)
                skipped_rows += report.skipped_rows
            else:
                failed_count += 1

            progress.set_postfix(records=len(records), skipped=skipped_rows, failed=failed_count)
            progress.finish_file(success=report.status is FileStatus.SUCCESS)

            file_stats.append(
                FileStat(
                    file_name=file_path.name,
                    status=report.status.value,
                    records=len(report.records),
                    skipped_rows=report.skipped_rows,
                    elapsed_seconds=file_elapsed,
                    sheets=len(report.sheets),
                    standard_sheets=sum(1 for s in report.sheets if s.report_format == "standard"),
                )
            )

    if skip_log is not None:
        try:
            path = skip_log.flush()
        except OSError as e:
            logger.warning(f"skip log not written: {e}")
        else:
            if path is not None:
                logger.info(f"skip log: {path}")

    end_time = datetime.now(UTC)
    return ImportResult(
        success_files=success_count,
        failed_files=failed_count,
        total_records=len(records),
        skipped_rows=skipped_rows,
        start_time=start_time,
        end_time=end_time,
        elapsed_seconds=(end_time - start_time).total_seconds(),
        file_stats=file_stats,
        records=records,
    )


def _process_single_file(
    file_path: Path,
    config: ImportConfig,
    profile: ParserProfile,
    skip_log: SkipLogBuffer | None,
    today: date | None,
) -> ReportFile:
    """Decode one report and parse each of its sheets."""
    start_time = datetime.now(UTC)
    try:
        sheets = read_report_file(
            file_path, target_sheets=config.sheets, keep_na_strings=config.keep_na_strings or None
        )
    except ReportReadError as e:
        logger.warning(f"{e}")
        if skip_log is not None:
            skip_log.append(SkipRecord.create(file_path.name, "<FILE_LEVEL>", -1, "READ_ERROR", str(e)))
        return ReportFile(
            path=file_path,
            name=file_path.name,
            start_time=start_time,
            end_time=datetime.now(UTC),
            status=FileStatus.FAILED,
            error=str(e),
        )

    sheet_progress = SheetProgressIndicator(file_name=file_path.name, total_sheets=len(sheets))
    parsed: list[SheetParse] = []
    for sheet_name, rows in sheets.items():
        sheet_progress.start_sheet(sheet_name)
        collector = SkipCollector()
        result = parse_sheet(rows, sheet_name, profile, collector=collector, today=today)
        if skip_log is not None:
            skip_log.extend_from(collector, file_path.name, sheet_name)
        logger.debug(
            f"{file_path.name}[{sheet_name}] format={result.report_format} rows={result.row_count} "
            f"records={len(result.records)} skipped={result.skipped_rows}"
        )
        sheet_progress.finish_sheet(result.report_format, len(result.records))
        parsed.append(result)

    return ReportFile(
        path=file_path,
        name=file_path.name,
        sheets=parsed,
        start_time=start_time,
        end_time=datetime.now(UTC),
        status=FileStatus.SUCCESS,
    )
