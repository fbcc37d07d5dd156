from __future__ import annotations

from ..models.processing_result import ImportResult
from .severity import DivisionStats, SeverityStats

"""SUMMARY / severity line rendering.

SUMMARY line format:
SUMMARY files={total}/{total} success={success} failed={failed} records={records}
skipped_rows={skipped} elapsed_sec={elapsed}
"""


def _format_seconds(seconds: float) -> str:
    if seconds == 0:
        return "0"
    if seconds == int(seconds):
        return str(int(seconds))
    if seconds < 0.01:
        # avoid scientific notation for very small numbers
        return f"{seconds:.6f}".rstrip('0').rstrip('.')
    return str(round(seconds, 3))


def render_summary_line(total_files: int, result: ImportResult) -> str:
    """Render the SUMMARY line of an import run.

    Examples:
        >>> from datetime import datetime, timezone
        >>> start = datetime(2024, 1, 1, 10, 0, 0, tzinfo=timezone.utc)
        >>> end = datetime(2024, 1, 1, 10, 0, 2, tzinfo=timezone.utc)
        >>> result = ImportResult(
        ...     success_files=1, failed_files=0, total_records=120, skipped_rows=3,
        ...     start_time=start, end_time=end, elapsed_seconds=2.0,
        ... )
        >>> render_summary_line(1, result)
        'SUMMARY files=1/1 success=1 failed=0 records=120 skipped_rows=3 elapsed_sec=2'
    """
    return (
        f"SUMMARY files={total_files}/{total_files} "
        f"success={result.success_files} "
        f"failed={result.failed_files} "
        f"records={result.total_records} "
        f"skipped_rows={result.skipped_rows} "
        f"elapsed_sec={_format_seconds(result.elapsed_seconds)}"
    )


def render_severity_line(name: str, total_cases: int, stats: SeverityStats) -> str:
    """One dashboard line: 60/90-day tier counts and the 45-day total."""
    d60, d90 = stats.days60, stats.days90
    return (
        f"{name}: cases={total_cases} "
        f"60d=critical:{d60.critical},warning:{d60.warning},caution:{d60.caution},overdue:{d60.overdue} "
        f"90d=critical:{d90.critical},warning:{d90.warning},caution:{d90.caution},overdue:{d90.overdue} "
        f"45d=total:{stats.days45_total} "
        f"flagged={stats.total_flagged} critical={stats.critical_count} overdue={stats.overdue_count}"
    )


def render_severity_report(division: DivisionStats, division_name: str = "division") -> list[str]:
    lines = [render_severity_line(division_name, division.total_cases, division.stats)]
    for station in division.stations:
        lines.append(render_severity_line(station.station_name, station.total_cases, station.stats))
    return lines
