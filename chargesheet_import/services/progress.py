from __future__ import annotations

import sys
from pathlib import Path
from typing import Any

from tqdm import tqdm
from tqdm.std import tqdm as TqdmType

"""Interactive progress output (tqdm).

A run shows one bar over its report files plus a short line per sheet. Both
stay silent when stdout is not a terminal, so redirected output holds only the
labeled log lines.
"""

__all__ = [
    "ProgressTracker",
    "is_tty_enabled",
    "SheetProgressIndicator",
]


def is_tty_enabled() -> bool:
    return sys.stdout.isatty()


class ProgressTracker:
    """Bar over the report files of one import run."""

    def __init__(self, total_files: int, *, description: str = "Parsing reports") -> None:
        self.total_files = total_files
        self.description = description
        self.current_file = 0
        self.enabled = is_tty_enabled()
        self.pbar: TqdmType[Any] | None = None
        if self.enabled:
            self.pbar = tqdm(
                total=total_files,
                desc=description,
                unit="report",
                leave=True,
                ncols=80,
                ascii=True,
            )

    def start_file(self, file_path: Path) -> None:
        self.current_file += 1
        if self.pbar is not None:
            self.pbar.set_description(f"{self.description} ({file_path.name})")

    def finish_file(self, success: bool = True) -> None:
        if self.pbar is None:
            return
        self.pbar.update(1)
        self.pbar.set_description(self.description if success else f"{self.description} (failed)")

    def set_postfix(self, **counters: Any) -> None:
        """Running totals next to the bar: records, skipped rows, failed files."""
        if self.pbar is not None:
            self.pbar.set_postfix(**counters)

    def close(self) -> None:
        if self.pbar is not None:
            self.pbar.close()
            self.pbar = None

    def __enter__(self) -> ProgressTracker:
        return self

    def __exit__(self, *exc: Any) -> None:
        self.close()


class SheetProgressIndicator:
    """One status line per sheet of a workbook: name, detected layout, cases."""

    def __init__(self, file_name: str, total_sheets: int) -> None:
        self.file_name = file_name
        self.total_sheets = total_sheets
        self.current_sheet = 0
        self.enabled = is_tty_enabled()

    def start_sheet(self, sheet_name: str) -> None:
        self.current_sheet += 1
        if self.enabled:
            print(f"  Sheet {self.current_sheet}/{self.total_sheets}: {sheet_name}", end="", flush=True)

    def finish_sheet(self, report_format: str, records: int = 0) -> None:
        if self.enabled:
            print(f" [{report_format}] - {records} cases")
