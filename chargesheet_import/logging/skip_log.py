from __future__ import annotations

from datetime import UTC, datetime
from pathlib import Path

from ..models.skip_record import SkipRecord
from ..parsing.diagnostics import SkipCollector

"""Skip diagnostics log (JSON Lines).

- one file per run: `logs/skips-YYYYMMDD-HHMMSS.log` (UTC), created on first flush
- fixed record schema (SkipRecord), no extra keys
- records are buffered and written once per run
"""

__all__ = [
    "SkipRecord",
    "SkipLogBuffer",
]

LOGS_DIR = Path("./logs")
TIMESTAMP_FMT = "%Y%m%d-%H%M%S"


class SkipLogBuffer:
    """In-memory buffer of skip records. flush() appends them as JSON Lines.

    Single-threaded use only (imports run file by file).
    """
    def __init__(self, logs_dir: Path | None = None) -> None:
        self._records: list[SkipRecord] = []
        self._file_path: Path | None = None
        self._logs_dir = logs_dir if logs_dir is not None else LOGS_DIR

    @property
    def file_path(self) -> Path:
        if self._file_path is None:
            self._logs_dir.mkdir(parents=True, exist_ok=True)
            stamp = datetime.now(UTC).strftime(TIMESTAMP_FMT)
            self._file_path = self._logs_dir / f"skips-{stamp}.log"
        return self._file_path

    def append(self, record: SkipRecord) -> None:
        self._records.append(record)

    def extend_from(self, collector: SkipCollector, file: str, sheet: str) -> None:
        """Copy a sheet's in-process skips into the buffer."""
        for skip in collector:
            self.append(SkipRecord.create(file, sheet, skip.row_number, skip.reason, skip.detail))

    def __len__(self) -> int:  # pragma: no cover (trivial)
        return len(self._records)

    def flush(self) -> Path | None:
        """Write buffered records; returns the log path, or None if nothing was ever written."""
        if not self._records:
            return self._file_path
        fp = self.file_path
        with fp.open("a", encoding="utf-8") as f:
            for r in self._records:
                f.write(r.to_json_line() + "\n")
        self._records.clear()
        return fp
