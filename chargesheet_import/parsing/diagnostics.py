from __future__ import annotations

from collections import Counter
from dataclasses import dataclass

__all__ = [
    "RowSkip",
    "SkipCollector",
]


@dataclass(frozen=True)
class RowSkip:
    row_number: int  # 1-based row in the source grid
    reason: str  # UPPER_SNAKE reason code (see models.skip_record.SKIP_REASONS)
    detail: str = ""


class SkipCollector:
    """Optional diagnostics channel for the row interpreter.

    Skipping stays silent unless a collector is passed in; the parse result is
    the same either way.
    """

    def __init__(self) -> None:
        self.skips: list[RowSkip] = []

    def skip(self, row_number: int, reason: str, detail: str = "") -> None:
        self.skips.append(RowSkip(row_number, reason, detail))

    def counts(self) -> Counter[str]:
        return Counter(s.reason for s in self.skips)

    def reasons_for(self, row_number: int) -> list[str]:
        return [s.reason for s in self.skips if s.row_number == row_number]

    def __len__(self) -> int:
        return len(self.skips)

    def __iter__(self):
        return iter(self.skips)
