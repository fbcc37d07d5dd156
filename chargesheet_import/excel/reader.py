from __future__ import annotations

import csv
from collections.abc import Iterable
from pathlib import Path
from typing import Any

import pandas as pd

"""Report decoding: spreadsheet / CSV files -> positional row grids.

The parser works on plain rows (lists of cell values), so sheets are read
without a header and every cell keeps its column position. NaN cells become
None; text cells are stripped. A file that cannot be read at all raises
ReportReadError; nothing here looks at cell contents beyond that.
"""

__all__ = [
    "ReportReadError",
    "SPREADSHEET_SUFFIXES",
    "CSV_SUFFIXES",
    "read_excel_file",
    "read_csv_rows",
    "read_report_file",
    "frame_to_rows",
]

SPREADSHEET_SUFFIXES = frozenset({".xlsx", ".xls"})
CSV_SUFFIXES = frozenset({".csv"})


class ReportReadError(Exception):
    """Raised when a report file cannot be decoded into rows."""


def read_excel_file(
    path: Path, target_sheets: Iterable[str] | None = None, keep_na_strings: list[str] | None = None
) -> dict[str, pd.DataFrame]:
    """Read a workbook returning raw, header-less DataFrames keyed by sheet name.

    Parameters
    ----------
    path: workbook path
    target_sheets: sheet names to keep (None = all sheets)
    keep_na_strings: strings pandas must not turn into NaN (e.g. ['NA'])
    """
    import pandas._libs.parsers as parsers

    if keep_na_strings:
        na_values = list(parsers.STR_NA_VALUES - set(keep_na_strings))
        keep_default_na = False
    else:
        na_values = None
        keep_default_na = True

    wanted = set(target_sheets) if target_sheets is not None else None
    dfs: dict[str, pd.DataFrame] = {}
    xls = pd.ExcelFile(path)
    for name in xls.sheet_names:
        if wanted is not None and str(name) not in wanted:
            continue
        df = xls.parse(name, header=None, keep_default_na=keep_default_na, na_values=na_values)
        dfs[str(name)] = df
    return dfs


def frame_to_rows(df: pd.DataFrame) -> list[list[Any]]:
    """Convert a header-less DataFrame to row lists.

    Trailing empty cells are dropped so a row keeps the width it had in the
    sheet; fully empty rows stay (as []) so row numbers line up with the sheet.
    """
    rows: list[list[Any]] = []
    for raw in df.itertuples(index=False, name=None):
        cells: list[Any] = []
        for val in raw:
            if pd.isna(val):
                cells.append(None)
            elif isinstance(val, str):
                stripped = val.strip()
                cells.append(stripped if stripped else None)
            elif isinstance(val, pd.Timestamp):
                cells.append(val.to_pydatetime())
            else:
                cells.append(val)
        while cells and cells[-1] is None:
            cells.pop()
        rows.append(cells)
    return rows


def read_csv_rows(path: Path, encoding: str = "utf-8-sig") -> list[list[Any]]:
    """Read a CSV export line by line keeping each line's own cell count.

    Blank lines are dropped. Cells are stripped text; empty cells stay ''.
    """
    with path.open("r", encoding=encoding, newline="") as f:
        return [[cell.strip() for cell in line] for line in csv.reader(f) if any(c.strip() for c in line)]


def read_report_file(
    path: Path, target_sheets: Iterable[str] | None = None, keep_na_strings: list[str] | None = None
) -> dict[str, list[list[Any]]]:
    """Decode any supported report into {sheet name: rows}.

    CSV files yield a single sheet named after the file stem.
    """
    suffix = path.suffix.lower()
    try:
        if suffix in CSV_SUFFIXES:
            return {path.stem: read_csv_rows(path)}
        if suffix in SPREADSHEET_SUFFIXES:
            raw = read_excel_file(path, target_sheets=target_sheets, keep_na_strings=keep_na_strings)
            return {name: frame_to_rows(df) for name, df in raw.items()}
    except Exception as e:  # engines raise their own types (BadZipFile, XLRDError, ...)
        raise ReportReadError(f"cannot read {path.name}: {e}") from e
    raise ReportReadError(f"unsupported report type: {path.suffix}")
