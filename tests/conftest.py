# Shared pytest fixtures
from __future__ import annotations
import os
import tempfile
from datetime import date
from pathlib import Path

import pandas as pd
import pytest

OFFICE = "शिवाजीनगर"
OFFICE_HEADER = f"{OFFICE} पोलीस स्टेशन प्रलंबित गुन्हे"
TODAY = date(2024, 6, 30)


@pytest.fixture()
def temp_workdir(monkeypatch) -> Path:
    with tempfile.TemporaryDirectory() as d:
        p = Path(d)
        (p / "config").mkdir()
        (p / "data").mkdir()
        (p / "logs").mkdir()
        monkeypatch.chdir(p)
        monkeypatch.delenv("CHARGESHEET_IMPORT_CONFIG", raising=False)
        yield p


@pytest.fixture()
def sample_config_yaml() -> str:
    return """source_directory: ./data
profile: spreadsheet
output_file: ./output/cases.json
"""


@pytest.fixture()
def write_config(temp_workdir: Path, sample_config_yaml: str) -> Path:
    cfg = temp_workdir / "config" / "import.yml"
    cfg.write_text(sample_config_yaml, encoding="utf-8")
    return cfg


@pytest.fixture()
def generic_rows() -> list[list[object]]:
    """Multi-officer report in the loose layout (office header mid-sheet)."""
    return [
        ["अ.क्र.", "अधिकारी / अमंलदार यांचे नाव", "कालावधी", "अ.क्र.", "गुरनं", "दिनांक"],
        ["", OFFICE_HEADER, "", "", "", ""],
        ["1", "PSI पाटील", "", "", "", ""],
        ["", "", "3 ते 6 महिने", "", "", ""],
        ["", "", "", "1", "101/2024", "15-01-2024"],
        ["", "", "", "2", "102/2024", "20/01/2024"],
        ["", "", "एकुण", "", "", ""],
        ["", "", "1 ते 3 महिने", "", "", ""],
        ["", "", "", "1", "130/2024", "10.04.2024"],
        ["", "", "एकुण", "", "", ""],
        ["2", "पोना जाधव", "", "", "", ""],
        ["", "", "1 वर्षा वरील", "", "", ""],
        ["", "", "", "1", "12/2023", "02-03-23"],
    ]


@pytest.fixture()
def standard_rows() -> list[list[object]]:
    """Single-station report in the standard layout (office in row 0)."""
    return [
        [OFFICE_HEADER, "", "", "", "", ""],
        ["अ.क्र.", "अधिकारी / अमंलदार", "कालावधी", "अ.क्र.", "गुरनं", "दिनांक"],
        ["1", "PSI पाटील", "3 ते 6 महिने", "1", "101/2024", "15-01-2024"],
        ["", "", "", "2", "102/2024", "20-01-2024"],
        ["", "", "एकुण", "", "", ""],
        ["", "", "", "3", "140/2024", "01-06-2024"],
    ]


def make_xlsx(path: Path, sheets: dict[str, list[list[object]]]) -> Path:
    """Write a header-less workbook with openpyxl through pandas."""
    with pd.ExcelWriter(path, engine="openpyxl") as writer:
        for sheet_name, rows in sheets.items():
            pd.DataFrame(rows).to_excel(writer, sheet_name=sheet_name, header=False, index=False)
    return path
