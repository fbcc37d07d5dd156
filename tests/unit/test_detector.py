from __future__ import annotations

from chargesheet_import.parsing.detector import ReportFormat, detect_format, parse_rows
from chargesheet_import.parsing.profiles import CSV_IMPORT, SPREADSHEET_UPLOAD

from conftest import OFFICE_HEADER, TODAY


def test_office_in_first_cell_is_standard(standard_rows):
    assert detect_format(standard_rows) is ReportFormat.STANDARD
    assert detect_format([["Deccan Police Station"], []]) is ReportFormat.STANDARD


def test_office_elsewhere_is_generic(generic_rows):
    assert detect_format(generic_rows) is ReportFormat.GENERIC
    assert detect_format([["", OFFICE_HEADER]]) is ReportFormat.GENERIC


def test_empty_sheet_is_generic():
    assert detect_format([]) is ReportFormat.GENERIC
    assert detect_format([[]]) is ReportFormat.GENERIC


def test_csv_profile_never_uses_standard(standard_rows):
    assert detect_format(standard_rows, CSV_IMPORT) is ReportFormat.GENERIC


def test_parse_rows_dispatches(standard_rows, generic_rows):
    standard = parse_rows(standard_rows, SPREADSHEET_UPLOAD, today=TODAY)
    generic = parse_rows(generic_rows, SPREADSHEET_UPLOAD, today=TODAY)
    assert len(standard) == 3
    assert standard[2].period_inferred is True
    assert len(generic) == 4


def test_parse_calls_do_not_share_state(generic_rows):
    first = parse_rows(generic_rows, today=TODAY)
    second = parse_rows(generic_rows, today=TODAY)
    assert first == second


def test_parse_rows_uses_given_layout(standard_rows):
    # read as generic, row 0 is not an office header so no case has an office
    assert parse_rows(standard_rows, SPREADSHEET_UPLOAD, today=TODAY, report_format=ReportFormat.GENERIC) == []
    assert len(parse_rows(standard_rows, today=TODAY, report_format=ReportFormat.STANDARD)) == 3
