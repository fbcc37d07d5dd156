from __future__ import annotations

from datetime import date

from chargesheet_import.models.config_models import BucketPolicy
from chargesheet_import.models.time_period import DeadlineClass, TimePeriod
from chargesheet_import.parsing.diagnostics import SkipCollector
from chargesheet_import.parsing.interpreter import cell_text, extract_office_name, interpret_generic
from chargesheet_import.parsing.profiles import CSV_IMPORT, SPREADSHEET_UPLOAD

from conftest import OFFICE, OFFICE_HEADER, TODAY


def test_multi_officer_report(generic_rows):
    records = interpret_generic(generic_rows, today=TODAY)

    assert [r.case_number for r in records] == ["101/2024", "102/2024", "130/2024", "12/2023"]
    first = records[0]
    assert first.office_name == OFFICE
    assert first.designation == "PSI"
    assert first.officer_name == "पाटील"
    assert first.time_period is TimePeriod.THREE_TO_SIX_MONTHS
    assert first.deadline_class is DeadlineClass.DAYS_60
    assert first.case_date == date(2024, 1, 15)
    assert first.serial_number == 1
    assert first.row_number == 5
    assert first.period_inferred is False

    assert records[1].case_date == date(2024, 1, 20)
    assert records[2].time_period is TimePeriod.ONE_TO_THREE_MONTHS
    assert records[2].deadline_class is DeadlineClass.DAYS_45
    assert records[2].case_date == date(2024, 4, 10)

    last = records[3]
    assert (last.designation, last.officer_name) == ("पोना", "जाधव")
    assert last.time_period is TimePeriod.OVER_ONE_YEAR
    assert last.deadline_class is DeadlineClass.DAYS_90
    assert last.case_date == date(2023, 3, 2)


def test_context_propagates_to_following_rows():
    rows = [
        ["", OFFICE_HEADER],
        ["1", "सपोनि कदम"],
        ["", "", "6 ते 12 महिने"],
        ["", "", "", "1", "201/2023", "01-10-2023"],
        ["", "", "", "2", "202/2023", "05-10-2023"],
        ["", "", "", "3", "203/2023", "09-10-2023"],
    ]
    records = interpret_generic(rows)
    assert len(records) == 3
    assert {(r.office_name, r.officer_name, r.designation, r.time_period) for r in records} == {
        (OFFICE, "कदम", "सपोनि", TimePeriod.SIX_TO_TWELVE_MONTHS)
    }
    assert [r.serial_number for r in records] == [1, 2, 3]


def test_case_before_officer_is_never_emitted():
    rows = [
        ["", OFFICE_HEADER],
        ["", "", "3 ते 6 महिने"],
        ["", "", "", "1", "101/2024", "15-01-2024"],
    ]
    diagnostics = SkipCollector()
    assert interpret_generic(rows, diagnostics=diagnostics) == []
    assert diagnostics.reasons_for(3) == ["MISSING_OFFICER"]


def test_case_before_office_is_never_emitted():
    rows = [
        ["1", "PSI पाटील"],
        ["", "", "3 ते 6 महिने"],
        ["", "", "", "1", "101/2024", "15-01-2024"],
    ]
    diagnostics = SkipCollector()
    assert interpret_generic(rows, diagnostics=diagnostics) == []
    assert diagnostics.reasons_for(3) == ["MISSING_OFFICE"]


def test_total_line_closes_bucket():
    rows = [
        ["", OFFICE_HEADER],
        ["1", "PSI पाटील"],
        ["", "", "3 ते 6 महिने"],
        ["", "", "", "1", "101/2024", "15-01-2024"],
        ["", "", "एकुण", "", "1"],
        ["", "", "", "2", "102/2024", "20-01-2024"],
    ]
    diagnostics = SkipCollector()
    records = interpret_generic(rows, diagnostics=diagnostics)
    assert [r.case_number for r in records] == ["101/2024"]
    assert diagnostics.reasons_for(6) == ["MISSING_TIME_PERIOD"]


def test_total_in_officer_column_is_not_an_officer():
    rows = [
        ["", OFFICE_HEADER],
        ["1", "PSI पाटील"],
        ["", "", "3 ते 6 महिने"],
        ["", "एकुण"],
        ["", "", "", "1", "101/2024", "15-01-2024"],
    ]
    diagnostics = SkipCollector()
    assert interpret_generic(rows, diagnostics=diagnostics) == []
    assert diagnostics.reasons_for(5) == ["MISSING_TIME_PERIOD"]


def test_infer_policy_fills_missing_bucket():
    rows = [
        ["", OFFICE_HEADER],
        ["1", "PSI पाटील"],
        ["", "", "", "1", "101/2024", "01-06-2024"],
        ["", "", "", "2", "90/2023", "01-01-2023"],
    ]
    profile = SPREADSHEET_UPLOAD.with_overrides(bucket_policy=BucketPolicy.INFER_FROM_DATE)
    records = interpret_generic(rows, profile, today=TODAY)
    assert len(records) == 2
    assert records[0].time_period is TimePeriod.ONE_TO_THREE_MONTHS
    assert records[0].period_inferred is True
    # the inferred bucket stays active for following rows
    assert records[1].time_period is TimePeriod.ONE_TO_THREE_MONTHS


def test_skip_reasons_for_bad_case_rows():
    rows = [
        ["", OFFICE_HEADER],
        ["1", "PSI पाटील"],
        ["", "", "3 ते 6 महिने"],
        ["", "", "", "1", "", "15-01-2024"],
        ["", "", "", "2", "102/2024", "दिनांक नाही"],
        ["", "", "", "3", "103/2024", "31-04-2024"],
    ]
    diagnostics = SkipCollector()
    assert interpret_generic(rows, diagnostics=diagnostics) == []
    assert diagnostics.reasons_for(4) == ["MISSING_CASE_NUMBER"]
    assert diagnostics.reasons_for(5) == ["UNPARSEABLE_DATE"]
    assert diagnostics.reasons_for(6) == ["UNPARSEABLE_DATE"]
    assert diagnostics.counts()["UNPARSEABLE_DATE"] == 2


def test_diagnostics_do_not_change_result(generic_rows):
    assert interpret_generic(generic_rows, today=TODAY) == interpret_generic(
        generic_rows, diagnostics=SkipCollector(), today=TODAY
    )


def test_column_header_repeat_is_ignored():
    rows = [
        ["", OFFICE_HEADER],
        ["अ.क्र.", "अधिकारी / अमंलदार यांचे नाव", "कालावधी", "अ.क्र.", "गुरनं", "दिनांक"],
        ["1", "PSI पाटील"],
        ["", "", "3 ते 6 महिने"],
        ["", "", "", "1", "101/2024", "15-01-2024"],
    ]
    records = interpret_generic(rows)
    assert len(records) == 1
    assert records[0].officer_name == "पाटील"


def test_english_labels():
    rows = [
        ["", "Kothrud Police Station"],
        ["1", "Inspector Rao"],
        ["", "", "Above 1 year"],
        ["", "", "", "1", "7/2022", "2022-11-03"],
    ]
    records = interpret_generic(rows)
    assert len(records) == 1
    rec = records[0]
    assert rec.office_name == "Kothrud"
    assert (rec.designation, rec.officer_name) == ("Inspector", "Rao")
    assert rec.case_date == date(2022, 11, 3)
    assert rec.deadline_class is DeadlineClass.DAYS_90


def test_second_office_replaces_first():
    rows = [
        ["", OFFICE_HEADER],
        ["1", "PSI पाटील"],
        ["", "", "3 ते 6 महिने"],
        ["", "", "", "1", "101/2024", "15-01-2024"],
        ["", "कोथरूड पोलीस स्टेशन प्रलंबित गुन्हे"],
        ["", "", "", "1", "55/2024", "16-01-2024"],
    ]
    records = interpret_generic(rows)
    assert [r.office_name for r in records] == [OFFICE, "कोथरूड"]


def test_csv_profile_rules():
    rows = [
        ["शिवाजीनगर पोलीस स्टेशन प्रलंबित गुन्हे", "", "", "", ""],
        ["1", "PSI पाटील", "", "", ""],
        ["", "", "6 ते 12 महिने", "", ""],
        ["", "", "", "1", "101/2023", "15-10-2023"],
        ["", "", "", "2"],
        ["", "", "Above 1 year", "", ""],
        ["", "", "", "3", "103/2023", "2023-10-20"],
    ]
    diagnostics = SkipCollector()
    records = interpret_generic(rows, CSV_IMPORT, diagnostics=diagnostics)
    # office marker may sit in any column; 6-12 months has no class here
    assert len(records) == 1
    assert records[0].office_name == OFFICE
    assert records[0].deadline_class is None
    assert diagnostics.reasons_for(5) == ["TOO_FEW_CELLS"]
    # English labels and ISO dates are not read by the CSV profile
    assert diagnostics.reasons_for(7) == ["UNPARSEABLE_DATE"]


def test_blank_rows_are_ignored():
    rows = [[], [None, None], ["", "  "], ["", OFFICE_HEADER]]
    diagnostics = SkipCollector()
    assert interpret_generic(rows, diagnostics=diagnostics) == []
    assert len(diagnostics) == 0


def test_cell_text():
    assert cell_text([None, float("nan"), 12.0, " x ", 3.5], 0) == ""
    assert cell_text([None, float("nan")], 1) == ""
    assert cell_text([12.0], 0) == "12"
    assert cell_text([" x "], 0) == "x"
    assert cell_text([3.5], 0) == "3.5"
    assert cell_text([], 4) == ""


def test_extract_office_name():
    assert extract_office_name(OFFICE_HEADER, SPREADSHEET_UPLOAD) == OFFICE
    assert extract_office_name("पोलीस स्टेशन प्रलंबित गुन्हे", SPREADSHEET_UPLOAD) == ""
    assert extract_office_name("Deccan Police Station", SPREADSHEET_UPLOAD) == "Deccan"


def test_new_officer_closes_bucket():
    rows = [
        ["", OFFICE_HEADER, "", "", "", ""],
        ["1", "PSI पाटील", "", "", "", ""],
        ["", "", "3 ते 6 महिने", "", "", ""],
        ["2", "पोना जाधव", "", "", "", ""],
        ["", "", "", "1", "101/2024", "15-01-2024"],
    ]
    diagnostics = SkipCollector()
    assert interpret_generic(rows, diagnostics=diagnostics) == []
    assert diagnostics.reasons_for(5) == ["MISSING_TIME_PERIOD"]

    # the CSV importer keeps the bucket across officer lines
    records = interpret_generic(rows, CSV_IMPORT)
    assert len(records) == 1
    assert records[0].officer_name == "जाधव"
    assert records[0].time_period is TimePeriod.THREE_TO_SIX_MONTHS


def test_labelled_bucket_cell_opens_bucket():
    rows = [
        ["", OFFICE_HEADER, "", "", "", ""],
        ["1", "PSI पाटील", "", "", "", ""],
        ["", "", "1 वर्षा वरील", "", "", ""],
        ["", "", "", "1", "1/2023", "10-01-2023"],
        ["", "", "कालावधी 3 ते 6 महिने", "", "", ""],
        ["", "", "", "1", "101/2024", "15-01-2024"],
    ]
    records = interpret_generic(rows)
    assert [(r.case_number, r.time_period) for r in records] == [
        ("1/2023", TimePeriod.OVER_ONE_YEAR),
        ("101/2024", TimePeriod.THREE_TO_SIX_MONTHS),
    ]
    assert records[1].deadline_class is DeadlineClass.DAYS_60

    # the CSV importer treats any column-2 cell with a header marker as a header
    records = interpret_generic(rows, CSV_IMPORT)
    assert [(r.case_number, r.time_period) for r in records] == [
        ("1/2023", TimePeriod.OVER_ONE_YEAR),
        ("101/2024", TimePeriod.OVER_ONE_YEAR),
    ]


def test_bare_bucket_header_cell_is_ignored():
    rows = [
        ["", OFFICE_HEADER],
        ["1", "PSI पाटील"],
        ["", "", "3 ते 6 महिने"],
        ["", "", "कालावधी"],
        ["", "", "", "1", "101/2024", "15-01-2024"],
    ]
    diagnostics = SkipCollector()
    records = interpret_generic(rows, diagnostics=diagnostics)
    assert [r.time_period for r in records] == [TimePeriod.THREE_TO_SIX_MONTHS]
    assert len(diagnostics) == 0


def test_non_finite_serial_is_absent():
    rows = [
        ["", OFFICE_HEADER],
        ["1", "PSI पाटील"],
        ["", "", "3 ते 6 महिने"],
        ["", "", "", float("inf"), "101/2024", "15-01-2024"],
        ["", "", "", float("-inf"), "102/2024", "16-01-2024"],
        ["", "", "", float("nan"), "103/2024", "17-01-2024"],
    ]
    records = interpret_generic(rows)
    assert [r.case_number for r in records] == ["101/2024", "102/2024", "103/2024"]
    assert [r.serial_number for r in records] == [None, None, None]
