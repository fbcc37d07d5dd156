from __future__ import annotations

import pytest

from chargesheet_import.models.config_models import BucketPolicy
from chargesheet_import.parsing.profiles import CSV_IMPORT, PROFILES, SPREADSHEET_UPLOAD, get_profile


def test_get_profile():
    assert get_profile("csv") is CSV_IMPORT
    assert get_profile("spreadsheet") is SPREADSHEET_UPLOAD
    assert set(PROFILES) == {"csv", "spreadsheet"}


def test_get_profile_unknown():
    with pytest.raises(ValueError, match="unknown parser profile"):
        get_profile("pdf")


def test_profile_differences():
    assert CSV_IMPORT.min_cells == 5
    assert CSV_IMPORT.office_marker_columns is None
    assert CSV_IMPORT.detect_standard_format is False
    assert not CSV_IMPORT.allow_iso_dates and not CSV_IMPORT.allow_serial_dates
    assert "Police Station" in SPREADSHEET_UPLOAD.office_markers
    assert "Inspector" in SPREADSHEET_UPLOAD.designations
    assert "Inspector" not in CSV_IMPORT.designations


def test_with_overrides_returns_copy():
    custom = SPREADSHEET_UPLOAD.with_overrides(designations=("PSI",), bucket_policy=BucketPolicy.STRICT_SKIP)
    assert custom.designations == ("PSI",)
    assert custom.bucket_policy is BucketPolicy.STRICT_SKIP
    assert SPREADSHEET_UPLOAD.bucket_policy is None
    assert SPREADSHEET_UPLOAD.with_overrides() is SPREADSHEET_UPLOAD
