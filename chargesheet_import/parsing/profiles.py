from __future__ import annotations

from ..models.config_models import ParserProfile
from .designation import DESIGNATIONS, NUMBERED_DESIGNATION_BASES, SPREADSHEET_DESIGNATIONS
from .time_period import CSV_DEADLINE_TABLE, DEADLINE_TABLE, MARATHI_ENGLISH_PHRASES, MARATHI_PHRASES

"""Built-in parser profiles.

CSV_IMPORT reproduces the command-line CSV importer (Marathi only, no class
for 6-12 months, lines with fewer than five cells ignored). SPREADSHEET_UPLOAD
reproduces the in-app spreadsheet upload (Marathi + English, ISO and serial
dates, full deadline table).
"""

__all__ = [
    "OFFICE_MARKER",
    "OFFICE_MARKER_EN",
    "PENDING_CASES_SUFFIX",
    "CSV_IMPORT",
    "SPREADSHEET_UPLOAD",
    "PROFILES",
    "get_profile",
]

OFFICE_MARKER = "पोलीस स्टेशन"
OFFICE_MARKER_EN = "Police Station"
PENDING_CASES_SUFFIX = "प्रलंबित गुन्हे"

_HEADER_MARKERS = ("कालावधी", "गुरनं", "गुन्हा")
_TOTAL_MARKERS = ("एकुण", "Total")

CSV_IMPORT = ParserProfile(
    name="csv",
    period_phrases=MARATHI_PHRASES,
    deadline_table=CSV_DEADLINE_TABLE,
    designations=DESIGNATIONS,
    numbered_designation_bases=NUMBERED_DESIGNATION_BASES,
    office_markers=(OFFICE_MARKER,),
    officer_label_markers=("अधिकारी", "अमंलदार"),
    header_markers=_HEADER_MARKERS,
    total_markers=_TOTAL_MARKERS,
    pending_suffixes=(PENDING_CASES_SUFFIX,),
    office_marker_columns=None,
    detect_standard_format=False,
    officer_resets_period=False,
    skip_marked_bucket_cells=True,
    min_cells=5,
    allow_iso_dates=False,
    allow_serial_dates=False,
)

SPREADSHEET_UPLOAD = ParserProfile(
    name="spreadsheet",
    period_phrases=MARATHI_ENGLISH_PHRASES,
    deadline_table=DEADLINE_TABLE,
    designations=SPREADSHEET_DESIGNATIONS,
    numbered_designation_bases=NUMBERED_DESIGNATION_BASES,
    office_markers=(OFFICE_MARKER, OFFICE_MARKER_EN),
    officer_label_markers=("अधिकारी", "अमंलदार", "Officer"),
    header_markers=_HEADER_MARKERS,
    total_markers=_TOTAL_MARKERS,
    pending_suffixes=(PENDING_CASES_SUFFIX,),
)

PROFILES: dict[str, ParserProfile] = {
    CSV_IMPORT.name: CSV_IMPORT,
    SPREADSHEET_UPLOAD.name: SPREADSHEET_UPLOAD,
}


def get_profile(name: str) -> ParserProfile:
    try:
        return PROFILES[name]
    except KeyError:
        raise ValueError(f"unknown parser profile: {name!r} (expected one of {sorted(PROFILES)})") from None
