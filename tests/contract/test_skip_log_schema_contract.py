from __future__ import annotations

import json
from pathlib import Path

import jsonschema
import pytest

from chargesheet_import.logging.skip_log import SkipLogBuffer, SkipRecord
from chargesheet_import.models.skip_record import SKIP_REASONS

"""Skip log line schema: fixed keys, no extras, known reason codes."""

SKIP_LOG_SCHEMA = {
    "type": "object",
    "additionalProperties": False,
    "required": ["timestamp", "file", "sheet", "row", "reason", "detail"],
    "properties": {
        "timestamp": {"type": "string", "pattern": r"^\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}(\.\d+)?Z$"},
        "file": {"type": "string"},
        "sheet": {"type": "string"},
        "row": {"type": "integer", "minimum": -1},
        "reason": {"type": "string", "enum": sorted(SKIP_REASONS)},
        "detail": {"type": "string"},
    },
}


def test_written_lines_match_schema(tmp_path: Path):
    buf = SkipLogBuffer(logs_dir=tmp_path)
    buf.append(SkipRecord.create("a.xlsx", "Sheet1", 12, "MISSING_OFFICER", "101/2024"))
    buf.append(SkipRecord.create("b.xlsx", "<FILE_LEVEL>", -1, "READ_ERROR", "cannot read b.xlsx"))
    path = buf.flush()
    for line in path.read_text(encoding="utf-8").splitlines():
        jsonschema.validate(json.loads(line), SKIP_LOG_SCHEMA)


def test_schema_rejects_extra_key():
    record = json.loads(SkipRecord.create("a.xlsx", "S", 1, "TOO_FEW_CELLS", "").to_json_line())
    record["extra"] = "not allowed"
    with pytest.raises(jsonschema.exceptions.ValidationError):
        jsonschema.validate(record, SKIP_LOG_SCHEMA)


def test_schema_rejects_unknown_reason():
    record = json.loads(SkipRecord.create("a.xlsx", "S", 1, "SOMETHING_ELSE", "").to_json_line())
    with pytest.raises(jsonschema.exceptions.ValidationError):
        jsonschema.validate(record, SKIP_LOG_SCHEMA)
