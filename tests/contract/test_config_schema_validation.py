from __future__ import annotations

import json

import jsonschema
import pytest

from chargesheet_import.config.loader import SCHEMA_PATH

"""Bundled config schema contract."""


@pytest.fixture()
def schema() -> dict:
    return json.loads(SCHEMA_PATH.read_text(encoding="utf-8"))


def test_minimal_config_valid(schema):
    jsonschema.validate({"source_directory": "./data"}, schema)


def test_full_config_valid(schema):
    jsonschema.validate(
        {
            "source_directory": "./data",
            "profile": "csv",
            "output_file": "./out.json",
            "bucket_policy": "strict-skip",
            "designations": ["PSI"],
            "sheets": ["Sheet1"],
            "keep_na_strings": ["NA"],
        },
        schema,
    )


@pytest.mark.parametrize(
    "config",
    [
        {},
        {"source_directory": ""},
        {"source_directory": "./data", "profile": "xml"},
        {"source_directory": "./data", "bucket_policy": "always"},
        {"source_directory": "./data", "designations": "PSI"},
        {"source_directory": "./data", "database": {"host": "x"}},
    ],
)
def test_invalid_configs_rejected(schema, config):
    with pytest.raises(jsonschema.exceptions.ValidationError):
        jsonschema.validate(config, schema)
