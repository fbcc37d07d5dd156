from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import jsonschema
import yaml
from jsonschema.exceptions import ValidationError

from ..models.config_models import BucketPolicy, ImportConfig

"""Config loader.

Responsibilities:
- Load YAML config (default `config/import.yml`)
- Validate it against the bundled JSON schema (import_schema.json)
- Apply defaults (profile=spreadsheet, output_file=./output/cases.json)
"""

__all__ = [
    "ConfigError",
    "DEFAULT_CONFIG_PATH",
    "SCHEMA_PATH",
    "load_config",
]

DEFAULT_CONFIG_PATH = Path("config/import.yml")
SCHEMA_PATH = Path(__file__).parent / "import_schema.json"


class ConfigError(Exception):
    pass


def _validate_config_schema(data: dict[str, Any]) -> None:
    """Validate config data against the JSON schema.

    Raises:
        ConfigError: schema file missing or unreadable, or data not valid
            (missing required keys, wrong types, unknown keys).
    """
    if not SCHEMA_PATH.exists():
        raise ConfigError(f"config schema not found: {SCHEMA_PATH}")

    try:
        schema = json.loads(SCHEMA_PATH.read_text(encoding="utf-8"))
        jsonschema.validate(data, schema)
    except json.JSONDecodeError as e:
        raise ConfigError(f"invalid schema file: {e}") from e
    except ValidationError as e:
        raise ConfigError(f"config validation failed: {e.message}") from e


def load_config(path: Path) -> ImportConfig:
    if not path.exists():
        raise ConfigError(f"config file not found: {path}")
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as e:
        raise ConfigError(f"invalid yaml: {e}") from e
    if not isinstance(data, dict):
        raise ConfigError(f"config root must be a mapping, got {type(data).__name__}")

    _validate_config_schema(data)

    policy = data.get("bucket_policy")
    designations = data.get("designations")
    sheets = data.get("sheets")
    return ImportConfig(
        source_directory=data["source_directory"],
        profile=data.get("profile", "spreadsheet"),
        output_file=data.get("output_file", "./output/cases.json"),
        bucket_policy=BucketPolicy(policy) if policy else None,
        designations=tuple(designations) if designations is not None else None,
        sheets=frozenset(sheets) if sheets is not None else None,
        keep_na_strings=list(data.get("keep_na_strings", [])),
    )
