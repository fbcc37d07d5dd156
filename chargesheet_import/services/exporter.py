from __future__ import annotations

import json
import logging
from collections.abc import Iterable
from pathlib import Path

from ..models.parsed_case import ParsedCaseRecord

__all__ = [
    "records_to_json",
    "write_records_json",
]

logger = logging.getLogger(__name__)


def records_to_json(records: Iterable[ParsedCaseRecord]) -> str:
    return json.dumps([r.to_dict() for r in records], ensure_ascii=False, indent=2)


def write_records_json(records: Iterable[ParsedCaseRecord], path: Path) -> Path:
    """Write records as a JSON array (UTF-8, Devanagari kept readable)."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(records_to_json(records) + "\n", encoding="utf-8")
    logger.debug(f"records written to {path}")
    return path
