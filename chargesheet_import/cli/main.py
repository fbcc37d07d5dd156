from __future__ import annotations

import argparse
import os
import sys
from datetime import date
from pathlib import Path

from dotenv import load_dotenv

from ..config.loader import DEFAULT_CONFIG_PATH, ConfigError, load_config
from ..logging.init import enable_debug, log_summary, setup_logging
from ..logging.skip_log import SkipLogBuffer
from ..models.config_models import ImportConfig
from ..parsing.detector import detect_format
from ..services.exporter import write_records_json
from ..services.orchestrator import ProcessingError, process_all, resolve_profile, scan_report_files
from ..services.severity import summarize_by_station
from ..services.summary import render_severity_report, render_summary_line

"""CLI entrypoint.

Flow:
- load `.env`, then the YAML config
- parse every report in source_directory
- write the records JSON, print the SUMMARY line, exit with the contract code
"""

EXIT_SUCCESS_ALL = 0
EXIT_PARTIAL_FAILURE = 2
EXIT_FATAL = 1

CONFIG_ENV = "CHARGESHEET_IMPORT_CONFIG"


def _load_env_file(path: Path) -> None:
    """Load .env with python-dotenv without overriding variables already set."""
    if path.exists():
        load_dotenv(dotenv_path=path, override=False)


def _parse_today(value: str) -> date:
    try:
        return date.fromisoformat(value)
    except ValueError as e:
        raise argparse.ArgumentTypeError(f"expected YYYY-MM-DD, got {value!r}") from e


def _parse_args(argv: list[str]) -> argparse.Namespace:
    p = argparse.ArgumentParser(
        prog="chargesheet-import",
        description="Pending-case report (xlsx/csv) -> case records importer",
    )
    p.add_argument("--config", type=Path, default=None, help="Config file (default: config/import.yml)")
    p.add_argument("--debug", action="store_true", help="Enable debug logging")
    p.add_argument("--inspect-data", action="store_true", help="Print detected layout & first rows then exit")
    p.add_argument("--severity", action="store_true", help="Print per-station severity counts")
    p.add_argument("--diagnostics", action="store_true", help="Write skipped rows to logs/skips-*.log")
    p.add_argument("--today", type=_parse_today, default=None, help="Reference date YYYY-MM-DD")
    return p.parse_args(argv)


def _inspect_data(cfg: ImportConfig) -> int:
    from ..excel.reader import ReportReadError, read_report_file

    profile = resolve_profile(cfg)
    try:
        files = scan_report_files(Path(cfg.source_directory))
    except ProcessingError as e:
        print(f"inspect: {e}")
        return EXIT_FATAL
    if not files:
        print("inspect: no report files")
        return EXIT_SUCCESS_ALL
    for f in files:
        print(f"FILE: {f.name}")
        try:
            sheets = read_report_file(
                f, target_sheets=cfg.sheets, keep_na_strings=cfg.keep_na_strings or None
            )
        except ReportReadError as e:
            print(f"  read_error: {e}")
            continue
        for sname, rows in sheets.items():
            fmt = detect_format(rows, profile)
            print(f"  SHEET: {sname} format={fmt.value} rows={len(rows)}")
            for row in rows[:5]:
                print("    ", [v.isoformat() if hasattr(v, "isoformat") else v for v in row])
    return EXIT_SUCCESS_ALL


def main(argv: list[str] | None = None) -> int:
    logger = setup_logging()

    # only read sys.argv when no list was given (cli_main([]) in tests)
    if argv is None:
        argv = sys.argv[1:]
    args = _parse_args(argv)
    _load_env_file(Path(".env"))

    config_path = args.config or Path(os.getenv(CONFIG_ENV) or DEFAULT_CONFIG_PATH)
    try:
        cfg = load_config(config_path)
    except ConfigError as e:
        logger.error(f"config: {e}")
        return EXIT_FATAL

    directory = Path(cfg.source_directory)
    if not directory.exists():
        logger.error(f"directory not found: {directory}")
        return EXIT_FATAL

    if args.debug:
        enable_debug(logger)
        logger.debug("debug mode enabled")

    logger.info(f"Processing reports from: {directory} (profile={cfg.profile})")

    if args.inspect_data:
        return _inspect_data(cfg)

    skip_log = SkipLogBuffer() if args.diagnostics else None
    try:
        result = process_all(cfg, today=args.today, skip_log=skip_log)
    except ProcessingError as e:
        logger.error(f"processing: {e}")
        return EXIT_FATAL

    output = Path(cfg.output_file)
    try:
        write_records_json(result.records, output)
    except OSError as e:
        logger.error(f"output: {e}")
        return EXIT_FATAL
    logger.info(f"records={result.total_records} output={output}")

    if args.severity:
        for line in render_severity_report(summarize_by_station(result.records, args.today)):
            logger.info(line)

    summary_line = render_summary_line(result.total_files, result)
    # log_summary adds the "SUMMARY " label itself
    log_summary(summary_line[len("SUMMARY "):])

    if result.failed_files > 0:
        return EXIT_PARTIAL_FAILURE
    return EXIT_SUCCESS_ALL


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
