from __future__ import annotations

import logging
import sys

"""Console logging for the importer.

All CLI output is one stream of "<LABEL> <message>" lines on stdout
(INFO, WARN, ERROR, DEBUG and the final SUMMARY line). Parser and service
modules log through `logging.getLogger(__name__)`; their records reach the
console because every module logger is a child of LOGGER_NAME.
"""

__all__ = [
    "LOGGER_NAME",
    "SUMMARY_LEVEL",
    "LabeledFormatter",
    "setup_logging",
    "get_logger",
    "log_summary",
    "enable_debug",
    "reset_logging",
]

LOGGER_NAME = "chargesheet_import"

# Between INFO (20) and WARNING (30) so --debug never hides it.
SUMMARY_LEVEL = 25

_logger: logging.Logger | None = None


class LabeledFormatter(logging.Formatter):
    """Render a record as "<LABEL> <message>".

    WARNING is shortened to WARN; SUMMARY_LEVEL renders as SUMMARY.
    """

    LABELS = {
        logging.DEBUG: "DEBUG",
        logging.INFO: "INFO",
        SUMMARY_LEVEL: "SUMMARY",
        logging.WARNING: "WARN",
        logging.ERROR: "ERROR",
        logging.CRITICAL: "CRITICAL",
    }

    def format(self, record: logging.LogRecord) -> str:
        label = self.LABELS.get(record.levelno, record.levelname)
        return f"{label} {record.getMessage()}"


def setup_logging() -> logging.Logger:
    """Attach the labeled stdout handler to the package logger (idempotent)."""
    global _logger
    if _logger is not None:
        return _logger

    logging.addLevelName(SUMMARY_LEVEL, "SUMMARY")

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(logging.INFO)
    # a previous run in the same process (tests) may have left a handler bound
    # to an old stdout
    for old in list(logger.handlers):
        logger.removeHandler(old)

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(logging.INFO)
    handler.setFormatter(LabeledFormatter())
    logger.addHandler(handler)
    logger.propagate = False

    _logger = logger
    return logger


def get_logger() -> logging.Logger:
    return _logger if _logger is not None else setup_logging()


def log_summary(message: str) -> None:
    """Emit the run's SUMMARY line (message without the label)."""
    get_logger().log(SUMMARY_LEVEL, message)


def enable_debug(logger: logging.Logger) -> None:
    """Lower the logger and its handlers to DEBUG (--debug)."""
    for h in logger.handlers:
        h.setLevel(logging.DEBUG)
    logger.setLevel(logging.DEBUG)


def reset_logging() -> None:
    """Forget the configured logger so the next setup_logging() rebinds stdout."""
    global _logger
    _logger = None
