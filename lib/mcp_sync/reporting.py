"""
Console reporting for sync runs.

Wraps stdlib logging with a SUCCESS level and emoji markers per level.
Info/success go to stdout; warnings and errors go to stderr.
"""

import logging
import sys

LOGGER_NAME = "mcp_sync"
SUCCESS = 25

logging.addLevelName(SUCCESS, "SUCCESS")

MARKERS = {
    logging.DEBUG: "🔍 ",
    logging.INFO: "ℹ️  ",
    SUCCESS: "✅ ",
    logging.WARNING: "⚠️  ",
    logging.ERROR: "❌ ",
    logging.CRITICAL: "❌ ",
}


class MarkerFormatter(logging.Formatter):
    """Prefix each message with the marker for its level."""

    def format(self, record: logging.LogRecord) -> str:
        marker = MARKERS.get(record.levelno, "")
        return f"{marker}{record.getMessage()}"


class _MaxLevelFilter(logging.Filter):
    def __init__(self, max_level: int):
        super().__init__()
        self.max_level = max_level

    def filter(self, record: logging.LogRecord) -> bool:
        return record.levelno < self.max_level


def get_logger() -> logging.Logger:
    return logging.getLogger(LOGGER_NAME)


def configure_logging(level: str | int = logging.INFO, stdout=None, stderr=None) -> logging.Logger:
    """Install the stdout/stderr handler pair on the sync logger (idempotent)."""
    logger = get_logger()
    for handler in list(logger.handlers):
        logger.removeHandler(handler)

    formatter = MarkerFormatter()

    out_handler = logging.StreamHandler(stdout or sys.stdout)
    out_handler.setFormatter(formatter)
    out_handler.addFilter(_MaxLevelFilter(logging.WARNING))

    err_handler = logging.StreamHandler(stderr or sys.stderr)
    err_handler.setFormatter(formatter)
    err_handler.setLevel(logging.WARNING)

    logger.addHandler(out_handler)
    logger.addHandler(err_handler)
    logger.setLevel(level)
    logger.propagate = False
    return logger


def log_success(logger: logging.Logger, message: str, *args) -> None:
    logger.log(SUCCESS, message, *args)
