"""
Log output format for astquery: timestamp | level | importance | message.

Importance is a 0-10 score derived from the level unless a record carries its
own (``logger.info(..., extra={"importance": 7})``).

Author: Vasiliy Zdanovskiy
email: vasilyvz@gmail.com
"""

from __future__ import annotations

import logging
from typing import Optional, TextIO

LEVEL_TO_IMPORTANCE = {
    "DEBUG": 2,
    "INFO": 4,
    "WARNING": 6,
    "ERROR": 8,
    "CRITICAL": 10,
}

UNIFIED_DATE_FMT = "%Y-%m-%d %H:%M:%S"
UNIFIED_FORMAT_STR = "%(asctime)s | %(levelname)-8s | %(importance)s | %(message)s"

PACKAGE_LOGGER = "astquery"


def importance_from_level(level_name: str) -> int:
    """Return importance 0-10 for a standard log level name. Returns 4 for unknown."""
    return LEVEL_TO_IMPORTANCE.get((level_name or "").strip().upper(), 4)


class UnifiedFormatter(logging.Formatter):
    """Formatter that fills in ``importance`` for records that lack it."""

    def __init__(self, fmt: str = UNIFIED_FORMAT_STR, datefmt: str = UNIFIED_DATE_FMT):
        super().__init__(fmt=fmt, datefmt=datefmt)

    def format(self, record: logging.LogRecord) -> str:
        if getattr(record, "importance", None) is None:
            record.importance = importance_from_level(record.levelname)
        return super().format(record)


def configure_logging(
    verbose: bool = False, stream: Optional[TextIO] = None
) -> logging.Logger:
    """
    Attach a stderr handler with UnifiedFormatter to the package logger.

    Calling it again replaces the handler installed by a previous call instead
    of stacking a second one.

    Args:
        verbose: log DEBUG records (default: WARNING and above)
        stream: output stream (default: sys.stderr)
    """
    logger = logging.getLogger(PACKAGE_LOGGER)
    for handler in list(logger.handlers):
        if getattr(handler, "_astquery_handler", False):
            logger.removeHandler(handler)
    handler = logging.StreamHandler(stream)
    handler.setFormatter(UnifiedFormatter())
    handler._astquery_handler = True
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
    return logger
