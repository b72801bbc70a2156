"""
Logging configuration for the application.

One pipe-separated format for every logger on stdout. The error
reporter's own loggers can be tuned separately so per-error DEBUG
records can be enabled without turning on DEBUG everywhere.
Logging must not change program behavior: error responses are identical
whatever the log level. Never logs request bodies or error payloads.
"""

import logging
import sys
from typing import Optional

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
REPORTER_LOGGER = "error_reporter"


def _to_level(level: str) -> int:
    return getattr(logging, level.upper(), logging.INFO)


def configure_logging(level: str = "INFO", reporter_level: Optional[str] = None) -> None:
    """Configure structured logging for the application.

    Args:
        level: Root log level string (DEBUG, INFO, WARNING, ERROR).
        reporter_level: Level for the ``error_reporter`` loggers. Follows
            ``level`` when omitted.
    """
    logging.basicConfig(
        level=_to_level(level),
        format=LOG_FORMAT,
        datefmt=LOG_DATE_FORMAT,
        stream=sys.stdout,
        force=True,
    )
    logging.getLogger(REPORTER_LOGGER).setLevel(
        _to_level(reporter_level) if reporter_level else logging.NOTSET
    )

    # Unhandled errors are reported by the error reporter, not uvicorn
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("uvicorn.error").setLevel(logging.ERROR)
