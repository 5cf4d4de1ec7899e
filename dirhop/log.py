"""Logging setup for the selector.

The terminal is owned by the TUI and stdout carries the selected path, so
log records only ever go to a file.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

LOG_FILE_ENV = "DIRHOP_LOG_FILE"
LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"

_PACKAGE_LOGGER = "dirhop"


def setup_logging(log_file: Path | None = None, level: str = "WARNING") -> Path | None:
    """Configure the package logger and return the log file in use.

    ``log_file`` falls back to ``$DIRHOP_LOG_FILE``. Without either a
    ``NullHandler`` is installed. Safe to call more than once.
    """
    if log_file is None:
        env_value = os.environ.get(LOG_FILE_ENV, "").strip()
        log_file = Path(env_value).expanduser() if env_value else None

    logger = logging.getLogger(_PACKAGE_LOGGER)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.propagate = False

    if log_file is None:
        logger.addHandler(logging.NullHandler())
        return None

    log_file.parent.mkdir(parents=True, exist_ok=True)
    handler = logging.FileHandler(log_file, encoding="utf-8")
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)
    logger.setLevel(getattr(logging, str(level).upper().strip(), logging.WARNING))
    return log_file


__all__ = ["LOG_FILE_ENV", "setup_logging"]
