"""File logging for the application."""

from __future__ import annotations

import logging
import os
import sys
from datetime import datetime, timezone
from pathlib import Path

DEFAULT_LOG_DIR = "/app/logs"
LOG_FILE_NAME = "app.log"

_PACKAGE_LOGGER = __name__.partition(".")[0]


class _Rfc3339Formatter(logging.Formatter):
    def formatTime(self, record, datefmt=None):  # noqa: N802
        return datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat()


def setup_logging(log_dir: str | os.PathLike = DEFAULT_LOG_DIR) -> Path:
    """Send all package log records to ``<log_dir>/app.log``, truncating it.

    Returns the path of the log file; raises ``OSError`` if it cannot be created.
    """
    directory = Path(log_dir)
    try:
        directory.mkdir(parents=True, exist_ok=True)
    except OSError as error:
        print(
            f"NOTICE: Could not create log directory {directory}: {error}",
            file=sys.stderr,
        )

    log_path = directory / LOG_FILE_NAME
    try:
        handler = logging.FileHandler(log_path, mode="w", encoding="utf-8")
    except OSError as error:
        print(
            f"ERROR: Failed to create log file '{log_path}': {error}",
            file=sys.stderr,
        )
        raise

    handler.setFormatter(
        _Rfc3339Formatter(
            "%(asctime)s %(levelname)-8s [%(name)s] (%(threadName)s) "
            "%(filename)s:%(lineno)d %(message)s"
        )
    )

    logger = logging.getLogger(_PACKAGE_LOGGER)
    for old in [h for h in logger.handlers if isinstance(h, logging.FileHandler)]:
        logger.removeHandler(old)
        old.close()
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG)

    logger.info("Logging initialized successfully.")
    return log_path