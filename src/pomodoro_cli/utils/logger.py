"""Application-wide logger writing to platformdirs user_log_dir.

Nothing is ever logged to the terminal: the screen belongs to the timer.
"""

from __future__ import annotations

import logging
import logging.handlers
from pathlib import Path

from platformdirs import user_log_dir

_APP_NAME = "pomodoro_cli"
_LOG_FILE = "pomodoro.log"
_MAX_BYTES = 1024 * 1024  # 1 MB
_BACKUP_COUNT = 2

_root: logging.Logger | None = None


def _build_root() -> logging.Logger:
    logger = logging.getLogger(_APP_NAME)
    logger.setLevel(logging.DEBUG)
    logger.propagate = False

    log_path = log_file_path()
    if any(
        isinstance(h, logging.handlers.RotatingFileHandler)
        and h.baseFilename == str(log_path)
        for h in logger.handlers
    ):
        return logger

    log_path.parent.mkdir(parents=True, exist_ok=True)
    handler = logging.handlers.RotatingFileHandler(
        log_path,
        maxBytes=_MAX_BYTES,
        backupCount=_BACKUP_COUNT,
        encoding="utf-8",
    )
    handler.setFormatter(
        logging.Formatter(
            fmt="%(asctime)s %(levelname)-8s [%(name)s] %(message)s",
            datefmt="%Y-%m-%dT%H:%M:%S",
        )
    )

    logger.addHandler(handler)
    return logger


def get_logger(component: str | None = None) -> logging.Logger:
    """
    Return the application logger, or a child of it for *component*.

    The file handler is attached to the root application logger on first use.
    """
    global _root
    if _root is None:
        _root = _build_root()
    if component:
        return _root.getChild(component)
    return _root


def log_file_path() -> Path:
    """Location of the current log file."""
    return Path(user_log_dir(_APP_NAME)) / _LOG_FILE
