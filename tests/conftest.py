"""Shared test fixtures and configuration.

Keeps the application logger away from the real platform log directory.
"""

from __future__ import annotations

import logging
import logging.handlers
from unittest.mock import patch

import pytest

from pomodoro_cli.config import TimerConfig
from pomodoro_cli.models.focus.state import AppState


def drop_file_handlers() -> None:
    """Close and detach the application's file handlers, leaving others alone."""
    logger = logging.getLogger("pomodoro_cli")
    for handler in list(logger.handlers):
        if isinstance(handler, logging.handlers.RotatingFileHandler):
            logger.removeHandler(handler)
            handler.close()


@pytest.fixture(autouse=True)
def isolated_log_dir(tmp_path):
    """Redirect log files into *tmp_path* and reset the logger singleton."""
    import pomodoro_cli.utils.logger as logger_mod

    logger_mod._root = None
    drop_file_handlers()
    with patch("pomodoro_cli.utils.logger.user_log_dir", return_value=str(tmp_path)):
        yield tmp_path
    drop_file_handlers()
    logger_mod._root = None


@pytest.fixture()
def config() -> TimerConfig:
    """Standard 25/5/15 configuration."""
    return TimerConfig(study_minutes=25, break_minutes=5, long_break_minutes=15)


@pytest.fixture()
def state(config) -> AppState:
    """Fresh snapshot at the start of a study session."""
    return AppState.initial(config)
