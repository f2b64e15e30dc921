"""Focus mode - Pomodoro timer system for Pomodoro CLI.

This package re-exports from pomodoro_cli.models.focus for clean import paths.
"""

from pomodoro_cli.models.focus import (
    AppState,
    DesktopNotifier,
    FocusLoop,
    SessionType,
    TerminalError,
    TimerDisplay,
    show_goodbye_message,
)

__all__ = [
    "AppState",
    "SessionType",
    "FocusLoop",
    "TimerDisplay",
    "DesktopNotifier",
    "TerminalError",
    "show_goodbye_message",
]
