"""Focus mode - Pomodoro timer system for Pomodoro CLI."""

from .exceptions import PomodoroError, TerminalError
from .keyboard import KeyboardHandler
from .loop import FocusLoop
from .notifications import DesktopNotifier
from .reducer import update
from .state import AppState, SessionType, Stats, TimerState, UIState
from .ui import TimerDisplay, show_goodbye_message

__all__ = [
    "AppState",
    "SessionType",
    "Stats",
    "TimerState",
    "UIState",
    "update",
    "FocusLoop",
    "TimerDisplay",
    "KeyboardHandler",
    "DesktopNotifier",
    "PomodoroError",
    "TerminalError",
    "show_goodbye_message",
]
