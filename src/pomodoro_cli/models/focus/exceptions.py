"""Custom exceptions for Pomodoro CLI focus mode."""


class PomodoroError(Exception):
    """Base exception for all Pomodoro CLI errors."""


class TerminalError(PomodoroError):
    """Raised when the interactive terminal cannot be driven."""
