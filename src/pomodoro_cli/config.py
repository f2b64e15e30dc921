"""Session duration configuration for Pomodoro CLI."""

from __future__ import annotations

from typing import TYPE_CHECKING

from pydantic import BaseModel, ConfigDict, Field

if TYPE_CHECKING:
    from pomodoro_cli.models.focus.state import SessionType

DEFAULT_STUDY_MINUTES = 25
DEFAULT_BREAK_MINUTES = 5
DEFAULT_LONG_BREAK_MINUTES = 15

# Smallest duration any session may be configured to.
MIN_DURATION_MINUTES = 1


class TimerConfig(BaseModel):
    """Durations for each session kind, in whole minutes.

    The model is frozen: edits produce a new instance via ``adjust``.
    """

    model_config = ConfigDict(frozen=True)

    study_minutes: int = Field(
        default=DEFAULT_STUDY_MINUTES,
        ge=MIN_DURATION_MINUTES,
        description="Study session length",
    )
    break_minutes: int = Field(
        default=DEFAULT_BREAK_MINUTES,
        ge=MIN_DURATION_MINUTES,
        description="Short break length",
    )
    long_break_minutes: int = Field(
        default=DEFAULT_LONG_BREAK_MINUTES,
        ge=MIN_DURATION_MINUTES,
        description="Long break length",
    )

    @staticmethod
    def _field_for(session: SessionType) -> str:
        return f"{session.value}_minutes"

    def minutes_for(self, session: SessionType) -> int:
        """Configured length of *session* in minutes."""
        return getattr(self, self._field_for(session))

    def seconds_for(self, session: SessionType) -> int:
        """Configured length of *session* in seconds."""
        return self.minutes_for(session) * 60

    def adjust(self, session: SessionType, delta_minutes: int) -> TimerConfig:
        """
        Return a copy with *session*'s duration shifted by *delta_minutes*.

        A change that would drop below one minute is refused and ``self`` is
        returned unchanged.
        """
        new_value = self.minutes_for(session) + delta_minutes
        if new_value < MIN_DURATION_MINUTES:
            return self
        return self.model_copy(update={self._field_for(session): new_value})
