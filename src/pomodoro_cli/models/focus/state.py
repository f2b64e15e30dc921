"""Timer state snapshot for focus mode."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import Enum

from pomodoro_cli.config import TimerConfig

# Study sessions completed between two long breaks.
SESSIONS_BEFORE_LONG_BREAK = 4


class SessionType(str, Enum):
    """Kind of timed phase in the Pomodoro cycle."""

    STUDY = "study"
    BREAK = "break"
    LONG_BREAK = "long_break"

    @property
    def label(self) -> str:
        """Heading shown above the countdown."""
        return _LABELS[self]


_LABELS = {
    SessionType.STUDY: "FOCUS TIME",
    SessionType.BREAK: "SHORT BREAK",
    SessionType.LONG_BREAK: "LONG BREAK",
}


@dataclass(frozen=True)
class TimerState:
    """Countdown of the session in progress. Durations are in seconds."""

    current_session: SessionType
    initial_duration: int
    time_left: int
    paused: bool = False

    def progress(self) -> float:
        """Fraction of the session elapsed, clamped to [0, 1]."""
        if self.initial_duration <= 0:
            return 1.0
        fraction = (self.initial_duration - self.time_left) / self.initial_duration
        return min(1.0, max(0.0, fraction))


@dataclass(frozen=True)
class Stats:
    """Counters accumulated over the run."""

    study_sessions_started: int = 0
    study_sessions_completed: int = 0
    total_study_seconds: int = 0
    sessions_until_long_break: int = SESSIONS_BEFORE_LONG_BREAK


@dataclass(frozen=True)
class UIState:
    """Overlay and terminal state read by the display."""

    help_visible: bool = False
    editing_config: bool = False
    editing_field: SessionType | None = None
    width: int = 80
    height: int = 24


@dataclass(frozen=True)
class AppState:
    """The whole application snapshot threaded through the reducer."""

    config: TimerConfig
    timer: TimerState
    stats: Stats = field(default_factory=Stats)
    ui: UIState = field(default_factory=UIState)
    quitting: bool = False

    @classmethod
    def initial(cls, config: TimerConfig) -> AppState:
        """Fresh state starting a study session."""
        study = config.seconds_for(SessionType.STUDY)
        return cls(
            config=config,
            timer=TimerState(
                current_session=SessionType.STUDY,
                initial_duration=study,
                time_left=study,
            ),
        )

    def with_timer(self, **changes) -> AppState:
        return replace(self, timer=replace(self.timer, **changes))

    def with_ui(self, **changes) -> AppState:
        return replace(self, ui=replace(self.ui, **changes))
