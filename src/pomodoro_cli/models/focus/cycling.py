"""Pomodoro session transitions."""

from __future__ import annotations

from dataclasses import replace

from .events import Notify
from .state import SESSIONS_BEFORE_LONG_BREAK, AppState, SessionType, Stats

_FOCUS_COMPLETE = "🎯 Focus Session Complete"


def next_session(current: SessionType, stats: Stats) -> SessionType:
    """
    Determine the session that follows *current*.

    *stats* must already reflect the study session that just finished, i.e.
    its long-break countdown has been decremented.
    """
    if current == SessionType.STUDY:
        if stats.sessions_until_long_break <= 0:
            return SessionType.LONG_BREAK
        return SessionType.BREAK
    return SessionType.STUDY


def record_study_session(stats: Stats, study_seconds: int) -> Stats:
    """Count one completed study session of the configured length."""
    return replace(
        stats,
        study_sessions_started=stats.study_sessions_started + 1,
        study_sessions_completed=stats.study_sessions_completed + 1,
        total_study_seconds=stats.total_study_seconds + study_seconds,
        sessions_until_long_break=stats.sessions_until_long_break - 1,
    )


def transition_message(previous: SessionType, entered: SessionType) -> Notify:
    """Notification announcing the move from *previous* into *entered*."""
    if entered == SessionType.LONG_BREAK:
        return Notify(_FOCUS_COMPLETE, "Time for a long break!")
    if entered == SessionType.BREAK:
        return Notify(_FOCUS_COMPLETE, "Time for a short break.")
    if previous == SessionType.LONG_BREAK:
        return Notify("🌟 Long Break Over", "Let's get back to work!")
    return Notify("☕ Break Over", "Ready to focus again?")


def advance(state: AppState) -> tuple[AppState, Notify]:
    """
    Move *state* to the next session.

    Shared by countdown expiry and the skip command. Stats change only when
    a study session ends. The pause flag is carried over unchanged.
    """
    previous = state.timer.current_session
    stats = state.stats

    if previous == SessionType.STUDY:
        stats = record_study_session(
            stats, state.config.seconds_for(SessionType.STUDY)
        )

    entered = next_session(previous, stats)
    if entered == SessionType.LONG_BREAK:
        stats = replace(stats, sessions_until_long_break=SESSIONS_BEFORE_LONG_BREAK)

    duration = state.config.seconds_for(entered)
    new_state = replace(
        state,
        stats=stats,
        timer=replace(
            state.timer,
            current_session=entered,
            initial_duration=duration,
            time_left=duration,
        ),
    )
    return new_state, transition_message(previous, entered)
