"""Unit tests for Pomodoro session transitions.

Covers next_session, record_study_session, transition_message and the
advance() step shared by countdown expiry and the skip command.
"""

from __future__ import annotations

from dataclasses import replace

import pytest

from pomodoro_cli.config import TimerConfig
from pomodoro_cli.models.focus.cycling import (
    advance,
    next_session,
    record_study_session,
    transition_message,
)
from pomodoro_cli.models.focus.events import Notify
from pomodoro_cli.models.focus.state import AppState, SessionType, Stats


def _with_countdown(state: AppState, countdown: int) -> AppState:
    return replace(state, stats=replace(state.stats, sessions_until_long_break=countdown))


# ---------------------------------------------------------------------------
# next_session
# ---------------------------------------------------------------------------


class TestNextSession:
    def test_study_with_countdown_left_goes_to_break(self):
        assert next_session(SessionType.STUDY, Stats(sessions_until_long_break=2)) == (
            SessionType.BREAK
        )

    def test_study_with_exhausted_countdown_goes_to_long_break(self):
        assert next_session(SessionType.STUDY, Stats(sessions_until_long_break=0)) == (
            SessionType.LONG_BREAK
        )

    @pytest.mark.parametrize("countdown", [-1, 0, 1, 4, 9])
    @pytest.mark.parametrize("current", [SessionType.BREAK, SessionType.LONG_BREAK])
    def test_breaks_always_go_to_study(self, current, countdown):
        stats = Stats(sessions_until_long_break=countdown)
        assert next_session(current, stats) == SessionType.STUDY


class TestRecordStudySession:
    def test_increments_both_counters_together(self):
        stats = record_study_session(Stats(), 1500)

        assert stats.study_sessions_started == 1
        assert stats.study_sessions_completed == 1

    def test_accumulates_time_and_decrements_countdown(self):
        stats = record_study_session(Stats(total_study_seconds=600), 1500)

        assert stats.total_study_seconds == 2100
        assert stats.sessions_until_long_break == 3


class TestTransitionMessage:
    def test_into_short_break(self):
        assert transition_message(SessionType.STUDY, SessionType.BREAK) == Notify(
            "🎯 Focus Session Complete", "Time for a short break."
        )

    def test_into_long_break(self):
        msg = transition_message(SessionType.STUDY, SessionType.LONG_BREAK)
        assert msg.body == "Time for a long break!"

    def test_break_over(self):
        msg = transition_message(SessionType.BREAK, SessionType.STUDY)
        assert msg.title == "☕ Break Over"

    def test_long_break_over(self):
        msg = transition_message(SessionType.LONG_BREAK, SessionType.STUDY)
        assert msg.title == "🌟 Long Break Over"
        assert msg.body == "Let's get back to work!"


# ---------------------------------------------------------------------------
# advance
# ---------------------------------------------------------------------------


class TestAdvance:
    def test_study_to_break(self, state):
        new_state, notification = advance(state)

        assert new_state.timer.current_session == SessionType.BREAK
        assert new_state.timer.initial_duration == 300
        assert new_state.timer.time_left == 300
        assert new_state.stats.sessions_until_long_break == 3
        assert notification.body == "Time for a short break."

    def test_study_with_countdown_one_goes_to_long_break(self, state):
        new_state, notification = advance(_with_countdown(state, 1))

        assert new_state.timer.current_session == SessionType.LONG_BREAK
        assert new_state.timer.time_left == 15 * 60
        assert new_state.stats.sessions_until_long_break == 4
        assert notification.body == "Time for a long break!"

    @pytest.mark.parametrize("countdown", [2, 3, 4])
    def test_study_with_countdown_above_one_goes_to_break(self, state, countdown):
        new_state, _ = advance(_with_countdown(state, countdown))

        assert new_state.timer.current_session == SessionType.BREAK
        assert new_state.stats.sessions_until_long_break == countdown - 1

    @pytest.mark.parametrize("session", [SessionType.BREAK, SessionType.LONG_BREAK])
    def test_breaks_go_to_study_without_touching_stats(self, state, session):
        in_break = _with_countdown(state, 0).with_timer(
            current_session=session, initial_duration=300, time_left=12
        )

        new_state, _ = advance(in_break)

        assert new_state.timer.current_session == SessionType.STUDY
        assert new_state.timer.time_left == 1500
        assert new_state.stats == in_break.stats

    def test_adds_configured_study_time_not_elapsed_time(self, state):
        # User added ten minutes during the session
        adjusted = state.with_timer(time_left=state.timer.time_left + 600)

        new_state, _ = advance(adjusted)

        assert new_state.stats.total_study_seconds == 1500

    def test_uses_config_at_transition_time(self):
        state = AppState.initial(TimerConfig(study_minutes=25, break_minutes=8))

        new_state, _ = advance(state)

        assert new_state.timer.initial_duration == 8 * 60

    def test_pause_flag_is_preserved(self, state):
        new_state, _ = advance(state.with_timer(paused=True))
        assert new_state.timer.paused is True

    def test_four_cycles_end_in_long_break(self, state):
        sessions = []
        for _ in range(4):
            state, _ = advance(state)  # study -> break
            sessions.append(state.timer.current_session)
            if state.timer.current_session != SessionType.LONG_BREAK:
                state, _ = advance(state)  # break -> study

        assert sessions == [
            SessionType.BREAK,
            SessionType.BREAK,
            SessionType.BREAK,
            SessionType.LONG_BREAK,
        ]
        assert state.stats.sessions_until_long_break == 4
        assert state.stats.study_sessions_completed == 4
        assert state.stats.total_study_seconds == 4 * 1500
