"""Unit tests for pomodoro_cli.models.focus.state."""

from __future__ import annotations

import dataclasses

import pytest

from pomodoro_cli.config import TimerConfig
from pomodoro_cli.models.focus.state import (
    SESSIONS_BEFORE_LONG_BREAK,
    AppState,
    SessionType,
    Stats,
    TimerState,
    UIState,
)


class TestSessionType:
    def test_labels(self):
        assert SessionType.STUDY.label == "FOCUS TIME"
        assert SessionType.BREAK.label == "SHORT BREAK"
        assert SessionType.LONG_BREAK.label == "LONG BREAK"

    def test_has_exactly_three_members(self):
        assert len(list(SessionType)) == 3


class TestInitialState:
    def test_starts_in_study(self, state):
        assert state.timer.current_session == SessionType.STUDY
        assert state.timer.initial_duration == 25 * 60
        assert state.timer.time_left == 25 * 60
        assert state.timer.paused is False
        assert state.quitting is False

    def test_uses_configured_study_length(self):
        state = AppState.initial(TimerConfig(study_minutes=40))
        assert state.timer.time_left == 40 * 60

    def test_stats_defaults(self, state):
        assert state.stats == Stats()
        assert state.stats.sessions_until_long_break == SESSIONS_BEFORE_LONG_BREAK == 4

    def test_ui_defaults(self, state):
        assert state.ui.help_visible is False
        assert state.ui.editing_config is False
        assert state.ui.editing_field is None


class TestImmutability:
    def test_timer_state_is_frozen(self, state):
        with pytest.raises(dataclasses.FrozenInstanceError):
            state.timer.time_left = 10

    def test_with_timer_returns_copy(self, state):
        updated = state.with_timer(paused=True)

        assert updated.timer.paused is True
        assert state.timer.paused is False

    def test_with_ui_returns_copy(self, state):
        updated = state.with_ui(help_visible=True)

        assert updated.ui.help_visible is True
        assert state.ui == UIState()


class TestProgress:
    def _timer(self, initial: int, left: int) -> TimerState:
        return TimerState(SessionType.STUDY, initial_duration=initial, time_left=left)

    def test_fresh_session_is_zero(self):
        assert self._timer(1500, 1500).progress() == 0.0

    def test_halfway(self):
        assert self._timer(600, 300).progress() == pytest.approx(0.5)

    def test_clamped_when_time_added_past_initial(self):
        assert self._timer(300, 900).progress() == 0.0

    def test_clamped_when_time_left_not_positive(self):
        assert self._timer(300, 0).progress() == 1.0
        assert self._timer(300, -1).progress() == 1.0

    @pytest.mark.parametrize("left", [-60, -1, 0, 1, 150, 299, 300, 301, 10_000])
    def test_always_within_unit_interval(self, left):
        assert 0.0 <= self._timer(300, left).progress() <= 1.0
