"""Pure state transitions for the focus timer.

``update`` takes the current snapshot and one event and returns the next
snapshot together with the side effects the loop driver has to perform.
Nothing in this module touches the clock, the terminal or the notifier.
"""

from __future__ import annotations

from dataclasses import replace

from .cycling import advance
from .events import Effect, Event, KeyPress, Quit, Resize, ScheduleTick, Tick
from .state import AppState, SessionType

# Seconds added or removed by the +/- keys.
ADJUST_STEP = 60

# Manual decrements may not push the countdown below this many seconds.
MIN_TIME_LEFT = 60

QUIT_KEYS = ("q", "ctrl+c")
PAUSE_KEYS = ("p", " ")

_FIELD_KEYS = {
    "s": SessionType.STUDY,
    "b": SessionType.BREAK,
    "l": SessionType.LONG_BREAK,
}

Result = tuple[AppState, list[Effect]]


def update(state: AppState, event: Event) -> Result:
    """Apply *event* to *state*."""
    if isinstance(event, Tick):
        return _on_tick(state)
    if isinstance(event, Resize):
        return state.with_ui(width=event.width, height=event.height), []
    if isinstance(event, KeyPress):
        return _on_key(state, event.key)
    return state, []


def _on_tick(state: AppState) -> Result:
    if state.timer.paused or state.quitting:
        return state, []

    time_left = state.timer.time_left - 1
    if time_left <= 0:
        return _skip(state.with_timer(time_left=time_left))
    return state.with_timer(time_left=time_left), [ScheduleTick()]


def _skip(state: AppState) -> Result:
    new_state, notification = advance(state)
    return new_state, [ScheduleTick(), notification]


def _on_key(state: AppState, key: str) -> Result:
    ui = state.ui

    if key in QUIT_KEYS:
        return replace(state, quitting=True), [Quit()]

    if key == "?":
        if ui.help_visible:
            return state.with_ui(
                help_visible=False, editing_config=False, editing_field=None
            ), []
        return state.with_ui(help_visible=True), []

    if key == "esc" and not ui.editing_config:
        if ui.help_visible:
            return state.with_ui(help_visible=False), []
        return state, []

    if ui.help_visible and ui.editing_config:
        return _on_config_key(state, key), []

    if ui.help_visible and key == "c":
        return state.with_ui(editing_config=True), []

    return _on_timer_key(state, key)


def _on_config_key(state: AppState, key: str) -> AppState:
    if key in ("c", "esc"):
        return state.with_ui(editing_config=False, editing_field=None)
    if key in _FIELD_KEYS:
        return state.with_ui(editing_field=_FIELD_KEYS[key])
    if key in ("+", "-") and state.ui.editing_field is not None:
        delta = 1 if key == "+" else -1
        return adjust_config(state, state.ui.editing_field, delta)
    return state


def adjust_config(state: AppState, session: SessionType, delta_minutes: int) -> AppState:
    """
    Change the configured length of *session* by *delta_minutes*.

    When *session* is the one running, its ``initial_duration`` follows the
    new value while ``time_left`` stays where it is.
    """
    config = state.config.adjust(session, delta_minutes)
    if config is state.config:
        return state

    new_state = replace(state, config=config)
    if state.timer.current_session == session:
        new_state = new_state.with_timer(initial_duration=config.seconds_for(session))
    return new_state


def _on_timer_key(state: AppState, key: str) -> Result:
    timer = state.timer

    if key in PAUSE_KEYS:
        if timer.paused:
            return state.with_timer(paused=False), [ScheduleTick()]
        return state.with_timer(paused=True), []

    if key == "+":
        if timer.paused:
            return state, []
        return state.with_timer(time_left=timer.time_left + ADJUST_STEP), []

    if key == "-":
        if timer.paused or timer.time_left - ADJUST_STEP < MIN_TIME_LEFT:
            return state, []
        return state.with_timer(time_left=timer.time_left - ADJUST_STEP), []

    if key == "n":
        return _skip(state)

    if key == "r":
        return state.with_timer(time_left=timer.initial_duration), [ScheduleTick()]

    return state, []
