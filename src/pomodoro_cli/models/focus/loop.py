"""Single-threaded event loop driving the focus timer."""

from __future__ import annotations

import time
from collections.abc import Callable

from rich.live import Live

from pomodoro_cli.utils.logger import get_logger

from .events import Effect, Event, KeyPress, Notify, Quit, Resize, ScheduleTick, Tick
from .exceptions import TerminalError
from .keyboard import KeyboardHandler
from .notifications import DesktopNotifier
from .reducer import update
from .state import AppState
from .ui import TimerDisplay

# Upper bound on one keyboard wait so terminal resizes are noticed promptly.
MAX_POLL_INTERVAL = 0.25


class FocusLoop:
    """Feeds keys, resizes and ticks through the reducer one at a time.

    The loop owns the only pending tick: a ``ScheduleTick`` effect replaces
    the deadline rather than adding a second one.
    """

    def __init__(
        self,
        state: AppState,
        display: TimerDisplay,
        notifier: DesktopNotifier,
        clock: Callable[[], float] = time.monotonic,
    ):
        self.state = state
        self.display = display
        self.notifier = notifier
        self.clock = clock
        self.next_tick_at: float | None = None
        self.running = False

    def dispatch(self, event: Event) -> None:
        """Run one event through the reducer and carry out its effects."""
        previous = self.state.timer.current_session
        self.state, effects = update(self.state, event)
        if self.state.timer.current_session != previous:
            get_logger("loop").info(
                "Session %s -> %s (%d completed)",
                previous.value,
                self.state.timer.current_session.value,
                self.state.stats.study_sessions_completed,
            )
        for effect in effects:
            self._apply(effect)

    def _apply(self, effect: Effect) -> None:
        if isinstance(effect, ScheduleTick):
            self.next_tick_at = self.clock() + effect.delay
        elif isinstance(effect, Notify):
            self.notifier.notify(effect.title, effect.body)
        elif isinstance(effect, Quit):
            self.running = False

    def tick_due(self) -> bool:
        return self.next_tick_at is not None and self.clock() >= self.next_tick_at

    def fire_due_tick(self) -> None:
        """Deliver the pending tick if its deadline has passed."""
        if self.tick_due():
            self.next_tick_at = None
            self.dispatch(Tick())

    def poll_timeout(self) -> float:
        """How long the keyboard may block before the next tick is due."""
        if self.next_tick_at is None:
            return MAX_POLL_INTERVAL
        return max(0.0, min(MAX_POLL_INTERVAL, self.next_tick_at - self.clock()))

    def check_resize(self) -> None:
        width, height = self.display.console.size
        if (width, height) != (self.state.ui.width, self.state.ui.height):
            self.dispatch(Resize(width, height))

    def run(self, keyboard: KeyboardHandler | None = None) -> AppState:
        """
        Run until the user quits.

        Returns the final state. Raises TerminalError if the terminal cannot
        be driven.
        """
        self.running = True
        self._apply(ScheduleTick())
        get_logger("loop").info(
            "Starting %s session", self.state.timer.current_session.value
        )

        try:
            keyboard = keyboard or KeyboardHandler()
            self.check_resize()
            with Live(
                self.display.create_layout(self.state),
                console=self.display.console,
                screen=True,
                auto_refresh=False,
            ) as live:
                while self.running:
                    try:
                        key = keyboard.get_key(self.poll_timeout())
                    except KeyboardInterrupt:
                        key = "ctrl+c"
                    if key:
                        self.dispatch(KeyPress(key))
                    if self.running:
                        self.check_resize()
                        self.fire_due_tick()
                    live.update(self.display.create_layout(self.state), refresh=True)
        except TerminalError:
            get_logger("loop").exception("Terminal failure")
            raise
        except OSError as e:
            get_logger("loop").exception("Terminal failure")
            raise TerminalError(str(e)) from e
        finally:
            if keyboard is not None:
                keyboard.stop()

        get_logger("loop").info(
            "Quit after %d focus sessions",
            self.state.stats.study_sessions_completed,
        )
        return self.state
