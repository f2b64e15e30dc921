"""Events consumed by the focus reducer and effects it requests."""

from __future__ import annotations

from dataclasses import dataclass

# Seconds between two ticks of the countdown.
TICK_INTERVAL = 1.0


@dataclass(frozen=True)
class Tick:
    """One second of wall time has elapsed."""


@dataclass(frozen=True)
class KeyPress:
    """A single normalized key, e.g. ``"p"``, ``" "``, ``"esc"``, ``"ctrl+c"``."""

    key: str


@dataclass(frozen=True)
class Resize:
    """The terminal changed size."""

    width: int
    height: int


Event = Tick | KeyPress | Resize


@dataclass(frozen=True)
class ScheduleTick:
    """Deliver one ``Tick`` after *delay* seconds, replacing any pending one."""

    delay: float = TICK_INTERVAL


@dataclass(frozen=True)
class Notify:
    """Best-effort desktop notification."""

    title: str
    body: str


@dataclass(frozen=True)
class Quit:
    """Stop the event loop."""


Effect = ScheduleTick | Notify | Quit
