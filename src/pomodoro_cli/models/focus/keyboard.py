"""Keyboard input handler for timer controls."""

import os
import select
import sys
import termios
import tty
from collections import deque
from typing import Optional

from .exceptions import TerminalError

ESC = "\x1b"

_NAMED_KEYS = {
    "\x03": "ctrl+c",
    "\r": "enter",
    "\n": "enter",
    "\x7f": "backspace",
}


def parse_keys(data: str) -> list[str]:
    """
    Split raw terminal input into normalized key names.

    A lone ESC becomes ``"esc"``; CSI/SS3 escape sequences (arrow keys,
    function keys) are dropped.
    """
    keys = []
    i = 0
    while i < len(data):
        ch = data[i]
        if ch == ESC:
            if i + 1 < len(data) and data[i + 1] in "[O":
                i += 2
                # Parameters until the final byte of the sequence
                while i < len(data) and not (data[i].isalpha() or data[i] == "~"):
                    i += 1
                i += 1
                continue
            keys.append("esc")
        elif ch in _NAMED_KEYS:
            keys.append(_NAMED_KEYS[ch])
        else:
            keys.append(ch.lower())
        i += 1
    return keys


class KeyboardHandler:
    """Non-blocking keyboard input handler."""

    def __init__(self):
        self.fd = sys.stdin.fileno()
        self.old_settings = None
        self._pending: deque[str] = deque()
        self._setup()

    def _setup(self):
        """Put the terminal in cbreak mode."""
        if not sys.stdin.isatty():
            raise TerminalError("standard input is not a terminal")
        try:
            self.old_settings = termios.tcgetattr(self.fd)
            tty.setcbreak(self.fd)
        except termios.error as e:
            raise TerminalError(f"cannot configure terminal: {e}") from e

    def get_key(self, timeout: float = 0.0) -> Optional[str]:
        """
        Get a single keypress, waiting at most *timeout* seconds.

        Returns the key name or None if nothing was pressed.
        """
        if self._pending:
            return self._pending.popleft()

        try:
            ready, _, _ = select.select([self.fd], [], [], max(0.0, timeout))
            if not ready:
                return None
            data = self._read()
        except OSError as e:
            raise TerminalError(f"cannot read from terminal: {e}") from e

        self._pending.extend(parse_keys(data))
        if self._pending:
            return self._pending.popleft()
        return None

    def _read(self) -> str:
        return os.read(self.fd, 64).decode("utf-8", errors="ignore")

    def stop(self):
        """Restore terminal settings."""
        if self.old_settings:
            try:
                termios.tcsetattr(self.fd, termios.TCSADRAIN, self.old_settings)
            except termios.error:
                pass
