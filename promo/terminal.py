"""Keyboard and resize input from the controlling terminal."""

from __future__ import annotations

import os
import select
import shutil
import sys
import termios
import time
import tty
from typing import Callable, TextIO

from promo.events import CTRL_C, Event, KeyPress, Resize

_KEY_NAMES = {
    "\x03": CTRL_C,
    "\x1b": "esc",
    "\r": "enter",
    "\n": "enter",
    " ": "space",
}


def key_name(char: str) -> str:
    return _KEY_NAMES.get(char, char)


class Terminal:
    """Context manager that reads single key presses without echo.

    While active, ``ECHO``, ``ICANON`` and ``ISIG`` are cleared so Ctrl-C is
    delivered as a key instead of SIGINT. A stream that is not a TTY is left
    untouched and produces only resize events.
    """

    def __init__(
        self,
        stream: TextIO | None = None,
        size: Callable[[], os.terminal_size] = shutil.get_terminal_size,
    ) -> None:
        self._stream = stream if stream is not None else sys.stdin
        self._size = size
        self._fd: int | None = None
        self._saved: list | None = None
        self._last_size: os.terminal_size | None = None

    def __enter__(self) -> Terminal:
        if self._stream.isatty():
            fd = self._stream.fileno()
            self._saved = termios.tcgetattr(fd)
            mode = termios.tcgetattr(fd)
            mode[tty.LFLAG] &= ~(termios.ECHO | termios.ICANON | termios.ISIG)
            mode[tty.CC][termios.VMIN] = 1
            mode[tty.CC][termios.VTIME] = 0
            termios.tcsetattr(fd, termios.TCSAFLUSH, mode)
            self._fd = fd
        return self

    def __exit__(self, *exc_info: object) -> None:
        if self._fd is not None and self._saved is not None:
            termios.tcsetattr(self._fd, termios.TCSADRAIN, self._saved)
        self._fd = None
        self._saved = None

    def poll(self, timeout: float) -> list[Event]:
        """Wait up to ``timeout`` seconds and return the events seen."""
        events: list[Event] = []
        size = self._size()
        if size != self._last_size:
            self._last_size = size
            events.append(Resize(width=size.columns, height=size.lines))

        if self._fd is None:
            if timeout > 0:
                time.sleep(timeout)
            return events

        ready, _, _ = select.select([self._fd], [], [], max(timeout, 0.0))
        if ready:
            data = os.read(self._fd, 64)
            for char in data.decode("utf-8", errors="ignore"):
                events.append(KeyPress(key_name(char)))
        return events
