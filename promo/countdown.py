"""Countdown state machine driven by a fixed tick interval."""

from __future__ import annotations

import logging
from datetime import timedelta

logger = logging.getLogger(__name__)

RUNNING = "running"
PAUSED = "paused"
EXPIRED = "expired"

# state -> states it may move to
TRANSITIONS: dict[str, tuple[str, ...]] = {
    RUNNING: (PAUSED, EXPIRED),
    PAUSED: (RUNNING,),
    EXPIRED: (),
}


class Countdown:
    """One-shot countdown. Expires when remaining reaches zero, then stays put.

    ``total`` is fixed at construction; ``remaining`` drops by one
    ``interval`` per tick while running. Pausing keeps ``remaining`` as is.
    A zero (or negative) total starts out expired.
    """

    def __init__(
        self, total: timedelta, interval: timedelta = timedelta(seconds=1)
    ) -> None:
        if interval <= timedelta(0):
            raise ValueError("interval must be positive")
        total = max(total, timedelta(0))
        self._total = total
        self._remaining = total
        self._interval = interval
        self._state = RUNNING if total > timedelta(0) else EXPIRED

    @property
    def total(self) -> timedelta:
        return self._total

    @property
    def remaining(self) -> timedelta:
        return self._remaining

    @property
    def interval(self) -> timedelta:
        return self._interval

    @property
    def state(self) -> str:
        return self._state

    @property
    def expired(self) -> bool:
        return self._state == EXPIRED

    def _transition(self, target: str) -> bool:
        if target == self._state or target not in TRANSITIONS[self._state]:
            return False
        logger.debug("countdown %s -> %s", self._state, target)
        self._state = target
        return True

    def tick(self) -> bool:
        """Advance one interval. Returns True only on the tick that expires it."""
        if self._state != RUNNING:
            return False
        self._remaining = max(self._remaining - self._interval, timedelta(0))
        if self._remaining > timedelta(0):
            return False
        return self._transition(EXPIRED)

    def start(self) -> bool:
        return self._transition(RUNNING)

    def stop(self) -> bool:
        return self._transition(PAUSED)

    def set_running(self, running: bool) -> bool:
        return self.start() if running else self.stop()
