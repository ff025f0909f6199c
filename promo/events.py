"""Loop events and the queue that routes them to handlers."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from typing import Any, Callable, Union

CTRL_C = "ctrl+c"


@dataclass(frozen=True)
class Tick:
    """One interval of the countdown clock has passed."""

    tick_number: int


@dataclass(frozen=True)
class Timeout:
    """The countdown has expired."""


@dataclass(frozen=True)
class KeyPress:
    key: str


@dataclass(frozen=True)
class Resize:
    width: int
    height: int


@dataclass(frozen=True)
class StartStop:
    """Resume (``running=True``) or pause the countdown."""

    running: bool


Event = Union[Tick, Timeout, KeyPress, Resize, StartStop]


class EventQueue:
    """FIFO of pending events with one handler per event type.

    Events without a registered handler are dropped. Handlers may enqueue
    further events while the queue is draining; those run in the same drain.
    """

    def __init__(self) -> None:
        self._handlers: dict[type[Any], Callable[[Any], None]] = {}
        self._pending: deque[Any] = deque()

    def handle(self, event_type: type[Any], handler: Callable[[Any], None]) -> None:
        """Register ``handler(event)`` for ``event_type``. Later calls overwrite."""
        self._handlers[event_type] = handler

    def put(self, event: Any) -> None:
        self._pending.append(event)

    def extend(self, events: list[Any]) -> None:
        self._pending.extend(events)

    def dispatch(self, event: Any) -> bool:
        """Run the handler for ``event`` now. Returns False if none is registered."""
        handler = self._handlers.get(type(event))
        if handler is None:
            return False
        handler(event)
        return True

    def drain(self) -> int:
        """Dispatch pending events until the queue is empty. Returns the count."""
        count = 0
        while self._pending:
            self.dispatch(self._pending.popleft())
            count += 1
        return count
