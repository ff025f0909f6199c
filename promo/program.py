"""Program - event loop, state transitions and live rendering."""

from __future__ import annotations

import logging
import time
from typing import Callable

from rich.console import Console, RenderableType
from rich.live import Live

from promo.config import Config
from promo.countdown import Countdown
from promo.events import (
    CTRL_C,
    Event,
    EventQueue,
    KeyPress,
    Resize,
    StartStop,
    Tick,
    Timeout,
)
from promo.notify import play_sound
from promo.render import DEFAULT_BAR_WIDTH, ViewDimensions, bar_width, render_frame
from promo.terminal import Terminal
from promo.types import PromoError, RenderLoopError

logger = logging.getLogger(__name__)

# Longest wait for input between checks of the tick deadline.
POLL_INTERVAL = 0.1


class Program:
    def __init__(
        self,
        countdown: Countdown,
        config: Config,
        notify: Callable[[str], None] = play_sound,
    ) -> None:
        self._countdown = countdown
        self._config = config
        self._notify = notify
        self._tick_number = 0
        self._queue = EventQueue()
        self._dimensions: ViewDimensions | None = None
        self._bar_width = DEFAULT_BAR_WIDTH
        self._notified = False
        self._quit_requested = False

        self._queue.handle(Tick, self._on_tick)
        self._queue.handle(Timeout, self._on_timeout)
        self._queue.handle(KeyPress, self._on_key)
        self._queue.handle(Resize, self._on_resize)
        self._queue.handle(StartStop, self._on_start_stop)

    @property
    def countdown(self) -> Countdown:
        return self._countdown

    @property
    def config(self) -> Config:
        return self._config

    @property
    def tick_number(self) -> int:
        """Number of the last tick sent; the first tick is 1."""
        return self._tick_number

    @property
    def dimensions(self) -> ViewDimensions | None:
        return self._dimensions

    @property
    def bar_width(self) -> int:
        return self._bar_width

    @property
    def quit_requested(self) -> bool:
        return self._quit_requested

    def init(self) -> list[Event]:
        """Events that start the program."""
        events: list[Event] = [StartStop(running=True)]
        if self._countdown.expired:
            events.append(Timeout())
        return events

    def send(self, event: Event) -> None:
        """Queue ``event`` for the next drain."""
        self._queue.put(event)

    def update(self, event: Event) -> None:
        """Apply one event. Unknown event types are ignored."""
        self._queue.dispatch(event)

    def drain(self) -> int:
        return self._queue.drain()

    def view(self) -> RenderableType:
        return render_frame(
            self._countdown.remaining, self._countdown.total, self._bar_width
        )

    def quit(self) -> None:
        self._quit_requested = True

    # -- handlers --

    def _on_tick(self, event: Tick) -> None:
        if self._countdown.tick():
            logger.debug("countdown expired on tick %d", event.tick_number)
            self.send(Timeout())

    def _on_timeout(self, event: Timeout) -> None:
        if not self._notified:
            self._notified = True
            if self._config.sound_path:
                self._notify(self._config.sound_path)
        self.quit()

    def _on_key(self, event: KeyPress) -> None:
        if event.key == CTRL_C:
            logger.debug("interrupted with %s remaining", self._countdown.remaining)
            self.quit()

    def _on_resize(self, event: Resize) -> None:
        self._dimensions = ViewDimensions(event.width, event.height)
        self._bar_width = bar_width(event.width)

    def _on_start_stop(self, event: StartStop) -> None:
        self._countdown.set_running(event.running)

    # -- loop --

    def run(
        self,
        terminal: Terminal,
        console: Console,
        now: Callable[[], float] = time.monotonic,
    ) -> None:
        """Drive the countdown until it expires or Ctrl-C is pressed.

        Ticks are paced against ``now`` with a deadline advanced by one
        interval per tick. Errors other than PromoError are wrapped in
        RenderLoopError.
        """
        interval = self._countdown.interval.total_seconds()
        try:
            with terminal, Live(
                self.view(), console=console, auto_refresh=False
            ) as live:
                self._queue.extend(self.init())
                deadline = now() + interval
                while True:
                    self.drain()
                    live.update(self.view(), refresh=True)
                    if self._quit_requested:
                        break
                    try:
                        wait = min(max(deadline - now(), 0.0), POLL_INTERVAL)
                        for event in terminal.poll(wait):
                            self.send(event)
                        if now() >= deadline:
                            self._tick_number += 1
                            self.send(Tick(self._tick_number))
                            deadline += interval
                    except KeyboardInterrupt:
                        self.send(KeyPress(CTRL_C))
        except PromoError:
            raise
        except Exception as exc:
            raise RenderLoopError(f"Error running program: {exc}") from exc
        logger.debug("program finished in state %s", self._countdown.state)
