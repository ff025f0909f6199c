import io

import pytest
from rich.console import Console


def _console(width: int) -> Console:
    return Console(
        file=io.StringIO(),
        width=width,
        record=True,
        color_system="truecolor",
        no_color=False,
        legacy_windows=False,
    )


@pytest.fixture
def make_console():
    """Factory for recording consoles of a given width."""
    return _console


@pytest.fixture
def console() -> Console:
    return _console(100)


@pytest.fixture
def render_text():
    """Print a renderable on a console and return its plain-text lines."""

    def render(console: Console, renderable) -> list[str]:
        console.print(renderable)
        return console.export_text().splitlines()

    return render


class FakeClock:
    """Monotonic clock advanced only by FakeTerminal.poll()."""

    def __init__(self) -> None:
        self.t = 0.0

    def __call__(self) -> float:
        return self.t


class FakeTerminal:
    """Scripted stand-in for promo.terminal.Terminal.

    ``on_poll(terminal)`` returns the events for each poll; the clock moves
    forward by the requested timeout.
    """

    def __init__(self, clock: FakeClock, on_poll=None) -> None:
        self.clock = clock
        self.on_poll = on_poll
        self.polls = 0
        self.entered = False
        self.exited = False

    def __enter__(self):
        self.entered = True
        return self

    def __exit__(self, *exc_info):
        self.exited = True

    def poll(self, timeout: float):
        self.polls += 1
        if self.polls > 100_000:
            raise AssertionError("program never finished")
        self.clock.t += timeout
        if self.on_poll is None:
            return []
        return self.on_poll(self)


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def make_terminal(clock):
    def make(on_poll=None) -> FakeTerminal:
        return FakeTerminal(clock, on_poll)

    return make
