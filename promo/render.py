"""Frame rendering: ``MM:SS / MM:SS`` label over a proportional bar."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import timedelta

from rich.align import Align
from rich.console import Group, RenderableType
from rich.constrain import Constrain
from rich.progress_bar import ProgressBar
from rich.text import Text

from promo.duration import format_clock

# Canvas the frame is centered in.
CANVAS_WIDTH = 100
CANVAS_HEIGHT = 3

BAR_MARGIN = 10
MAX_BAR_WIDTH = 80
DEFAULT_BAR_WIDTH = 40


@dataclass(frozen=True)
class ViewDimensions:
    width: int
    height: int


def bar_width(view_width: int) -> int:
    """Bar width for a terminal ``view_width`` columns wide, never below 1."""
    return max(min(view_width - BAR_MARGIN, MAX_BAR_WIDTH), 1)


def percent_complete(remaining: timedelta, total: timedelta) -> float:
    """Fill fraction ``1 - remaining/total`` clamped to [0, 1]; 1.0 for a zero total."""
    if total <= timedelta(0):
        return 1.0
    return min(max(1.0 - remaining / total, 0.0), 1.0)


def time_label(remaining: timedelta, total: timedelta) -> str:
    return f"{format_clock(remaining)} / {format_clock(total)}"


def progress_bar(remaining: timedelta, total: timedelta, width: int) -> ProgressBar:
    return ProgressBar(
        total=1.0, completed=percent_complete(remaining, total), width=width
    )


def render_frame(
    remaining: timedelta, total: timedelta, width: int = DEFAULT_BAR_WIDTH
) -> RenderableType:
    """Build the frame for the given state. Pure: no terminal access."""
    body = Group(
        Align.center(Text(time_label(remaining, total))),
        Align.center(progress_bar(remaining, total, width)),
    )
    return Constrain(
        Align.center(body, vertical="middle", height=CANVAS_HEIGHT),
        width=CANVAS_WIDTH,
    )
