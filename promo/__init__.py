"""promo - a terminal countdown timer."""

__version__ = "0.1.0"

from promo.config import Config, config_path, load_config
from promo.countdown import Countdown
from promo.duration import format_clock, parse_duration
from promo.events import KeyPress, Resize, StartStop, Tick, Timeout
from promo.program import Program
from promo.render import render_frame
from promo.types import (
    ConfigError,
    HomeDirError,
    ParseError,
    PromoError,
    RenderLoopError,
    UsageError,
)

__all__ = [
    "Program",
    "Countdown",
    "Config",
    "config_path",
    "load_config",
    "parse_duration",
    "format_clock",
    "render_frame",
    "Tick",
    "Timeout",
    "KeyPress",
    "Resize",
    "StartStop",
    "PromoError",
    "UsageError",
    "ParseError",
    "HomeDirError",
    "ConfigError",
    "RenderLoopError",
]
