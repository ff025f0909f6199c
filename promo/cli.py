"""Command-line entry point: ``promo <duration>``."""

from __future__ import annotations

import argparse
import logging
import re
import sys
from pathlib import Path
from typing import NoReturn

from rich.console import Console

from promo import __version__
from promo.config import config_path, load_config
from promo.countdown import Countdown
from promo.duration import parse_duration
from promo.program import Program
from promo.terminal import Terminal
from promo.types import ParseError, PromoError, UsageError

logger = logging.getLogger(__name__)

USAGE = "Usage: promo <duration>"

# A duration with a leading sign, which argparse would take for an option.
_SIGNED_DURATION = re.compile(r"[+-][\d.]")


class _ArgumentParser(argparse.ArgumentParser):
    def error(self, message: str) -> NoReturn:
        raise UsageError(f"{USAGE}\n{self.prog}: error: {message}")


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse the command line. Bad arguments raise UsageError.

    Extra positional arguments are ignored. A signed duration such as
    ``-5m`` is taken as the duration when no unsigned one is given.
    """
    argv = list(sys.argv[1:] if argv is None else argv)
    signed = next((arg for arg in argv if _SIGNED_DURATION.match(arg)), None)
    if signed is not None:
        argv.remove(signed)

    p = _ArgumentParser(
        prog="promo",
        description="Terminal countdown timer with a progress bar.",
        epilog="Durations look like 25m, 90s, 1h30m or 1.5h.",
    )
    # Optional here so a missing duration gets promo's own usage line and exit code.
    p.add_argument("duration", nargs="?", help="how long to count down")
    p.add_argument(
        "--config",
        type=Path,
        default=None,
        help="config file to read instead of ~/.config/promo/config.yaml",
    )
    p.add_argument("-v", "--verbose", action="store_true", help="enable debug logging")
    p.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    args, extra = p.parse_known_args(argv)
    unknown = [arg for arg in extra if arg.startswith("-") and arg != "-"]
    if unknown:
        p.error(f"unrecognized arguments: {' '.join(unknown)}")
    if args.duration is None:
        args.duration = signed
    elif signed is not None:
        extra.append(signed)
    args.ignored = extra
    return args


def build_program(args: argparse.Namespace) -> Program:
    """Parse the duration and load the config. Raises PromoError subclasses."""
    if not args.duration:
        raise UsageError(USAGE)
    try:
        duration = parse_duration(args.duration)
    except ParseError as exc:
        raise ParseError(exc.text, f"Invalid duration: {exc}") from exc

    path = args.config if args.config is not None else config_path()
    config = load_config(path)
    logger.debug("counting down %s, sound_path=%r", duration, config.sound_path)
    return Program(Countdown(duration), config)


def main(argv: list[str] | None = None) -> int:
    try:
        args = parse_args(argv)
    except UsageError as exc:
        print(exc)
        return 1
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s: %(message)s",
    )
    if args.ignored:
        logger.debug("ignoring extra arguments: %s", " ".join(args.ignored))
    try:
        program = build_program(args)
        program.run(Terminal(), Console())
    except PromoError as exc:
        print(exc)
        return 1
    except KeyboardInterrupt:
        logger.debug("interrupted outside the event loop")
    return 0
