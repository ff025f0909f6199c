"""Duration strings such as ``"25m"``, ``"90s"`` or ``"1h30m"``."""

from __future__ import annotations

import re
from datetime import timedelta

from promo.types import ParseError

# Unit suffix -> length in seconds.
_UNITS: dict[str, float] = {
    "ns": 1e-9,
    "us": 1e-6,
    "µs": 1e-6,  # U+00B5 micro sign
    "μs": 1e-6,  # U+03BC greek small letter mu
    "ms": 1e-3,
    "s": 1.0,
    "m": 60.0,
    "h": 3600.0,
}

_NUMBER_RE = re.compile(r"(\d*)(?:\.(\d*))?")
_UNIT_RE = re.compile(r"[^\d.]*")


def parse_duration(text: str) -> timedelta:
    """Parse a signed sequence of ``<number><unit>`` components.

    Each component is a decimal number with an optional fraction followed by
    one of ``ns``, ``us`` (or ``µs``), ``ms``, ``s``, ``m``, ``h``.  The bare
    string ``"0"`` is accepted without a unit.

    Raises ``ParseError`` for empty input, a missing or unknown unit, or a
    component without digits.
    """
    s = text
    negative = False
    if s and s[0] in "+-":
        negative = s[0] == "-"
        s = s[1:]
    if s == "0":
        return timedelta(0)
    if not s:
        raise ParseError(text, f'invalid duration "{text}"')

    seconds = 0.0
    pos = 0
    while pos < len(s):
        number = _NUMBER_RE.match(s, pos)
        whole, frac = number.group(1), number.group(2)
        if not whole and not frac:
            raise ParseError(text, f'invalid duration "{text}"')
        pos = number.end()

        unit = _UNIT_RE.match(s, pos).group(0)
        if not unit:
            raise ParseError(text, f'missing unit in duration "{text}"')
        if unit not in _UNITS:
            raise ParseError(text, f'unknown unit "{unit}" in duration "{text}"')
        pos += len(unit)

        value = float(f"{whole or '0'}.{frac or '0'}")
        seconds += value * _UNITS[unit]

    return timedelta(seconds=-seconds if negative else seconds)


def format_clock(duration: timedelta) -> str:
    """Format as ``MM:SS``. Minutes are not wrapped at 60; fractions are dropped."""
    total = int(duration.total_seconds())
    minutes = abs(total) // 60
    seconds = abs(total) % 60
    sign = "-" if total < 0 else ""
    return f"{sign}{minutes:02d}:{seconds:02d}"
