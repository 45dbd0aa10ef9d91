"""Parsing of compound duration strings such as ``"1h30m"`` or ``"250ms"``."""

from __future__ import annotations

import re
from datetime import timedelta
from fractions import Fraction

__all__ = ["parse_duration", "to_timedelta", "NANOSECOND", "MICROSECOND", "MILLISECOND", "SECOND", "MINUTE", "HOUR"]

NANOSECOND = 1
MICROSECOND = 1000 * NANOSECOND
MILLISECOND = 1000 * MICROSECOND
SECOND = 1000 * MILLISECOND
MINUTE = 60 * SECOND
HOUR = 60 * MINUTE

_UNITS: dict[str, int] = {
    "ns": NANOSECOND,
    "us": MICROSECOND,
    "µs": MICROSECOND,  # micro sign
    "μs": MICROSECOND,  # Greek letter mu
    "ms": MILLISECOND,
    "s": SECOND,
    "m": MINUTE,
    "h": HOUR,
}

_MAX_NANOSECONDS = (1 << 63) - 1

# <integer part>[.<fraction>]<unit>; the unit runs until the next digit or dot.
_COMPONENT = re.compile(r"([0-9]*)(?:\.([0-9]*))?([^0-9.]*)")


def parse_duration(text: str) -> int:
    """Parse a duration string into a signed number of nanoseconds.

    A duration is an optional sign followed by one or more decimal numbers,
    each with an optional fraction and a mandatory unit: ``"300ms"``,
    ``"-1.5h"``, ``"2h45m"``. Valid units are ``ns``, ``us`` (or ``µs``),
    ``ms``, ``s``, ``m`` and ``h``. The bare string ``"0"`` is accepted.

    Raises:
        ValueError: If ``text`` is not a valid duration or overflows a
            signed 64-bit nanosecond count.
    """
    s = text
    negative = False
    if s and s[0] in "+-":
        negative = s[0] == "-"
        s = s[1:]
    if s == "0":
        return 0
    if not s:
        raise ValueError(f"invalid duration {text!r}")

    total = 0
    pos = 0
    while pos < len(s):
        match = _COMPONENT.match(s, pos)
        whole, fraction, unit = match.group(1), match.group(2), match.group(3)
        if not whole and not fraction:
            raise ValueError(f"invalid duration {text!r}")
        if not unit:
            raise ValueError(f"missing unit in duration {text!r}")
        if unit not in _UNITS:
            raise ValueError(f"unknown unit {unit!r} in duration {text!r}")

        scale = _UNITS[unit]
        value = int(whole or "0") * scale
        if fraction:
            value += int(fraction) * scale // 10 ** len(fraction)
        total += value
        if total > _MAX_NANOSECONDS + 1:
            raise ValueError(f"invalid duration {text!r}")
        pos = match.end()

    if negative:
        return -total
    if total > _MAX_NANOSECONDS:
        raise ValueError(f"invalid duration {text!r}")
    return total


def to_timedelta(nanoseconds: int) -> timedelta:
    """Convert nanoseconds to a timedelta, rounding to the nearest microsecond."""
    return timedelta(microseconds=round(Fraction(nanoseconds, MICROSECOND)))
