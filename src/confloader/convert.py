"""Coercion rules between stored value kinds and requested kinds.

Every function here is total: a value with no rule for the requested kind,
including a missing value (``None``), converts to that kind's zero value.

=============  ===================  ===================  =================
stored         string               float                bool
=============  ===================  ===================  =================
string         identity             0.0                  False
number         shortest decimal     identity             ``!= 0``
bool           ``"true"/"false"``   1.0 / 0.0            identity
string array   joined with ``,``    0.0                  False
number array   joined with ``,``    first element        first ``!= 0``
bool array     joined with ``,``    first, 1.0 / 0.0     first element
=============  ===================  ===================  =================
"""

from __future__ import annotations

import math
from decimal import Decimal
from typing import Any

from confloader.duration import parse_duration
from confloader.types import ValueKind, kind_of

__all__ = [
    "format_number",
    "format_bool",
    "to_string",
    "to_float",
    "to_int",
    "to_bool",
    "to_duration",
    "to_string_list",
    "to_float_list",
    "to_int_list",
    "to_bool_list",
    "to_duration_list",
]

ARRAY_SEPARATOR = ","


def format_number(value: float) -> str:
    """Format a number with the fewest digits that read back to the same float.

    Never uses exponent notation and drops a zero fraction, so ``42.0``
    gives ``"42"`` and ``1e21`` gives ``"1000000000000000000000"``.
    """
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "+Inf" if value > 0 else "-Inf"
    text = format(Decimal(repr(float(value))), "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text


def format_bool(value: bool) -> str:
    return "true" if value else "false"


def to_string(value: Any) -> str:
    kind = kind_of(value)
    if kind is ValueKind.STRING:
        return value
    if kind is ValueKind.NUMBER:
        return format_number(value)
    if kind is ValueKind.BOOL:
        return format_bool(value)
    if kind is ValueKind.STRING_ARRAY:
        return ARRAY_SEPARATOR.join(value)
    if kind is ValueKind.NUMBER_ARRAY:
        return ARRAY_SEPARATOR.join(format_number(v) for v in value)
    if kind is ValueKind.BOOL_ARRAY:
        return ARRAY_SEPARATOR.join(format_bool(v) for v in value)
    return ""


def to_float(value: Any) -> float:
    kind = kind_of(value)
    if kind is ValueKind.NUMBER:
        return float(value)
    if kind is ValueKind.BOOL:
        return 1.0 if value else 0.0
    if kind is ValueKind.NUMBER_ARRAY:
        return float(value[0])
    if kind is ValueKind.BOOL_ARRAY:
        return 1.0 if value[0] else 0.0
    return 0.0


def to_int(value: Any) -> int:
    """Truncate :func:`to_float` toward zero. NaN and infinities give 0."""
    return _truncate(to_float(value))


def to_bool(value: Any) -> bool:
    kind = kind_of(value)
    if kind is ValueKind.BOOL:
        return value
    if kind is ValueKind.NUMBER:
        return value != 0
    if kind is ValueKind.BOOL_ARRAY:
        return value[0]
    if kind is ValueKind.NUMBER_ARRAY:
        return value[0] != 0
    return False


def to_duration(value: Any) -> int:
    """Parse :func:`to_string` as a duration in nanoseconds; unparsable text gives 0."""
    return _duration_or_zero(to_string(value))


def to_string_list(value: Any) -> list[str]:
    kind = kind_of(value)
    if kind is ValueKind.STRING_ARRAY:
        return list(value)
    if kind is ValueKind.NUMBER_ARRAY:
        return [format_number(v) for v in value]
    if kind is ValueKind.BOOL_ARRAY:
        return [format_bool(v) for v in value]
    if kind is ValueKind.STRING:
        return [value]
    if kind is ValueKind.NUMBER:
        return [format_number(value)]
    if kind is ValueKind.BOOL:
        return [format_bool(value)]
    return []


def to_float_list(value: Any) -> list[float]:
    kind = kind_of(value)
    if kind is ValueKind.NUMBER_ARRAY:
        return [float(v) for v in value]
    if kind is ValueKind.BOOL_ARRAY:
        return [1.0 if v else 0.0 for v in value]
    if kind is ValueKind.NUMBER:
        return [float(value)]
    if kind is ValueKind.BOOL:
        return [1.0 if value else 0.0]
    return []


def to_int_list(value: Any) -> list[int]:
    return [_truncate(v) for v in to_float_list(value)]


def to_bool_list(value: Any) -> list[bool]:
    kind = kind_of(value)
    if kind is ValueKind.BOOL_ARRAY:
        return list(value)
    if kind is ValueKind.NUMBER_ARRAY:
        return [v != 0 for v in value]
    if kind is ValueKind.BOOL:
        return [value]
    if kind is ValueKind.NUMBER:
        return [value != 0]
    return []


def to_duration_list(value: Any) -> list[int]:
    """Parse each element of :func:`to_string_list`; bad elements become zero."""
    return [_duration_or_zero(v) for v in to_string_list(value)]


def _truncate(value: float) -> int:
    if not math.isfinite(value):
        return 0
    return int(value)


def _duration_or_zero(text: str) -> int:
    try:
        return parse_duration(text)
    except ValueError:
        return 0
