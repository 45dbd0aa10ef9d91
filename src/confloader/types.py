"""Value kinds stored in a flattened configuration."""

from __future__ import annotations

from enum import Enum
from typing import Any, Union

__all__ = ["ValueKind", "ConfigValue", "FlatConfig", "kind_of", "scalar_kind", "array_kind"]

ConfigValue = Union[str, float, bool, tuple[str, ...], tuple[float, ...], tuple[bool, ...]]

FlatConfig = dict[str, ConfigValue]


class ValueKind(str, Enum):
    """The closed set of kinds a flattened value can have."""

    STRING = "string"
    NUMBER = "number"
    BOOL = "bool"
    STRING_ARRAY = "string_array"
    NUMBER_ARRAY = "number_array"
    BOOL_ARRAY = "bool_array"


_ARRAY_KINDS = {
    ValueKind.STRING: ValueKind.STRING_ARRAY,
    ValueKind.NUMBER: ValueKind.NUMBER_ARRAY,
    ValueKind.BOOL: ValueKind.BOOL_ARRAY,
}


def scalar_kind(value: Any) -> ValueKind | None:
    """Return the scalar kind of a decoded value, or None for anything else.

    ``bool`` is checked before numbers because it subclasses ``int``.
    """
    if isinstance(value, bool):
        return ValueKind.BOOL
    if isinstance(value, (int, float)):
        return ValueKind.NUMBER
    if isinstance(value, str):
        return ValueKind.STRING
    return None


def array_kind(element_kind: ValueKind) -> ValueKind:
    """Map a scalar kind to the matching array kind."""
    return _ARRAY_KINDS[element_kind]


def kind_of(value: Any) -> ValueKind | None:
    """Classify a stored value. Returns None for values that are not ConfigValues.

    Empty and mixed-kind arrays have no kind.
    """
    if isinstance(value, (tuple, list)):
        if not value:
            return None
        element = scalar_kind(value[0])
        if element is None or any(scalar_kind(v) is not element for v in value):
            return None
        return array_kind(element)
    return scalar_kind(value)
