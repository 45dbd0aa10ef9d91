"""Flattened configuration with typed, coercing accessors."""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from typing import Any

from confloader import convert
from confloader.types import ConfigValue

__all__ = ["Config"]


class Config(Mapping[str, ConfigValue]):
    """Read-only mapping from dotted path to stored value.

    Keys address nested fields and array elements, e.g. ``"server.port"`` or
    ``"server.hosts.1"``. The typed accessors never raise: a missing key, or a
    value with no conversion to the requested kind, returns that kind's zero
    value (``""``, ``0.0``, ``0``, ``False`` or ``[]``). Durations are integer
    nanoseconds, so their zero value is ``0``.

    Thread safety:
        Immutable after construction; safe to share between threads.
    """

    def __init__(self, data: Mapping[str, ConfigValue] | None = None) -> None:
        self._data: dict[str, ConfigValue] = dict(data or {})

    def __getitem__(self, key: str) -> ConfigValue:
        return self._data[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __repr__(self) -> str:
        return f"Config({self._data!r})"

    def get(self, key: str, default: Any = None) -> Any:
        """Get the raw stored value at a dotted path."""
        return self._data.get(key, default)

    def get_string(self, key: str) -> str:
        """Get a string. Numbers use their shortest decimal form, bools are
        ``"true"``/``"false"`` and arrays are joined with ``,``."""
        return convert.to_string(self.get(key))

    def get_float(self, key: str) -> float:
        """Get a float. Bools give 1.0/0.0; arrays give their first element."""
        return convert.to_float(self.get(key))

    def get_int(self, key: str) -> int:
        """Get :meth:`get_float` truncated toward zero."""
        return convert.to_int(self.get(key))

    def get_bool(self, key: str) -> bool:
        """Get a bool. Numbers are true when non-zero; arrays give their first element."""
        return convert.to_bool(self.get(key))

    def get_duration(self, key: str) -> int:
        """Parse :meth:`get_string` as a duration such as ``"1h30m"``, in nanoseconds.

        Use :func:`confloader.duration.to_timedelta` to get a ``timedelta``.
        """
        return convert.to_duration(self.get(key))

    def get_string_array(self, key: str) -> list[str]:
        """Get a list of strings. Number and bool arrays are formatted per element; a scalar becomes a one-element list."""
        return convert.to_string_list(self.get(key))

    def get_float_array(self, key: str) -> list[float]:
        """Get a list of floats. Bools become 1.0/0.0; a number or bool becomes a one-element list; strings give ``[]``."""
        return convert.to_float_list(self.get(key))

    def get_int_array(self, key: str) -> list[int]:
        """Get :meth:`get_float_array` with each element truncated toward zero."""
        return convert.to_int_list(self.get(key))

    def get_bool_array(self, key: str) -> list[bool]:
        """Get a list of bools. Numbers are true when non-zero; a number or bool becomes a one-element list; strings give ``[]``."""
        return convert.to_bool_list(self.get(key))

    def get_duration_array(self, key: str) -> list[int]:
        """Parse each element of :meth:`get_string_array` as nanoseconds; unparsable ones are zero."""
        return convert.to_duration_list(self.get(key))
