"""Format selection and raw decoding of JSON and YAML documents."""

from __future__ import annotations

import json
import math
import os
from enum import Enum
from pathlib import Path
from typing import Any

import yaml

from confloader.errors import ParseError, UnsupportedFormatError

__all__ = ["ConfigFormat", "format_for", "parse_format", "decode"]


class ConfigFormat(str, Enum):
    """Supported document formats."""

    JSON = "json"
    YAML = "yaml"


_TOO_DEEP = "document is nested too deeply"

_EXTENSIONS: dict[str, ConfigFormat] = {
    ".json": ConfigFormat.JSON,
    ".yml": ConfigFormat.YAML,
    ".yaml": ConfigFormat.YAML,
}


class _YamlLoader(yaml.SafeLoader):
    """SafeLoader that keeps timestamps as plain strings."""


_YamlLoader.add_constructor("tag:yaml.org,2002:timestamp", _YamlLoader.construct_yaml_str)


def format_for(filename: str | os.PathLike[str]) -> ConfigFormat:
    """Pick the decoder for a file from its extension (case-insensitive).

    Raises:
        UnsupportedFormatError: The extension is not .json, .yml or .yaml.
    """
    suffix = Path(filename).suffix
    try:
        return _EXTENSIONS[suffix.lower()]
    except KeyError:
        raise UnsupportedFormatError(fmt=suffix or str(filename)) from None


def parse_format(fmt: str | ConfigFormat) -> ConfigFormat:
    """Normalize a format name such as ``"json"``, ``"yml"`` or ``".yaml"``."""
    if isinstance(fmt, ConfigFormat):
        return fmt
    name = fmt.lower()
    if not name.startswith("."):
        name = "." + name
    if name not in _EXTENSIONS:
        raise UnsupportedFormatError(fmt=fmt)
    return _EXTENSIONS[name]


def decode(data: str | bytes, fmt: ConfigFormat) -> Any:
    """Decode a document into plain dicts, lists and scalars.

    Empty or whitespace-only input is rejected rather than read as an empty
    document. An explicit YAML null document decodes to ``None``.

    Raises:
        ParseError: The input is empty, not UTF-8, malformed, or nested
            deeper than the interpreter recursion limit.
    """
    if isinstance(data, bytes):
        try:
            text = data.decode("utf-8")
        except UnicodeDecodeError as exc:
            raise ParseError(fmt=fmt.value, reason=f"not valid UTF-8: {exc}", cause=exc) from exc
    else:
        text = data

    if not text.strip():
        raise ParseError(fmt=fmt.value, reason="document is empty")

    if fmt is ConfigFormat.JSON:
        try:
            return json.loads(text, parse_constant=_reject_constant, parse_float=_parse_float)
        except ValueError as exc:
            raise ParseError(fmt=fmt.value, reason=str(exc), cause=exc) from exc
        except RecursionError as exc:
            raise ParseError(fmt=fmt.value, reason=_TOO_DEEP, cause=exc) from exc

    try:
        return yaml.load(text, Loader=_YamlLoader)  # noqa: S506
    except yaml.YAMLError as exc:
        raise ParseError(fmt=fmt.value, reason=str(exc), cause=exc) from exc
    except RecursionError as exc:
        raise ParseError(fmt=fmt.value, reason=_TOO_DEEP, cause=exc) from exc


def _reject_constant(name: str) -> float:
    raise ValueError(f"{name} is not a valid JSON number")


def _parse_float(text: str) -> float:
    value = float(text)
    if math.isinf(value):
        raise ValueError(f"number {text} is out of range")
    return value
