"""confloader - JSON/YAML configuration files flattened to dotted-path keys."""

from __future__ import annotations

# Loading
from confloader.loader import load, loads
from confloader.decoders import ConfigFormat

# Config
from confloader.config import Config
from confloader.types import ConfigValue, ValueKind

# Building blocks
from confloader.flatten import flatten
from confloader.env import substitute_env
from confloader.duration import parse_duration

# Errors
from confloader.errors import (
    ConfigLoaderError,
    ErrorCodes,
    ParseError,
    ReadError,
    TypeMismatchError,
    UnsupportedFormatError,
)

__version__ = "0.1.0"

__all__ = [
    # Loading
    "load",
    "loads",
    "ConfigFormat",
    # Config
    "Config",
    "ConfigValue",
    "ValueKind",
    # Building blocks
    "flatten",
    "substitute_env",
    "parse_duration",
    # Errors
    "ErrorCodes",
    "ConfigLoaderError",
    "ReadError",
    "UnsupportedFormatError",
    "ParseError",
    "TypeMismatchError",
]
