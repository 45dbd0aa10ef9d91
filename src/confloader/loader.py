"""Entry points: load a configuration file or an in-memory document."""

from __future__ import annotations

import logging
import os
import pathlib

from confloader.config import Config
from confloader.decoders import ConfigFormat, decode, format_for, parse_format
from confloader.env import EnvLookup
from confloader.errors import ReadError
from confloader.flatten import flatten

__all__ = ["load", "loads"]

logger = logging.getLogger(__name__)


def load(filename: str | os.PathLike[str], lookup: EnvLookup | None = None) -> Config:
    """Load a JSON or YAML file into a flattened :class:`Config`.

    The decoder is chosen from the extension: ``.json`` for JSON, ``.yml``
    or ``.yaml`` for YAML. ``$NAME`` and ``${NAME}`` string values are
    replaced with environment variables resolved through ``lookup``
    (``os.environ.get`` by default).

    Example::

        config = load("service.yaml")
        port = config.get_int("server.port")
        timeout = config.get_duration("server.timeout")

    Raises:
        ReadError: The file is missing or unreadable.
        UnsupportedFormatError: The extension is not supported.
        ParseError: The document is empty or malformed.
        TypeMismatchError: The document contains an array of mixed kinds.
    """
    path = pathlib.Path(filename)
    try:
        content = path.read_bytes()
    except OSError as exc:
        raise ReadError(file_path=str(filename), reason=exc.strerror or str(exc), cause=exc) from exc

    fmt = format_for(path)
    config = _build(content, fmt, lookup)
    logger.debug(f"Loaded {len(config)} keys from '{filename}' as {fmt.value}")
    return config


def loads(data: str | bytes, fmt: str | ConfigFormat, lookup: EnvLookup | None = None) -> Config:
    """Load an in-memory JSON or YAML document.

    Args:
        data: The document text.
        fmt: ``"json"``, ``"yaml"`` or ``"yml"``, or a :class:`ConfigFormat`.
        lookup: Environment lookup for ``$NAME`` placeholders.

    Raises:
        UnsupportedFormatError: ``fmt`` is not a known format.
        ParseError: The document is empty or malformed.
        TypeMismatchError: The document contains an array of mixed kinds.
    """
    return _build(data, parse_format(fmt), lookup)


def _build(data: str | bytes, fmt: ConfigFormat, lookup: EnvLookup | None) -> Config:
    return Config(flatten(decode(data, fmt), lookup=lookup))
