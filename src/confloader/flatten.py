"""Flattening of decoded documents into dotted-path mappings."""

from __future__ import annotations

import logging
from typing import Any

from confloader.env import EnvLookup, substitute_env
from confloader.errors import TypeMismatchError
from confloader.types import ConfigValue, FlatConfig, ValueKind, scalar_kind

__all__ = ["flatten"]

logger = logging.getLogger(__name__)

SEPARATOR = "."

MAX_DEPTH = 512


def flatten(value: Any, prefix: str = "", lookup: EnvLookup | None = None) -> FlatConfig:
    """Flatten a decoded JSON/YAML tree into a single-level mapping.

    Mapping keys and zero-based sequence indices are joined with ``.`` to
    form each key. A sequence whose first element is a scalar is also stored
    whole under its own path, next to the per-element ``path.N`` keys; an
    empty sequence yields no key at all. ``None`` values are dropped with
    their key. String leaves go through environment substitution.

    Args:
        value: A value produced by the JSON or YAML decoder.
        prefix: The dotted path accumulated so far, ending with ``.`` below
            the root.
        lookup: Environment lookup passed to :func:`substitute_env`.

    Returns:
        A new dict from dotted path to stored value.

    Raises:
        TypeMismatchError: A sequence mixes scalar kinds, a mapping has a
            non-string key, an integer does not fit a 64-bit float, or the
            tree nests more than :data:`MAX_DEPTH` mappings and sequences.
    """
    try:
        return _flatten(value, prefix, lookup, 0)
    except RecursionError as exc:
        raise TypeMismatchError(
            path=_trim(prefix), expected=f"nesting depth at most {MAX_DEPTH}", actual="deeper", cause=exc
        ) from exc


def _flatten(value: Any, prefix: str, lookup: EnvLookup | None, depth: int) -> FlatConfig:
    fields: FlatConfig = {}

    if isinstance(value, (dict, list)) and depth >= MAX_DEPTH:
        raise TypeMismatchError(
            path=_trim(prefix), expected=f"nesting depth at most {MAX_DEPTH}", actual=f"depth {depth + 1}"
        )

    if isinstance(value, dict):
        for key, sub in value.items():
            if not isinstance(key, str):
                raise TypeMismatchError(
                    path=f"{prefix}{key}", expected="string key", actual=f"{type(key).__name__} key"
                )
            _merge(fields, _flatten(sub, f"{prefix}{key}{SEPARATOR}", lookup, depth + 1))
    elif isinstance(value, list):
        if value:
            whole = _whole_array(value, prefix, lookup)
            if whole is not None:
                fields[_trim(prefix)] = whole
        for index, element in enumerate(value):
            _merge(fields, _flatten(element, f"{prefix}{index}{SEPARATOR}", lookup, depth + 1))
    elif value is None:
        pass
    else:
        kind = scalar_kind(value)
        if kind is ValueKind.STRING:
            fields[_trim(prefix)] = substitute_env(value, lookup)
        elif kind is ValueKind.NUMBER:
            fields[_trim(prefix)] = _to_float(value, _trim(prefix))
        elif kind is ValueKind.BOOL:
            fields[_trim(prefix)] = value
        else:
            logger.debug(f"Skipping unsupported value of type {type(value).__name__} at '{_trim(prefix)}'")

    return fields


def _whole_array(values: list[Any], prefix: str, lookup: EnvLookup | None) -> ConfigValue | None:
    # The first element decides the array kind; all others must agree.
    kind = scalar_kind(values[0])
    if kind is None:
        return None

    for index, element in enumerate(values):
        if scalar_kind(element) is not kind:
            raise TypeMismatchError(
                path=f"{prefix}{index}",
                expected=kind.value,
                actual=_describe(element),
            )

    if kind is ValueKind.STRING:
        return tuple(substitute_env(element, lookup) for element in values)
    if kind is ValueKind.NUMBER:
        return tuple(_to_float(element, f"{prefix}{index}") for index, element in enumerate(values))
    return tuple(values)


def _merge(fields: FlatConfig, child: FlatConfig) -> None:
    for key, value in child.items():
        fields[_trim(key)] = value


def _trim(key: str) -> str:
    return key.rstrip(SEPARATOR)


def _to_float(value: int | float, path: str) -> float:
    try:
        return float(value)
    except OverflowError as exc:
        raise TypeMismatchError(
            path=path, expected="number within 64-bit float range", actual=str(value)[:32], cause=exc
        ) from exc


def _describe(value: Any) -> str:
    kind = scalar_kind(value)
    if kind is not None:
        return kind.value
    if value is None:
        return "null"
    if isinstance(value, dict):
        return "mapping"
    if isinstance(value, list):
        return "sequence"
    return type(value).__name__
