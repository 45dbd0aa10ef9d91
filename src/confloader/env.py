"""Environment variable substitution for string values."""

from __future__ import annotations

import logging
import os
from typing import Callable, Optional

__all__ = ["EnvLookup", "substitute_env"]

logger = logging.getLogger(__name__)

EnvLookup = Callable[[str], Optional[str]]

_PLACEHOLDER_CHARS = str.maketrans("", "", "${}")


def substitute_env(value: str, lookup: EnvLookup | None = None) -> str:
    """Replace a ``$NAME`` or ``${NAME}`` placeholder with the variable's value.

    Only strings starting with ``$`` are placeholders. Every ``$``, ``{`` and
    ``}`` in such a string is removed to obtain the variable name, so
    ``"${A}_${B}"`` looks up ``"A_B"``. An unset variable resolves to ``""``.

    Args:
        value: The raw string from the document.
        lookup: Resolves a variable name to its value or None. Defaults to
            ``os.environ.get``.

    Returns:
        The substituted value, or ``value`` unchanged if it is not a placeholder.
    """
    if not value.startswith("$"):
        return value
    name = value.translate(_PLACEHOLDER_CHARS)
    resolved = (lookup or os.environ.get)(name)
    if resolved is None:
        logger.debug(f"Environment variable '{name}' is not set, substituting empty string")
        return ""
    return resolved
