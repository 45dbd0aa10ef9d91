"""Error hierarchy for confloader.

Only loading can fail. The typed accessors on :class:`~confloader.config.Config`
never raise; they fall back to the zero value of the requested kind.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any

__all__ = [
    "ConfigLoaderError",
    "ReadError",
    "UnsupportedFormatError",
    "ParseError",
    "TypeMismatchError",
    "ErrorCodes",
]


class ConfigLoaderError(Exception):
    """Base error for all confloader errors."""

    def __init__(
        self,
        code: str,
        message: str,
        details: dict[str, Any] | None = None,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.message = message
        self.details: dict[str, Any] = details or {}
        self.cause = cause
        self.timestamp = datetime.now(timezone.utc).isoformat()

    def __str__(self) -> str:
        return f"[{self.code}] {self.message}"


class ReadError(ConfigLoaderError):
    """Raised when a configuration file cannot be opened or read."""

    def __init__(self, file_path: str, reason: str, **kwargs: Any) -> None:
        super().__init__(
            code="CONFIG_READ_ERROR",
            message=f"Cannot read configuration file '{file_path}': {reason}",
            details={"file_path": file_path, "reason": reason},
            **kwargs,
        )

    @property
    def file_path(self) -> str:
        """The path that could not be read."""
        return self.details["file_path"]


class UnsupportedFormatError(ConfigLoaderError):
    """Raised when the file extension is neither JSON nor YAML."""

    def __init__(self, fmt: str, **kwargs: Any) -> None:
        super().__init__(
            code="CONFIG_UNSUPPORTED_FORMAT",
            message=f"Unrecognized configuration format '{fmt}'. Expected .json, .yml or .yaml.",
            details={"format": fmt},
            **kwargs,
        )

    @property
    def format(self) -> str:
        """The rejected extension or format name."""
        return self.details["format"]


class ParseError(ConfigLoaderError):
    """Raised when a document is malformed or empty."""

    def __init__(self, fmt: str, reason: str, **kwargs: Any) -> None:
        super().__init__(
            code="CONFIG_PARSE_ERROR",
            message=f"Invalid {fmt.upper()} document: {reason}",
            details={"format": fmt, "reason": reason},
            **kwargs,
        )


class TypeMismatchError(ConfigLoaderError):
    """Raised when a value cannot be flattened, e.g. an array of mixed scalar kinds."""

    def __init__(self, path: str, expected: str, actual: str, **kwargs: Any) -> None:
        super().__init__(
            code="CONFIG_TYPE_MISMATCH",
            message=f"Type mismatch at '{path}': expected {expected}, got {actual}",
            details={"path": path, "expected": expected, "actual": actual},
            **kwargs,
        )

    @property
    def path(self) -> str:
        """Dotted path of the offending value."""
        return self.details["path"]


class ErrorCodes:
    """All confloader error codes as constants.

    Example:
        if error.code == ErrorCodes.CONFIG_READ_ERROR:
            use_defaults()
    """

    CONFIG_READ_ERROR = "CONFIG_READ_ERROR"
    CONFIG_UNSUPPORTED_FORMAT = "CONFIG_UNSUPPORTED_FORMAT"
    CONFIG_PARSE_ERROR = "CONFIG_PARSE_ERROR"
    CONFIG_TYPE_MISMATCH = "CONFIG_TYPE_MISMATCH"

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError("ErrorCodes is immutable")
