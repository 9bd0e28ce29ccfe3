"""Error hierarchy for typescan."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any

__all__ = [
    "TypeScanError",
    "InvalidArgumentError",
    "ModuleLoadError",
    "DirectoryNotFoundError",
    "ConfigNotFoundError",
    "ConfigError",
    "ErrorCodes",
]


class TypeScanError(Exception):
    """Base error for all typescan errors."""

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


class InvalidArgumentError(TypeScanError):
    """Raised when an argument is missing or contains missing entries."""

    def __init__(self, argument: str, message: str | None = None, **kwargs: Any) -> None:
        super().__init__(
            code="INVALID_ARGUMENT",
            message=message or f"Argument must not be None: {argument}",
            details={"argument": argument},
            **kwargs,
        )

    @property
    def argument(self) -> str:
        """Name of the offending argument."""
        return self.details["argument"]


class ModuleLoadError(TypeScanError):
    """Raised when a file cannot be loaded as a Python module."""

    def __init__(self, file_path: str, reason: str, **kwargs: Any) -> None:
        super().__init__(
            code="MODULE_LOAD_ERROR",
            message=f"Failed to load module from '{file_path}': {reason}",
            details={"file_path": file_path, "reason": reason},
            **kwargs,
        )

    @property
    def file_path(self) -> str:
        return self.details["file_path"]


class DirectoryNotFoundError(TypeScanError):
    """Raised when a directory to scan for modules does not exist."""

    def __init__(self, directory: str, **kwargs: Any) -> None:
        super().__init__(
            code="DIRECTORY_NOT_FOUND",
            message=f"Directory not found: {directory}",
            details={"directory": directory},
            **kwargs,
        )


class ConfigNotFoundError(TypeScanError):
    """Raised when a configuration file cannot be found."""

    def __init__(self, config_path: str, **kwargs: Any) -> None:
        super().__init__(
            code="CONFIG_NOT_FOUND",
            message=f"Configuration file not found: {config_path}",
            details={"config_path": config_path},
            **kwargs,
        )


class ConfigError(TypeScanError):
    """Raised when configuration is invalid."""

    def __init__(self, message: str, **kwargs: Any) -> None:
        super().__init__(code="CONFIG_INVALID", message=message, **kwargs)


class ErrorCodes:
    """All typescan error codes as constants.

    Example:
        if error.code == ErrorCodes.MODULE_LOAD_ERROR:
            report_broken_plugin(error.details["file_path"])
    """

    INVALID_ARGUMENT = "INVALID_ARGUMENT"
    MODULE_LOAD_ERROR = "MODULE_LOAD_ERROR"
    DIRECTORY_NOT_FOUND = "DIRECTORY_NOT_FOUND"
    CONFIG_NOT_FOUND = "CONFIG_NOT_FOUND"
    CONFIG_INVALID = "CONFIG_INVALID"

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError("ErrorCodes is immutable")
