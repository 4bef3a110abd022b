"""Configuration-related exceptions."""
from typing import Any, Dict, Optional

from configweave.exceptions.base import ConfigweaveError


class ConfigError(ConfigweaveError):
    """Base exception for configuration errors.

    Args:
        message: Human-readable error message
        config_file: Path to config file
        error_code: Machine-readable error code
        details: Additional error context
        original: Underlying exception, if any
    """

    default_code = "CONFIG_ERROR"

    def __init__(
        self,
        message: str,
        config_file: Optional[str] = None,
        error_code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
        original: Optional[Exception] = None,
    ):
        super().__init__(
            message,
            error_code=error_code,
            details=details,
            original=original,
            config_file=config_file,
        )


class InvalidKeyPathError(ConfigError, ValueError):
    """Key path is empty, has an empty segment, or is not a string."""

    default_code = "INVALID_KEY_PATH"

    def __init__(
        self,
        message: str = "Invalid key path",
        key_path: Any = None,
    ):
        super().__init__(message)
        self.key_path = key_path


class ConfigNotFoundError(ConfigError):
    """Configuration file not found."""

    default_code = "CONFIG_NOT_FOUND"

    def __init__(
        self,
        message: str = "Configuration file not found",
        config_file: Optional[str] = None,
        original_error: Optional[Exception] = None,
    ):
        super().__init__(message, config_file=config_file, original=original_error)
        self.original_error = original_error


class ConfigReadError(ConfigError):
    """Configuration file exists but could not be read."""

    default_code = "CONFIG_READ_FAILED"

    def __init__(
        self,
        message: str = "Failed to read config file",
        config_file: Optional[str] = None,
        original_error: Optional[Exception] = None,
    ):
        super().__init__(message, config_file=config_file, original=original_error)
        self.original_error = original_error


class ConfigParseError(ConfigError):
    """Failed to parse configuration file."""

    default_code = "CONFIG_PARSE_FAILED"

    def __init__(
        self,
        message: str = "Failed to parse config file",
        config_file: Optional[str] = None,
        line_number: Optional[int] = None,
        column_number: Optional[int] = None,
        original_error: Optional[Exception] = None,
    ):
        details = {}
        if line_number is not None:
            details["line"] = line_number
        if column_number is not None:
            details["column"] = column_number
        super().__init__(
            message,
            config_file=config_file,
            details=details,
            original=original_error,
        )
        self.line_number = line_number
        self.column_number = column_number
        self.original_error = original_error
