"""Custom exceptions for the library."""

from configweave.exceptions.base import ConfigweaveError

from configweave.exceptions.config import (
    ConfigError,
    ConfigNotFoundError,
    ConfigParseError,
    ConfigReadError,
    InvalidKeyPathError,
)

__all__ = [
    # Base exceptions
    "ConfigweaveError",
    # Configuration exceptions
    "ConfigError",
    "ConfigNotFoundError",
    "ConfigParseError",
    "ConfigReadError",
    "InvalidKeyPathError",
]
