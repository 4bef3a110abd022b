"""Base exception classes for the library."""
from typing import Any, Dict, Optional


class ConfigweaveError(Exception):
    """Base exception for all configweave errors.

    Errors raised while loading or navigating a settings tree say where
    they happened: the file being read and/or the key path being used.
    Both are optional and only appear in ``to_dict`` when known.

    Args:
        message: Human-readable error message
        error_code: Machine-readable code; defaults to the class's ``default_code``
        details: Extra context (line/column, encoding, ...)
        original: Wrapped exception, if any
        config_file: File the error relates to
        key_path: Dotted key path the error relates to
    """

    default_code = "CONFIGWEAVE_ERROR"

    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
        original: Optional[Exception] = None,
        config_file: Optional[str] = None,
        key_path: Any = None,
    ):
        super().__init__(message)
        self.message = message
        self.error_code = error_code or self.default_code
        self.details = details or {}
        self.original = original
        self.config_file = config_file
        self.key_path = key_path

    def __str__(self) -> str:
        text = f"[{self.error_code}] {self.message}"
        if self.original is not None:
            text += f" (caused by: {type(self.original).__name__}: {self.original})"
        if self.config_file:
            text += f" | Config: {self.config_file}"
        return text

    def to_dict(self) -> Dict[str, Any]:
        """Describe the error as a flat dict for structured log entries."""
        data: Dict[str, Any] = {
            "error_code": self.error_code,
            "message": self.message,
            "details": self.details,
            "exception_type": type(self).__name__,
        }
        if self.config_file is not None:
            data["config_file"] = self.config_file
        if self.key_path is not None:
            data["key_path"] = self.key_path
        return data
