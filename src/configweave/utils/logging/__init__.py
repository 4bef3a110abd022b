"""Structured JSON logging utility."""

from configweave.utils.logging.context import get_context, log_context  # noqa: F401
from configweave.utils.logging.formatters import StructuredJSONFormatter  # noqa: F401
from configweave.utils.logging.factory import (  # noqa: F401
    configure_logging,
    disable_logging,
    get_logger,
)

__all__ = [
    # Context management
    "get_context",
    "log_context",
    # Formatters
    "StructuredJSONFormatter",
    # Factory
    "configure_logging",
    "disable_logging",
    "get_logger",
]
