"""Structured JSON log formatters."""
import json
import logging
import traceback
from datetime import datetime, timezone
from typing import Any, Dict

from configweave.utils.logging.context import get_context


# Key fragments whose values never reach the log
_SENSITIVE_PATTERNS = (
    "api_key",
    "password",
    "passwd",
    "token",
    "secret",
    "authorization",
    "bearer",
)

# Attributes every LogRecord has; anything else came in through extra=
_RECORD_ATTRIBUTES = frozenset(
    vars(logging.LogRecord("", logging.INFO, "", 0, "", None, None))
) | {"message", "asctime"}


def _redact_sensitive(data: Any) -> Any:
    """Replace values under sensitive-looking keys with [REDACTED], recursively."""
    if isinstance(data, dict):
        return {
            key: "[REDACTED]"
            if any(pattern in str(key).lower() for pattern in _SENSITIVE_PATTERNS)
            else _redact_sensitive(value)
            for key, value in data.items()
        }
    if isinstance(data, list):
        return [_redact_sensitive(item) for item in data]
    return data


class StructuredJSONFormatter(logging.Formatter):
    """One JSON object per record.

    Fields: timestamp (ISO 8601 UTC), level, logger_name, message, the
    fields bound with log_context, anything passed with extra=, and
    exception/stack_trace when the record carries exc_info.

    Settings trees often hold credentials, so context and extra fields
    are redacted before serialization.
    """

    def format(self, record: logging.LogRecord) -> str:
        log_entry: Dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "logger_name": record.name,
            "message": record.getMessage(),
        }

        fields = get_context()
        fields.update(
            (key, value)
            for key, value in vars(record).items()
            if key not in _RECORD_ATTRIBUTES
        )
        log_entry.update(_redact_sensitive(fields))

        if record.exc_info:
            exc_type, exc_value, exc_tb = record.exc_info
            log_entry["exception"] = {
                "type": exc_type.__name__ if exc_type else None,
                "message": str(exc_value) if exc_value else None,
            }
            if exc_tb:
                log_entry["stack_trace"] = traceback.format_exception(exc_type, exc_value, exc_tb)

        return json.dumps(log_entry, default=str)
