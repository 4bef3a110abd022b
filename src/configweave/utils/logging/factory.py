"""Logger factory for configuring configweave's loggers."""
import logging
import logging.handlers
import sys
from typing import Optional

from configweave.utils.logging.formatters import StructuredJSONFormatter

_logger = logging.getLogger(__name__)

ROOT_LOGGER_NAME = "configweave"


def configure_logging(
    level: int = logging.INFO,
    log_file: Optional[str] = None,
    enable_console: bool = True,
) -> None:
    """Send configweave logs through the structured JSON formatter.

    Only the "configweave" logger tree is touched; the application's
    root logger is left alone.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: Path to log file (optional)
        enable_console: Enable console output (stdout)
    """
    library_logger = logging.getLogger(ROOT_LOGGER_NAME)
    library_logger.setLevel(level)

    # Clear existing handlers
    library_logger.handlers.clear()

    formatter = StructuredJSONFormatter()
    handlers = []

    if enable_console:
        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setLevel(level)
        console_handler.setFormatter(formatter)
        handlers.append(console_handler)

    if log_file:
        file_handler = logging.handlers.RotatingFileHandler(
            filename=log_file,
            maxBytes=10 * 1024 * 1024,  # 10MB
            backupCount=5,
        )
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        handlers.append(file_handler)

    for handler in handlers:
        library_logger.addHandler(handler)

    _logger.info(
        "Logging configured",
        extra={
            "log_level": logging.getLevelName(level),
            "log_file": log_file,
            "handlers_count": len(handlers),
        },
    )


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Logger instance

    Example:
        logger = get_logger(__name__)
        logger.info("This will be structured JSON")
    """
    return logging.getLogger(name)


def disable_logging() -> None:
    """Disable configweave logging (use NullHandler).

    Useful for tests.
    """
    library_logger = logging.getLogger(ROOT_LOGGER_NAME)
    library_logger.handlers.clear()
    library_logger.addHandler(logging.NullHandler())
    library_logger.propagate = False
