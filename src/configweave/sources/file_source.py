"""Base for configuration sources backed by a file."""
import asyncio
import codecs
import logging
import os
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Dict, Optional, Union

from configweave.exceptions.config import (
    ConfigError,
    ConfigNotFoundError,
    ConfigParseError,
    ConfigReadError,
)
from configweave.settings import settings


logger = logging.getLogger(__name__)

PathLike = Union[str, "os.PathLike[str]"]


async def read_file_bytes(path: PathLike) -> bytes:
    """Read the whole file without blocking the event loop.

    Args:
        path: File to read

    Returns:
        Raw file contents

    Raises:
        ConfigNotFoundError: File does not exist
        ConfigReadError: File could not be read
    """
    file_path = Path(path)

    # Run blocking read in thread pool
    loop = asyncio.get_running_loop()
    try:
        data = await loop.run_in_executor(None, file_path.read_bytes)
    except FileNotFoundError as e:
        logger.error(
            f"Config file not found: {file_path}",
            extra={"path": str(file_path)},
        )
        raise ConfigNotFoundError(
            message=f"Config file not found: {file_path}",
            config_file=str(file_path),
            original_error=e,
        )
    except OSError as e:
        logger.error(
            f"Failed to read file {file_path}: {e}",
            extra={"path": str(file_path), "error": str(e)},
            exc_info=True,
        )
        raise ConfigReadError(
            message=f"Failed to read config file: {e}",
            config_file=str(file_path),
            original_error=e,
        )

    logger.debug(
        f"Config file read: {file_path}",
        extra={"path": str(file_path), "bytes": len(data)},
    )

    return data


class FileConfigurationSource(ABC):
    """Convenient base for file sources: subclasses only parse.

    Subclasses implement load() by calling read_file() and turning the
    bytes into a settings tree.

    Example:
        class IniConfigurationSource(FileConfigurationSource):
            async def load(self):
                text = self.decode(await self.read_file())
                ...
    """

    def __init__(self, path: PathLike, encoding: Optional[str] = None):
        """Initialize file source.

        Args:
            path: Configuration file to load
            encoding: Text encoding (defaults to settings.file_encoding)

        Raises:
            ConfigError: Python has no codec for the encoding
        """
        self.path = Path(path)
        self.encoding = encoding or settings.file_encoding

        try:
            codecs.lookup(self.encoding)
        except LookupError as e:
            raise ConfigError(
                message=f"Unknown encoding: {self.encoding}",
                config_file=str(self.path),
                error_code="UNKNOWN_ENCODING",
                details={"encoding": self.encoding},
                original=e,
            )

    async def read_file(self) -> bytes:
        """Read the entire file and return its raw contents."""
        return await read_file_bytes(self.path)

    def decode(self, data: bytes) -> str:
        """Decode raw file contents as text.

        Raises:
            ConfigParseError: Contents are not valid in the source's encoding
        """
        try:
            return data.decode(self.encoding)
        except UnicodeDecodeError as e:
            logger.error(
                f"Failed to decode {self.path} as {self.encoding}",
                extra={"path": str(self.path), "encoding": self.encoding},
            )
            raise ConfigParseError(
                message=f"Config file is not valid {self.encoding}: {e}",
                config_file=str(self.path),
                original_error=e,
            )

    def _require_mapping(self, data: Any) -> Dict[str, Any]:
        """Reject documents whose root is not a mapping."""
        if not isinstance(data, dict):
            logger.error(
                f"Config file must contain a mapping: {self.path}",
                extra={"path": str(self.path), "type": type(data).__name__},
            )
            raise ConfigParseError(
                message=f"Config file must contain a mapping, got {type(data).__name__}",
                config_file=str(self.path),
            )
        return data

    @abstractmethod
    async def load(self) -> Dict[str, Any]:
        """Read and parse the file into a settings tree."""
        ...

    def __repr__(self) -> str:
        return f"{type(self).__name__}({str(self.path)!r})"
