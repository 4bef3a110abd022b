"""JSON file configuration source."""
import json
import logging
from typing import Any, Dict

from configweave.exceptions.config import ConfigParseError
from configweave.sources.file_source import FileConfigurationSource


logger = logging.getLogger(__name__)


class JsonConfigurationSource(FileConfigurationSource):
    """Loads settings from a JSON file whose root is an object."""

    async def load(self) -> Dict[str, Any]:
        """Read and parse the JSON file.

        Returns:
            Parsed settings

        Raises:
            ConfigNotFoundError: File does not exist
            ConfigReadError: File could not be read
            ConfigParseError: JSON syntax is invalid or root is not an object
        """
        text = self.decode(await self.read_file())

        try:
            data = json.loads(text)
        except json.JSONDecodeError as e:
            logger.error(
                f"JSON parse error in {self.path}: {e}",
                extra={"path": str(self.path), "error": str(e)},
            )
            raise ConfigParseError(
                message=f"Failed to parse JSON file: {e.msg}",
                config_file=str(self.path),
                line_number=e.lineno,
                column_number=e.colno,
                original_error=e,
            )

        settings = self._require_mapping(data)

        logger.info(
            f"JSON file loaded successfully: {self.path}",
            extra={"path": str(self.path), "keys": list(settings.keys())},
        )

        return settings
