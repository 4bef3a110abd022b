"""YAML file configuration source."""
import logging
from typing import Any, Dict

import yaml

from configweave.exceptions.config import ConfigParseError
from configweave.sources.file_source import FileConfigurationSource


logger = logging.getLogger(__name__)


class YamlConfigurationSource(FileConfigurationSource):
    """Loads settings from a YAML file.

    An empty document loads as an empty mapping.
    """

    async def load(self) -> Dict[str, Any]:
        """Read and parse the YAML file.

        Returns:
            Parsed settings

        Raises:
            ConfigNotFoundError: File does not exist
            ConfigReadError: File could not be read
            ConfigParseError: YAML syntax is invalid or root is not a mapping
        """
        text = self.decode(await self.read_file())

        try:
            data = yaml.safe_load(text)
        except yaml.YAMLError as e:
            logger.error(
                f"YAML parse error in {self.path}: {e}",
                extra={"path": str(self.path), "error": str(e)},
            )

            # Extract line and column if available
            mark = getattr(e, "problem_mark", None)

            raise ConfigParseError(
                message=f"Failed to parse YAML file: {e}",
                config_file=str(self.path),
                line_number=mark.line + 1 if mark is not None else None,
                column_number=mark.column + 1 if mark is not None else None,
                original_error=e,
            )

        if data is None:
            logger.debug(f"YAML file is empty: {self.path}", extra={"path": str(self.path)})
            return {}

        settings = self._require_mapping(data)

        logger.info(
            f"YAML file loaded successfully: {self.path}",
            extra={"path": str(self.path), "keys": list(settings.keys())},
        )

        return settings
