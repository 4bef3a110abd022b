"""Configuration builder - loads sources and folds them into one configuration."""
import asyncio
import logging
from dataclasses import dataclass
from typing import List, Optional, Tuple

from configweave.configuration.configuration import Configuration
from configweave.configuration.key_path import split_key_path
from configweave.configuration.merger import MergeStrategy
from configweave.interfaces import IConfigurationSource
from configweave.settings import ConfigweaveSettings, settings as default_settings
from configweave.utils.logging.context import log_context


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SourceRegistration:
    """A configuration source and the key path its settings are merged at."""
    source: IConfigurationSource
    key_path: Optional[str] = None


class ConfigurationBuilder:
    """Builds a single configuration from multiple sources.

    Sources are loaded concurrently, then merged strictly in the order
    they were added, so the result does not depend on load latency.
    The builder can be passed around so several participants can add
    their own sources before the final build.

    Example:
        builder = ConfigurationBuilder()
        builder.add_configuration_source(JsonConfigurationSource("config/base.json"))
        builder.add_configuration_source(YamlConfigurationSource("config/db.yaml"), "database")
        config = await builder.build()
    """

    def __init__(self, settings: Optional[ConfigweaveSettings] = None):
        """Initialize configuration builder.

        Args:
            settings: Library settings (defaults to the global instance)
        """
        self._settings = settings or default_settings
        self._registrations: List[SourceRegistration] = []

    @property
    def sources(self) -> Tuple[SourceRegistration, ...]:
        """Registered sources, in merge order."""
        return tuple(self._registrations)

    def add_configuration_source(
        self,
        source: IConfigurationSource,
        key_path: Optional[str] = None,
    ) -> "ConfigurationBuilder":
        """Add a source to be merged into the final configuration.

        Args:
            source: Configuration source
            key_path: Merge the source's settings in at this key path
                (created if it doesn't exist)

        Returns:
            The same builder, for chaining

        Raises:
            InvalidKeyPathError: key_path is malformed
        """
        if key_path is not None:
            split_key_path(key_path)

        self._registrations.append(SourceRegistration(source=source, key_path=key_path))

        logger.debug(
            "Configuration source added",
            extra={
                "source": type(source).__name__,
                "key_path": key_path,
                "position": len(self._registrations) - 1,
            },
        )

        return self

    async def build(self, strategy: Optional[MergeStrategy] = None) -> Configuration:
        """Load all sources and merge them into a single configuration.

        Args:
            strategy: How to combine colliding lists
                (defaults to settings.default_merge_strategy)

        Returns:
            Merged configuration

        Raises:
            Exception: Whatever the first failing source's load() raised
        """
        if strategy is None:
            strategy = self._settings.default_merge_strategy
        registrations = list(self._registrations)

        async with log_context(operation="configuration_build"):
            loaded = await asyncio.gather(
                *(registration.source.load() for registration in registrations)
            )

            configuration = Configuration()
            for registration, settings in zip(registrations, loaded):
                configuration = configuration.merge(
                    Configuration(settings),
                    registration.key_path,
                    strategy,
                )

            logger.info(
                "Configuration built",
                extra={
                    "source_count": len(registrations),
                    "strategy": strategy.value,
                    "top_level_keys": len(configuration.all()),
                },
            )

        return configuration
