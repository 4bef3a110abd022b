"""Abstract interfaces for configuration objects and sources.

Allows dependency injection for testability and flexibility.
All concrete implementations must honor these contracts.
"""
from abc import abstractmethod
from typing import Any, Dict, Optional, Protocol, runtime_checkable

from configweave.configuration.merger import MergeStrategy


# ==================== Source Interfaces ====================

@runtime_checkable
class IConfigurationSource(Protocol):
    """Protocol for a provider of settings.

    Implementations: ObjectConfigurationSource, JsonConfigurationSource,
    YamlConfigurationSource, or anything else with an async load().
    """

    @abstractmethod
    async def load(self) -> Dict[str, Any]:
        """Provide the source's settings.

        Returns:
            Settings tree

        Raises:
            Exception: If the settings cannot be produced
        """
        ...


# ==================== Configuration Interfaces ====================

class IConfiguration(Protocol):
    """Protocol for a queryable settings tree."""

    @abstractmethod
    def set(self, key_path: str, value: Any) -> None:
        """Assign a value to a key path.

        After this operation the value is available at the key path.
        """
        ...

    @abstractmethod
    def has(self, key_path: str) -> bool:
        """Determine if the key path exists."""
        ...

    @abstractmethod
    def get(self, key_path: str, default: Any = None) -> Any:
        """Retrieve the value at the key path.

        Args:
            key_path: Key path to retrieve value from
            default: Value to return if key path doesn't exist

        Returns:
            The value at the key path or default
        """
        ...

    @abstractmethod
    def all(self) -> Dict[str, Any]:
        """Retrieve all settings."""
        ...

    @abstractmethod
    def remove(self, key_path: str) -> None:
        """Remove the key path. If it does not exist nothing happens."""
        ...

    @abstractmethod
    def clear(self) -> None:
        """Remove all settings."""
        ...

    @abstractmethod
    def merge(
        self,
        configuration: "IConfiguration",
        key_path: Optional[str] = None,
        strategy: MergeStrategy = MergeStrategy.MERGE_INDEXED,
    ) -> "IConfiguration":
        """Produce a new configuration by merging the given one with this.

        Args:
            configuration: Configuration to merge with
            key_path: Key path to merge the other configuration in at
            strategy: Merge strategy to use when merging lists

        Returns:
            Merged configuration
        """
        ...
