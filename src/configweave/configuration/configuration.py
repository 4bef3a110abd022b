"""In-memory configuration object with key path access."""
import copy
import logging
from typing import Any, Dict, Optional

from configweave.configuration import key_path as kp
from configweave.configuration.merger import MergeStrategy, merge_objects


logger = logging.getLogger(__name__)


class Configuration:
    """An in-memory settings tree addressed by dotted key paths.

    ``set``, ``remove`` and ``clear`` mutate the instance. ``merge`` never
    does: it returns a new Configuration owning its own tree.

    Example:
        config = Configuration({"database": {"host": "localhost"}})
        config.set("database.port", 5432)
        config.get("database.port")          # 5432
        config.get("cache.ttl", 60)          # 60
    """

    def __init__(self, settings: Optional[Dict[str, Any]] = None):
        """Create a configuration from the given settings.

        Args:
            settings: Initial settings tree (defaults to empty)
        """
        self.settings: Dict[str, Any] = settings if settings is not None else {}

    def set(self, key_path: str, value: Any) -> None:
        """Assign a value to a key path, creating missing sections."""
        kp.set_value(self.settings, key_path, value)

    def has(self, key_path: str) -> bool:
        """Determine if the key path exists."""
        return kp.has_value(self.settings, key_path)

    def get(self, key_path: str, default: Any = None) -> Any:
        """Retrieve the value at the key path, or default if it doesn't exist."""
        return kp.get_value(self.settings, key_path, default)

    def all(self) -> Dict[str, Any]:
        """Return the live settings tree (not a copy)."""
        return self.settings

    def remove(self, key_path: str) -> None:
        """Remove the key path. No-op if it does not exist."""
        kp.remove_value(self.settings, key_path)

    def clear(self) -> None:
        """Remove all settings."""
        self.settings = {}

    def merge(
        self,
        configuration: "Configuration",
        key_path: Optional[str] = None,
        strategy: MergeStrategy = MergeStrategy.MERGE_INDEXED,
    ) -> "Configuration":
        """Produce a new configuration by merging another one into this.

        The other configuration takes precedence. Neither input is modified.

        Args:
            configuration: Configuration to merge in
            key_path: Merge the other settings in at this key path
                (created if missing, siblings preserved)
            strategy: How to combine colliding lists

        Returns:
            New merged configuration
        """
        base = self.get(key_path, {}) if key_path is not None else self.all()
        if not isinstance(base, dict):
            # A scalar or list sitting at key_path is replaced, as set() would
            base = {}

        settings = copy.deepcopy(merge_objects(base, configuration.all(), strategy))

        logger.debug(
            "Configuration merged",
            extra={
                "key_path": key_path,
                "strategy": strategy.value,
                "merged_keys": len(settings),
            },
        )

        if key_path is None:
            return Configuration(settings)

        merged = Configuration(copy.deepcopy(self.all()))
        merged.set(key_path, settings)

        return merged

    def copy(self) -> "Configuration":
        """Return a configuration owning a deep copy of this tree."""
        return Configuration(copy.deepcopy(self.settings))

    def __copy__(self) -> "Configuration":
        return self.copy()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Configuration):
            return NotImplemented
        return self.settings == other.settings

    def __repr__(self) -> str:
        return f"Configuration({self.settings!r})"
