"""In-memory configuration source."""
from typing import Any, Dict


class ObjectConfigurationSource:
    """Contributes a plain mapping to a configuration.

    Example:
        builder.add_configuration_source(
            ObjectConfigurationSource({"debug": False, "workers": 4})
        )
    """

    def __init__(self, settings: Dict[str, Any]):
        """Initialize object source.

        Args:
            settings: Settings to contribute
        """
        self.settings = settings

    async def load(self) -> Dict[str, Any]:
        """Return the settings given at construction."""
        return self.settings

    def __repr__(self) -> str:
        return f"ObjectConfigurationSource({self.settings!r})"
