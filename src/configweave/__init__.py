"""configweave - merge settings from many sources into one configuration.

Example:
    from configweave import (
        ConfigurationBuilder,
        JsonConfigurationSource,
        MergeStrategy,
        ObjectConfigurationSource,
    )

    builder = (
        ConfigurationBuilder()
        .add_configuration_source(ObjectConfigurationSource({"debug": False}))
        .add_configuration_source(JsonConfigurationSource("config/app.json"))
        .add_configuration_source(JsonConfigurationSource("config/db.json"), "database")
    )
    config = await builder.build(MergeStrategy.MERGE_INDEXED)
    config.get("database.host", "localhost")
"""

from configweave.configuration import (  # noqa: F401
    ConfigMerger,
    Configuration,
    ConfigurationBuilder,
    MergeStrategy,
    SourceRegistration,
    merge_objects,
)
from configweave.exceptions import (  # noqa: F401
    ConfigError,
    ConfigNotFoundError,
    ConfigParseError,
    ConfigReadError,
    ConfigweaveError,
    InvalidKeyPathError,
)
from configweave.interfaces import IConfiguration, IConfigurationSource  # noqa: F401
from configweave.settings import ConfigweaveSettings  # noqa: F401
from configweave.sources import (  # noqa: F401
    FileConfigurationSource,
    JsonConfigurationSource,
    ObjectConfigurationSource,
    YamlConfigurationSource,
    read_file_bytes,
)

__version__ = "1.0.0"

__all__ = [
    # Configuration
    "Configuration",
    "ConfigurationBuilder",
    "SourceRegistration",
    "ConfigMerger",
    "MergeStrategy",
    "merge_objects",
    # Interfaces
    "IConfiguration",
    "IConfigurationSource",
    # Sources
    "ObjectConfigurationSource",
    "FileConfigurationSource",
    "JsonConfigurationSource",
    "YamlConfigurationSource",
    "read_file_bytes",
    # Settings
    "ConfigweaveSettings",
    # Exceptions
    "ConfigweaveError",
    "ConfigError",
    "ConfigNotFoundError",
    "ConfigParseError",
    "ConfigReadError",
    "InvalidKeyPathError",
]
