"""Configuration sources."""

from configweave.sources.object_source import ObjectConfigurationSource  # noqa: F401
from configweave.sources.file_source import FileConfigurationSource, read_file_bytes  # noqa: F401
from configweave.sources.json_source import JsonConfigurationSource  # noqa: F401
from configweave.sources.yaml_source import YamlConfigurationSource  # noqa: F401

__all__ = [
    # In-memory
    "ObjectConfigurationSource",
    # File-backed
    "FileConfigurationSource",
    "read_file_bytes",
    "JsonConfigurationSource",
    "YamlConfigurationSource",
]
