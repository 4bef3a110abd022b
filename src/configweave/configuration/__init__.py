"""Settings trees: key path access, merging and building."""

from configweave.configuration.key_path import (  # noqa: F401
    get_value,
    has_value,
    remove_value,
    set_value,
    split_key_path,
)
from configweave.configuration.merger import ConfigMerger, MergeStrategy, merge_objects  # noqa: F401
from configweave.configuration.configuration import Configuration  # noqa: F401
from configweave.configuration.builder import ConfigurationBuilder, SourceRegistration  # noqa: F401

__all__ = [
    # Key path navigation
    "get_value",
    "has_value",
    "remove_value",
    "set_value",
    "split_key_path",
    # Merging
    "ConfigMerger",
    "MergeStrategy",
    "merge_objects",
    # Configuration
    "Configuration",
    # Building
    "ConfigurationBuilder",
    "SourceRegistration",
]
