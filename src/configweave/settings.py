"""Runtime options for configweave itself."""
import codecs
import logging

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from configweave.configuration.merger import MergeStrategy

logger = logging.getLogger(__name__)


class ConfigweaveSettings(BaseSettings):
    """Library options loaded from CONFIGWEAVE_* environment variables.

    These control the library's defaults only; settings trees built by
    the library are never read from the environment.
    """

    model_config = SettingsConfigDict(
        env_prefix="CONFIGWEAVE_",
        extra="ignore",
    )

    default_merge_strategy: MergeStrategy = Field(
        default=MergeStrategy.MERGE_INDEXED,
        description="List merge strategy used by ConfigurationBuilder.build() when none is given"
    )
    file_encoding: str = Field(
        default="utf-8",
        description="Text encoding used to decode file-backed sources"
    )

    @field_validator("file_encoding")
    @classmethod
    def validate_file_encoding(cls, v: str) -> str:
        """Validate encoding is a codec Python knows."""
        try:
            codecs.lookup(v)
        except LookupError:
            raise ValueError(f"Unknown file_encoding: {v}")
        return v


# Global settings instance (loaded from environment)
settings = ConfigweaveSettings()
