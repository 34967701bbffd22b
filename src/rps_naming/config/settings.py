"""Runtime configuration settings for rps-naming.

This module uses Pydantic Settings for configuration that can be
overridden via environment variables with the RPS_NAMING_ prefix.
"""

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from rps_naming.constants import (
    DEFAULT_CONFIG_FILE,
    DEFAULT_LOG_LEVEL,
    DEFAULT_SOURCE_EXTENSION,
)


class NamingSettings(BaseSettings):
    """CLI and layout settings.

    Can be overridden via environment variables with RPS_NAMING_ prefix.
    """

    model_config = SettingsConfigDict(env_prefix="RPS_NAMING_")

    config_file: str = Field(
        default=DEFAULT_CONFIG_FILE,
        description="Naming config file, relative to the working directory",
    )
    log_level: str = Field(
        default=DEFAULT_LOG_LEVEL,
        description="Log level for the rps_naming logger",
    )
    source_extension: str = Field(
        default=DEFAULT_SOURCE_EXTENSION,
        description="Extension of the namespace source file in project layouts",
    )

    @field_validator("log_level")
    @classmethod
    def _upper_log_level(cls, value: str) -> str:
        return value.upper()
