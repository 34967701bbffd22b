"""Configuration models for rps-naming."""

import logging
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator

from rps_naming.exceptions import ConfigurationError
from rps_naming.models.enums import AliasPreset

logger = logging.getLogger(__name__)


class NamingConfig(BaseModel):
    """Word lookup configuration for a NameConverter.

    The preset supplies the base tables; ``aliases``, ``acronyms`` and
    ``ignore_namespaces`` are added on top of it.
    """

    preset: AliasPreset = Field(
        default=AliasPreset.DEFAULT,
        description="Base lookup tables (default or legacy)",
    )
    aliases: dict[str, str] = Field(
        default_factory=dict,
        description=(
            "Extra word -> module name aliases (e.g. ar: ActiveRecord). A word "
            "equal to an alias value is kept verbatim, so lowercase values are "
            "never capitalized"
        ),
    )
    acronyms: list[str] = Field(
        default_factory=list,
        description="Extra words rendered fully upper-case",
    )
    ignore_namespaces: list[str] = Field(
        default_factory=list,
        description="Extra project name segments dropped from namespaces",
    )

    @field_validator("aliases")
    @classmethod
    def _lowercase_alias_keys(cls, value: dict[str, str]) -> dict[str, str]:
        return {word.lower(): module for word, module in value.items()}

    @field_validator("acronyms", "ignore_namespaces")
    @classmethod
    def _lowercase_words(cls, value: list[str]) -> list[str]:
        return [word.lower() for word in value]

    @classmethod
    def load(cls, config_path: Path) -> "NamingConfig":
        """Load configuration from a YAML file.

        A missing or empty file yields the default configuration.

        Raises:
            ConfigurationError: If the file is not valid YAML or does not
                describe a valid configuration.
        """
        if not config_path.exists():
            logger.debug("No naming config at %s, using defaults", config_path)
            return cls()

        try:
            with open(config_path, encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigurationError(
                f"Invalid YAML in naming config: {e}", config_file=config_path
            ) from e

        if not data:
            return cls()
        if not isinstance(data, dict):
            raise ConfigurationError(
                "Naming config must be a mapping", config_file=config_path
            )

        try:
            config = cls(**data)
        except ValidationError as e:
            first = e.errors()[0]
            key = ".".join(str(part) for part in first["loc"])
            raise ConfigurationError(
                f"Invalid naming config: {first['msg']}", config_file=config_path, key=key
            ) from e

        logger.debug("Loaded naming config from %s (preset=%s)", config_path, config.preset.value)
        return config

    def save(self, config_path: Path) -> None:
        """Save configuration to file."""
        config_path.parent.mkdir(parents=True, exist_ok=True)
        with open(config_path, "w", encoding="utf-8") as f:
            yaml.safe_dump(
                self.to_dict(),
                f,
                default_flow_style=False,
                sort_keys=False,
            )

    def to_dict(self) -> dict[str, Any]:
        """Return a YAML/JSON friendly representation."""
        return self.model_dump(mode="json")
