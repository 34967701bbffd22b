"""Data models for rps-naming."""

from rps_naming.models.config import NamingConfig
from rps_naming.models.enums import AliasPreset

__all__ = ["AliasPreset", "NamingConfig"]
