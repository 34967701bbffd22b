"""Enum types for rps-naming."""

from enum import Enum


class AliasPreset(str, Enum):
    """Named sets of word lookup tables.

    ``DEFAULT`` is the small alias map with nothing ignored. ``LEGACY`` restores
    the older RPS tables: an ignore list, an acronym list and a larger map of
    common namespaces.
    """

    DEFAULT = "default"
    LEGACY = "legacy"

    @classmethod
    def values(cls) -> list[str]:
        """Return list of all preset names."""
        return [p.value for p in cls]
