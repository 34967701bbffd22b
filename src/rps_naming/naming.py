"""Naming utilities for RPS project names.

Guesses the module namespace and namespace directories of a project from its
name, following the Ruby Packaging Standard: hyphens separate namespace
levels and underscores separate words within a level::

    >>> namespace_of("dm-serializer_json")
    'DataMapper::SerializerJson'
    >>> namespace_dirs_of("dm-serializer_json")
    ['dm', 'serializer_json']

Every naming operation is a pure function of its input and never raises; degenerate
input such as ``""`` or ``"foo--bar"`` yields empty segments.
"""

import logging
import os
from collections.abc import Iterable, Mapping
from types import MappingProxyType

from rps_naming.constants import (
    CAMEL_BOUNDARY_PATTERN,
    CAMEL_BOUNDARY_REPLACEMENT,
    DEFAULT_ALIASES,
    DEFAULT_SOURCE_EXTENSION,
    LEGACY_ACRONYMS,
    LEGACY_ALIASES,
    LEGACY_IGNORE_NAMESPACES,
    LIB_DIR,
    NAMESPACE_SEPARATOR,
    PROJECT_DIRS,
    SEGMENT_SEPARATOR,
    WORD_SEPARATOR,
)
from rps_naming.exceptions import ConfigurationError
from rps_naming.models.config import NamingConfig
from rps_naming.models.enums import AliasPreset

logger = logging.getLogger(__name__)


def underscore(name: str) -> str:
    """Convert a camel-case name to an underscored file name.

    An underscore is inserted before a capital only when it is preceded and
    followed by a character that is neither a capital nor an underscore, so
    acronym runs stay joined and a trailing capital is left alone. Matches are
    found left to right without overlapping.

    Examples:
        >>> underscore("FooBar")
        'foo_bar'
        >>> underscore("XMLParser")
        'xmlparser'
    """
    return CAMEL_BOUNDARY_PATTERN.sub(CAMEL_BOUNDARY_REPLACEMENT, name).lower()


class NameConverter:
    """Converts project names into module names and namespace directories.

    The lookup tables are frozen when the converter is created, so a single
    instance can be shared between threads.

    Args:
        aliases: Word -> module name overrides (e.g. ``dm`` -> ``DataMapper``).
        acronyms: Words rendered fully upper-case.
        ignore_namespaces: Project name segments dropped before conversion.
    """

    def __init__(
        self,
        aliases: Mapping[str, str] | None = None,
        acronyms: Iterable[str] = (),
        ignore_namespaces: Iterable[str] = (),
    ):
        self.aliases: Mapping[str, str] = MappingProxyType(
            dict(DEFAULT_ALIASES if aliases is None else aliases)
        )
        self.acronyms = frozenset(acronyms)
        self.ignore_namespaces = frozenset(ignore_namespaces)
        self._canonical = frozenset(self.aliases.values())
        logger.debug(
            "NameConverter created: %d aliases, %d acronyms, %d ignored",
            len(self.aliases),
            len(self.acronyms),
            len(self.ignore_namespaces),
        )

    @classmethod
    def from_preset(cls, preset: AliasPreset | str) -> "NameConverter":
        """Create a converter from one of the built-in table sets.

        Raises:
            ConfigurationError: If ``preset`` is not a known preset name.
        """
        try:
            preset = AliasPreset(preset)
        except ValueError as e:
            raise ConfigurationError(
                f"Unknown preset '{preset}'", key="preset"
            ) from e

        if preset is AliasPreset.LEGACY:
            return cls(
                aliases=LEGACY_ALIASES,
                acronyms=LEGACY_ACRONYMS,
                ignore_namespaces=LEGACY_IGNORE_NAMESPACES,
            )
        return cls()

    @classmethod
    def from_config(cls, config: NamingConfig) -> "NameConverter":
        """Create a converter from a preset plus the config's extra tables."""
        base = cls.from_preset(config.preset)
        return cls(
            aliases={**base.aliases, **config.aliases},
            acronyms=base.acronyms | set(config.acronyms),
            ignore_namespaces=base.ignore_namespaces | set(config.ignore_namespaces),
        )

    def names_in(self, name: str) -> list[str]:
        """Split a project name into its namespace segments.

        Segments listed in ``ignore_namespaces`` are dropped.
        """
        return [
            segment
            for segment in name.split(SEGMENT_SEPARATOR)
            if segment not in self.ignore_namespaces
        ]

    def module_of(self, word: str) -> str:
        """Guess the module name for a single word of a project name.

        Aliases win, then acronyms, then plain capitalization. A word that is
        already an alias's module name is returned unchanged.
        """
        if word in self.aliases:
            return self.aliases[word]
        if word in self._canonical:
            return word
        if word in self.acronyms:
            return word.upper()
        return word.capitalize()

    def modules_of(self, name: str) -> list[str]:
        """Guess the module name of every namespace level of a project."""
        return [
            "".join(self.module_of(word) for word in segment.split(WORD_SEPARATOR))
            for segment in self.names_in(name)
        ]

    def namespace_of(self, name: str) -> str:
        """Guess the full module namespace of a project (``Foo::Bar``)."""
        return NAMESPACE_SEPARATOR.join(self.modules_of(name))

    def underscore(self, name: str) -> str:
        """Convert a camel-case name to an underscored file name."""
        return underscore(name)

    def namespace_dirs_of(self, name: str) -> list[str]:
        """Guess the namespace directories within ``lib/`` for a project.

        Segments are underscored as they appear in the name; aliases are not
        applied.
        """
        return [underscore(segment) for segment in self.names_in(name)]

    def namespace_path_of(self, name: str) -> str:
        """Guess the namespace directory path within ``lib/`` for a project."""
        return os.sep.join(self.namespace_dirs_of(name))

    def project_layout(
        self, name: str, extension: str = DEFAULT_SOURCE_EXTENSION
    ) -> dict[str, str]:
        """Describe the conventional layout of a project.

        Returns the standard project directories plus the namespace directory
        and the namespace's main source file under ``lib/``. Nothing is read
        from or written to disk.
        """
        layout = dict(PROJECT_DIRS)
        namespace_path = self.namespace_path_of(name)
        if namespace_path:
            layout["namespace_dir"] = os.path.join(LIB_DIR, namespace_path)
            layout["namespace_file"] = os.path.join(LIB_DIR, namespace_path + extension)
        return layout


# =============================================================================
# Default Instance and Convenience Functions
# =============================================================================

default_converter = NameConverter()


def names_in(name: str) -> list[str]:
    """Split a project name into its namespace segments."""
    return default_converter.names_in(name)


def module_of(word: str) -> str:
    """Guess the module name for a word within a project name."""
    return default_converter.module_of(word)


def modules_of(name: str) -> list[str]:
    """Guess the module names from a project name."""
    return default_converter.modules_of(name)


def namespace_of(name: str) -> str:
    """Guess the full namespace for a project."""
    return default_converter.namespace_of(name)


def namespace_dirs_of(name: str) -> list[str]:
    """Guess the namespace directories within ``lib/`` for a project."""
    return default_converter.namespace_dirs_of(name)


def namespace_path_of(name: str) -> str:
    """Guess the namespace directory within ``lib/`` for a project."""
    return default_converter.namespace_path_of(name)


def project_layout(name: str, extension: str = DEFAULT_SOURCE_EXTENSION) -> dict[str, str]:
    """Describe the conventional layout of a project."""
    return default_converter.project_layout(name, extension)
