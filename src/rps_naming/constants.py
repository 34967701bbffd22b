"""Constants for rps-naming.

This module contains:
- VERSION: Package version
- Conventional project directories
- Project name separators and the camel-case word boundary pattern
- Word lookup tables for the default and legacy presets

Lookup tables are read-only mappings and frozensets so they can be shared
freely between converters.
"""

import re
from types import MappingProxyType
from typing import Final

from rps_naming import __version__

# =============================================================================
# Version
# =============================================================================

VERSION = __version__

# =============================================================================
# Project Directories
# =============================================================================

# Executables
BIN_DIR: Final = "bin"
# Library code
LIB_DIR: Final = "lib"
# C extension code
EXT_DIR: Final = "ext"
# Data files
DATA_DIR: Final = "data"
# Unit tests
TEST_DIR: Final = "test"
# Spec tests
SPEC_DIR: Final = "spec"
# Built packages
PKG_DIR: Final = "pkg"

PROJECT_DIRS: Final = MappingProxyType(
    {
        "bin": BIN_DIR,
        "lib": LIB_DIR,
        "ext": EXT_DIR,
        "data": DATA_DIR,
        "test": TEST_DIR,
        "spec": SPEC_DIR,
        "pkg": PKG_DIR,
    }
)

# =============================================================================
# Separators and Patterns
# =============================================================================

# Separates namespace levels in a project name (dm-core)
SEGMENT_SEPARATOR: Final = "-"
# Separates words within a namespace level (dm-serializer_json)
WORD_SEPARATOR: Final = "_"
# Joins module names into a fully qualified namespace
NAMESPACE_SEPARATOR: Final = "::"

# A capital that is both preceded and followed by something that is neither a
# capital nor an underscore starts a new word. Matches never overlap.
CAMEL_BOUNDARY_PATTERN: Final = re.compile(r"([^A-Z_])([A-Z][^A-Z_])")
CAMEL_BOUNDARY_REPLACEMENT: Final = r"\1_\2"

# =============================================================================
# Default Preset
# =============================================================================

DEFAULT_ALIASES: Final = MappingProxyType(
    {
        "ffi": "FFI",
        "dm": "DataMapper",
    }
)

# =============================================================================
# Legacy Preset
# =============================================================================

# Words used in project names, but never in module or directory names
LEGACY_IGNORE_NAMESPACES: Final = frozenset({"core", "ruby", "rb", "java"})

# Common acronyms used in namespaces
LEGACY_ACRONYMS: Final = frozenset(
    {
        "ffi",
        "yard",
        "i18n",
        "http",
        "https",
        "ftp",
        "smtp",
        "imap",
        "pop3",
        "ssh",
        "ssl",
        "tcp",
        "udp",
        "dns",
        "rpc",
        "url",
        "uri",
        "www",
        "css",
        "html",
        "xhtml",
        "xml",
        "xsl",
        "json",
        "yaml",
        "csv",
        "posix",
        "unix",
        "bsd",
        "cpp",
        "asm",
    }
)

# Common project prefixes and namespaces
LEGACY_ALIASES: Final = MappingProxyType(
    {
        "rubygems": "Gem",
        "ar": "ActiveRecord",
        "dm": "DataMapper",
        "js": "JavaScript",
        "msgpack": "MsgPack",
        "github": "GitHub",
        "rdoc": "RDoc",
    }
)

# =============================================================================
# Configuration Defaults
# =============================================================================

DEFAULT_CONFIG_FILE: Final = ".rps-naming.yaml"
DEFAULT_SOURCE_EXTENSION: Final = ".rb"
DEFAULT_LOG_LEVEL: Final = "WARNING"
JSON_INDENT: Final = 2
