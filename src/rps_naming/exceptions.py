"""Errors raised while setting up a NameConverter.

Turning a project name into modules, namespaces or directories works on any
string and raises nothing. What can fail is choosing the lookup tables: an
unreadable or invalid ``.rps-naming.yaml``, a missing ``--config`` file, or a
preset name that is not ``default`` or ``legacy``.

    NamingError
    └── ConfigurationError
"""

from pathlib import Path
from typing import Any


class NamingError(Exception):
    """Base class for rps-naming errors.

    ``details`` holds the values needed to locate the problem (for example
    the config file path). The CLI prints ``str(error)``, which appends them
    as ``key=value`` pairs after the message.
    """

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        if not self.details:
            return self.message
        pairs = ", ".join(f"{k}={v}" for k, v in self.details.items())
        return f"{self.message} ({pairs})"


class ConfigurationError(NamingError):
    """The lookup tables for a NameConverter could not be built.

    Raised by ``NamingConfig.load`` for bad YAML or values that fail
    validation (``key`` is the dotted field path, e.g. ``aliases.dm``), by
    ``NameConverter.from_preset`` for an unknown preset (``key="preset"``),
    and by the CLI when ``--config`` names a file that does not exist.
    """

    def __init__(
        self,
        message: str,
        config_file: Path | None = None,
        key: str | None = None,
    ):
        details: dict[str, Any] = {}
        if config_file:
            details["config_file"] = str(config_file)
        if key:
            details["key"] = key
        super().__init__(message, details)
        self.config_file = config_file
        self.key = key
