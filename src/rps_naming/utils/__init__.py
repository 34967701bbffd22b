"""Utility helpers for rps-naming."""

from rps_naming.utils.console import console, print_error, print_panel
from rps_naming.utils.logging import configure_logging

__all__ = [
    "configure_logging",
    "console",
    "print_error",
    "print_panel",
]
