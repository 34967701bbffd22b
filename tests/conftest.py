"""Pytest configuration and fixtures for rps-naming tests."""

import logging
from collections.abc import Iterator
from pathlib import Path

import pytest

from rps_naming.naming import NameConverter


@pytest.fixture(autouse=True)
def reset_package_logger() -> Iterator[None]:
    """Undo handler and level changes made by configure_logging()."""
    package_logger = logging.getLogger("rps_naming")
    handlers = list(package_logger.handlers)
    level = package_logger.level
    propagate = package_logger.propagate
    yield
    package_logger.handlers[:] = handlers
    package_logger.setLevel(level)
    package_logger.propagate = propagate


@pytest.fixture
def project_dir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Run the test from an empty working directory.

    Returns:
        Path to the temporary working directory
    """
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture
def legacy_converter() -> NameConverter:
    """Converter using the legacy lookup tables."""
    return NameConverter.from_preset("legacy")
