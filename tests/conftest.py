"""
Pytest configuration and fixtures for Accountkit tests.
"""

import tempfile
import textwrap
from pathlib import Path

import pytest

from accountkit.core import AccountkitCore
from accountkit.settings import AccountkitSettings


@pytest.fixture
def temp_dir():
    """Provide a temporary directory for tests."""
    with tempfile.TemporaryDirectory() as temp_dir:
        yield Path(temp_dir)


@pytest.fixture
def settings():
    """Default settings, ignoring any .env file."""
    return AccountkitSettings(_env_file=None)


@pytest.fixture
def strict_settings():
    """Settings that refuse to fall back to a shared primary group."""
    return AccountkitSettings(_env_file=None, missing_group_policy="strict")


@pytest.fixture
def core(settings):
    """AccountkitCore bound to the default settings."""
    return AccountkitCore(settings=settings)


@pytest.fixture
def write_main(temp_dir):
    """Write a main.py with the given body and return its path."""

    def _write(body: str) -> Path:
        main_file = temp_dir / "main.py"
        main_file.write_text(textwrap.dedent(body))
        return main_file

    return _write
