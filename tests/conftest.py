"""Pytest configuration and shared fixtures for the tinymark test suite.

This module provides shared fixtures and test configuration used across the
entire test suite.
"""

import logging
import os
import shutil
import tempfile
from pathlib import Path
from typing import Generator

import pytest
from hypothesis import Phase, Verbosity, settings

# Register custom Hypothesis profiles
settings.register_profile("ci", max_examples=100, verbosity=Verbosity.verbose)
settings.register_profile("dev", max_examples=20)
settings.register_profile(
    "debug", max_examples=10, verbosity=Verbosity.verbose, phases=[Phase.explicit, Phase.reuse, Phase.generate]
)

# Load profile from environment or use default
settings.load_profile(os.getenv("HYPOTHESIS_PROFILE", "dev"))


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests - fast, isolated component tests")
    config.addinivalue_line("markers", "integration: Integration tests - component interaction tests")
    config.addinivalue_line("markers", "e2e: End-to-end tests - full pipeline tests")
    config.addinivalue_line("markers", "slow: Slow tests that may take several seconds")
    config.addinivalue_line("markers", "cli: Tests related to command-line interface")


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Provide a temporary directory for test files.

    Yields
    ------
    Path
        Temporary directory path that will be cleaned up after test.

    """
    temp_path = Path(tempfile.mkdtemp(prefix="tinymark_test_"))
    try:
        yield temp_path
    finally:
        shutil.rmtree(temp_path, ignore_errors=True)


@pytest.fixture
def isolated_config(temp_dir: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Run in an empty working directory with no discoverable config files.

    Clears ``TINYMARK_*`` environment variables and points the home directory
    at the temporary directory so user-level config files are not picked up.
    """
    for name in list(os.environ):
        if name.startswith("TINYMARK_"):
            monkeypatch.delenv(name)
    monkeypatch.chdir(temp_dir)
    monkeypatch.setattr(Path, "home", classmethod(lambda cls: temp_dir))
    return temp_dir


@pytest.fixture
def sample_markup() -> str:
    """Markup exercising every block construct."""
    return (
        "# Title\n"
        "Intro with **bold**, *italic* and `code`.\n"
        "\n"
        "> quoted\n"
        ">\n"
        "- one\n"
        "- two\n"
        "1. first\n"
        "```python\n"
        "print('hi')\n"
        "```\n"
        "---\n"
    )


@pytest.fixture(autouse=True)
def restore_root_logger() -> Generator[None, None, None]:
    """Remove handlers installed by configure_logging() and restore the root level.

    Handlers owned by pytest are left for pytest to manage.
    """
    root_logger = logging.getLogger()
    handlers = list(root_logger.handlers)
    level = root_logger.level
    yield
    for handler in list(root_logger.handlers):
        if handler in handlers or type(handler).__module__.startswith("_pytest"):
            continue
        root_logger.removeHandler(handler)
        handler.close()
    root_logger.setLevel(level)
