"""Pytest configuration and shared fixtures for the wiki2md test suite.

This module provides shared fixtures, test configuration, and utilities
that are used across the entire test suite.
"""

import logging
import os
from pathlib import Path

import pytest
from hypothesis import Phase, Verbosity, settings

from wiki2md.logging_utils import PACKAGE_LOGGER_NAME

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
    config.addinivalue_line("markers", "fuzzing: Property-based tests generated with Hypothesis")


@pytest.fixture(autouse=True)
def reset_package_logger():
    """Undo any handler configuration a CLI test made on the package logger."""
    package_logger = logging.getLogger(PACKAGE_LOGGER_NAME)
    saved = (package_logger.level, package_logger.propagate, list(package_logger.handlers))
    yield
    for handler in list(package_logger.handlers):
        if handler not in saved[2]:
            package_logger.removeHandler(handler)
            handler.close()
    package_logger.setLevel(saved[0])
    package_logger.propagate = saved[1]


@pytest.fixture
def temp_dir(tmp_path: Path) -> Path:
    """Provide a temporary directory for test files.

    Returns
    -------
    Path
        Temporary directory path that is cleaned up by pytest.

    """
    return tmp_path


@pytest.fixture
def sample_wikitext() -> str:
    """Provide sample wikitext content for testing.

    Returns
    -------
    str
        Standard sample article used across multiple tests.

    """
    return (
        "== Sample Article ==\n"
        "\n"
        "This is a '''bold''' statement with ''italic'' words.\n"
        "\n"
        "=== Links ===\n"
        "* [[Main Page]]\n"
        "* [[Help:Contents|Help Contents]]\n"
        "* [https://example.com Example]\n"
        "\n"
        "# First\n"
        "# Second\n"
    )
