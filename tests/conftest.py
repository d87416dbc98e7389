"""
Pytest configuration for the jsgraft test suite.

This conftest.py provides:
- Machine-mode logging (suppresses console output)
- Shared builder and format-option fixtures
"""

import os

import pytest

from jsgraft.logging_config import setup_logging
from jsgraft.tree import TreeBuilder


def pytest_configure(config):
    """Run the library in machine mode for quiet test output."""
    os.environ.setdefault("JSGRAFT_MACHINE_MODE", "1")


@pytest.fixture(autouse=True)
def setup_test_logging():
    """
    Machine mode by default - suppress console logs for clean test output.
    """
    setup_logging(level="DEBUG", suppress_console=True, enable_file_logging=False, force=True)


@pytest.fixture
def builder():
    """A fresh TreeBuilder with the default parser and classification."""
    return TreeBuilder()


@pytest.fixture
def compact():
    """Printer options for compact output."""
    return {"format": {"compact": True}}
