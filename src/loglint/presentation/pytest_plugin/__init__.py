"""pytest plugin for loglint.

Provides fixtures:
    loglint_config: Lint configuration (override in conftest.py)
    loglint: LogLint entry point
    loglint_result: LintResult of the source directory

Configuration (pytest.ini or pyproject.toml):
    loglint_source_dir: Source directory to lint (default: "src")
    loglint_min_platform_version: Platform version the sources target
"""

from __future__ import annotations

from typing import TYPE_CHECKING

# Register fixtures from fixtures module
from loglint.presentation.pytest_plugin.fixtures import (
    loglint,
    loglint_config,
    loglint_result,
)

if TYPE_CHECKING:
    import pytest

# Export fixtures for pytest discovery
__all__ = [
    "loglint",
    "loglint_config",
    "loglint_result",
]


def pytest_addoption(parser: pytest.Parser) -> None:
    """Register ini options."""
    parser.addini("loglint_source_dir", "Source directory to lint", default="src")
    parser.addini(
        "loglint_min_platform_version",
        "Minimum platform version the sources target",
        default="",
    )


def pytest_configure(config: pytest.Config) -> None:
    """Configure pytest plugin with markers."""
    config.addinivalue_line(
        "markers",
        "loglint: mark test as logging lint test",
    )
