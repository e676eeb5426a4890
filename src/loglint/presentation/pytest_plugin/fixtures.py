"""pytest fixtures for logging lint.

User overrides loglint_config in their conftest.py.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import pytest

from loglint.domain.model.configuration import LintConfig
from loglint.presentation.api.loglint import LogLint

if TYPE_CHECKING:
    from loglint.domain.model.lint_result import LintResult


def _get_ini_value(config: pytest.Config, name: str, default: str) -> str:
    """Get ini value from pytest config with fallback."""
    value = config.getini(name)
    if value:
        return str(value)
    return default


@pytest.fixture(scope="session")
def loglint_config() -> LintConfig:
    """Default lint configuration.

    User overrides this fixture in their conftest.py.

    Returns:
        LintConfig with Timber / android.util.Log defaults
    """
    return LintConfig()


@pytest.fixture(scope="session")
def loglint(request: pytest.FixtureRequest, loglint_config: LintConfig) -> LogLint:
    """LogLint built from loglint_config.

    Reads loglint_min_platform_version from pytest.ini.
    """
    version = _get_ini_value(request.config, "loglint_min_platform_version", "")
    return LogLint.from_config(
        loglint_config,
        min_platform_version=int(version) if version else None,
    )


@pytest.fixture(scope="session")
def loglint_result(request: pytest.FixtureRequest, loglint: LogLint) -> LintResult:
    """Lint result of the configured source directory.

    Reads loglint_source_dir from pytest.ini (default: "src").

    Raises:
        FileNotFoundError: If the source directory does not exist
    """
    root_dir = Path(str(getattr(request.config, "rootdir", ".")))
    source_path = root_dir / _get_ini_value(request.config, "loglint_source_dir", "src")

    if not source_path.exists():
        raise FileNotFoundError(
            f"loglint_source_dir '{source_path}' does not exist. "
            f"Configure loglint_source_dir in pytest.ini or pyproject.toml."
        )

    return loglint.check_paths([source_path])
