"""Python API entry point.

Example:
    lint = LogLint.from_config(LintConfig(disabled_rules=frozenset({"LogNotTimber"})))
    result = lint.check_paths([Path("app")])
    lint.assert_clean(result)
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Self

from loglint.application.services.detector import Detector
from loglint.application.services.linter import Linter
from loglint.domain.exceptions.violation import LintViolationError
from loglint.domain.model.configuration import LintConfig
from loglint.domain.model.lint_result import LintResult, LintStats
from loglint.infrastructure.adapters.python_host import PythonSourceHost

if TYPE_CHECKING:
    import threading
    from collections.abc import Iterable

    from loglint.domain.ports.reporter import ReporterProtocol


class LogLint:
    """Lints Python sources for logging facade misuse.

    Attributes:
        _config: Active configuration
        _host: Source host building compilation units
        _linter: Runs the detector over files
    """

    def __init__(
        self,
        config: LintConfig | None = None,
        *,
        min_platform_version: int | None = None,
        workers: int = 1,
        reporter: ReporterProtocol | None = None,
    ) -> None:
        """Initialize linter.

        Args:
            config: Lint configuration (default: LintConfig())
            min_platform_version: Platform version the sources target,
                None if unknown
            workers: Files analysed in parallel
            reporter: Optional reporter called after each path run

        Raises:
            ValueError: If workers < 1 or min_platform_version < 1
        """
        self._config = config or LintConfig()
        self._host = PythonSourceHost(self._config, min_platform_version=min_platform_version)
        self._detector = Detector.from_config(self._config)
        self._linter = Linter(self._host, self._detector, workers=workers, reporter=reporter)

    @classmethod
    def from_config(
        cls,
        config: LintConfig,
        *,
        min_platform_version: int | None = None,
        workers: int = 1,
    ) -> Self:
        """Create linter from configuration."""
        return cls(config, min_platform_version=min_platform_version, workers=workers)

    @property
    def config(self) -> LintConfig:
        """Active configuration."""
        return self._config

    def check_source(self, source: str, path: Path | str = "<string>") -> LintResult:
        """Lint source text.

        Args:
            source: Python source
            path: Name reported in diagnostics

        Returns:
            LintResult of the single unit

        Raises:
            ParsingError: If source has a syntax error
        """
        unit = self._host.parse_source(source, Path(path))
        diagnostics = tuple(
            diagnostic
            for call in unit.call_sites
            for diagnostic in self._detector.diagnose(call, unit.min_platform_version)
        )
        stats = LintStats(
            units_analyzed=1,
            call_sites_visited=len(unit.call_sites),
            rules_run=len(self._detector.rules),
            analysis_time_ms=0.0,
        )
        return LintResult(diagnostics=diagnostics, errors=(), stats=stats)

    def check_file(self, path: Path | str) -> LintResult:
        """Lint one file. Unreadable files end up in result.errors."""
        return self._linter.run([Path(path)])

    def check_paths(
        self,
        paths: Iterable[Path | str],
        *,
        cancelled: threading.Event | None = None,
    ) -> LintResult:
        """Lint files and directories.

        Args:
            paths: Files or directories (searched for *.py)
            cancelled: Set from another thread to stop early

        Returns:
            LintResult over every discovered file
        """
        return self._linter.run([Path(p) for p in paths], cancelled=cancelled)

    @staticmethod
    def assert_clean(result: LintResult) -> None:
        """Raise if result carries any diagnostic.

        Raises:
            LintViolationError: With every diagnostic of result
        """
        if result.diagnostics:
            raise LintViolationError(result.diagnostics)
