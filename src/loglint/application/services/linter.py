"""Lint runner over many compilation units.

Linter is the primary entry point for linting files.
Composition-based: accepts a source host, a detector and a reporter.
"""

from __future__ import annotations

import logging
import time
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from typing import TYPE_CHECKING, Self

from loglint.application.services.detector import Detector
from loglint.application.sinks import CollectingSink
from loglint.domain.exceptions.parsing import ParsingError
from loglint.domain.model.lint_result import FileError, LintResult, LintStats

if TYPE_CHECKING:
    import threading
    from collections.abc import Iterable
    from pathlib import Path

    from loglint.domain.model.configuration import LintConfig
    from loglint.domain.model.diagnostic import Diagnostic
    from loglint.domain.ports.reporter import ReporterProtocol
    from loglint.domain.ports.source_host import SourceHostProtocol

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class _UnitOutcome:
    """What linting one file produced."""

    diagnostics: tuple[Diagnostic, ...] = ()
    visited: int = 0
    completed: bool = False
    error: FileError | None = None


class Linter:
    """Lints source files through a host.

    Each file is independent: a file that fails to parse is recorded as a
    FileError and the run continues with the next one.

    Example:
        linter = Linter.from_config(PythonSourceHost(), LintConfig())
        result = linter.run([Path("app")])
        if not result.passed:
            print(f"Diagnostics: {result.diagnostic_count}")
    """

    def __init__(
        self,
        host: SourceHostProtocol,
        detector: Detector,
        *,
        workers: int = 1,
        reporter: ReporterProtocol | None = None,
    ) -> None:
        """Initialize linter with dependencies.

        Args:
            host: Turns files into compilation units
            detector: Runs the rules
            workers: Files analysed in parallel (1 = sequential)
            reporter: Optional reporter called with the result

        Raises:
            ValueError: If workers < 1
        """
        if workers < 1:
            raise ValueError(f"workers must be >= 1, got {workers}")

        self._host = host
        self._detector = detector
        self._workers = workers
        self._reporter = reporter

    @classmethod
    def from_config(
        cls,
        host: SourceHostProtocol,
        config: LintConfig,
        *,
        workers: int = 1,
        reporter: ReporterProtocol | None = None,
    ) -> Self:
        """Create linter with the rules config enables."""
        return cls(host, Detector.from_config(config), workers=workers, reporter=reporter)

    def run(
        self,
        paths: Iterable[Path],
        *,
        cancelled: threading.Event | None = None,
    ) -> LintResult:
        """Lint every file under paths.

        Args:
            paths: Files or directories
            cancelled: Set to stop; checked between files and call sites

        Returns:
            LintResult in file then call site order
        """
        start_time = time.perf_counter()

        files = [file for path in paths for file in self._host.discover(path)]
        logger.debug("Discovered %d file(s)", len(files))

        def lint(path: Path) -> _UnitOutcome:
            return self._lint_file(path, cancelled)

        if self._workers == 1 or len(files) < 2:
            outcomes = [lint(path) for path in files]
        else:
            with ThreadPoolExecutor(max_workers=self._workers) as executor:
                outcomes = list(executor.map(lint, files))

        diagnostics = tuple(d for outcome in outcomes for d in outcome.diagnostics)
        errors = tuple(outcome.error for outcome in outcomes if outcome.error is not None)
        analyzed = sum(1 for outcome in outcomes if outcome.completed)

        stats = LintStats(
            units_analyzed=analyzed,
            call_sites_visited=sum(outcome.visited for outcome in outcomes),
            rules_run=len(self._detector.rules),
            analysis_time_ms=(time.perf_counter() - start_time) * 1000,
            cancelled=cancelled is not None and cancelled.is_set(),
        )
        result = LintResult(diagnostics=diagnostics, errors=errors, stats=stats)

        logger.info(
            "Linted %d file(s): %d diagnostic(s), %d error(s)",
            analyzed,
            result.diagnostic_count,
            len(errors),
        )

        if self._reporter is not None:
            self._reporter.report(result)

        return result

    def _lint_file(self, path: Path, cancelled: threading.Event | None) -> _UnitOutcome:
        """Parse and analyse one file. Never raises ParsingError."""
        if cancelled is not None and cancelled.is_set():
            return _UnitOutcome()

        try:
            unit = self._host.parse_file(path)
        except ParsingError as e:
            logger.warning("Skipping %s: %s", e.path, e.reason)
            return _UnitOutcome(error=FileError(path=e.path, reason=e.reason))

        sink = CollectingSink()
        visited = self._detector.analyze_unit(unit, sink, cancelled=cancelled)
        logger.debug("%s: %d call site(s), %d diagnostic(s)", path, visited, len(sink))
        return _UnitOutcome(
            diagnostics=sink.diagnostics,
            visited=visited,
            completed=visited == len(unit.call_sites),
        )
