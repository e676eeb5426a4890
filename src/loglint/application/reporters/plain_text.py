"""Plain text reporter using print().

Stdlib-only reporter for simple text output.
"""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING, TextIO

from loglint.application.reporters._base import BaseReporter

if TYPE_CHECKING:
    from loglint.domain.model.diagnostic import Diagnostic
    from loglint.domain.model.lint_result import FileError, LintResult


class PlainTextReporter(BaseReporter):
    """Plain text reporter using print().

    Outputs to stdout by default, can be configured for any TextIO.
    """

    def __init__(self, output: TextIO | None = None) -> None:
        """Initialize reporter.

        Args:
            output: Output stream (default: sys.stdout)
        """
        self._output = output if output is not None else sys.stdout

    def report(self, result: LintResult) -> None:
        """Report lint results as plain text.

        Args:
            result: Complete lint result
        """
        self._report_header()
        self._report_summary(result)

        if result.diagnostics:
            self._report_diagnostics(result.diagnostics)

        if result.errors:
            self._report_errors(result.errors)

        self._report_footer(result)

    def _write(self, text: str = "") -> None:
        """Write line to output."""
        print(text, file=self._output)

    def _report_header(self) -> None:
        self._write("=" * 70)
        self._write("Logging Lint Results")
        self._write("=" * 70)

    def _report_summary(self, result: LintResult) -> None:
        self._write()
        self._write("Summary:")
        self._write(f"  Files: {result.stats.units_analyzed}")
        self._write(f"  Call sites: {result.stats.call_sites_visited}")
        self._write(f"  Diagnostics: {result.diagnostic_count}")
        self._write(f"    Errors: {result.error_count}")
        self._write(f"    Warnings: {result.warning_count}")
        self._write(f"  Status: {'PASS' if result.passed else 'FAIL'}")

    def _report_diagnostics(self, diagnostics: tuple[Diagnostic, ...]) -> None:
        self._write()
        self._write("-" * 70)
        self._write(f"Diagnostics ({len(diagnostics)}):")
        self._write("-" * 70)

        for i, diagnostic in enumerate(diagnostics, start=1):
            issue = diagnostic.issue
            self._write()
            self._write(f"{i}. [{issue.severity.name}] {issue.id}")
            self._write(f"   {diagnostic.message}")
            location = diagnostic.source_range
            self._write(f"   At: {location.file}:{location.span}")
            if diagnostic.fix_hint is not None:
                self._write(f"   Fix: {diagnostic.fix_hint.name}")

    def _report_errors(self, errors: tuple[FileError, ...]) -> None:
        self._write()
        self._write(f"Skipped files ({len(errors)}):")
        for error in errors:
            self._write(f"  {error}")

    def _report_footer(self, result: LintResult) -> None:
        self._write()
        self._write("=" * 70)
        status = "PASSED" if result.passed else "FAILED"
        self._write(f"Result: {status}")
        self._write("=" * 70)
