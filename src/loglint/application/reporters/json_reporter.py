"""JSON reporter for machine-readable output.

Stdlib-only reporter for JSON output.
"""

from __future__ import annotations

import json
import sys
from typing import TYPE_CHECKING, TextIO

from loglint.application.reporters._base import BaseReporter

if TYPE_CHECKING:
    from loglint.domain.model.diagnostic import Diagnostic
    from loglint.domain.model.lint_result import LintResult


class JSONReporter(BaseReporter):
    """JSON reporter for machine-readable output.

    Outputs lint results as JSON for CI/CD integration or parsing by
    other tools.
    """

    def __init__(
        self,
        output: TextIO | None = None,
        *,
        indent: int | None = 2,
    ) -> None:
        """Initialize reporter.

        Args:
            output: Output stream (default: sys.stdout)
            indent: JSON indentation (default: 2, None for compact)
        """
        self._output = output if output is not None else sys.stdout
        self._indent = indent

    def report(self, result: LintResult) -> None:
        """Report lint results as JSON.

        Args:
            result: Complete lint result
        """
        data = self._result_to_dict(result)
        json.dump(data, self._output, indent=self._indent)
        self._output.write("\n")

    def _result_to_dict(self, result: LintResult) -> dict[str, object]:
        """Convert LintResult to JSON-serializable dict."""
        return {
            "passed": result.passed,
            "summary": {
                "diagnostic_count": result.diagnostic_count,
                "error_count": result.error_count,
                "warning_count": result.warning_count,
            },
            "diagnostics": [self._diagnostic_to_dict(d) for d in result.diagnostics],
            "errors": [{"file": str(e.path), "reason": e.reason} for e in result.errors],
            "stats": {
                "units_analyzed": result.stats.units_analyzed,
                "call_sites_visited": result.stats.call_sites_visited,
                "rules_run": result.stats.rules_run,
                "analysis_time_ms": result.stats.analysis_time_ms,
                "cancelled": result.stats.cancelled,
            },
        }

    def _diagnostic_to_dict(self, diagnostic: Diagnostic) -> dict[str, object]:
        """Convert Diagnostic to JSON-serializable dict."""
        issue = diagnostic.issue
        fix = diagnostic.fix_hint
        location = diagnostic.source_range
        return {
            "id": issue.id,
            "kind": diagnostic.kind.name,
            "message": diagnostic.message,
            "severity": issue.severity.name,
            "category": issue.category.name,
            "priority": issue.priority,
            "location": {
                "file": str(location.file),
                "line": location.line,
                "column": location.column,
                "end_line": location.end_line,
                "end_column": location.end_column,
            },
            "fix": (
                None
                if fix is None
                else {"action": fix.action.name, "name": fix.name, "replacement": fix.replacement}
            ),
            "details": {k: v for k, v in diagnostic.details.items()},
        }
