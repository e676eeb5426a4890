"""Reporter protocol for output formatting.

Users extend loglint by implementing this Protocol.
NOT rich-specific - users can adapt to any output format.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from loglint.domain.model.lint_result import LintResult


class ReporterProtocol(Protocol):
    """Contract for reporters.

    loglint provides PlainTextReporter, JSONReporter and ConsoleReporter.
    """

    def report(self, result: LintResult) -> object:
        """Report lint results.

        Implementation decides output format and destination.

        Args:
            result: Complete lint result with diagnostics, errors, stats
        """
        ...
