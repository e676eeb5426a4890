"""Base reporter class for output formatting.

Provides default implementation of ReporterProtocol.
Concrete reporters inherit from this.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from loglint.domain.model.lint_result import LintResult


class BaseReporter(ABC):
    """Base class for reporters implementing ReporterProtocol."""

    @abstractmethod
    def report(self, result: LintResult) -> object:
        """Report lint results.

        Args:
            result: Complete lint result
        """
