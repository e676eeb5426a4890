"""Lint violation exception."""

from __future__ import annotations

from typing import TYPE_CHECKING

from loglint.domain.exceptions.base import LogLintError

if TYPE_CHECKING:
    from loglint.domain.model.diagnostic import Diagnostic


class LintViolationError(LogLintError):
    """Logging misuse found.

    Raised by assert_clean() when diagnostics were reported.

    Attributes:
        diagnostics: All reported diagnostics
    """

    def __init__(self, diagnostics: tuple[Diagnostic, ...]) -> None:
        if not diagnostics:
            raise ValueError("LintViolationError requires at least one diagnostic")

        self.diagnostics = diagnostics

        msg_parts = [f"Found {len(diagnostics)} logging issue(s):"]
        for d in diagnostics:
            msg_parts.append(str(d))

        super().__init__("\n".join(msg_parts))
