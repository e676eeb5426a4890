"""String concatenation passed to a facade log call."""

from __future__ import annotations

from typing import TYPE_CHECKING

from loglint.application.rules._base import BaseRule
from loglint.application.rules._expressions import find_concatenation
from loglint.domain.model.call_category import CallCategory
from loglint.domain.model.diagnostic import Diagnostic, DiagnosticKind, FixAction, FixHint

if TYPE_CHECKING:
    from loglint.domain.model.call_site import CallSite
    from loglint.domain.model.configuration import LintConfig


class ConcatenationRule(BaseRule):
    """Flags ``Timber.d("count=" + n)``.

    One diagnostic per offending argument, anchored at the concatenation.
    Concatenations of literals only fold to a constant and are fine.
    """

    kind = DiagnosticKind.STRING_CONCATENATION
    applies_to = frozenset({CallCategory.LOG_LEVEL})

    def check(
        self,
        call: CallSite,
        config: LintConfig,
        min_platform_version: int | None,
    ) -> tuple[Diagnostic, ...]:
        """Report concatenated arguments."""
        diagnostics: list[Diagnostic] = []
        for argument in call.arguments:
            concatenation = find_concatenation(argument)
            if concatenation is None:
                continue
            diagnostics.append(
                Diagnostic(
                    kind=self.kind,
                    anchor=concatenation,
                    message=(
                        "Replace String concatenation with "
                        f"{config.facade_display_name}'s string formatting"
                    ),
                    fix_hint=FixHint(
                        action=FixAction.USE_FORMAT_ARGUMENTS,
                        name="Replace with format string and arguments",
                        target=concatenation.source_range,
                    ),
                )
            )
        return tuple(diagnostics)
