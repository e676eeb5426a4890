"""Throwable passed anywhere but first."""

from __future__ import annotations

from typing import TYPE_CHECKING

from loglint.application.rules._base import BaseRule
from loglint.application.rules._expressions import find_concatenation
from loglint.domain.model.call_category import CallCategory
from loglint.domain.model.diagnostic import Diagnostic, DiagnosticKind, FixAction, FixHint

if TYPE_CHECKING:
    from loglint.domain.model.call_site import CallSite
    from loglint.domain.model.configuration import LintConfig


class ThrowableOrderRule(BaseRule):
    """Flags ``Timber.e("msg", t)``.

    Once per call, for the first Throwable found after position 0.
    Arguments already reported as concatenations are skipped.
    """

    kind = DiagnosticKind.THROWABLE_NOT_FIRST
    applies_to = frozenset({CallCategory.LOG_LEVEL})

    def check(
        self,
        call: CallSite,
        config: LintConfig,
        min_platform_version: int | None,
    ) -> tuple[Diagnostic, ...]:
        """Report the call if a Throwable is out of place."""
        for index, argument in enumerate(call.arguments):
            if index == 0 or not argument.is_throwable:
                continue
            if find_concatenation(argument) is not None:
                continue
            return (
                Diagnostic(
                    kind=self.kind,
                    anchor=call,
                    message="Throwable should be first argument",
                    fix_hint=FixHint(
                        action=FixAction.MOVE_THROWABLE_FIRST,
                        name=f"Move '{argument.text}' to the first position",
                        target=call.source_range,
                    ),
                    details={"argument_index": index},
                ),
            )
        return ()
