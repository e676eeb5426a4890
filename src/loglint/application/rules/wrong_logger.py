"""Platform logger used where the facade should be."""

from __future__ import annotations

from typing import TYPE_CHECKING

from loglint.application.rules._base import BaseRule
from loglint.domain.model.call_category import CallCategory
from loglint.domain.model.diagnostic import Diagnostic, DiagnosticKind, FixAction, FixHint

if TYPE_CHECKING:
    from loglint.domain.model.call_site import CallSite
    from loglint.domain.model.configuration import LintConfig


class WrongLoggerRule(BaseRule):
    """Flags every call into the platform logger.

    Platform logger calls get this diagnostic and nothing else: the
    classifier never routes them to the format checks.
    """

    kind = DiagnosticKind.WRONG_LOGGER_USED
    applies_to = frozenset({CallCategory.PLATFORM_LOGGER})

    def check(
        self,
        call: CallSite,
        config: LintConfig,
        min_platform_version: int | None,
    ) -> tuple[Diagnostic, ...]:
        """Report the call itself."""
        facade = config.facade_display_name
        return (
            Diagnostic(
                kind=self.kind,
                anchor=call,
                message=f"Using '{config.platform_display_name}' instead of '{facade}'",
                fix_hint=FixHint(
                    action=FixAction.USE_FACADE,
                    name=f"Replace with {facade}.{call.method_name}()",
                    target=call.source_range,
                ),
            ),
        )
