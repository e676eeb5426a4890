"""Formatting routine nested inside a facade log call."""

from __future__ import annotations

from typing import TYPE_CHECKING

from loglint.application.classifier import is_facade_log_method
from loglint.application.rules._base import BaseRule
from loglint.domain.model.call_category import CallCategory
from loglint.domain.model.diagnostic import Diagnostic, DiagnosticKind, FixAction, FixHint

if TYPE_CHECKING:
    from loglint.domain.model.call_site import CallSite
    from loglint.domain.model.configuration import LintConfig


class NestedFormatRule(BaseRule):
    """Flags ``Timber.d(String.format(...))``.

    Walks from the format call up to the nearest enclosing call in the
    same method. Only a facade log-level call there is a finding.
    """

    kind = DiagnosticKind.NESTED_FORMAT_CALL
    applies_to = frozenset({CallCategory.FORMAT_ROUTINE})

    def check(
        self,
        call: CallSite,
        config: LintConfig,
        min_platform_version: int | None,
    ) -> tuple[Diagnostic, ...]:
        """Report the format call if a facade call encloses it."""
        enclosing = call.enclosing_call()
        if enclosing is None or enclosing.callee is None:
            return ()
        if not is_facade_log_method(enclosing.callee, config):
            return ()

        return (
            Diagnostic(
                kind=self.kind,
                anchor=call,
                message=(
                    f"Using '{config.format_display_name}' inside of "
                    f"'{config.facade_display_name}'"
                ),
                fix_hint=FixHint(
                    action=FixAction.UNWRAP_FORMAT_CALL,
                    name=f"Remove {call.callee.owner.rpartition('.')[2]}.{call.method_name}(...)",
                    target=call.source_range,
                ),
                details={"enclosing": enclosing.callee.fqn},
            ),
        )
