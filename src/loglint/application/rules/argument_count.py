"""Format template argument count check."""

from __future__ import annotations

from typing import TYPE_CHECKING

from loglint.application.rules._base import BaseRule
from loglint.application.rules._format_call import bind_format_call
from loglint.domain.model.call_category import CallCategory
from loglint.domain.model.diagnostic import Diagnostic, DiagnosticKind

if TYPE_CHECKING:
    from loglint.application.rules._format_call import FormatCall
    from loglint.domain.model.call_site import CallSite
    from loglint.domain.model.configuration import LintConfig


class ArgumentCountRule(BaseRule):
    """Flags ``Timber.d("value=%s", 1, 2)`` and ``Timber.d("%s %s", 1)``.

    Exactly one diagnostic per call. Templates without specifiers are
    never checked.
    """

    kind = DiagnosticKind.ARGUMENT_COUNT_MISMATCH
    applies_to = frozenset({CallCategory.LOG_LEVEL})

    def check(
        self,
        call: CallSite,
        config: LintConfig,
        min_platform_version: int | None,
    ) -> tuple[Diagnostic, ...]:
        """Report a mismatch between required and supplied arguments."""
        format_call = bind_format_call(call)
        if format_call is None or format_call.required == 0:
            return ()
        if format_call.count_matches:
            return ()
        return (count_mismatch(format_call),)


def count_mismatch(format_call: FormatCall) -> Diagnostic:
    """Build the count mismatch diagnostic for a call."""
    return Diagnostic(
        kind=DiagnosticKind.ARGUMENT_COUNT_MISMATCH,
        anchor=format_call.call,
        message=(
            f"Wrong argument count, format string `{format_call.template.template}` "
            f"requires `{format_call.required}` but format call supplies "
            f"`{format_call.supplied}`"
        ),
        details={"required": format_call.required, "supplied": format_call.supplied},
    )
