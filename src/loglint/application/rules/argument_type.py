"""Format template argument type check."""

from __future__ import annotations

from typing import TYPE_CHECKING

from loglint.application.formatting.compatibility import Compatibility, check
from loglint.application.rules._base import BaseRule
from loglint.application.rules._format_call import bind_format_call
from loglint.domain.model.call_category import CallCategory
from loglint.domain.model.diagnostic import Diagnostic, DiagnosticKind

if TYPE_CHECKING:
    from loglint.application.rules._format_call import FormatCall
    from loglint.domain.model.argument import Argument
    from loglint.domain.model.call_site import CallSite
    from loglint.domain.model.configuration import LintConfig
    from loglint.domain.model.format_specifier import FormatSpecifier


class ArgumentTypeRule(BaseRule):
    """Flags ``Timber.d("%d", "text")``.

    Runs only when the argument count matches, so every specifier has
    its argument. Arguments of UNKNOWN type are never judged.

    A date/time conversion with an unknown sub-letter is reported as a
    format misuse (NESTED_FORMAT_CALL kind) instead of a type mismatch,
    unless that issue is disabled.
    """

    kind = DiagnosticKind.ARGUMENT_TYPE_MISMATCH
    applies_to = frozenset({CallCategory.LOG_LEVEL})

    def check(
        self,
        call: CallSite,
        config: LintConfig,
        min_platform_version: int | None,
    ) -> tuple[Diagnostic, ...]:
        """Report every specifier whose argument has the wrong type."""
        format_call = bind_format_call(call)
        if format_call is None or format_call.required == 0:
            return ()
        if not format_call.count_matches:
            return ()

        report_suffix = config.is_rule_enabled(DiagnosticKind.NESTED_FORMAT_CALL.issue.id)
        diagnostics: list[Diagnostic] = []
        for number, specifier in enumerate(format_call.template.specifiers, start=1):
            argument = format_call.argument_for(specifier)
            outcome = check(specifier, argument.static_type)
            if outcome is Compatibility.ACCEPTED:
                continue
            if outcome is Compatibility.WRONG_SUFFIX and not report_suffix:
                continue
            diagnostics.append(_mismatch(format_call, number, specifier, argument, outcome))
        return tuple(diagnostics)


def _mismatch(
    format_call: FormatCall,
    number: int,
    specifier: FormatSpecifier,
    argument: Argument,
    outcome: Compatibility,
) -> Diagnostic:
    """Build a type or suffix diagnostic for one specifier."""
    template = format_call.template.template
    received = argument.static_type.display_name
    position = format_call.call_position(specifier)
    tail = (
        f"in `{template}`: conversion is '`{specifier.conversion_text}`', "
        f"received `{received}` (argument #{position} in method call)"
    )

    if outcome is Compatibility.WRONG_SUFFIX:
        kind = DiagnosticKind.NESTED_FORMAT_CALL
        message = f"Wrong suffix for date format '#{number}' {tail}"
    elif specifier.is_date_time:
        kind = DiagnosticKind.ARGUMENT_TYPE_MISMATCH
        message = f"Wrong argument type for date formatting argument '#{number}' {tail}"
    else:
        kind = DiagnosticKind.ARGUMENT_TYPE_MISMATCH
        message = f"Wrong argument type for formatting argument '#{number}' {tail}"

    return Diagnostic(
        kind=kind,
        anchor=argument,
        message=message,
        details={
            "specifier": specifier.text,
            "conversion": specifier.conversion_text,
            "received": received,
            "argument_position": position,
        },
    )
