"""Exception message logged next to the exception itself."""

from __future__ import annotations

from typing import TYPE_CHECKING

from loglint.application.rules._base import BaseRule
from loglint.application.rules._expressions import exception_message_receiver
from loglint.domain.model.call_category import CallCategory
from loglint.domain.model.diagnostic import Diagnostic, DiagnosticKind, FixAction, FixHint
from loglint.domain.model.enums import ExpressionKind

if TYPE_CHECKING:
    from loglint.domain.model.argument import Argument
    from loglint.domain.model.call_site import CallSite
    from loglint.domain.model.configuration import LintConfig

_REDUNDANT = "Explicitly logging exception message is redundant"
_EMPTY = "Use single-argument log method instead of null/empty message"


class ExceptionMessageRule(BaseRule):
    """Flags redundant exception messages.

    - ``Timber.e(t, t.getMessage())``: message derived from t
    - ``Timber.e(t, "")`` / ``Timber.e(t, null)``: provably empty message
    - ``Timber.e(t.getMessage())``: log the throwable instead

    Messages whose value cannot be proven (fields, parameters, calls) are
    never reported.
    """

    kind = DiagnosticKind.REDUNDANT_EXCEPTION_MESSAGE
    applies_to = frozenset({CallCategory.LOG_LEVEL})

    def check(
        self,
        call: CallSite,
        config: LintConfig,
        min_platform_version: int | None,
    ) -> tuple[Diagnostic, ...]:
        """Report a redundant message argument."""
        arguments = call.arguments

        if len(arguments) == 2 and arguments[0].is_throwable:
            throwable, message = arguments
            if exception_message_receiver(message, config, throwable) is not None:
                return (self._remove(message, _REDUNDANT),)
            if _is_empty(message):
                return (self._remove(message, _EMPTY),)
            return ()

        if len(arguments) == 1 and not arguments[0].is_throwable:
            message = arguments[0]
            receiver = exception_message_receiver(message, config)
            if receiver is not None:
                return (self._replace_with_throwable(message, receiver),)

        return ()

    def _remove(self, message: Argument, text: str) -> Diagnostic:
        return Diagnostic(
            kind=self.kind,
            anchor=message,
            message=text,
            fix_hint=FixHint(
                action=FixAction.REMOVE_ARGUMENT,
                name="Remove redundant argument",
                target=message.source_range,
            ),
        )

    def _replace_with_throwable(self, message: Argument, receiver: Argument) -> Diagnostic:
        return Diagnostic(
            kind=self.kind,
            anchor=message,
            message=_REDUNDANT,
            fix_hint=FixHint(
                action=FixAction.REPLACE_WITH_THROWABLE,
                name="Replace message with throwable",
                target=message.source_range,
                replacement=receiver.text,
            ),
        )


def _is_empty(message: Argument) -> bool:
    """True for a null literal or a constant empty string."""
    if message.kind is ExpressionKind.NULL_LITERAL:
        return True
    return message.literal_value == ""
