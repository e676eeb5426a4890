"""Facade tags longer than the legacy platform limit."""

from __future__ import annotations

from typing import TYPE_CHECKING

from loglint.application.rules._base import BaseRule
from loglint.domain.model.call_category import CallCategory
from loglint.domain.model.diagnostic import Diagnostic, DiagnosticKind, FixAction, FixHint

if TYPE_CHECKING:
    from loglint.domain.model.call_site import CallSite
    from loglint.domain.model.configuration import LintConfig


class TagLengthRule(BaseRule):
    """Flags constant tags over config.max_tag_length characters.

    Silent when the unit's minimum platform version is at or above
    config.tag_limit_lifted_at. An unknown minimum version counts as
    below every threshold.
    """

    kind = DiagnosticKind.TAG_TOO_LONG
    applies_to = frozenset({CallCategory.TAG})

    def check(
        self,
        call: CallSite,
        config: LintConfig,
        min_platform_version: int | None,
    ) -> tuple[Diagnostic, ...]:
        """Report the tag argument if it is too long."""
        if not call.arguments:
            return ()
        if min_platform_version is not None and min_platform_version >= config.tag_limit_lifted_at:
            return ()

        argument = call.arguments[0]
        tag = argument.literal_value
        if tag is None or len(tag) <= config.max_tag_length:
            return ()

        overflow = len(tag) - config.max_tag_length
        return (
            Diagnostic(
                kind=self.kind,
                anchor=argument,
                message=(
                    f"The logging tag can be at most {config.max_tag_length} characters, "
                    f"was {len(tag)} ({tag})"
                ),
                fix_hint=FixHint(
                    action=FixAction.TRUNCATE_TAG,
                    name=f"Strip last {overflow} {'char' if overflow == 1 else 'chars'}",
                    target=argument.source_range,
                    replacement=tag[: config.max_tag_length],
                ),
                details={"length": len(tag), "overflow": overflow},
            ),
        )
