"""Rule protocol for misuse rules.

Users extend loglint by implementing this Protocol.
Rules are stateless and inspect one call site at a time.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, Self

if TYPE_CHECKING:
    from loglint.domain.model.call_site import CallSite
    from loglint.domain.model.configuration import LintConfig
    from loglint.domain.model.diagnostic import Diagnostic, DiagnosticKind


class RuleProtocol(Protocol):
    """Contract for rules.

    Key pattern: from_config() returns None if the rule is disabled.

    Example:
        class NoVerboseRule:
            kind = DiagnosticKind.WRONG_LOGGER_USED
            applies_to = frozenset({CallCategory.LOG_LEVEL})

            def check(
                self,
                call: CallSite,
                config: LintConfig,
                min_platform_version: int | None,
            ) -> tuple[Diagnostic, ...]:
                if call.method_name != "v":
                    return ()
                return (Diagnostic(kind=self.kind, anchor=call, message="..."),)

            @classmethod
            def from_config(cls, config: LintConfig) -> Self | None:
                return cls()
    """

    kind: DiagnosticKind
    """Kind of diagnostic this rule reports."""

    applies_to: frozenset[object]
    """Call categories (CallCategory members) the rule inspects."""

    def check(
        self,
        call: CallSite,
        config: LintConfig,
        min_platform_version: int | None,
    ) -> tuple[Diagnostic, ...]:
        """Inspect one classified call site.

        Args:
            call: Call site to inspect
            config: Lint configuration
            min_platform_version: Unit's minimum platform version, None if unknown

        Returns:
            Diagnostics found (empty if none)
        """
        ...

    @classmethod
    def from_config(cls, config: LintConfig) -> Self | None:
        """Create rule from config. None if disabled."""
        ...
