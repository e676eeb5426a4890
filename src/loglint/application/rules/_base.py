"""Base rule class for misuse rules.

Provides default implementation of RuleProtocol.
Concrete rules inherit from this.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Self

if TYPE_CHECKING:
    from loglint.domain.model.call_category import CallCategory
    from loglint.domain.model.call_site import CallSite
    from loglint.domain.model.configuration import LintConfig
    from loglint.domain.model.diagnostic import Diagnostic, DiagnosticKind


class BaseRule(ABC):
    """Base class for rules implementing RuleProtocol.

    Concrete rules must:
    1. Set `kind` and `applies_to` class attributes
    2. Implement `check()`
    3. Optionally override `from_config()` for conditional activation

    Rules are stateless. All scratch state lives in local variables of a
    single check() call, so one instance can serve many threads.
    """

    kind: DiagnosticKind
    """Kind of diagnostic this rule reports."""

    applies_to: frozenset[CallCategory]
    """Call categories the rule inspects."""

    @abstractmethod
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

    @classmethod
    def from_config(cls, config: LintConfig) -> Self | None:
        """Create rule from config.

        Default: enabled unless the rule's issue id is in
        config.disabled_rules.

        Returns:
            Rule instance if enabled, None if disabled
        """
        if not config.is_rule_enabled(cls.kind.issue.id):
            return None
        return cls()
