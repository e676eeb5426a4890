"""Per call site detector.

Classifies a call, runs the rules of its category and hands the
diagnostics to a sink. Stateless: one Detector can serve any number of
units and threads.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import TYPE_CHECKING, Self

from loglint.application.classifier import classify_call
from loglint.application.rules import rules_from_config
from loglint.application.sinks import CollectingSink
from loglint.domain.model.call_category import CallCategory
from loglint.domain.model.configuration import LintConfig

if TYPE_CHECKING:
    import threading

    from loglint.domain.model.call_site import CallSite
    from loglint.domain.model.compilation_unit import CompilationUnit
    from loglint.domain.model.diagnostic import Diagnostic
    from loglint.domain.ports.rule import RuleProtocol
    from loglint.domain.ports.sink import DiagnosticSinkProtocol

logger = logging.getLogger(__name__)

# Categories whose checks all read arguments
_ARGUMENT_CATEGORIES = frozenset({CallCategory.TAG, CallCategory.LOG_LEVEL})


class Detector:
    """Runs the rule set against call sites.

    Example:
        detector = Detector.from_config(LintConfig())
        sink = CollectingSink()
        detector.analyze_unit(unit, sink)
        for diagnostic in sink.diagnostics:
            print(diagnostic)
    """

    def __init__(
        self,
        config: LintConfig | None = None,
        *,
        rules: Sequence[RuleProtocol] | None = None,
    ) -> None:
        """Initialize detector.

        Args:
            config: Lint configuration (default: LintConfig())
            rules: Rules to run (default: rules enabled by config)
        """
        self._config = config or LintConfig()
        self._rules = tuple(rules) if rules is not None else rules_from_config(self._config)
        self._by_category: dict[CallCategory, tuple[RuleProtocol, ...]] = {
            category: tuple(r for r in self._rules if category in r.applies_to)
            for category in CallCategory
        }

    @classmethod
    def from_config(cls, config: LintConfig) -> Self:
        """Create detector with the rules config enables."""
        return cls(config)

    @property
    def config(self) -> LintConfig:
        """Active configuration."""
        return self._config

    @property
    def rules(self) -> tuple[RuleProtocol, ...]:
        """Active rules in run order."""
        return self._rules

    def visit(
        self,
        call: CallSite,
        sink: DiagnosticSinkProtocol,
        min_platform_version: int | None = None,
    ) -> CallCategory:
        """Classify one call site and report its diagnostics.

        Diagnostics reach the sink only after every rule has finished with
        the call, so a call is never partially reported.

        Args:
            call: Call site to inspect
            sink: Receives diagnostics
            min_platform_version: Unit's minimum platform version, None if unknown

        Returns:
            The call's category
        """
        category = classify_call(call, self._config)
        if category is CallCategory.UNRELATED:
            return category
        if category in _ARGUMENT_CATEGORIES and not call.arguments:
            return category

        found: list[Diagnostic] = []
        for rule in self._by_category[category]:
            found.extend(rule.check(call, self._config, min_platform_version))

        for diagnostic in found:
            sink.report(diagnostic)
        return category

    def diagnose(
        self,
        call: CallSite,
        min_platform_version: int | None = None,
    ) -> tuple[Diagnostic, ...]:
        """Diagnostics of one call site.

        Args:
            call: Call site to inspect
            min_platform_version: Unit's minimum platform version, None if unknown

        Returns:
            Diagnostics in rule order
        """
        sink = CollectingSink()
        self.visit(call, sink, min_platform_version)
        return sink.diagnostics

    def analyze_unit(
        self,
        unit: CompilationUnit,
        sink: DiagnosticSinkProtocol,
        *,
        cancelled: threading.Event | None = None,
    ) -> int:
        """Visit every call site of a unit in order.

        Cancellation is checked between call sites.

        Args:
            unit: Compilation unit
            sink: Receives diagnostics
            cancelled: Set to stop before the next call site

        Returns:
            Number of call sites visited
        """
        visited = 0
        for call in unit.call_sites:
            if cancelled is not None and cancelled.is_set():
                logger.debug("Cancelled %s after %d call site(s)", unit.path, visited)
                break
            self.visit(call, sink, unit.min_platform_version)
            visited += 1
        return visited
