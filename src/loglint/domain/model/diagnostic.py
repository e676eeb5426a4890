"""Diagnostic entity and its fix hint."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum, auto
from types import MappingProxyType
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from loglint.domain.model.argument import Argument
    from loglint.domain.model.call_site import CallSite
    from loglint.domain.model.issue import Issue
    from loglint.domain.model.source_range import SourceRange


class DiagnosticKind(Enum):
    """Kinds of logging misuse."""

    WRONG_LOGGER_USED = auto()
    NESTED_FORMAT_CALL = auto()
    STRING_CONCATENATION = auto()
    THROWABLE_NOT_FIRST = auto()
    TAG_TOO_LONG = auto()
    ARGUMENT_COUNT_MISMATCH = auto()
    ARGUMENT_TYPE_MISMATCH = auto()
    REDUNDANT_EXCEPTION_MESSAGE = auto()

    @property
    def issue(self) -> Issue:
        """Issue metadata for this kind."""
        from loglint.domain.model.issue import issue_for

        return issue_for(self)


class FixAction(Enum):
    """What a quick fix would do. Text generation belongs to the host."""

    USE_FACADE = auto()  # route platform logger call through the facade
    UNWRAP_FORMAT_CALL = auto()  # drop the nested format call, keep its arguments
    USE_FORMAT_ARGUMENTS = auto()  # turn concatenation into template + arguments
    MOVE_THROWABLE_FIRST = auto()
    TRUNCATE_TAG = auto()
    REMOVE_ARGUMENT = auto()
    REPLACE_WITH_THROWABLE = auto()


@dataclass(frozen=True, slots=True)
class FixHint:
    """Structured quick-fix suggestion.

    Attributes:
        action: What to do
        name: Short display name (e.g. "Strip last 11 chars from tag")
        target: Span the fix applies to
        replacement: Replacement value where it is fully determined
    """

    action: FixAction
    name: str
    target: SourceRange
    replacement: str | None = None

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.name:
            raise ValueError("name must not be empty")
        if self.target is None:
            raise TypeError("target must not be None")


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """One finding at one call site.

    Pure observation: nothing in the host AST is changed.

    Attributes:
        kind: What was found
        anchor: Sub-expression the finding points at
        message: Rendered human-readable text
        fix_hint: Optional quick-fix suggestion
        details: Structured facts behind the message (e.g. tag overflow)
    """

    kind: DiagnosticKind
    anchor: Argument | CallSite
    message: str
    fix_hint: FixHint | None = None
    details: Mapping[str, object] = field(default_factory=dict)

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not isinstance(self.kind, DiagnosticKind):
            raise TypeError(f"kind must be DiagnosticKind, got {type(self.kind).__name__}")
        if self.anchor is None:
            raise TypeError("anchor must not be None")
        if not self.message:
            raise ValueError("message must not be empty")
        # frozen=True does not cover the mapping itself
        object.__setattr__(self, "details", MappingProxyType(dict(self.details)))

    @property
    def source_range(self) -> SourceRange:
        """Where the diagnostic points."""
        return self.anchor.source_range

    @property
    def issue(self) -> Issue:
        """Issue metadata (id, severity, category)."""
        return self.kind.issue

    def __str__(self) -> str:
        """Format diagnostic for display."""
        issue = self.issue
        lines = [
            f"[{issue.severity.name}] {issue.id}: {self.message}",
            f"  at {self.source_range}",
        ]
        if self.fix_hint is not None:
            lines.append(f"  fix: {self.fix_hint.name}")
        return "\n".join(lines)
