"""Issue catalogue: metadata for every diagnostic kind."""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import TYPE_CHECKING

from loglint.domain.model.diagnostic import DiagnosticKind
from loglint.domain.model.enums import Category, Severity

if TYPE_CHECKING:
    from collections.abc import Mapping


@dataclass(frozen=True, slots=True)
class Issue:
    """Registered issue.

    Attributes:
        id: Stable identifier used for suppression and configuration
        brief: One-line description
        explanation: Longer description
        category: Issue category
        priority: 1 (lowest) to 10 (highest)
        severity: Default severity
    """

    id: str
    brief: str
    explanation: str
    category: Category
    priority: int
    severity: Severity

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.id:
            raise ValueError("id must not be empty")
        if not self.brief:
            raise ValueError("brief must not be empty")
        if not 1 <= self.priority <= 10:
            raise ValueError(f"priority must be 1-10, got {self.priority}")


ISSUES: Mapping[DiagnosticKind, Issue] = MappingProxyType(
    {
        DiagnosticKind.WRONG_LOGGER_USED: Issue(
            id="LogNotTimber",
            brief="Logging call to Log instead of Timber",
            explanation=(
                "Since Timber is included in the project, it is likely that calls "
                "to Log should instead be going to Timber."
            ),
            category=Category.MESSAGES,
            priority=5,
            severity=Severity.WARNING,
        ),
        DiagnosticKind.NESTED_FORMAT_CALL: Issue(
            id="StringFormatInTimber",
            brief="Logging call with Timber contains String#format()",
            explanation=(
                "Since Timber handles String.format automatically, you may not use "
                "String#format()."
            ),
            category=Category.MESSAGES,
            priority=5,
            severity=Severity.WARNING,
        ),
        DiagnosticKind.THROWABLE_NOT_FIRST: Issue(
            id="ThrowableNotAtBeginning",
            brief="Exception in Timber not at the beginning",
            explanation="In Timber you have to pass a Throwable at the beginning of the call.",
            category=Category.MESSAGES,
            priority=5,
            severity=Severity.WARNING,
        ),
        DiagnosticKind.STRING_CONCATENATION: Issue(
            id="BinaryOperationInTimber",
            brief="Use String#format()",
            explanation=(
                "Since Timber handles String#format() automatically, use this "
                "instead of String concatenation."
            ),
            category=Category.MESSAGES,
            priority=5,
            severity=Severity.WARNING,
        ),
        DiagnosticKind.ARGUMENT_COUNT_MISMATCH: Issue(
            id="TimberArgCount",
            brief="Formatting argument types incomplete or inconsistent",
            explanation=(
                "When a formatted string takes arguments, you need to pass at least "
                "that amount of arguments to the formatting call."
            ),
            category=Category.MESSAGES,
            priority=9,
            severity=Severity.ERROR,
        ),
        DiagnosticKind.ARGUMENT_TYPE_MISMATCH: Issue(
            id="TimberArgTypes",
            brief="Formatting string doesn't match passed arguments",
            explanation=(
                "The argument types that you specified in your formatting string does "
                "not match the types of the arguments that you passed to your "
                "formatting call."
            ),
            category=Category.MESSAGES,
            priority=9,
            severity=Severity.ERROR,
        ),
        DiagnosticKind.TAG_TOO_LONG: Issue(
            id="TimberTagLength",
            brief="Too Long Log Tags",
            explanation="Log tags are only allowed to be at most 23 tag characters long.",
            category=Category.CORRECTNESS,
            priority=5,
            severity=Severity.ERROR,
        ),
        DiagnosticKind.REDUNDANT_EXCEPTION_MESSAGE: Issue(
            id="TimberExceptionLogging",
            brief="Exception Logging",
            explanation=(
                "Explicitly including the exception message is redundant when "
                "supplying an exception to log."
            ),
            category=Category.CORRECTNESS,
            priority=3,
            severity=Severity.WARNING,
        ),
    }
)


def issue_for(kind: DiagnosticKind) -> Issue:
    """Look up issue metadata for a diagnostic kind."""
    return ISSUES[kind]


def all_issues() -> tuple[Issue, ...]:
    """All registered issues in declaration order."""
    return tuple(ISSUES.values())


def issue_ids() -> frozenset[str]:
    """Identifiers of all registered issues."""
    return frozenset(issue.id for issue in ISSUES.values())
