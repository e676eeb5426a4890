"""Call site value objects."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from loglint.domain.model.enums import AncestorKind

if TYPE_CHECKING:
    from loglint.domain.model.argument import Argument
    from loglint.domain.model.callee import CalleeIdentity
    from loglint.domain.model.source_range import SourceRange


@dataclass(frozen=True, slots=True)
class Ancestor:
    """One enclosing syntactic node of a call site.

    Attributes:
        kind: Node kind
        callee: Resolved callee for CALL ancestors (None if unresolved)
    """

    kind: AncestorKind
    callee: CalleeIdentity | None = None

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.callee is not None and self.kind is not AncestorKind.CALL:
            raise ValueError(f"only CALL ancestors carry a callee, got {self.kind.name}")


@dataclass(frozen=True, slots=True)
class CallSite:
    """Read-only view of one call expression.

    Immutable once produced by the host for a given visit.

    Attributes:
        callee: Resolved target method
        arguments: Ordered argument expressions
        source_range: Span of the whole call
        text: Source snippet of the call
        receiver: Receiver expression if the call is qualified
        ancestors: Enclosing nodes, innermost first, up to and including
            the nearest METHOD boundary
        expression: Opaque handle back into the host AST
    """

    callee: CalleeIdentity
    arguments: tuple[Argument, ...]
    source_range: SourceRange
    text: str
    receiver: Argument | None = None
    ancestors: tuple[Ancestor, ...] = ()
    expression: object = field(default=None, compare=False, repr=False)

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.callee is None:
            raise TypeError("callee must not be None")
        if self.source_range is None:
            raise TypeError("source_range must not be None")
        if not self.text:
            raise ValueError("text must not be empty")

    @property
    def method_name(self) -> str:
        """Name of the invoked method."""
        return self.callee.name

    @property
    def argument_count(self) -> int:
        """Number of arguments."""
        return len(self.arguments)

    def enclosing_call(self) -> Ancestor | None:
        """Nearest enclosing call within the same method.

        Skips parentheses and other expressions. Stops at a METHOD
        boundary.

        Returns:
            CALL ancestor, or None if the call is not nested in another
        """
        for ancestor in self.ancestors:
            match ancestor.kind:
                case AncestorKind.CALL:
                    return ancestor
                case AncestorKind.METHOD:
                    return None
        return None

    def __str__(self) -> str:
        """Format as file:line (callee)."""
        return f"{self.source_range} ({self.callee})"
