"""Argument expression value object."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from loglint.domain.model.enums import Binding, ExpressionKind
from loglint.domain.model.static_type import StaticType

if TYPE_CHECKING:
    from loglint.domain.model.source_range import SourceRange


@dataclass(frozen=True, slots=True)
class Argument:
    """Read-only view of one argument expression at a call site.

    Built by the host for a single visit and discarded afterwards.
    Nested expressions (receivers, operands) are Arguments too, so rules
    can inspect shape without touching the host AST.

    Attributes:
        static_type: Resolved static type (UNKNOWN if unresolved)
        source_range: Where the expression is
        text: Source snippet, used in messages
        kind: Syntactic shape
        literal_value: Evaluated string value, only for provable constants
        symbol: Resolved name (NAME) or member name (QUALIFIED, CALL)
        binding: What a NAME refers to
        receiver: Receiver of a QUALIFIED access or member CALL
        operands: Parts of a CONCATENATION, (then, else) of a CONDITIONAL
        expression: Opaque handle back into the host AST
    """

    static_type: StaticType
    source_range: SourceRange
    text: str
    kind: ExpressionKind = ExpressionKind.OTHER
    literal_value: str | None = None
    symbol: str | None = None
    binding: Binding = Binding.UNKNOWN
    receiver: Argument | None = None
    operands: tuple[Argument, ...] = ()
    expression: object = field(default=None, compare=False, repr=False)

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not isinstance(self.static_type, StaticType):
            raise TypeError(
                f"static_type must be StaticType, got {type(self.static_type).__name__}"
            )
        if self.source_range is None:
            raise TypeError("source_range must not be None")
        if not self.text:
            raise ValueError("text must not be empty")
        if self.kind is ExpressionKind.NULL_LITERAL and self.literal_value is not None:
            raise ValueError("null literal cannot carry a literal_value")
        if self.kind is ExpressionKind.QUALIFIED and self.receiver is None:
            raise ValueError("QUALIFIED expression requires a receiver")
        if self.kind is ExpressionKind.CONDITIONAL and len(self.operands) != 2:
            raise ValueError(
                f"CONDITIONAL expression requires (then, else) operands, got {len(self.operands)}"
            )
        if self.binding is not Binding.UNKNOWN and self.kind is not ExpressionKind.NAME:
            raise ValueError(f"binding is only meaningful for NAME, got {self.kind.name}")

    @property
    def is_throwable(self) -> bool:
        """True if statically a Throwable subtype."""
        return self.static_type is StaticType.THROWABLE

    @property
    def is_literal(self) -> bool:
        """True for literal constants (including null)."""
        return self.kind in (ExpressionKind.LITERAL, ExpressionKind.NULL_LITERAL)

    def __str__(self) -> str:
        return self.text
