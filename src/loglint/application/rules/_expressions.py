"""Shape predicates over argument expressions shared by several rules."""

from __future__ import annotations

from typing import TYPE_CHECKING

from loglint.domain.model.enums import ExpressionKind
from loglint.domain.model.static_type import StaticType

if TYPE_CHECKING:
    from loglint.domain.model.argument import Argument
    from loglint.domain.model.configuration import LintConfig


def find_concatenation(argument: Argument) -> Argument | None:
    """Find a string concatenation that should be template + arguments.

    - CONCATENATION of type String with at least one non-literal operand
    - CONDITIONAL: its then-branch, else its else-branch

    Args:
        argument: Argument of a facade call

    Returns:
        The offending concatenation, or None
    """
    match argument.kind:
        case ExpressionKind.CONCATENATION:
            if argument.static_type is not StaticType.STRING:
                return None
            if all(operand.is_literal for operand in argument.operands):
                return None  # folds to a constant
            return argument
        case ExpressionKind.CONDITIONAL:
            then_branch, else_branch = argument.operands
            return find_concatenation(then_branch) or find_concatenation(else_branch)
    return None


def exception_message_receiver(
    argument: Argument,
    config: LintConfig,
    throwable: Argument | None = None,
) -> Argument | None:
    """Exception whose message argument reads, if any.

    Narrow syntactic match: ``e.message`` or ``e.getMessage()`` where the
    receiver is statically a Throwable. When throwable is given, the
    receiver must also refer to that same argument.

    Args:
        argument: Candidate message expression
        config: Provides the message accessor names
        throwable: Throwable argument of the same call, if any

    Returns:
        The receiver holding the exception, None when argument is
        anything else
    """
    if argument.kind not in (ExpressionKind.QUALIFIED, ExpressionKind.CALL):
        return None
    if argument.symbol not in config.message_accessors:
        return None

    receiver = argument.receiver
    if receiver is None or not receiver.is_throwable:
        return None

    if throwable is not None and not _same_reference(receiver, throwable):
        return None
    return receiver


def _same_reference(left: Argument, right: Argument) -> bool:
    """Check if two expressions name the same thing."""
    if left.symbol is not None and right.symbol is not None:
        return left.symbol == right.symbol
    return left.text == right.text
