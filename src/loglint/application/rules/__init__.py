"""Misuse rules for facade log calls.

One rule per diagnostic kind:
- WrongLoggerRule: platform logger instead of the facade
- NestedFormatRule: formatting routine inside a facade call
- TagLengthRule: tag over the legacy length limit
- ConcatenationRule: string concatenation instead of template arguments
- ThrowableOrderRule: Throwable not the first argument
- ArgumentCountRule / ArgumentTypeRule: template vs. arguments
- ExceptionMessageRule: exception message logged next to the exception
"""

from loglint.application.rules._base import BaseRule
from loglint.application.rules._registry import default_rules, rules_from_config
from loglint.application.rules.argument_count import ArgumentCountRule
from loglint.application.rules.argument_type import ArgumentTypeRule
from loglint.application.rules.concatenation import ConcatenationRule
from loglint.application.rules.exception_message import ExceptionMessageRule
from loglint.application.rules.nested_format import NestedFormatRule
from loglint.application.rules.tag_length import TagLengthRule
from loglint.application.rules.throwable_order import ThrowableOrderRule
from loglint.application.rules.wrong_logger import WrongLoggerRule

__all__ = [
    # Base
    "BaseRule",
    # Rules
    "WrongLoggerRule",
    "NestedFormatRule",
    "TagLengthRule",
    "ConcatenationRule",
    "ThrowableOrderRule",
    "ArgumentCountRule",
    "ArgumentTypeRule",
    "ExceptionMessageRule",
    # Factory functions
    "default_rules",
    "rules_from_config",
]
