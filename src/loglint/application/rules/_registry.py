"""Rule registry for misuse rules.

Central registry of all rules with factory functions.
"""

from __future__ import annotations

from loglint.application.rules._base import BaseRule
from loglint.application.rules.argument_count import ArgumentCountRule
from loglint.application.rules.argument_type import ArgumentTypeRule
from loglint.application.rules.concatenation import ConcatenationRule
from loglint.application.rules.exception_message import ExceptionMessageRule
from loglint.application.rules.nested_format import NestedFormatRule
from loglint.application.rules.tag_length import TagLengthRule
from loglint.application.rules.throwable_order import ThrowableOrderRule
from loglint.application.rules.wrong_logger import WrongLoggerRule
from loglint.domain.model.configuration import LintConfig
from loglint.domain.ports.rule import RuleProtocol



# Registry - tuple for immutability
# Order matters: diagnostics of one call are reported in this order
_ALL_RULES: tuple[type[BaseRule], ...] = (
    WrongLoggerRule,  # PLATFORM_LOGGER
    NestedFormatRule,  # FORMAT_ROUTINE
    TagLengthRule,  # TAG
    ConcatenationRule,  # LOG_LEVEL ...
    ThrowableOrderRule,
    ArgumentCountRule,
    ArgumentTypeRule,
    ExceptionMessageRule,
)


def default_rules() -> tuple[RuleProtocol, ...]:
    """Instantiate every rule with the default configuration.

    Returns:
        Tuple of all rules
    """
    return rules_from_config(LintConfig())


def rules_from_config(config: LintConfig) -> tuple[RuleProtocol, ...]:
    """Instantiate rules enabled by config.

    Rules are created using their from_config() factory method.
    If from_config() returns None, the rule is disabled.

    Args:
        config: Lint configuration

    Returns:
        Tuple of enabled rules, in registry order
    """
    rules: list[RuleProtocol] = []

    for rule_cls in _ALL_RULES:
        rule = rule_cls.from_config(config)
        if rule is not None:
            rules.append(rule)

    return tuple(rules)
