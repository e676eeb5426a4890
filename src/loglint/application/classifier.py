"""Call classification for facade misuse analysis.

Assigns every call site exactly one CallCategory, in this order:
1. Platform logger log-level method → PLATFORM_LOGGER
2. Formatting routine (name and owner) → FORMAT_ROUTINE
3. Facade tag method → TAG
4. Facade log-level method, or one declared in a subclass of a facade
   extension point → LOG_LEVEL
5. Otherwise → UNRELATED
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from loglint.domain.model.call_category import CallCategory

if TYPE_CHECKING:
    from loglint.domain.model.call_site import CallSite
    from loglint.domain.model.callee import CalleeIdentity
    from loglint.domain.model.configuration import LintConfig


def classify_call(call: CallSite, config: LintConfig) -> CallCategory:
    """Classify a call site by its resolved callee.

    Args:
        call: Call site to classify
        config: Names of facade, platform logger, formatting routine

    Returns:
        The call's single primary category
    """
    callee = call.callee

    # 1. Platform logger log-level method
    if callee.name in config.log_level_methods and callee.is_member_of(
        config.platform_logger_class
    ):
        return CallCategory.PLATFORM_LOGGER

    # 2. Formatting routine
    if is_format_routine(callee, config):
        return CallCategory.FORMAT_ROUTINE

    # 3. Facade tag
    if callee.name == config.tag_method and callee.is_member_of_any(config.facade_classes):
        return CallCategory.TAG

    # 4. Facade log level
    if is_facade_log_method(callee, config):
        return CallCategory.LOG_LEVEL

    return CallCategory.UNRELATED


def is_format_routine(callee: CalleeIdentity, config: LintConfig) -> bool:
    """Check if callee is the string formatting routine."""
    return callee.name == config.format_method and callee.is_member_of_any(
        config.format_routine_owners
    )


def is_facade_log_method(callee: CalleeIdentity, config: LintConfig) -> bool:
    """Check if callee is one of the facade's log-level methods.

    Covers the facade entry point itself, its tree/companion classes and
    any subclass of them that overrides a log-level method.
    """
    return callee.name in config.log_level_methods and callee.is_member_of_any(
        config.facade_classes
    )
