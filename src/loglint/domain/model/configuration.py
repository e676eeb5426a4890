"""Lint configuration.

Names the facade, the platform logger and the formatting routine the
rules look for, plus the limits the tag check enforces.
All fields have defaults for the Timber / android.util.Log pairing.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from loglint.domain.model.issue import issue_ids


@dataclass(frozen=True, slots=True)
class LintConfig:
    """Immutable lint configuration with FAIL-FIRST validation.

    Attributes:
        # Facade (what call sites should use)
        facade_class: FQN of the facade's static entry point.
        facade_extension_points: FQNs whose subclasses and members count as
            facade log methods (tree / companion classes).
        tag_method: Name of the facade's tag-setting method.
        log_level_methods: Names of the facade's log-level methods.

        # Platform logger (what call sites should not use)
        platform_logger_class: FQN of the raw platform logger.

        # Formatting routine that must not be nested inside the facade
        format_routine_owners: FQNs declaring the formatting routine.
        format_method: Name of the formatting routine.

        # Exceptions
        throwable_classes: Root exception types of the host language(s).
        message_accessors: Members that read an exception's message.

        # Tag length
        max_tag_length: Legacy maximum tag length.
        tag_limit_lifted_at: Platform version that lifted the limit.

        # Messages
        facade_display_name: Facade name in rendered messages.
        platform_display_name: Platform logger name in rendered messages.
        format_display_name: Formatting routine name in rendered messages.

        # Rule activation
        disabled_rules: Issue ids whose rules are switched off.
    """

    # Facade
    facade_class: str = "timber.log.Timber"
    facade_extension_points: tuple[str, ...] = (
        "timber.log.Timber.Tree",
        "timber.log.Timber.Companion",
    )
    tag_method: str = "tag"
    log_level_methods: frozenset[str] = frozenset({"v", "d", "i", "w", "e", "wtf"})

    # Platform logger
    platform_logger_class: str = "android.util.Log"

    # Formatting routine
    format_routine_owners: tuple[str, ...] = (
        "java.lang.String",
        "kotlin.text.StringsKt__StringsJVMKt",
        "builtins.str",
    )
    format_method: str = "format"

    # Exceptions
    throwable_classes: tuple[str, ...] = ("java.lang.Throwable", "builtins.BaseException")
    message_accessors: frozenset[str] = frozenset({"message", "getMessage", "__str__"})

    # Tag length
    max_tag_length: int = 23
    tag_limit_lifted_at: int = 26

    # Messages
    facade_display_name: str = "Timber"
    platform_display_name: str = "Log"
    format_display_name: str = "String#format"

    # Rule activation
    disabled_rules: frozenset[str] = field(default_factory=frozenset)

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        for name in ("facade_class", "platform_logger_class", "tag_method", "format_method"):
            if not getattr(self, name):
                raise ValueError(f"{name} must not be empty")

        if not self.log_level_methods:
            raise ValueError("log_level_methods must not be empty")

        if not self.format_routine_owners:
            raise ValueError("format_routine_owners must not be empty")

        if not self.throwable_classes:
            raise ValueError("throwable_classes must not be empty")

        if self.facade_class == self.platform_logger_class:
            raise ValueError("facade_class and platform_logger_class must differ")

        if self.tag_method in self.log_level_methods:
            raise ValueError(f"tag_method {self.tag_method!r} must not be a log level method")

        if self.max_tag_length < 1:
            raise ValueError(f"max_tag_length must be >= 1, got {self.max_tag_length}")

        if self.tag_limit_lifted_at < 1:
            raise ValueError(f"tag_limit_lifted_at must be >= 1, got {self.tag_limit_lifted_at}")

        unknown = self.disabled_rules - issue_ids()
        if unknown:
            raise ValueError(f"disabled_rules contains unknown issue ids: {sorted(unknown)}")

    @property
    def facade_classes(self) -> tuple[str, ...]:
        """Facade entry point plus its extension points."""
        return (self.facade_class, *self.facade_extension_points)

    @property
    def tree_class(self) -> str:
        """Class a chained tag() call returns. First extension point."""
        if self.facade_extension_points:
            return self.facade_extension_points[0]
        return self.facade_class

    def is_rule_enabled(self, issue_id: str) -> bool:
        """Check if the rule reporting issue_id is active."""
        return issue_id not in self.disabled_rules
