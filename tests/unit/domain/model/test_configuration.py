"""Tests for domain/model/configuration.py."""

import pytest

from loglint.domain.model.configuration import LintConfig


class TestLintConfigDefaults:
    """Default configuration."""

    def test_timber_defaults(self) -> None:
        """Defaults describe Timber and android.util.Log."""
        config = LintConfig()

        assert config.facade_class == "timber.log.Timber"
        assert config.platform_logger_class == "android.util.Log"
        assert config.log_level_methods == frozenset({"v", "d", "i", "w", "e", "wtf"})
        assert config.max_tag_length == 23
        assert config.tag_limit_lifted_at == 26
        assert config.disabled_rules == frozenset()

    def test_facade_classes(self) -> None:
        """Facade classes include the extension points."""
        config = LintConfig()

        assert config.facade_classes == (
            "timber.log.Timber",
            "timber.log.Timber.Tree",
            "timber.log.Timber.Companion",
        )
        assert config.tree_class == "timber.log.Timber.Tree"

    def test_tree_class_without_extension_points(self) -> None:
        """Without extension points the facade itself is the tree."""
        config = LintConfig(facade_extension_points=())

        assert config.tree_class == "timber.log.Timber"

    def test_is_rule_enabled(self) -> None:
        """Disabled ids are off, everything else on."""
        config = LintConfig(disabled_rules=frozenset({"TimberTagLength"}))

        assert not config.is_rule_enabled("TimberTagLength")
        assert config.is_rule_enabled("LogNotTimber")


class TestLintConfigValidation:
    """FAIL-FIRST validation."""

    def test_unknown_disabled_rule(self) -> None:
        """Unknown issue ids are rejected."""
        with pytest.raises(ValueError, match="unknown issue ids"):
            LintConfig(disabled_rules=frozenset({"NoSuchRule"}))

    def test_same_facade_and_platform(self) -> None:
        """Facade and platform logger must differ."""
        with pytest.raises(ValueError, match="must differ"):
            LintConfig(platform_logger_class="timber.log.Timber")

    def test_tag_method_not_log_level(self) -> None:
        """The tag method cannot double as a log level."""
        with pytest.raises(ValueError, match="tag_method"):
            LintConfig(tag_method="d")

    @pytest.mark.parametrize("field", ["max_tag_length", "tag_limit_lifted_at"])
    def test_positive_limits(self, field: str) -> None:
        """Limits must be positive."""
        with pytest.raises(ValueError, match=field):
            LintConfig(**{field: 0})

    def test_empty_facade(self) -> None:
        """Facade class is required."""
        with pytest.raises(ValueError, match="facade_class must not be empty"):
            LintConfig(facade_class="")

    def test_frozen(self) -> None:
        """Configuration is immutable."""
        config = LintConfig()

        with pytest.raises(AttributeError):
            config.max_tag_length = 10  # type: ignore[misc]
