"""Tests for rules/argument_count.py."""

import pytest

from loglint.application.rules.argument_count import ArgumentCountRule
from loglint.domain.model.configuration import LintConfig
from loglint.domain.model.diagnostic import DiagnosticKind
from loglint.domain.model.static_type import StaticType
from tests.factories import facade_call, make_literal, make_throwable, make_typed

CONFIG = LintConfig()


def _int(name: str = "n"):
    return make_typed(name, StaticType.INTEGER)


class TestArgumentCountRule:
    """Tests for ArgumentCountRule.check."""

    def test_too_many(self) -> None:
        """Timber.d("value=%s", 1, 2) is one mismatch for the whole call."""
        call = facade_call("d", make_literal("value=%s"), _int("a"), _int("b"))

        (diagnostic,) = ArgumentCountRule().check(call, CONFIG, None)

        assert diagnostic.kind is DiagnosticKind.ARGUMENT_COUNT_MISMATCH
        assert diagnostic.anchor is call
        assert diagnostic.details == {"required": 1, "supplied": 2}
        assert diagnostic.message == (
            "Wrong argument count, format string `value=%s` requires `1` "
            "but format call supplies `2`"
        )

    def test_too_few(self) -> None:
        """Missing arguments are one mismatch too."""
        call = facade_call("d", make_literal("%s %s"), _int())

        (diagnostic,) = ArgumentCountRule().check(call, CONFIG, None)

        assert diagnostic.details == {"required": 2, "supplied": 1}

    def test_exact(self) -> None:
        """Matching count is fine."""
        call = facade_call("d", make_literal("%d and %d"), _int("a"), _int("b"))

        assert ArgumentCountRule().check(call, CONFIG, None) == ()

    @pytest.mark.parametrize("extra", [0, 1, 3])
    def test_no_specifiers_never_checked(self, extra: int) -> None:
        """Templates without specifiers accept any trailing arguments."""
        call = facade_call("d", make_literal("100%% plain"), *(_int() for _ in range(extra)))

        assert ArgumentCountRule().check(call, CONFIG, None) == ()

    def test_throwable_shifts_template(self) -> None:
        """With a leading Throwable the template is the second argument."""
        call = facade_call("e", make_throwable(), make_literal("%s"), _int("a"), _int("b"))

        (diagnostic,) = ArgumentCountRule().check(call, CONFIG, None)

        assert diagnostic.details == {"required": 1, "supplied": 2}

    def test_lone_throwable(self) -> None:
        """Timber.e(t) has no template."""
        assert ArgumentCountRule().check(facade_call("e", make_throwable()), CONFIG, None) == ()

    def test_non_constant_template(self) -> None:
        """A template that is not a constant is skipped."""
        call = facade_call("d", make_typed("template", StaticType.STRING), _int())

        assert ArgumentCountRule().check(call, CONFIG, None) == ()

    def test_positional_reuse(self) -> None:
        """'%1$s %1$s' needs exactly one argument."""
        call = facade_call("d", make_literal("%1$s %1$s"), _int())

        assert ArgumentCountRule().check(call, CONFIG, None) == ()
