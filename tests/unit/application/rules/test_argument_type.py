"""Tests for rules/argument_type.py."""

import pytest

from loglint.application.rules._format_call import bind_format_call
from loglint.application.rules.argument_type import ArgumentTypeRule
from loglint.domain.exceptions.invariant import FormatInvariantError
from loglint.domain.model.configuration import LintConfig
from loglint.domain.model.diagnostic import DiagnosticKind
from loglint.domain.model.static_type import StaticType
from tests.factories import (
    facade_call,
    make_argument,
    make_literal,
    make_throwable,
    make_typed,
)

CONFIG = LintConfig()


class TestArgumentTypeRule:
    """Tests for ArgumentTypeRule.check."""

    def test_string_for_decimal(self) -> None:
        """'%d' with a String is a type mismatch."""
        call = facade_call("d", make_literal("n=%d"), make_literal("text"))

        (diagnostic,) = ArgumentTypeRule().check(call, CONFIG, None)

        assert diagnostic.kind is DiagnosticKind.ARGUMENT_TYPE_MISMATCH
        assert diagnostic.anchor is call.arguments[1]
        assert diagnostic.message == (
            "Wrong argument type for formatting argument '#1' in `n=%d`: "
            "conversion is '`d`', received `String` (argument #2 in method call)"
        )
        assert diagnostic.details["received"] == "String"
        assert diagnostic.details["argument_position"] == 2

    def test_every_mismatch_reported(self) -> None:
        """Each offending specifier gets its own diagnostic."""
        call = facade_call(
            "d",
            make_literal("%b %c %s"),
            make_typed("n", StaticType.INTEGER),
            make_typed("s", StaticType.STRING),
            make_typed("x", StaticType.DOUBLE),
        )

        diagnostics = ArgumentTypeRule().check(call, CONFIG, None)

        assert [d.details["specifier"] for d in diagnostics] == ["%b", "%c"]

    def test_unknown_type_skipped(self) -> None:
        """Arguments of unknown type are not judged."""
        call = facade_call("d", make_literal("%d"), make_argument("compute()"))

        assert ArgumentTypeRule().check(call, CONFIG, None) == ()

    def test_date_time_mismatch(self) -> None:
        """'%tY' with a String uses the date wording."""
        call = facade_call("d", make_literal("%tY"), make_literal("2024"))

        (diagnostic,) = ArgumentTypeRule().check(call, CONFIG, None)

        assert diagnostic.kind is DiagnosticKind.ARGUMENT_TYPE_MISMATCH
        assert diagnostic.message.startswith(
            "Wrong argument type for date formatting argument '#1'"
        )
        assert "conversion is '`tY`'" in diagnostic.message

    def test_date_time_accepts_long(self) -> None:
        """'%tH' with a long timestamp is fine."""
        call = facade_call("d", make_literal("%tH"), make_typed("millis", StaticType.LONG))

        assert ArgumentTypeRule().check(call, CONFIG, None) == ()

    def test_wrong_suffix(self) -> None:
        """Unknown date/time sub-letter is a format misuse."""
        call = facade_call("d", make_literal("%tq"), make_typed("now", StaticType.DATE))

        (diagnostic,) = ArgumentTypeRule().check(call, CONFIG, None)

        assert diagnostic.kind is DiagnosticKind.NESTED_FORMAT_CALL
        assert diagnostic.message.startswith("Wrong suffix for date format '#1'")

    def test_wrong_suffix_disabled(self) -> None:
        """Suffix errors follow the StringFormatInTimber switch."""
        config = LintConfig(disabled_rules=frozenset({"StringFormatInTimber"}))
        call = facade_call("d", make_literal("%tq"), make_typed("now", StaticType.DATE))

        assert ArgumentTypeRule().check(call, config, None) == ()

    def test_count_mismatch_skips_types(self) -> None:
        """No type check when the count is wrong."""
        call = facade_call("d", make_literal("%d"), make_literal("a"), make_literal("b"))

        assert ArgumentTypeRule().check(call, CONFIG, None) == ()

    def test_throwable_reserved(self) -> None:
        """Positions count the leading Throwable and template."""
        call = facade_call("e", make_throwable(), make_literal("%d"), make_literal("x"))

        (diagnostic,) = ArgumentTypeRule().check(call, CONFIG, None)

        assert diagnostic.details["argument_position"] == 3

    def test_positional_binding(self) -> None:
        """'%2$d %1$s' binds the second argument to '%d'."""
        call = facade_call(
            "d",
            make_literal("%2$d %1$s"),
            make_typed("name", StaticType.STRING),
            make_typed("count", StaticType.INTEGER),
        )

        assert ArgumentTypeRule().check(call, CONFIG, None) == ()


class TestFormatCall:
    """Tests for the template binding helper."""

    def test_missing_slot_raises(self) -> None:
        """Binding past the supplied arguments is an internal defect."""
        call = facade_call("d", make_literal("%s %s"), make_literal("only"))
        format_call = bind_format_call(call)

        assert format_call is not None
        with pytest.raises(FormatInvariantError, match="binds argument #2"):
            format_call.argument_for(format_call.template.specifiers[1])

    def test_no_arguments(self) -> None:
        """Nothing to bind without arguments."""
        assert bind_format_call(facade_call("d")) is None
