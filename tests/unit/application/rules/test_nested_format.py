"""Tests for rules/nested_format.py."""

from loglint.application.rules.nested_format import NestedFormatRule
from loglint.domain.model.call_site import Ancestor
from loglint.domain.model.callee import CalleeIdentity
from loglint.domain.model.configuration import LintConfig
from loglint.domain.model.diagnostic import DiagnosticKind, FixAction
from loglint.domain.model.enums import AncestorKind
from loglint.domain.model.static_type import StaticType
from tests.factories import FACADE, make_call, make_literal, make_typed, nested_format_call

CONFIG = LintConfig()
TIMBER_D = CalleeIdentity(FACADE, "d")


class TestNestedFormatRule:
    """Tests for NestedFormatRule.check."""

    def test_format_inside_facade(self) -> None:
        """Timber.d(String.format("count=%d", n)) is reported once."""
        call = nested_format_call(
            TIMBER_D, make_literal("count=%d"), make_typed("n", StaticType.INTEGER)
        )

        (diagnostic,) = NestedFormatRule().check(call, CONFIG, None)

        assert diagnostic.kind is DiagnosticKind.NESTED_FORMAT_CALL
        assert diagnostic.message == "Using 'String#format' inside of 'Timber'"
        assert diagnostic.anchor is call
        assert diagnostic.details["enclosing"] == "timber.log.Timber.d"
        assert diagnostic.fix_hint is not None
        assert diagnostic.fix_hint.action is FixAction.UNWRAP_FORMAT_CALL

    def test_parentheses_skipped(self) -> None:
        """Parentheses and expressions between the calls are transparent."""
        call = nested_format_call(
            TIMBER_D,
            make_literal("%s"),
            extra=(Ancestor(AncestorKind.PARENTHESES), Ancestor(AncestorKind.EXPRESSION)),
        )

        assert len(NestedFormatRule().check(call, CONFIG, None)) == 1

    def test_other_enclosing_call(self) -> None:
        """Format nested in a non-facade call is fine."""
        call = nested_format_call(CalleeIdentity("java.io.PrintStream", "println"))

        assert NestedFormatRule().check(call, CONFIG, None) == ()

    def test_unresolved_enclosing_call(self) -> None:
        """Unresolved enclosing callee is never judged."""
        call = nested_format_call(None)

        assert NestedFormatRule().check(call, CONFIG, None) == ()

    def test_facade_tag_encloses(self) -> None:
        """Only log-level methods count, not tag()."""
        call = nested_format_call(CalleeIdentity(FACADE, "tag"))

        assert NestedFormatRule().check(call, CONFIG, None) == ()

    def test_stops_at_method_boundary(self) -> None:
        """A lambda body between format and facade call stops the walk."""
        call = make_call(
            "java.lang.String",
            "format",
            make_literal("%s"),
            ancestors=(
                Ancestor(AncestorKind.METHOD),
                Ancestor(AncestorKind.CALL, TIMBER_D),
            ),
        )

        assert NestedFormatRule().check(call, CONFIG, None) == ()

    def test_top_level_format(self) -> None:
        """A format call with no enclosing call is fine."""
        call = make_call("java.lang.String", "format", make_literal("%s"))

        assert NestedFormatRule().check(call, CONFIG, None) == ()
