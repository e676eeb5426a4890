"""Tests for services/detector.py."""

import threading

from loglint.application.rules.wrong_logger import WrongLoggerRule
from loglint.application.services.detector import Detector
from loglint.application.sinks import CollectingSink
from loglint.domain.model.call_category import CallCategory
from loglint.domain.model.callee import CalleeIdentity
from loglint.domain.model.configuration import LintConfig
from loglint.domain.model.diagnostic import DiagnosticKind
from loglint.domain.model.static_type import StaticType
from tests.factories import (
    FACADE,
    facade_call,
    make_call,
    make_concatenation,
    make_literal,
    make_message_of,
    make_throwable,
    make_typed,
    make_unit,
    nested_format_call,
    platform_call,
)


def _kinds(diagnostics) -> list[DiagnosticKind]:
    return [d.kind for d in diagnostics]


class TestScenarios:
    """End-to-end behaviour of the default rule set per call site."""

    def test_platform_logger(self) -> None:
        """Log.d("TAG", "hi") → exactly one WRONG_LOGGER_USED."""
        call = platform_call("d", make_literal("TAG"), make_literal("hi"))

        assert _kinds(Detector().diagnose(call)) == [DiagnosticKind.WRONG_LOGGER_USED]

    def test_platform_logger_not_format_checked(self) -> None:
        """Platform logger calls get no format diagnostics."""
        call = platform_call("d", make_literal("TAG"), make_literal("%d"), make_literal("x"))

        assert _kinds(Detector().diagnose(call)) == [DiagnosticKind.WRONG_LOGGER_USED]

    def test_nested_format(self) -> None:
        """Timber.d(String.format("count=%d", n)) → one NESTED_FORMAT_CALL."""
        call = nested_format_call(
            CalleeIdentity(FACADE, "d"),
            make_literal("count=%d"),
            make_typed("n", StaticType.INTEGER),
        )

        assert _kinds(Detector().diagnose(call)) == [DiagnosticKind.NESTED_FORMAT_CALL]

    def test_tag_too_long(self) -> None:
        """34-char tag: reported below the threshold, silent at it."""
        call = facade_call("tag", make_literal("ThisTagNameIsWayTooLongForTheLimit"))
        detector = Detector()

        (diagnostic,) = detector.diagnose(call, 21)

        assert diagnostic.kind is DiagnosticKind.TAG_TOO_LONG
        assert diagnostic.details["overflow"] == 11
        assert detector.diagnose(call, 26) == ()

    def test_count_mismatch(self) -> None:
        """Timber.d("value=%s", 1, 2) → one count mismatch, no type mismatch."""
        call = facade_call(
            "d",
            make_literal("value=%s"),
            make_typed("a", StaticType.INTEGER),
            make_typed("b", StaticType.INTEGER),
        )

        assert _kinds(Detector().diagnose(call)) == [DiagnosticKind.ARGUMENT_COUNT_MISMATCH]

    def test_throwable_not_first(self) -> None:
        """Timber.e("msg", t) → exactly one THROWABLE_NOT_FIRST."""
        call = facade_call("e", make_literal("msg"), make_throwable("t"))

        assert _kinds(Detector().diagnose(call)) == [DiagnosticKind.THROWABLE_NOT_FIRST]

    def test_redundant_message(self) -> None:
        """Timber.e(t, t.message) → exactly one REDUNDANT_EXCEPTION_MESSAGE."""
        throwable = make_throwable("t")
        call = facade_call("e", throwable, make_message_of(throwable))

        assert _kinds(Detector().diagnose(call)) == [DiagnosticKind.REDUNDANT_EXCEPTION_MESSAGE]

    def test_rule_order_within_call(self) -> None:
        """Several findings on one call come out in rule order."""
        concatenation = make_concatenation(make_literal("n="), make_typed("n", StaticType.INTEGER))
        call = facade_call("e", concatenation, make_throwable("t"))

        assert _kinds(Detector().diagnose(call)) == [
            DiagnosticKind.STRING_CONCATENATION,
            DiagnosticKind.THROWABLE_NOT_FIRST,
        ]


class TestVisit:
    """Tests for Detector.visit."""

    def test_returns_category(self) -> None:
        """visit() reports the call's category."""
        sink = CollectingSink()

        category = Detector().visit(facade_call("d", make_literal("hi")), sink)

        assert category is CallCategory.LOG_LEVEL
        assert len(sink) == 0

    def test_unrelated_call(self) -> None:
        """Unrelated calls produce nothing."""
        call = make_call("java.io.PrintStream", "println", make_literal("%d"))

        assert Detector().diagnose(call) == ()

    def test_zero_arguments(self) -> None:
        """A facade call without arguments short-circuits every check."""
        assert Detector().diagnose(facade_call("d")) == ()
        assert Detector().diagnose(facade_call("tag")) == ()

    def test_idempotent(self) -> None:
        """Diagnosing the same call twice gives identical results."""
        call = facade_call("d", make_literal("%d %d"), make_literal("x"))
        detector = Detector()

        assert detector.diagnose(call) == detector.diagnose(call)

    def test_disabled_rule(self) -> None:
        """Configured-off rules do not run."""
        detector = Detector(LintConfig(disabled_rules=frozenset({"LogNotTimber"})))

        assert detector.diagnose(platform_call("d", make_literal("hi"))) == ()

    def test_explicit_rules(self) -> None:
        """An explicit rule list replaces the configured one."""
        detector = Detector(rules=[WrongLoggerRule()])
        call = facade_call("e", make_literal("msg"), make_throwable())

        assert len(detector.rules) == 1
        assert detector.diagnose(call) == ()


class TestAnalyzeUnit:
    """Tests for Detector.analyze_unit."""

    def test_visits_in_order(self) -> None:
        """Diagnostics follow call site order."""
        unit = make_unit(
            platform_call("d", make_literal("first")),
            facade_call("d", make_literal("fine")),
            platform_call("w", make_literal("second")),
        )
        sink = CollectingSink()

        visited = Detector().analyze_unit(unit, sink)

        assert visited == 3
        assert [d.anchor for d in sink.diagnostics] == [unit.call_sites[0], unit.call_sites[2]]

    def test_uses_unit_version(self) -> None:
        """The unit's minimum platform version gates the tag check."""
        call = facade_call("tag", make_literal("x" * 30))
        sink = CollectingSink()

        Detector().analyze_unit(make_unit(call, version=28), sink)

        assert len(sink) == 0

    def test_cancelled_before_start(self) -> None:
        """A set cancellation flag stops before the first call site."""
        cancelled = threading.Event()
        cancelled.set()
        sink = CollectingSink()

        visited = Detector().analyze_unit(
            make_unit(platform_call("d", make_literal("x"))), sink, cancelled=cancelled
        )

        assert visited == 0
        assert len(sink) == 0

    def test_cancelled_between_call_sites(self) -> None:
        """Cancellation between call sites keeps earlier results whole."""
        cancelled = threading.Event()

        class CancellingSink(CollectingSink):
            def report(self, diagnostic) -> None:
                super().report(diagnostic)
                cancelled.set()

        unit = make_unit(
            platform_call("d", make_literal("a")),
            platform_call("d", make_literal("b")),
        )
        sink = CancellingSink()

        visited = Detector().analyze_unit(unit, sink, cancelled=cancelled)

        assert visited == 1
        assert len(sink) == 1
