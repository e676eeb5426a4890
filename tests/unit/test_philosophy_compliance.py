"""Philosophy compliance tests.

Tests verifying the project's design axioms:
- FAIL-FIRST Validation
- Immutability
- Data Completeness
- Error hierarchy
"""

from __future__ import annotations

import dataclasses
from pathlib import Path

import pytest

from loglint.application.services.detector import Detector
from loglint.application.services.linter import Linter
from loglint.domain.exceptions import (
    FormatInvariantError,
    LintViolationError,
    LogLintError,
    ParsingError,
)
from loglint.domain.model.call_site import Ancestor
from loglint.domain.model.callee import CalleeIdentity
from loglint.domain.model.configuration import LintConfig
from loglint.domain.model.diagnostic import FixAction, FixHint
from loglint.domain.model.enums import AncestorKind
from loglint.domain.model.format_specifier import FormatSpecifier
from loglint.domain.model.lint_result import FileError, LintStats
from loglint.infrastructure.adapters.python_host import PythonSourceHost
from tests.factories import (
    make_call,
    make_diagnostic,
    make_lint_result,
    make_literal,
    make_range,
    make_unit,
)

# =============================================================================
# FAIL-FIRST Validation
# =============================================================================


class TestFailFirstValidation:
    """Invalid values raise immediately instead of falling back.

    "WRONG: if not valid: use_default()  # silent fallback
     RIGHT: if not valid: raise ValueError(...)  # immediate failure"
    """

    def test_unknown_disabled_rule_raises(self) -> None:
        """A typo in disabled_rules is not silently ignored."""
        with pytest.raises(ValueError, match="unknown issue ids"):
            LintConfig(disabled_rules=frozenset({"LogNotTimbr"}))

    def test_zero_workers_raises(self) -> None:
        """Linter refuses a worker count it cannot honour."""
        with pytest.raises(ValueError, match="workers"):
            Linter(PythonSourceHost(), Detector(), workers=0)

    def test_specifier_slot_zero_raises(self) -> None:
        """Argument slots are 1-based."""
        with pytest.raises(ValueError, match="slot"):
            FormatSpecifier(text="%s", conversion="s", slot=0, position=1)

    def test_call_ancestor_callee_on_method_raises(self) -> None:
        """Only CALL ancestors carry a callee."""
        with pytest.raises(ValueError, match="CALL"):
            Ancestor(AncestorKind.METHOD, CalleeIdentity("a.B", "c"))

    def test_negative_stats_raise(self) -> None:
        """Counters cannot go negative."""
        with pytest.raises(ValueError, match="rules_run"):
            LintStats(units_analyzed=0, call_sites_visited=0, rules_run=-1, analysis_time_ms=0)

    def test_parsing_error_has_path(self) -> None:
        """ParsingError keeps the failing path."""
        error = ParsingError(Path("/a.py"), "syntax error")

        assert error.path == Path("/a.py")
        assert error.reason == "syntax error"

    def test_invariant_error_has_details(self) -> None:
        """FormatInvariantError keeps template, slot and supplied count."""
        error = FormatInvariantError("%s %s", 2, 1)

        assert (error.template, error.slot, error.supplied) == ("%s %s", 2, 1)


# =============================================================================
# Immutability
# =============================================================================


class TestImmutability:
    """Value objects are frozen once constructed."""

    @pytest.mark.parametrize(
        ("value", "field"),
        [
            (make_range(), "line"),
            (make_literal("x"), "text"),
            (make_call("a.B", "c"), "text"),
            (CalleeIdentity("a.B", "c"), "name"),
            (make_unit(), "path"),
            (make_diagnostic(), "message"),
            (FixHint(FixAction.TRUNCATE_TAG, "Strip", make_range()), "name"),
            (FileError(Path("/a.py"), "boom"), "reason"),
            (make_lint_result(), "diagnostics"),
            (LintConfig(), "max_tag_length"),
        ],
        ids=lambda v: type(v).__name__ if not isinstance(v, str) else v,
    )
    def test_frozen(self, value: object, field: str) -> None:
        """Assignment to a field raises."""
        with pytest.raises(dataclasses.FrozenInstanceError):
            setattr(value, field, None)

    def test_diagnostic_details_read_only(self) -> None:
        """details mapping cannot be mutated."""
        diagnostic = make_diagnostic()

        with pytest.raises(TypeError):
            diagnostic.details["extra"] = 1  # type: ignore[index]

    def test_config_collections_immutable(self) -> None:
        """Configured name sets are frozensets and tuples."""
        config = LintConfig()

        assert isinstance(config.log_level_methods, frozenset)
        assert isinstance(config.format_routine_owners, tuple)
        assert isinstance(config.disabled_rules, frozenset)


# =============================================================================
# Data Completeness
# =============================================================================


class TestDataCompleteness:
    """Nothing is lost silently.

    "WRONG: unparseable file -> skipped
     RIGHT: unparseable file -> tracked in .errors
     Invariant: discovered = analyzed + errors"
    """

    def test_unparseable_files_tracked(self, tmp_path: Path) -> None:
        """Every discovered file is either analyzed or an error."""
        (tmp_path / "good.py").write_text("x = 1\n")
        (tmp_path / "bad.py").write_text("def (:\n")

        linter = Linter(PythonSourceHost(), Detector())
        result = linter.run([tmp_path])

        assert result.stats.units_analyzed + len(result.errors) == 2
        assert result.errors[0].path == tmp_path / "bad.py"

    def test_violation_keeps_all_diagnostics(self) -> None:
        """LintViolationError carries every diagnostic."""
        diagnostics = (make_diagnostic(line=1), make_diagnostic(line=2))

        error = LintViolationError(diagnostics)

        assert error.diagnostics == diagnostics


# =============================================================================
# Error hierarchy
# =============================================================================


class TestErrorHierarchy:
    """All loglint errors share one root."""

    @pytest.mark.parametrize("error", [ParsingError, FormatInvariantError, LintViolationError])
    def test_root(self, error: type[Exception]) -> None:
        """Each error is a LogLintError."""
        assert issubclass(error, LogLintError)

    def test_root_is_exception(self) -> None:
        """LogLintError is a regular Exception."""
        assert issubclass(LogLintError, Exception)

    def test_can_catch_all(self) -> None:
        """One except clause catches every loglint error."""
        with pytest.raises(LogLintError):
            raise ParsingError(Path("/a.py"), "boom")
