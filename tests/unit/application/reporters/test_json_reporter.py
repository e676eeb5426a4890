"""Tests for JSONReporter."""

import json
from io import StringIO
from pathlib import Path

from loglint.application.reporters.json_reporter import JSONReporter
from loglint.domain.model.lint_result import FileError, LintResult
from tests.factories import make_diagnostic, make_lint_result


def _render(result: LintResult, indent: int | None = 2) -> dict:
    output = StringIO()
    JSONReporter(output, indent=indent).report(result)
    return json.loads(output.getvalue())


class TestJSONReporter:
    """Tests for JSONReporter.report."""

    def test_empty_result(self) -> None:
        """Empty result is a passing document."""
        data = _render(LintResult.empty())

        assert data["passed"] is True
        assert data["diagnostics"] == []
        assert data["errors"] == []
        assert data["stats"]["units_analyzed"] == 0

    def test_diagnostic_fields(self) -> None:
        """Diagnostics carry issue metadata, location and fix."""
        data = _render(make_lint_result((make_diagnostic(with_fix=True),)))

        (entry,) = data["diagnostics"]
        assert entry["id"] == "LogNotTimber"
        assert entry["kind"] == "WRONG_LOGGER_USED"
        assert entry["severity"] == "WARNING"
        assert entry["category"] == "MESSAGES"
        assert entry["priority"] == 5
        assert entry["location"] == {
            "file": "/test/file.py",
            "line": 1,
            "column": 0,
            "end_line": None,
            "end_column": None,
        }
        assert entry["fix"] == {
            "action": "USE_FACADE",
            "name": "Replace with Timber.d()",
            "replacement": None,
        }
        assert data["passed"] is False
        assert data["summary"]["warning_count"] == 1

    def test_errors(self) -> None:
        """Skipped files are listed with their reason."""
        data = _render(make_lint_result(errors=(FileError(Path("/src/x.py"), "file not found"),)))

        assert data["errors"] == [{"file": "/src/x.py", "reason": "file not found"}]

    def test_compact(self) -> None:
        """indent=None writes a single line."""
        output = StringIO()

        JSONReporter(output, indent=None).report(LintResult.empty())

        assert output.getvalue().count("\n") == 1
