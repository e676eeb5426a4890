"""Tests for presentation/pytest_plugin."""

import pytest

PLUGIN_ARGS = ("-p", "no:loglint", "-p", "loglint.presentation.pytest_plugin")

SOURCE = "from android.util import Log\nLog.d('T', 'x')\n"


class TestFixtures:
    """Fixtures inside a pytest run."""

    def test_result_of_source_dir(self, pytester: pytest.Pytester) -> None:
        """loglint_result lints loglint_source_dir."""
        pytester.makeini("[pytest]\nloglint_source_dir = app\n")
        pytester.mkdir("app")
        pytester.path.joinpath("app", "main.py").write_text(SOURCE)
        pytester.makepyfile(
            """
            def test_lint(loglint_result):
                assert loglint_result.diagnostic_count == 1
                assert loglint_result.diagnostics[0].issue.id == "LogNotTimber"
            """
        )

        result = pytester.runpytest(*PLUGIN_ARGS)

        result.assert_outcomes(passed=1)

    def test_missing_source_dir(self, pytester: pytest.Pytester) -> None:
        """A missing source directory errors the test."""
        pytester.makepyfile(
            """
            def test_lint(loglint_result):
                pass
            """
        )

        result = pytester.runpytest(*PLUGIN_ARGS)

        result.assert_outcomes(errors=1)
        result.stdout.fnmatch_lines(["*loglint_source_dir*does not exist*"])

    def test_config_override(self, pytester: pytest.Pytester) -> None:
        """loglint_config can be overridden in conftest.py."""
        pytester.makeconftest(
            """
            import pytest
            from loglint.domain.model.configuration import LintConfig

            @pytest.fixture(scope="session")
            def loglint_config():
                return LintConfig(disabled_rules=frozenset({"LogNotTimber"}))
            """
        )
        pytester.mkdir("src")
        pytester.path.joinpath("src", "main.py").write_text(SOURCE)
        pytester.makepyfile(
            """
            def test_lint(loglint, loglint_result):
                loglint.assert_clean(loglint_result)
            """
        )

        result = pytester.runpytest(*PLUGIN_ARGS)

        result.assert_outcomes(passed=1)

    def test_platform_version_ini(self, pytester: pytest.Pytester) -> None:
        """loglint_min_platform_version reaches the host."""
        pytester.makeini("[pytest]\nloglint_min_platform_version = 26\n")
        pytester.makepyfile(
            """
            def test_version(loglint):
                source = (
                    "from timber.log import Timber\\n"
                    "Timber.tag('ThisTagIsWayTooLongForTheLimit').d('y')\\n"
                )
                assert loglint.check_source(source).passed
            """
        )

        result = pytester.runpytest(*PLUGIN_ARGS)

        result.assert_outcomes(passed=1)


class TestMarker:
    """The loglint marker."""

    def test_marker_registered(self, pytester: pytest.Pytester) -> None:
        """Marker is known under --strict-markers."""
        pytester.makepyfile(
            """
            import pytest

            @pytest.mark.loglint
            def test_marked():
                pass
            """
        )

        result = pytester.runpytest("--strict-markers", *PLUGIN_ARGS)

        result.assert_outcomes(passed=1)
