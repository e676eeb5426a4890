"""Console reporter: LintResult → rich formatted string."""

from __future__ import annotations

from dataclasses import dataclass
from io import StringIO
from typing import TYPE_CHECKING

from rich.console import Console
from rich.table import Table
from rich.text import Text

from loglint.application.reporters._base import BaseReporter
from loglint.domain.model.enums import Severity

if TYPE_CHECKING:
    from loglint.domain.model.diagnostic import Diagnostic
    from loglint.domain.model.lint_result import LintResult

_SEVERITY_STYLE = {
    Severity.ERROR: "bold red",
    Severity.WARNING: "yellow",
    Severity.INFO: "cyan",
}


@dataclass(frozen=True, slots=True)
class ConsoleConfig:
    """Configuration for console reporter.

    Attributes:
        show_fixes: Show the fix hint column.
        max_diagnostics: Max diagnostics to display. None = unlimited.
        width: Console width in characters.
    """

    show_fixes: bool = True
    max_diagnostics: int | None = None
    width: int = 120

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.max_diagnostics is not None and self.max_diagnostics < 0:
            raise ValueError(f"max_diagnostics must be >= 0, got {self.max_diagnostics}")
        if self.width < 40:
            raise ValueError(f"width must be >= 40, got {self.width}")


class ConsoleReporter(BaseReporter):
    """Console reporter: outputs rich formatted text.

    Output is str, not print(). Caller decides destination.
    """

    def __init__(self, config: ConsoleConfig | None = None) -> None:
        """Initialize reporter.

        Args:
            config: Reporter configuration. Uses defaults if None.
        """
        self._config = config or ConsoleConfig()

    def report(self, result: LintResult) -> str:
        """Format lint result as rich formatted string.

        Args:
            result: Lint result to format.

        Returns:
            Formatted string with colors and a diagnostics table.
        """
        output = StringIO()
        console = Console(file=output, force_terminal=True, width=self._config.width)

        self._render_header(console, result)

        diagnostics = result.diagnostics
        if self._config.max_diagnostics is not None:
            diagnostics = diagnostics[: self._config.max_diagnostics]
        if diagnostics:
            self._render_diagnostics(console, diagnostics)

        if result.errors:
            self._render_errors(console, result)

        return output.getvalue()

    def _render_header(self, console: Console, result: LintResult) -> None:
        console.print()
        console.rule("[bold]LOGGING LINT[/bold]")
        console.print()

        status = "[green]PASS[/green]" if result.passed else "[red]FAIL[/red]"
        console.print(
            f"[bold]Diagnostics:[/bold] {result.diagnostic_count} "
            f"(errors: {result.error_count}, warnings: {result.warning_count}) "
            f"[bold]Files:[/bold] {result.stats.units_analyzed} {status}"
        )
        console.print()

    def _render_diagnostics(self, console: Console, diagnostics: tuple[Diagnostic, ...]) -> None:
        table = Table(show_lines=False)
        table.add_column("Severity")
        table.add_column("Issue")
        table.add_column("Location")
        table.add_column("Message")
        if self._config.show_fixes:
            table.add_column("Fix")

        for diagnostic in diagnostics:
            issue = diagnostic.issue
            style = _SEVERITY_STYLE[issue.severity]
            # messages quote user source, never parse them as markup
            row: list[Text] = [
                Text(issue.severity.name, style=style),
                Text(issue.id),
                Text(str(diagnostic.source_range)),
                Text(diagnostic.message),
            ]
            if self._config.show_fixes:
                row.append(Text(diagnostic.fix_hint.name if diagnostic.fix_hint else ""))
            table.add_row(*row)

        console.print(table)
        console.print()

    def _render_errors(self, console: Console, result: LintResult) -> None:
        console.print(f"[bold red]SKIPPED FILES[/bold red] ({len(result.errors)})")
        console.print()
        for error in result.errors:
            console.print(f"  {error.path}: {error.reason}", markup=False, highlight=False)
        console.print()
