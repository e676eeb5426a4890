"""Lint result aggregate."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from loglint.domain.model.diagnostic import DiagnosticKind
from loglint.domain.model.enums import Severity

if TYPE_CHECKING:
    from pathlib import Path

    from loglint.domain.model.diagnostic import Diagnostic


@dataclass(frozen=True, slots=True)
class FileError:
    """A compilation unit that could not be analysed.

    Attributes:
        path: Source file
        reason: Why it was skipped
    """

    path: Path
    reason: str

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.path is None:
            raise TypeError("path must not be None")
        if not self.reason:
            raise ValueError("reason must not be empty")

    def __str__(self) -> str:
        return f"{self.path}: {self.reason}"


@dataclass(frozen=True, slots=True)
class LintStats:
    """Run statistics.

    Attributes:
        units_analyzed: Compilation units fully visited
        call_sites_visited: Call sites handed to the detector
        rules_run: Number of active rules
        analysis_time_ms: Wall clock time
        cancelled: True if the run stopped early
    """

    units_analyzed: int
    call_sites_visited: int
    rules_run: int
    analysis_time_ms: float
    cancelled: bool = False

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.units_analyzed < 0:
            raise ValueError(f"units_analyzed must be >= 0, got {self.units_analyzed}")
        if self.call_sites_visited < 0:
            raise ValueError(f"call_sites_visited must be >= 0, got {self.call_sites_visited}")
        if self.rules_run < 0:
            raise ValueError(f"rules_run must be >= 0, got {self.rules_run}")
        if self.analysis_time_ms < 0:
            raise ValueError(f"analysis_time_ms must be >= 0, got {self.analysis_time_ms}")

    @classmethod
    def empty(cls) -> LintStats:
        """Stats of a run that analysed nothing."""
        return cls(units_analyzed=0, call_sites_visited=0, rules_run=0, analysis_time_ms=0.0)


@dataclass(frozen=True, slots=True)
class LintResult:
    """Result of a lint run.

    Immutable aggregate consumed by reporters.

    Attributes:
        diagnostics: All diagnostics, in unit then call site order
        errors: Units that could not be analysed
        stats: Run statistics
    """

    diagnostics: tuple[Diagnostic, ...]
    errors: tuple[FileError, ...]
    stats: LintStats

    @property
    def passed(self) -> bool:
        """True if nothing was reported."""
        return not self.diagnostics

    @property
    def diagnostic_count(self) -> int:
        """Number of diagnostics."""
        return len(self.diagnostics)

    @property
    def error_count(self) -> int:
        """Number of ERROR severity diagnostics."""
        return sum(1 for d in self.diagnostics if d.issue.severity is Severity.ERROR)

    @property
    def warning_count(self) -> int:
        """Number of WARNING severity diagnostics."""
        return sum(1 for d in self.diagnostics if d.issue.severity is Severity.WARNING)

    def of_kind(self, kind: DiagnosticKind) -> tuple[Diagnostic, ...]:
        """Diagnostics of one kind."""
        return tuple(d for d in self.diagnostics if d.kind is kind)

    def count_by_kind(self) -> dict[DiagnosticKind, int]:
        """Diagnostic count per kind, only kinds that occurred."""
        counts: dict[DiagnosticKind, int] = {}
        for d in self.diagnostics:
            counts[d.kind] = counts.get(d.kind, 0) + 1
        return counts

    @classmethod
    def empty(cls) -> LintResult:
        """Create empty result (passed, nothing analysed)."""
        return cls(diagnostics=(), errors=(), stats=LintStats.empty())
