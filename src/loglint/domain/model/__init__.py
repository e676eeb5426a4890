"""Domain model entities."""

from loglint.domain.model.argument import Argument
from loglint.domain.model.call_category import CallCategory
from loglint.domain.model.call_site import Ancestor, CallSite
from loglint.domain.model.callee import CalleeIdentity
from loglint.domain.model.compilation_unit import CompilationUnit
from loglint.domain.model.configuration import LintConfig
from loglint.domain.model.diagnostic import Diagnostic, DiagnosticKind, FixAction, FixHint
from loglint.domain.model.enums import AncestorKind, Binding, Category, ExpressionKind, Severity
from loglint.domain.model.format_specifier import FormatSpecifier, FormatTemplate
from loglint.domain.model.issue import ISSUES, Issue, all_issues, issue_for
from loglint.domain.model.lint_result import FileError, LintResult, LintStats
from loglint.domain.model.source_range import SourceRange
from loglint.domain.model.static_type import StaticType

__all__ = [
    # Enums
    "AncestorKind",
    "CallCategory",
    "Binding",
    "Category",
    "DiagnosticKind",
    "ExpressionKind",
    "FixAction",
    "Severity",
    "StaticType",
    # Expression model
    "Ancestor",
    "Argument",
    "CallSite",
    "CalleeIdentity",
    "CompilationUnit",
    "SourceRange",
    # Format templates
    "FormatSpecifier",
    "FormatTemplate",
    # Findings
    "Diagnostic",
    "FixHint",
    "ISSUES",
    "Issue",
    "all_issues",
    "issue_for",
    # Configuration and results
    "FileError",
    "LintConfig",
    "LintResult",
    "LintStats",
]
