"""loglint domain layer.

Pure domain logic with no external dependencies.
Only imports: typing, dataclasses, enum, pathlib, types, collections.abc
"""

from loglint.domain.exceptions import (
    FormatInvariantError,
    LintViolationError,
    LogLintError,
    ParsingError,
)
from loglint.domain.model import (
    Ancestor,
    Argument,
    CallSite,
    CalleeIdentity,
    CompilationUnit,
    Diagnostic,
    DiagnosticKind,
    LintConfig,
    LintResult,
    SourceRange,
    StaticType,
)
from loglint.domain.ports import (
    DiagnosticSinkProtocol,
    ReporterProtocol,
    RuleProtocol,
    SourceHostPort,
)

__all__ = [
    # Exceptions
    "LogLintError",
    "ParsingError",
    "FormatInvariantError",
    "LintViolationError",
    # Expression model
    "Ancestor",
    "Argument",
    "CallSite",
    "CalleeIdentity",
    "CompilationUnit",
    "SourceRange",
    "StaticType",
    # Findings
    "Diagnostic",
    "DiagnosticKind",
    "LintResult",
    # Configuration
    "LintConfig",
    # Ports
    "DiagnosticSinkProtocol",
    "ReporterProtocol",
    "RuleProtocol",
    "SourceHostPort",
]
