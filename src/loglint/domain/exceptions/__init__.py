"""Domain exceptions."""

from loglint.domain.exceptions.base import LogLintError
from loglint.domain.exceptions.invariant import FormatInvariantError
from loglint.domain.exceptions.parsing import ParsingError
from loglint.domain.exceptions.violation import LintViolationError

__all__ = [
    "LogLintError",
    "ParsingError",
    "FormatInvariantError",
    "LintViolationError",
]
