"""Python API.

Public exports:
    LogLint: Entry point for linting sources, files and directories
"""

from loglint.presentation.api.loglint import LogLint

__all__ = [
    "LogLint",
]
