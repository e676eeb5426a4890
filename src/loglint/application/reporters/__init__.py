"""Reporters for lint results."""

from loglint.application.reporters._base import BaseReporter
from loglint.application.reporters.console import ConsoleConfig, ConsoleReporter
from loglint.application.reporters.json_reporter import JSONReporter
from loglint.application.reporters.plain_text import PlainTextReporter

__all__ = [
    "BaseReporter",
    "ConsoleConfig",
    "ConsoleReporter",
    "JSONReporter",
    "PlainTextReporter",
]
