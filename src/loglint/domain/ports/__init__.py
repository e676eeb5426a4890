"""Domain ports (Protocols implemented outside the domain)."""

from loglint.domain.ports.reporter import ReporterProtocol
from loglint.domain.ports.rule import RuleProtocol
from loglint.domain.ports.sink import DiagnosticSinkProtocol
from loglint.domain.ports.source_host import SourceHostPort, SourceHostProtocol

__all__ = [
    "DiagnosticSinkProtocol",
    "ReporterProtocol",
    "RuleProtocol",
    "SourceHostPort",
    "SourceHostProtocol",
]
