"""Diagnostic sink port.

The sink is owned by the host. Rules only ever append to it.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from loglint.domain.model.diagnostic import Diagnostic


class DiagnosticSinkProtocol(Protocol):
    """Contract for diagnostic sinks."""

    def report(self, diagnostic: Diagnostic) -> None:
        """Accept one diagnostic. Order of calls is the report order."""
        ...
