"""Diagnostic sinks."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from loglint.domain.model.diagnostic import Diagnostic


class CollectingSink:
    """Sink that keeps diagnostics in report order.

    Mutable. Owned by whoever drives the analysis; not shared between
    threads.
    """

    def __init__(self) -> None:
        self._diagnostics: list[Diagnostic] = []

    def report(self, diagnostic: Diagnostic) -> None:
        """Append one diagnostic."""
        if diagnostic is None:
            raise TypeError("diagnostic must not be None")
        self._diagnostics.append(diagnostic)

    @property
    def diagnostics(self) -> tuple[Diagnostic, ...]:
        """Snapshot of collected diagnostics."""
        return tuple(self._diagnostics)

    def __len__(self) -> int:
        return len(self._diagnostics)
