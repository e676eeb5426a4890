"""Compilation unit: one source file worth of call sites."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pathlib import Path

    from loglint.domain.model.call_site import CallSite


@dataclass(frozen=True, slots=True)
class CompilationUnit:
    """Call sites of one source file, in visit order.

    Attributes:
        path: Source file
        call_sites: Calls in source order
        min_platform_version: Minimum supported platform version the unit
            is compiled against. None = unknown.
    """

    path: Path
    call_sites: tuple[CallSite, ...]
    min_platform_version: int | None = None

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.path is None:
            raise TypeError("path must not be None")
        if self.min_platform_version is not None and self.min_platform_version < 1:
            raise ValueError(
                f"min_platform_version must be >= 1, got {self.min_platform_version}"
            )
