"""Source host port.

The host owns parsing and type resolution. It hands loglint ready-made
compilation units built from the expression model.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from collections.abc import Iterator
    from pathlib import Path

    from loglint.domain.model.compilation_unit import CompilationUnit


class SourceHostProtocol(Protocol):
    """Contract for hosts that turn source files into call sites.

    Implementations resolve callee identities, argument static types and
    constant string values, then freeze them into CompilationUnits.
    """

    def parse_file(self, path: Path) -> CompilationUnit:
        """Build the compilation unit of one file.

        Args:
            path: Source file

        Returns:
            CompilationUnit with every call site of the file

        Raises:
            ParsingError: If the file cannot be read or parsed
        """
        ...

    def discover(self, root: Path) -> Iterator[Path]:
        """Yield source files under root that this host can parse.

        Args:
            root: File or directory

        Returns:
            Iterator of source file paths, in stable order
        """
        ...


# Backwards compatibility alias
SourceHostPort = SourceHostProtocol
