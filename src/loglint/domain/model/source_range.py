"""Source range value object."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import ast
    from pathlib import Path


@dataclass(frozen=True, slots=True)
class SourceRange:
    """Span of an expression in a source file.

    A range without an end is a point: hosts that only know where a node
    starts still produce a usable anchor.

    Attributes:
        file: Path to source file
        line: First line (1-based)
        column: First column (0-based)
        end_line: Last line, None for a point
        end_column: Column after the last character, None for a point
    """

    file: Path
    line: int
    column: int
    end_line: int | None = None
    end_column: int | None = None

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.file is None:
            raise TypeError("file must not be None")
        if self.line <= 0:
            raise ValueError(f"line must be > 0, got {self.line}")
        if self.column < 0:
            raise ValueError(f"column must be >= 0, got {self.column}")
        if (self.end_line is None) != (self.end_column is None):
            raise ValueError("end_line and end_column must be given together")
        if self.end_line is not None and self.end_line < self.line:
            raise ValueError(f"end_line ({self.end_line}) must be >= line ({self.line})")
        if (
            self.end_line == self.line
            and self.end_column is not None
            and self.end_column < self.column
        ):
            raise ValueError(
                f"end_column ({self.end_column}) must be >= column ({self.column}) on one line"
            )

    @classmethod
    def from_node(cls, file: Path, node: ast.AST) -> SourceRange:
        """Range covered by an ast node.

        Nodes the parser did not place (synthesized ones) fall back to
        the start of the file. A missing or inconsistent end gives a point.
        """
        line = max(getattr(node, "lineno", None) or 1, 1)
        column = max(getattr(node, "col_offset", None) or 0, 0)
        end_line = getattr(node, "end_lineno", None)
        end_column = getattr(node, "end_col_offset", None)
        if (
            end_line is None
            or end_column is None
            or end_line < line
            or (end_line == line and end_column < column)
        ):
            return cls(file, line, column)
        return cls(file, line, column, end_line, end_column)

    @property
    def span(self) -> str:
        """line:column, followed by -end_line:end_column when the end is known."""
        start = f"{self.line}:{self.column}"
        if self.end_line is None:
            return start
        return f"{start}-{self.end_line}:{self.end_column}"

    def __str__(self) -> str:
        """Format as file:line:column, without the end."""
        return f"{self.file}:{self.line}:{self.column}"
