"""Parsed printf-style format template."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class FormatSpecifier:
    """One argument-consuming conversion in a format template.

    Attributes:
        text: Raw specifier text (e.g. "%-2$08.3f")
        conversion: Conversion character (e.g. "d", "s", "H" for "%tH")
        slot: 1-based argument the specifier binds to. Explicit index
            for "%N$", otherwise the ordinal among non-indexed specifiers.
        position: 1-based index from the running cursor: explicit N, or
            one past the previous specifier's position. Informational
            only, for callers inspecting a template; rules bind arguments
            by slot.
        explicit_index: N for "%N$" specifiers, None otherwise
        date_time_prefix: "t" or "T" for date/time conversions
        flags: Flag characters, possibly empty
        width: Minimum width, None if absent
        precision: Precision, None if absent
        offset: Offset of the "%" in the template
    """

    text: str
    conversion: str
    slot: int
    position: int
    explicit_index: int | None = None
    date_time_prefix: str | None = None
    flags: str = ""
    width: int | None = None
    precision: int | None = None
    offset: int = 0

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.text.startswith("%"):
            raise ValueError(f"text must start with '%', got {self.text!r}")
        if len(self.conversion) != 1:
            raise ValueError(f"conversion must be one character, got {self.conversion!r}")
        if self.slot < 1:
            raise ValueError(f"slot must be >= 1, got {self.slot}")
        if self.position < 1:
            raise ValueError(f"position must be >= 1, got {self.position}")
        if self.explicit_index is not None and self.explicit_index != self.slot:
            raise ValueError(
                f"explicit_index ({self.explicit_index}) must equal slot ({self.slot})"
            )
        if self.date_time_prefix not in (None, "t", "T"):
            raise ValueError(f"date_time_prefix must be 't' or 'T', got {self.date_time_prefix!r}")
        if self.offset < 0:
            raise ValueError(f"offset must be >= 0, got {self.offset}")

    @property
    def is_date_time(self) -> bool:
        """True for "%t?" / "%T?" conversions."""
        return self.date_time_prefix is not None

    @property
    def date_time_suffix(self) -> str | None:
        """Sub-conversion letter of a date/time conversion."""
        return self.conversion if self.is_date_time else None

    @property
    def conversion_text(self) -> str:
        """Conversion as written: "tH" for date/time, "d" otherwise."""
        if self.date_time_prefix is not None:
            return self.date_time_prefix + self.conversion
        return self.conversion

    def __str__(self) -> str:
        return self.text


@dataclass(frozen=True, slots=True)
class FormatTemplate:
    """Result of parsing one template.

    Attributes:
        template: The literal template string
        specifiers: Argument-consuming specifiers in scan order
            ("%%" and "%n" are not included)
        required_argument_count: Highest argument slot referenced
    """

    template: str
    specifiers: tuple[FormatSpecifier, ...]
    required_argument_count: int

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.required_argument_count < 0:
            raise ValueError(
                f"required_argument_count must be >= 0, got {self.required_argument_count}"
            )
        highest = max((s.slot for s in self.specifiers), default=0)
        if highest != self.required_argument_count:
            raise ValueError(
                f"required_argument_count ({self.required_argument_count}) "
                f"must equal highest slot ({highest})"
            )

    @property
    def has_specifiers(self) -> bool:
        """True if at least one specifier consumes an argument."""
        return bool(self.specifiers)
