"""Closed set of static types an argument can have."""

from enum import Enum


class StaticType(Enum):
    """Resolved static type of an argument.

    Hosts map their type system onto this lattice. Anything they cannot
    place is UNKNOWN, which every check treats as "do not judge".
    Values are the display names used in diagnostic messages.
    """

    STRING = "String"
    BOOLEAN = "boolean"
    CHAR = "char"
    INTEGER = "int"
    LONG = "long"
    FLOAT = "float"
    DOUBLE = "double"
    BYTE = "byte"
    SHORT = "short"
    DATE = "Date"
    CALENDAR = "Calendar"
    THROWABLE = "Throwable"
    UNKNOWN = "unknown"

    @property
    def is_numeric(self) -> bool:
        """True for integral and floating point types."""
        return self in _NUMERIC

    @property
    def is_integral(self) -> bool:
        """True for byte, short, int and long."""
        return self in _INTEGRAL

    @property
    def is_known(self) -> bool:
        """False only for UNKNOWN."""
        return self is not StaticType.UNKNOWN

    @property
    def display_name(self) -> str:
        """Name shown in messages (e.g. "int", "String")."""
        return self.value


_INTEGRAL = frozenset({StaticType.BYTE, StaticType.SHORT, StaticType.INTEGER, StaticType.LONG})
_NUMERIC = _INTEGRAL | {StaticType.FLOAT, StaticType.DOUBLE}
