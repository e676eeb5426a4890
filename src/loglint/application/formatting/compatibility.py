"""Conversion to argument type compatibility matrix.

Immutable process-wide tables. Lookups are pure functions.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from enum import Enum, auto
from types import MappingProxyType
from typing import TYPE_CHECKING, Final

from loglint.domain.model.static_type import StaticType

if TYPE_CHECKING:
    from loglint.domain.model.format_specifier import FormatSpecifier


class Compatibility(Enum):
    """Outcome of matching one specifier against one argument type."""

    ACCEPTED = auto()
    TYPE_MISMATCH = auto()
    WRONG_SUFFIX = auto()  # date/time conversion with an unknown sub-letter


TIME_SUFFIXES: Final = frozenset("HIklMSLNpzZsQ")
DATE_SUFFIXES: Final = frozenset("BbhAaCYyjmde")
COMPOSITE_SUFFIXES: Final = frozenset("RTrDFc")
DATE_TIME_SUFFIXES: Final = TIME_SUFFIXES | DATE_SUFFIXES | COMPOSITE_SUFFIXES

DATE_TIME_TYPES: Final = frozenset(
    {StaticType.INTEGER, StaticType.LONG, StaticType.DATE, StaticType.CALENDAR}
)


def _any(_: StaticType) -> bool:
    return True


def _boolean(t: StaticType) -> bool:
    return t is StaticType.BOOLEAN


def _char(t: StaticType) -> bool:
    return t is StaticType.CHAR


def _numeric(t: StaticType) -> bool:
    return t.is_numeric


def _hashable(t: StaticType) -> bool:
    # hash codes of booleans and numbers are meaningless in a log line
    return t is not StaticType.BOOLEAN and not t.is_numeric


_ACCEPTS: Final[Mapping[str, Callable[[StaticType], bool]]] = MappingProxyType(
    {
        **dict.fromkeys("bB", _boolean),
        **dict.fromkeys("cC", _char),
        **dict.fromkeys("sS", _any),
        **dict.fromkeys("hH", _hashable),
        **dict.fromkeys("xXdoeEfgGaA", _numeric),
    }
)


def accepts(conversion: str, static_type: StaticType) -> bool:
    """Check if a general (non date/time) conversion accepts a type.

    Conversions outside the table accept everything.
    """
    predicate = _ACCEPTS.get(conversion, _any)
    return predicate(static_type)


def check(specifier: FormatSpecifier, static_type: StaticType) -> Compatibility:
    """Match a specifier against an argument's static type.

    UNKNOWN types are always ACCEPTED: what cannot be classified is not
    judged.

    Args:
        specifier: Parsed specifier
        static_type: Resolved type of the argument bound to it

    Returns:
        Compatibility outcome
    """
    if not static_type.is_known:
        return Compatibility.ACCEPTED

    if specifier.is_date_time:
        if specifier.conversion not in DATE_TIME_SUFFIXES:
            return Compatibility.WRONG_SUFFIX
        if static_type in DATE_TIME_TYPES:
            return Compatibility.ACCEPTED
        return Compatibility.TYPE_MISMATCH

    if accepts(specifier.conversion, static_type):
        return Compatibility.ACCEPTED
    return Compatibility.TYPE_MISMATCH
