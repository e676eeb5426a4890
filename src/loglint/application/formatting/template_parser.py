"""printf-style format template parser.

Scans a literal template left to right with the conversion grammar
``%[argument_index$][flags][width][.precision][t|T]conversion``.

Argument binding follows java.util.Formatter:
- "%N$x" binds argument N
- "%<x" binds the same argument as the previous specifier
- "%x" binds the next ordinary argument (1, 2, 3, ... independent of
  explicit indices)

Besides the binding (``slot``), every specifier records a running
``position``: explicit N, or one past the previous specifier's position.

"%%" and "%n" are literals and bind nothing. A "%" preceded by a
backslash escape is plain text. Anything that does not match the grammar
(a dangling "%" at the end, "%!") is inert text, never an error.
"""

from __future__ import annotations

import re
from typing import Final

from loglint.domain.model.format_specifier import FormatSpecifier, FormatTemplate

# Groups: 1 index "N$", 2 flags, 3 width, 4 ".precision", 5 t/T, 6 conversion
SPECIFIER_PATTERN: Final = re.compile(r"%(\d+\$)?([-#+ 0,(<]*)?(\d+)?(\.\d+)?([tT])?([a-zA-Z%])")

_LITERAL_CONVERSIONS: Final = frozenset({"%", "n"})
_ESCAPE: Final = "\\"
_RELATIVE_FLAG: Final = "<"


def parse_template(template: str) -> FormatTemplate:
    """Parse a literal template into specifiers.

    Args:
        template: Constant template string. Non-constant templates are
            rejected upstream and never reach this function.

    Returns:
        FormatTemplate with specifiers in scan order and the required
        argument count (highest slot referenced)

    Raises:
        TypeError: If template is not a str
    """
    if not isinstance(template, str):
        raise TypeError(f"template must be str, got {type(template).__name__}")

    specifiers: list[FormatSpecifier] = []
    search_from = 0
    scanned = 0  # text before this offset was checked for escapes
    cursor = 1
    ordinal = 0

    while True:
        match = SPECIFIER_PATTERN.search(template, search_from)
        if match is None:
            break

        start = match.start()
        scanned = _skip_escaped(template, scanned, start)
        if scanned > start:
            # escape sequence swallowed the "%"
            search_from = scanned
            continue
        search_from = match.end()

        index_group, flags, width, precision, date_time, conversion = match.groups()
        if date_time is None and conversion in _LITERAL_CONVERSIONS:
            continue

        flags = flags or ""
        if _RELATIVE_FLAG in flags:
            if not specifiers:
                continue  # nothing to refer back to
            previous = specifiers[-1]
            slot = previous.slot
            position = previous.position
            explicit = None
        elif index_group is not None:
            explicit = int(index_group[:-1])
            if explicit == 0:
                continue  # argument indices are 1-based
            slot = explicit
            position = explicit
            cursor = explicit + 1
        else:
            ordinal += 1
            slot = ordinal
            position = cursor
            cursor += 1
            explicit = None

        specifiers.append(
            FormatSpecifier(
                text=match.group(0),
                conversion=conversion,
                slot=slot,
                position=position,
                explicit_index=explicit,
                date_time_prefix=date_time,
                flags=flags,
                width=int(width) if width is not None else None,
                precision=int(precision[1:]) if precision is not None else None,
                offset=start,
            )
        )

    return FormatTemplate(
        template=template,
        specifiers=tuple(specifiers),
        required_argument_count=max((s.slot for s in specifiers), default=0),
    )


def required_argument_count(template: str) -> int:
    """Number of arguments a template needs (highest slot referenced)."""
    return parse_template(template).required_argument_count


def _skip_escaped(template: str, scanned: int, until: int) -> int:
    """Advance over text up to until, jumping over backslash escapes.

    Returns:
        New scanned offset. Greater than until if an escape covers it.
    """
    while scanned < until:
        if template[scanned] == _ESCAPE:
            scanned += 1
        scanned += 1
    return scanned
