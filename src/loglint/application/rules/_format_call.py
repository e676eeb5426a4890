"""Binding a facade call's arguments to its format template."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from loglint.application.formatting.template_parser import parse_template
from loglint.domain.exceptions.invariant import FormatInvariantError

if TYPE_CHECKING:
    from loglint.domain.model.argument import Argument
    from loglint.domain.model.call_site import CallSite
    from loglint.domain.model.format_specifier import FormatSpecifier, FormatTemplate


@dataclass(frozen=True, slots=True)
class FormatCall:
    """A facade call split into template and trailing arguments.

    Attributes:
        call: The facade call
        template: Parsed template
        reserved: Arguments before the trailing ones (throwable, template)
    """

    call: CallSite
    template: FormatTemplate
    reserved: int

    @property
    def trailing(self) -> tuple[Argument, ...]:
        """Arguments the template's specifiers bind to."""
        return self.call.arguments[self.reserved :]

    @property
    def supplied(self) -> int:
        """Number of trailing arguments."""
        return len(self.call.arguments) - self.reserved

    @property
    def required(self) -> int:
        """Number of arguments the template needs."""
        return self.template.required_argument_count

    @property
    def count_matches(self) -> bool:
        """True if the call supplies exactly what the template needs."""
        return self.required == self.supplied

    def argument_for(self, specifier: FormatSpecifier) -> Argument:
        """Trailing argument bound to specifier.

        Raises:
            FormatInvariantError: If the slot does not exist. Only possible
                when called without a passing count check.
        """
        if specifier.slot > self.supplied:
            raise FormatInvariantError(self.template.template, specifier.slot, self.supplied)
        return self.trailing[specifier.slot - 1]

    def call_position(self, specifier: FormatSpecifier) -> int:
        """1-based position of the bound argument in the whole call."""
        return self.reserved + specifier.slot


def bind_format_call(call: CallSite) -> FormatCall | None:
    """Locate and parse the template of a facade log call.

    - No arguments → None
    - Throwable first: template is the second argument; a lone Throwable → None
    - Template not a compile-time constant → None

    Args:
        call: Facade log-level call

    Returns:
        FormatCall, or None when there is nothing to validate
    """
    arguments = call.arguments
    if not arguments:
        return None

    reserved = 1
    template_argument = arguments[0]
    if template_argument.is_throwable:
        if len(arguments) == 1:
            return None
        template_argument = arguments[1]
        reserved = 2

    if template_argument.literal_value is None:
        return None  # e.g. a method call result

    return FormatCall(
        call=call,
        template=parse_template(template_argument.literal_value),
        reserved=reserved,
    )
