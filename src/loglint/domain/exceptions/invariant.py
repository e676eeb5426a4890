"""Internal invariant exceptions.

These signal defects in loglint itself, never findings in user code.
"""

from loglint.domain.exceptions.base import LogLintError


class FormatInvariantError(LogLintError):
    """A format specifier has no argument slot after count validation passed.

    The argument count check guarantees every specifier slot exists.
    Reaching this error means that guarantee is broken.

    Attributes:
        template: Format template being validated
        slot: 1-based argument slot that was missing
        supplied: Number of arguments the call supplied
    """

    def __init__(self, template: str, slot: int, supplied: int) -> None:
        if slot < 1:
            raise ValueError(f"slot must be >= 1, got {slot}")
        if supplied < 0:
            raise ValueError(f"supplied must be >= 0, got {supplied}")

        self.template = template
        self.slot = slot
        self.supplied = supplied
        super().__init__(
            f"Format template {template!r} binds argument #{slot} "
            f"but only {supplied} passed count validation"
        )
