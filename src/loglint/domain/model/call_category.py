"""Primary rule category of a call site."""

from enum import Enum, auto


class CallCategory(Enum):
    """Exactly one category per visited call.

    - PLATFORM_LOGGER: raw platform logger method (never format-checked)
    - FORMAT_ROUTINE: the string formatting routine, possibly nested in a facade call
    - TAG: facade tag-setting method
    - LOG_LEVEL: facade log-level method (or an override in a facade subclass)
    - UNRELATED: anything else, no rule applies
    """

    PLATFORM_LOGGER = auto()
    FORMAT_ROUTINE = auto()
    TAG = auto()
    LOG_LEVEL = auto()
    UNRELATED = auto()
