"""Format template parsing and argument type compatibility."""

from loglint.application.formatting.compatibility import Compatibility, accepts, check
from loglint.application.formatting.template_parser import (
    parse_template,
    required_argument_count,
)

__all__ = [
    "Compatibility",
    "accepts",
    "check",
    "parse_template",
    "required_argument_count",
]
