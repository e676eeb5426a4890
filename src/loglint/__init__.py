"""loglint - static analysis of logging facade misuse at call sites."""

__version__ = "0.1.0"

from loglint.presentation.api.loglint import LogLint

__all__ = ["LogLint", "__version__"]
