"""Infrastructure adapters for external interfaces."""

from loglint.infrastructure.adapters.python_host import PythonSourceHost

__all__ = [
    "PythonSourceHost",
]
