"""Base exceptions for loglint domain."""


class LogLintError(Exception):
    """Root exception for all loglint errors.

    All domain exceptions inherit from this.
    Allows catching all loglint-specific errors.
    """
