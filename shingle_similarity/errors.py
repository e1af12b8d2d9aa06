"""
Exceptions raised by shingle-based metrics.
"""


class ShingleSimilarityError(Exception):
    """Base class for all errors raised by this package."""


class ConfigurationError(ShingleSimilarityError):
    """A metric or profiler was configured with an invalid value."""


class InvalidInputError(ShingleSimilarityError):
    """
    A string argument was missing or of the wrong type.

    Attributes:
        argument: Name of the offending argument (e.g. "s1")
    """

    def __init__(self, argument: str, message: str | None = None):
        self.argument = argument
        super().__init__(message or f"{argument} must be a string")


class DegenerateComparisonError(ShingleSimilarityError):
    """Neither string produced a shingle, so the score is undefined."""
