"""
Domain-specific exception hierarchy for the clocktime package.
"""


class ClockTimeError(Exception):
    """Base class for all clocktime errors."""


class InvalidTimeFormatError(ClockTimeError, ValueError):
    """Raised when a string is not in the form hh:mm:ss."""


class UnreadableSourceError(ClockTimeError, TypeError):
    """Raised when a stored value cannot be read as a clock time."""
