"""
Exception Types for the Satellite Console

Two failure kinds reach the session:
- Recoverable validation failures never raise; they come back as outcome values.
- Fatal input failures raise InputStreamClosed and end the session.
"""


class SatelliteConsoleError(Exception):
    """Base class for all satellite console errors."""


class ConfigurationError(SatelliteConsoleError):
    """Configuration could not be loaded or failed validation."""


class InputStreamClosed(SatelliteConsoleError):
    """The input stream was closed, exhausted, or became unreadable."""


FATAL_EXCEPTIONS = (InputStreamClosed,)


def is_fatal(error: BaseException) -> bool:
    """Return True if the error must end the interactive session."""
    return isinstance(error, FATAL_EXCEPTIONS)
