"""Exceptions raised by statsdwire."""


class StatsdWireError(Exception):
    """Base exception for statsdwire."""


class ValidationError(StatsdWireError, ValueError):
    """Raised when a constrained field is constructed with an invalid value."""


class ClockError(StatsdWireError):
    """Raised when a timestamp cannot be expressed relative to the Unix epoch."""
