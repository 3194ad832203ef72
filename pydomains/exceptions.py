"""
Exceptions raised by interval domains.

All of them derive from `IntervalError` and from the built-in exception that
best describes the failure, so callers may catch either.
"""


class IntervalError(Exception):
    """Base class for errors raised by interval operations."""


class InvalidEndpointError(IntervalError, ValueError):
    """Raised when an interval is constructed with a non-finite endpoint."""


class UndefinedEndpointError(IntervalError, ValueError):
    """
    Raised when an extremum of an interval is not defined.

    This covers the infimum or supremum of an empty interval, and the minimum
    or maximum of an interval that does not attain it.
    """


class EmptyIntervalError(IntervalError, IndexError):
    """Raised when a member point is requested from an empty interval."""
