"""Exceptions raised by the big_factorial package."""


class FactorialError(Exception):
    """Base class for all big_factorial errors."""


class InvalidArgument(FactorialError, ValueError):
    """Raised when an argument violates the contract (e.g. a negative n).

    Subclasses ValueError so callers that already guard factorial input with
    ``except ValueError`` keep working.
    """
