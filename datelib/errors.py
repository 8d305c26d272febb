"""Exceptions raised by datelib."""


class DateLibError(Exception):
    """Base class for all datelib errors."""


class ParseError(DateLibError, ValueError):
    """Raised when date text cannot be parsed."""


class InvalidArgumentError(DateLibError, ValueError):
    """Raised when an argument is outside its accepted range."""
