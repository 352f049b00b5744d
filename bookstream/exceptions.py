"""Errors raised by bookstream queries."""


class BookQueryError(Exception):
    """Base error for book collection queries."""
    pass


class InvalidOperation(BookQueryError):
    """The requested result is undefined for the given collection."""
    pass


class InvalidExpression(BookQueryError):
    """A search expression could not be parsed."""
    pass
