"""Errors raised when bytes are not legal for a header field."""

from __future__ import annotations


class InvalidHeaderField(ValueError):
    """Base class for header field validation failures.

    The error carries no payload: it never reports which byte was rejected
    or where it was found.
    """

    message = "invalid header field"

    def __init__(self) -> None:
        super().__init__(self.message)


class InvalidHeaderFieldName(InvalidHeaderField):
    """Raised when bytes or a string contain a character illegal in a header name."""

    message = "invalid header field name"


class InvalidHeaderFieldValue(InvalidHeaderField):
    """Raised when bytes or a string contain a character illegal in a header value."""

    message = "invalid header field value"
