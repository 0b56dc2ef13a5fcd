"""Exception types raised by the HTTP library."""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from vnethttp.status import HttpStatusCode


class HttpError(Exception):
    """An HTTP error, optionally carrying the status code to answer with."""

    def __init__(self, message: str, status_code: Optional["HttpStatusCode"] = None) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code


class HttpParserError(HttpError):
    """Raised when an HTTP message, or a part of one, cannot be parsed."""


class InvalidObjectStateError(RuntimeError):
    """Raised when an operation is not valid in an object's current state."""