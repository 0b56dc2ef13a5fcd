"""HTTP request methods."""

from __future__ import annotations

import string
from typing import Optional

from vnethttp.errors import HttpParserError
from vnethttp.options import DEFAULT_OPTIONS, HttpParserOptions
from vnethttp.status import HttpStatusCode

_TOKEN_CHARS = frozenset(string.ascii_letters + string.digits + "!#$%&'*+-.^_`|~")

_STANDARD_METHODS = frozenset(
    ("GET", "HEAD", "POST", "PUT", "DELETE", "CONNECT", "OPTIONS", "TRACE", "PATCH")
)


class HttpMethod:
    """An HTTP request method, identified by its case-sensitive token name."""

    __slots__ = ("_name",)

    def __init__(self, name: str) -> None:
        if not name:
            raise ValueError("'name': Empty string.")
        if any(ch not in _TOKEN_CHARS for ch in name):
            raise ValueError("'name': Invalid request method name.")
        self._name = str(name)

    @property
    def name(self) -> str:
        return self._name

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, HttpMethod):
            return NotImplemented
        return self._name == other._name

    def __hash__(self) -> int:
        return hash(self._name)

    def __repr__(self) -> str:
        return f"HttpMethod({self._name!r})"

    def __str__(self) -> str:
        return self._name

    def is_standard(self) -> bool:
        """Return True for the nine methods defined by the HTTP specification."""
        return self._name in _STANDARD_METHODS

    @classmethod
    def parse(cls, text: str, options: Optional[HttpParserOptions] = None) -> "HttpMethod":
        """Parse a request method name.

        Raises ValueError for an empty string and HttpParserError otherwise.
        """
        if options is None:
            options = DEFAULT_OPTIONS

        if not text:
            raise ValueError("'text': Empty string.")

        limit = options.max_request_method_length
        if limit is not None and len(text) > limit:
            raise HttpParserError(
                "HTTP parser error: bad request method: method name too long.",
                HttpStatusCode.METHOD_NOT_ALLOWED,
            )

        try:
            return cls(text)
        except ValueError:
            raise HttpParserError(
                "HTTP parser error: bad request method: invalid method name.",
                HttpStatusCode.METHOD_NOT_ALLOWED,
            ) from None

    @classmethod
    def try_parse(
        cls, text: str, options: Optional[HttpParserOptions] = None
    ) -> Optional["HttpMethod"]:
        """Like :meth:`parse`, but return None instead of raising."""
        try:
            return cls.parse(text, options)
        except (HttpParserError, ValueError):
            return None


HttpMethod.GET = HttpMethod("GET")
HttpMethod.HEAD = HttpMethod("HEAD")
HttpMethod.POST = HttpMethod("POST")
HttpMethod.PUT = HttpMethod("PUT")
HttpMethod.DELETE = HttpMethod("DELETE")
HttpMethod.CONNECT = HttpMethod("CONNECT")
HttpMethod.OPTIONS = HttpMethod("OPTIONS")
HttpMethod.TRACE = HttpMethod("TRACE")
HttpMethod.PATCH = HttpMethod("PATCH")