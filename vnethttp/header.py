"""A single HTTP header field."""

from __future__ import annotations

import string
from typing import Optional

from vnethttp.errors import HttpParserError
from vnethttp.options import DEFAULT_OPTIONS, HttpParserOptions
from vnethttp.status import HttpStatusCode
from vnethttp.strutil import equals_ignore_case, to_lower

_NAME_CHARS = frozenset(string.ascii_letters + string.digits + "-")


def _is_printable_ascii(text: str) -> bool:
    return all(0x20 <= ord(ch) < 0x7F for ch in text)


class HttpHeader:
    """An HTTP header: a lowercase name and a printable ASCII value."""

    __slots__ = ("_name", "_value")

    def __init__(self, name: str = "x-my-header", value: str = "") -> None:
        self.name = name
        self.value = value

    @property
    def name(self) -> str:
        return self._name

    @name.setter
    def name(self, name: str) -> None:
        if not name:
            raise ValueError("'name': Empty string.")
        if any(ch not in _NAME_CHARS for ch in name):
            raise ValueError("'name': Invalid header name.")
        self._name = to_lower(name)

    @property
    def value(self) -> str:
        return self._value

    @value.setter
    def value(self, value: str) -> None:
        if not _is_printable_ascii(value):
            raise ValueError("'value': Invalid header value.")
        self._value = str(value)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, HttpHeader):
            return NotImplemented
        return self._value == other._value and equals_ignore_case(self._name, other._name)

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"HttpHeader({self._name!r}, {self._value!r})"

    def __str__(self) -> str:
        return f"{self._name}: {self._value}"

    @classmethod
    def parse(cls, text: str, options: Optional[HttpParserOptions] = None) -> "HttpHeader":
        """Parse a header line such as ``"Content-Type: text/html"``.

        Raises ValueError for an empty string and HttpParserError otherwise.
        """
        if options is None:
            options = DEFAULT_OPTIONS

        if not text:
            raise ValueError("'text': Empty string.")

        pos = text.find(": ")
        if pos == -1:
            raise HttpParserError(
                "HTTP parser error: bad HTTP header.", HttpStatusCode.BAD_REQUEST
            )

        name = text[:pos]
        value = text[pos + 2:]

        limit = options.max_header_name_length
        if limit is not None and len(name) > limit:
            raise HttpParserError(
                "HTTP parser error: bad HTTP header: header name too long.",
                HttpStatusCode.REQUEST_HEADER_FIELDS_TOO_LARGE,
            )

        limit = options.max_header_value_length
        if limit is not None and len(value) > limit:
            raise HttpParserError(
                "HTTP parser error: bad HTTP header: header value too long.",
                HttpStatusCode.REQUEST_HEADER_FIELDS_TOO_LARGE,
            )

        header = cls()
        try:
            header.name = name
        except ValueError:
            raise HttpParserError(
                "HTTP parser error: bad HTTP header: invalid header name.",
                HttpStatusCode.BAD_REQUEST,
            ) from None

        try:
            header.value = value
        except ValueError:
            raise HttpParserError(
                "HTTP parser error: bad HTTP header: invalid header value.",
                HttpStatusCode.BAD_REQUEST,
            ) from None

        return header

    @classmethod
    def try_parse(
        cls, text: str, options: Optional[HttpParserOptions] = None
    ) -> Optional["HttpHeader"]:
        """Like :meth:`parse`, but return None instead of raising."""
        try:
            return cls.parse(text, options)
        except (HttpParserError, ValueError):
            return None