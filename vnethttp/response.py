"""HTTP responses: building, serialising and parsing."""

from __future__ import annotations

import re
from typing import Optional

from vnethttp.errors import HttpParserError
from vnethttp.headers import HttpHeaderCollection
from vnethttp.options import DEFAULT_OPTIONS, HttpParserOptions
from vnethttp.status import HttpStatusCode

_UINT64_MAX = 2**64 - 1
_LEADING_UINT = re.compile(r"[ \t\n\v\f\r]*([+-]?)([0-9]+)")


def parse_content_length(text: str) -> int:
    """Read the leading unsigned integer of a Content-Length value.

    Raises ValueError with "invalid value." or "value out of range.".
    """
    if text.startswith("-"):
        raise ValueError("value out of range.")
    match = _LEADING_UINT.match(text)
    if match is None:
        raise ValueError("invalid value.")
    value = int(match.group(2))
    if match.group(1) == "-" or value > _UINT64_MAX:
        raise ValueError("value out of range.")
    return value


def _with_context(message: str, context: str) -> str:
    pos = message.find(": ")
    if pos == -1:
        return message
    return message[: pos + 2] + context + message[pos + 2:]


def _fail(message: str) -> HttpParserError:
    return HttpParserError(message)


class HttpResponse:
    """An HTTP/1.1 response: status code, headers and payload bytes."""

    def __init__(
        self,
        status_code: Optional[HttpStatusCode] = None,
        headers: Optional[HttpHeaderCollection] = None,
        payload: Optional[bytes] = None,
    ) -> None:
        self.status_code = status_code if status_code is not None else HttpStatusCode.OK
        self.headers = headers if headers is not None else HttpHeaderCollection()
        self._payload = b""
        if payload:
            self.set_payload(payload)

    @property
    def payload(self) -> bytes:
        return self._payload

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, HttpResponse):
            return NotImplemented
        return (
            self.status_code == other.status_code
            and self.headers == other.headers
            and self._payload == other._payload
        )

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return (
            f"HttpResponse({self.status_code!r}, {self.headers!r}, {self._payload!r})"
        )

    def set_payload(self, payload: bytes) -> None:
        """Replace the payload and set the Content-Length header accordingly."""
        data = bytes(payload)
        if not data:
            raise ValueError("'payload': Empty buffer.")
        self._payload = data
        self.headers.set("Content-Length", str(len(data)))

    def resize_payload(self, size: int) -> None:
        """Truncate or zero-extend the payload, keeping Content-Length in step."""
        if size < 0:
            raise ValueError("'size': Negative size.")
        self._payload = self._payload[:size].ljust(size, b"\x00")
        if size == 0:
            self.headers.remove("Content-Length")
        else:
            self.headers.set("Content-Length", str(size))

    def delete_payload(self) -> None:
        """Drop the payload and the Content-Length header."""
        self._payload = b""
        self.headers.remove("Content-Length")

    def serialize(self) -> bytes:
        """Return the response as it is sent on the wire."""
        head = f"HTTP/1.1 {self.status_code}\r\n"
        headers = str(self.headers)
        if headers:
            head += headers + "\r\n"
        head += "\r\n"
        return head.encode("latin-1") + self._payload

    @classmethod
    def parse(
        cls, data: bytes, options: Optional[HttpParserOptions] = None
    ) -> "HttpResponse":
        """Parse a complete HTTP/1.0 or HTTP/1.1 response.

        Raises ValueError for empty data and HttpParserError otherwise.
        """
        if options is None:
            options = DEFAULT_OPTIONS

        if not data:
            raise ValueError("'data': Empty buffer.")

        response = cls()
        text = bytes(data).decode("latin-1")

        line_end = text.find("\r\n")
        if line_end == -1:
            raise _fail("HTTP parser error: bad HTTP response.")

        version_end = text.find(" ")
        if version_end == -1 or version_end >= line_end:
            raise _fail("HTTP parser error: bad HTTP response.")

        version = text[:version_end]
        if version not in ("HTTP/1.0", "HTTP/1.1"):
            raise _fail(
                "HTTP parser error: bad HTTP response: invalid/unsupported HTTP version."
            )

        text = text[version_end + 1:]
        line_end -= version_end + 1

        try:
            status_code = HttpStatusCode.parse(text[:line_end], options)
        except HttpParserError as ex:
            raise _fail(_with_context(str(ex), "bad HTTP response: ")) from None
        except ValueError:
            raise _fail("HTTP parser error: bad HTTP response.") from None

        if not options.allow_nonstandard_response_status_codes and not status_code.is_standard():
            raise _fail(
                "HTTP parser error: bad HTTP response: bad response status code: "
                "non-standard response code."
            )

        response.status_code = status_code
        text = text[line_end + 2:]

        if text == "\r\n":
            return response
        if not text:
            raise _fail("HTTP parser error: bad HTTP response.")

        headers_end = text.find("\r\n\r\n")
        if headers_end != -1:
            header_text = text[:headers_end]
            text = text[headers_end + 2:]
            try:
                response.headers = HttpHeaderCollection.parse(header_text, options)
            except HttpParserError as ex:
                raise _fail(_with_context(str(ex), "bad HTTP response: ")) from None
            except ValueError:
                raise _fail("HTTP parser error: bad HTTP response.") from None

        content_length: Optional[int] = None
        if "Content-Length" in response.headers:
            try:
                content_length = parse_content_length(
                    response.headers.get("Content-Length").value
                )
            except ValueError as ex:
                raise _fail(
                    "HTTP parser error: bad HTTP response: bad Content-Length header: "
                    + str(ex)
                ) from None

        if not text.startswith("\r\n"):
            raise _fail("HTTP parser error: bad HTTP response.")
        text = text[2:]

        if not text:
            return response

        if content_length is None:
            raise _fail(
                "HTTP parser error: bad HTTP response: bad message body: "
                "Content-Length header does not exist."
            )

        if len(text) != content_length:
            raise _fail(
                "HTTP parser error: bad HTTP response: bad message body: "
                "payload size != Content-Length"
            )

        if options.max_payload_size is not None and content_length > options.max_payload_size:
            raise _fail(
                "HTTP parser error: bad HTTP response: bad message body: payload too large."
            )

        response._payload = text.encode("latin-1")
        return response

    @classmethod
    def try_parse(
        cls, data: bytes, options: Optional[HttpParserOptions] = None
    ) -> Optional["HttpResponse"]:
        """Like :meth:`parse`, but return None instead of raising."""
        try:
            return cls.parse(data, options)
        except (HttpParserError, ValueError):
            return None