"""HTTP requests: building, serialising and parsing."""

from __future__ import annotations

from typing import Optional
from urllib.parse import urlsplit

from vnethttp.errors import HttpParserError
from vnethttp.headers import HttpHeaderCollection
from vnethttp.method import HttpMethod
from vnethttp.options import DEFAULT_OPTIONS, HttpParserOptions
from vnethttp.response import parse_content_length
from vnethttp.status import HttpStatusCode


def _is_valid_uri(text: str) -> bool:
    if not text or not all(0x21 <= ord(ch) < 0x7F for ch in text):
        return False
    try:
        urlsplit(text)
    except ValueError:
        return False
    return True


def _with_context(message: str, context: str) -> str:
    pos = message.find(": ")
    if pos == -1:
        return message
    return message[: pos + 2] + context + message[pos + 2:]


def _bad_request(message: str = "HTTP parser error: bad HTTP request.") -> HttpParserError:
    return HttpParserError(message, HttpStatusCode.BAD_REQUEST)


class HttpRequest:
    """An HTTP/1.1 request: method, request URI, headers and payload bytes."""

    def __init__(
        self,
        method: Optional[HttpMethod] = None,
        uri: str = "/",
        headers: Optional[HttpHeaderCollection] = None,
        payload: Optional[bytes] = None,
    ) -> None:
        self.method = method if method is not None else HttpMethod.GET
        self.uri = uri
        self.headers = headers if headers is not None else HttpHeaderCollection()
        self._payload = b""
        if payload:
            self.set_payload(payload)

    @property
    def uri(self) -> str:
        return self._uri

    @uri.setter
    def uri(self, uri: str) -> None:
        if not _is_valid_uri(uri):
            raise ValueError("'uri': URI malformed.")
        self._uri = str(uri)

    @property
    def payload(self) -> bytes:
        return self._payload

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, HttpRequest):
            return NotImplemented
        return (
            self.method == other.method
            and self._uri == other._uri
            and self.headers == other.headers
            and self._payload == other._payload
        )

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return (
            f"HttpRequest({self.method!r}, {self._uri!r}, "
            f"{self.headers!r}, {self._payload!r})"
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
        """Return the request as it is sent on the wire."""
        parts = urlsplit(self._uri)
        target = parts.path or "/"
        if parts.query:
            target += "?" + parts.query
        if parts.fragment:
            target += "#" + parts.fragment

        head = f"{self.method} {target} HTTP/1.1\r\n"
        headers = str(self.headers)
        if headers:
            head += headers + "\r\n"
        head += "\r\n"
        return head.encode("latin-1") + self._payload

    @classmethod
    def parse(
        cls, data: bytes, options: Optional[HttpParserOptions] = None
    ) -> "HttpRequest":
        """Parse a complete HTTP/1.0 or HTTP/1.1 request.

        Raises ValueError for empty data and HttpParserError otherwise.
        """
        if options is None:
            options = DEFAULT_OPTIONS

        if not data:
            raise ValueError("'data': Empty buffer.")

        request = cls()
        text = bytes(data).decode("latin-1")

        line_end = text.find("\r\n")
        if line_end == -1:
            raise _bad_request()

        method_end = text.find(" ")
        if method_end == -1 or method_end >= line_end:
            raise _bad_request()

        try:
            method = HttpMethod.parse(text[:method_end], options)
        except HttpParserError as ex:
            raise HttpParserError(
                _with_context(str(ex), "bad HTTP request: "), ex.status_code
            ) from None
        except ValueError:
            raise _bad_request() from None

        if not options.allow_nonstandard_request_methods and not method.is_standard():
            raise HttpParserError(
                "HTTP parser error: bad HTTP request: bad request method: non-standard method.",
                HttpStatusCode.METHOD_NOT_ALLOWED,
            )

        request.method = method
        text = text[method_end + 1:]
        line_end -= method_end + 1

        uri_end = text.find(" ")
        if uri_end == -1 or uri_end >= line_end:
            raise _bad_request()

        uri = text[:uri_end]
        limit = options.max_request_uri_length
        if limit is not None and len(uri) > limit:
            raise HttpParserError(
                "HTTP parser error: bad HTTP request: bad request URI: URI too long.",
                HttpStatusCode.URI_TOO_LONG,
            )

        if not _is_valid_uri(uri):
            raise _bad_request(
                "HTTP parser error: bad HTTP request: bad request URI: URI malformed."
            )

        request.uri = uri
        text = text[uri_end + 1:]
        line_end -= uri_end + 1

        version = text[:line_end]
        if version not in ("HTTP/1.0", "HTTP/1.1"):
            raise HttpParserError(
                "HTTP parser error: bad HTTP request: invalid/unsupported HTTP version.",
                HttpStatusCode.HTTP_VERSION_NOT_SUPPORTED
                if version.startswith("HTTP/")
                else HttpStatusCode.BAD_REQUEST,
            )

        text = text[line_end + 2:]

        if text == "\r\n":
            return request
        if not text:
            raise _bad_request()

        headers_end = text.find("\r\n\r\n")
        if headers_end != -1:
            header_text = text[:headers_end]
            text = text[headers_end + 2:]
            try:
                request.headers = HttpHeaderCollection.parse(header_text, options)
            except HttpParserError as ex:
                raise HttpParserError(
                    _with_context(str(ex), "bad HTTP request: "), ex.status_code
                ) from None
            except ValueError:
                raise _bad_request() from None

        content_length: Optional[int] = None
        if "Content-Length" in request.headers:
            try:
                content_length = parse_content_length(
                    request.headers.get("Content-Length").value
                )
            except ValueError as ex:
                raise _bad_request(
                    "HTTP parser error: bad HTTP request: bad Content-Length header: "
                    + str(ex)
                ) from None

        if not text.startswith("\r\n"):
            raise _bad_request()
        text = text[2:]

        if not text:
            return request

        if content_length is None:
            raise HttpParserError(
                "HTTP parser error: bad HTTP request: bad message body: "
                "Content-Length header does not exist.",
                HttpStatusCode.LENGTH_REQUIRED,
            )

        if len(text) != content_length:
            raise _bad_request(
                "HTTP parser error: bad HTTP request: bad message body: "
                "payload size != Content-Length"
            )

        if options.max_payload_size is not None and content_length > options.max_payload_size:
            raise HttpParserError(
                "HTTP parser error: bad HTTP request: bad message body: payload too large.",
                HttpStatusCode.CONTENT_TOO_LARGE,
            )

        request._payload = text.encode("latin-1")
        return request

    @classmethod
    def try_parse(
        cls, data: bytes, options: Optional[HttpParserOptions] = None
    ) -> Optional["HttpRequest"]:
        """Like :meth:`parse`, but return None instead of raising."""
        try:
            return cls.parse(data, options)
        except (HttpParserError, ValueError):
            return None