"""HTTP response status codes."""

from __future__ import annotations

import re
from typing import Optional

from vnethttp.errors import HttpParserError
from vnethttp.options import DEFAULT_OPTIONS, HttpParserOptions

_INT32_MIN = -(2**31)
_INT32_MAX = 2**31 - 1
_LEADING_INT = re.compile(r"[ \t\n\v\f\r]*([+-]?[0-9]+)")


def _is_printable_ascii(text: str) -> bool:
    return all(0x20 <= ord(ch) < 0x7F for ch in text)


def _parse_leading_int(text: str) -> int:
    """Read a leading signed 32-bit integer, ignoring anything after it."""
    match = _LEADING_INT.match(text)
    if match is None:
        raise ValueError("invalid value.")
    value = int(match.group(1))
    if not _INT32_MIN <= value <= _INT32_MAX:
        raise OverflowError("value out of range.")
    return value


class HttpStatusCode:
    """A numeric HTTP status code together with its reason phrase."""

    __slots__ = ("_code", "_reason_phrase")

    def __init__(self, code: int, reason_phrase: str) -> None:
        if code < 0:
            raise ValueError("'code': Invalid numerical status code.")
        if not reason_phrase:
            raise ValueError("'reason_phrase': Empty string.")
        if not _is_printable_ascii(reason_phrase):
            raise ValueError("'reason_phrase': Invalid reason phrase.")
        self._code = int(code)
        self._reason_phrase = str(reason_phrase)

    @property
    def code(self) -> int:
        return self._code

    @property
    def reason_phrase(self) -> str:
        return self._reason_phrase

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, HttpStatusCode):
            return NotImplemented
        return self._code == other._code and self._reason_phrase == other._reason_phrase

    def __hash__(self) -> int:
        return hash((self._code, self._reason_phrase))

    def __repr__(self) -> str:
        return f"HttpStatusCode({self._code!r}, {self._reason_phrase!r})"

    def __str__(self) -> str:
        return f"{self._code} {self._reason_phrase}"

    def is_standard(self) -> bool:
        """Return True if the numeric code is one of the registered status codes."""
        code = self._code
        return (
            100 <= code <= 103
            or 200 <= code <= 208
            or code == 226
            or 300 <= code <= 305
            or code in (307, 308)
            or 400 <= code <= 418
            or 421 <= code <= 426
            or code in (428, 429, 431, 451)
            or 500 <= code <= 508
            or code in (510, 511)
        )

    @classmethod
    def parse(cls, text: str, options: Optional[HttpParserOptions] = None) -> "HttpStatusCode":
        """Parse a status line fragment such as ``"404 Not Found"``.

        Raises ValueError for an empty string and HttpParserError otherwise.
        """
        if options is None:
            options = DEFAULT_OPTIONS

        if not text:
            raise ValueError("'text': Empty string.")

        pos = text.find(" ")
        if pos == -1:
            raise HttpParserError("HTTP parser error: bad response status code.")

        try:
            code = _parse_leading_int(text[:pos])
        except OverflowError:
            raise HttpParserError(
                "HTTP parser error: bad response status code: value out of range."
            ) from None
        except ValueError:
            raise HttpParserError(
                "HTTP parser error: bad response status code: invalid value."
            ) from None

        if options.restrict_response_status_codes_to_predefined_classes and not 100 <= code < 600:
            raise HttpParserError(
                "HTTP parser error: bad response status code: value out of range."
            )

        reason = text[pos + 1:]
        limit = options.max_response_status_code_reason_phrase_length
        if limit is not None and len(reason) > limit:
            raise HttpParserError(
                "HTTP parser error: bad response status code: reason phrase too long."
            )

        try:
            return cls(code, reason)
        except ValueError as ex:
            msg = str(ex)
            sep = msg.find(": ")
            if sep != -1:
                msg = msg[sep + 2:]
            if msg and "A" <= msg[0] <= "Z":
                msg = msg[0].lower() + msg[1:]
            raise HttpParserError(
                "HTTP parser error: bad response status code: " + msg
            ) from None

    @classmethod
    def try_parse(
        cls, text: str, options: Optional[HttpParserOptions] = None
    ) -> Optional["HttpStatusCode"]:
        """Like :meth:`parse`, but return None instead of raising."""
        try:
            return cls.parse(text, options)
        except (HttpParserError, ValueError):
            return None


HttpStatusCode.CONTINUE = HttpStatusCode(100, "Continue")
HttpStatusCode.SWITCHING_PROTOCOLS = HttpStatusCode(101, "Switching Protocols")
HttpStatusCode.PROCESSING = HttpStatusCode(102, "Processing")
HttpStatusCode.EARLY_HINTS = HttpStatusCode(103, "Early Hints")

HttpStatusCode.OK = HttpStatusCode(200, "OK")
HttpStatusCode.CREATED = HttpStatusCode(201, "Created")
HttpStatusCode.ACCEPTED = HttpStatusCode(202, "Accepted")
HttpStatusCode.NON_AUTHORITATIVE_INFORMATION = HttpStatusCode(203, "Non-Authoritative Information")
HttpStatusCode.NO_CONTENT = HttpStatusCode(204, "No Content")
HttpStatusCode.RESET_CONTENT = HttpStatusCode(205, "Reset Content")
HttpStatusCode.PARTIAL_CONTENT = HttpStatusCode(206, "Partial Content")
HttpStatusCode.MULTI_STATUS = HttpStatusCode(207, "Multi-Status")
HttpStatusCode.ALREADY_REPORTED = HttpStatusCode(208, "Already Reported")
HttpStatusCode.IM_USED = HttpStatusCode(226, "IM Used")

HttpStatusCode.MULTIPLE_CHOICES = HttpStatusCode(300, "Multiple Choices")
HttpStatusCode.MOVED_PERMANENTLY = HttpStatusCode(301, "Moved Permanently")
HttpStatusCode.FOUND = HttpStatusCode(302, "Found")
HttpStatusCode.SEE_OTHER = HttpStatusCode(303, "See Other")
HttpStatusCode.NOT_MODIFIED = HttpStatusCode(304, "Not Modified")
HttpStatusCode.USE_PROXY = HttpStatusCode(305, "Use Proxy")
HttpStatusCode.TEMPORARY_REDIRECT = HttpStatusCode(307, "Temporary Redirect")
HttpStatusCode.PERMANENT_REDIRECT = HttpStatusCode(308, "Permanent Redirect")

HttpStatusCode.BAD_REQUEST = HttpStatusCode(400, "Bad Request")
HttpStatusCode.UNAUTHORIZED = HttpStatusCode(401, "Unauthorized")
HttpStatusCode.PAYMENT_REQUIRED = HttpStatusCode(402, "Payment Required")
HttpStatusCode.FORBIDDEN = HttpStatusCode(403, "Forbidden")
HttpStatusCode.NOT_FOUND = HttpStatusCode(404, "Not Found")
HttpStatusCode.METHOD_NOT_ALLOWED = HttpStatusCode(405, "Method Not Allowed")
HttpStatusCode.NOT_ACCEPTABLE = HttpStatusCode(406, "Not Acceptable")
HttpStatusCode.PROXY_AUTHENTICATION_REQUIRED = HttpStatusCode(407, "Proxy Authentication Required")
HttpStatusCode.REQUEST_TIMEOUT = HttpStatusCode(408, "Request Timeout")
HttpStatusCode.CONFLICT = HttpStatusCode(409, "Conflict")
HttpStatusCode.GONE = HttpStatusCode(410, "Gone")
HttpStatusCode.LENGTH_REQUIRED = HttpStatusCode(411, "Length Required")
HttpStatusCode.PRECONDITION_FAILED = HttpStatusCode(412, "Precondition Failed")
HttpStatusCode.CONTENT_TOO_LARGE = HttpStatusCode(413, "Content Too Large")
HttpStatusCode.URI_TOO_LONG = HttpStatusCode(414, "URI Too Long")
HttpStatusCode.UNSUPPORTED_MEDIA_TYPE = HttpStatusCode(415, "Unsupported Media Type")
HttpStatusCode.RANGE_NOT_SATISFIABLE = HttpStatusCode(416, "Range Not Satisfiable")
HttpStatusCode.EXPECTATION_FAILED = HttpStatusCode(417, "Expectation Failed")
HttpStatusCode.IM_A_TEAPOT = HttpStatusCode(418, "I'm a teapot")
HttpStatusCode.MISDIRECTED_REQUEST = HttpStatusCode(421, "Misdirected Request")
HttpStatusCode.UNPROCESSABLE_CONTENT = HttpStatusCode(422, "Unprocessable Content")
HttpStatusCode.LOCKED = HttpStatusCode(423, "Locked")
HttpStatusCode.FAILED_DEPENDENCY = HttpStatusCode(424, "Failed Dependency")
HttpStatusCode.TOO_EARLY = HttpStatusCode(425, "Too Early")
HttpStatusCode.UPGRADE_REQUIRED = HttpStatusCode(426, "Upgrade Required")
HttpStatusCode.PRECONDITION_REQUIRED = HttpStatusCode(428, "Precondition Required")
HttpStatusCode.TOO_MANY_REQUESTS = HttpStatusCode(429, "Too Many Requests")
HttpStatusCode.REQUEST_HEADER_FIELDS_TOO_LARGE = HttpStatusCode(431, "Request Header Fields Too Large")
HttpStatusCode.UNAVAILABLE_FOR_LEGAL_REASONS = HttpStatusCode(451, "Unavailable For Legal Reasons")

HttpStatusCode.INTERNAL_SERVER_ERROR = HttpStatusCode(500, "Internal Server Error")
HttpStatusCode.NOT_IMPLEMENTED = HttpStatusCode(501, "Not Implemented")
HttpStatusCode.BAD_GATEWAY = HttpStatusCode(502, "Bad Gateway")
HttpStatusCode.SERVICE_UNAVAILABLE = HttpStatusCode(503, "Service Unavailable")
HttpStatusCode.GATEWAY_TIMEOUT = HttpStatusCode(504, "Gateway Timeout")
HttpStatusCode.HTTP_VERSION_NOT_SUPPORTED = HttpStatusCode(505, "HTTP Version Not Supported")
HttpStatusCode.VARIANT_ALSO_NEGOTIATES = HttpStatusCode(506, "Variant Also Negotiates")
HttpStatusCode.INSUFFICIENT_STORAGE = HttpStatusCode(507, "Insufficient Storage")
HttpStatusCode.LOOP_DETECTED = HttpStatusCode(508, "Loop Detected")
HttpStatusCode.NOT_EXTENDED = HttpStatusCode(510, "Not Extended")
HttpStatusCode.NETWORK_AUTHENTICATION_REQUIRED = HttpStatusCode(511, "Network Authentication Required")