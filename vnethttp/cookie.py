"""HTTP cookies as sent in Set-Cookie and Cookie headers."""

from __future__ import annotations

import enum
import re
import string
from datetime import datetime, timezone
from email.utils import format_datetime, parsedate_to_datetime
from typing import Optional

from vnethttp.errors import HttpParserError
from vnethttp.options import DEFAULT_OPTIONS, HttpParserOptions
from vnethttp.strutil import equals_ignore_case, starts_with_ignore_case, to_lower

_NAME_CHARS = frozenset(string.ascii_letters + string.digits + "!#$%&'*+-.^_`|~")
_SPECIAL_VALUE_CHARS = frozenset(' ,;()<>@:\\"/[]?={}')

_INT32_MIN = -(2**31)
_INT32_MAX = 2**31 - 1
_LEADING_INT = re.compile(r"[ \t\n\v\f\r]*([+-]?[0-9]+)")


class SameSite(enum.Enum):
    """Values of the SameSite cookie attribute."""

    NONE = "None"
    LAX = "Lax"
    STRICT = "Strict"


def _is_printable_ascii(text: str) -> bool:
    return all(0x20 <= ord(ch) < 0x7F for ch in text)


def _is_quoted(text: str) -> bool:
    return (
        text.startswith('"')
        and text.endswith('"')
        and (not text.endswith('\\"') or text.endswith('\\\\"'))
    )


def is_valid_cookie_value(value: str) -> bool:
    """Return True if ``value`` may appear as a cookie value on the wire."""
    if not _is_printable_ascii(value):
        return False

    if _is_quoted(value):
        inner = value[1:-1]
        for i, ch in enumerate(inner):
            if ch != "\\":
                continue
            if i > 0 and inner[i - 1] == "\\":
                continue
            following = inner[i + 1] if i + 1 < len(inner) else '"'
            if following not in ('"', "\\"):
                return False
        return True

    return not any(ch in _SPECIAL_VALUE_CHARS for ch in value)


def escape_cookie_value(value: str) -> str:
    """Quote a value that holds special characters, escaping ``\\`` and ``"``."""
    if not any(ch in _SPECIAL_VALUE_CHARS for ch in value):
        return value
    escaped = value.replace("\\", "\\\\").replace('"', '\\"')
    return f'"{escaped}"'


def unescape_cookie_value(value: str) -> str:
    """Strip the surrounding quotes of a value and resolve backslash escapes."""
    inner = value[1:-1]
    out: list[str] = []
    chars = iter(inner)
    for ch in chars:
        if ch == "\\":
            out.append(next(chars, ""))
        else:
            out.append(ch)
    return "".join(out)


def _format_utc(date: datetime) -> str:
    if date.tzinfo is None:
        date = date.replace(tzinfo=timezone.utc)
    else:
        date = date.astimezone(timezone.utc)
    return format_datetime(date, usegmt=True)


def _parse_utc(text: str) -> Optional[datetime]:
    try:
        date = parsedate_to_datetime(text)
    except (TypeError, ValueError, IndexError):
        return None
    if date is None:
        return None
    if date.tzinfo is None:
        return date.replace(tzinfo=timezone.utc)
    return date.astimezone(timezone.utc)


def _parse_max_age(text: str) -> int:
    match = _LEADING_INT.match(text)
    if match is None:
        raise ValueError("'Max-Age' attribute: invalid value.")
    value = int(match.group(1))
    if not _INT32_MIN <= value <= _INT32_MAX:
        raise ValueError("'Max-Age' attribute: value out of range.")
    return value


def _split_cookie(text: str, lenient: bool) -> list[str]:
    parts: list[str] = []
    current: list[str] = []
    quotes = False
    i = 0
    while i < len(text):
        ch = text[i]
        following = text[i + 1] if i + 1 < len(text) else ""
        if ch == '"' and (i == 0 or text[i - 1] != "\\"):
            quotes = not quotes
            current.append('"')
        elif ch == ";" and not quotes and (lenient or following == " "):
            parts.append("".join(current))
            current = []
            if following == " ":
                i += 1
        else:
            current.append(ch)
        i += 1
    parts.append("".join(current))
    return parts


class HttpCookie:
    """An HTTP cookie with its optional attributes."""

    __slots__ = (
        "_name",
        "_value",
        "expires",
        "max_age",
        "_domain",
        "path",
        "secure",
        "http_only",
        "_same_site",
    )

    def __init__(self, name: str = "MyCookie", value: str = "") -> None:
        self.name = name
        self.value = value
        self.expires: Optional[datetime] = None
        self.max_age: Optional[int] = None
        self._domain: Optional[str] = None
        self.path: Optional[str] = None
        self.secure: Optional[bool] = None
        self.http_only: Optional[bool] = None
        self._same_site: Optional[SameSite] = None

    @property
    def name(self) -> str:
        return self._name

    @name.setter
    def name(self, name: str) -> None:
        if not name:
            raise ValueError("'name': Empty string.")
        if any(ch not in _NAME_CHARS for ch in name):
            raise ValueError("'name': Invalid cookie name.")
        self._name = str(name)

    @property
    def value(self) -> str:
        return self._value

    @value.setter
    def value(self, value: str) -> None:
        if not _is_printable_ascii(value):
            raise ValueError("'value': Invalid cookie value.")
        self._value = str(value)

    @property
    def domain(self) -> Optional[str]:
        return self._domain

    @domain.setter
    def domain(self, domain: Optional[str]) -> None:
        self._domain = None if domain is None else to_lower(domain)

    @property
    def same_site(self) -> Optional[SameSite]:
        return self._same_site

    @same_site.setter
    def same_site(self, same_site: Optional[SameSite]) -> None:
        if same_site is not None and not isinstance(same_site, SameSite):
            raise ValueError("'same_site': Invalid value.")
        self._same_site = same_site

    @property
    def key(self) -> tuple[str, Optional[str], Optional[str]]:
        """The (name, domain, path) triple that identifies the cookie."""
        return (self._name, self._domain, self.path)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, HttpCookie):
            return NotImplemented
        return (
            self._name == other._name
            and self._value == other._value
            and self.expires == other.expires
            and self.max_age == other.max_age
            and self._domain == other._domain
            and self.path == other.path
            and self.secure == other.secure
            and self.http_only == other.http_only
            and self._same_site == other._same_site
        )

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"HttpCookie({self._name!r}, {self._value!r})"

    def __str__(self) -> str:
        parts = [f"{self._name}={escape_cookie_value(self._value)}"]
        if self.expires is not None:
            parts.append(f"Expires={_format_utc(self.expires)}")
        if self.max_age is not None:
            parts.append(f"Max-Age={self.max_age}")
        if self._domain is not None:
            parts.append(f"Domain={self._domain}")
        if self.path is not None:
            parts.append(f"Path={self.path}")
        if self._same_site is not None:
            parts.append(f"SameSite={self._same_site.value}")
        if self.secure:
            parts.append("Secure")
        if self.http_only:
            parts.append("HttpOnly")
        return "; ".join(parts)

    def _apply_attribute(self, attrib: str, options: HttpParserOptions) -> None:
        if starts_with_ignore_case(attrib, "Expires="):
            date = _parse_utc(attrib[8:].replace("-", " "))
            if date is None:
                raise ValueError("'Expires' attribute: bad datetime format.")
            self.expires = date
            return

        if starts_with_ignore_case(attrib, "Max-Age="):
            self.max_age = _parse_max_age(attrib[8:])
            return

        if starts_with_ignore_case(attrib, "Domain="):
            self.domain = attrib[7:]
            return

        if starts_with_ignore_case(attrib, "Path="):
            self.path = attrib[5:]
            return

        if starts_with_ignore_case(attrib, "SameSite="):
            text = attrib[9:]
            for member in SameSite:
                if equals_ignore_case(text, member.value):
                    self.same_site = member
                    return
            raise ValueError("'SameSite' attribute: invalid value.")

        if equals_ignore_case(attrib, "Secure"):
            self.secure = True
            return

        if equals_ignore_case(attrib, "HttpOnly"):
            self.http_only = True
            return

        if not options.ignore_nonstandard_cookie_attributes:
            name = attrib.split("=", 1)[0]
            raise ValueError(f"'{name}' attribute: invalid attribute.")

    @classmethod
    def parse(cls, text: str, options: Optional[HttpParserOptions] = None) -> "HttpCookie":
        """Parse a Set-Cookie style string such as ``"id=abc; Path=/"``.

        Raises ValueError for an empty string and HttpParserError otherwise.
        """
        if options is None:
            options = DEFAULT_OPTIONS

        if not text:
            raise ValueError("'text': Empty string.")

        if options.max_cookie_size is not None and len(text) > options.max_cookie_size:
            raise HttpParserError("HTTP parser error: bad HTTP cookie: cookie too large.")

        parts = _split_cookie(
            text, options.ignore_missing_whitespace_after_cookie_attribute_separator
        )

        first = parts[0]
        pos = first.find("=")
        if pos == -1:
            raise HttpParserError("HTTP parser error: bad HTTP cookie.")
        name = first[:pos]
        value = first[pos + 1:]

        if not options.bypass_is_valid_cookie_value_check and not is_valid_cookie_value(value):
            raise HttpParserError("HTTP parser error: bad HTTP cookie: bad cookie value.")

        cookie = cls()
        try:
            cookie.name = name
        except ValueError:
            raise HttpParserError(
                "HTTP parser error: bad HTTP cookie: bad cookie name."
            ) from None

        try:
            if value.startswith('"') and value.endswith('"') and (
                not text.endswith('\\"') or text.endswith('\\\\"')
            ):
                cookie.value = unescape_cookie_value(value)
            else:
                cookie.value = value
        except ValueError:
            raise HttpParserError(
                "HTTP parser error: bad HTTP cookie: bad cookie value."
            ) from None

        for attrib in parts[1:]:
            try:
                cookie._apply_attribute(attrib, options)
            except ValueError as ex:
                raise HttpParserError(
                    "HTTP parser error: bad HTTP cookie: " + str(ex)
                ) from None

        return cookie

    @classmethod
    def try_parse(
        cls, text: str, options: Optional[HttpParserOptions] = None
    ) -> Optional["HttpCookie"]:
        """Like :meth:`parse`, but return None instead of raising."""
        try:
            return cls.parse(text, options)
        except (HttpParserError, ValueError):
            return None