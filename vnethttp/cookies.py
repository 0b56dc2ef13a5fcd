"""A collection of HTTP cookies, keyed by name, domain and path."""

from __future__ import annotations

import copy
from datetime import datetime, timedelta, timezone
from typing import Iterator, Optional

from vnethttp.cookie import HttpCookie
from vnethttp.errors import HttpParserError
from vnethttp.options import DEFAULT_OPTIONS, HttpParserOptions

_Key = tuple[str, Optional[str], Optional[str]]

_ANY = object()


def _as_utc(date: datetime) -> datetime:
    if date.tzinfo is None:
        return date.replace(tzinfo=timezone.utc)
    return date.astimezone(timezone.utc)


def _split_cookies(text: str) -> list[str]:
    """Split on ``"; "`` separators that are outside double quotes."""
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
        elif ch == ";" and not quotes and following == " ":
            parts.append("".join(current))
            current = []
            i += 1
        else:
            current.append(ch)
        i += 1
    parts.append("".join(current))
    return parts


def _probe_key(name: str, domain: Optional[str], path: Optional[str]) -> Optional[_Key]:
    """Build the identifying key for a lookup, or None if the name is invalid."""
    try:
        probe = HttpCookie(name)
    except ValueError:
        return None
    probe.domain = domain
    probe.path = path
    return probe.key


class HttpCookieCollection:
    """Cookies identified by (name, domain, path), in the order they were added."""

    def __init__(self) -> None:
        self._cookies: dict[_Key, HttpCookie] = {}
        self._added: dict[_Key, datetime] = {}

    def __iter__(self) -> Iterator[HttpCookie]:
        return iter(list(self._cookies.values()))

    def __len__(self) -> int:
        return len(self._cookies)

    def __contains__(self, cookie: object) -> bool:
        """A cookie is contained if one with the same key is stored and equal to it.

        A string is looked up as a cookie name.
        """
        if isinstance(cookie, str):
            return self.contains(cookie)
        if isinstance(cookie, HttpCookie):
            stored = self._cookies.get(cookie.key)
            return stored is not None and stored == cookie
        return False

    def __repr__(self) -> str:
        return f"HttpCookieCollection({list(self._cookies.values())!r})"

    def __str__(self) -> str:
        """Render as the value of a Cookie request header (names and values only)."""
        return "; ".join(
            str(HttpCookie(cookie.name, cookie.value)) for cookie in self._cookies.values()
        )

    def get(self, name: str, domain=_ANY, path=_ANY) -> HttpCookie:
        """Return a stored cookie; raise KeyError if there is none.

        With only a name, the first cookie of that name is returned. With a
        domain and/or path, the cookie must match name, domain and path exactly
        (an omitted one of the two counts as None).
        """
        if domain is _ANY and path is _ANY:
            for cookie in self._cookies.values():
                if cookie.name == name:
                    return cookie
            raise KeyError("The specified cookie does not exist.")

        key = _probe_key(
            name, None if domain is _ANY else domain, None if path is _ANY else path
        )
        if key is None or key not in self._cookies:
            raise KeyError("The specified cookie does not exist.")
        return self._cookies[key]

    def contains(self, name: str, domain=_ANY, path=_ANY) -> bool:
        """Return True if :meth:`get` with the same arguments would find a cookie."""
        try:
            self.get(name, domain, path)
        except KeyError:
            return False
        return True

    def add(self, cookie: HttpCookie) -> None:
        """Store a copy of ``cookie``, replacing any cookie with the same key.

        A cookie with an empty value only removes the one it replaces.
        """
        key = cookie.key
        self._cookies.pop(key, None)
        self._added.pop(key, None)
        if cookie.value:
            self._cookies[key] = copy.copy(cookie)
            self._added[key] = datetime.now(timezone.utc)

    def remove(self, cookie: HttpCookie) -> None:
        """Remove ``cookie`` if an equal cookie is stored."""
        if cookie not in self:
            return
        del self._cookies[cookie.key]
        self._added.pop(cookie.key, None)

    def remove_expired(self, now: Optional[datetime] = None) -> None:
        """Remove session cookies and cookies that have expired by ``now``."""
        moment = _as_utc(now if now is not None else datetime.now(timezone.utc))
        for key, cookie in list(self._cookies.items()):
            if self._is_expired(key, cookie, moment):
                del self._cookies[key]
                self._added.pop(key, None)

    def _is_expired(self, key: _Key, cookie: HttpCookie, now: datetime) -> bool:
        if cookie.expires is None and cookie.max_age is None:
            return True
        if cookie.max_age is not None:
            if now >= self._added[key] + timedelta(seconds=cookie.max_age):
                return True
        if cookie.expires is not None and now >= _as_utc(cookie.expires):
            return True
        return False

    def clear(self) -> None:
        self._cookies.clear()
        self._added.clear()

    @classmethod
    def parse(
        cls, text: str, options: Optional[HttpParserOptions] = None
    ) -> "HttpCookieCollection":
        """Parse a Cookie header value such as ``"a=1; b=2"``.

        Raises ValueError for an empty string and HttpParserError otherwise.
        """
        if options is None:
            options = DEFAULT_OPTIONS

        if not text:
            raise ValueError("'text': Empty string.")

        collection = cls()
        for part in _split_cookies(text):
            try:
                cookie = HttpCookie.parse(part, options)
            except HttpParserError:
                raise
            except ValueError:
                raise HttpParserError("HTTP parser error: bad HTTP cookie.") from None
            collection.add(cookie)
        return collection

    @classmethod
    def try_parse(
        cls, text: str, options: Optional[HttpParserOptions] = None
    ) -> Optional["HttpCookieCollection"]:
        """Like :meth:`parse`, but return None on a parser error.

        An empty string still raises ValueError.
        """
        if not text:
            raise ValueError("'text': Empty string.")
        try:
            return cls.parse(text, options)
        except HttpParserError:
            return None