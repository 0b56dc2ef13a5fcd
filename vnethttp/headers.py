"""An ordered collection of HTTP headers."""

from __future__ import annotations

from typing import Iterator, Optional, Union

from vnethttp.errors import HttpParserError
from vnethttp.header import HttpHeader
from vnethttp.options import DEFAULT_OPTIONS, HttpParserOptions
from vnethttp.status import HttpStatusCode
from vnethttp.strutil import equals_ignore_case

SPECIAL_HEADERS = ("Set-Cookie",)


def is_special_header(name: str) -> bool:
    """Return True if headers of this name are never merged into one."""
    return any(equals_ignore_case(special, name) for special in SPECIAL_HEADERS)


class HttpHeaderCollection:
    """Headers of an HTTP message, in insertion order."""

    def __init__(self) -> None:
        self._headers: list[HttpHeader] = []

    def __iter__(self) -> Iterator[HttpHeader]:
        return iter(self._headers)

    def __len__(self) -> int:
        return len(self._headers)

    def __contains__(self, item: object) -> bool:
        if isinstance(item, str):
            return any(equals_ignore_case(item, h.name) for h in self._headers)
        if isinstance(item, HttpHeader):
            return any(h == item for h in self._headers)
        return False

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, HttpHeaderCollection):
            return NotImplemented
        return str(self) == str(other)

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"HttpHeaderCollection({self._headers!r})"

    def __str__(self) -> str:
        return "\r\n".join(sorted(str(h) for h in self._headers))

    def get(self, name: str) -> HttpHeader:
        """Return the first header with this name; raise KeyError if there is none."""
        for header in self._headers:
            if equals_ignore_case(header.name, name):
                return header
        raise KeyError("The specified header does not exist.")

    def _should_append(self, name: str, force: bool) -> bool:
        return not force and not is_special_header(name) and name in self

    def add(self, name: str, value: str, force: bool = False) -> None:
        """Add a header, merging its value into an existing one of the same name.

        With ``force``, or for special headers such as Set-Cookie, a separate
        header is always added.
        """
        if self._should_append(name, force):
            existing = self.get(name)
            existing.value = f"{existing.value}, {value}"
        else:
            self._headers.append(HttpHeader(name, value))

    def add_header(self, header: HttpHeader, force: bool = False) -> None:
        """Add a copy of ``header``, following the rules of :meth:`add`."""
        self.add(header.name, header.value, force)

    def set(self, name: str, value: str) -> None:
        """Replace all headers of this name with a single one."""
        new_header = HttpHeader(name, value)
        self.remove(name)
        self._headers.append(new_header)

    def remove(self, name: str) -> None:
        """Remove every header with this name."""
        self._headers = [h for h in self._headers if not equals_ignore_case(h.name, name)]

    def remove_header(self, header: HttpHeader) -> None:
        """Remove every header equal to ``header``."""
        self._headers = [h for h in self._headers if not h == header]

    def clear(self) -> None:
        self._headers.clear()

    @classmethod
    def parse(
        cls, text: str, options: Optional[HttpParserOptions] = None
    ) -> "HttpHeaderCollection":
        """Parse CRLF-separated header lines.

        Raises ValueError for an empty string and HttpParserError otherwise.
        """
        if options is None:
            options = DEFAULT_OPTIONS

        if not text:
            raise ValueError("'text': Empty string.")

        lines = text.split("\r\n")

        limit = options.max_header_count
        if limit is not None and len(lines) > limit:
            raise HttpParserError(
                "HTTP parser error: too many HTTP headers.",
                HttpStatusCode.REQUEST_HEADER_FIELDS_TOO_LARGE,
            )

        collection = cls()
        for line in lines:
            try:
                header = HttpHeader.parse(line, options)
            except HttpParserError:
                raise
            except ValueError:
                raise HttpParserError(
                    "HTTP parser error: bad HTTP header.", HttpStatusCode.BAD_REQUEST
                ) from None
            collection.add_header(header, not options.append_headers_with_identical_names)

        return collection

    @classmethod
    def try_parse(
        cls, text: str, options: Optional[HttpParserOptions] = None
    ) -> Optional["HttpHeaderCollection"]:
        """Like :meth:`parse`, but return None instead of raising."""
        try:
            return cls.parse(text, options)
        except (HttpParserError, ValueError):
            return None


HeaderLike = Union[str, HttpHeader]