# vnethttp

A small library with no dependencies. It builds, serializes and strictly
parses HTTP/1.0 and HTTP/1.1 messages.

## Modules

- `vnethttp.method`: `HttpMethod` validates method tokens. It predefines
  `HttpMethod.GET`, `HEAD`, `POST`, `PUT`, `DELETE`, `CONNECT`, `OPTIONS`,
  `TRACE` and `PATCH`, and `is_standard()` tells these nine from any other
  token.
- `vnethttp.status`: `HttpStatusCode` holds a numeric code and a printable
  reason phrase. The registered codes are predefined, for example
  `HttpStatusCode.OK` and `HttpStatusCode.NOT_FOUND`. `is_standard()` checks
  a code against that registered set.
- `vnethttp.header`: `HttpHeader` is a single field. Its name is stored in
  lowercase and its value must be printable ASCII.
- `vnethttp.headers`: `HttpHeaderCollection` is an ordered list of headers
  with case-insensitive lookup. Its methods are `get`, `add`, `add_header`,
  `set`, `remove`, `remove_header` and `clear`, and it supports `in`, `len()`
  and iteration.
  - `add` merges a repeated name into the existing header as `"old, new"`.
    It does not merge with `force=True`, and it never merges a special
    header. The only special header is `Set-Cookie`, which
    `is_special_header` reports.
  - `str()` gives the header lines sorted and joined by CRLF.
- `vnethttp.cookie`: `HttpCookie` covers name, value, `expires`, `max_age`,
  `domain`, `path`, `secure`, `http_only` and `same_site`. `same_site` takes
  a member of the `SameSite` enum. The module also has
  `is_valid_cookie_value`, `escape_cookie_value` and `unescape_cookie_value`.
- `vnethttp.cookies`: `HttpCookieCollection` keys cookies by name, domain and
  path.
  - Adding a cookie with an empty value removes the matching cookie.
  - `remove_expired(now=None)` drops session cookies, which have neither
    `expires` nor `max_age`. It also drops cookies that have expired by
    `now`. `max_age` counts from the time the cookie was added.
  - `str()` gives a `Cookie` header value: names and values only.
- `vnethttp.request` and `vnethttp.response`: `HttpRequest` and
  `HttpResponse` are complete messages with `serialize()`, `parse()` and
  `try_parse()`.
  - `set_payload`, `resize_payload` and `delete_payload` keep the
    `Content-Length` header in step with the payload.
  - `vnethttp.response.parse_content_length` reads a `Content-Length` value.
- `vnethttp.options`: `HttpParserOptions` is a frozen dataclass of parser
  limits and leniency switches. `DEFAULT_OPTIONS` holds the defaults. It
  covers:
  - maximum lengths for header names, header values, the method, the request
    URI and the reason phrase;
  - the maximum number of headers;
  - the maximum payload and cookie size;
  - whether non-standard methods and status codes are allowed;
  - how headers with the same name are combined;
  - how lenient the cookie parser is.
- `vnethttp.errors`: `HttpError` carries `message` and an optional
  `status_code`. `HttpParserError` is raised for malformed input; for
  requests and headers its `status_code` is the one a server would answer
  with. `InvalidObjectStateError` is also defined here.
- `vnethttp.security`: the TLS configuration enums `SecurityProtocol`,
  `ApplicationType`, `AcceptFlags` and `ConnectFlags`, and the
  `SecurityError` exception, which carries an `error_code`.
- `vnethttp.strutil`: string helpers that ignore ASCII case:
  `equals_ignore_case`, `starts_with_ignore_case`, `ends_with_ignore_case`,
  `to_lower`, `to_upper` and `split`.

Every `parse` raises `ValueError` for empty input and `HttpParserError` for
malformed input. Every `try_parse` returns `None` instead. The one exception
is `HttpCookieCollection.try_parse`, which still raises `ValueError` for an
empty string.

## Installation

```
pip install .
```

For the tests:

```
pip install .[test]
pytest
```

## Usage

```python
from vnethttp.request import HttpRequest
from vnethttp.response import HttpResponse
from vnethttp.status import HttpStatusCode
from vnethttp.errors import HttpParserError

request = HttpRequest.parse(b"GET /index.html HTTP/1.1\r\nHost: example.com\r\n\r\n")
print(request.method, request.uri, request.headers.get("host").value)

response = HttpResponse(HttpStatusCode.OK)
response.headers.add("Content-Type", "text/plain")
response.set_payload(b"hello")
wire = response.serialize()

try:
    HttpRequest.parse(b"GET / HTTP/2.0\r\n\r\n")
except HttpParserError as exc:
    print(exc, exc.status_code)  # 505 HTTP Version Not Supported
```

Cookies:

```python
from vnethttp.cookie import HttpCookie, SameSite
from vnethttp.cookies import HttpCookieCollection

cookie = HttpCookie.parse("session=token; Path=/; Secure; HttpOnly; SameSite=Lax")
assert cookie.same_site is SameSite.LAX

jar = HttpCookieCollection.parse("a=1; b=2")
print(str(jar))  # a=1; b=2
```

## What it does not do

This is a message model and parser only. It opens no sockets and has no HTTP
client or server. It does no TLS: `vnethttp.security` defines configuration
flags and an exception, but no secure connection or security context. Request
URIs are kept as validated strings, not parsed URI objects. No cookie storage
spans several domains, and nothing is persisted to disk.