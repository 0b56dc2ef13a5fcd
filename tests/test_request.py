import pytest

from vnethttp.errors import HttpParserError
from vnethttp.headers import HttpHeaderCollection
from vnethttp.method import HttpMethod
from vnethttp.options import HttpParserOptions
from vnethttp.request import HttpRequest
from vnethttp.status import HttpStatusCode


def test_default_request_serializes_to_get_root():
    assert HttpRequest().serialize() == b"GET / HTTP/1.1\r\n\r\n"


def test_serialize_with_query_and_payload():
    request = HttpRequest(HttpMethod.POST, "/submit?x=1")
    request.set_payload(b"hello")
    assert request.serialize() == (
        b"POST /submit?x=1 HTTP/1.1\r\ncontent-length: 5\r\n\r\nhello"
    )


def test_set_payload_updates_content_length():
    request = HttpRequest()
    request.set_payload(b"abc")
    assert request.headers.get("Content-Length").value == "3"
    assert request.payload == b"abc"


def test_set_empty_payload_raises():
    with pytest.raises(ValueError):
        HttpRequest().set_payload(b"")


def test_resize_and_delete_payload():
    request = HttpRequest(payload=b"abcdef")
    request.resize_payload(3)
    assert request.payload == b"abc"
    assert request.headers.get("Content-Length").value == "3"
    request.resize_payload(0)
    assert "Content-Length" not in request.headers
    request.set_payload(b"xy")
    request.delete_payload()
    assert request.payload == b""
    assert "Content-Length" not in request.headers


def test_invalid_uri_rejected():
    with pytest.raises(ValueError):
        HttpRequest(uri="/has space")


def test_parse_simple_request():
    request = HttpRequest.parse(b"GET /index.html HTTP/1.1\r\n\r\n")
    assert request.method == HttpMethod.GET
    assert request.uri == "/index.html"
    assert len(request.headers) == 0
    assert request.payload == b""


def test_parse_headers_and_payload():
    data = b"POST /form HTTP/1.0\r\nHost: example.com\r\nContent-Length: 4\r\n\r\nbody"
    request = HttpRequest.parse(data)
    assert request.method == HttpMethod.POST
    assert request.headers.get("host").value == "example.com"
    assert request.payload == b"body"


def test_round_trip():
    headers = HttpHeaderCollection()
    headers.add("Host", "example.com")
    request = HttpRequest(HttpMethod.PUT, "/item?id=7", headers, b"data")
    assert HttpRequest.parse(request.serialize()) == request


def test_parse_empty_raises_value_error():
    with pytest.raises(ValueError):
        HttpRequest.parse(b"")


def _status_of(data, options=None):
    with pytest.raises(HttpParserError) as info:
        HttpRequest.parse(data, options)
    return info.value.status_code


def test_missing_line_end_is_bad_request():
    assert _status_of(b"GET / HTTP/1.1") == HttpStatusCode.BAD_REQUEST


def test_nonstandard_method_rejected_by_default():
    assert _status_of(b"BREW / HTTP/1.1\r\n\r\n") == HttpStatusCode.METHOD_NOT_ALLOWED


def test_nonstandard_method_allowed_by_option():
    options = HttpParserOptions(allow_nonstandard_request_methods=True)
    request = HttpRequest.parse(b"BREW / HTTP/1.1\r\n\r\n", options)
    assert request.method == HttpMethod("BREW")


def test_method_too_long_message_gets_context():
    options = HttpParserOptions(max_request_method_length=3)
    with pytest.raises(HttpParserError) as info:
        HttpRequest.parse(b"POST / HTTP/1.1\r\n\r\n", options)
    assert str(info.value) == (
        "HTTP parser error: bad HTTP request: bad request method: method name too long."
    )
    assert info.value.status_code == HttpStatusCode.METHOD_NOT_ALLOWED


def test_unsupported_version():
    assert _status_of(b"GET / HTTP/2.0\r\n\r\n") == HttpStatusCode.HTTP_VERSION_NOT_SUPPORTED
    assert _status_of(b"GET / FOO/1.1\r\n\r\n") == HttpStatusCode.BAD_REQUEST


def test_uri_too_long():
    options = HttpParserOptions(max_request_uri_length=4)
    assert _status_of(b"GET /abcdef HTTP/1.1\r\n\r\n", options) == HttpStatusCode.URI_TOO_LONG


def test_body_without_content_length():
    data = b"POST / HTTP/1.1\r\nHost: example.com\r\n\r\nbody"
    assert _status_of(data) == HttpStatusCode.LENGTH_REQUIRED


def test_body_size_mismatch():
    data = b"POST / HTTP/1.1\r\nContent-Length: 10\r\n\r\nbody"
    assert _status_of(data) == HttpStatusCode.BAD_REQUEST


def test_payload_too_large():
    options = HttpParserOptions(max_payload_size=2)
    data = b"POST / HTTP/1.1\r\nContent-Length: 4\r\n\r\nbody"
    assert _status_of(data, options) == HttpStatusCode.CONTENT_TOO_LARGE


def test_bad_content_length_header():
    data = b"POST / HTTP/1.1\r\nContent-Length: -1\r\n\r\n"
    with pytest.raises(HttpParserError) as info:
        HttpRequest.parse(data)
    assert str(info.value).endswith("bad Content-Length header: value out of range.")


def test_try_parse_returns_none_on_error():
    assert HttpRequest.try_parse(b"garbage") is None
    assert HttpRequest.try_parse(b"") is None
    assert HttpRequest.try_parse(b"GET / HTTP/1.1\r\n\r\n") == HttpRequest()