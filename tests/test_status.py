import dataclasses

import pytest

from vnethttp.errors import HttpParserError
from vnethttp.options import DEFAULT_OPTIONS, HttpParserOptions
from vnethttp.status import HttpStatusCode

PREDEFINED = [
    HttpStatusCode.CONTINUE,
    HttpStatusCode.SWITCHING_PROTOCOLS,
    HttpStatusCode.PROCESSING,
    HttpStatusCode.EARLY_HINTS,
    HttpStatusCode.OK,
    HttpStatusCode.CREATED,
    HttpStatusCode.ACCEPTED,
    HttpStatusCode.NON_AUTHORITATIVE_INFORMATION,
    HttpStatusCode.NO_CONTENT,
    HttpStatusCode.RESET_CONTENT,
    HttpStatusCode.PARTIAL_CONTENT,
    HttpStatusCode.MULTI_STATUS,
    HttpStatusCode.ALREADY_REPORTED,
    HttpStatusCode.IM_USED,
    HttpStatusCode.MULTIPLE_CHOICES,
    HttpStatusCode.MOVED_PERMANENTLY,
    HttpStatusCode.FOUND,
    HttpStatusCode.SEE_OTHER,
    HttpStatusCode.NOT_MODIFIED,
    HttpStatusCode.USE_PROXY,
    HttpStatusCode.TEMPORARY_REDIRECT,
    HttpStatusCode.PERMANENT_REDIRECT,
    HttpStatusCode.BAD_REQUEST,
    HttpStatusCode.UNAUTHORIZED,
    HttpStatusCode.PAYMENT_REQUIRED,
    HttpStatusCode.FORBIDDEN,
    HttpStatusCode.NOT_FOUND,
    HttpStatusCode.METHOD_NOT_ALLOWED,
    HttpStatusCode.NOT_ACCEPTABLE,
    HttpStatusCode.PROXY_AUTHENTICATION_REQUIRED,
    HttpStatusCode.REQUEST_TIMEOUT,
    HttpStatusCode.CONFLICT,
    HttpStatusCode.GONE,
    HttpStatusCode.LENGTH_REQUIRED,
    HttpStatusCode.PRECONDITION_FAILED,
    HttpStatusCode.CONTENT_TOO_LARGE,
    HttpStatusCode.URI_TOO_LONG,
    HttpStatusCode.UNSUPPORTED_MEDIA_TYPE,
    HttpStatusCode.RANGE_NOT_SATISFIABLE,
    HttpStatusCode.EXPECTATION_FAILED,
    HttpStatusCode.IM_A_TEAPOT,
    HttpStatusCode.MISDIRECTED_REQUEST,
    HttpStatusCode.UNPROCESSABLE_CONTENT,
    HttpStatusCode.LOCKED,
    HttpStatusCode.FAILED_DEPENDENCY,
    HttpStatusCode.TOO_EARLY,
    HttpStatusCode.UPGRADE_REQUIRED,
    HttpStatusCode.PRECONDITION_REQUIRED,
    HttpStatusCode.TOO_MANY_REQUESTS,
    HttpStatusCode.REQUEST_HEADER_FIELDS_TOO_LARGE,
    HttpStatusCode.UNAVAILABLE_FOR_LEGAL_REASONS,
    HttpStatusCode.INTERNAL_SERVER_ERROR,
    HttpStatusCode.NOT_IMPLEMENTED,
    HttpStatusCode.BAD_GATEWAY,
    HttpStatusCode.SERVICE_UNAVAILABLE,
    HttpStatusCode.GATEWAY_TIMEOUT,
    HttpStatusCode.HTTP_VERSION_NOT_SUPPORTED,
    HttpStatusCode.VARIANT_ALSO_NEGOTIATES,
    HttpStatusCode.INSUFFICIENT_STORAGE,
    HttpStatusCode.LOOP_DETECTED,
    HttpStatusCode.NOT_EXTENDED,
    HttpStatusCode.NETWORK_AUTHENTICATION_REQUIRED,
]

LENIENT = dataclasses.replace(
    DEFAULT_OPTIONS, restrict_response_status_codes_to_predefined_classes=False
)


def test_predefined_table_is_populated():
    assert HttpStatusCode.parse("200 OK") in PREDEFINED
    assert len({status.code for status in PREDEFINED}) == len(PREDEFINED)


def test_str_format():
    assert str(HttpStatusCode(404, "Not Found")) == "404 Not Found"


@pytest.mark.parametrize("status", PREDEFINED, ids=str)
def test_parse_round_trip(status):
    assert HttpStatusCode.parse(str(status)) == status


@pytest.mark.parametrize("status", PREDEFINED, ids=str)
def test_predefined_codes_are_standard(status):
    assert HttpStatusCode(status.code, status.reason_phrase).is_standard() is True


def test_unregistered_code_is_not_standard():
    assert HttpStatusCode(299, "Custom").is_standard() is False
    assert HttpStatusCode(509, "Custom").is_standard() is False


def test_equality_includes_reason_phrase():
    assert HttpStatusCode(200, "OK") == HttpStatusCode.OK
    assert HttpStatusCode(200, "Fine") != HttpStatusCode.OK
    assert hash(HttpStatusCode(200, "OK")) == hash(HttpStatusCode.OK)


def test_reason_phrase_may_contain_spaces():
    status = HttpStatusCode.parse("500 Internal Server Error")
    assert status.code == 500
    assert status.reason_phrase == "Internal Server Error"


def test_trailing_characters_after_number_are_ignored():
    assert HttpStatusCode.parse("200abc OK") == HttpStatusCode.OK


def test_constructor_rejects_negative_code():
    with pytest.raises(ValueError):
        HttpStatusCode(-1, "Bad")


def test_constructor_rejects_empty_reason():
    with pytest.raises(ValueError):
        HttpStatusCode(200, "")


def test_constructor_rejects_control_characters():
    with pytest.raises(ValueError):
        HttpStatusCode(200, "O\x01K")


def test_parse_empty_string_raises_value_error():
    with pytest.raises(ValueError):
        HttpStatusCode.parse("")


def test_parse_without_space():
    with pytest.raises(HttpParserError) as info:
        HttpStatusCode.parse("200")
    assert str(info.value) == "HTTP parser error: bad response status code."
    assert info.value.status_code is None


def test_parse_non_numeric_code():
    with pytest.raises(HttpParserError) as info:
        HttpStatusCode.parse("abc OK")
    assert str(info.value) == "HTTP parser error: bad response status code: invalid value."


def test_parse_code_beyond_int32():
    with pytest.raises(HttpParserError) as info:
        HttpStatusCode.parse("99999999999 Big", LENIENT)
    assert str(info.value) == "HTTP parser error: bad response status code: value out of range."


@pytest.mark.parametrize("text", ["99 Low", "600 High"])
def test_parse_code_outside_predefined_classes(text):
    with pytest.raises(HttpParserError) as info:
        HttpStatusCode.parse(text)
    assert str(info.value) == "HTTP parser error: bad response status code: value out of range."


def test_parse_code_outside_classes_when_unrestricted():
    status = HttpStatusCode.parse("99 Low", LENIENT)
    assert status.code == 99
    assert status.is_standard() is False


def test_parse_negative_code_when_unrestricted():
    with pytest.raises(HttpParserError) as info:
        HttpStatusCode.parse("-5 Neg", LENIENT)
    assert str(info.value) == (
        "HTTP parser error: bad response status code: invalid numerical status code."
    )


def test_parse_reason_phrase_too_long():
    options = HttpParserOptions(max_response_status_code_reason_phrase_length=3)
    assert HttpStatusCode.parse("200 OK", options) == HttpStatusCode.OK
    with pytest.raises(HttpParserError) as info:
        HttpStatusCode.parse("404 Not Found", options)
    assert str(info.value) == (
        "HTTP parser error: bad response status code: reason phrase too long."
    )


def test_parse_empty_reason_phrase():
    with pytest.raises(HttpParserError) as info:
        HttpStatusCode.parse("200 ")
    assert str(info.value) == "HTTP parser error: bad response status code: empty string."


def test_parse_invalid_reason_phrase():
    with pytest.raises(HttpParserError) as info:
        HttpStatusCode.parse("200 O\x7fK")
    assert str(info.value) == (
        "HTTP parser error: bad response status code: invalid reason phrase."
    )


@pytest.mark.parametrize("text", ["", "200", "abc OK", "99 Low", "200 ", "200 O\x01K"])
def test_try_parse_returns_none_on_failure(text):
    assert HttpStatusCode.try_parse(text) is None


def test_try_parse_success():
    assert HttpStatusCode.try_parse("418 I'm a teapot") == HttpStatusCode.IM_A_TEAPOT