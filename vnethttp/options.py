"""Limits and leniency switches for the HTTP parsers."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class HttpParserOptions:
    """Options that control how strictly HTTP messages are parsed.

    A limit of ``None`` means no limit.
    """

    max_header_name_length: Optional[int] = None
    max_header_value_length: Optional[int] = None
    max_header_count: Optional[int] = None
    append_headers_with_identical_names: bool = True
    max_request_method_length: Optional[int] = None
    allow_nonstandard_request_methods: bool = False
    max_request_uri_length: Optional[int] = None
    restrict_response_status_codes_to_predefined_classes: bool = True
    max_response_status_code_reason_phrase_length: Optional[int] = None
    allow_nonstandard_response_status_codes: bool = False
    max_payload_size: Optional[int] = None
    ignore_nonstandard_cookie_attributes: bool = False
    bypass_is_valid_cookie_value_check: bool = False
    ignore_missing_whitespace_after_cookie_attribute_separator: bool = False
    max_cookie_size: Optional[int] = None


DEFAULT_OPTIONS = HttpParserOptions()