"""ASCII-aware string helpers used by the HTTP parsers."""

from __future__ import annotations

_UPPER = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
_LOWER = "abcdefghijklmnopqrstuvwxyz"

_TO_LOWER = str.maketrans(_UPPER, _LOWER)
_TO_UPPER = str.maketrans(_LOWER, _UPPER)


def to_lower(text: str) -> str:
    """Lowercase ASCII letters only; other characters are left untouched."""
    return text.translate(_TO_LOWER)


def to_upper(text: str) -> str:
    """Uppercase ASCII letters only; other characters are left untouched."""
    return text.translate(_TO_UPPER)


def equals_ignore_case(lhs: str, rhs: str) -> bool:
    """Compare two strings, ignoring the case of ASCII letters."""
    return len(lhs) == len(rhs) and to_lower(lhs) == to_lower(rhs)


def starts_with_ignore_case(text: str, prefix: str) -> bool:
    """Return True if ``text`` starts with ``prefix``, ignoring ASCII case."""
    if len(prefix) > len(text):
        return False
    return to_lower(text[: len(prefix)]) == to_lower(prefix)


def ends_with_ignore_case(text: str, suffix: str) -> bool:
    """Return True if ``text`` ends with ``suffix``, ignoring ASCII case."""
    if len(suffix) > len(text):
        return False
    if not suffix:
        return True
    return to_lower(text[-len(suffix):]) == to_lower(suffix)


def split(text: str, delim: str) -> list[str]:
    """Split ``text`` on every occurrence of ``delim``, keeping empty tokens."""
    if not delim:
        raise ValueError("'delim': Empty string.")
    return text.split(delim)