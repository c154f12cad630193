"""Parsing of raw HTTP header blocks."""

from __future__ import annotations

import string

_CTYPE_SPACE = " \t\n\v\f\r"
_ASCII_LOWER = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)


def _ascii_lower(text: str) -> str:
    return text.translate(_ASCII_LOWER)


def parse_headers(headers: str) -> list[tuple[str, str]]:
    """Split a raw header block into (name, value) pairs.

    Names are trimmed and lower-cased, values are trimmed.  Lines without
    a colon (such as the status line) are skipped.  Order and duplicates
    are kept.
    """
    result: list[tuple[str, str]] = []
    for line in headers.split("\n"):
        line = line.removesuffix("\r")
        key, sep, value = line.partition(":")
        if not sep:
            continue
        key = _ascii_lower(key.strip(_CTYPE_SPACE))
        result.append((key, value.strip(_CTYPE_SPACE)))
    return result


def iequals(a: str, b: str) -> bool:
    """Compare two strings ignoring ASCII case."""
    return len(a) == len(b) and _ascii_lower(a) == _ascii_lower(b)