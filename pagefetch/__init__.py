"""Fetch pages over plain HTTP, with header, URL, encoding and CSS layout helpers."""

__version__ = "0.1.0"

__all__ = [
    "borders",
    "client",
    "encodings",
    "headers",
    "layout",
    "selectors",
    "table",
    "textutil",
    "url",
]