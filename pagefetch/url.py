"""URL parsing and reference resolution following RFC 3986."""

from __future__ import annotations

import re
from dataclasses import dataclass

_URL_PATTERN = re.compile(
    r"^(?:(?P<scheme>[^:/?#]+):)?"
    r"(?://(?P<authority>[^/?#]*))?"
    r"(?P<path>[^?#]*)"
    r"(?:\?(?P<query>[^#]*))?"
    r"(?:#(?P<fragment>.*))?$",
    re.DOTALL,
)


@dataclass(frozen=True)
class Url:
    """A URL split into its five generic components."""

    scheme: str = ""
    authority: str = ""
    path: str = ""
    query: str = ""
    fragment: str = ""

    @classmethod
    def parse(cls, text: str) -> Url:
        """Split ``text`` into components."""
        found = _URL_PATTERN.match(text)
        # The pattern matches every string, since each group is optional.
        assert found is not None
        return cls(**{name: value or "" for name, value in found.groupdict().items()})

    @property
    def has_scheme(self) -> bool:
        return bool(self.scheme)

    @property
    def has_authority(self) -> bool:
        return bool(self.authority)

    @property
    def has_path(self) -> bool:
        return bool(self.path)

    @property
    def has_query(self) -> bool:
        return bool(self.query)

    @property
    def has_fragment(self) -> bool:
        return bool(self.fragment)

    @property
    def is_absolute(self) -> bool:
        """A URL with a scheme is absolute; anything else is relative."""
        return self.has_scheme

    def __str__(self) -> str:
        parts = []
        if self.scheme:
            parts.append(f"{self.scheme}:")
        if self.authority:
            parts.append(f"//{self.authority}")
        parts.append(self.path)
        if self.query:
            parts.append(f"?{self.query}")
        if self.fragment:
            parts.append(f"#{self.fragment}")
        return "".join(parts)


def _drop_last_segment(output: str) -> str:
    cut = output.rfind("/")
    return output[:cut] if cut != -1 else ""


def _remove_dot_segments(path: str) -> str:
    output = ""
    rest = path
    while rest:
        if rest.startswith("../"):
            rest = rest[3:]
        elif rest.startswith("./"):
            rest = rest[2:]
        elif rest.startswith("/./"):
            rest = "/" + rest[3:]
        elif rest == "/.":
            rest = "/"
        elif rest.startswith("/../"):
            rest = "/" + rest[4:]
            output = _drop_last_segment(output)
        elif rest == "/..":
            rest = "/"
            output = _drop_last_segment(output)
        elif rest in (".", ".."):
            rest = ""
        else:
            start = 1 if rest.startswith("/") else 0
            end = rest.find("/", start)
            end = len(rest) if end == -1 else end
            output += rest[:end]
            rest = rest[end:]
    return output


def _merge(base: Url, reference_path: str) -> str:
    if base.has_authority and not base.has_path:
        return "/" + reference_path
    cut = base.path.rfind("/")
    return base.path[: cut + 1] + reference_path


def resolve(base: Url, reference: Url) -> Url:
    """Resolve ``reference`` against ``base``."""
    if reference.has_scheme:
        return Url(
            reference.scheme,
            reference.authority,
            _remove_dot_segments(reference.path),
            reference.query,
            reference.fragment,
        )
    if reference.has_authority:
        return Url(
            base.scheme,
            reference.authority,
            _remove_dot_segments(reference.path),
            reference.query,
            reference.fragment,
        )
    if not reference.has_path:
        query = reference.query if reference.has_query else base.query
        return Url(base.scheme, base.authority, base.path, query, reference.fragment)
    if reference.path.startswith("/"):
        path = _remove_dot_segments(reference.path)
    else:
        path = _remove_dot_segments(_merge(base, reference.path))
    return Url(base.scheme, base.authority, path, reference.query, reference.fragment)