"""Small string and sequence helpers used by the layout code."""

from __future__ import annotations

from typing import Any, MutableSequence, Sequence

WHITESPACE = " \n\r\t\f"


def trim(text: str, chars: str = WHITESPACE) -> str:
    """Remove the given characters from both ends of ``text``."""
    return text.strip(chars)


def value_index(value: str, strings: str, default: int = -1, delim: str = ";") -> int:
    """Position of ``value`` in a delimited list, or ``default``."""
    if not value or not strings or not delim:
        return default
    try:
        return strings.split(delim).index(value)
    except ValueError:
        return default


def index_value(index: int, strings: str, delim: str = ";") -> str:
    """Item at ``index`` of a delimited list."""
    items = strings.split(delim) if strings else []
    if not 0 <= index < len(items):
        raise IndexError(f"no item {index} in list {strings!r}")
    return items[index]


def value_in_list(value: str, strings: str, delim: str = ";") -> bool:
    """Whether ``value`` is an item of a delimited list."""
    return value_index(value, strings, -1, delim) != -1


def find_close_bracket(text: str, offset: int, open_b: str = "(", close_b: str = ")") -> int:
    """Index of the bracket closing the nesting that starts at ``offset``, or -1."""
    depth = 0
    for pos, ch in enumerate(text[offset:], start=offset):
        if ch == open_b:
            depth += 1
        elif ch == close_b:
            depth -= 1
            if depth == 0:
                return pos
    return -1


def split_string(
    text: str,
    delims: str = WHITESPACE,
    delims_preserve: str = "",
    quote: str = '"',
) -> list[str]:
    """Split ``text`` into tokens.

    Quoted runs and parenthesised groups stay inside one token.  Delimiters
    listed in ``delims_preserve`` are returned as tokens of their own.
    """
    all_delims = delims + delims_preserve
    tokens: list[str] = []
    current: list[str] = []

    def flush() -> None:
        token = "".join(current)
        if token:
            tokens.append(token)
        current.clear()

    pos = 0
    end_of_text = len(text)
    while pos < end_of_text:
        ch = text[pos]
        if ch in quote:
            end = text.find(ch, pos + 1)
            end = end_of_text - 1 if end == -1 else end
            current.append(text[pos:end + 1])
            pos = end + 1
        elif ch == "(":
            end = find_close_bracket(text, pos)
            end = end_of_text - 1 if end == -1 else end
            current.append(text[pos:end + 1])
            pos = end + 1
        elif ch in all_delims:
            flush()
            if ch in delims_preserve:
                tokens.append(ch)
            pos += 1
        else:
            current.append(ch)
            pos += 1
    flush()
    return tokens


def is_number(text: str, allow_dot: bool = True) -> bool:
    """Whether ``text`` holds only ASCII digits (and dots, if allowed)."""
    return all(is_digit(ch) or (allow_dot and ch == ".") for ch in text)


def is_digit(ch: str) -> bool:
    return "0" <= ch <= "9"


def is_whitespace(ch: str) -> bool:
    """ASCII whitespace as the HTML infrastructure defines it."""
    return ch in (" ", "\t", "\n", "\r", "\f")


def is_hex_digit(ch: str) -> bool:
    return is_digit(ch) or "a" <= ch <= "f" or "A" <= ch <= "F"


def digit_value(ch: str) -> int:
    """Numeric value of a decimal or hexadecimal digit character."""
    if is_digit(ch):
        return ord(ch) - ord("0")
    return ord(ch.lower()) - ord("a") + 10


def is_surrogate(code: int) -> bool:
    return 0xD800 <= code < 0xE000


def round_half_up(value: float) -> int:
    """Truncate toward zero, then add one if the dropped part is at least 0.5."""
    result = int(value)
    if value - result >= 0.5:
        result += 1
    return result


def baseline_align(line_height: int, line_base_line: int, height: int, baseline: int) -> int:
    return (line_height - line_base_line) - (height - baseline)


def _ascii_lower(text: str) -> str:
    return "".join(chr(ord(c) + 32) if "A" <= c <= "Z" else c for c in text)


def equal_i(s1: str, s2: str) -> bool:
    """Compare two strings ignoring ASCII case."""
    return len(s1) == len(s2) and _ascii_lower(s1) == _ascii_lower(s2)


def _normalise_index(text: str, index: int) -> int | None:
    if index < 0:
        index += len(text)
    return index if index >= 0 else None


def match(text: str, index: int, sub: str) -> bool:
    """Whether ``sub`` occurs at ``index`` (negative counts from the end)."""
    start = _normalise_index(text, index)
    if start is None:
        return False
    return text[start:start + len(sub)] == sub


def match_i(text: str, index: int, sub: str) -> bool:
    """Case-insensitive :func:`match`."""
    start = _normalise_index(text, index)
    if start is None:
        return False
    return equal_i(text[start:start + len(sub)], sub)


def at(seq: Sequence[Any], index: int, default: Any = None) -> Any:
    """Item at ``index`` (negative counts from the end), or ``default``."""
    if index < 0:
        index += len(seq)
    return seq[index] if 0 <= index < len(seq) else default


def remove(seq: MutableSequence[Any], index: int, count: int = 1) -> None:
    """Delete up to ``count`` items starting at ``index``; out of range is a no-op."""
    if index < 0:
        index += len(seq)
    if not 0 <= index < len(seq):
        return
    count = min(count, len(seq) - index)
    if count <= 0:
        return
    del seq[index:index + count]