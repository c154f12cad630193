import pytest

from pagefetch.textutil import (
    at,
    baseline_align,
    digit_value,
    equal_i,
    find_close_bracket,
    index_value,
    is_hex_digit,
    is_number,
    is_surrogate,
    is_whitespace,
    match,
    match_i,
    remove,
    round_half_up,
    split_string,
    trim,
    value_in_list,
    value_index,
)

STYLES = "none;hidden;dotted;dashed;solid"


def test_trim():
    assert trim("  x \t") == "x"
    assert trim("--a--", "-") == "a"


def test_value_index_round_trip():
    for item in STYLES.split(";"):
        assert index_value(value_index(item, STYLES), STYLES) == item


def test_value_index_default():
    assert value_index("x", STYLES) == -1
    assert value_index("", STYLES, 7) == 7
    assert value_index("x", STYLES, 9) == 9


def test_value_in_list():
    assert value_in_list("dashed", STYLES)
    assert not value_in_list("dash", STYLES)


def test_index_value_out_of_range():
    with pytest.raises(IndexError):
        index_value(10, STYLES)


def test_find_close_bracket_nesting():
    text = "f(a(b)c)d"
    pos = find_close_bracket(text, 1)
    assert text[pos] == ")"
    inner = text[1:pos + 1]
    assert inner.count("(") == inner.count(")")
    assert pos == len(text) - 2


def test_find_close_bracket_missing():
    assert find_close_bracket("f(a(b)", 1) == -1


def test_split_string_whitespace():
    assert split_string("a b  c") == ["a", "b", "c"]


def test_split_string_preserved_delims():
    assert split_string("a,b", ",", ",") == ["a", ",", "b"]


def test_split_string_quotes_and_brackets():
    assert split_string('a "b c" d') == ["a", '"b c"', "d"]
    assert split_string("rgb(1, 2) x", " ") == ["rgb(1, 2)", "x"]


def test_is_number():
    assert is_number("123")
    assert is_number("1.5")
    assert not is_number("1.5", False)
    assert not is_number("12a")


def test_is_whitespace():
    for ch in " \t\n\r\f":
        assert is_whitespace(ch)
    assert not is_whitespace("\v")
    assert not is_whitespace("a")


def test_hex_digits():
    for ch in "0123456789abcdefABCDEF":
        assert is_hex_digit(ch)
        assert digit_value(ch) == int(ch, 16)
    assert not is_hex_digit("g")


def test_is_surrogate():
    assert is_surrogate(0xD800)
    assert is_surrogate(0xDFFF)
    assert not is_surrogate(0xE000)
    assert not is_surrogate(0xD7FF)


def test_round_half_up():
    assert round_half_up(2.5) == 3
    assert round_half_up(2.49) == 2
    assert round_half_up(4.0) == 4


def test_baseline_align_same_box_is_zero():
    for height, base in [(10, 2), (20, 5), (0, 0)]:
        assert baseline_align(height, base, height, base) == 0


def test_equal_i_and_match():
    assert equal_i("HeLLo", "hello")
    assert not equal_i("hello", "hell")
    assert match("hello", -3, "llo")
    assert not match("hi", -5, "h")
    assert match_i("HeLLo", 0, "hel")
    assert not match("HeLLo", 0, "hel")


def test_at():
    items = [1, 2, 3]
    assert at(items, -1) == 3
    assert at(items, 5) is None
    assert at(items, 5, "none") == "none"


def test_remove():
    items = [1, 2, 3, 4]
    remove(items, 1, 2)
    assert items == [1, 4]
    remove(items, -1)
    assert items == [1]
    remove(items, 5)
    assert items == [1]