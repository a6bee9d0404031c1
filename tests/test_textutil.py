import pytest

from cubscene.textutil import (
    atoi,
    count_blank,
    is_end,
    is_space,
    length_to_blank,
    length_to_end,
    rgb_to_int,
    round_bound,
    search_comma,
)


@pytest.mark.parametrize("prefix", ["", " ", "\t", "\t \v\r", "    "])
def test_count_blank_counts_prefix(prefix):
    assert count_blank(prefix + "abc  ") == len(prefix)


def test_count_blank_ignores_newline():
    assert count_blank("\nabc") == 0


def test_length_to_blank():
    assert length_to_blank("abc def") == len("abc")
    assert length_to_blank("abcdef") == len("abcdef")
    assert length_to_blank("") == 0


def test_length_to_end():
    assert length_to_end("path/to.xpm\nnext") == len("path/to.xpm")
    assert length_to_end("no newline") == len("no newline")


@pytest.mark.parametrize("char,expected", [
    ("\t", True), (" ", True), ("\0", True), ("\n", True), ("", True),
    ("a", False), (",", False), ("\r", False),
])
def test_is_space(char, expected):
    assert is_space(char) is expected


@pytest.mark.parametrize("text,expected", [
    ("42", 42), ("  -42abc", -42), ("+7", 7), ("x1", 0), ("\n\t 12", 12),
    ("-", 0), ("", 0), ("255,0", 255),
])
def test_atoi(text, expected):
    assert atoi(text) == expected


def test_is_end():
    assert is_end("   \n") is True
    assert is_end("\n") is True
    assert is_end("a") is False
    assert is_end(" x") is False
    assert is_end("") is False


def test_search_comma_positions():
    text = "255,0,0"
    assert search_comma(text) == text.index(",") + 1
    assert search_comma("1,2") == 2


def test_search_comma_through_blanks():
    text = "1   ,"
    assert search_comma(text) == text.index(",") + 1


def test_search_comma_missing():
    assert search_comma("12345,") == -1
    assert search_comma("abc") == -1
    assert search_comma("") == -1


def test_rgb_to_int():
    assert rgb_to_int(255, 0, 0) == 0xFF0000
    assert rgb_to_int(0x12, 0x34, 0x56) == 0x123456
    assert rgb_to_int(0, 0, 0) == 0


def test_round_bound():
    assert round_bound(5, True) == 5
    assert round_bound(5, False) == 4
    assert round_bound(-3, True) == 0
    assert round_bound(-3, False) == -1