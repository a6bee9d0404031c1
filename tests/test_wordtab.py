import pytest

from cubscene.wordtab import find, find_unquoted, split_words, strip_comments


def test_find_locates_needle():
    text = "width height colors"
    pos = find(text, "height", len(text))
    assert text[pos:pos + len("height")] == "height"
    assert "height" not in text[:pos + len("height") - 1]


def test_find_missing_needle():
    assert find("abcdef", "xyz", 6) == -1


def test_find_needle_longer_than_limit():
    assert find("abcdef", "cde", 2) == -1


def test_find_stops_at_nul():
    assert find("abc\0needle", "needle", 10) == -1


def test_find_unquoted_skips_quoted_match():
    text = '"/*" x /* y'
    pos = find_unquoted(text, "/*", len(text))
    assert text[pos:pos + 2] == "/*"
    assert pos > text.index("x")


def test_find_unquoted_only_quoted():
    text = 'a "//" b'
    assert find_unquoted(text, "//", len(text)) == -1


def test_find_unquoted_respects_limit():
    assert find_unquoted("a // b", "//", 1) == -1


def test_split_words_spaces_and_tabs():
    assert split_words("  a\tb   c ") == ["a", "b", "c"]


def test_split_words_empty():
    assert split_words("") == []
    assert split_words(" \t ") == []


def test_split_words_keeps_newlines_in_words():
    assert split_words("a\nb c") == ["a\nb", "c"]


def test_strip_block_comment():
    text = '/* header */"a b"'
    result = strip_comments(text)
    assert len(result) == len(text)
    assert result.strip() == '"a b"'


def test_strip_line_comment_with_newline():
    text = "x // note\ny"
    result = strip_comments(text)
    assert len(result) == len(text)
    assert result.split() == ["x", "y"]


@pytest.mark.parametrize("text", ['"http://a"', '"/* keep */"', "plain"])
def test_strip_leaves_quoted_text_alone(text):
    assert strip_comments(text) == text