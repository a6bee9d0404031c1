import pytest

from cubscene.colors import lookup_color
from cubscene.xpm import XpmError, load_xpm, parse_xpm_lines, parse_xpm_text

LINES = ["2 2 3 1", "a c #FF0000", "b c blue", ". c None", "ab", "b."]

FILE_TEXT = """/* XPM */
static char *sample[] = {
/* columns rows colors chars-per-pixel */
"2 2 3 1",
"a c #FF0000",
"b c blue",
". c None",
// pixels
"ab",
"b."
};
"""


def test_parse_lines_dimensions_and_pixels():
    image = parse_xpm_lines(LINES)
    assert (image.width, image.height) == (2, 2)
    assert image.get_pixel(0, 0) == 0xFF0000
    assert image.get_pixel(1, 0) == lookup_color("blue")
    assert image.get_pixel(0, 1) == lookup_color("blue")


def test_none_color_is_transparent():
    image = parse_xpm_lines(LINES)
    assert image.get_pixel(1, 1) == 0xFF000000


def test_multi_character_keys():
    image = parse_xpm_lines(["2 1 2 3", "aaa c #000010", "bbb c #000020", "bbbaaa"])
    assert image.get_pixel(0, 0) == 0x20
    assert image.get_pixel(1, 0) == 0x10


def test_short_keys_last_definition_wins():
    image = parse_xpm_lines(["1 1 2 1", "a c #000001", "a c #000002", "a"])
    assert image.get_pixel(0, 0) == 0x2


def test_long_keys_first_definition_wins():
    image = parse_xpm_lines(["1 1 2 3", "abc c #000001", "abc c #000002", "abc"])
    assert image.get_pixel(0, 0) == 0x1


def test_unknown_pixel_key_is_black():
    image = parse_xpm_lines(["1 1 1 1", "a c #FFFFFF", "z"])
    assert image.get_pixel(0, 0) == 0


def test_text_matches_lines():
    assert parse_xpm_text(FILE_TEXT).data == parse_xpm_lines(LINES).data


def test_load_xpm_from_file(tmp_path):
    path = tmp_path / "sample.xpm"
    path.write_text(FILE_TEXT, encoding="latin-1")
    assert load_xpm(path).data == parse_xpm_lines(LINES).data


def test_load_missing_file(tmp_path):
    with pytest.raises(XpmError):
        load_xpm(tmp_path / "absent.xpm")


@pytest.mark.parametrize(
    "lines",
    [
        [],
        ["2 2 1"],
        ["0 2 1 1", "a c #000000", "aa", "aa"],
        ["x 2 1 1", "a c #000000", "aa", "aa"],
        ["1 1 1 1", "a s foo", "a"],
        ["1 1 1 1", "a c", "a"],
        ["1 1 2 1", "a c #000000"],
        ["1 2 1 1", "a c #000000", "a"],
    ],
)
def test_malformed_data(lines):
    with pytest.raises(XpmError):
        parse_xpm_lines(lines)


def test_text_without_strings():
    with pytest.raises(XpmError):
        parse_xpm_text("/* nothing here */")