"""Character and number helpers used by the scene-file reader."""

from __future__ import annotations

import re

_BLANKS = "\t\r\v "
_ATOI = re.compile(r"[\t\n\v\f\r ]*([+-]?)([0-9]*)")


def _char_at(text: str, index: int) -> str:
    return text[index] if 0 <= index < len(text) else "\0"


def count_blank(text: str) -> int:
    """Number of leading tabs, carriage returns, vertical tabs and spaces."""
    return len(text) - len(text.lstrip(_BLANKS))


def length_to_blank(text: str) -> int:
    """Number of characters before the first space or the end of the text."""
    text = text.split("\0", 1)[0]
    index = text.find(" ")
    return len(text) if index == -1 else index


def length_to_end(text: str) -> int:
    """Number of characters before the first newline or the end of the text."""
    text = text.split("\0", 1)[0]
    index = text.find("\n")
    return len(text) if index == -1 else index


def is_space(char: str) -> bool:
    """True for a tab, space, newline, NUL or the end of the text ("")."""
    return char in ("\t", " ", "\0", "\n", "")


def atoi(text: str) -> int:
    """Read a leading, optionally signed decimal integer; 0 if there is none."""
    match = _ATOI.match(text)
    sign, digits = match.group(1), match.group(2)
    if not digits:
        return 0
    value = int(digits)
    return -value if sign == "-" else value


def is_end(text: str) -> bool:
    """True when ``text`` starts with blanks that run up to a newline."""
    if not is_space(_char_at(text, 0)):
        return False
    return _char_at(text, count_blank(text)) == "\n"


def search_comma(text: str) -> int:
    """Return the index just after a comma near the start of ``text``, or -1.

    The first four characters are searched, and the search goes on for as
    long as it meets blank characters.
    """
    index = 0
    while index < 4 or (index < len(text) and is_space(text[index])):
        if _char_at(text, index) == ",":
            return index + 1
        index += 1
    if _char_at(text, index) == ",":
        return index + 1
    return -1


def rgb_to_int(r: int, g: int, b: int) -> int:
    """Pack three channel values into an unsigned 0xRRGGBB integer."""
    return ((r << 16) | (g << 8) | b) & 0xFFFFFFFF


def round_bound(number: int, upper: bool) -> int:
    """Clamp ``number`` to zero from below; one less unless ``upper`` is true."""
    index = max(number, 0)
    return index if upper else index - 1