"""Small string helpers used when reading XPM image data."""

from __future__ import annotations

import re

_BLANKS = re.compile(r"[ \t]+")


def _until_nul(text: str) -> str:
    return text.split("\0", 1)[0]


def find(text: str, needle: str, limit: int) -> int:
    """Return the position of ``needle`` in ``text``, or -1.

    The search fails at once when ``needle`` is longer than ``limit``.
    """
    if len(needle) > limit:
        return -1
    return _until_nul(text).find(needle)


def find_unquoted(text: str, needle: str, limit: int) -> int:
    """Like :func:`find`, but ignore matches inside double-quoted strings."""
    if len(needle) > limit:
        return -1
    text = _until_nul(text)
    quoted = False
    for pos in range(len(text) - len(needle) + 1):
        if text[pos] == '"':
            quoted = not quoted
        if not quoted and text.startswith(needle, pos):
            return pos
    return -1


def split_words(text: str) -> list[str]:
    """Split ``text`` into words separated by spaces and tabs."""
    return [word for word in _BLANKS.split(_until_nul(text)) if word]


def _blank_out(text: str, start: int, count: int) -> str:
    count = max(count, 0)
    end = min(len(text), start + count)
    return text[:start] + " " * (end - start) + text[end:]


def strip_comments(text: str) -> str:
    """Replace C-style comments outside quoted strings with spaces.

    The result has the same length as ``text``. A line comment is blanked
    together with the newline that ends it.
    """
    size = len(text)
    while (begin := find_unquoted(text, "/*", size)) != -1:
        end = find(text[begin + 2:], "*/", size - begin - 2)
        text = _blank_out(text, begin, end + 4)
    while (begin := find_unquoted(text, "//", size)) != -1:
        end = find(text[begin + 2:], "\n", size - begin - 2)
        text = _blank_out(text, begin, end + 3)
    return text