"""Reading XPM images into :class:`~cubscene.image.Image` objects."""

from __future__ import annotations

import os
import re
from collections.abc import Iterable, Iterator

from .colors import text_to_rgb
from .image import Image
from .wordtab import split_words, strip_comments

# Pixels whose colour is "none" are stored with this value.
_TRANSPARENT = 0xFF000000

_ATOI = re.compile(r"[\t\n\v\f\r ]*([+-]?[0-9]+)")


class XpmError(ValueError):
    """Raised when XPM data cannot be read."""


def _atoi(word: str) -> int:
    match = _ATOI.match(word)
    return int(match.group(1)) if match else 0


def _color_spec(words: list[str]) -> int:
    try:
        index = words.index("c")
    except ValueError:
        raise XpmError("colour definition has no 'c' key") from None
    if index + 1 >= len(words):
        raise XpmError("colour definition has no colour after 'c'")
    end = words[index + 2] if index + 2 < len(words) else None
    return text_to_rgb(words[index + 1], end)


def _read(lines: Iterator[str]) -> Image:
    def next_line(what: str) -> str:
        try:
            return next(lines)
        except StopIteration:
            raise XpmError(f"missing {what}") from None

    header = split_words(next_line("header"))
    if len(header) < 4:
        raise XpmError("header needs width, height, colour count and characters per pixel")
    width, height, ncolors, cpp = (_atoi(word) for word in header[:4])
    if min(width, height, ncolors, cpp) <= 0:
        raise XpmError(f"invalid header {' '.join(header[:4])!r}")

    palette: dict[str, int] = {}
    for _ in range(ncolors):
        line = next_line("colour definition")
        key = line[:cpp]
        rgb = _color_spec(split_words(line[cpp:]))
        # Short keys use a direct table (last definition wins); longer keys
        # are searched in definition order (first definition wins).
        if cpp <= 2 or key not in palette:
            palette[key] = rgb

    image = Image(width, height)
    for y in range(height):
        line = next_line("pixel row")
        for x in range(width):
            color = palette.get(line[cpp * x:cpp * (x + 1)], 0)
            image.set_pixel(x, y, _TRANSPARENT if color == -1 else color)
    return image


def parse_xpm_lines(lines: Iterable[str]) -> Image:
    """Build an image from XPM strings: header, colour lines, then pixel rows."""
    return _read(iter(lines))


def _quoted_strings(text: str) -> Iterator[str]:
    pos = 0
    while (start := text.find('"', pos)) != -1:
        stop = text.find('"', start + 1)
        if stop == -1:
            return
        yield text[start + 1:stop]
        pos = stop + 1


def parse_xpm_text(text: str) -> Image:
    """Build an image from the contents of an XPM file."""
    return _read(_quoted_strings(strip_comments(text)))


def load_xpm(path: str | os.PathLike[str]) -> Image:
    """Read the XPM file at ``path``."""
    try:
        with open(path, encoding="latin-1") as handle:
            text = handle.read()
    except OSError as exc:
        raise XpmError(f"cannot read {os.fspath(path)!r}: {exc}") from exc
    return parse_xpm_text(text)