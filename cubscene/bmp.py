"""Saving images as 32-bit BMP files."""

from __future__ import annotations

import os
import struct

from .image import Image

_HEADER = struct.Struct("<2sIIIIiiHHIIiiII")
_HEADER_SIZE = 54
_INFO_SIZE = 40
DEFAULT_PATH = "screenshot.bmp"


def bmp_header(width: int, height: int, bpp: int) -> bytes:
    """Return the 54-byte file and info header for an uncompressed image."""
    image_size = width * height * (bpp // 8)
    return _HEADER.pack(
        b"BM",
        image_size + _HEADER_SIZE,
        0,
        _HEADER_SIZE,
        _INFO_SIZE,
        width,
        height,
        1,
        bpp,
        0,
        image_size,
        0,
        0,
        0,
        0,
    )


def encode_bmp(image: Image) -> bytes:
    """Return the BMP file contents for ``image``, rows stored bottom-up."""
    rows = (image.row(y) for y in reversed(range(image.height)))
    return b"".join([bmp_header(image.width, image.height, image.bpp), *rows])


def write_bmp(image: Image, path: str | os.PathLike[str] = DEFAULT_PATH) -> None:
    """Write ``image`` as a BMP file at ``path``, replacing any existing file."""
    with open(path, "wb") as handle:
        handle.write(encode_bmp(image))