"""In-memory 32-bit pixel images."""

from __future__ import annotations

from dataclasses import dataclass, field

_BYTES_PER_PIXEL = 4


@dataclass
class Image:
    """A width x height image of 32-bit pixels stored row by row.

    ``endian`` is 0 for little-endian pixel bytes and 1 for big-endian.
    """

    width: int
    height: int
    endian: int = 0
    bpp: int = field(default=_BYTES_PER_PIXEL * 8, init=False)
    data: bytearray = field(init=False, repr=False)

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError(f"invalid image size {self.width}x{self.height}")
        if self.endian not in (0, 1):
            raise ValueError(f"endian must be 0 or 1, not {self.endian}")
        self.data = bytearray(self.size_line * self.height)

    @property
    def size_line(self) -> int:
        """Number of bytes in one row."""
        return self.width * _BYTES_PER_PIXEL

    @property
    def _byteorder(self) -> str:
        return "big" if self.endian else "little"

    def _offset(self, x: int, y: int) -> int:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel ({x}, {y}) outside {self.width}x{self.height} image")
        return y * self.size_line + x * _BYTES_PER_PIXEL

    def _encode(self, color: int) -> bytes:
        return (color & 0xFFFFFFFF).to_bytes(_BYTES_PER_PIXEL, self._byteorder)

    def set_pixel(self, x: int, y: int, color: int) -> None:
        """Store ``color`` (truncated to 32 bits) at column ``x``, row ``y``."""
        offset = self._offset(x, y)
        self.data[offset:offset + _BYTES_PER_PIXEL] = self._encode(color)

    def get_pixel(self, x: int, y: int) -> int:
        """Return the unsigned 32-bit value at column ``x``, row ``y``."""
        offset = self._offset(x, y)
        return int.from_bytes(self.data[offset:offset + _BYTES_PER_PIXEL], self._byteorder)

    def clear(self, color: int = 0) -> None:
        """Set every pixel to ``color``."""
        self.data[:] = self._encode(color) * (self.width * self.height)

    def row(self, y: int) -> bytes:
        """Return the bytes of row ``y``."""
        start = self._offset(0, y)
        return bytes(self.data[start:start + self.size_line])