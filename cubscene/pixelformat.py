"""Conversion of 0xRRGGBB colours to the pixel layout of a visual."""

from __future__ import annotations

from typing import NamedTuple


class RgbShifts(NamedTuple):
    """Bit position and width of each colour channel in a pixel value."""

    red_shift: int
    red_bits: int
    green_shift: int
    green_bits: int
    blue_shift: int
    blue_bits: int


def _mask_layout(mask: int, channel: str) -> tuple[int, int]:
    if mask <= 0:
        raise ValueError(f"{channel} mask must be a positive bit mask, not {mask:#x}")
    shift = 0
    while not mask & 1:
        mask >>= 1
        shift += 1
    bits = 0
    while mask & 1:
        mask >>= 1
        bits += 1
    return shift, bits


def rgb_shifts(red_mask: int, green_mask: int, blue_mask: int) -> RgbShifts:
    """Work out the shift and width of each channel from the visual's masks."""
    red = _mask_layout(red_mask, "red")
    green = _mask_layout(green_mask, "green")
    blue = _mask_layout(blue_mask, "blue")
    return RgbShifts(*red, *green, *blue)


def good_color(color: int, depth: int, shifts: RgbShifts | tuple[int, ...]) -> int:
    """Turn a 0xRRGGBB colour into a pixel value for a display of ``depth`` bits.

    Displays of 24 bits or more take the colour unchanged; shallower ones get
    each channel scaled down and moved to the place given by ``shifts``.
    """
    if depth >= 24:
        return color
    red_shift, red_bits, green_shift, green_bits, blue_shift, blue_bits = shifts
    red = (color >> 8) & 0xFF00
    green = color & 0xFF00
    blue = (color << 8) & 0xFF00
    return (
        ((red >> (16 - red_bits)) << red_shift)
        + ((green >> (16 - green_bits)) << green_shift)
        + ((blue >> (16 - blue_bits)) << blue_shift)
    )