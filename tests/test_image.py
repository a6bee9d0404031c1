import pytest

from cubscene.image import Image


def test_new_image_is_black_and_sized():
    image = Image(3, 2)
    assert image.bpp == 32
    assert len(image.data) == image.size_line * image.height
    assert set(image.data) == {0}


def test_pixel_round_trip():
    image = Image(4, 4)
    image.set_pixel(2, 3, 0x11223344)
    assert image.get_pixel(2, 3) == 0x11223344
    assert image.get_pixel(0, 0) == 0


def test_little_endian_byte_layout():
    image = Image(2, 1)
    image.set_pixel(0, 0, 0x11223344)
    assert image.row(0)[:4] == bytes([0x44, 0x33, 0x22, 0x11])


def test_big_endian_byte_layout():
    image = Image(2, 1, endian=1)
    image.set_pixel(1, 0, 0x11223344)
    assert image.row(0)[4:] == bytes([0x11, 0x22, 0x33, 0x44])
    assert image.get_pixel(1, 0) == 0x11223344


def test_negative_color_wraps_to_32_bits():
    image = Image(1, 1)
    image.set_pixel(0, 0, -1)
    assert image.get_pixel(0, 0) == 0xFFFFFFFF


def test_clear_fills_every_pixel():
    image = Image(3, 3)
    image.clear(0xFF000000)
    assert {image.get_pixel(x, y) for x in range(3) for y in range(3)} == {0xFF000000}


def test_row_length_matches_size_line():
    image = Image(5, 2)
    assert len(image.row(1)) == image.size_line


@pytest.mark.parametrize("x,y", [(-1, 0), (0, -1), (3, 0), (0, 2)])
def test_out_of_range_pixel(x, y):
    image = Image(3, 2)
    with pytest.raises(IndexError):
        image.set_pixel(x, y, 1)
    with pytest.raises(IndexError):
        image.get_pixel(x, y)


@pytest.mark.parametrize("width,height", [(0, 1), (1, 0), (-2, 3)])
def test_invalid_size(width, height):
    with pytest.raises(ValueError):
        Image(width, height)


def test_invalid_endian():
    with pytest.raises(ValueError):
        Image(1, 1, endian=2)