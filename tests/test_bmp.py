import struct

from cubscene.bmp import bmp_header, encode_bmp, write_bmp
from cubscene.image import Image

FIELDS = struct.Struct("<2sIIIIiiHHIIiiII")


def test_header_layout():
    header = bmp_header(3, 2, 32)
    assert len(header) == 54
    magic, file_size, reserved, offset, head_size, width, height, planes, bpp, *rest = (
        FIELDS.unpack(header)
    )
    assert magic == b"BM"
    assert offset == 54
    assert head_size == 40
    assert (width, height) == (3, 2)
    assert planes == 1
    assert bpp == 32
    assert reserved == 0
    compression, img_size = rest[0], rest[1]
    assert compression == 0
    assert file_size == img_size + 54


def test_encoded_size_matches_header():
    image = Image(4, 3)
    encoded = encode_bmp(image)
    fields = FIELDS.unpack(encoded[:54])
    assert fields[1] == len(encoded)
    assert fields[10] == len(image.data)


def test_rows_are_bottom_up():
    image = Image(2, 3)
    image.set_pixel(0, 0, 0x00FF0000)
    image.set_pixel(1, 2, 0x000000FF)
    encoded = encode_bmp(image)
    line = image.size_line
    body = encoded[54:]
    assert body[:line] == image.row(2)
    assert body[2 * line:3 * line] == image.row(0)
    assert body[2 * line:2 * line + 4] == b"\x00\x00\xff\x00"


def test_write_bmp_round_trip(tmp_path):
    image = Image(5, 2)
    image.clear(0x123456)
    path = tmp_path / "shot.bmp"
    write_bmp(image, path)
    assert path.read_bytes() == encode_bmp(image)
    assert path.read_bytes()[:2] == b"BM"