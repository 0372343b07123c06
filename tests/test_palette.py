import struct

import pytest

from gbaemu.palette import Palette, PixelFormat, Rgb15


@pytest.mark.parametrize("r, g, b", [(0, 0, 0), (31, 0, 0), (0, 31, 0), (0, 0, 31), (5, 17, 29)])
def test_from_u16_round_trip(r, g, b):
    assert Rgb15.from_u16(r | (g << 5) | (b << 10)) == Rgb15(r, g, b)


def test_bit15_ignored():
    assert Rgb15.from_u16(0x8000) == Rgb15(0, 0, 0)
    assert Rgb15.from_u16(0x8000 | 3) == Rgb15.from_u16(3)


def test_rgb24_shifts_channels():
    assert Rgb15(1, 2, 4).rgb24() == (8, 16, 32)


def test_rgb24_black():
    assert Rgb15().rgb24() == (0, 0, 0)


def test_str_format():
    assert str(Rgb15(0x1F, 0, 0x10)) == "Rgb15(0x1f,0x0,0x10)"


def test_pixel_format_values():
    assert PixelFormat(0) is PixelFormat.BPP4
    assert PixelFormat(1) is PixelFormat.BPP8


def test_palette_from_bytes():
    values = [(i * 37) & 0x7FFF for i in range(512)]
    data = struct.pack("<512H", *values)
    palette = Palette.from_bytes(data)
    assert len(palette.bg_colors) == 256
    assert len(palette.fg_colors) == 256
    assert palette.bg_colors[5] == Rgb15.from_u16(values[5])
    assert palette.fg_colors[0] == Rgb15.from_u16(values[256])
    assert palette.fg_colors[255] == Rgb15.from_u16(values[511])


def test_palette_accepts_longer_data():
    data = struct.pack("<512H", *([0x1F] * 512)) + b"\xff" * 16
    palette = Palette.from_bytes(data)
    assert all(c == Rgb15(0x1F, 0, 0) for c in palette.bg_colors + palette.fg_colors)


def test_palette_short_data_rejected():
    with pytest.raises(ValueError):
        Palette.from_bytes(bytes(1023))