import pytest

from minigfx.util import fnv_hash, pack_pixel, rgba_to_mono


def test_fnv_empty_is_offset_basis():
    assert fnv_hash(b"") == 0xCBF29CE484222325


def test_fnv_known_value():
    assert fnv_hash(b"a") == 0xAF63DC4C8601EC8C


def test_fnv_str_matches_bytes():
    assert fnv_hash("ab") == fnv_hash(b"ab")


def test_fnv_is_64_bit_and_order_sensitive():
    h1 = fnv_hash(b"ab")
    h2 = fnv_hash(b"ba")
    assert 0 <= h1 < 2**64
    assert 0 <= h2 < 2**64
    assert h1 != h2


def test_fnv_high_bytes_in_range():
    value = fnv_hash(bytes([0x80, 0xFF]))
    assert 0 <= value < 2**64
    assert value != fnv_hash(bytes([0x7F, 0x00]))


def test_mono_white():
    assert rgba_to_mono(0xFFFFFFFF) == 0xFEFEFEFF


def test_mono_black_keeps_alpha():
    assert rgba_to_mono(0x00000080) == 0x00000080


@pytest.mark.parametrize("color", [0x12345678, 0xFF000000, 0x00FF00FF, 0x0000FF10])
def test_mono_channels_equal_and_alpha_kept(color):
    out = rgba_to_mono(color)
    assert out & 0xFF == color & 0xFF
    r, g, b = (out >> 24) & 0xFF, (out >> 16) & 0xFF, (out >> 8) & 0xFF
    assert r == g == b


@pytest.mark.parametrize("level", [0, 1, 50, 128, 200, 255])
def test_mono_of_gray_never_brighter(level):
    color = (level << 24) | (level << 16) | (level << 8) | 0xFF
    out = rgba_to_mono(color)
    assert (out >> 24) & 0xFF <= level


def test_mono_is_idempotent_direction():
    once = rgba_to_mono(0xC0804020)
    twice = rgba_to_mono(once)
    assert (twice >> 24) <= (once >> 24)


def test_pack_pixel_order():
    assert pack_pixel(0x11223344) == b"\x11\x22\x33\x44"


def test_pack_pixel_round_trip():
    color = 0xDEADBEEF
    assert int.from_bytes(pack_pixel(color), "big") == color


def test_pack_pixel_truncates_to_32_bits():
    assert pack_pixel(0x1_11223344) == pack_pixel(0x11223344)