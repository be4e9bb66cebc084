import pytest

from minigfx.errors import ErrorCode, MlxError
from minigfx.image import Image, Instance, Texture


def test_new_image_is_transparent_black():
    image = Image(3, 2)
    assert image.width == 3
    assert image.height == 2
    assert len(image.pixels) == 3 * 2 * 4
    assert set(image.pixels) == {0}
    assert image.enabled is True
    assert image.count == 0


@pytest.mark.parametrize("width,height", [(0, 1), (1, 0), (32768, 1), (1, 32768), (-1, 5)])
def test_invalid_dimensions_raise(width, height):
    with pytest.raises(MlxError) as info:
        Image(width, height)
    assert info.value.code == ErrorCode.INVDIM


def test_largest_dimension_accepted():
    image = Image(32767, 1)
    assert image.width == 32767


def test_put_pixel_writes_rgba_bytes_in_order():
    image = Image(2, 2)
    image.put_pixel(1, 1, 0x11223344)
    assert image.pixels[12:16] == bytes([0x11, 0x22, 0x33, 0x44])
    assert image.pixels[:12] == bytes(12)


def test_put_then_get_round_trip():
    image = Image(4, 3)
    image.put_pixel(2, 1, 0xFF00FF80)
    image.put_pixel(0, 2, 0x12345678)
    assert image.get_pixel(2, 1) == 0xFF00FF80
    assert image.get_pixel(0, 2) == 0x12345678
    assert image.get_pixel(3, 2) == 0


@pytest.mark.parametrize("x,y", [(2, 0), (0, 2), (-1, 0), (0, -1)])
def test_out_of_bounds_pixel_raises(x, y):
    image = Image(2, 2)
    with pytest.raises(MlxError) as info:
        image.put_pixel(x, y, 0xFFFFFFFF)
    assert info.value.code == ErrorCode.INVPOS
    with pytest.raises(MlxError):
        image.get_pixel(x, y)


def test_resize_upscale_repeats_pixels():
    image = Image(2, 1)
    image.put_pixel(0, 0, 0xAABBCCDD)
    image.put_pixel(1, 0, 0x01020304)
    image.resize(4, 2)
    assert (image.width, image.height) == (4, 2)
    row = [image.get_pixel(x, 0) for x in range(4)]
    assert row == [0xAABBCCDD, 0xAABBCCDD, 0x01020304, 0x01020304]
    assert [image.get_pixel(x, 1) for x in range(4)] == row


def test_resize_downscale_samples_nearest():
    image = Image(4, 1)
    colors = [0x10000001, 0x20000002, 0x30000003, 0x40000004]
    for x, color in enumerate(colors):
        image.put_pixel(x, 0, color)
    image.resize(2, 1)
    assert [image.get_pixel(x, 0) for x in range(2)] == [colors[0], colors[2]]
    assert len(image.pixels) == 2 * 4


def test_resize_same_size_keeps_buffer():
    image = Image(2, 2)
    image.put_pixel(1, 0, 0xDEADBEEF)
    before = image.pixels
    image.resize(2, 2)
    assert image.pixels is before
    assert image.get_pixel(1, 0) == 0xDEADBEEF


def test_resize_invalid_leaves_image_unchanged():
    image = Image(2, 2)
    image.put_pixel(0, 0, 0xCAFEBABE)
    with pytest.raises(MlxError) as info:
        image.resize(0, 2)
    assert info.value.code == ErrorCode.INVDIM
    assert (image.width, image.height) == (2, 2)
    assert image.get_pixel(0, 0) == 0xCAFEBABE


def test_resize_round_trip_on_integer_scale():
    image = Image(3, 2)
    for y in range(2):
        for x in range(3):
            image.put_pixel(x, y, (x + 1) << 24 | (y + 1))
    original = bytes(image.pixels)
    image.resize(6, 4)
    image.resize(3, 2)
    assert bytes(image.pixels) == original


def test_images_compare_by_identity():
    first = Image(1, 1)
    second = Image(1, 1)
    assert first == first
    assert (first == second) is False


def test_count_follows_instances():
    image = Image(1, 1)
    image.instances.append(Instance(5, 6, 1))
    image.instances.append(Instance(7, 8))
    assert image.count == 2
    assert image.instances[1].z == 0
    assert image.instances[1].enabled is True


def test_texture_checks_pixel_length():
    texture = Texture(2, 1, bytes(8))
    assert texture.bytes_per_pixel == 4
    with pytest.raises(ValueError):
        Texture(2, 2, bytes(8))