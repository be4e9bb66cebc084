"""Textures, image instances and RGBA pixel images."""

from __future__ import annotations

import struct
from dataclasses import dataclass, field

from .errors import ErrorCode, MlxError
from .util import pack_pixel

BPP = 4
MAX_DIMENSION = 0x7FFF


def _f32(value: float) -> float:
    return struct.unpack("f", struct.pack("f", value))[0]


def _check_dimensions(width: int, height: int) -> None:
    if not (0 < width <= MAX_DIMENSION and 0 < height <= MAX_DIMENSION):
        raise MlxError(ErrorCode.INVDIM)


@dataclass
class Texture:
    """Pixel data loaded from disk: ``width * height`` RGBA pixels, row by row."""

    width: int
    height: int
    pixels: bytes
    bytes_per_pixel: int = BPP

    def __post_init__(self) -> None:
        expected = self.width * self.height * self.bytes_per_pixel
        if len(self.pixels) != expected:
            raise ValueError(
                f"texture needs {expected} bytes of pixel data, got {len(self.pixels)}"
            )


@dataclass
class Instance:
    """One placement of an image on screen; ``z`` decides what is drawn on top."""

    x: int
    y: int
    z: int = 0
    enabled: bool = True


class Image:
    """An RGBA pixel buffer that can be placed on screen any number of times.

    Width and height are fixed except through :meth:`resize`. Images compare
    by identity.
    """

    def __init__(self, width: int, height: int) -> None:
        _check_dimensions(width, height)
        self._width = width
        self._height = height
        self.pixels = bytearray(width * height * BPP)
        self.instances: list[Instance] = []
        self.enabled = True

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def count(self) -> int:
        """Number of instances of this image."""
        return len(self.instances)

    def __repr__(self) -> str:
        return (
            f"Image(width={self._width}, height={self._height}, "
            f"instances={len(self.instances)}, enabled={self.enabled})"
        )

    def _offset(self, x: int, y: int) -> int:
        if not (0 <= x < self._width and 0 <= y < self._height):
            raise MlxError(ErrorCode.INVPOS)
        return (y * self._width + x) * BPP

    def put_pixel(self, x: int, y: int, color: int) -> None:
        """Set the pixel at (x, y) to the RGBA colour ``color``."""
        start = self._offset(x, y)
        self.pixels[start:start + BPP] = pack_pixel(color)

    def get_pixel(self, x: int, y: int) -> int:
        """Return the RGBA colour of the pixel at (x, y)."""
        start = self._offset(x, y)
        return int.from_bytes(self.pixels[start:start + BPP], "big")

    def resize(self, width: int, height: int) -> None:
        """Scale the image to a new size with nearest-neighbour sampling."""
        _check_dimensions(width, height)
        if width == self._width and height == self._height:
            return
        wstep = _f32(self._width / width)
        hstep = _f32(self._height / height)
        columns = [int(_f32(i * wstep)) for i in range(width)]
        origin = self.pixels
        resized = bytearray()
        for j in range(height):
            row_start = int(_f32(j * hstep)) * self._width
            for column in columns:
                start = (row_start + column) * BPP
                resized += origin[start:start + BPP]
        self.pixels = resized
        self._width = width
        self._height = height