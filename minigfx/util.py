"""Small helpers: FNV-1a hashing, grayscale conversion and pixel packing."""

from __future__ import annotations

import struct

_FNV_PRIME = 0x100000001B3
_FNV_OFFSET = 0xCBF29CE484222325
_MASK64 = (1 << 64) - 1
_MASK32 = (1 << 32) - 1


def fnv_hash(data: bytes | str) -> int:
    """64-bit FNV-1a hash of ``data``.

    Bytes are treated as signed chars, so values of 0x80 and above are
    sign-extended before being mixed in.
    """
    if isinstance(data, str):
        data = data.encode()
    value = _FNV_OFFSET
    for byte in data:
        signed = byte - 256 if byte >= 0x80 else byte
        value = ((value ^ (signed & _MASK64)) * _FNV_PRIME) & _MASK64
    return value


def _f32(value: float) -> float:
    return struct.unpack("f", struct.pack("f", value))[0]


_WEIGHT_R = _f32(0.299)
_WEIGHT_G = _f32(0.587)
_WEIGHT_B = _f32(0.114)


def _weighted(weight: float, channel: int) -> int:
    return int(_f32(weight * channel)) & 0xFF


def rgba_to_mono(color: int) -> int:
    """Convert an RGBA colour to gray, keeping its alpha."""
    color &= _MASK32
    r = _weighted(_WEIGHT_R, (color >> 24) & 0xFF)
    g = _weighted(_WEIGHT_G, (color >> 16) & 0xFF)
    b = _weighted(_WEIGHT_B, (color >> 8) & 0xFF)
    y = (r + g + b) & 0xFF
    return (y << 24) | (y << 16) | (y << 8) | (color & 0xFF)


def pack_pixel(color: int) -> bytes:
    """Return the four bytes R, G, B, A of an RGBA colour."""
    return (color & _MASK32).to_bytes(4, "big")