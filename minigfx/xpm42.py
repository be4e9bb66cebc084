"""Reader for XPM42, a simple text image format close to XPM2.

A file starts with the line ``!XPM42``, followed by a header line holding
width, height, colour count, characters per pixel and the colour mode
(``c`` for colour, ``m`` for monochrome). Then come one line per colour,
``<chars> #RRGGBBAA``, and one line of pixel characters per image row.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Iterable, Iterator

from .errors import ErrorCode, MlxError
from .image import BPP, MAX_DIMENSION, Texture
from .util import fnv_hash, pack_pixel, rgba_to_mono

MAGIC = "!XPM42"
EXTENSION = ".xpm42"
MAX_CPP = 10
_TABLE_SIZE = 0xFFFF
_HEX_DIGITS = "0123456789abcdefABCDEF"
_OCT_DIGITS = "01234567"
_DEC_DIGITS = "0123456789"
_WHITESPACE = " \t\n\v\f\r"


@dataclass
class Xpm:
    """A decoded XPM42 image."""

    texture: Texture
    color_count: int
    cpp: int
    mode: str


def _invalid() -> MlxError:
    return MlxError(ErrorCode.INVXPM)


def _skip_space(text: str, pos: int) -> int:
    while pos < len(text) and text[pos] in _WHITESPACE:
        pos += 1
    return pos


def _take(text: str, pos: int, digits: str) -> int:
    while pos < len(text) and text[pos] in digits:
        pos += 1
    return pos


def _scan_int(text: str, pos: int) -> tuple[int, int] | None:
    """Read an integer with automatic base (0x hex, leading 0 octal, else decimal)."""
    pos = _skip_space(text, pos)
    sign = 1
    if pos < len(text) and text[pos] in "+-":
        sign = -1 if text[pos] == "-" else 1
        pos += 1
    if text.startswith(("0x", "0X"), pos) and pos + 2 < len(text) and text[pos + 2] in _HEX_DIGITS:
        end = _take(text, pos + 2, _HEX_DIGITS)
        return sign * int(text[pos + 2:end], 16), end
    if pos < len(text) and text[pos] == "0":
        end = _take(text, pos + 1, _OCT_DIGITS)
        return sign * int(text[pos:end], 8), end
    end = _take(text, pos, _DEC_DIGITS)
    if end == pos:
        return None
    return sign * int(text[pos:end]), end


def _parse_header(line: str) -> tuple[int, int, int, int, str]:
    values = []
    pos = 0
    for _ in range(4):
        scanned = _scan_int(line, pos)
        if scanned is None:
            raise _invalid()
        value, pos = scanned
        values.append(value)
    pos = _skip_space(line, pos)
    mode = line[pos] if pos < len(line) else ""
    width = values[0] & 0xFFFFFFFF
    height = values[1] & 0xFFFFFFFF
    color_count, cpp = values[2], values[3]
    if width > MAX_DIMENSION or height > MAX_DIMENSION:
        raise _invalid()
    if mode not in ("c", "m") or not 0 < cpp <= MAX_CPP:
        raise _invalid()
    return width, height, color_count, cpp, mode


def _hex_channel(pair: str) -> int:
    """Parse up to two characters as a hexadecimal byte, stopping at the first non-digit."""
    pos = _skip_space(pair, 0)
    sign = 1
    if pos < len(pair) and pair[pos] in "+-":
        sign = -1 if pair[pos] == "-" else 1
        pos += 1
    end = _take(pair, pos, _HEX_DIGITS)
    if end == pos:
        return 0
    return (sign * int(pair[pos:end], 16)) & 0xFF


def _slot(chars: str) -> int:
    return fnv_hash(chars.encode("latin-1")) % _TABLE_SIZE


def _parse_color(line: str, cpp: int, mode: str) -> tuple[int, int]:
    if line.rfind(" ") != cpp:
        raise _invalid()
    marker = line[cpp + 1:cpp + 2]
    first = line[cpp + 2:cpp + 3]
    if marker != "#" or not (first.isascii() and first.isalnum()):
        raise _invalid()
    start = cpp + 2
    color = 0
    for shift, offset in zip((24, 16, 8, 0), (0, 2, 4, 6)):
        color |= _hex_channel(line[start + offset:start + offset + 2]) << shift
    if mode == "m":
        color = rgba_to_mono(color)
    return _slot(line[:cpp]), color


def _as_text(line: str | bytes) -> str:
    return line.decode("latin-1") if isinstance(line, bytes) else line


def _next(lines: Iterator[str]) -> str:
    line = next(lines, None)
    if line is None or line == "":
        raise _invalid()
    return line


def parse_xpm42(lines: Iterable[str | bytes]) -> Xpm:
    """Decode XPM42 data given as lines (newlines kept or not); raise MlxError on bad data."""
    stream = (_as_text(line) for line in lines)
    if _next(stream).rstrip("\n") != MAGIC:
        raise _invalid()
    width, height, color_count, cpp, mode = _parse_header(_next(stream))

    table: dict[int, int] = {}
    for _ in range(color_count):
        slot, color = _parse_color(_next(stream), cpp, mode)
        table[slot] = color

    pixels = bytearray(width * height * BPP)
    row_bytes = width * BPP
    for y in range(height):
        line = _next(stream)
        if line.endswith("\n"):
            line = line[:-1]
        if len(line) != width * cpp:
            raise _invalid()
        row = b"".join(
            pack_pixel(table.get(_slot(line[x:x + cpp]), 0))
            for x in range(0, width * cpp, cpp)
        )
        pixels[y * row_bytes:(y + 1) * row_bytes] = row

    texture = Texture(width, height, bytes(pixels))
    return Xpm(texture=texture, color_count=color_count, cpp=cpp, mode=mode)


def load_xpm42(path: str | os.PathLike[str]) -> Xpm:
    """Load an XPM42 file; the path must contain '.xpm42'."""
    name = os.fspath(path)
    if EXTENSION not in name:
        raise MlxError(ErrorCode.INVEXT)
    try:
        handle = open(name, "rb")
    except OSError:
        raise MlxError(ErrorCode.INVFILE) from None
    with handle:
        return parse_xpm42(handle)