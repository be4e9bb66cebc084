# minigfx

A small, pure-Python toolkit for keeping RGBA pixel images and the order in
which their placements would be drawn, plus a reader for the XPM42 text image
format and two text helpers: a printf-style formatter and a line reader for
file descriptors. It has no third-party dependencies.

## Modules

### `minigfx.image`

- `Texture(width, height, pixels, bytes_per_pixel=4)`: raw RGBA pixel data,
  row by row. `ValueError` if `pixels` is not exactly
  `width * height * bytes_per_pixel` bytes long.
- `Instance(x, y, z=0, enabled=True)`: one placement of an image.
- `Image(width, height)`: a zero-filled RGBA buffer (`pixels`, a `bytearray`)
  with a list of `instances`, a `count` of them and an `enabled` flag.
  Width and height must be between 1 and 32767, otherwise `MlxError` with
  `ErrorCode.INVDIM` is raised.
  - `put_pixel(x, y, color)` / `get_pixel(x, y)`: write or read a colour given
    as a 32-bit `0xRRGGBBAA` value. Coordinates outside the image raise
    `MlxError` with `ErrorCode.INVPOS`.
  - `resize(width, height)`: rescale with nearest-neighbour sampling.

### `minigfx.context`

`Context` owns images and a render queue of `DrawCall` entries
(`image`, `instance_id`, and the derived `instance` and `z`).

- `new_image(width, height)` creates and registers an image;
  `texture_to_image(texture)` does the same with a copy of a texture's pixels.
- `image_to_window(image, x, y)` adds an instance at (x, y) and returns its
  index. Each new instance gets the next depth, so later placements lie on top.
- `set_instance_depth(instance, zdepth)` changes an instance's depth.
- `render_queue()` returns the draw calls sorted by ascending depth (the sort
  happens lazily, after placements or depth changes);
  `visible_draw_calls()` keeps only those whose image and instance are enabled.
- `delete_image(image)` removes the image's draw calls and the image itself.
- `image in context` tells whether an image is registered.

### `minigfx.xpm42`

XPM42 is a text format: a `!XPM42` line, a header line
`<width> <height> <colours> <chars-per-pixel> <c|m>`, one `<chars> #RRGGBBAA`
line per colour, then one line of pixel characters per row. Mode `m`
converts colours to gray.

- `load_xpm42(path)` reads a file; the path must contain `.xpm42`.
- `parse_xpm42(lines)` decodes lines (`str` or `bytes`, newlines kept or not).

Both return an `Xpm` (`texture`, `color_count`, `cpp`, `mode`) and raise
`MlxError` with `INVEXT`, `INVFILE` or `INVXPM` on failure.

### `minigfx.errors`

`ErrorCode` enumerates failure reasons, `strerror(code)` gives the English
description, and `MlxError` is the exception raised with a `code` attribute.

### `minigfx.keys`

Enumerations of input and setting values: `Key`, `Action`, `ModifierKey`
(a flag, combine with `|`), `MouseKey`, `MouseMode`, `CursorType`, `Setting`.

### `minigfx.util`

`fnv_hash(data)` (64-bit FNV-1a), `rgba_to_mono(color)` (gray, alpha kept) and
`pack_pixel(color)` (the R, G, B, A bytes of a colour).

### `minigfx.printf`

- `format(fmt, *args)` expands `%c %s %p %d %i %u %x %X %%`. `%d`/`%i` wrap
  to a signed 32-bit value, `%u`/`%x`/`%X` to an unsigned one; `%s` of `None`
  gives `(null)`; `%p` of `0` or `None` gives `(nil)`; unknown conversions
  produce nothing. Too few arguments raise `TypeError`.
- `printf(fmt, *args, stream=None)` writes the result to `stream` (standard
  output by default) and returns its length.
- `format_number(nb, base)`, `format_unsigned(nb, base)` and
  `format_pointer(address)` render integers with a digit string as base.

### `minigfx.linereader`

`LineReader(buffer_size=42)` reads raw file descriptors in chunks of
`buffer_size` bytes. `next_line(fd)` returns the next line as `bytes`,
newline included, or `None` when nothing is left; `lines(fd)` yields them all.
Each descriptor keeps its own leftover data. `get_next_line(fd)` uses one
shared reader.

## Example

```python
from minigfx.context import Context
from minigfx.xpm42 import load_xpm42

ctx = Context()
img = ctx.new_image(32, 32)
img.put_pixel(0, 0, 0xFF0000FF)          # opaque red
index = ctx.image_to_window(img, 10, 20)

xpm = load_xpm42("sprite.xpm42")
sprite = ctx.texture_to_image(xpm.texture)
ctx.image_to_window(sprite, 0, 0)

for call in ctx.visible_draw_calls():
    print(call.instance.x, call.instance.y, call.z)
```

```python
from minigfx.printf import format

format("%s has %d items (%x)", "box", 42, 255)   # 'box has 42 items (ff)'
```

```python
import os
from minigfx.linereader import LineReader

reader = LineReader(buffer_size=42)
fd = os.open("map.ber", os.O_RDONLY)
for line in reader.lines(fd):
    print(line.decode(), end="")
os.close(fd)
```

## What it does not do

minigfx keeps pixels and drawing order in memory only. It opens no window,
draws nothing on screen, handles no keyboard or mouse events and runs no
frame loop; the `minigfx.keys` enumerations are plain values. It does not
decode PNG files and has no built-in font. There is no command-line program.

## Installation and tests

```
pip install .
pip install .[test]
pytest
```