"""A small printf-style formatter supporting %c %s %p %d %i %u %x %X and %%."""

from __future__ import annotations

import sys
from typing import Any, Callable, Iterator, TextIO

DECIMAL = "0123456789"
HEX_LOWER = "0123456789abcdef"
HEX_UPPER = "0123456789ABCDEF"

_UINT32_MASK = (1 << 32) - 1
_POINTER_MASK = (1 << 64) - 1


def _check_base(base: str) -> None:
    if len(base) < 2:
        raise ValueError("base must contain at least two digits")


def format_unsigned(nb: int, base: str) -> str:
    """Render a non-negative integer with the digits of ``base``."""
    _check_base(base)
    if nb < 0:
        raise ValueError("unsigned value must not be negative")
    radix = len(base)
    digits = []
    while True:
        nb, remainder = divmod(nb, radix)
        digits.append(base[remainder])
        if nb == 0:
            break
    return "".join(reversed(digits))


def format_number(nb: int, base: str) -> str:
    """Render a signed integer with the digits of ``base``, '-' first if negative."""
    if nb < 0:
        return "-" + format_unsigned(-nb, base)
    return format_unsigned(nb, base)


def format_pointer(address: int | None) -> str:
    """Render an address as lower-case hex with a '0x' prefix, or '(nil)' for zero."""
    value = (address or 0) & _POINTER_MASK
    if value == 0:
        return "(nil)"
    return "0x" + format_unsigned(value, HEX_LOWER)


def _as_int32(value: int) -> int:
    value &= _UINT32_MASK
    return value - (1 << 32) if value >= 1 << 31 else value


def _as_uint32(value: int) -> int:
    return value & _UINT32_MASK


def _convert_char(arg: Any) -> str:
    if isinstance(arg, str):
        if len(arg) != 1:
            raise TypeError("%c requires a single character")
        return arg
    if isinstance(arg, int):
        return chr(arg & 0xFF)
    raise TypeError("%c requires a character or an integer")


def _convert_string(arg: Any) -> str:
    return "(null)" if arg is None else str(arg)


def _require_int(arg: Any, spec: str) -> int:
    if isinstance(arg, bool) or not isinstance(arg, int):
        raise TypeError(f"%{spec} requires an integer")
    return arg


def _convert_pointer(arg: Any) -> str:
    if arg is None:
        return format_pointer(None)
    return format_pointer(_require_int(arg, "p"))


_CONVERTERS: dict[str, Callable[[Any], str]] = {
    "c": _convert_char,
    "s": _convert_string,
    "p": _convert_pointer,
    "d": lambda arg: format_number(_as_int32(_require_int(arg, "d")), DECIMAL),
    "i": lambda arg: format_number(_as_int32(_require_int(arg, "i")), DECIMAL),
    "u": lambda arg: format_unsigned(_as_uint32(_require_int(arg, "u")), DECIMAL),
    "x": lambda arg: format_unsigned(_as_uint32(_require_int(arg, "x")), HEX_LOWER),
    "X": lambda arg: format_unsigned(_as_uint32(_require_int(arg, "X")), HEX_UPPER),
}


def _next_arg(values: Iterator[Any], spec: str) -> Any:
    try:
        return next(values)
    except StopIteration:
        raise TypeError(f"not enough arguments for %{spec}") from None


def format(fmt: str, *args: Any) -> str:
    """Expand ``fmt`` with ``args``; unknown conversions produce no output."""
    if fmt is None:
        raise TypeError("format string must not be None")
    values = iter(args)
    chars = iter(fmt)
    out: list[str] = []
    for ch in chars:
        if ch != "%":
            out.append(ch)
            continue
        spec = next(chars, None)
        if spec is None:
            break
        if spec == "%":
            out.append("%")
        elif spec in _CONVERTERS:
            out.append(_CONVERTERS[spec](_next_arg(values, spec)))
    return "".join(out)


def printf(fmt: str, *args: Any, stream: TextIO | None = None) -> int:
    """Write the expanded format to ``stream`` (stdout by default); return its length."""
    text = format(fmt, *args)
    (stream if stream is not None else sys.stdout).write(text)
    return len(text)