"""Read a file descriptor line by line, keeping leftover data per descriptor."""

from __future__ import annotations

import os
from typing import Iterator

BUFFER_SIZE = 42


class LineReader:
    """Buffered line reader over raw file descriptors.

    Each descriptor keeps its own pending data, so several descriptors can be
    read in turn. Read errors end the stream just as end of file does.
    """

    def __init__(self, buffer_size: int = BUFFER_SIZE) -> None:
        self.buffer_size = buffer_size
        self._pending: dict[int, bytes] = {}

    def _fill(self, fd: int) -> bytes:
        buffer = self._pending.get(fd, b"")
        chunk = b""
        while b"\n" not in chunk:
            try:
                chunk = os.read(fd, self.buffer_size)
            except OSError:
                break
            if not chunk:
                break
            buffer += chunk
        return buffer

    def next_line(self, fd: int) -> bytes | None:
        """Return the next line of ``fd`` with its newline, or None when none is left."""
        if fd < 0 or self.buffer_size <= 0:
            return None
        buffer = self._fill(fd)
        if not buffer:
            self._pending.pop(fd, None)
            return None
        newline = buffer.find(b"\n")
        cut = len(buffer) if newline < 0 else newline + 1
        self._pending[fd] = buffer[cut:]
        return buffer[:cut]

    def lines(self, fd: int) -> Iterator[bytes]:
        """Yield every remaining line of ``fd``."""
        while (line := self.next_line(fd)) is not None:
            yield line


_default_reader = LineReader()


def get_next_line(fd: int) -> bytes | None:
    """Return the next line of ``fd`` using a shared reader."""
    return _default_reader.next_line(fd)