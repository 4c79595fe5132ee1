"""Line-by-line reading from a raw file descriptor."""

from __future__ import annotations

import os
from collections.abc import Iterator

DEFAULT_BUFFER_SIZE = 4096
MAX_BUFFER_SIZE = 100000


class LineReader:
    """Read newline-terminated lines from a file descriptor.

    Each call to :meth:`read_line` returns the next line including its
    trailing newline, the unterminated tail at end of input, or None when
    nothing is left. Data read past a line is kept for the next call.
    """

    def __init__(self, fd: int, buffer_size: int = DEFAULT_BUFFER_SIZE) -> None:
        if fd < 0:
            raise ValueError("file descriptor must not be negative")
        if buffer_size > MAX_BUFFER_SIZE:
            buffer_size = DEFAULT_BUFFER_SIZE
        if buffer_size <= 0:
            raise ValueError("buffer size must be positive")
        self.fd = fd
        self.buffer_size = buffer_size
        self._stash = bytearray()

    def read_line(self) -> bytes | None:
        """Return the next line, or None at end of input."""
        while True:
            newline = self._stash.find(b"\n")
            if newline >= 0:
                line = bytes(self._stash[: newline + 1])
                del self._stash[: newline + 1]
                return line
            try:
                chunk = os.read(self.fd, self.buffer_size)
            except OSError:
                self._stash.clear()
                raise
            if not chunk:
                if self._stash:
                    line = bytes(self._stash)
                    self._stash.clear()
                    return line
                return None
            self._stash += chunk

    def __iter__(self) -> Iterator[bytes]:
        while (line := self.read_line()) is not None:
            yield line