"""Reading a stream line by line through a fixed-size read buffer."""

from __future__ import annotations

import operator
from typing import IO, AnyStr, Iterator, Optional

DEFAULT_BUFFER_SIZE = 32


class LineReader:
    """Yield the lines of a text or binary stream, without their newlines.

    The stream is read in pieces of *buffer_size* characters (or bytes)
    until a newline is seen. A final line without a newline is returned as
    well; an empty stream yields no lines.
    """

    def __init__(self, stream: IO, buffer_size: int = DEFAULT_BUFFER_SIZE) -> None:
        buffer_size = operator.index(buffer_size)
        if buffer_size < 1:
            raise ValueError(f"buffer size must be at least 1, got {buffer_size}")
        self._stream = stream
        self._buffer_size = buffer_size
        self._buffer: Optional[AnyStr] = None
        self._exhausted = False

    def _newline(self) -> AnyStr:
        return b"\n" if isinstance(self._buffer, (bytes, bytearray)) else "\n"

    def _fill(self) -> None:
        while not self._exhausted:
            if self._buffer is not None and self._newline() in self._buffer:
                return
            chunk = self._stream.read(self._buffer_size)
            if not chunk:
                self._exhausted = True
                return
            self._buffer = chunk if self._buffer is None else self._buffer + chunk

    def read_line(self) -> Optional[AnyStr]:
        """The next line without its newline, or None at the end of the stream."""
        self._fill()
        if not self._buffer:
            return None
        line, _, rest = self._buffer.partition(self._newline())
        self._buffer = rest
        return line

    def __iter__(self) -> Iterator[AnyStr]:
        while True:
            line = self.read_line()
            if line is None:
                return
            yield line