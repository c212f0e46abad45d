"""Reading a stream one line at a time through a fixed-size buffer."""

from __future__ import annotations

from collections.abc import Iterator
from typing import IO, AnyStr, Generic, Optional

BUFFER_SIZE = 1


class LineReader(Generic[AnyStr]):
    """Yields the lines of a text or binary stream, each with its newline.

    The final line is returned without a newline if the stream does not end
    with one. Data is pulled from the stream ``buffer_size`` units at a time.
    """

    def __init__(self, stream: IO[AnyStr], buffer_size: int = BUFFER_SIZE) -> None:
        if buffer_size <= 0:
            raise ValueError(f"buffer size must be positive, got {buffer_size}")
        self._stream = stream
        self._size = buffer_size
        self._rest: Optional[AnyStr] = None

    def read_line(self) -> Optional[AnyStr]:
        """The next line, or None once the stream is exhausted."""
        while True:
            rest = self._rest
            if rest:
                newline = b"\n" if isinstance(rest, bytes) else "\n"
                index = rest.find(newline)
                if index >= 0:
                    line, remain = rest[:index + 1], rest[index + 1:]
                    self._rest = remain or None
                    return line
            try:
                chunk = self._stream.read(self._size)
            except OSError:
                self._rest = None
                raise
            if not chunk:
                self._rest = None
                return rest or None
            self._rest = chunk if rest is None else rest + chunk

    def __iter__(self) -> Iterator[AnyStr]:
        while (line := self.read_line()) is not None:
            yield line


def read_lines(stream: IO[AnyStr]) -> list[AnyStr]:
    """Every line of ``stream``, newlines kept."""
    return list(LineReader(stream))