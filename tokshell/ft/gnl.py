"""Reading a stream one line at a time through a fixed-size read buffer."""

from __future__ import annotations

from collections.abc import Iterator
from typing import IO, AnyStr, Generic

BUFFER_SIZE = 42


def _find_newline(data: AnyStr) -> int:
    """Index of the first newline in data, or -1 when there is none."""
    if isinstance(data, (bytes, bytearray)):
        return data.find(b"\n")
    return data.find("\n")


def _strip_newline(line: AnyStr) -> AnyStr:
    """The line without one trailing newline, if it has one."""
    index = _find_newline(line)
    if index == len(line) - 1:
        return line[:index]
    return line


class LineReader(Generic[AnyStr]):
    """Yield the lines of a text or binary stream, newline included.

    The stream is read in chunks of buffer_size; text read past the end of
    a line is kept for the next call.
    """

    def __init__(self, stream: IO[AnyStr], buffer_size: int = BUFFER_SIZE) -> None:
        if buffer_size <= 0:
            raise ValueError("buffer_size must be positive")
        self._stream = stream
        self._buffer_size = buffer_size
        self._rest: AnyStr | None = None

    def _fill(self) -> None:
        rest = self._rest
        while rest is None or _find_newline(rest) < 0:
            chunk = self._stream.read(self._buffer_size)
            if not chunk:
                break
            rest = chunk if rest is None else rest + chunk
        self._rest = rest

    def read_line(self) -> AnyStr | None:
        """The next line, ending in a newline unless it is the last; None at the end."""
        self._fill()
        rest = self._rest
        if not rest:
            self._rest = None
            return None
        index = _find_newline(rest)
        if index < 0:
            self._rest = None
            return rest
        line = rest[:index + 1]
        self._rest = rest[index + 1:] or None
        return line

    def __iter__(self) -> Iterator[AnyStr]:
        while (line := self.read_line()) is not None:
            yield line


def read_map(stream: IO[AnyStr]) -> list[AnyStr]:
    """All lines of the stream, each without its trailing newline."""
    return [_strip_newline(line) for line in LineReader(stream)]