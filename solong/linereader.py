"""Read a stream line by line in fixed-size chunks."""

from __future__ import annotations

from typing import AnyStr, Generic, IO, Iterator, Optional

DEFAULT_BUFFER_SIZE = 8


class LineReader(Generic[AnyStr]):
    """Yield the lines of a text or binary stream, reading ``buffer_size`` at a time.

    Each line keeps its trailing newline; the last line may lack one.
    Once the end of the stream is reached the reader stays exhausted.
    """

    def __init__(self, stream: IO[AnyStr], buffer_size: int = DEFAULT_BUFFER_SIZE) -> None:
        if buffer_size <= 0:
            raise ValueError("buffer_size must be positive")
        self._stream = stream
        self._buffer_size = buffer_size
        self._pending: Optional[AnyStr] = None
        self._ended = False

    def next_line(self) -> Optional[AnyStr]:
        """Return the next line, or None once the stream is exhausted."""
        if self._ended:
            return None
        buffer = self._pending
        searched = 0
        while True:
            if buffer:
                newline = "\n" if isinstance(buffer, str) else b"\n"
                index = buffer.find(newline, searched)  # type: ignore[arg-type]
                if index >= 0:
                    self._pending = buffer[index + 1:]
                    return buffer[:index + 1]
                searched = len(buffer)
            chunk = self._stream.read(self._buffer_size)
            if not chunk:
                self._ended = True
                self._pending = None
                return buffer if buffer else None
            buffer = chunk if buffer is None else buffer + chunk

    def __iter__(self) -> Iterator[AnyStr]:
        while True:
            line = self.next_line()
            if line is None:
                return
            yield line


def read_lines(stream: IO[AnyStr], buffer_size: int = DEFAULT_BUFFER_SIZE) -> Iterator[AnyStr]:
    """Yield every line of ``stream``, reading ``buffer_size`` at a time."""
    yield from LineReader(stream, buffer_size)