"""Read a stream one line at a time through a fixed-size read buffer."""

from __future__ import annotations

from typing import Any, Iterator, Optional, Union

BUFFER_SIZE = 5

Chunk = Union[str, bytes]


class LineReader:
    """Return successive lines from any object with a ``read(n)`` method.

    Each line keeps its trailing newline; the final line may lack one. Works
    with both text and binary streams.
    """

    def __init__(self, stream: Any, buffer_size: int = BUFFER_SIZE) -> None:
        if buffer_size <= 0:
            raise ValueError("buffer_size must be positive")
        self._stream = stream
        self._buffer_size = buffer_size
        self._pending: Optional[Chunk] = None

    @staticmethod
    def _newline(chunk: Chunk) -> Chunk:
        return "\n" if isinstance(chunk, str) else b"\n"

    def next_line(self) -> Optional[Chunk]:
        """Return the next line, or None once the stream is exhausted."""
        pending = self._pending
        while pending is None or self._newline(pending) not in pending:
            chunk = self._stream.read(self._buffer_size)
            if not chunk:
                break
            pending = chunk if pending is None else pending + chunk
        if not pending:
            self._pending = pending
            return None
        index = pending.find(self._newline(pending))
        if index < 0:
            line, rest = pending, pending[:0]
        else:
            line, rest = pending[:index + 1], pending[index + 1:]
        self._pending = rest
        return line

    def __iter__(self) -> Iterator[Chunk]:
        while True:
            line = self.next_line()
            if line is None:
                return
            yield line