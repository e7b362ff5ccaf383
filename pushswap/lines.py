"""Line-by-line reading of a stream through a fixed-size read buffer."""

from __future__ import annotations

from typing import IO, AnyStr, Generic, Iterator, Optional

BUFFER_SIZE = 1000


class LineReader(Generic[AnyStr]):
    """Reads lines, newline included, from a text or binary stream.

    Data is read ``buffer_size`` units at a time; what follows a line is
    kept for the next call.
    """

    def __init__(self, stream: IO[AnyStr], buffer_size: int = BUFFER_SIZE) -> None:
        if buffer_size <= 0:
            raise ValueError("buffer_size must be positive")
        self._stream = stream
        self._buffer_size = buffer_size
        self._pending: Optional[AnyStr] = None

    def _fill(self) -> AnyStr:
        pending = self._pending
        while True:
            chunk = self._stream.read(self._buffer_size)
            if pending is None:
                pending = chunk[:0]
            pending += chunk
            newline = "\n" if isinstance(chunk, str) else b"\n"
            if not chunk or newline in chunk:
                return pending

    def read_line(self) -> Optional[AnyStr]:
        """The next line, or ``None`` once the stream is exhausted."""
        pending = self._fill()
        if not pending:
            self._pending = None
            return None
        newline = "\n" if isinstance(pending, str) else b"\n"
        index = pending.find(newline)
        if index < 0:
            self._pending = None
            return pending
        self._pending = pending[index + 1:]
        return pending[:index + 1]

    def __iter__(self) -> Iterator[AnyStr]:
        return iter(self.read_line, None)