"""Line-by-line reading from a stream through a fixed-size buffer."""

from __future__ import annotations

from collections.abc import Iterator
from typing import IO, AnyStr, Generic

BUFFER_SIZE = 42


class LineReader(Generic[AnyStr]):
    """Read lines from a text or binary stream, ``buffer_size`` at a time.

    Each line keeps its newline, except a final line that has none.
    Data read past a newline is kept for the next call.
    """

    def __init__(self, stream: IO[AnyStr], buffer_size: int = BUFFER_SIZE) -> None:
        if stream is None:
            raise ValueError("a stream is required")
        if buffer_size <= 0:
            raise ValueError(f"buffer_size must be positive, got {buffer_size}")
        self._stream = stream
        self._size = buffer_size
        self._pending: AnyStr | None = None

    def read_line(self) -> AnyStr | None:
        """Return the next line, or None once the stream is exhausted."""
        pending = self._pending
        while True:
            if pending:
                if isinstance(pending, bytes):
                    index = pending.find(b"\n")
                else:
                    index = pending.find("\n")
                if index >= 0:
                    self._pending = pending[index + 1:]
                    return pending[:index + 1]
            chunk = self._stream.read(self._size)
            if not chunk:
                self._pending = None
                return pending or None
            pending = chunk if pending is None else pending + chunk

    def __iter__(self) -> Iterator[AnyStr]:
        while (line := self.read_line()) is not None:
            yield line