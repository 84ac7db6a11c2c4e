"""Reading a stream one line at a time through a fixed-size buffer."""

from __future__ import annotations

from collections.abc import Iterator
from typing import IO, AnyStr, Generic

BUFFER_SIZE = 128


def _newline(chunk: str | bytes) -> str | bytes:
    return b"\n" if isinstance(chunk, (bytes, bytearray)) else "\n"


class LineReader(Generic[AnyStr]):
    """Hands out lines from a text or binary stream.

    Each line keeps its trailing newline; the last line may lack one.
    Data read past a newline is kept for the next call.
    """

    def __init__(self, stream: IO[AnyStr], buffer_size: int = BUFFER_SIZE) -> None:
        if buffer_size <= 0:
            raise ValueError(f"buffer size must be positive, got {buffer_size}")
        self._stream = stream
        self._buffer_size = buffer_size
        self._pending: AnyStr | None = None

    def read_line(self) -> AnyStr | None:
        """The next line, or ``None`` at end of stream or on a read error."""
        pending = self._pending
        try:
            while pending is None or _newline(pending) not in pending:
                chunk = self._stream.read(self._buffer_size)
                if not chunk:
                    break
                pending = chunk if pending is None else pending + chunk
        except OSError:
            self._pending = None
            return None
        if not pending:
            self._pending = None
            return None
        index = pending.find(_newline(pending))
        if index < 0:
            self._pending = None
            return pending
        line, rest = pending[: index + 1], pending[index + 1 :]
        self._pending = rest or None
        return line

    def __iter__(self) -> Iterator[AnyStr]:
        while True:
            line = self.read_line()
            if line is None:
                return
            yield line