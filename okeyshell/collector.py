"""Tracking of every object the shell allocates, so all can be released at once.

Objects are tracked by identity. An object handed out more than once
(an interned string, say) is counted, and must be freed as many times.
"""

from __future__ import annotations

import os
from collections.abc import Iterator
from typing import Any

from . import strings
from .errors import ShellError, error_handler

GC_SIZE = 20

_DOUBLE_FREE_MESSAGE = (
    "Possible double free:\n"
    "Trying to gc_free pointer that was not gc_malloced, "
    "gc_calloced or gc_realloced "
)


class DoubleFreeError(ShellError):
    """Raised when freeing an object the collector does not track."""

    def __init__(self, message: str = _DOUBLE_FREE_MESSAGE, status: int = 1) -> None:
        super().__init__(message, status)


class GarbageCollector:
    """Keeps allocated objects alive until freed or until :meth:`empty`."""

    def __init__(self) -> None:
        self._tracked: dict[int, list[Any]] = {}

    def add(self, obj: Any) -> Any:
        """Start tracking ``obj`` and return it."""
        entry = self._tracked.get(id(obj))
        if entry is None:
            self._tracked[id(obj)] = [obj, 1]
        else:
            entry[1] += 1
        return obj

    def remove(self, obj: Any) -> bool:
        """Stop tracking one allocation of ``obj``; False if it was not tracked."""
        entry = self._tracked.get(id(obj))
        if entry is None or entry[0] is not obj:
            return False
        entry[1] -= 1
        if entry[1] == 0:
            del self._tracked[id(obj)]
        return True

    def empty(self) -> None:
        """Release everything that is tracked."""
        self._tracked.clear()

    def malloc(self, size: int) -> bytearray:
        """A tracked buffer of ``size`` bytes."""
        if size < 0:
            raise ValueError(f"size must not be negative, got {size}")
        return self.add(bytearray(size))

    def calloc(self, count: int, size: int) -> bytearray:
        """A tracked zero-filled buffer of ``count * size`` bytes."""
        if count < 0 or size < 0:
            raise ValueError("count and size must not be negative")
        return self.malloc(count * size)

    def realloc(self, buffer: bytearray | None, size: int) -> bytearray | None:
        """Resize ``buffer`` into a new tracked buffer and free the old one.

        A size of 0 frees ``buffer`` and gives ``None``.
        """
        if size == 0:
            self.free(buffer)
            return None
        new_buffer = self.malloc(size)
        if buffer is not None:
            kept = min(size, len(buffer))
            new_buffer[:kept] = buffer[:kept]
        self.free(buffer)
        return new_buffer

    def free(self, obj: Any) -> None:
        """Release ``obj``; ``None`` is ignored.

        Raises :class:`DoubleFreeError` when ``obj`` is not tracked.
        """
        if obj is None:
            return
        if not self.remove(obj):
            raise DoubleFreeError()

    def getcwd(self) -> str:
        """The current working directory, tracked."""
        try:
            path = os.getcwd()
        except OSError:
            error_handler("getcwd failed", 1)
        return self.add(path)

    def strdup(self, text: str) -> str:
        """A tracked copy of ``text``."""
        return self.add(str(text))

    def strjoin(self, first: str, second: str) -> str:
        """Tracked concatenation of two strings."""
        return self.add(strings.strjoin(first, second))

    def substr(self, text: str, start: int, length: int) -> str:
        """Tracked slice of at most ``length`` characters from ``start``."""
        return self.add(strings.substr(text, start, length))

    def __len__(self) -> int:
        return sum(count for _, count in self._tracked.values())

    def __contains__(self, obj: Any) -> bool:
        entry = self._tracked.get(id(obj))
        return entry is not None and entry[0] is obj

    def __iter__(self) -> Iterator[Any]:
        return iter([obj for obj, _ in self._tracked.values()])

    def __enter__(self) -> "GarbageCollector":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.empty()


_HOLDER = GarbageCollector()


def garbage_holder() -> GarbageCollector:
    """The collector shared by the whole shell."""
    return _HOLDER