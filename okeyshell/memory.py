"""Byte-buffer helpers: fill, copy, move, search, compare and allocate.

Buffers are ``bytearray`` objects, or anything else that supports slice
assignment of bytes. Values written into a buffer are truncated to one
byte, as an unsigned char would be.
"""

from __future__ import annotations

from collections.abc import Sequence


def _check_count(buffer: Sequence[int], count: int, what: str = "buffer") -> None:
    if count < 0:
        raise ValueError(f"count must not be negative, got {count}")
    if count > len(buffer):
        raise IndexError(f"count {count} exceeds {what} length {len(buffer)}")


def memset(buffer: bytearray, value: int, length: int) -> bytearray:
    """Fill the first ``length`` bytes of ``buffer`` with ``value``."""
    _check_count(buffer, length)
    buffer[:length] = bytes([value & 0xFF]) * length
    return buffer


def bzero(buffer: bytearray, length: int) -> bytearray:
    """Set the first ``length`` bytes of ``buffer`` to zero."""
    return memset(buffer, 0, length)


def memcpy(dest: bytearray, src: Sequence[int], count: int) -> bytearray:
    """Copy ``count`` bytes from ``src`` to the start of ``dest``."""
    _check_count(dest, count, "destination")
    _check_count(src, count, "source")
    dest[:count] = bytes(src[:count])
    return dest


def memmove(buffer: bytearray, dest_offset: int, src_offset: int, count: int) -> bytearray:
    """Move ``count`` bytes inside ``buffer``; the regions may overlap."""
    if dest_offset < 0 or src_offset < 0:
        raise ValueError("offsets must not be negative")
    if count < 0:
        raise ValueError(f"count must not be negative, got {count}")
    end = max(dest_offset, src_offset) + count
    if end > len(buffer):
        raise IndexError(f"range ends at {end}, beyond buffer length {len(buffer)}")
    buffer[dest_offset : dest_offset + count] = bytes(buffer[src_offset : src_offset + count])
    return buffer


def memchr(buffer: Sequence[int], value: int, count: int) -> int | None:
    """Index of the first byte equal to ``value`` among the first ``count``."""
    _check_count(buffer, count)
    target = value & 0xFF
    for index, byte in enumerate(buffer[:count]):
        if byte == target:
            return index
    return None


def memcmp(first: Sequence[int], second: Sequence[int], count: int) -> int:
    """Compare ``count`` bytes; the difference of the first unequal pair, or 0."""
    _check_count(first, count, "first buffer")
    _check_count(second, count, "second buffer")
    for a, b in zip(first[:count], second[:count]):
        if a != b:
            return a - b
    return 0


def calloc(count: int, size: int) -> bytearray:
    """A zero-filled buffer of ``count * size`` bytes."""
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    return bytearray(count * size)