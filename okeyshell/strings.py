"""String searching, comparison, slicing and splitting helpers.

Search functions return an index rather than a pointer, and ``None``
when nothing is found. Comparisons return the difference of the first
differing code points, with the end of a string counting as code point 0.
"""

from __future__ import annotations

from collections.abc import Callable, MutableSequence

_END = "\0"


def _code_at(text: str, index: int) -> int:
    return ord(text[index]) if index < len(text) else 0


def str_chr(text: str, ch: str) -> int | None:
    """Index of the first ``ch`` in ``text``.

    Searching for the terminator ``"\\0"`` gives ``len(text)``.
    """
    if ch == _END:
        return len(text)
    index = text.find(ch)
    return None if index < 0 else index


def str_rchr(text: str, ch: str) -> int | None:
    """Index of the last ``ch`` in ``text``.

    Searching for the terminator ``"\\0"`` gives ``len(text)``.
    """
    if ch == _END:
        return len(text)
    index = text.rfind(ch)
    return None if index < 0 else index


def strncmp(first: str, second: str, limit: int) -> int:
    """Compare at most ``limit`` characters of two strings."""
    for index in range(limit):
        a = _code_at(first, index)
        b = _code_at(second, index)
        if a != b:
            return a - b
        if a == 0:
            break
    return 0


def strcmp(first: str, second: str) -> int:
    """Compare two strings in full."""
    return strncmp(first, second, max(len(first), len(second)) + 1)


def strnstr(haystack: str, needle: str, limit: int) -> int | None:
    """Index of ``needle`` lying wholly within the first ``limit`` characters.

    An empty needle is found at index 0.
    """
    if not needle:
        return 0
    for index in range(min(limit, len(haystack))):
        if index + len(needle) > limit:
            return None
        if haystack.startswith(needle, index):
            return index
    return None


def substr(text: str, start: int, length: int) -> str:
    """At most ``length`` characters of ``text`` from ``start``.

    A start past the end gives an empty string.
    """
    if start > len(text):
        return ""
    return text[start : start + length]


def strjoin(first: str, second: str) -> str:
    """Concatenate two strings."""
    return first + second


def strtrim(text: str, charset: str) -> str:
    """Remove characters in ``charset`` from both ends of ``text``."""
    return text.strip(charset)


def split(text: str, separator: str) -> list[str]:
    """Split on ``separator``, dropping empty pieces."""
    if len(separator) != 1:
        raise ValueError(f"expected a single separator character, got {separator!r}")
    return [word for word in text.split(separator) if word]


def count_words(text: str, separator: str) -> int:
    """Number of non-empty pieces between separators."""
    return len(split(text, separator))


def strmapi(text: str, func: Callable[[int, str], str]) -> str:
    """Build a new string from ``func(index, char)`` for every character."""
    return "".join(func(index, ch) for index, ch in enumerate(text))


def striteri(
    chars: MutableSequence[str], func: Callable[[int, MutableSequence[str]], None]
) -> None:
    """Call ``func(index, chars)`` for every position of ``chars``.

    ``func`` may change ``chars[index]`` in place.
    """
    index = 0
    while index < len(chars):
        func(index, chars)
        index += 1


def strlcpy(src: str, size: int) -> tuple[str, int]:
    """Copy ``src`` into a buffer of ``size`` slots, one kept for the terminator.

    Returns the copied text and the full length of ``src``, so truncation
    happened when the length is not less than ``size``.
    """
    if size <= 0:
        return "", len(src)
    return src[: size - 1], len(src)


def strlcat(dest: str, src: str, size: int) -> tuple[str, int]:
    """Append ``src`` to ``dest`` within a buffer of ``size`` slots.

    Returns the resulting text and the length the full result needs. When
    ``dest`` already fills the buffer, it is returned unchanged together
    with ``len(src) + size``.
    """
    if size <= len(dest):
        return dest, len(src) + size
    room = size - 1 - len(dest)
    return dest + src[:room], len(src) + len(dest)