"""Spacing out operators so that a command line splits cleanly into words.

``&&`` and ``||`` and each of the characters ``( ) < > |`` get a space on
either side unless a plain space is already there. Only the space
character counts as separation here; tabs do not.
"""

from __future__ import annotations

from collections.abc import Iterator

SPECIAL_TOKENS = "()<>|"
_OPERATORS = ("&&", "||")


def _scan(line: str) -> Iterator[tuple[str, bool, bool]]:
    """Yield pieces of ``line`` with whether a space goes before and after each."""
    index = 0
    while index < len(line):
        if line.startswith(_OPERATORS, index):
            width = 2
        elif line[index] in SPECIAL_TOKENS:
            width = 1
        else:
            yield line[index], False, False
            index += 1
            continue
        end = index + width
        before = index > 0 and line[index - 1] != " "
        after = end < len(line) and line[end] != " "
        yield line[index:end], before, after
        index = end


def transformed_length(line: str) -> int:
    """Length of ``line`` once its operators are spaced out."""
    return sum(len(piece) + before + after for piece, before, after in _scan(line))


def transform_line(line: str) -> str:
    """``line`` with a space put around every operator that lacks one."""
    parts = []
    for piece, before, after in _scan(line):
        if before:
            parts.append(" ")
        parts.append(piece)
        if after:
            parts.append(" ")
    return "".join(parts)