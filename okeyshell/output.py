"""Writing characters, strings and numbers to a text stream."""

from __future__ import annotations

import sys
from typing import TextIO

from .numbers import itoa


def _target(file: TextIO | None) -> TextIO:
    return sys.stdout if file is None else file


def put_char(ch: str, file: TextIO | None = None) -> None:
    """Write one character."""
    if len(ch) != 1:
        raise ValueError(f"expected a single character, got {ch!r}")
    _target(file).write(ch)


def put_str(text: str, file: TextIO | None = None) -> None:
    """Write a string as it is."""
    _target(file).write(text)


def put_endl(text: str, file: TextIO | None = None) -> None:
    """Write a string followed by a newline."""
    stream = _target(file)
    stream.write(text)
    stream.write("\n")


def put_nbr(number: int, file: TextIO | None = None) -> None:
    """Write an integer in decimal."""
    _target(file).write(itoa(number))