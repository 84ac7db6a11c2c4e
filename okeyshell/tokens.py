"""Token kinds and the splitting of a command line into classified words."""

from __future__ import annotations

import re
from collections.abc import Iterable
from enum import IntEnum


class TokenType(IntEnum):
    """The kind of one word of a command line."""

    EMPTY = 0
    AND = 1
    OR = 2
    PIPE = 3
    PAREN_OPEN = 4
    PAREN_CLOSE = 5
    REDIRECT_IN = 6
    REDIRECT_OUT = 7
    COMMAND = 8


_OPERATORS = {
    "&&": TokenType.AND,
    "||": TokenType.OR,
    "|": TokenType.PIPE,
    "(": TokenType.PAREN_OPEN,
    ")": TokenType.PAREN_CLOSE,
    "<": TokenType.REDIRECT_IN,
    ">": TokenType.REDIRECT_OUT,
}

_WHITESPACE = re.compile(r"[ \t\n\v\f\r]+")


def token_type(word: str) -> TokenType:
    """The kind of ``word``; anything that is not an operator is a command word."""
    return _OPERATORS.get(word, TokenType.COMMAND)


def tokenize(words: Iterable[str]) -> list[TokenType]:
    """Classify every word, keeping their order."""
    return [token_type(word) for word in words]


def split_words(line: str) -> list[str]:
    """Split ``line`` on runs of space, tab, newline, vertical tab, form feed and CR."""
    return [word for word in _WHITESPACE.split(line) if word]