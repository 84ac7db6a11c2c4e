"""Text rendering of syntax trees for debugging."""

from __future__ import annotations

import sys
from collections.abc import Iterator
from typing import TextIO

from .syntax_tree import AstNode
from .tokens import TokenType

_TOKEN_NAMES = {
    TokenType.AND: "AND",
    TokenType.OR: "OR",
    TokenType.PIPE: "PIPE",
    TokenType.PAREN_OPEN: "(",
    TokenType.PAREN_CLOSE: ")",
    TokenType.REDIRECT_IN: "<",
    TokenType.REDIRECT_OUT: ">",
    TokenType.COMMAND: "CMD",
}

_HEADER = "\n=== AST DEBUG VIEW ===\n"
_EMPTY_TREE = "(empty tree)\n"
_FOOTER = "====================\n\n"


def _target(file: TextIO | None) -> TextIO:
    return sys.stdout if file is None else file


def token_name(token: int) -> str:
    """The display name of a token kind.

    Raises :class:`ValueError` for a kind that has no name.
    """
    try:
        return _TOKEN_NAMES[TokenType(token)]
    except (KeyError, ValueError):
        raise ValueError(f"token {token!r} has no display name") from None


def _lines(node: AstNode, level: int) -> Iterator[str]:
    line = " " * (level * 4) + "├── " + token_name(node.type)
    if node.type == TokenType.COMMAND and node.args is not None:
        line += " [ " + " ".join(node.args) + " ]"
    yield line + "\n"
    for child in (node.left, node.right):
        if child is not None:
            yield from _lines(child, level + 1)


def format_ast(node: AstNode | None, level: int = 0) -> str:
    """The tree below ``node``, one node per line, indented four spaces a level."""
    if node is None:
        return ""
    return "".join(_lines(node, level))


def debug_view(root: AstNode | None) -> str:
    """The framed debug view of a whole tree."""
    body = _EMPTY_TREE if root is None else format_ast(root, 0)
    return _HEADER + body + _FOOTER


def print_ast(node: AstNode | None, level: int = 0, file: TextIO | None = None) -> None:
    """Write :func:`format_ast` of ``node`` to ``file``."""
    _target(file).write(format_ast(node, level))


def debug_ast(root: AstNode | None, file: TextIO | None = None) -> None:
    """Write :func:`debug_view` of ``root`` to ``file``."""
    _target(file).write(debug_view(root))


def demo_ast_construction(file: TextIO | None = None) -> None:
    """Write the debug views of two hand-built trees."""
    stream = _target(file)
    stream.write("Test 1: Simple command 'ls -l'\n")
    command = AstNode(TokenType.COMMAND, args=["ls", "-l"])
    debug_ast(command, stream)
    stream.write("Test 2: Pipe 'ls -l | grep test'\n")
    pipe = AstNode(
        TokenType.PIPE,
        left=AstNode(TokenType.COMMAND, args=["ls", "-l"]),
        right=AstNode(TokenType.COMMAND, args=["grep", "test"]),
    )
    debug_ast(pipe, stream)