"""Building a syntax tree of commands, pipes, logical operators and groups.

Grammar, from loosest to tightest binding::

    logical  := pipe (("&&" | "||") pipe)*
    pipe     := group ("|" group)*
    group    := "(" logical ")" | command
    command  := WORD+

Operators associate to the left. A line that does not fit the grammar
gives no tree. Parsing stops at the first token that cannot continue the
expression; whatever follows it is ignored.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from .tokens import TokenType, split_words, tokenize
from .transform import transform_line


@dataclass
class AstNode:
    """One node: a command with its words, or an operator with two operands."""

    type: TokenType
    left: AstNode | None = None
    right: AstNode | None = None
    args: list[str] | None = None


class Parser:
    """Recursive-descent parser over parallel lists of tokens and words."""

    def __init__(self, tokens: Iterable[int], words: Sequence[str]) -> None:
        self.tokens = [TokenType(token) for token in tokens]
        self.words = list(words)
        if len(self.tokens) != len(self.words):
            raise ValueError(
                f"{len(self.tokens)} tokens do not match {len(self.words)} words"
            )
        self.position = 0

    @property
    def current(self) -> TokenType:
        """The token at the current position, EMPTY past the end."""
        if self.position < len(self.tokens):
            return self.tokens[self.position]
        return TokenType.EMPTY

    def parse_logical_ops(self) -> AstNode | None:
        """Parse pipelines joined by ``&&`` and ``||``."""
        left = self.parse_pipe()
        if left is None:
            return None
        while self.current in (TokenType.AND, TokenType.OR):
            node = AstNode(self.current, left=left)
            self.position += 1
            node.right = self.parse_pipe()
            if node.right is None:
                return None
            left = node
        return left

    def parse_pipe(self) -> AstNode | None:
        """Parse groups joined by ``|``."""
        left = self.parse_parentheses()
        if left is None:
            return None
        while self.current == TokenType.PIPE:
            node = AstNode(TokenType.PIPE, left=left)
            self.position += 1
            node.right = self.parse_parentheses()
            if node.right is None:
                return None
            left = node
        return left

    def parse_parentheses(self) -> AstNode | None:
        """Parse a parenthesised expression, or else a command."""
        if self.current != TokenType.PAREN_OPEN:
            return self.parse_command()
        self.position += 1
        node = self.parse_logical_ops()
        if node is None or self.current != TokenType.PAREN_CLOSE:
            return None
        self.position += 1
        return node

    def parse_command(self) -> AstNode | None:
        """Parse a run of command words into one command node."""
        if self.current != TokenType.COMMAND:
            return None
        start = self.position
        while self.current == TokenType.COMMAND:
            self.position += 1
        return AstNode(TokenType.COMMAND, args=self.words[start : self.position])


def build_ast(tokens: Iterable[int] | None, words: Sequence[str]) -> AstNode | None:
    """Parse classified words into a tree; ``None`` when they do not form one."""
    if tokens is None:
        return None
    return Parser(tokens, words).parse_logical_ops()


def parse_line(line: str) -> AstNode | None:
    """Space out operators in ``line``, split it into words and parse them."""
    words = split_words(transform_line(line))
    return build_ast(tokenize(words), words)