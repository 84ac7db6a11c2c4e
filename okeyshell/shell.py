"""The interactive shell: read lines, parse them and show their syntax trees."""

from __future__ import annotations

import os
import sys
from collections.abc import Iterable, Mapping
from typing import TextIO

from .collector import GarbageCollector
from .env import env_init
from .errors import ShellError, error_handler, format_error
from .printer import debug_ast
from .syntax_tree import AstNode, build_ast
from .tokens import split_words, tokenize
from .transform import transform_line

HISTORY_FILE_NAME = "/.minishell_history"
GOODBYE = "Cleand up and Goodbye!"

_BANNER_LINES = (
    "┌──────────────────────────────────────────────────────┐",
    "│    ____  __ __                  _____ __         ____│",
    "│   / __ \\/ //_/__  ____ ___  __ / ___// /_  ___  / / /│",
    "│  / / / / ,< / _ \\/ __ `/ / / / \\__ \\/ __ \\/ _ \\/ / / │",
    "│ / /_/ / /| /  __/ /_/ / /_/ / ___/ / / / /  __/ / /  │",
    "│ \\____/_/ |_\\___/\\__,_/\\__, / /____/_/ /_/\\___/_/_/   │",
    "│                      /____/                          │",
    "└──────────────────────────────────────────────────────┘",
)


def welcome_banner() -> str:
    """The coloured welcome banner."""
    return "\033[1;36m" + "".join(line + "\n" for line in _BANNER_LINES) + "\033[0m\n"


def print_welcome(file: TextIO | None = None) -> None:
    """Write the welcome banner."""
    (sys.stdout if file is None else file).write(welcome_banner())


class Shell:
    """One shell session with its working directory, environment and history."""

    def __init__(
        self,
        environ: Mapping[str, str] | Iterable[str] | None = None,
        cwd: str | None = None,
        out: TextIO | None = None,
    ) -> None:
        self.out = sys.stdout if out is None else out
        self.collector = GarbageCollector()
        self.pwd = self.collector.getcwd() if cwd is None else self.collector.strdup(cwd)
        self.hist_file = self.collector.strjoin(self.pwd, HISTORY_FILE_NAME)
        self.env_list = env_init(os.environ if environ is None else environ)
        if len(self.env_list) == 0:
            error_handler("ft_strdup_array failed", 1)
        self.error = 0
        self.exit_status = 0
        self.ast: AstNode | None = None
        self.history: list[str] = []
        self._closed = False

    def prompt(self) -> str:
        """The prompt shown before each line."""
        return f"{self.pwd} > "

    def handle_line(self, line: str) -> AstNode | None:
        """Parse one line, show its tree and record it in the history.

        Empty lines are ignored. Returns the tree, or ``None``.
        """
        if not line:
            return None
        mod_line = transform_line(line)
        self.out.write(f"mod_line: {mod_line}\n")
        words = split_words(mod_line)
        self.ast = build_ast(tokenize(words), words)
        tree = self.ast
        if tree is not None:
            self.out.write(f"\nCommand entered: {line}\n")
            debug_ast(tree, self.out)
            self.ast = None
        self.history.append(line)
        return tree

    def run(self, lines: Iterable[str] | None = None) -> int:
        """Handle ``lines``, or prompt on the terminal until end of input.

        Cleans up afterwards and returns the exit status.
        """
        if lines is None:
            while True:
                try:
                    line = input(self.prompt())
                except EOFError:
                    break
                self.handle_line(line)
        else:
            for line in lines:
                self.handle_line(line.removesuffix("\n"))
        self.cleanup()
        return self.exit_status

    def cleanup(self) -> None:
        """Release the environment and everything tracked, then say goodbye."""
        if self._closed:
            return
        self.env_list.clear()
        self.collector.free(self.hist_file)
        self.collector.free(self.pwd)
        self.collector.empty()
        self.out.write(GOODBYE + "\n")
        self._closed = True


def main(argv: list[str] | None = None) -> int:
    """Start an interactive session on the terminal."""
    print_welcome()
    try:
        return Shell().run()
    except ShellError as exc:
        sys.stderr.write(format_error(exc.message) + "\n")
        return exc.status