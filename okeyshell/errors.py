"""Fatal shell errors and how they are reported."""

from __future__ import annotations

from typing import NoReturn

RED = "\033[0;31m"
GREEN = "\033[0;32m"
YELLOW = "\033[0;33m"
RESET = "\033[0m"

ERROR_PREFIX = "Error: "


class ShellError(Exception):
    """A fatal error carrying the exit status the shell should end with."""

    def __init__(self, message: str, status: int = 1) -> None:
        super().__init__(message)
        self.message = message
        self.status = status

    def __str__(self) -> str:
        return self.message


def format_error(message: str) -> str:
    """The line shown to the user for a fatal error."""
    return f"{ERROR_PREFIX}{message}"


def error_handler(message: str, status: int = 1) -> NoReturn:
    """Abort the current operation with a :class:`ShellError`."""
    raise ShellError(message, status)