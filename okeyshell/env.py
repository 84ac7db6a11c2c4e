"""Parsing the process environment into an ordered list of entries."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass

from .linked_list import LinkedList


@dataclass
class EnvEntry:
    """One environment variable."""

    key: str
    value: str


def parse_env_entry(entry: str) -> EnvEntry:
    """Split ``KEY=VALUE`` at the first ``=``.

    Raises :class:`ValueError` when there is no ``=``.
    """
    key, sep, value = entry.partition("=")
    if not sep:
        raise ValueError(f"environment entry without '=': {entry!r}")
    return EnvEntry(key, value)


def env_init(envp: Iterable[str] | Mapping[str, str]) -> LinkedList:
    """A list of :class:`EnvEntry` in the order given.

    ``envp`` is either ``KEY=VALUE`` strings or a mapping of keys to values.
    """
    if isinstance(envp, Mapping):
        return LinkedList(EnvEntry(str(key), str(value)) for key, value in envp.items())
    return LinkedList(parse_env_entry(entry) for entry in envp)