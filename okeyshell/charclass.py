"""ASCII character classification and case conversion.

Every function accepts either a one-character string or an integer code
point. Predicates return ``bool``. The case converters return a value of
the same kind they were given.
"""

from __future__ import annotations

from typing import Union

CharLike = Union[str, int]


def _code(ch: CharLike) -> int:
    if isinstance(ch, str):
        if len(ch) != 1:
            raise ValueError(f"expected a single character, got {ch!r}")
        return ord(ch)
    if isinstance(ch, bool) or not isinstance(ch, int):
        raise TypeError(f"expected a character or an integer, got {type(ch).__name__}")
    return ch


def is_alpha(ch: CharLike) -> bool:
    """True for ASCII letters A-Z and a-z."""
    code = _code(ch)
    return 65 <= code <= 90 or 97 <= code <= 122


def is_digit(ch: CharLike) -> bool:
    """True for ASCII digits 0-9."""
    return 48 <= _code(ch) <= 57


def is_alnum(ch: CharLike) -> bool:
    """True for ASCII letters and digits."""
    return is_alpha(ch) or is_digit(ch)


def is_ascii(ch: CharLike) -> bool:
    """True for code points 0 through 127."""
    return 0 <= _code(ch) <= 127


def is_print(ch: CharLike) -> bool:
    """True for printable ASCII, space through tilde."""
    return 32 <= _code(ch) <= 126


def to_upper(ch: CharLike) -> CharLike:
    """Map a lowercase ASCII letter to uppercase; leave anything else."""
    code = _code(ch)
    if 97 <= code <= 122:
        code -= 32
    return chr(code) if isinstance(ch, str) else code


def to_lower(ch: CharLike) -> CharLike:
    """Map an uppercase ASCII letter to lowercase; leave anything else."""
    code = _code(ch)
    if 65 <= code <= 90:
        code += 32
    return chr(code) if isinstance(ch, str) else code