"""Conversions between text and integers."""

from __future__ import annotations

from .charclass import is_digit

_WHITESPACE = " \t\n\v\f\r"


def _skip_sign(text: str) -> tuple[int, str]:
    text = text.lstrip(_WHITESPACE)
    sign = 1
    if text[:1] in ("+", "-"):
        if text[0] == "-":
            sign = -1
        text = text[1:]
    return sign, text


def atoi(text: str) -> int:
    """Parse a leading decimal integer, ignoring leading whitespace.

    Parsing stops at the first non-digit; text without digits gives 0.
    """
    sign, rest = _skip_sign(text)
    result = 0
    for ch in rest:
        if not is_digit(ch):
            break
        result = result * 10 + (ord(ch) - ord("0"))
    return sign * result


def _base_digit(ch: str, base: int) -> int | None:
    if is_digit(ch):
        return ord(ch) - ord("0")
    lowered = ch.lower()
    if "a" <= lowered < chr(ord("a") + base - 10) and ch.isascii():
        return ord(lowered) - ord("a") + 10
    return None


def atoi_base(text: str, base: int) -> int:
    """Parse a leading integer in ``base`` (2 to 36).

    An out-of-range base gives 0. Base 16 accepts an optional ``0x`` or
    ``0X`` prefix. Decimal digits are always taken as their face value,
    even when they are not valid in the base.
    """
    if base < 2 or base > 36:
        return 0
    sign, rest = _skip_sign(text)
    if base == 16 and rest[:2] in ("0x", "0X"):
        rest = rest[2:]
    result = 0
    for ch in rest:
        digit = _base_digit(ch, base)
        if digit is None:
            break
        result = result * base + digit
    return sign * result


def itoa(number: int) -> str:
    """Render an integer in decimal, with a leading minus when negative."""
    if isinstance(number, bool) or not isinstance(number, int):
        raise TypeError(f"expected an integer, got {type(number).__name__}")
    digits = []
    remaining = abs(number)
    while True:
        remaining, digit = divmod(remaining, 10)
        digits.append(chr(ord("0") + digit))
        if not remaining:
            break
    if number < 0:
        digits.append("-")
    return "".join(reversed(digits))