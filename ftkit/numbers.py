"""Conversions between decimal text and integers."""

from __future__ import annotations

__all__ = ["atoi", "itoa", "count_digits", "is_number"]

_WHITESPACE = frozenset(" \t\n\v\f\r")
_DIGITS = "0123456789"


def _wrap_int32(value: int) -> int:
    return (value + 2**31) % 2**32 - 2**31


def atoi(text: str) -> int:
    """Parse a leading decimal integer from ``text``.

    Leading whitespace is skipped, one optional sign is accepted, and parsing
    stops at the first non-digit. A second sign yields 0, as does text without
    digits. The result wraps around like a 32-bit signed integer.
    """
    pos = 0
    length = len(text)
    while pos < length and text[pos] in _WHITESPACE:
        pos += 1
    sign = 1
    if pos < length and text[pos] in "+-":
        if text[pos] == "-":
            sign = -1
        pos += 1
    if pos < length and text[pos] in "+-":
        return 0
    value = 0
    while pos < length and text[pos] in _DIGITS:
        value = value * 10 + _DIGITS.index(text[pos])
        pos += 1
    return _wrap_int32(value * sign)


def count_digits(n: int) -> int:
    """Number of characters in the decimal form of ``n``, minus sign included."""
    digits = 1 if n < 0 else 0
    num = abs(n)
    while num > 9:
        num //= 10
        digits += 1
    return digits + 1


def itoa(n: int) -> str:
    """Decimal text of ``n``."""
    magnitude = abs(n)
    chars = []
    while True:
        magnitude, digit = divmod(magnitude, 10)
        chars.append(_DIGITS[digit])
        if not magnitude:
            break
    if n < 0:
        chars.append("-")
    return "".join(reversed(chars))


def is_number(text: str) -> bool:
    """True if ``text`` is an optional sign followed by one or more ASCII digits."""
    body = text[1:] if text[:1] in ("+", "-") else text
    return bool(body) and all(ch in _DIGITS for ch in body)