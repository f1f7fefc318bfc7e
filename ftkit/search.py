"""Searching and comparing strings, treated as NUL-terminated text.

A string is read up to its first ``"\\0"``. Positions are returned as
indices into the string, with ``None`` where nothing is found.
"""

from __future__ import annotations

from itertools import islice, zip_longest
from typing import Optional, Union

CharLike = Union[str, int]

__all__ = [
    "strchr",
    "strrchr",
    "strnstr",
    "strncmp",
    "strcmp",
    "strndup",
    "count_char",
]


def _c_str(s: str) -> str:
    """The part of ``s`` before its first NUL character."""
    nul = s.find("\0")
    return s if nul < 0 else s[:nul]


def _code(c: CharLike) -> int:
    if isinstance(c, bool):
        raise TypeError("expected a character or an integer code point")
    if isinstance(c, int):
        return c % 256
    if isinstance(c, str):
        if len(c) != 1:
            raise TypeError(f"expected a single character, got {len(c)} characters")
        return ord(c)
    raise TypeError("expected a character or an integer code point")


def _check_count(n: int) -> None:
    if n < 0:
        raise ValueError("count must not be negative")


def strchr(s: str, c: CharLike) -> Optional[int]:
    """Index of the first ``c`` in ``s``, or None.

    Integer code points are taken modulo 256. Searching for NUL finds the
    terminator, at index ``len(s)``.
    """
    text = _c_str(s)
    code = _code(c)
    if code == 0:
        return len(text)
    index = text.find(chr(code))
    return None if index < 0 else index


def strrchr(s: str, c: CharLike) -> Optional[int]:
    """Index of the last ``c`` in ``s``, or None; NUL finds the terminator."""
    text = _c_str(s)
    code = _code(c)
    if code == 0:
        return len(text)
    index = text.rfind(chr(code))
    return None if index < 0 else index


def strnstr(haystack: str, needle: str, n: int) -> Optional[int]:
    """Index of the first ``needle`` lying wholly within the first ``n`` characters.

    An empty needle is found at 0; an empty haystack holds nothing else.
    """
    _check_count(n)
    big = _c_str(haystack)
    little = _c_str(needle)
    if not little:
        return 0
    if not big:
        return None
    index = big.find(little, 0, min(n, len(big)))
    return None if index < 0 else index


def _compare(s1: str, s2: str, n: Optional[int]) -> int:
    pairs = zip_longest(_c_str(s1), _c_str(s2), fillvalue="")
    for x, y in islice(pairs, n):
        cx = ord(x) if x else 0
        cy = ord(y) if y else 0
        if cx != cy or cx == 0:
            return cx - cy
    return 0


def strncmp(s1: str, s2: str, n: int) -> int:
    """Compare at most ``n`` characters.

    Returns the difference of the first differing code points (a missing
    character counts as 0), or 0 when they agree.
    """
    _check_count(n)
    if n == 0:
        return 0
    return _compare(s1, s2, n)


def strcmp(s1: Optional[str], s2: Optional[str]) -> int:
    """Compare two strings as :func:`strncmp` does, without a bound.

    If either is None the result is -1.
    """
    if s1 is None or s2 is None:
        return -1
    return _compare(s1, s2, None)


def strndup(s: Optional[str], n: int) -> Optional[str]:
    """A copy of at most the first ``n`` characters of ``s``; None stays None."""
    _check_count(n)
    if s is None:
        return None
    return _c_str(s)[:n]


def count_char(s: Optional[str], c: str) -> int:
    """Number of occurrences of the character ``c`` in ``s``; 0 for None."""
    if s is None:
        return 0
    if not isinstance(c, str) or len(c) != 1:
        raise TypeError("expected a single character")
    return _c_str(s).count(c)