"""Building new strings from old ones: slicing, joining, trimming, splitting, mapping."""

from __future__ import annotations

from typing import Callable, List, MutableSequence, Optional

__all__ = ["substr", "strjoin", "strtrim", "split", "strmapi", "striteri"]


def _check_char(value: object) -> str:
    if not isinstance(value, str) or len(value) != 1:
        raise TypeError("mapping function must return a single character")
    return value


def substr(s: Optional[str], start: int, length: int) -> Optional[str]:
    """At most ``length`` characters of ``s`` from index ``start``.

    A start at or past the end gives an empty string; None stays None.
    """
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    if s is None:
        return None
    if start >= len(s):
        return ""
    return s[start:start + length]


def strjoin(s1: Optional[str], s2: Optional[str]) -> str:
    """``s1`` followed by ``s2``; None counts as an empty string."""
    return (s1 or "") + (s2 or "")


def strtrim(s: Optional[str], charset: Optional[str]) -> Optional[str]:
    """``s`` without the characters of ``charset`` at either end.

    Returns None if either argument is None.
    """
    if s is None or charset is None:
        return None
    return s.strip(charset)


def split(s: Optional[str], sep: str) -> Optional[List[str]]:
    """The non-empty parts of ``s`` between occurrences of the character ``sep``."""
    if not isinstance(sep, str) or len(sep) != 1:
        raise TypeError("separator must be a single character")
    if s is None:
        return None
    return [part for part in s.split(sep) if part]


def strmapi(
    s: Optional[str], f: Optional[Callable[[int, str], str]]
) -> Optional[str]:
    """A new string whose character at each index ``i`` is ``f(i, s[i])``.

    Returns None if either argument is None.
    """
    if s is None or f is None:
        return None
    return "".join(_check_char(f(index, ch)) for index, ch in enumerate(s))


def striteri(
    chars: Optional[MutableSequence[str]], f: Optional[Callable[[int, str], str]]
) -> None:
    """Replace each element of ``chars`` in place with ``f(index, element)``.

    Does nothing if either argument is None.
    """
    if chars is None or f is None:
        return
    for index, ch in enumerate(list(chars)):
        chars[index] = _check_char(f(index, ch))