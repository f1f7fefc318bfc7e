"""Helpers for lists of strings.

A list is read up to its first ``None``, which plays the part of an end
marker.
"""

from __future__ import annotations

import sys
from itertools import takewhile
from typing import List, Optional, Sequence, TextIO

__all__ = ["arrlen", "matrixdup", "append_str", "print_matrix"]


def _items(arr: Optional[Sequence[Optional[str]]]) -> List[str]:
    if arr is None:
        return []
    return list(takewhile(lambda item: item is not None, arr))


def arrlen(arr: Optional[Sequence[Optional[str]]]) -> int:
    """Number of entries before the first None; 0 for None."""
    return len(_items(arr))


def matrixdup(arr: Optional[Sequence[Optional[str]]]) -> List[str]:
    """A new list holding the entries before the first None."""
    return _items(arr)


def append_str(arr: Optional[Sequence[Optional[str]]], s: str) -> List[str]:
    """A new list of the entries of ``arr`` followed by ``s``."""
    if not isinstance(s, str):
        raise TypeError("expected a string to append")
    return [*_items(arr), s]


def print_matrix(
    arr: Optional[Sequence[Optional[str]]], stream: Optional[TextIO] = None
) -> None:
    """Write each entry on its own line; None writes nothing."""
    out = stream or sys.stdout
    for item in _items(arr):
        out.write(f"{item}\n")