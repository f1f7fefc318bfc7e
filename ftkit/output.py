"""Writing characters, strings and integers to text streams."""

from __future__ import annotations

import sys
from typing import NoReturn, Optional, TextIO, Union

from ftkit.numbers import itoa

__all__ = ["put_char", "put_str", "put_endl", "put_nbr", "print_error"]


def put_char(c: Union[str, int], stream: Optional[TextIO] = None) -> None:
    """Write one character, given as a string or a code point."""
    if isinstance(c, bool):
        raise TypeError("expected a character or an integer code point")
    if isinstance(c, int):
        c = chr(c)
    if not isinstance(c, str) or len(c) != 1:
        raise TypeError("expected a single character")
    (stream or sys.stdout).write(c)


def put_str(s: str, stream: Optional[TextIO] = None) -> None:
    """Write a string."""
    if not isinstance(s, str):
        raise TypeError("expected a string")
    (stream or sys.stdout).write(s)


def put_endl(s: Optional[str], stream: Optional[TextIO] = None) -> None:
    """Write a string followed by a newline; None writes nothing."""
    if s is None:
        return
    out = stream or sys.stdout
    put_str(s, out)
    out.write("\n")


def put_nbr(n: int, stream: Optional[TextIO] = None) -> None:
    """Write the decimal form of an integer."""
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError("expected an integer")
    (stream or sys.stdout).write(itoa(n))


def print_error(msg: str, stream: Optional[TextIO] = None) -> NoReturn:
    """Write ``msg`` to standard error (or ``stream``) and exit with status 1."""
    put_str(msg, stream or sys.stderr)
    raise SystemExit(1)