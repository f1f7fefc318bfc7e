"""Formatted output with a small set of conversions.

Supported conversions are ``%c``, ``%s``, ``%p``, ``%d``, ``%i``, ``%u``,
``%x``, ``%X`` and ``%%``. No flags, widths or precisions are understood.
Integers are reduced to the width of their C counterparts: ``%d``/``%i``
wrap as 32-bit signed, ``%u``/``%x``/``%X`` as 32-bit unsigned and ``%p``
as 64-bit unsigned.
"""

from __future__ import annotations

import operator
import sys
from typing import Any, Iterator, Optional, TextIO

__all__ = ["FormatError", "sprintf", "printf"]


class FormatError(ValueError):
    """Raised for an unknown conversion, a lone trailing ``%`` or a missing argument."""


def _wrap_int32(value: int) -> int:
    return (value + 2**31) % 2**32 - 2**31


def _next_arg(args: Iterator[Any], spec: str) -> Any:
    try:
        return next(args)
    except StopIteration:
        raise FormatError(f"missing argument for %{spec}") from None


def _as_int(value: Any, spec: str) -> int:
    try:
        return operator.index(value)
    except TypeError:
        raise TypeError(f"%{spec} needs an integer, got {type(value).__name__}") from None


def _convert_char(value: Any) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise TypeError("%c needs a single character")
        return value
    return chr(_as_int(value, "c") % 256)


def _convert_str(value: Any) -> str:
    if value is None:
        return "(null)"
    if not isinstance(value, str):
        raise TypeError(f"%s needs a string, got {type(value).__name__}")
    return value


def _convert_ptr(value: Any) -> str:
    if value is None:
        address = 0
    elif isinstance(value, int):
        address = value
    else:
        address = id(value)
    return "0x" + format(address % 2**64, "x")


def _convert(spec: str, args: Iterator[Any]) -> str:
    if spec == "%":
        return "%"
    if spec == "c":
        return _convert_char(_next_arg(args, spec))
    if spec == "s":
        return _convert_str(_next_arg(args, spec))
    if spec == "p":
        return _convert_ptr(_next_arg(args, spec))
    if spec in ("d", "i"):
        return str(_wrap_int32(_as_int(_next_arg(args, spec), spec)))
    if spec == "u":
        return str(_as_int(_next_arg(args, spec), spec) % 2**32)
    if spec in ("x", "X"):
        return format(_as_int(_next_arg(args, spec), spec) % 2**32, spec)
    raise FormatError(f"unknown conversion %{spec}")


def sprintf(fmt: str, *args: Any) -> str:
    """Return ``fmt`` with its conversions replaced by the formatted ``args``.

    Arguments beyond those the format uses are ignored.
    """
    if not isinstance(fmt, str):
        raise TypeError("format must be a string")
    remaining = iter(args)
    chars = iter(fmt)
    pieces = []
    for ch in chars:
        if ch != "%":
            pieces.append(ch)
            continue
        spec = next(chars, None)
        if spec is None:
            raise FormatError("format ends with a lone %")
        pieces.append(_convert(spec, remaining))
    return "".join(pieces)


def printf(fmt: str, *args: Any, stream: Optional[TextIO] = None) -> int:
    """Write the formatted text to ``stream`` (standard output by default).

    Returns the number of characters written.
    """
    text = sprintf(fmt, *args)
    (stream or sys.stdout).write(text)
    return len(text)