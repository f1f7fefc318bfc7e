"""Byte-buffer primitives: filling, copying, searching and bounded string copies.

Destination buffers are mutable byte sequences (``bytearray`` or a writable
``memoryview``). String-style functions treat a buffer as holding a
NUL-terminated byte string; sources may be any bytes-like object and are
read up to their first NUL byte.
"""

from __future__ import annotations

from typing import Optional, Union

Buffer = Union[bytearray, memoryview]
ByteSource = Union[bytes, bytearray, memoryview]

__all__ = [
    "memset",
    "bzero",
    "memcpy",
    "memmove",
    "memchr",
    "memcmp",
    "calloc",
    "strlcpy",
    "strlcat",
    "strcpy",
]


def _check_size(n: int, *buffers: ByteSource) -> None:
    if n < 0:
        raise ValueError("size must not be negative")
    for buf in buffers:
        if n > len(buf):
            raise ValueError(f"size {n} exceeds buffer length {len(buf)}")


def _c_string(src: ByteSource) -> bytes:
    """The bytes of ``src`` before its first NUL byte."""
    data = bytes(src)
    nul = data.find(0)
    return data if nul < 0 else data[:nul]


def memset(buf: Buffer, c: int, n: int) -> Buffer:
    """Set the first ``n`` bytes of ``buf`` to ``c`` truncated to a byte."""
    _check_size(n, buf)
    buf[:n] = bytes([c & 0xFF]) * n
    return buf


def bzero(buf: Buffer, n: int) -> None:
    """Set the first ``n`` bytes of ``buf`` to zero."""
    memset(buf, 0, n)


def memcpy(dst: Buffer, src: ByteSource, n: int) -> Buffer:
    """Copy the first ``n`` bytes of ``src`` into ``dst``."""
    _check_size(n, dst, src)
    dst[:n] = bytes(src[:n])
    return dst


def memmove(dst: Buffer, src: ByteSource, n: int) -> Buffer:
    """Copy ``n`` bytes from ``src`` to ``dst``; the two may overlap."""
    _check_size(n, dst, src)
    dst[:n] = bytes(src[:n])
    return dst


def memchr(data: ByteSource, c: int, n: int) -> Optional[int]:
    """Index of the first byte equal to ``c`` among the first ``n``, or None."""
    _check_size(n, data)
    index = bytes(data[:n]).find(c & 0xFF)
    return None if index < 0 else index


def memcmp(a: ByteSource, b: ByteSource, n: int) -> int:
    """Difference of the first differing byte within ``n`` bytes, or 0."""
    _check_size(n, a, b)
    for x, y in zip(bytes(a[:n]), bytes(b[:n])):
        if x != y:
            return x - y
    return 0


def calloc(count: int, size: int) -> bytearray:
    """A zero-filled buffer of ``count * size`` bytes."""
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    return bytearray(count * size)


def strlcpy(dst: Buffer, src: ByteSource, size: int) -> int:
    """Copy the string ``src`` into ``dst``, writing at most ``size`` bytes.

    The copy is always NUL-terminated when ``size`` is not zero. Returns the
    length of ``src``, so a result ``>= size`` means truncation.
    """
    _check_size(size, dst)
    text = _c_string(src)
    if size:
        count = min(len(text), size - 1)
        dst[:count] = text[:count]
        dst[count] = 0
    return len(text)


def strlcat(dst: Buffer, src: ByteSource, size: int) -> int:
    """Append the string ``src`` to the string in ``dst``, within ``size`` bytes.

    Returns the length the combined string would have had; if ``dst`` holds no
    NUL within ``size`` bytes, that length counts ``size`` for ``dst``.
    """
    _check_size(size, dst)
    head = bytes(dst[:size])
    nul = head.find(0)
    start = size if nul < 0 else nul
    text = _c_string(src)
    count = min(len(text), max(size - start - 1, 0))
    dst[start:start + count] = text[:count]
    if start != size:
        dst[start + count] = 0
    return start + len(text)


def strcpy(dst: Buffer, src: ByteSource) -> Buffer:
    """Copy the string ``src`` and its terminating NUL into ``dst``."""
    text = _c_string(src)
    if len(text) + 1 > len(dst):
        raise ValueError(
            f"destination of {len(dst)} bytes cannot hold {len(text) + 1} bytes"
        )
    dst[:len(text)] = text
    dst[len(text)] = 0
    return dst