"""Reading a file descriptor or stream one line at a time."""

from __future__ import annotations

import os
from typing import Dict, Iterator, Optional, Union

__all__ = ["BUFFER_SIZE", "LineReader", "get_next_line"]

BUFFER_SIZE = 42

Line = Union[str, bytes]


class LineReader:
    """Reads lines, newline included, from a file descriptor or a stream.

    ``source`` is either an integer file descriptor, read with :func:`os.read`,
    or an object with a ``read(size)`` method returning ``str`` or ``bytes``.
    Data is read ``buffer_size`` units at a time and kept until a whole line
    is available. The last line may lack a newline.
    """

    def __init__(self, source, buffer_size: int = BUFFER_SIZE) -> None:
        if buffer_size < 1:
            raise ValueError("buffer size must be at least 1")
        if isinstance(source, int) and source < 0:
            raise ValueError("file descriptor must not be negative")
        self._source = source
        self._buffer_size = buffer_size
        self._stash: Optional[Line] = None

    @property
    def pending(self) -> bool:
        """True while read data is waiting to be returned."""
        return bool(self._stash)

    def _read_chunk(self) -> Line:
        if isinstance(self._source, int):
            return os.read(self._source, self._buffer_size)
        return self._source.read(self._buffer_size)

    @staticmethod
    def _newline(data: Line) -> Line:
        return "\n" if isinstance(data, str) else b"\n"

    def _fill(self) -> None:
        while True:
            chunk = self._read_chunk()
            if not chunk:
                return
            self._stash = chunk if self._stash is None else self._stash + chunk
            if self._newline(chunk) in chunk:
                return

    def read_line(self) -> Optional[Line]:
        """The next line, or None once the input is exhausted.

        A read error discards any buffered data and is raised.
        """
        stash = self._stash
        if stash is None or self._newline(stash) not in stash:
            try:
                self._fill()
            except OSError:
                self._stash = None
                raise
        stash = self._stash
        if not stash:
            self._stash = None
            return None
        index = stash.find(self._newline(stash))
        end = len(stash) if index < 0 else index + 1
        line, rest = stash[:end], stash[end:]
        self._stash = rest or None
        return line

    def __iter__(self) -> Iterator[Line]:
        while True:
            line = self.read_line()
            if line is None:
                return
            yield line


_readers: Dict[int, LineReader] = {}


def get_next_line(fd: int) -> Optional[bytes]:
    """The next line read from file descriptor ``fd``, or None at its end.

    Unread data is kept between calls until the descriptor is exhausted.
    """
    if fd < 0:
        raise ValueError("file descriptor must not be negative")
    reader = _readers.get(fd)
    if reader is None:
        reader = LineReader(fd)
        _readers[fd] = reader
    try:
        line = reader.read_line()
    except OSError:
        _readers.pop(fd, None)
        raise
    if line is None or not reader.pending:
        _readers.pop(fd, None)
    return line