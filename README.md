# ftkit

A small toolkit of helpers that follow classic C-library semantics, written
for Python data types: strings, `bytearray` buffers, lists and streams.

## Modules

- `ftkit.chars` – `is_alpha`, `is_digit`, `is_alnum`, `is_ascii`, `is_print`,
  `to_upper`, `to_lower`. Each takes a one-character string or an integer code
  point; only ASCII letters count as letters, and the case converters return
  the same type they were given.
- `ftkit.numbers` – `atoi` (skips leading whitespace, one optional sign, stops
  at the first non-digit, wraps like a 32-bit signed integer), `itoa`,
  `count_digits`, `is_number`.
- `ftkit.memory` – `memset`, `bzero`, `memcpy`, `memmove`, `memchr`, `memcmp`,
  `calloc`, `strlcpy`, `strlcat`, `strcpy` on `bytearray` or writable
  `memoryview` buffers. Sizes larger than a buffer raise `ValueError`.
- `ftkit.search` – `strchr`, `strrchr`, `strnstr`, `strncmp`, `strcmp`,
  `strndup`, `count_char`. Strings are read up to their first `"\0"`, and
  positions are returned as indices, or `None` when nothing is found.
- `ftkit.transform` – `substr`, `strjoin`, `strtrim`, `split`, `strmapi`,
  `striteri`.
- `ftkit.matrix` – `arrlen`, `matrixdup`, `append_str`, `print_matrix` for
  lists of strings, read up to their first `None`.
- `ftkit.output` – `put_char`, `put_str`, `put_endl`, `put_nbr` write to a text
  stream (standard output by default); `print_error` writes a message to
  standard error and exits with status 1.
- `ftkit.printf` – `sprintf` and `printf` with the conversions
  `%c %s %p %d %i %u %x %X %%`. An unknown conversion, a lone trailing `%` or a
  missing argument raises `FormatError`; `printf` returns the number of
  characters written.
- `ftkit.linked_list` – `Node` and `LinkedList` with `push_front`,
  `push_back`, `last`, `pop_front`, `for_each`, `map`, `clear`, `len()` and
  iteration.
- `ftkit.get_next_line` – `LineReader`, which reads lines (newline included)
  from a file descriptor or any object with a `read(size)` method, and
  `get_next_line(fd)`, which keeps unread data per descriptor between calls.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Examples

```python
from ftkit.numbers import atoi, itoa
from ftkit.transform import split, strtrim
from ftkit.printf import sprintf

atoi("  -42abc")                # -42
itoa(-2147483648)               # "-2147483648"
split("  a  b c ", " ")         # ["a", "b", "c"]
strtrim("xxhixx", "x")          # "hi"
sprintf("%s is %x", "n", 255)   # "n is ff"
```

Reading lines one by one, each keeping its newline:

```python
from ftkit.get_next_line import LineReader

with open("notes.txt") as fh:
    for line in LineReader(fh):
        print(line, end="")
```

Given an integer file descriptor instead, `LineReader` reads with `os.read`
and yields `bytes`.

Building a list:

```python
from ftkit.linked_list import LinkedList

items = LinkedList()
items.push_back(1)
items.push_back(2)
items.push_front(0)
list(items)                       # [0, 1, 2]
doubled = items.map(lambda x: x * 2)
len(doubled)                      # 3
```

## What it does not do

ftkit is a library only: it installs no command-line program. `printf`
understands no flags, field widths or precisions.