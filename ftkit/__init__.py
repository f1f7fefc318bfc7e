"""String, memory, number, list, line-reading and formatting helpers."""

__version__ = "0.1.0"

__all__ = [
    "chars",
    "numbers",
    "memory",
    "output",
    "search",
    "matrix",
    "transform",
    "get_next_line",
    "printf",
    "linked_list",
]