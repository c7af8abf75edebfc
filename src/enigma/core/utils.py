from __future__ import annotations

from typing import Iterable


def wrap(p: int, size: int) -> int:
    """Return p modulo size, always in 0..size-1."""
    return p % size


def strip_spaces(text: str) -> str:
    return text.replace(" ", "")


def chunked(seq: Iterable, size: int):
    buf = []
    for x in seq:
        buf.append(x)
        if len(buf) == size:
            yield buf
            buf = []
    if buf:
        yield buf


def group_text(msg: str, size: int = 5) -> str:
    """Split msg into space-separated groups of `size` (last may be shorter)."""
    return " ".join("".join(group) for group in chunked(msg, size))
