"""Writing characters, strings and numbers to a text stream."""

from __future__ import annotations

import sys
from typing import TextIO, Union


def _target(stream: TextIO | None) -> TextIO:
    return sys.stdout if stream is None else stream


def put_char(c: Union[str, int], stream: TextIO | None = None) -> int:
    """Write one character; returns the number of characters written."""
    if isinstance(c, int):
        c = chr(c)
    if len(c) != 1:
        raise ValueError(f"expected a single character, got {c!r}")
    _target(stream).write(c)
    return 1


def put_str(s: str | None, stream: TextIO | None = None) -> int:
    """Write a string; ``None`` writes nothing."""
    if s is None:
        return 0
    _target(stream).write(s)
    return len(s)


def put_endl(s: str | None, stream: TextIO | None = None) -> int:
    """Write a string followed by a newline; ``None`` writes nothing."""
    if s is None:
        return 0
    _target(stream).write(s + "\n")
    return len(s) + 1


def put_nbr(n: int, stream: TextIO | None = None) -> int:
    """Write an integer in decimal."""
    text = str(int(n))
    _target(stream).write(text)
    return len(text)