"""String and byte helpers: searching, comparing, slicing, splitting and trimming."""

from __future__ import annotations

from collections.abc import Callable
from typing import Optional, Union

BytesLike = Union[bytes, bytearray, memoryview]


def _single_char(c: str, name: str) -> str:
    if not isinstance(c, str) or len(c) != 1:
        raise ValueError(f"{name} must be a single character, got {c!r}")
    return c


def split(s: str, sep: str) -> list[str]:
    """Split ``s`` on the character ``sep``, dropping empty fields."""
    _single_char(sep, "sep")
    if sep == "\0":
        return [s] if s else []
    return [word for word in s.split(sep) if word]


def strchr(s: str, c: str) -> Optional[int]:
    """Index of the first ``c`` in ``s``; ``'\\0'`` finds the end of the string."""
    _single_char(c, "c")
    if c == "\0":
        return len(s)
    index = s.find(c)
    return None if index < 0 else index


def strrchr(s: str, c: str) -> Optional[int]:
    """Index of the last ``c`` in ``s``; ``'\\0'`` finds the end of the string."""
    _single_char(c, "c")
    if c == "\0":
        return len(s)
    index = s.rfind(c)
    return None if index < 0 else index


def strncmp(s1: str, s2: str, n: int) -> int:
    """Compare at most ``n`` characters; the end of a string compares as code 0.

    Returns zero when equal, otherwise the difference of the first
    differing character codes.
    """
    if n < 0:
        raise ValueError(f"n must not be negative, got {n}")
    for i in range(n):
        a = ord(s1[i]) if i < len(s1) else 0
        b = ord(s2[i]) if i < len(s2) else 0
        if a != b:
            return a - b
        if a == 0:
            return 0
    return 0


def strnstr(haystack: str, needle: str, length: int) -> Optional[int]:
    """Index of ``needle`` lying wholly within the first ``length`` characters."""
    if length < 0:
        raise ValueError(f"length must not be negative, got {length}")
    if not needle:
        return 0
    index = haystack[:length].find(needle)
    return None if index < 0 else index


def substr(s: str, start: int, length: int) -> str:
    """At most ``length`` characters of ``s`` from ``start``; empty when out of range."""
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    if start >= len(s) or length == 0:
        return ""
    return s[start:start + length]


def strjoin(s1: str, s2: str) -> str:
    """Concatenation of two strings."""
    return s1 + s2


def strtrim(s: str, charset: str) -> str:
    """``s`` with every leading and trailing character found in ``charset`` removed."""
    if not charset:
        return s
    return s.strip(charset)


def strmapi(s: str, func: Callable[[int, str], str]) -> str:
    """New string built from ``func(index, char)`` for each character of ``s``."""
    return "".join(func(index, ch) for index, ch in enumerate(s))


def _check_span(data: BytesLike, n: int) -> memoryview:
    view = memoryview(data).cast("B")
    if n < 0:
        raise ValueError(f"n must not be negative, got {n}")
    if n > len(view):
        raise ValueError(f"n ({n}) exceeds buffer length ({len(view)})")
    return view


def memchr(data: BytesLike, c: int, n: int) -> Optional[int]:
    """Index of the first byte equal to ``c`` (taken modulo 256) among the first ``n``."""
    view = _check_span(data, n)
    index = bytes(view[:n]).find(c & 0xFF)
    return None if index < 0 else index


def memcmp(a: BytesLike, b: BytesLike, n: int) -> int:
    """Compare the first ``n`` bytes; returns the difference of the first unequal pair."""
    view_a = _check_span(a, n)
    view_b = _check_span(b, n)
    for x, y in zip(view_a[:n], view_b[:n]):
        if x != y:
            return x - y
    return 0