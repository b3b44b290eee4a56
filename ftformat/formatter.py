"""A small printf: ``%c %s %p %d %i %u %x %X %%`` with width and precision."""

from __future__ import annotations

import sys
from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any, TextIO

from ftformat.chars import isdigit
from ftformat.numconv import itoa, itoa_base, numlen, numlen_u

_CONVERSIONS = "cspdiuxX%"
_DECIMAL = "0123456789"
_HEX_LOWER = "0123456789abcdef"
_HEX_UPPER = "0123456789ABCDEF"
_INT_MOD = 1 << 32
_INT_MAX = (1 << 31) - 1


@dataclass
class _Spec:
    width: int = 0
    precision: int = -1

    def reset(self) -> None:
        self.width = 0
        self.precision = -1

    def pad(self, length: int) -> str:
        return " " * (self.width - length) if self.width > length else ""

    def pad_with_precision(self, length: int) -> str:
        """Padding then leading zeros for a field of ``length`` digits."""
        if self.precision >= length:
            zeros = self.precision - length
            return self.pad(zeros + length) + "0" * zeros
        return self.pad(length)


def _as_int(value: Any, conversion: str) -> int:
    if not isinstance(value, int):
        raise TypeError(f"%{conversion} needs an integer, got {type(value).__name__}")
    return int(value)


def _as_signed32(value: Any, conversion: str) -> int:
    num = _as_int(value, conversion) % _INT_MOD
    return num - _INT_MOD if num > _INT_MAX else num


def _format_char(value: Any, spec: _Spec) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise TypeError(f"%c needs a single character, got {value!r}")
        ch = value
    else:
        ch = chr(_as_int(value, "c") % 256)
    return spec.pad(1) + ch


def _format_str(value: Any, spec: _Spec) -> str:
    if value is None:
        text = "(null)"
    elif isinstance(value, str):
        text = value
    else:
        raise TypeError(f"%s needs a string, got {type(value).__name__}")
    if 0 <= spec.precision < len(text):
        text = text[:spec.precision]
    return spec.pad(len(text)) + text


def _format_pointer(value: Any, spec: _Spec) -> str:
    address = 0 if value is None else _as_int(value, "p")
    body = "0x" + itoa_base(address, _HEX_LOWER)
    return spec.pad(len(body)) + body


def _format_signed(value: Any, spec: _Spec, conversion: str) -> str:
    num = _as_signed32(value, conversion)
    length = numlen(num)
    if num < 0 and spec.precision >= length:
        zeros = spec.precision - (length - 1)
        return spec.pad(length + zeros) + "-" + "0" * zeros + itoa(-num)
    prefix = spec.pad_with_precision(length)
    if num == 0 and spec.precision == 0:
        return prefix
    return prefix + itoa(num)


def _format_unsigned(value: Any, spec: _Spec, conversion: str, base: str) -> str:
    num = _as_int(value, conversion) % _INT_MOD
    prefix = spec.pad_with_precision(numlen_u(num, len(base)))
    if num == 0 and spec.precision == 0:
        return prefix
    return prefix + itoa_base(num, base)


def _next_arg(values: Iterator[Any], conversion: str) -> Any:
    try:
        return next(values)
    except StopIteration:
        raise TypeError(f"not enough arguments for %{conversion}") from None


def _convert(conversion: str, spec: _Spec, values: Iterator[Any]) -> str:
    if conversion == "%":
        return "%"
    value = _next_arg(values, conversion)
    if conversion == "c":
        return _format_char(value, spec)
    if conversion == "s":
        return _format_str(value, spec)
    if conversion == "p":
        return _format_pointer(value, spec)
    if conversion in "di":
        return _format_signed(value, spec, conversion)
    if conversion == "u":
        return _format_unsigned(value, spec, conversion, _DECIMAL)
    if conversion == "x":
        return _format_unsigned(value, spec, conversion, _HEX_LOWER)
    return _format_unsigned(value, spec, conversion, _HEX_UPPER)


def _read_number(fmt: str, pos: int) -> tuple[int, int]:
    start = pos
    while pos < len(fmt) and isdigit(fmt[pos]):
        pos += 1
    return (int(fmt[start:pos]) if pos > start else 0), pos


def _read_flags(fmt: str, pos: int, spec: _Spec) -> int:
    if pos < len(fmt) and isdigit(fmt[pos]):
        spec.width, pos = _read_number(fmt, pos)
    if pos < len(fmt) and fmt[pos] == ".":
        spec.precision, pos = _read_number(fmt, pos + 1)
    return pos


def sformat(fmt: str, *args: Any) -> str:
    """Format ``args`` according to ``fmt`` and return the text.

    A NUL character ends the format. An unknown conversion character is
    copied literally, and the width and precision read before it carry over
    to the next conversion. A lone ``%`` at the end is dropped.
    """
    fmt = fmt.split("\0", 1)[0]
    values = iter(args)
    spec = _Spec()
    pieces: list[str] = []
    pos = 0
    while pos < len(fmt):
        ch = fmt[pos]
        if ch != "%":
            pieces.append(ch)
            pos += 1
            continue
        if pos + 1 >= len(fmt):
            break
        pos = _read_flags(fmt, pos + 1, spec)
        if pos >= len(fmt):
            break
        conversion = fmt[pos]
        if conversion in _CONVERSIONS:
            pieces.append(_convert(conversion, spec, values))
            spec.reset()
            pos += 1
    return "".join(pieces)


def printf(fmt: str, *args: Any, stream: TextIO | None = None) -> int:
    """Write the formatted text to ``stream`` (stdout by default); return its length."""
    text = sformat(fmt, *args)
    (sys.stdout if stream is None else stream).write(text)
    return len(text)