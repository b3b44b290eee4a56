"""Integer/text conversions with C integer semantics."""

from __future__ import annotations

_UNSIGNED_LONG_MOD = 1 << 64
_UNSIGNED_INT_MOD = 1 << 32
_INT_MAX = (1 << 31) - 1
_WHITESPACE = " \t\n\v\f\r"
_DECIMAL_DIGITS = "0123456789"


def _check_radix(radix: int) -> None:
    if radix < 2:
        raise ValueError(f"radix must be at least 2, got {radix}")


def numlen(num: int) -> int:
    """Number of characters of ``num`` in decimal, a leading minus included."""
    num = int(num)
    if num == 0:
        return 1
    length = 1 if num < 0 else 0
    num = abs(num)
    while num:
        num //= 10
        length += 1
    return length


def numlen_u(num: int, radix: int) -> int:
    """Number of digits of ``num``, taken as a 64-bit unsigned value, in ``radix``."""
    _check_radix(radix)
    num = int(num) % _UNSIGNED_LONG_MOD
    if num == 0:
        return 1
    length = 0
    while num:
        num //= radix
        length += 1
    return length


def itoa(n: int) -> str:
    """Decimal representation of a signed integer."""
    n = int(n)
    digits = []
    value = abs(n)
    while True:
        value, rem = divmod(value, 10)
        digits.append(_DECIMAL_DIGITS[rem])
        if not value:
            break
    if n < 0:
        digits.append("-")
    return "".join(reversed(digits))


def itoa_base(n: int, base: str) -> str:
    """Representation of ``n`` (as a 64-bit unsigned value) using the digits in ``base``."""
    radix = len(base)
    _check_radix(radix)
    value = int(n) % _UNSIGNED_LONG_MOD
    digits = []
    while True:
        value, rem = divmod(value, radix)
        digits.append(base[rem])
        if not value:
            break
    return "".join(reversed(digits))


def atoi(text: str) -> int:
    """Parse a leading decimal integer, wrapping to a 32-bit signed result.

    Leading whitespace is skipped, one optional sign is accepted and parsing
    stops at the first non-digit. Text with no digits yields 0.
    """
    rest = text.lstrip(_WHITESPACE)
    sign = 1
    if rest[:1] in ("+", "-"):
        if rest[0] == "-":
            sign = -1
        rest = rest[1:]
    end = 0
    for ch in rest:
        if ch not in _DECIMAL_DIGITS:
            break
        end += 1
    magnitude = int(rest[:end]) if end else 0
    value = (sign * magnitude) % _UNSIGNED_INT_MOD
    if value > _INT_MAX:
        value -= _UNSIGNED_INT_MOD
    return value