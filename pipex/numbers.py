"""Conversions between decimal text and 32-bit signed integers."""

from __future__ import annotations

from itertools import takewhile

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1

_WHITESPACE = " \t\n\v\f\r"
_DIGITS = frozenset("0123456789")


def _wrap_int32(value: int) -> int:
    return (value - INT_MIN) % 2**32 + INT_MIN


def atoi(text: str) -> int:
    """Parse a leading decimal integer, as the C library does.

    Leading whitespace is skipped, one optional sign is accepted, and digits
    are read until the first non-digit. Text without digits gives 0. The
    result wraps around like a 32-bit signed integer.
    """
    rest = text.lstrip(_WHITESPACE)
    sign = 1
    if rest[:1] == "-":
        sign = -1
        rest = rest[1:]
    elif rest[:1] == "+":
        rest = rest[1:]
    digits = "".join(takewhile(_DIGITS.__contains__, rest))
    value = int(digits) if digits else 0
    return _wrap_int32(sign * value)


def itoa(n: int) -> str:
    """Return the decimal text of a 32-bit signed integer."""
    if not INT_MIN <= n <= INT_MAX:
        raise OverflowError(f"{n} does not fit in a 32-bit signed integer")
    return str(int(n))