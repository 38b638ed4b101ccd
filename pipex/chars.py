"""Character classification and case conversion for ASCII code points.

Each function accepts either an integer code point or a one-character
string. The case converters return a value of the same kind they were given.
"""

from __future__ import annotations

_DIGITS = range(ord("0"), ord("9") + 1)
_UPPER = range(ord("A"), ord("Z") + 1)
_LOWER = range(ord("a"), ord("z") + 1)
_PRINTABLE = range(ord(" "), ord("~") + 1)
_ASCII = range(0, 128)
_CASE_OFFSET = ord("a") - ord("A")


def _code(c: int | str) -> int:
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c)
    return c


def _same_kind(original: int | str, code: int) -> int | str:
    return chr(code) if isinstance(original, str) else code


def is_alpha(c: int | str) -> bool:
    """Return True for an ASCII letter."""
    code = _code(c)
    return code in _UPPER or code in _LOWER


def is_digit(c: int | str) -> bool:
    """Return True for an ASCII decimal digit."""
    return _code(c) in _DIGITS


def is_alnum(c: int | str) -> bool:
    """Return True for an ASCII letter or digit."""
    return is_alpha(c) or is_digit(c)


def is_ascii(c: int | str) -> bool:
    """Return True for a code point in the 7-bit ASCII range."""
    return _code(c) in _ASCII


def is_print(c: int | str) -> bool:
    """Return True for a printable ASCII character, space included."""
    return _code(c) in _PRINTABLE


def to_lower(c: int | str) -> int | str:
    """Map an ASCII upper-case letter to lower case; leave anything else."""
    code = _code(c)
    if code in _UPPER:
        return _same_kind(c, code + _CASE_OFFSET)
    return c


def to_upper(c: int | str) -> int | str:
    """Map an ASCII lower-case letter to upper case; leave anything else."""
    code = _code(c)
    if code in _LOWER:
        return _same_kind(c, code - _CASE_OFFSET)
    return c