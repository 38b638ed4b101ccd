"""String helpers with C-library semantics, expressed over Python ``str``.

Functions that would return a pointer into a string return an index
instead, or ``None`` where nothing was found. Functions that would fill a
caller's buffer return the new string.
"""

from __future__ import annotations

from collections.abc import Callable, MutableSequence
from itertools import zip_longest
from typing import Any

_NUL = "\0"


def _char(c: int | str) -> str:
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    return chr(c & 0xFF)


def _check_size(value: int, name: str) -> None:
    if value < 0:
        raise ValueError(f"{name} must not be negative, got {value}")


def strlen(text: str) -> int:
    """Return the number of characters in ``text``."""
    return len(text)


def strchr(text: str, c: int | str) -> int | None:
    """Return the index of the first ``c`` in ``text``, or None.

    Searching for the NUL character finds the end of the string.
    """
    ch = _char(c)
    if ch == _NUL:
        return len(text)
    index = text.find(ch)
    return None if index < 0 else index


def strrchr(text: str, c: int | str) -> int | None:
    """Return the index of the last ``c`` in ``text``, or None.

    Searching for the NUL character finds the end of the string.
    """
    ch = _char(c)
    if ch == _NUL:
        return len(text)
    index = text.rfind(ch)
    return None if index < 0 else index


def strdup(text: str) -> str:
    """Return a copy of ``text``."""
    return str(text)


def strjoin(left: str, right: str) -> str:
    """Return ``left`` followed by ``right``."""
    return left + right


def strlcpy(src: str, size: int) -> tuple[str, int]:
    """Copy ``src`` into a buffer of ``size`` characters, terminator included.

    Returns the copied text, truncated to ``size - 1`` characters, and the
    full length of ``src``, which tells the caller whether truncation
    happened. A size of zero copies nothing.
    """
    _check_size(size, "size")
    copied = src[: size - 1] if size > 0 else ""
    return copied, len(src)


def strlcat(dest: str, src: str, size: int) -> tuple[str, int]:
    """Append ``src`` to ``dest`` within a buffer of ``size`` characters.

    Returns the resulting text and the length the full concatenation would
    have had, counting ``dest`` as at most ``size`` characters long.
    """
    _check_size(size, "size")
    dest_len = len(dest)
    result = dest
    if size > 0 and dest_len < size - 1:
        result = dest + src[: size - 1 - dest_len]
    return result, min(dest_len, size) + len(src)


def strncmp(left: str, right: str, n: int) -> int:
    """Compare at most ``n`` characters, stopping at a NUL.

    Returns the difference of the first unequal character codes, a shorter
    string comparing as if followed by NUL, or 0 when they match.
    """
    _check_size(n, "n")
    for a, b in zip_longest(left[:n], right[:n], fillvalue=_NUL):
        if a != b:
            return ord(a) - ord(b)
        if a == _NUL:
            return 0
    return 0


def strnstr(haystack: str, needle: str, length: int) -> int | None:
    """Return the index of ``needle`` lying within the first ``length`` characters.

    An empty needle is found at index 0. Returns None when there is no match.
    """
    _check_size(length, "length")
    end = min(length, len(haystack))
    index = haystack.find(needle, 0, end)
    return None if index < 0 else index


def substr(text: str, start: int, length: int) -> str:
    """Return at most ``length`` characters of ``text`` starting at ``start``.

    A start at or beyond the end gives an empty string.
    """
    _check_size(start, "start")
    _check_size(length, "length")
    if start >= len(text):
        return ""
    return text[start : start + length]


def strtrim(text: str, charset: str) -> str:
    """Remove characters found in ``charset`` from both ends of ``text``."""
    return text.strip(charset)


def split(text: str, sep: str) -> list[str]:
    """Split ``text`` on ``sep``, dropping empty pieces."""
    sep = _char(sep)
    return [piece for piece in text.split(sep) if piece]


def strmapi(text: str, f: Callable[[int, str], str]) -> str:
    """Return a new string made of ``f(index, char)`` for each character."""
    return "".join(f(index, ch) for index, ch in enumerate(text))


def striteri(buf: MutableSequence[Any], f: Callable[[int, Any], Any]) -> None:
    """Call ``f(index, item)`` for each item of ``buf``, in place.

    When ``f`` returns something other than None, that value replaces the
    item in ``buf``.
    """
    for index, item in enumerate(buf):
        replacement = f(index, item)
        if replacement is not None:
            buf[index] = replacement