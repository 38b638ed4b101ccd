"""Byte-buffer helpers working on bytes-like objects.

Buffers that are written to must be mutable (``bytearray`` or a writable
``memoryview``). Lengths beyond the buffer raise ``ValueError``.
"""

from __future__ import annotations


def _check_length(buf, n: int, name: str = "buffer") -> None:
    if n < 0:
        raise ValueError(f"length must not be negative, got {n}")
    if n > len(buf):
        raise ValueError(f"length {n} exceeds {name} size {len(buf)}")


def memset(buf, c: int, n: int):
    """Fill the first ``n`` bytes of ``buf`` with ``c`` (taken modulo 256)."""
    _check_length(buf, n)
    buf[:n] = bytes([c & 0xFF]) * n
    return buf


def bzero(buf, n: int) -> None:
    """Zero the first ``n`` bytes of ``buf``."""
    memset(buf, 0, n)


def calloc(nmemb: int, size: int) -> bytearray:
    """Return a zero-filled buffer of ``nmemb * size`` bytes."""
    if nmemb < 0 or size < 0:
        raise ValueError("element count and size must not be negative")
    return bytearray(nmemb * size)


def memchr(buf, c: int, n: int) -> int | None:
    """Return the index of the first byte equal to ``c`` within ``n`` bytes, or None."""
    _check_length(buf, n)
    index = bytes(buf[:n]).find(bytes([c & 0xFF]))
    return None if index < 0 else index


def memcmp(left, right, n: int) -> int:
    """Compare ``n`` bytes; return the difference of the first unequal pair, else 0."""
    _check_length(left, n, "left buffer")
    _check_length(right, n, "right buffer")
    for a, b in zip(bytes(left[:n]), bytes(right[:n])):
        if a != b:
            return a - b
    return 0


def memcpy(dest, src, n: int):
    """Copy ``n`` bytes from ``src`` into the start of ``dest`` and return ``dest``."""
    _check_length(dest, n, "destination")
    _check_length(src, n, "source")
    dest[:n] = bytes(src[:n])
    return dest


def memmove(dest, src, n: int):
    """Copy ``n`` bytes like :func:`memcpy`, correct even when the regions overlap."""
    if n == 0:
        return dest
    _check_length(dest, n, "destination")
    _check_length(src, n, "source")
    # Snapshot the source first so overlapping views see the original bytes.
    dest[:n] = bytes(src[:n])
    return dest