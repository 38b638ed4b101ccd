"""Writing characters, strings and integers to raw file descriptors."""

from __future__ import annotations

import os

from pipex.numbers import itoa

_ENCODING = "utf-8"


def _write_all(fd: int, data: bytes) -> None:
    view = memoryview(data)
    while view:
        written = os.write(fd, view)
        view = view[written:]


def putchar_fd(c: str, fd: int) -> None:
    """Write the single character ``c`` to ``fd``."""
    if len(c) != 1:
        raise ValueError(f"expected a single character, got {c!r}")
    _write_all(fd, c.encode(_ENCODING))


def putstr_fd(text: str, fd: int) -> None:
    """Write ``text`` to ``fd``."""
    _write_all(fd, text.encode(_ENCODING))


def putendl_fd(text: str, fd: int) -> None:
    """Write ``text`` followed by a newline to ``fd``."""
    putstr_fd(text, fd)
    putchar_fd("\n", fd)


def putnbr_fd(n: int, fd: int) -> None:
    """Write the decimal text of the 32-bit integer ``n`` to ``fd``."""
    putstr_fd(itoa(n), fd)