import os

import pytest

from pipex.output import putchar_fd, putendl_fd, putnbr_fd, putstr_fd


@pytest.fixture
def pipe():
    read_fd, write_fd = os.pipe()
    yield read_fd, write_fd
    for fd in (read_fd, write_fd):
        try:
            os.close(fd)
        except OSError:
            pass


def _drain(read_fd, write_fd):
    os.close(write_fd)
    chunks = []
    while chunk := os.read(read_fd, 4096):
        chunks.append(chunk)
    return b"".join(chunks)


def test_putchar_fd(pipe):
    r, w = pipe
    putchar_fd("z", w)
    assert _drain(r, w) == b"z"


def test_putchar_fd_rejects_longer_text(pipe):
    _, w = pipe
    with pytest.raises(ValueError):
        putchar_fd("ab", w)


def test_putstr_fd(pipe):
    r, w = pipe
    putstr_fd("hello world", w)
    assert _drain(r, w) == b"hello world"


def test_putstr_fd_empty(pipe):
    r, w = pipe
    putstr_fd("", w)
    assert _drain(r, w) == b""


def test_putendl_fd(pipe):
    r, w = pipe
    putendl_fd("line", w)
    assert _drain(r, w) == b"line\n"


@pytest.mark.parametrize("n", [0, 42, -7, 2147483647, -2147483648])
def test_putnbr_fd_round_trip(pipe, n):
    r, w = pipe
    putnbr_fd(n, w)
    assert int(_drain(r, w)) == n


def test_putnbr_fd_int_min_text(pipe):
    r, w = pipe
    putnbr_fd(-2147483648, w)
    assert _drain(r, w) == b"-2147483648"


def test_putnbr_fd_out_of_range(pipe):
    _, w = pipe
    with pytest.raises(OverflowError):
        putnbr_fd(2**31, w)


def test_writes_accumulate_in_order(pipe):
    r, w = pipe
    putstr_fd("a", w)
    putnbr_fd(5, w)
    putendl_fd("b", w)
    assert _drain(r, w) == b"a5b\n"