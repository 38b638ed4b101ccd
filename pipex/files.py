"""Opening the input and output files at either end of the pipeline."""

from __future__ import annotations

import errno
import os

_OUTFILE_FLAGS = os.O_WRONLY | os.O_CREAT | os.O_TRUNC
_OUTFILE_MODE = 0o644


def _require_access(path: str | os.PathLike[str]) -> None:
    """Raise unless ``path`` exists and is both readable and executable."""
    if not os.access(path, os.F_OK):
        code = errno.ENOENT
        raise FileNotFoundError(code, os.strerror(code), os.fspath(path))
    if not (os.access(path, os.X_OK) and os.access(path, os.R_OK)):
        code = errno.EACCES
        raise PermissionError(code, os.strerror(code), os.fspath(path))


def open_infile(path: str | os.PathLike[str]) -> int:
    """Open ``path`` for reading and return its file descriptor.

    The file must already exist and be readable and executable; otherwise
    an ``OSError`` describing the failure is raised.
    """
    _require_access(path)
    return os.open(path, os.O_RDONLY)


def open_outfile(path: str | os.PathLike[str]) -> int:
    """Open ``path`` for writing, truncating it, and return its descriptor.

    The file must already exist and be readable and executable; otherwise
    an ``OSError`` describing the failure is raised.
    """
    _require_access(path)
    return os.open(path, _OUTFILE_FLAGS, _OUTFILE_MODE)