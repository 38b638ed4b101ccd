"""Run ``infile cmd1 | cmd2 > outfile`` as two connected processes."""

from __future__ import annotations

import os
import subprocess
import sys
from collections.abc import Callable, Mapping, Sequence

from pipex.commands import CommandNotFoundError, find_command, parse_command
from pipex.files import open_infile, open_outfile

NOT_FOUND_STATUS = 127
FAILURE_STATUS = 1


def _report(message: str) -> None:
    sys.stderr.write(message + "\n")
    sys.stderr.flush()


def _launch(
    command: str,
    path: str | os.PathLike[str],
    open_file: Callable[[str | os.PathLike[str]], int],
    pipe_end: int,
    reads_file: bool,
    env: Mapping[str, str],
) -> subprocess.Popen[bytes] | int:
    """Start one side of the pipeline; return the process or an exit status."""
    try:
        file_fd = open_file(path)
    except OSError as exc:
        _report(exc.strerror or str(exc))
        return FAILURE_STATUS
    try:
        try:
            argv = parse_command(command)
        except ValueError:
            return FAILURE_STATUS
        try:
            program = find_command(argv[0], env)
        except CommandNotFoundError:
            _report("Command not found")
            return NOT_FOUND_STATUS
        stdin, stdout = (file_fd, pipe_end) if reads_file else (pipe_end, file_fd)
        try:
            return subprocess.Popen(
                argv, executable=program, stdin=stdin, stdout=stdout, env=dict(env)
            )
        except OSError as exc:
            return (exc.errno or FAILURE_STATUS) & 0xFF
    finally:
        os.close(file_fd)


def _wait(side: subprocess.Popen[bytes] | int) -> int:
    if isinstance(side, int):
        return side
    code = side.wait()
    # A process ended by a signal reports no exit status of its own.
    return code if code >= 0 else 0


def run_pipeline(
    infile: str | os.PathLike[str],
    cmd1: str,
    cmd2: str,
    outfile: str | os.PathLike[str],
    env: Mapping[str, str] | None = None,
) -> int:
    """Run ``cmd1 < infile | cmd2 > outfile`` and return the second's status."""
    if env is None:
        env = os.environ
    read_end, write_end = os.pipe()
    try:
        first = _launch(cmd1, infile, open_infile, write_end, True, env)
        second = _launch(cmd2, outfile, open_outfile, read_end, False, env)
    finally:
        os.close(read_end)
        os.close(write_end)
    _wait(first)
    return _wait(second)


def main(argv: Sequence[str] | None = None) -> int:
    """Command-line entry: ``pipex infile cmd1 cmd2 outfile``."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 4:
        _report("Invalid number of arguments!")
        return FAILURE_STATUS
    infile, cmd1, cmd2, outfile = args
    return run_pipeline(infile, cmd1, cmd2, outfile, os.environ)