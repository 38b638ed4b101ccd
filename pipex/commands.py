"""Turning a command string into an argument list and a program path."""

from __future__ import annotations

import os
from collections.abc import Mapping

from pipex.strings import split


class CommandNotFoundError(LookupError):
    """Raised when a command cannot be found on the search path."""

    def __init__(self, command: str) -> None:
        super().__init__(f"command not found: {command}")
        self.command = command


def find_command(cmd: str, env: Mapping[str, str]) -> str:
    """Return the first ``dir/cmd`` that exists, searching ``env['PATH']``.

    Empty path entries are skipped. Only existence is checked, not
    whether the file can be executed.
    """
    search_path = env.get("PATH")
    if search_path is None:
        raise CommandNotFoundError(cmd)
    for directory in split(search_path, ":"):
        candidate = f"{directory}/{cmd}"
        if os.access(candidate, os.F_OK):
            return candidate
    raise CommandNotFoundError(cmd)


def parse_command(cmd: str) -> list[str]:
    """Split a command string on spaces into its arguments.

    Raises ``ValueError`` when the string holds no words.
    """
    args = split(cmd, " ")
    if not args:
        raise ValueError("empty command")
    return args