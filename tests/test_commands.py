import pytest

from pipex.commands import CommandNotFoundError, find_command, parse_command


def _tool(directory, name="tool", mode=0o755):
    directory.mkdir(exist_ok=True)
    path = directory / name
    path.write_text("#!/bin/sh\n")
    path.chmod(mode)
    return path


def test_parse_command_splits_words():
    assert parse_command("wc -l") == ["wc", "-l"]


def test_parse_command_drops_repeated_spaces():
    assert parse_command("  grep  a   b ") == ["grep", "a", "b"]


@pytest.mark.parametrize("text", ["", "   "])
def test_parse_command_rejects_empty(text):
    with pytest.raises(ValueError):
        parse_command(text)


def test_find_command_uses_path_order(tmp_path):
    first = tmp_path / "a"
    second = tmp_path / "b"
    _tool(first)
    _tool(second)
    env = {"PATH": f"{first}:{second}"}
    assert find_command("tool", env) == f"{first}/tool"


def test_find_command_skips_empty_entries(tmp_path):
    second = tmp_path / "b"
    _tool(second)
    env = {"PATH": f"::{tmp_path / 'missing'}::{second}"}
    assert find_command("tool", env) == f"{second}/tool"


def test_find_command_accepts_non_executable_file(tmp_path):
    directory = tmp_path / "bin"
    _tool(directory, mode=0o644)
    assert find_command("tool", {"PATH": str(directory)}) == f"{directory}/tool"


def test_find_command_missing(tmp_path):
    directory = tmp_path / "bin"
    _tool(directory)
    with pytest.raises(CommandNotFoundError) as info:
        find_command("other", {"PATH": str(directory)})
    assert info.value.command == "other"


def test_find_command_without_path_variable():
    with pytest.raises(CommandNotFoundError):
        find_command("ls", {"HOME": "/"})