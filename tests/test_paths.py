import os

from pipex.paths import find_command_path, get_path_from_env


def _make_file(directory, name, mode=0o755):
    directory.mkdir(parents=True, exist_ok=True)
    target = directory / name
    target.write_text("#!/bin/sh\n")
    os.chmod(target, mode)
    return target


def test_get_path_from_env_returns_value():
    assert get_path_from_env({"HOME": "/home/user", "PATH": "/a:/b"}) == "/a:/b"


def test_get_path_from_env_missing():
    assert get_path_from_env({"HOME": "/home/user"}) is None


def test_find_command_in_later_directory(tmp_path):
    first = tmp_path / "first"
    first.mkdir()
    second = tmp_path / "second"
    _make_file(second, "tool")
    env = {"PATH": f"{first}:{second}"}
    assert find_command_path("tool", env) == f"{second}/tool"


def test_first_match_wins(tmp_path):
    first = tmp_path / "first"
    second = tmp_path / "second"
    _make_file(first, "tool")
    _make_file(second, "tool")
    env = {"PATH": f"{first}:{second}"}
    assert find_command_path("tool", env) == f"{first}/tool"


def test_non_executable_file_is_skipped(tmp_path):
    first = tmp_path / "first"
    second = tmp_path / "second"
    _make_file(first, "tool", mode=0o644)
    _make_file(second, "tool")
    env = {"PATH": f"{first}:{second}"}
    assert find_command_path("tool", env) == f"{second}/tool"


def test_not_found_returns_none(tmp_path):
    env = {"PATH": str(tmp_path)}
    assert find_command_path("absent", env) is None


def test_empty_command_returns_none(tmp_path):
    _make_file(tmp_path, "tool")
    assert find_command_path("", {"PATH": str(tmp_path)}) is None
    assert find_command_path(None, {"PATH": str(tmp_path)}) is None


def test_missing_path_variable_returns_none(tmp_path):
    _make_file(tmp_path, "tool")
    assert find_command_path("tool", {}) is None


def test_empty_path_entries_are_ignored(tmp_path):
    _make_file(tmp_path, "tool")
    env = {"PATH": f"::{tmp_path}:"}
    assert find_command_path("tool", env) == f"{tmp_path}/tool"