import os
import sys

import pytest

from pipex.execution import (
    CommandNotFoundError,
    PipexError,
    parse_command,
    start_command,
)


def _make_script(bin_dir, name, body):
    bin_dir.mkdir(parents=True, exist_ok=True)
    script = bin_dir / name
    script.write_text(f"#!{sys.executable}\n{body}\n")
    os.chmod(script, 0o755)
    return script


UPPER = "import sys\nsys.stdout.write(sys.stdin.read().upper())"
ECHO_ARGS = "import sys\nsys.stdout.write('|'.join(sys.argv[1:]))"


def test_parse_command_splits_on_spaces():
    assert parse_command("ls  -l -a ") == ["ls", "-l", "-a"]


def test_parse_command_empty():
    with pytest.raises(PipexError, match="Error: empty command"):
        parse_command("")


def test_parse_command_only_spaces():
    with pytest.raises(PipexError, match="Error: invalid command"):
        parse_command("   ")


def test_start_command_not_found(tmp_path):
    env = {"PATH": str(tmp_path)}
    with pytest.raises(CommandNotFoundError) as info:
        start_command("nope -x", env, None, None)
    assert info.value.command == "nope"
    assert str(info.value) == "command not found: nope"


def test_not_found_is_a_pipex_error(tmp_path):
    with pytest.raises(PipexError):
        start_command("nope", {"PATH": str(tmp_path)}, None, None)


def test_start_command_empty_raises(tmp_path):
    with pytest.raises(PipexError, match="empty command"):
        start_command("", {"PATH": str(tmp_path)}, None, None)


def test_start_command_connects_streams(tmp_path):
    bin_dir = tmp_path / "bin"
    _make_script(bin_dir, "upper", UPPER)
    source = tmp_path / "in.txt"
    source.write_bytes(b"abc\n")
    target = tmp_path / "out.txt"
    with source.open("rb") as stdin, target.open("wb") as stdout:
        process = start_command("upper", {"PATH": str(bin_dir)}, stdin, stdout)
        assert process.wait() == 0
    assert target.read_bytes() == source.read_bytes().upper()


def test_start_command_passes_arguments(tmp_path):
    bin_dir = tmp_path / "bin"
    _make_script(bin_dir, "echoargs", ECHO_ARGS)
    target = tmp_path / "out.txt"
    with target.open("wb") as stdout:
        process = start_command(
            "echoargs one  two", {"PATH": str(bin_dir)}, None, stdout
        )
        assert process.wait() == 0
    assert target.read_text() == "one|two"


def test_start_command_exec_failure(tmp_path):
    bin_dir = tmp_path / "bin"
    (bin_dir / "tool").mkdir(parents=True)
    with pytest.raises(PipexError, match="execve failed"):
        start_command("tool", {"PATH": str(bin_dir)}, None, None)