"""Parsing a command line and starting it as a child process."""

from __future__ import annotations

import subprocess
from collections.abc import Mapping
from typing import IO, Union

from pipex.paths import find_command_path
from pipex.textops import split_words

Stream = Union[int, IO[bytes], None]


class PipexError(Exception):
    """A failure that ends the pipeline or one of its commands."""


class CommandNotFoundError(PipexError):
    """No executable of the requested name was found on PATH."""

    def __init__(self, command: str) -> None:
        super().__init__(f"command not found: {command}")
        self.command = command


def parse_command(command: str | None) -> list[str]:
    """Split a command line on spaces into its arguments."""
    if not command:
        raise PipexError("Error: empty command")
    args = split_words(command, " ")
    if not args:
        raise PipexError("Error: invalid command")
    return args


def start_command(
    command: str | None,
    env: Mapping[str, str],
    stdin: Stream,
    stdout: Stream,
) -> subprocess.Popen:
    """Start ``command`` with the given standard input and output.

    The executable is looked up on the PATH of ``env``, which is also the
    environment the command receives.
    """
    args = parse_command(command)
    executable = find_command_path(args[0], env)
    if executable is None:
        raise CommandNotFoundError(args[0])
    try:
        return subprocess.Popen(
            args,
            executable=executable,
            stdin=stdin,
            stdout=stdout,
            env=dict(env),
        )
    except OSError as exc:
        raise PipexError("execve failed") from exc