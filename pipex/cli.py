"""Command-line entry: run ``infile | cmd1 | cmd2 > outfile``."""

from __future__ import annotations

import os
import subprocess
import sys
from collections.abc import Mapping, Sequence
from typing import IO, Union

from pipex.execution import PipexError, start_command

USAGE = "Usage: pipex file1 cmd1 cmd2 file2"
_FAILED_TO_START = 1


def open_files(infile: str, outfile: str) -> tuple[IO[bytes], IO[bytes]]:
    """Open the input for reading and the output for writing.

    An unreadable input is reported on stderr and replaced by the null
    device. The output is created with mode 0644 or truncated; failing to
    open it raises :class:`PipexError`.
    """
    try:
        source = open(infile, "rb")
    except OSError:
        print(f"{infile}: No such file or directory", file=sys.stderr)
        source = open(os.devnull, "rb")
    try:
        fd = os.open(outfile, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, 0o644)
    except OSError as exc:
        source.close()
        raise PipexError("Error opening outfile") from exc
    return source, os.fdopen(fd, "wb")


def _spawn(
    command: str,
    env: Mapping[str, str],
    stdin: Union[int, IO[bytes]],
    stdout: Union[int, IO[bytes]],
) -> subprocess.Popen | None:
    try:
        return start_command(command, env, stdin, stdout)
    except PipexError as exc:
        print(exc, file=sys.stderr)
        return None


def _wait(process: subprocess.Popen | None) -> int:
    return _FAILED_TO_START if process is None else process.wait()


def run_pipeline(
    infile: str,
    first_command: str,
    second_command: str,
    outfile: str,
    env: Mapping[str, str],
) -> tuple[int, int]:
    """Feed ``infile`` through both commands into ``outfile``.

    A command that cannot be started is reported on stderr and counts as
    having exited with status 1; the other command still runs. Returns the
    exit statuses of both commands.
    """
    source, sink = open_files(infile, outfile)
    with source, sink:
        read_fd, write_fd = os.pipe()
        try:
            first = _spawn(first_command, env, source, write_fd)
            second = _spawn(second_command, env, read_fd, sink)
        finally:
            os.close(read_fd)
            os.close(write_fd)
        return _wait(first), _wait(second)


def main(argv: Sequence[str] | None = None) -> int:
    """Run the pipeline described by ``argv`` and return the exit status."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 4:
        print(USAGE, file=sys.stderr)
        return 1
    infile, first_command, second_command, outfile = args
    try:
        run_pipeline(infile, first_command, second_command, outfile, os.environ)
    except PipexError as exc:
        print(exc, file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())