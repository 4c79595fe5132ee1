# pipex

`pipex` runs two commands connected by a pipe. The first command reads from an
input file, its output goes into the second command, and the second command's
output goes into an output file. It does what this shell line does:

```sh
< infile cmd1 | cmd2 > outfile
```

## Installation

```sh
pip install .
```

## Usage

```sh
pipex infile "cmd1 args" "cmd2 args" outfile
```

For example, this counts the lines of `input.txt` that contain `error`:

```sh
pipex input.txt "grep error" "wc -l" result.txt
```

Behaviour:

- It takes exactly four arguments. With any other number it prints
  `Usage: pipex file1 cmd1 cmd2 file2` to standard error and exits with
  status 1.
- If the input file cannot be opened, it prints
  `<infile>: No such file or directory` to standard error and the first
  command reads from the null device instead. The pipeline still runs.
- The output file is created if it is missing and truncated if it exists, with
  mode `0644`. If it cannot be opened, `Error opening outfile` is printed and
  the exit status is 1.
- Each command string is split on spaces only; runs of spaces count as one.
  Quotes are not interpreted.
- Commands are looked up in the directories of the `PATH` variable, in order;
  empty `PATH` entries are skipped. A command that is not found prints
  `command not found: <name>`, an empty command prints
  `Error: empty command`, and a command made only of spaces prints
  `Error: invalid command`. The other command still runs.
- Both commands are waited for. The exit status of `pipex` is 0 once the
  pipeline has run, whatever the commands themselves returned.

## Use from Python

The pieces are also available as functions:

```python
import os
from pipex.cli import run_pipeline
from pipex.paths import find_command_path
from pipex.execution import parse_command

parse_command("grep -i error")            # ['grep', '-i', 'error']
find_command_path("ls", os.environ)       # e.g. '/bin/ls', or None
run_pipeline("input.txt", "grep error", "wc -l", "result.txt", os.environ)
# -> (status of the first command, status of the second command)
```

In `run_pipeline`, a command that cannot be started is reported on standard
error and counted as exit status 1.

`pipex.execution.start_command(command, env, stdin, stdout)` starts a single
command and returns its `subprocess.Popen`. `pipex.execution.PipexError` is
raised for an empty or unusable command or a failed start, and
`pipex.execution.CommandNotFoundError` (a subclass, with a `command`
attribute) when the command is not on the `PATH`.

The package also carries:

- text helpers in `pipex.textops`: `split_words`, `atoi` (C-style, wrapping to
  32 bits), `itoa`, `strtrim`, `strnstr`, `substr`, `strncmp`;
- `pipex.linereader.LineReader(fd, buffer_size=4096)`, which reads
  newline-terminated lines as `bytes` from a file descriptor through
  `read_line()` or iteration;
- a minimal `printf`-style formatter in `pipex.formatting`: `format_string`
  and `print_formatted` (which writes to standard output or a given `stream`
  and returns the number of characters written), supporting
  `%c %s %p %d %i %u %x %X %%`.

## What it does not do

`pipex` joins exactly two commands. It has no support for longer pipelines,
here-documents, appending to the output file, quoting, or any other shell
syntax.

## Running the tests

```sh
pip install ".[test]"
pytest
```