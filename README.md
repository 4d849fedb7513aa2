# pipex

`pipex` runs two commands joined by a pipe. The first command reads its input
from a file, and the output of the second command goes to another file. It
does the same as this shell line:

```sh
< infile command_1 | command_2 > outfile
```

## Installation

```sh
pip install .
```

## Usage

```sh
pipex infile "command_1" "command_2" outfile
```

For example, this counts the lines in `notes.txt` that contain the word `todo`:

```sh
pipex notes.txt "grep todo" "wc -l" count.txt
```

How the arguments are handled:

- Each command is split on spaces, and empty pieces are dropped. There is no
  quoting, no globbing and no variable expansion. `"grep 'a b'"` therefore
  passes `'a` and `b'` as two separate arguments.
- The command name is looked up in the directories listed in the `PATH`
  environment variable. The first directory that holds an executable file of
  that name is used. A name that contains a slash is looked up the same way,
  with each `PATH` directory put in front of it. If `PATH` is not set, no
  command is found.
- The output file is created if it is missing and emptied if it exists. A new
  file is created with mode `0777`, less the umask.
- If the input file cannot be opened, the first command does not run. The
  second command still runs and reads empty input.
- If the output file cannot be opened, the second command does not run.

Each failure is reported on standard error under a red `ERROR` banner. The
report gives the reason, such as `infile error: No such file or directory`,
`missing command` or `path not found`.

If `pipex` gets any number of arguments other than four, it prints a usage
message on standard error and exits with status 1. It also exits with status 1
if the pipe cannot be created. Otherwise it exits with status 0 once both
commands have finished. This holds even when a stage failed to start and
whatever exit status the commands return.

## Using it from Python

The same pieces are available as functions:

```python
import os
from pipex.command import PipexError, split_words, find_executable, build_command
from pipex.cli import run_pipeline, report_error

split_words("ls   -l -a", " ")            # ['ls', '-l', '-a']
find_executable("ls", dict(os.environ))   # e.g. '/bin/ls', or None
build_command("wc -l", dict(os.environ))  # e.g. ('/usr/bin/wc', ['wc', '-l'])

errors = run_pipeline("notes.txt", "grep todo", "wc -l", "count.txt", dict(os.environ))
for error in errors:
    report_error(error)
```

- `split_words(text, sep)` raises `ValueError` if `sep` is not a single
  character.
- `build_command` raises `PipexError` when the spec is empty or when the
  command cannot be found on `PATH`.
- `run_pipeline` waits for both stages to finish. It returns a list with one
  `PipexError` for each stage that could not start. It raises `PipexError`
  itself only if the pipe cannot be created. If `env` is left out, the current
  environment is used.
- `report_error(error, stream)` writes the highlighted report to `stream`. If
  no stream is given, it writes to standard error.

A `PipexError` keeps its `message` and, where there is one, the operating
system error that caused it as `cause`.

## Running the tests

```sh
pip install ".[test]"
pytest
```