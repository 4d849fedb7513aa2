"""Run ``infile cmd1 | cmd2 > outfile`` as a two-stage pipeline."""

from __future__ import annotations

import os
import subprocess
import sys
from collections.abc import Mapping
from typing import TextIO

from pipex.command import PipexError, build_command

_ERROR_BANNER = "\033[1;41;5m ERROR \033[0m\n"
_ERROR_COLOR = "\033[91m"
_RESET = "\033[0m"
_USAGE = (
    "\033[1;31mPlease enter './pipex infile comand_1"
    " comand_2 outfile'\033[0m\n"
)


def report_error(error: PipexError, stream: TextIO | None = None) -> None:
    """Write a highlighted error report for ``error`` to ``stream`` (stderr by default)."""
    out = sys.stderr if stream is None else stream
    out.write(_ERROR_BANNER)
    out.write(_ERROR_COLOR)
    out.write(f"{error}\n")
    out.write(_RESET)
    out.flush()


def _start(
    spec: str, env: Mapping[str, str], stdin: int, stdout: int
) -> subprocess.Popen:
    path, args = build_command(spec, env)
    try:
        return subprocess.Popen(
            args, executable=path, stdin=stdin, stdout=stdout, env=dict(env)
        )
    except OSError as exc:
        raise PipexError("execve error", exc) from exc


def run_pipeline(
    infile: str,
    first: str,
    second: str,
    outfile: str,
    env: Mapping[str, str] | None = None,
) -> list[PipexError]:
    """Run both stages, wait for them, and return the errors each stage hit.

    A failing stage does not stop the other one. Raises PipexError if the
    pipe between the stages cannot be created.
    """
    environment: Mapping[str, str] = os.environ if env is None else env
    try:
        read_end, write_end = os.pipe()
    except OSError as exc:
        raise PipexError("pipe error", exc) from exc

    errors: list[PipexError] = []
    processes: list[subprocess.Popen] = []

    try:
        try:
            source = os.open(infile, os.O_RDONLY)
        except OSError as exc:
            errors.append(PipexError("infile error", exc))
        else:
            try:
                processes.append(_start(first, environment, source, write_end))
            except PipexError as exc:
                errors.append(exc)
            finally:
                os.close(source)
    finally:
        os.close(write_end)

    try:
        try:
            sink = os.open(outfile, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, 0o777)
        except OSError as exc:
            errors.append(PipexError("outfile error", exc))
        else:
            try:
                processes.append(_start(second, environment, read_end, sink))
            except PipexError as exc:
                errors.append(exc)
            finally:
                os.close(sink)
    finally:
        os.close(read_end)

    for process in processes:
        process.wait()
    return errors


def main(argv: list[str] | None = None) -> int:
    """Command-line entry point: ``pipex infile cmd1 cmd2 outfile``."""
    args = sys.argv[1:] if argv is None else argv
    if len(args) != 4:
        sys.stderr.write(_USAGE)
        return 1
    infile, first, second, outfile = args
    try:
        errors = run_pipeline(infile, first, second, outfile)
    except PipexError as exc:
        report_error(exc)
        return 1
    for error in errors:
        report_error(error)
    return 0


if __name__ == "__main__":
    sys.exit(main())