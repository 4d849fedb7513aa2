"""Resolving command specifications into executable paths and argument lists."""

from __future__ import annotations

import os
from collections.abc import Mapping


class PipexError(Exception):
    """A pipeline failure, with the operating-system error that caused it, if any."""

    def __init__(self, message: str, cause: BaseException | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.cause = cause

    def __str__(self) -> str:
        if self.cause is None:
            return self.message
        errno = getattr(self.cause, "errno", None)
        reason = os.strerror(errno) if errno is not None else str(self.cause)
        return f"{self.message}: {reason}"


def split_words(text: str, sep: str) -> list[str]:
    """Split ``text`` on the single character ``sep``, dropping empty pieces."""
    if len(sep) != 1:
        raise ValueError("separator must be a single character")
    return [word for word in text.split(sep) if word]


def find_executable(name: str, env: Mapping[str, str]) -> str | None:
    """Return the first ``dir/name`` on the PATH in ``env`` that is executable."""
    search_path = env.get("PATH")
    if search_path is None:
        return None
    for directory in split_words(search_path, ":"):
        candidate = f"{directory}/{name}"
        if os.access(candidate, os.X_OK):
            return candidate
    return None


def build_command(spec: str, env: Mapping[str, str]) -> tuple[str, list[str]]:
    """Turn a space-separated command spec into ``(executable, argv)``.

    Raises PipexError when the spec is empty or the command is not on the PATH.
    """
    args = split_words(spec, " ")
    if not args:
        raise PipexError("missing command")
    path = find_executable(args[0], env)
    if path is None:
        raise PipexError("path not found")
    return path, args