import os
import stat

import pytest

from pipex.command import PipexError, build_command, find_executable, split_words


def _make_tool(directory, name, executable=True):
    directory.mkdir(parents=True, exist_ok=True)
    tool = directory / name
    tool.write_text("#!/bin/sh\nexit 0\n")
    mode = stat.S_IRUSR | stat.S_IWUSR
    if executable:
        mode |= stat.S_IXUSR
    tool.chmod(mode)
    return tool


def test_split_words_basic():
    assert split_words("ls -l", " ") == ["ls", "-l"]


def test_split_words_collapses_repeated_separators():
    assert split_words("  grep   -v  x ", " ") == ["grep", "-v", "x"]


@pytest.mark.parametrize("text", ["", "   ", ":::"])
def test_split_words_empty_results(text):
    assert split_words(text, text[:1] or " ") == []


def test_split_words_rejects_long_separator():
    with pytest.raises(ValueError):
        split_words("a b", "ab")


def test_split_words_rejoin_round_trip():
    words = ["alpha", "beta", "gamma"]
    assert split_words(":".join(words), ":") == words


def test_find_executable_without_path():
    assert find_executable("ls", {}) is None


def test_find_executable_finds_tool(tmp_path):
    bin_dir = tmp_path / "bin"
    _make_tool(bin_dir, "tool")
    found = find_executable("tool", {"PATH": f"::{bin_dir}:"})
    assert found == f"{bin_dir}/tool"


def test_find_executable_first_match_wins(tmp_path):
    first = tmp_path / "a"
    second = tmp_path / "b"
    _make_tool(first, "tool")
    _make_tool(second, "tool")
    found = find_executable("tool", {"PATH": f"{first}:{second}"})
    assert found == f"{first}/tool"


def test_find_executable_skips_non_executable(tmp_path):
    first = tmp_path / "a"
    second = tmp_path / "b"
    _make_tool(first, "tool", executable=False)
    _make_tool(second, "tool")
    found = find_executable("tool", {"PATH": f"{first}:{second}"})
    assert found == f"{second}/tool"


def test_find_executable_missing(tmp_path):
    assert find_executable("nothing-here", {"PATH": str(tmp_path)}) is None


def test_build_command_success(tmp_path):
    bin_dir = tmp_path / "bin"
    _make_tool(bin_dir, "tool")
    path, args = build_command("tool  -x  y", {"PATH": str(bin_dir)})
    assert path == f"{bin_dir}/tool"
    assert args == ["tool", "-x", "y"]


@pytest.mark.parametrize("spec", ["", "    "])
def test_build_command_missing(spec):
    with pytest.raises(PipexError) as info:
        build_command(spec, {"PATH": "/bin"})
    assert info.value.message == "missing command"


def test_build_command_not_found(tmp_path):
    with pytest.raises(PipexError) as info:
        build_command("nothing-here", {"PATH": str(tmp_path)})
    assert info.value.message == "path not found"
    assert info.value.cause is None


def test_error_str_includes_cause():
    cause = FileNotFoundError(2, os.strerror(2))
    error = PipexError("infile error", cause)
    assert str(error) == f"infile error: {os.strerror(2)}"
    assert error.cause is cause


def test_error_str_without_cause():
    assert str(PipexError("path not found")) == "path not found"