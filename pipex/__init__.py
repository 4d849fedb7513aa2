"""Run two commands connected by a pipe, with file input and file output."""

__version__ = "1.0.0"
__all__ = ["cli", "command"]