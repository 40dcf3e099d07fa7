"""Line-oriented input and output helpers for the command line."""

from __future__ import annotations

import os
import sys
from collections.abc import Iterable, Iterator
from typing import TextIO

# Undecodable bytes survive a read/write round trip.
ERRORS = "surrogateescape"


def open_input(path: str | None) -> TextIO:
    """Open *path* for line reading; ``None`` or ``"-"`` means standard input.

    Raises:
        OSError: If the file cannot be opened.
    """
    if path is None or path == "-":
        sys.stdin.reconfigure(errors=ERRORS, newline="\n")
        return sys.stdin
    return open(path, encoding="utf-8", errors=ERRORS, newline="\n")


def iter_lines(stream: Iterable[str]) -> Iterator[str]:
    """Yield lines from *stream* with a trailing ``\\n`` or ``\\r\\n`` removed."""
    for line in stream:
        if line.endswith("\n"):
            line = line[:-1]
            if line.endswith("\r"):
                line = line[:-1]
        yield line


def write_lines(lines: Iterable[str], out: TextIO) -> None:
    """Write each line followed by ``\\n`` and flush."""
    for line in lines:
        out.write(line)
        out.write("\n")
    out.flush()


def silence_stdout() -> None:
    """Point the stdout descriptor at ``os.devnull`` after a broken pipe.

    Keeps the interpreter from reporting a second ``BrokenPipeError`` when it
    flushes stdout at exit.
    """
    devnull = os.open(os.devnull, os.O_WRONLY)
    os.dup2(devnull, sys.stdout.fileno())
    os.close(devnull)
