"""Filesystem helpers for reading quiz files as line sequences.

Files are read as bytes and split on ``\n``. A trailing segment without a
terminator still counts as a line, a trailing ``\r`` is dropped, and content
is decoded as UTF-8 with replacement characters so binary files never raise.
"""

from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path

_CHUNK_SIZE = 64 * 1024


def count_lines(path: Path) -> int:
    """Return the number of lines in ``path``.

    Raises:
        OSError: If the file cannot be opened or read.
    """
    total = 0
    last_byte = b"\n"
    with path.open("rb") as handle:
        while chunk := handle.read(_CHUNK_SIZE):
            total += chunk.count(b"\n")
            last_byte = chunk[-1:]
    if last_byte != b"\n":
        total += 1
    return total


def iter_lines(path: Path) -> Iterator[str]:
    """Yield decoded lines of ``path`` without their terminators."""

    with path.open("rb") as handle:
        for raw in handle:
            yield _decode(raw)


def read_lines(path: Path) -> list[str]:
    """Return every line of ``path``."""

    return list(iter_lines(path))


def read_line_range(path: Path, start: int, end: int) -> list[str]:
    """Return lines ``start`` through ``end`` (inclusive, 1-based) of ``path``."""

    if end < start:
        return []
    selected: list[str] = []
    for number, line in enumerate(iter_lines(path), start=1):
        if number > end:
            break
        if number >= start:
            selected.append(line)
    return selected


def _decode(raw: bytes) -> str:
    return raw.rstrip(b"\n").rstrip(b"\r").decode("utf-8", errors="replace")


__all__ = ["count_lines", "iter_lines", "read_lines", "read_line_range"]
