"""Reading files and directories into numbered lines."""

from __future__ import annotations

import os
import stat
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Literal


@dataclass(frozen=True)
class Line:
    """One line of a file, newline included, numbered from 0 within its file."""

    text: str
    linenum: int


def read_lines(path: str | os.PathLike[str]) -> list[Line]:
    """Split a file into lines on '\\n', keeping the newline characters."""
    with open(path, encoding="utf-8", errors="surrogateescape", newline="") as handle:
        content = handle.read()
    *complete, tail = content.split("\n")
    texts = [part + "\n" for part in complete]
    if tail:
        texts.append(tail)
    return [Line(text, number) for number, text in enumerate(texts)]


def read_directory(path: str | os.PathLike[str]) -> list[Line]:
    """Read every regular file below path, recursing into subdirectories.

    Entries are visited in name order. Entries that cannot be examined are
    reported on stderr and skipped; other kinds of entry are reported on stdout.
    """
    try:
        entries = sorted(os.scandir(path), key=lambda entry: entry.name)
    except OSError as exc:
        print(f"opendir failed: {exc.strerror}", file=sys.stderr)
        return []
    lines: list[Line] = []
    for entry in entries:
        try:
            mode = entry.stat().st_mode
        except OSError as exc:
            print(f"stat: {exc.strerror}", file=sys.stderr)
            continue
        if stat.S_ISREG(mode):
            lines.extend(read_lines(entry.path))
        elif stat.S_ISDIR(mode):
            lines.extend(read_directory(entry.path))
        else:
            print(f"Other: {entry.name}")
    return lines


def read_patterns(path: str | os.PathLike[str]) -> list[str]:
    """Return one pattern per newline-terminated line of the file."""
    content = Path(path).read_text(encoding="utf-8", errors="surrogateescape")
    return content.split("\n")[:-1]


def byte_offset(path: str | os.PathLike[str], linenum: int) -> int:
    """Return the byte offset at which line number linenum (from 0) starts."""
    data = Path(path).read_bytes()
    offset = 0
    for _ in range(linenum):
        newline = data.find(b"\n", offset)
        if newline < 0:
            raise ValueError(f"{os.fspath(path)} has fewer than {linenum + 1} lines")
        offset = newline + 1
    return offset


def classify_path(path: str | os.PathLike[str]) -> Literal["file", "directory"] | None:
    """Return "file" or "directory" for path, or None for any other kind.

    Raises OSError if the path cannot be examined.
    """
    mode = os.stat(path).st_mode
    if stat.S_ISREG(mode):
        return "file"
    if stat.S_ISDIR(mode):
        return "directory"
    return None