"""Search modes selected by the command-line options.

Each search yields the text to write for every selected line, so callers
decide where the output goes.
"""

from __future__ import annotations

import os
import sys
from collections.abc import Iterable, Iterator
from itertools import islice

from .matching import (
    Style,
    contains_pattern,
    highlight,
    highlight_all,
    highlight_ignore_case,
    highlight_spans,
    match_whole_word,
    scan_match,
    scan_match_folded,
)
from .reader import Line, byte_offset, read_lines, read_patterns


def _matching(lines: Iterable[Line], key: str) -> Iterator[Line]:
    return (line for line in lines if scan_match(line.text, key) is not None)


def _prefix(colour: Style, label: str, separator: str = ":") -> str:
    return (
        f"{colour.value}{label}{Style.RESET.value}"
        f"{Style.CYAN.value}{separator}{Style.RESET.value}"
    )


def search(lines: Iterable[Line], key: str) -> Iterator[str]:
    """Yield each line containing key, with the key highlighted."""
    for line in _matching(lines, key):
        yield highlight(line.text, key)


def count_matches(lines: Iterable[Line], key: str) -> int:
    """Return the number of lines containing key."""
    return sum(1 for _ in _matching(lines, key))


def ignore_case(lines: Iterable[Line], key: str) -> Iterator[str]:
    """Yield lines matching key against the lower-cased line, highlighted."""
    for line in lines:
        if scan_match_folded(line.text, key) is not None:
            yield highlight_ignore_case(line.text, key)


def invert_match(lines: Iterable[Line], key: str) -> Iterator[str]:
    """Yield lines not containing key, each ending in a newline."""
    for line in lines:
        if not contains_pattern(line.text, key):
            yield line.text if line.text.endswith("\n") else line.text + "\n"


def whole_word(lines: Iterable[Line], key: str) -> Iterator[str]:
    """Yield lines where key occurs as a whole word, highlighted."""
    for line in lines:
        if match_whole_word(line.text, key):
            yield highlight(line.text, key)


def no_filename(lines: Iterable[Line], key: str) -> Iterator[str]:
    """Yield matching lines without any file name prefix."""
    return search(lines, key)


def max_count(lines: Iterable[Line], key: str, limit: int) -> Iterator[str]:
    """Yield at most limit matching lines."""
    return islice(search(lines, key), max(limit, 0))


def quiet(lines: Iterable[Line], key: str) -> bool:
    """Return True if any line contains key."""
    return any(True for _ in _matching(lines, key))


def with_filename(lines: Iterable[Line], key: str, filename: str) -> Iterator[str]:
    """Yield matching lines prefixed with the file name."""
    prefix = _prefix(Style.PURPLE, filename)
    for line in _matching(lines, key):
        yield prefix + highlight(line.text, key)


def with_byte_offset(
    lines: Iterable[Line], key: str, filename: str | os.PathLike[str]
) -> Iterator[str]:
    """Yield matching lines prefixed with the byte offset of the line in filename."""
    for line in _matching(lines, key):
        offset = byte_offset(filename, line.linenum)
        yield _prefix(Style.GREEN, str(offset)) + highlight(line.text, key)


def multi_pattern(lines: Iterable[Line], keys: Iterable[str]) -> Iterator[str]:
    """Yield lines containing any of keys, with every matched key coloured."""
    keys = list(keys)
    for line in lines:
        spans = [
            span for span in (scan_match(line.text, key) for key in keys) if span is not None
        ]
        if spans:
            yield highlight_spans(line.text, spans)


def patterns_from_file(
    lines: Iterable[Line], patterns_file: str | os.PathLike[str]
) -> Iterator[str]:
    """Search with one pattern per line of patterns_file.

    The patterns file is read at once, so a missing file raises here.
    """
    keys = read_patterns(patterns_file)
    return multi_pattern(lines, keys)


def search_in_file(path: str | os.PathLike[str], pattern: str) -> list[str]:
    """Return every line of path containing pattern, prefixed with the path."""
    if not pattern:
        raise ValueError("pattern must not be empty")
    prefix = f"{Style.PURPLE.value}{os.fspath(path)} : {Style.RESET.value}"
    return [
        prefix + highlight_all(line.text, pattern)
        for line in read_lines(path)
        if contains_pattern(line.text, pattern)
    ]


def search_in_directory(path: str | os.PathLike[str], pattern: str) -> Iterator[str]:
    """Search every regular file below path, in name order.

    The top directory is opened at once and raises OSError if it cannot be.
    Problems further down are reported on stderr and skipped.
    """
    if not pattern:
        raise ValueError("pattern must not be empty")
    with os.scandir(path) as listing:
        entries = sorted(listing, key=lambda entry: entry.name)
    return _walk(entries, pattern)


def _walk(entries: list[os.DirEntry[str]], pattern: str) -> Iterator[str]:
    for entry in entries:
        try:
            is_dir = entry.is_dir()
            is_file = entry.is_file()
            entry.stat()
        except OSError as exc:
            print(f"Error retrieving file info: {exc.strerror}", file=sys.stderr)
            continue
        if is_dir:
            try:
                found = search_in_directory(entry.path, pattern)
            except OSError as exc:
                print(f"Error opening directory: {exc.strerror}", file=sys.stderr)
                continue
            yield from found
        elif is_file:
            try:
                matches = search_in_file(entry.path, pattern)
            except OSError as exc:
                print(f"Error opening file: {exc.strerror}", file=sys.stderr)
                continue
            yield from matches