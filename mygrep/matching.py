"""Substring scanning and ANSI highlighting of matched lines."""

from __future__ import annotations

from collections.abc import Iterable
from enum import Enum


class Style(str, Enum):
    """ANSI escape sequences used to colour output."""

    RESET = "\033[0m"
    BOLD = "\033[1m"
    CYAN = "\033[0;36m"
    PURPLE = "\033[0;35m"
    GREEN = "\033[0;32m"
    RED = "\033[0;31m"
    HIGHLIGHT = "\033[31m"


def _scan(line: str, key: str, haystack: str) -> tuple[int, int] | None:
    # A mismatch after a partial match resets the scan without re-examining
    # the current character, so "aab" does not contain "ab" here.
    j = 0
    for i, ch in enumerate(haystack):
        if j == len(key):
            return i - j, i
        if ch == key[j]:
            j += 1
        elif j:
            j = 0
    if j == len(key):
        return len(line) - j, len(line)
    return None


def scan_match(line: str, key: str) -> tuple[int, int] | None:
    """Return the (start, end) span of the first match of key in line, or None."""
    return _scan(line, key, line)


def scan_match_folded(line: str, key: str) -> tuple[int, int] | None:
    """Like scan_match, but the line is lower-cased before comparison.

    The key is used as given, so an upper-case key never matches.
    """
    return _scan(line, key, line.lower())


def contains_pattern(line: str, key: str) -> bool:
    """True if key occurs anywhere in line."""
    return key in line


def is_word_boundary(char: str) -> bool:
    """True if char is neither an ASCII letter or digit nor an underscore."""
    return not (char.isascii() and char.isalnum()) and char != "_"


def match_whole_word(line: str, pattern: str) -> bool:
    """True if pattern occurs in line delimited by word boundaries."""
    size = len(pattern)
    pos = line.find(pattern)
    while 0 <= pos < len(line):
        before_ok = pos == 0 or is_word_boundary(line[pos - 1])
        after = pos + size
        after_ok = after >= len(line) or is_word_boundary(line[after])
        if before_ok and after_ok:
            return True
        pos = line.find(pattern, pos + 1)
    return False


def _highlight(line: str, key: str, same) -> str:
    if not key:
        return line
    marked = Style.HIGHLIGHT.value + Style.BOLD.value
    out: list[str] = []
    pending = ""
    for ch in line:
        if same(ch, key[len(pending)]):
            pending += ch
            if len(pending) == len(key):
                out.append(marked + pending + Style.RESET.value)
                pending = ""
        else:
            out.append(pending)
            pending = ""
            out.append(ch)
    out.append(pending)
    return "".join(out)


def highlight(line: str, key: str) -> str:
    """Return line with each scanned occurrence of key coloured."""
    return _highlight(line, key, lambda ch, k: ch == k)


def highlight_ignore_case(line: str, key: str) -> str:
    """Return line with key highlighted where it matches as given or upper-cased."""
    return _highlight(line, key, lambda ch, k: ch == k or ch == k.upper())


def highlight_all(line: str, pattern: str) -> str:
    """Return line with every non-overlapping occurrence of pattern in red."""
    if not pattern:
        raise ValueError("pattern must not be empty")
    coloured = Style.RED.value + pattern + Style.RESET.value
    return coloured.join(line.split(pattern))


def highlight_spans(line: str, spans: Iterable[tuple[int, int]]) -> str:
    """Return line with the given (start, end) spans coloured red.

    Spans are taken in sorted order; highlighting stops at the first span
    that overlaps an earlier one or lies past the end of the line.
    """
    out: list[str] = []
    pos = 0
    for start, end in sorted(spans):
        if start < pos or start >= len(line):
            break
        out.append(line[pos:start])
        out.append(Style.RED.value + line[start:end] + Style.RESET.value)
        pos = end
    out.append(line[pos:])
    return "".join(out)