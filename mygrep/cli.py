"""Command-line entry point."""

from __future__ import annotations

import getopt
import sys

from . import options
from .reader import Line, read_lines

OPTSTRING = "rivf:wcm:bqHhe:"
USAGE = (
    "Usage: {prog} [-r] [-i] [-v] [-f FILE] [-w] [-c] [-m NUM] [-b] [-q] "
    "[-H] [-h] [-e PATTERN] PATTERN FILE"
)


class _UsageError(Exception):
    pass


def _run(opts: list[tuple[str, str]], pattern: str | None, path: str) -> int:
    out = sys.stdout

    def key() -> str:
        if pattern is None:
            raise _UsageError("Error: Pattern not provided.")
        return pattern

    needs_lines = not opts or any(opt != "-r" for opt, _ in opts)
    lines: list[Line] = read_lines(path) if needs_lines else []
    e_keys = [value for opt, value in opts if opt == "-e"]
    e_done = False

    for opt, value in opts:
        if opt == "-r":
            out.writelines(options.search_in_directory(path, key()))
        elif opt == "-i":
            out.writelines(options.ignore_case(lines, key()))
        elif opt == "-v":
            out.writelines(options.invert_match(lines, key()))
        elif opt == "-f":
            out.writelines(options.patterns_from_file(lines, value))
        elif opt == "-w":
            out.writelines(options.whole_word(lines, key()))
        elif opt == "-c":
            out.write(f"{options.count_matches(lines, key())}\n")
        elif opt == "-m":
            try:
                limit = int(value)
            except ValueError:
                raise _UsageError(f"invalid max count: {value!r}") from None
            out.writelines(options.max_count(lines, key(), limit))
        elif opt == "-b":
            out.writelines(options.with_byte_offset(lines, key(), path))
        elif opt == "-q":
            out.write(f"{int(options.quiet(lines, key()))}\n")
        elif opt == "-H":
            out.writelines(options.with_filename(lines, key(), path))
        elif opt == "-h":
            out.writelines(options.no_filename(lines, key()))
        elif opt == "-e" and not e_done:
            out.writelines(options.multi_pattern(lines, e_keys))
            e_done = True

    if not opts:
        out.writelines(options.search(lines, key()))
    return 0


def main(argv: list[str] | None = None) -> int:
    """Run the search described by argv and return the exit status."""
    args = list(sys.argv[1:] if argv is None else argv)
    prog = "mygrep"
    try:
        opts, rest = getopt.gnu_getopt(args, OPTSTRING)
    except getopt.GetoptError as exc:
        print(f"{prog}: {exc.msg}", file=sys.stderr)
        print(USAGE.format(prog=prog), file=sys.stderr)
        return 1

    patterns_given = any(opt in ("-e", "-f") for opt, _ in opts)
    pattern: str | None
    if patterns_given and len(rest) == 1:
        pattern, path = None, rest[0]
    elif len(rest) >= 2:
        pattern, path = rest[0], rest[1]
    elif not rest and not patterns_given:
        print("Error: Pattern not provided.", file=sys.stderr)
        return 1
    else:
        print("Error: File not provided.", file=sys.stderr)
        return 1

    try:
        return _run(opts, pattern, path)
    except _UsageError as exc:
        print(exc, file=sys.stderr)
        return 1
    except OSError as exc:
        print(f"{prog}: {exc.filename or path}: {exc.strerror}", file=sys.stderr)
        return 1
    except ValueError as exc:
        print(f"{prog}: {exc}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())