# mygrep

A small grep-like tool that searches a text file for a fixed string and
prints the matching lines, with the matches highlighted using ANSI colours.

## Installation

```
pip install .
```

## Usage

```
mygrep [OPTIONS] PATTERN PATH
```

Options may appear before or after the positional arguments. With no option,
every line of `PATH` containing `PATTERN` is printed with the pattern in bold
red. When `-e` or `-f` is given, `PATTERN` may be left out and the only
positional argument is the file.

| Option     | Effect                                                                   |
|------------|--------------------------------------------------------------------------|
| `-r`       | Treat `PATH` as a directory and search every regular file below it, in name order; each match is prefixed with `file : ` |
| `-i`       | Compare `PATTERN` with the lower-cased line (write the pattern in lower case) |
| `-v`       | Print the lines that do **not** contain the pattern                      |
| `-f FILE`  | Read patterns from `FILE`, one per newline-terminated line; print lines matching any of them |
| `-w`       | Match whole words only (letters, digits and `_` form words)              |
| `-c`       | Print only the number of matching lines                                  |
| `-m NUM`   | Stop after `NUM` matching lines                                          |
| `-b`       | Prefix each matching line with its byte offset in the file               |
| `-q`       | Print `1` if any line matches, `0` otherwise                             |
| `-H`       | Prefix each matching line with the file name                             |
| `-h`       | Print matching lines without a file name prefix                          |
| `-e PAT`   | Give a pattern; may be repeated. Lines matching any `-e` pattern are printed |

If several options are given, each one runs in turn and writes its own output.
The command exits with status 0 after a search and 1 on a usage error or when
a file cannot be read.

Examples:

```
mygrep -c error server.log
mygrep -r main src
mygrep -i todo notes.txt
mygrep -f patterns.txt notes.txt
mygrep -e foo -e bar notes.txt
mygrep -m 3 warning server.log
```

## Library use

The pieces can be used from Python:

- `mygrep.reader`: `Line`, `read_lines`, `read_directory`, `read_patterns`,
  `byte_offset`, `classify_path`.
- `mygrep.matching`: `Style`, `scan_match`, `scan_match_folded`,
  `contains_pattern`, `is_word_boundary`, `match_whole_word`, `highlight`,
  `highlight_ignore_case`, `highlight_all`, `highlight_spans`.
- `mygrep.options`: one function per search mode, such as `search`,
  `count_matches`, `ignore_case`, `invert_match`, `whole_word`, `max_count`,
  `quiet`, `with_filename`, `with_byte_offset`, `multi_pattern`,
  `patterns_from_file`, `search_in_file` and `search_in_directory`. The
  searches yield the text to write for each selected line.

```python
from mygrep.options import count_matches, search
from mygrep.reader import read_lines

lines = read_lines("server.log")
print(count_matches(lines, "error"))
for text in search(lines, "error"):
    print(text, end="")
```

## Limitations

- Patterns are fixed strings; regular expressions are not supported.
- Only one file (or, with `-r`, one directory) is searched per run.
- Line matching uses a simple scan that does not back up after a partial
  match, so a pattern such as `ab` is not found in `aab`. `-v` and `-r` use
  an ordinary substring test instead.
- `-q` prints its result rather than setting the exit status.
- Colour output is always on; there is no option to turn it off.

## Running the tests

```
pip install .[test]
pytest
```