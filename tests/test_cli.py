import pytest

from mygrep.cli import main
from mygrep.matching import Style
from mygrep.options import (
    count_matches,
    ignore_case,
    invert_match,
    max_count,
    multi_pattern,
    patterns_from_file,
    quiet,
    search,
    search_in_directory,
    whole_word,
    with_byte_offset,
    with_filename,
)
from mygrep.reader import read_lines


@pytest.fixture
def sample(tmp_path):
    target = tmp_path / "sample.txt"
    target.write_text("the key line\nplain\nKey upper\nanother key\n")
    return target


def test_plain_search(sample, capsys):
    assert main(["key", str(sample)]) == 0
    assert capsys.readouterr().out == "".join(search(read_lines(sample), "key"))


def test_count(sample, capsys):
    assert main(["-c", "key", str(sample)]) == 0
    expected = count_matches(read_lines(sample), "key")
    assert capsys.readouterr().out == f"{expected}\n"


def test_quiet_found_and_not(sample, capsys):
    assert main(["-q", "key", str(sample)]) == 0
    found = quiet(read_lines(sample), "key")
    assert capsys.readouterr().out == f"{int(found)}\n"
    assert main(["-q", "absent", str(sample)]) == 0
    assert capsys.readouterr().out == "0\n"


@pytest.mark.parametrize(
    "flag, func",
    [("-i", ignore_case), ("-v", invert_match), ("-w", whole_word)],
)
def test_simple_flags(sample, capsys, flag, func):
    assert main([flag, "key", str(sample)]) == 0
    assert capsys.readouterr().out == "".join(func(read_lines(sample), "key"))


def test_options_after_positionals(sample, capsys):
    assert main(["key", str(sample), "-v"]) == 0
    assert capsys.readouterr().out == "".join(invert_match(read_lines(sample), "key"))


def test_max_count(sample, capsys):
    assert main(["-m", "1", "key", str(sample)]) == 0
    assert capsys.readouterr().out == "".join(max_count(read_lines(sample), "key", 1))


def test_with_filename_and_offset(sample, capsys):
    lines = read_lines(sample)
    assert main(["-H", "key", str(sample)]) == 0
    assert capsys.readouterr().out == "".join(with_filename(lines, "key", str(sample)))
    assert main(["-b", "key", str(sample)]) == 0
    assert capsys.readouterr().out == "".join(with_byte_offset(lines, "key", sample))


def test_multiple_e_patterns(sample, capsys):
    assert main(["-e", "plain", "-e", "upper", str(sample)]) == 0
    expected = "".join(multi_pattern(read_lines(sample), ["plain", "upper"]))
    assert capsys.readouterr().out == expected


def test_patterns_file(sample, tmp_path, capsys):
    patterns = tmp_path / "pats"
    patterns.write_text("plain\nanother\n")
    assert main(["-f", str(patterns), str(sample)]) == 0
    expected = "".join(patterns_from_file(read_lines(sample), patterns))
    assert capsys.readouterr().out == expected


def test_recursive(tmp_path, capsys):
    (tmp_path / "a.txt").write_text("key here\n")
    nested = tmp_path / "nested"
    nested.mkdir()
    (nested / "b.txt").write_text("more key\n")
    assert main(["key", str(tmp_path), "-r"]) == 0
    out = capsys.readouterr().out
    assert out == "".join(search_in_directory(str(tmp_path), "key"))
    assert out.startswith(Style.PURPLE.value + str(tmp_path / "a.txt"))


def test_missing_pattern(capsys):
    assert main([]) == 1
    assert "Pattern not provided" in capsys.readouterr().err


def test_missing_file_argument(capsys):
    assert main(["key"]) == 1
    assert "File not provided" in capsys.readouterr().err


def test_invalid_option(sample, capsys):
    assert main(["-z", "key", str(sample)]) == 1
    assert "Usage" in capsys.readouterr().err


def test_nonexistent_file(tmp_path, capsys):
    missing = tmp_path / "missing.txt"
    assert main(["key", str(missing)]) == 1
    assert str(missing) in capsys.readouterr().err


def test_bad_max_count(sample, capsys):
    assert main(["-m", "abc", "key", str(sample)]) == 1
    assert "abc" in capsys.readouterr().err


def test_e_with_count_needs_pattern(sample, capsys):
    assert main(["-e", "key", "-c", str(sample)]) == 1
    assert "Pattern not provided" in capsys.readouterr().err