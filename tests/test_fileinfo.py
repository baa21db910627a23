import errno
import os

import pytest

from pyftls.fileinfo import (
    BLUE,
    CYAN,
    GREEN,
    RED,
    color_for,
    digit_count,
    error_message,
    format_bits,
    has_common_char,
    is_archive,
    is_regular_file,
    join_path,
    need_extra_newline,
    size_width,
    subdirectory,
    total_blocks,
)
from pyftls.options import Flag


def test_need_extra_newline():
    assert need_extra_newline(1, 3) is True
    assert need_extra_newline(2, 3) is False


def test_has_common_char():
    assert has_common_char(".hidden", ".") is True
    assert has_common_char("file", ".") is False
    assert has_common_char("", ".") is False
    assert has_common_char("ab", "xb") is True


@pytest.mark.parametrize("k", range(1, 10))
def test_digit_count_powers_of_ten(k):
    assert digit_count(10 ** k) == k + 1
    assert digit_count(10 ** k - 1) == k


def test_digit_count_non_positive_is_zero():
    assert digit_count(0) == 0
    assert digit_count(-42) == 0


@pytest.mark.parametrize(
    "name", ["a.zip", "a.tar", "a.gz", "a.bz2", "a.rar", "a.7z", "a.tgz", "a.tar.gz"]
)
def test_is_archive_true(name):
    assert is_archive(name) is True


@pytest.mark.parametrize("name", ["notes.txt", "zip", "archive.zip.txt", ""])
def test_is_archive_false(name):
    assert is_archive(name) is False


@pytest.mark.parametrize(
    "base, name, expected",
    [
        ("dir", "file", "dir/file"),
        ("dir/", "file", "dir/file"),
        (".", "/", "."),
        ("./", "/x", "./x"),
        ("dir", "/x", "dir/x"),
        ("dir/", "/", "dir/"),
    ],
)
def test_join_path(base, name, expected):
    assert join_path(base, name) == expected


def test_join_path_empty_base():
    with pytest.raises(ValueError):
        join_path("", "file")


def test_subdirectory(tmp_path):
    (tmp_path / "sub").mkdir()
    (tmp_path / "file").write_text("x")
    os.symlink(tmp_path / "sub", tmp_path / "link")
    base = str(tmp_path)
    assert subdirectory(base, "sub") == base + "/sub"
    assert subdirectory(base, "file") is None
    assert subdirectory(base, "link") is None
    assert subdirectory(base, "missing") is None


def test_is_regular_file(tmp_path):
    (tmp_path / "file").write_text("x")
    assert is_regular_file(str(tmp_path / "file")) is True
    assert is_regular_file(str(tmp_path)) is False
    assert is_regular_file(str(tmp_path / "missing")) is False


def test_size_width(tmp_path):
    (tmp_path / "small").write_bytes(b"x" * 7)
    (tmp_path / "big").write_bytes(b"x" * 1234)
    (tmp_path / "empty").write_bytes(b"")
    assert size_width(str(tmp_path), ["small", "big", "empty"]) == digit_count(1234)
    assert size_width(str(tmp_path), ["empty"]) == 0
    assert size_width(str(tmp_path), []) == 0


def test_size_width_missing_entry(tmp_path):
    with pytest.raises(FileNotFoundError):
        size_width(str(tmp_path), ["missing"])


def test_total_blocks_empty_directory(tmp_path):
    assert total_blocks(str(tmp_path), False) == 0


def test_total_blocks_show_all_counts_more(tmp_path):
    (tmp_path / ".hidden").write_bytes(b"x" * 10000)
    (tmp_path / "visible").write_bytes(b"x" * 10000)
    hidden_too = total_blocks(str(tmp_path), True)
    visible = total_blocks(str(tmp_path), False)
    assert visible >= 0
    assert hidden_too >= visible


def test_total_blocks_missing_directory(tmp_path):
    with pytest.raises(OSError):
        total_blocks(str(tmp_path / "missing"), False)


def test_color_for_kinds(tmp_path):
    (tmp_path / "sub").mkdir()
    (tmp_path / "run.sh").write_text("echo")
    os.chmod(tmp_path / "run.sh", 0o755)
    (tmp_path / "data.tar").write_text("x")
    (tmp_path / "plain.txt").write_text("x")
    os.chmod(tmp_path / "plain.txt", 0o644)
    os.symlink(tmp_path / "plain.txt", tmp_path / "link")
    base = str(tmp_path)
    assert color_for("sub", base) == BLUE
    assert color_for("run.sh", base) == GREEN
    assert color_for("data.tar", base) == RED
    assert color_for("plain.txt", base) == ""
    assert color_for("link", base) == CYAN


def test_color_for_falls_back_to_name(tmp_path):
    full = str(tmp_path)
    assert color_for(full, "/nonexistent-base") == BLUE


def test_color_for_missing_is_none(tmp_path):
    assert color_for("missing", str(tmp_path)) is None


def test_color_for_uses_given_stat(tmp_path):
    st = os.lstat(tmp_path)
    assert color_for("whatever", None, st) == BLUE


def test_error_message_permission_denied():
    err = PermissionError(errno.EACCES, os.strerror(errno.EACCES))
    expected = f"ft_ls: cannot open directory /x: {os.strerror(errno.EACCES)}\n"
    assert error_message("/x", err, True) == expected


def test_error_message_other_error():
    expected = f"ft_ls: cannot access '/x': {os.strerror(errno.ENOENT)}"
    assert error_message("/x", errno.ENOENT, False) == expected


@pytest.mark.parametrize("n", range(64))
def test_format_bits_round_trip(n):
    bits = format_bits(n)
    assert len(bits) == 5
    assert int(bits, 2) == n & 0b11111


def test_format_bits_flags():
    assert format_bits(Flag.LONG_FORMAT | Flag.SORT_TIME) == "10001"