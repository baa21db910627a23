"""File-system queries and small formatting helpers for the lister."""

from __future__ import annotations

import errno as errno_codes
import os
import stat
from typing import Iterable, Optional, Union

PROGRAM_NAME = "ft_ls"

BLUE = "\033[1;34m"
CYAN = "\033[1;36m"
GREEN = "\033[1;32m"
RED = "\033[1;31m"
RESET = "\033[0m"

ARCHIVE_EXTENSIONS = frozenset({".zip", ".tar", ".gz", ".bz2", ".rar", ".7z", ".tgz"})


def need_extra_newline(i: int, argc: int) -> bool:
    """True when operand ``i`` is not the last of ``argc`` arguments."""
    return i < argc - 1


def has_common_char(a: str, b: str) -> bool:
    """True when ``a`` and ``b`` hold the same character at some shared position."""
    return any(x == y for x, y in zip(a, b))


def digit_count(n: int) -> int:
    """Number of decimal digits in a positive ``n``; zero for ``n <= 0``."""
    count = 0
    while n > 0:
        n //= 10
        count += 1
    return count


def total_blocks(directory: str, show_all: bool) -> int:
    """Disk usage of the directory's entries in 1024-byte blocks.

    Entries whose names begin with a dot (including ``.`` and ``..``) count
    only when ``show_all`` is set. Raises :class:`OSError` when the directory
    cannot be read; entries that cannot be examined are skipped.
    """
    names = [".", "..", *os.listdir(directory)]
    total = 0
    for name in names:
        if name.startswith(".") and not show_all:
            continue
        try:
            total += os.lstat(f"{directory}/{name}").st_blocks
        except OSError:
            continue
    return total // 2


def is_archive(filename: str) -> bool:
    """True when the text from the last dot on is a known archive extension."""
    dot = filename.rfind(".")
    return dot >= 0 and filename[dot:] in ARCHIVE_EXTENSIONS


def join_path(base: str, name: str) -> str:
    """Join ``base`` and ``name`` with exactly one separator between them.

    A ``base`` ending in ``/`` or ``.`` absorbs a leading slash of ``name``.
    """
    if not base:
        raise ValueError("base path must not be empty")
    last = base[-1]
    leading_slash = name.startswith("/")
    if last in "/." and leading_slash:
        return base + name[1:] if len(name) > 1 else base
    if last == "/" or leading_slash:
        return base + name
    return f"{base}/{name}"


def subdirectory(directory: str, name: str) -> Optional[str]:
    """Full path of ``name`` inside ``directory`` if it is a real directory.

    Symbolic links, other file types and missing entries give None.
    """
    path = join_path(join_path(directory, "/"), name)
    try:
        mode = os.lstat(path).st_mode
    except OSError:
        return None
    if stat.S_ISLNK(mode) or not stat.S_ISDIR(mode):
        return None
    return path


def is_regular_file(path: str) -> bool:
    """True when ``path`` (following links) is a regular file."""
    try:
        return stat.S_ISREG(os.stat(path).st_mode)
    except OSError:
        return False


def size_width(directory: str, names: Iterable[str]) -> int:
    """Widest decimal size among the named entries of ``directory``.

    Raises :class:`OSError` if an entry cannot be examined.
    """
    return max(
        (digit_count(os.lstat(f"{directory}/{name}").st_size) for name in names),
        default=0,
    )


def _color_of_mode(name: str, mode: int) -> str:
    if stat.S_ISDIR(mode):
        return BLUE
    if stat.S_ISLNK(mode):
        return CYAN
    if mode & stat.S_IXUSR:
        return GREEN
    if is_archive(name):
        return RED
    return ""


def color_for(
    name: str, directory: Optional[str] = None, st: Optional[os.stat_result] = None
) -> Optional[str]:
    """Terminal colour sequence for an entry, or "" for plain files.

    Without ``st`` the entry is looked up as ``directory/name`` and then as
    ``name`` itself; None is returned when neither exists.
    """
    if st is None:
        candidates = [f"{directory}/{name}"] if directory is not None else []
        candidates.append(name)
        for candidate in candidates:
            try:
                st = os.lstat(candidate)
                break
            except OSError:
                continue
        else:
            return None
    return _color_of_mode(name, st.st_mode)


def error_message(path: str, err: Union[OSError, int], newline: bool) -> str:
    """Text reported when ``path`` cannot be listed because of ``err``."""
    code = err.errno if isinstance(err, OSError) else err
    reason = os.strerror(code) if code is not None else str(err)
    ending = "\n" if newline else ""
    if code == errno_codes.EACCES:
        return f"{PROGRAM_NAME}: cannot open directory {path}: {reason}{ending}"
    return f"{PROGRAM_NAME}: cannot access '{path}': {reason}{ending}"


def format_bits(num: int) -> str:
    """The five least significant bits of ``num``, most significant first."""
    return format(num & 0b11111, "05b")