"""Directory listing output and the command entry point."""

from __future__ import annotations

import grp
import os
import pwd
import stat
import sys
import time
from typing import List, Optional, Sequence, TextIO, Tuple

from pyftls.fileinfo import (
    RESET,
    color_for,
    digit_count,
    error_message,
    has_common_char,
    is_regular_file,
    need_extra_newline,
    size_width,
    subdirectory,
    total_blocks,
)
from pyftls.options import OptionError, Options, parse_options, rearrange_argv
from pyftls.printf import format_printf
from pyftls.sorting import sort_entries, sort_paths

_PERMISSIONS = (
    (stat.S_IRUSR, "r"),
    (stat.S_IWUSR, "w"),
    (stat.S_IXUSR, "x"),
    (stat.S_IRGRP, "r"),
    (stat.S_IWGRP, "w"),
    (stat.S_IXGRP, "x"),
    (stat.S_IROTH, "r"),
    (stat.S_IWOTH, "w"),
    (stat.S_IXOTH, "x"),
)


def _perror(label: str, exc: OSError) -> None:
    print(f"{label}: {exc.strerror}", file=sys.stderr)


def _owner_name(uid: int) -> str:
    try:
        return pwd.getpwuid(uid).pw_name
    except KeyError:
        return str(uid)


def _group_name(gid: int) -> str:
    try:
        return grp.getgrgid(gid).gr_name
    except KeyError:
        return str(gid)


def _type_char(mode: int) -> str:
    if stat.S_ISDIR(mode):
        return "d"
    if stat.S_ISLNK(mode):
        return "l"
    return "-"


def _inspect(path: str) -> Optional[Tuple[os.stat_result, Optional[str]]]:
    """lstat ``path`` and read its link target; report and give None on failure."""
    try:
        st = os.lstat(path)
    except OSError as exc:
        _perror("lstat", exc)
        return None
    target = None
    if stat.S_ISLNK(st.st_mode):
        try:
            target = os.readlink(path)
        except OSError as exc:
            _perror("readlink", exc)
            return None
    return st, target


class Lister:
    """Writes directory listings for a set of :class:`Options`."""

    def __init__(self, options: Options, out: Optional[TextIO] = None) -> None:
        self.options = options
        self.out = out if out is not None else sys.stdout
        self.size_width = 0

    def _write(self, text: str) -> None:
        self.out.write(text)

    def _long_line(self, display: str, st: os.stat_result, target: Optional[str]) -> str:
        mode = st.st_mode
        perms = "".join(ch if mode & bit else "-" for bit, ch in _PERMISSIONS)
        space = self.size_width - digit_count(st.st_size)
        if st.st_size == 0:
            space -= 1
        padding = " " * max(space + 1, 0)
        stamp = time.ctime(st.st_mtime)
        month, day, hour, minute = stamp[4:7], stamp[8:10], stamp[11:13], stamp[14:16]
        if self.options.colorize:
            shown = f"{color_for(display, st=st)}{display}{RESET}"
        else:
            shown = display
        line = (
            f"{_type_char(mode)}{perms} {st.st_nlink}"
            f" {_owner_name(st.st_uid)} {_group_name(st.st_gid)}"
            f"{padding}{st.st_size} {month} {day} {hour}:{minute} {shown}"
        )
        if target is not None:
            line += f" -> {target}"
        return line

    def long_entry(self, directory: str, name: str) -> Optional[str]:
        """Long-format line for ``name`` inside ``directory``.

        Returns None, after reporting on stderr, when the entry cannot be read.
        """
        info = _inspect(f"{directory}/{name}")
        if info is None:
            return None
        return self._long_line(name, *info)

    def symlink_entry(self, path: str) -> Optional[str]:
        """Long-format line for the operand ``path`` itself.

        A symbolic link's line ends with its target and a newline.
        """
        info = _inspect(path)
        if info is None:
            return None
        st, target = info
        line = self._long_line(path, st, target)
        return line + "\n" if target is not None else line

    def _write_entry(self, directory: str, name: str, has_next: bool) -> None:
        if self.options.long_format:
            self._write("\n")
            line = self.long_entry(directory, name)
            if line is not None:
                self._write(line)
        elif self.options.colorize:
            color = color_for(name, directory)
            self._write(format_printf("%s%s%s%s", color, name, "  " if has_next else "", RESET))
        else:
            self._write(name + ("\n" if has_next else ""))

    def print_list(self, directory: str, names: Sequence[str]) -> List[str]:
        """Write the already ordered ``names`` of ``directory``.

        Returns the subdirectories to descend into when listing recursively.
        """
        flags = self.options.flags
        try:
            self.size_width = size_width(directory, names)
        except OSError as exc:
            failed = exc.filename if exc.filename is not None else directory
            self._write(error_message(str(failed), exc, bool(flags)) + "\n")
        if self.options.long_format:
            try:
                total = total_blocks(directory, self.options.show_all)
            except OSError as exc:
                _perror("opendir", exc)
                total = -1
            self._write(f"total {total}")
        to_expand: List[str] = []
        for index, name in enumerate(names):
            has_next = index + 1 < len(names)
            if self.options.show_all or not has_common_char(name, "."):
                self._write_entry(directory, name, has_next)
            if name not in (".", "..") and self.options.recursive:
                sub = subdirectory(directory, name)
                if sub is not None:
                    to_expand.append(sub)
        if flags:
            self._write("\n")
        return to_expand

    def _header(self, mlt: int, path: str, argc: int) -> None:
        flags = self.options.flags
        if mlt >= 1:
            if mlt >= 2 and not flags:
                self._write(f"\n{path}:\n")
            elif argc >= 2 or self.options.recursive:
                self._write(f"{path}:\n")
        elif self.options.recursive:
            self._write(f"{path}:\n")

    def run(self, mlt: int, path: str, argc: int) -> int:
        """List one operand; ``mlt`` is its position and ``argc`` the operand count.

        Returns 1 when the operand cannot be listed or is a symbolic link shown
        in long format, otherwise 0.
        """
        try:
            entries = os.listdir(path)
        except OSError as exc:
            if is_regular_file(path):
                self._write(format_printf("%s%s%s", color_for(path, path), path, RESET))
                return 0
            self._write(error_message(path, exc, bool(self.options.flags)))
            return 1
        self._header(mlt, path, argc)
        if self.options.long_format:
            try:
                st = os.lstat(path)
            except OSError as exc:
                _perror("lstat", exc)
                return 0
            if stat.S_ISLNK(st.st_mode):
                line = self.symlink_entry(path)
                if line is not None:
                    self._write(line)
                return 1
        names = [
            name
            for name in (".", "..", *entries)
            if self.options.show_all or not name.startswith(".")
        ]
        ordered = sort_entries(names, path, self.options)
        to_expand = self.print_list(path, ordered)
        if self.options.recursive:
            for sub in to_expand:
                self._write("\n")
                self.run(1, sub, 0)
        return 0


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Command entry point; returns the exit status."""
    args = list(sys.argv[1:] if argv is None else argv)
    try:
        options = parse_options(args)
    except OptionError as exc:
        print(exc, file=sys.stderr)
        return 1
    out = sys.stdout
    isatty = getattr(out, "isatty", None)
    options.colorize = bool(isatty()) if isatty is not None else False
    lister = Lister(options, out)
    if not options.paths:
        lister.run(0, ".", 0)
    else:
        has_flag_argument = len(rearrange_argv(args)) > len(options.paths)
        first = 2 if has_flag_argument else 1
        total = first + len(options.paths)
        ordered = sort_paths(options.paths, options.reverse)
        for index, path in enumerate(ordered, start=first):
            lister.run(index, path, len(ordered))
            if need_extra_newline(index, total):
                out.write("\n")
    if not options.flags:
        out.write("\n")
    return 0