"""Ordering of directory entries and command-line operands."""

from __future__ import annotations

import os
import stat
import sys
from typing import Callable, Dict, Iterable, List, Optional, Sequence, TypeVar

from pyftls.cstring import strcasecmp
from pyftls.options import Options

T = TypeVar("T")

Comparator = Callable[[T, T], int]


def quicksort(items: Iterable[T], compare: Comparator) -> List[T]:
    """Return a new list of ``items`` ordered by ``compare``.

    Uses a Lomuto-partition quicksort with the last element as pivot, so the
    relative order of elements that compare equal follows that algorithm
    rather than being stable.
    """
    result = list(items)
    pending = [(0, len(result) - 1)]
    while pending:
        low, high = pending.pop()
        if low >= high:
            continue
        pivot = result[high]
        boundary = low - 1
        for j in range(low, high):
            if compare(result[j], pivot) < 0:
                boundary += 1
                result[boundary], result[j] = result[j], result[boundary]
        split = boundary + 1
        result[split], result[high] = result[high], result[split]
        pending.append((split + 1, high))
        pending.append((low, split - 1))
    return result


def compare_names(a: str, b: str) -> int:
    """Case-insensitive name comparison; negative when ``a`` sorts first."""
    return strcasecmp(a, b)


def _reverse_names(a: str, b: str) -> int:
    return strcasecmp(b, a)


def _mtime_lookup(directory: str) -> Callable[[str], Optional[int]]:
    cache: Dict[str, Optional[int]] = {}

    def mtime(name: str) -> Optional[int]:
        if name not in cache:
            try:
                cache[name] = int(os.lstat(f"{directory}/{name}").st_mtime)
            except OSError as exc:
                print(f"lstat: {exc.strerror}", file=sys.stderr)
                cache[name] = None
        return cache[name]

    return mtime


def sort_entries(names: Sequence[str], directory: str, options: Options) -> List[str]:
    """Order the entries of ``directory`` as the listing options ask.

    By default names are ordered case-insensitively. With time sorting the
    newest modification time comes first. Reversal inverts either order.
    An entry that cannot be examined compares equal to everything.
    """
    mtime = _mtime_lookup(directory)

    def newest_first(a: str, b: str) -> int:
        first, second = mtime(a), mtime(b)
        if first is None or second is None:
            return 0
        return second - first

    def oldest_first(a: str, b: str) -> int:
        return -newest_first(a, b)

    ordered = quicksort(names, newest_first if options.sort_time else compare_names)
    if options.reverse:
        ordered = quicksort(ordered, oldest_first if options.sort_time else _reverse_names)
    return ordered


def _is_directory(path: str) -> bool:
    try:
        return stat.S_ISDIR(os.stat(path).st_mode)
    except OSError:
        return False


def sort_paths(paths: Sequence[str], reverse: bool = False) -> List[str]:
    """Order operands: non-directories first, then directories, each by name."""
    compare = _reverse_names if reverse else compare_names
    others = [path for path in paths if not _is_directory(path)]
    directories = [path for path in paths if _is_directory(path)]
    return quicksort(others, compare) + quicksort(directories, compare)