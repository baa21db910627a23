"""Helpers for lists of strings."""

from __future__ import annotations

from typing import List, Optional, Sequence


def matrix_len(m: Optional[Sequence[str]]) -> int:
    """Number of entries in ``m``; a missing list counts as empty."""
    return 0 if m is None else len(m)


def matrix_dup(m: Sequence[str]) -> List[str]:
    """Return an independent copy of ``m``."""
    return list(m)


def matrix_extend(m: Optional[Sequence[str]], item: Optional[str]) -> Optional[List[str]]:
    """Return a new list with ``item`` appended.

    When ``item`` is None the original list is returned unchanged.
    """
    if item is None:
        return m if m is None or isinstance(m, list) else list(m)
    return [*(m or ()), item]