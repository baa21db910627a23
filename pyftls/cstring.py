"""String searching and comparison with NUL-terminated semantics.

Strings end at their first NUL character, as they would in a C buffer; the
terminator itself can be searched for and takes part in comparisons as code 0.
Search functions return an index, or None when nothing is found.
"""

from __future__ import annotations

from typing import Optional, Union

from pyftls.charclass import to_lower

CharLike = Union[int, str]


def _cstr(s: str) -> str:
    return s.split("\0", 1)[0]


def _target(c: CharLike) -> str:
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    if isinstance(c, int):
        return chr(c & 0xFF)
    raise TypeError(f"expected int or str, got {type(c).__name__}")


def _code_at(s: str, i: int) -> int:
    return ord(s[i]) if i < len(s) else 0


def strlen(s: str) -> int:
    """Length of ``s`` up to its first NUL."""
    return len(_cstr(s))


def strchr(s: str, c: CharLike) -> Optional[int]:
    """Index of the first ``c`` in ``s``; searching for NUL gives the length."""
    text = _cstr(s)
    target = _target(c)
    if target == "\0":
        return len(text)
    index = text.find(target)
    return None if index < 0 else index


def strrchr(s: str, c: CharLike) -> Optional[int]:
    """Index of the last ``c`` in ``s``; searching for NUL gives the length."""
    text = _cstr(s)
    target = _target(c)
    if target == "\0":
        return len(text)
    index = text.rfind(target)
    return None if index < 0 else index


def strncmp(a: str, b: str, n: int) -> int:
    """Compare at most ``n`` characters; return the code difference at the first mismatch."""
    first, second = _cstr(a), _cstr(b)
    for i in range(n):
        x, y = _code_at(first, i), _code_at(second, i)
        if x == 0 and y == 0:
            return 0
        if x != y:
            return x - y
    return 0


def strnstr(haystack: str, needle: str, length: int) -> Optional[int]:
    """Index of ``needle`` within the first ``length`` characters of ``haystack``.

    An empty needle matches at index 0.
    """
    hay, pattern = _cstr(haystack), _cstr(needle)
    if not pattern:
        return 0
    limit = min(len(hay), max(length, 0))
    index = hay[:limit].find(pattern)
    return None if index < 0 else index


def strcasecmp(a: str, b: str) -> int:
    """Compare ignoring ASCII case; return the lower-cased code difference."""
    first, second = _cstr(a), _cstr(b)
    for i in range(max(len(first), len(second)) + 1):
        x = to_lower(_code_at(first, i))
        y = to_lower(_code_at(second, i))
        if x != y or x == 0:
            return x - y
    return 0