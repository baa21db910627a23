"""ASCII character classification and case conversion.

Every function accepts either a character code (``int``) or a one-character
string. The conversion functions return the same kind of value they were given.
"""

from __future__ import annotations

from typing import Union

CharLike = Union[int, str]


def _code(c: CharLike) -> int:
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c)
    if isinstance(c, int):
        return c
    raise TypeError(f"expected int or str, got {type(c).__name__}")


def is_alpha(c: CharLike) -> bool:
    """True for ASCII letters A-Z and a-z."""
    code = _code(c)
    return 65 <= code <= 90 or 97 <= code <= 122


def is_digit(c: CharLike) -> bool:
    """True for ASCII digits 0-9."""
    return 48 <= _code(c) <= 57


def is_alnum(c: CharLike) -> bool:
    """True for ASCII letters and digits."""
    return is_alpha(c) or is_digit(c)


def is_ascii(c: CharLike) -> bool:
    """True for codes 0 through 127."""
    return 0 <= _code(c) <= 127


def is_print(c: CharLike) -> bool:
    """True for printable ASCII, space (32) through tilde (126)."""
    return 32 <= _code(c) <= 126


def _convert(c: CharLike, low: int, high: int, delta: int) -> CharLike:
    code = _code(c)
    if low <= code <= high:
        code += delta
    return chr(code) if isinstance(c, str) else code


def to_lower(c: CharLike) -> CharLike:
    """Map an upper-case ASCII letter to lower case; leave anything else."""
    return _convert(c, 65, 90, 32)


def to_upper(c: CharLike) -> CharLike:
    """Map a lower-case ASCII letter to upper case; leave anything else."""
    return _convert(c, 97, 122, -32)