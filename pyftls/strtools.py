"""String building and conversion helpers."""

from __future__ import annotations

from typing import Callable, List, MutableSequence, Optional, Tuple, TypeVar

_WHITESPACE = " \t\n\v\f\r"
_INT_BITS = 32

T = TypeVar("T")


def _to_c_int(value: int) -> int:
    """Wrap ``value`` to a signed 32-bit integer."""
    mask = (1 << _INT_BITS) - 1
    value &= mask
    if value >= 1 << (_INT_BITS - 1):
        value -= 1 << _INT_BITS
    return value


def atoi(s: str) -> int:
    """Parse a leading decimal integer.

    Leading whitespace is skipped and one optional sign is accepted. Parsing
    stops at the first non-digit; a string with no digits yields 0. The result
    wraps like a 32-bit signed integer.
    """
    text = s.lstrip(_WHITESPACE)
    sign = 1
    if text[:1] in ("-", "+"):
        if text[0] == "-":
            sign = -1
        text = text[1:]
    value = 0
    for ch in text:
        if not "0" <= ch <= "9":
            break
        value = value * 10 + (ord(ch) - ord("0"))
    return _to_c_int(value * sign)


def itoa(n: int) -> str:
    """Decimal representation of ``n``, with a leading minus when negative."""
    if n < 0:
        return "-" + itoa(-n)
    digits = []
    while True:
        n, rem = divmod(n, 10)
        digits.append(chr(ord("0") + rem))
        if n == 0:
            break
    return "".join(reversed(digits))


def split(s: str, sep: str) -> List[str]:
    """Split ``s`` on the single character ``sep``, dropping empty pieces."""
    if len(sep) != 1:
        raise ValueError(f"separator must be a single character, got {sep!r}")
    return [piece for piece in s.split(sep) if piece]


def substr(s: str, start: int, length: int) -> str:
    """Return at most ``length`` characters of ``s`` beginning at ``start``.

    A start past the end gives an empty string.
    """
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    return s[start:start + length]


def strjoin(a: str, b: str) -> str:
    """Concatenate two strings."""
    if a is None or b is None:
        raise TypeError("strjoin requires two strings")
    return a + b


def strtrim(s: str, charset: str) -> str:
    """Remove characters found in ``charset`` from both ends of ``s``."""
    if s is None or charset is None:
        raise TypeError("strtrim requires two strings")
    return s.strip(charset) if charset else s


def strmapi(s: str, func: Callable[[int, str], str]) -> str:
    """Build a new string from ``func(index, char)`` for every character."""
    return "".join(func(i, ch) for i, ch in enumerate(s))


def striteri(
    s: MutableSequence[T], func: Callable[[int, T], Optional[T]]
) -> MutableSequence[T]:
    """Call ``func(index, item)`` for every element of ``s``, in place.

    When ``func`` returns something other than None, that value replaces the
    element. The same sequence is returned.
    """
    if isinstance(s, (str, bytes)):
        raise TypeError("striteri needs a mutable sequence")
    for i, item in enumerate(list(s)):
        replacement = func(i, item)
        if replacement is not None:
            s[i] = replacement
    return s


def strlcpy(src: str, size: int) -> Tuple[str, int]:
    """Copy ``src`` into a buffer of ``size`` characters.

    Returns the copied text (at most ``size - 1`` characters) and the full
    length of ``src``, so truncation shows as a length of ``size`` or more.
    """
    if size < 0:
        raise ValueError("size must not be negative")
    copied = src[:size - 1] if size > 0 else ""
    return copied, len(src)


def strlcat(dst: str, src: str, size: int) -> Tuple[str, int]:
    """Append ``src`` to ``dst`` within a buffer of ``size`` characters.

    Returns the resulting text and the length it tried to create. When ``dst``
    already fills the buffer it is left alone and the length is
    ``size + len(src)``.
    """
    if size < 0:
        raise ValueError("size must not be negative")
    dst_length = min(len(dst), size)
    if dst_length == size:
        return dst, size + len(src)
    room = size - dst_length - 1
    return dst + src[:room], dst_length + len(src)