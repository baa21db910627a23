"""A small printf-style formatter supporting %c %s %p %d %i %u %x %X and %%."""

from __future__ import annotations

import sys
from typing import Any, Iterator, Optional, TextIO

_UINT_MASK = 0xFFFFFFFF
_POINTER_MASK = 0xFFFFFFFFFFFFFFFF
_NULL_TEXT = "(null)"


def _signed32(value: int) -> int:
    value &= _UINT_MASK
    if value >= 1 << 31:
        value -= 1 << 32
    return value


def to_hex(n: int, upper: bool = False) -> str:
    """Hexadecimal digits of a non-negative integer, without a prefix."""
    if n < 0:
        raise ValueError("to_hex needs a non-negative integer")
    return format(n, "X" if upper else "x")


def _take(values: Iterator[Any]) -> Any:
    try:
        return next(values)
    except StopIteration:
        raise TypeError("not enough arguments for format string") from None


def _char(value: Any) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError(f"%c needs a single character, got {value!r}")
        return value
    return chr(int(value) & 0xFF)


def _convert(spec: str, values: Iterator[Any]) -> str:
    if spec == "%":
        return "%"
    if spec == "c":
        return _char(_take(values))
    if spec == "s":
        value = _take(values)
        return _NULL_TEXT if value is None else str(value)
    if spec == "p":
        value = _take(values)
        address = value if isinstance(value, int) else id(value)
        return "0x" + to_hex(address & _POINTER_MASK)
    if spec in ("d", "i"):
        return str(_signed32(int(_take(values))))
    if spec == "u":
        return str(int(_take(values)) & _UINT_MASK)
    if spec in ("x", "X"):
        return to_hex(int(_take(values)) & _UINT_MASK, spec == "X")
    # Unknown conversions are dropped without consuming an argument.
    return ""


def format_printf(fmt: str, *args: Any) -> str:
    """Expand ``fmt`` with ``args`` and return the resulting text.

    Integers wrap as 32-bit values for %d, %i, %u, %x and %X; a None string
    prints as ``(null)``. The format ends at its first NUL character.
    """
    chars = iter(fmt.split("\0", 1)[0])
    values = iter(args)
    pieces = []
    for ch in chars:
        if ch != "%":
            pieces.append(ch)
            continue
        spec = next(chars, None)
        if spec is None:
            break
        pieces.append(_convert(spec, values))
    return "".join(pieces)


def write_printf(stream: Optional[TextIO], fmt: str, *args: Any) -> int:
    """Format and write to ``stream`` (stdout by default); return characters written."""
    text = format_printf(fmt, *args)
    (stream if stream is not None else sys.stdout).write(text)
    return len(text)


def put_endl(s: Optional[str], stream: Optional[TextIO] = None) -> None:
    """Write ``s`` followed by a newline; a None string writes nothing."""
    if s is None:
        return
    (stream if stream is not None else sys.stdout).write(s + "\n")