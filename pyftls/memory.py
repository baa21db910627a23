"""Byte-buffer helpers working on ``bytearray`` objects."""

from __future__ import annotations

from typing import Optional


def _check_range(buf_len: int, offset: int, length: int, what: str) -> None:
    if length < 0:
        raise ValueError("length must not be negative")
    if offset < 0 or offset + length > buf_len:
        raise IndexError(f"{what} range [{offset}, {offset + length}) out of bounds")


def memset(buf: bytearray, value: int, length: int) -> bytearray:
    """Fill the first ``length`` bytes of ``buf`` with ``value`` (mod 256)."""
    _check_range(len(buf), 0, length, "memset")
    buf[:length] = bytes([value & 0xFF]) * length
    return buf


def bzero(buf: bytearray, length: int) -> None:
    """Zero the first ``length`` bytes of ``buf``."""
    memset(buf, 0, length)


def calloc(count: int, size: int) -> bytearray:
    """Return a zero-filled buffer of ``count * size`` bytes."""
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    return bytearray(count * size)


def memcpy(dst: bytearray, src: bytes, n: int) -> bytearray:
    """Copy the first ``n`` bytes of ``src`` to the start of ``dst``."""
    _check_range(len(src), 0, n, "source")
    _check_range(len(dst), 0, n, "destination")
    dst[:n] = src[:n]
    return dst


def memmove(buf: bytearray, dst: int, src: int, length: int) -> bytearray:
    """Move ``length`` bytes inside ``buf`` from offset ``src`` to ``dst``.

    Overlapping ranges are handled correctly.
    """
    _check_range(len(buf), src, length, "source")
    _check_range(len(buf), dst, length, "destination")
    buf[dst:dst + length] = bytes(buf[src:src + length])
    return buf


def memchr(buf: bytes, value: int, n: int) -> Optional[int]:
    """Return the index of ``value`` in the first ``n`` bytes, or None."""
    _check_range(len(buf), 0, n, "search")
    index = bytes(buf[:n]).find(value & 0xFF)
    return None if index < 0 else index


def memcmp(a: bytes, b: bytes, n: int) -> int:
    """Compare the first ``n`` bytes; return the difference at the first mismatch."""
    _check_range(len(a), 0, n, "first")
    _check_range(len(b), 0, n, "second")
    for x, y in zip(a[:n], b[:n]):
        if x != y:
            return x - y
    return 0