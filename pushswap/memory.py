"""Byte-buffer helpers working on ``bytes`` and ``bytearray``."""

from __future__ import annotations

from typing import Union

BytesLike = Union[bytes, bytearray, memoryview]


def _check_length(n: int, *buffers: BytesLike) -> None:
    if n < 0:
        raise ValueError(f"length must not be negative, got {n}")
    for buf in buffers:
        if n > len(buf):
            raise ValueError(f"length {n} exceeds buffer of size {len(buf)}")


def bzero(buf: bytearray, n: int) -> bytearray:
    """Set the first ``n`` bytes of ``buf`` to zero and return ``buf``."""
    _check_length(n, buf)
    buf[:n] = bytes(n)
    return buf


def memset(buf: bytearray, value: int, length: int) -> bytearray:
    """Fill the first ``length`` bytes of ``buf`` with the low byte of ``value``."""
    _check_length(length, buf)
    buf[:length] = bytes([value & 0xFF]) * length
    return buf


def memcpy(dst: bytearray, src: BytesLike, n: int) -> bytearray:
    """Copy the first ``n`` bytes of ``src`` to the start of ``dst``."""
    _check_length(n, dst, src)
    dst[:n] = bytes(src[:n])
    return dst


def memmove(buf: bytearray, dst: int, src: int, length: int) -> bytearray:
    """Move ``length`` bytes inside ``buf`` from offset ``src`` to ``dst``.

    Overlapping regions are handled as if the source were copied first.
    """
    if length < 0 or dst < 0 or src < 0:
        raise ValueError("offsets and length must not be negative")
    if dst + length > len(buf) or src + length > len(buf):
        raise ValueError("region lies outside the buffer")
    buf[dst:dst + length] = bytes(buf[src:src + length])
    return buf


def memchr(data: BytesLike, value: int, n: int) -> int | None:
    """Return the offset of the first byte equal to ``value`` within ``n`` bytes."""
    _check_length(n, data)
    offset = bytes(data[:n]).find(bytes([value & 0xFF]))
    return None if offset < 0 else offset


def memcmp(a: BytesLike, b: BytesLike, n: int) -> int:
    """Compare ``n`` bytes as unsigned values; return the first difference or 0."""
    _check_length(n, a, b)
    for left, right in zip(bytes(a[:n]), bytes(b[:n])):
        if left != right:
            return left - right
    return 0


def calloc(count: int, size: int) -> bytearray:
    """Return a zero-filled buffer of ``count * size`` bytes."""
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    return bytearray(count * size)