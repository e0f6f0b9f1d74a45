"""Byte-buffer helpers working on bytes, bytearray and memoryview objects."""

from __future__ import annotations

from typing import Union

Buffer = Union[bytes, bytearray, memoryview]
WritableBuffer = Union[bytearray, memoryview]


def _check_length(n: int, *buffers: Buffer) -> None:
    if n < 0:
        raise ValueError(f"byte count must not be negative, got {n}")
    for buffer in buffers:
        if n > len(buffer):
            raise ValueError(f"byte count {n} exceeds buffer length {len(buffer)}")


def memset(buffer: WritableBuffer, value: int, n: int) -> WritableBuffer:
    """Fill the first ``n`` bytes of ``buffer`` with ``value`` (taken modulo 256)."""
    _check_length(n, buffer)
    buffer[:n] = bytes([value & 0xFF]) * n
    return buffer


def bzero(buffer: WritableBuffer, n: int) -> None:
    """Set the first ``n`` bytes of ``buffer`` to zero."""
    memset(buffer, 0, n)


def calloc(count: int, size: int) -> bytearray:
    """Return a zero-filled buffer of ``count * size`` bytes."""
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    return bytearray(count * size)


def memchr(data: Buffer, value: int, n: int) -> int | None:
    """Return the index of the first byte equal to ``value`` among the first ``n``.

    ``value`` is taken modulo 256. Returns None when it does not occur.
    """
    _check_length(n, data)
    index = bytes(data[:n]).find(value & 0xFF)
    return None if index < 0 else index


def memcmp(first: Buffer, second: Buffer, n: int) -> int:
    """Compare the first ``n`` bytes; return the difference at the first mismatch."""
    _check_length(n, first, second)
    for left, right in zip(bytes(first[:n]), bytes(second[:n])):
        if left != right:
            return left - right
    return 0


def memcpy(dest: WritableBuffer, src: Buffer, n: int) -> WritableBuffer:
    """Copy ``n`` bytes from ``src`` into the start of ``dest`` and return ``dest``."""
    _check_length(n, dest, src)
    dest[:n] = bytes(src[:n])
    return dest


def memmove(dest: WritableBuffer, src: Buffer, n: int) -> WritableBuffer:
    """Copy ``n`` bytes from ``src`` to ``dest``; the two may overlap."""
    _check_length(n, dest, src)
    # Snapshot the source first so overlapping views are copied correctly.
    dest[:n] = bytes(src[:n])
    return dest