"""Byte-buffer helpers: fill, copy, move, search and compare."""

from __future__ import annotations

from collections.abc import Sequence


def _check_length(length: int, *buffers: Sequence[int]) -> None:
    if length < 0:
        raise ValueError("length must not be negative")
    for buf in buffers:
        if length > len(buf):
            raise ValueError(f"length {length} exceeds buffer size {len(buf)}")


def memset(buf: bytearray, value: int, length: int) -> bytearray:
    """Set the first *length* bytes of *buf* to the low byte of *value*."""
    _check_length(length, buf)
    buf[:length] = bytes([value & 0xFF]) * length
    return buf


def bzero(buf: bytearray, length: int) -> bytearray:
    """Zero the first *length* bytes of *buf*."""
    return memset(buf, 0, length)


def calloc(count: int, size: int) -> bytearray:
    """Return a zero-filled buffer of *count* elements of *size* bytes."""
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    return bytearray(count * size)


def memcpy(dst: bytearray, src: bytes | bytearray, length: int) -> bytearray:
    """Copy the first *length* bytes of *src* into the start of *dst*."""
    _check_length(length, dst, src)
    dst[:length] = src[:length]
    return dst


def memmove(buf: bytearray, dst_offset: int, src_offset: int, length: int) -> bytearray:
    """Move *length* bytes inside *buf*; overlapping regions are handled."""
    if dst_offset < 0 or src_offset < 0:
        raise ValueError("offsets must not be negative")
    if length < 0:
        raise ValueError("length must not be negative")
    if max(dst_offset, src_offset) + length > len(buf):
        raise ValueError("region extends past the end of the buffer")
    buf[dst_offset:dst_offset + length] = bytes(buf[src_offset:src_offset + length])
    return buf


def memchr(data: bytes | bytearray, value: int, length: int) -> int | None:
    """Index of the first byte equal to the low byte of *value* within *length*, or None."""
    _check_length(length, data)
    index = data.find(value & 0xFF, 0, length)
    return None if index < 0 else index


def memcmp(s1: bytes | bytearray, s2: bytes | bytearray, length: int) -> int:
    """Difference of the first differing bytes in the first *length*, or 0."""
    _check_length(length, s1, s2)
    for a, b in zip(s1[:length], s2[:length]):
        if a != b:
            return a - b
    return 0