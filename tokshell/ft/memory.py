"""Byte buffer helpers: fill, copy, move, search, compare and allocate."""

from __future__ import annotations

SIZE_MAX = 2**64 - 1


def _check_length(n: int, *buffers) -> None:
    if n < 0:
        raise ValueError("length must not be negative")
    for buf in buffers:
        if n > len(buf):
            raise ValueError(f"length {n} exceeds buffer of size {len(buf)}")


def memset(buf: bytearray, value: int, n: int) -> bytearray:
    """Set the first n bytes of buf to the low byte of value; return buf."""
    _check_length(n, buf)
    buf[:n] = bytes([value & 0xFF]) * n
    return buf


def bzero(buf: bytearray, n: int) -> None:
    """Zero the first n bytes of buf."""
    memset(buf, 0, n)


def memcpy(dest: bytearray, src: bytes, n: int) -> bytearray:
    """Copy the first n bytes of src to the start of dest; return dest."""
    _check_length(n, dest, src)
    dest[:n] = src[:n]
    return dest


def memmove(buf: bytearray, dest: int, src: int, n: int) -> bytearray:
    """Move n bytes inside buf from offset src to offset dest, overlap-safe."""
    if dest < 0 or src < 0:
        raise ValueError("offsets must not be negative")
    _check_length(n, buf[src:], buf[dest:])
    if n and dest != src:
        buf[dest:dest + n] = bytes(buf[src:src + n])
    return buf


def memchr(data: bytes, value: int, n: int) -> int | None:
    """Index of the first byte equal to value's low byte among the first n, or None."""
    _check_length(n, data)
    index = bytes(data[:n]).find(value & 0xFF)
    return None if index < 0 else index


def memcmp(a: bytes, b: bytes, n: int) -> int:
    """Difference of the first differing bytes within n, or 0 if they match."""
    _check_length(n, a, b)
    for x, y in zip(a[:n], b[:n]):
        if x != y:
            return x - y
    return 0


def calloc(nmemb: int, size: int) -> bytearray:
    """Allocate a zeroed buffer of nmemb elements of size bytes each."""
    if nmemb < 0 or size < 0:
        raise ValueError("counts must not be negative")
    if nmemb == 0 or size == 0:
        return bytearray()
    if nmemb > SIZE_MAX // size:
        raise OverflowError("allocation size overflows")
    return bytearray(nmemb * size)