"""Byte-buffer helpers with C memory-function semantics.

Buffers are ``bytearray`` objects, or any mutable buffer for the
functions that write. Lengths that reach past the end of a buffer raise
``IndexError`` rather than touching memory that is not there.
"""

from __future__ import annotations

SIZE_MAX = 2**64 - 1


def _check_span(data, n: int, name: str, offset: int = 0) -> None:
    if n < 0:
        raise ValueError(f"n must not be negative, got {n}")
    if offset < 0:
        raise ValueError(f"{name} offset must not be negative, got {offset}")
    if offset + n > len(data):
        raise IndexError(
            f"{n} bytes at offset {offset} exceed {name} of length {len(data)}"
        )


def memset(buf: bytearray, value: int, n: int) -> bytearray:
    """Fill the first ``n`` bytes of ``buf`` with ``value`` truncated to a byte."""
    _check_span(buf, n, "buffer")
    buf[:n] = bytes([value & 0xFF]) * n
    return buf


def bzero(buf: bytearray, n: int) -> None:
    """Set the first ``n`` bytes of ``buf`` to zero."""
    memset(buf, 0, n)


def memcpy(dest: bytearray, src: bytes, n: int) -> bytearray:
    """Copy ``n`` bytes from ``src`` to the start of ``dest``; return ``dest``."""
    _check_span(src, n, "source")
    _check_span(dest, n, "destination")
    dest[:n] = src[:n]
    return dest


def memmove(buf: bytearray, dest: int, src: int, n: int) -> bytearray:
    """Copy ``n`` bytes within ``buf`` from offset ``src`` to offset ``dest``.

    The regions may overlap; the result is as if the source bytes were
    first copied aside.
    """
    _check_span(buf, n, "source", src)
    _check_span(buf, n, "destination", dest)
    buf[dest:dest + n] = bytes(buf[src:src + n])
    return buf


def memchr(data: bytes, c: int, n: int) -> int | None:
    """Index of the first byte equal to ``c`` among the first ``n``, or None."""
    _check_span(data, n, "data")
    index = bytes(data[:n]).find(bytes([c & 0xFF]))
    return index if index >= 0 else None


def memcmp(a: bytes, b: bytes, n: int) -> int:
    """Compare the first ``n`` bytes; return the difference at the first mismatch."""
    _check_span(a, n, "first buffer")
    _check_span(b, n, "second buffer")
    for x, y in zip(a[:n], b[:n]):
        if x != y:
            return x - y
    return 0


def calloc(nmemb: int, size: int) -> bytearray:
    """Return a zeroed buffer of ``nmemb * size`` bytes.

    Raises OverflowError when the total would not fit in a ``size_t``.
    """
    if nmemb < 0 or size < 0:
        raise ValueError("nmemb and size must not be negative")
    if size and nmemb > SIZE_MAX // size:
        raise OverflowError(f"{nmemb} * {size} bytes exceeds the size limit")
    return bytearray(nmemb * size)