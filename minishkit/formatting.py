"""printf-style formatting and small writers for text streams.

The supported conversions are ``%c``, ``%s``, ``%p``, ``%x``, ``%X``,
``%d``, ``%i``, ``%u`` and ``%%``; no flags, widths or precisions.
Integers are treated as C ints or unsigned ints and wrap to 32 bits.
"""

from __future__ import annotations

import sys
from typing import Any, TextIO

from minishkit.conversions import itoa

CONVERSIONS = "cspxXdiu%"

_UINT_MASK = 0xFFFFFFFF
_POINTER_MASK = 0xFFFFFFFFFFFFFFFF


def _stream(stream: TextIO | None) -> TextIO:
    return sys.stdout if stream is None else stream


def _as_int(value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"expected an integer, got {type(value).__name__}")
    return value


def _signed32(value: int) -> int:
    value &= _UINT_MASK
    return value - 2**32 if value >= 2**31 else value


def _char_text(value: Any) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError(f"expected a single character, got {value!r}")
        return value
    return chr(_as_int(value) & 0xFF)


def _hex(value: int, upper: bool) -> str:
    text = format(value, "x")
    return text.upper() if upper else text


def _pointer(value: Any) -> str:
    if value is None:
        return "(nil)"
    address = _as_int(value) & _POINTER_MASK
    if address == 0:
        return "(nil)"
    return "0x" + _hex(address, upper=False)


def _convert(conv: str, value: Any) -> str:
    if conv == "c":
        return _char_text(value)
    if conv == "s":
        return "(null)" if value is None else str(value)
    if conv == "p":
        return _pointer(value)
    if conv in "xX":
        return _hex(_as_int(value) & _UINT_MASK, upper=conv == "X")
    if conv in "di":
        return str(_signed32(_as_int(value)))
    return str(_as_int(value) & _UINT_MASK)


def _validate(fmt: str) -> None:
    pos = 0
    while pos < len(fmt):
        if fmt[pos] == "%":
            if pos + 1 >= len(fmt) or fmt[pos + 1] not in CONVERSIONS:
                raise ValueError(f"invalid conversion in format {fmt!r}")
            pos += 1
        pos += 1


def format_string(fmt: str, *args: Any) -> str:
    """Render ``fmt`` with ``args``.

    Raises ValueError for an unknown or dangling conversion and for too
    few arguments; extra arguments are ignored.
    """
    _validate(fmt)
    values = iter(args)
    parts: list[str] = []
    pos = 0
    while pos < len(fmt):
        ch = fmt[pos]
        if ch != "%":
            parts.append(ch)
            pos += 1
            continue
        conv = fmt[pos + 1]
        pos += 2
        if conv == "%":
            parts.append("%")
            continue
        try:
            value = next(values)
        except StopIteration:
            raise ValueError(f"not enough arguments for format {fmt!r}") from None
        parts.append(_convert(conv, value))
    return "".join(parts)


def fprintf(stream: TextIO | None, fmt: str, *args: Any) -> int:
    """Write the rendered format to ``stream``; return the characters written."""
    text = format_string(fmt, *args)
    _stream(stream).write(text)
    return len(text)


def printf(fmt: str, *args: Any) -> int:
    """Write the rendered format to standard output."""
    return fprintf(None, fmt, *args)


def putchar(c: str | int, stream: TextIO | None = None) -> int:
    """Write one character; always reports 1."""
    _stream(stream).write(_char_text(c))
    return 1


def putstr(s: str | None, stream: TextIO | None = None) -> int:
    """Write ``s``, or ``(null)`` for None; return the characters written."""
    text = "(null)" if s is None else s
    _stream(stream).write(text)
    return len(text)


def putendl(s: str | None, stream: TextIO | None = None) -> None:
    """Write ``s`` followed by a newline; None writes nothing."""
    if s is None:
        return
    _stream(stream).write(s + "\n")


def putnbr(n: int, stream: TextIO | None = None) -> int:
    """Write a 32-bit signed integer in decimal; return the characters written."""
    return putstr(itoa(_as_int(n)), stream)


def uputnbr(n: int, stream: TextIO | None = None) -> int:
    """Write a 32-bit unsigned integer in decimal; return the characters written."""
    value = _as_int(n)
    if not 0 <= value <= _UINT_MASK:
        raise OverflowError(f"{value} does not fit in a 32-bit unsigned int")
    return putstr(str(value), stream)