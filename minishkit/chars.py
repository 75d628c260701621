"""ASCII character classification and case conversion.

Every function accepts either a one-character string or an integer code.
The case conversions return a value of the same kind they were given.
"""

from __future__ import annotations

CharLike = "str | int"


def _code(c: str | int) -> int:
    """Return the integer code of a one-character string or an int."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c)
    if isinstance(c, int):
        return c
    raise TypeError(f"expected str or int, got {type(c).__name__}")


def is_alpha(c: str | int) -> bool:
    """True for ASCII letters."""
    code = _code(c)
    return ord("A") <= code <= ord("Z") or ord("a") <= code <= ord("z")


def is_digit(c: str | int) -> bool:
    """True for the ASCII digits 0-9."""
    code = _code(c)
    return ord("0") <= code <= ord("9")


def is_alnum(c: str | int) -> bool:
    """True for ASCII letters and digits."""
    return is_alpha(c) or is_digit(c)


def is_ascii(c: str | int) -> bool:
    """True for codes 0 to 127."""
    return 0 <= _code(c) <= 127


def is_print(c: str | int) -> bool:
    """True for printable ASCII, space included."""
    return 32 <= _code(c) <= 126


def is_space(c: str | int) -> bool:
    """True for space, tab, newline, vertical tab, form feed and return.

    Integer codes are truncated to a byte first, as a char would be.
    """
    code = _code(c)
    if isinstance(c, int):
        code &= 0xFF
    return code == 32 or 9 <= code <= 13


def to_upper(c: str | int) -> str | int:
    """Upper-case an ASCII lower-case letter; anything else is unchanged."""
    code = _code(c)
    if ord("a") <= code <= ord("z"):
        code -= 32
    return chr(code) if isinstance(c, str) else code


def to_lower(c: str | int) -> str | int:
    """Lower-case an ASCII upper-case letter; anything else is unchanged."""
    code = _code(c)
    if ord("A") <= code <= ord("Z"):
        code += 32
    return chr(code) if isinstance(c, str) else code