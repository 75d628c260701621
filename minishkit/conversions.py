"""Number parsing and formatting with C integer limits.

Each parser follows its own rules for leading whitespace, signs,
overflow and trailing text; see the individual docstrings.
"""

from __future__ import annotations

from minishkit.chars import is_digit, is_space

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1
LONG_MIN = -(2**63)
LONG_MAX = 2**63 - 1

# Space plus the codes 7 to 13 (bell and backspace included).
_WIDE_SPACE = frozenset(" \a\b\t\n\v\f\r")
# Space plus the codes 9 to 13.
_LIBC_SPACE = frozenset(" \t\n\v\f\r")


def _is_ascii_digit(ch: str) -> bool:
    return "0" <= ch <= "9"


def _scan_prefix(text: str, spaces) -> tuple[int, int]:
    """Skip leading whitespace and one optional sign; return (sign, position)."""
    pos = 0
    length = len(text)
    while pos < length and text[pos] in spaces:
        pos += 1
    sign = 1
    if pos < length and text[pos] in "+-":
        if text[pos] == "-":
            sign = -1
        pos += 1
    return sign, pos


def _digit_end(text: str, pos: int) -> int:
    while pos < len(text) and _is_ascii_digit(text[pos]):
        pos += 1
    return pos


def _wrap32(value: int) -> int:
    value &= 0xFFFFFFFF
    return value - 2**32 if value > INT_MAX else value


def _trunc_div(a: int, b: int) -> int:
    """Integer division rounding toward zero."""
    quotient = abs(a) // abs(b)
    return quotient if (a < 0) == (b < 0) else -quotient


def _fits_long(accumulated: int, sign: int, digit: int) -> bool:
    """Whether appending ``digit`` keeps the signed value within a long."""
    if sign < 0:
        return -accumulated >= _trunc_div(LONG_MIN + digit, 10)
    return accumulated <= _trunc_div(LONG_MAX - digit, 10)


def atoi(text: str) -> int:
    """Parse a leading integer; overflow wraps around as a 32-bit int.

    Whitespace includes the codes 7 to 13. Text after the digits is
    ignored and a missing number gives 0.
    """
    sign, pos = _scan_prefix(text, _WIDE_SPACE)
    end = _digit_end(text, pos)
    value = int(text[pos:end]) if end > pos else 0
    return _wrap32(sign * value)


def atof(text: str) -> float:
    """Parse a leading decimal number without exponent.

    A leading zero not followed by a dot, or a second dot, gives 0.0.
    """
    sign, pos = _scan_prefix(text, _WIDE_SPACE)
    if text[pos:pos + 1] == "0" and text[pos + 1:pos + 2] != ".":
        return 0.0
    result = 0.0
    dots = 0
    places = 0
    for ch in text[pos:]:
        digit = _is_ascii_digit(ch)
        if not digit and ch != ".":
            break
        if ch == ".":
            dots += 1
        if dots == 2:
            return 0.0
        if dots == 1:
            places += 1
        if digit:
            result = result * 10 + (ord(ch) - ord("0"))
    if dots == 1:
        for _ in range(places - 1):
            result /= 10
    return result * sign


def is_int(text: str) -> bool:
    """Whether the whole text is one integer that fits in 32 bits.

    Leading whitespace and a sign are allowed; trailing text is not.
    """
    sign, pos = _scan_prefix(text, _WIDE_SPACE)
    result = 0
    seen = False
    for ch in text[pos:]:
        if not _is_ascii_digit(ch):
            return False
        digit = ord(ch) - ord("0")
        if sign == 1 and result > (INT_MAX - digit) // 10:
            return False
        if sign == -1 and result > (-INT_MIN - digit) // 10:
            return False
        result = result * 10 + digit
        seen = True
    return seen


def atol(text: str) -> int:
    """Parse a leading integer as a 64-bit long; overflow gives 0.

    Whitespace is space and the codes 9 to 13. Text after the digits is
    ignored.
    """
    sign, pos = _scan_prefix(text, _LIBC_SPACE)
    result = 0
    for ch in text[pos:]:
        if not _is_ascii_digit(ch):
            break
        digit = ord(ch) - ord("0")
        if not _fits_long(result, sign, digit):
            return 0
        result = result * 10 + digit
    return result * sign


def itoa(n: int) -> str:
    """Decimal text of a 32-bit integer."""
    if not INT_MIN <= n <= INT_MAX:
        raise OverflowError(f"{n} does not fit in a 32-bit int")
    return str(n)


def exit_atoi(text: str) -> int:
    """Parse an exit argument as a 64-bit long.

    Leading whitespace and one sign are allowed, then only digits until
    the end. Raises ValueError on trailing text or overflow.
    """
    pos = 0
    length = len(text)
    while pos < length and is_space(text[pos]):
        pos += 1
    sign = 1
    if pos < length and text[pos] in "+-":
        if text[pos] == "-":
            sign = -1
        pos += 1
    result = 0
    while pos < length and is_digit(text[pos]):
        digit = ord(text[pos]) - ord("0")
        if not _fits_long(result, sign, digit):
            raise ValueError(f"numeric argument out of range: {text!r}")
        result = result * 10 + digit
        pos += 1
    if pos < length:
        raise ValueError(f"numeric argument required: {text!r}")
    return result * sign


def exit_status(text: str) -> int:
    """Exit status for an exit argument: its value modulo 256, 0 if invalid."""
    try:
        value = exit_atoi(text)
    except ValueError:
        return 0
    return value & 0xFF