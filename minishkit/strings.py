"""String helpers with C string-library semantics.

Searches return an index into the string, or None when nothing is found.
A NUL character ("\\0") stands for the terminator of a C string, so
searching for it finds the position just past the last character.
"""

from __future__ import annotations

from collections.abc import Callable
from itertools import zip_longest

_NUL = "\0"


def _char(c: str | int) -> str:
    """Return a single character from a one-character string or a char code."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    if isinstance(c, int):
        return chr(c & 0xFF)
    raise TypeError(f"expected str or int, got {type(c).__name__}")


def _non_negative(value: int, name: str) -> int:
    if value < 0:
        raise ValueError(f"{name} must not be negative, got {value}")
    return value


def _word_count(s: str, sep: str) -> int:
    """Count words the way the splitter does.

    A first word is only counted when the string has at least two
    characters, so a one-character string holds no words.
    """
    if sep == _NUL:
        return 1 if s else 0
    count = 1 if len(s) >= 2 and s[0] != sep else 0
    count += sum(
        1 for here, after in zip(s, s[1:]) if here == sep and after != sep
    )
    return count


def split(s: str, c: str | int) -> list[str]:
    """Split ``s`` on the separator ``c``, dropping empty words.

    With a NUL separator the whole non-empty string is the only word.
    A string of a single character yields no words.
    """
    sep = _char(c)
    count = _word_count(s, sep)
    if sep == _NUL:
        return [s] if count else []
    words = [word for word in s.split(sep) if word]
    return words[:count]


def strtrim(s: str, charset: str) -> str:
    """Remove characters found in ``charset`` from both ends of ``s``."""
    if not charset:
        return s
    return s.strip(charset)


def substr(s: str, start: int, length: int) -> str:
    """Return at most ``length`` characters of ``s`` starting at ``start``.

    A start past the end gives an empty string.
    """
    _non_negative(start, "start")
    _non_negative(length, "length")
    if start > len(s):
        return ""
    return s[start:start + length]


def strnstr(big: str, little: str, length: int) -> int | None:
    """Index of the first ``little`` lying wholly within ``big[:length]``.

    An empty ``little`` is found at index 0.
    """
    _non_negative(length, "length")
    if not little:
        return 0
    index = big[:length].find(little)
    return index if index >= 0 else None


def strchr(s: str, c: str | int) -> int | None:
    """Index of the first ``c`` in ``s``; NUL is found at ``len(s)``."""
    target = _char(c)
    if target == _NUL:
        return len(s)
    index = s.find(target)
    return index if index >= 0 else None


def strrchr(s: str, c: str | int) -> int | None:
    """Index of the last ``c`` in ``s``; NUL is found at ``len(s)``."""
    target = _char(c)
    if target == _NUL:
        return len(s)
    index = s.rfind(target)
    return index if index >= 0 else None


def _compare(s1: str, s2: str) -> int:
    for a, b in zip_longest(s1, s2, fillvalue=_NUL):
        if a != b:
            return ord(a) - ord(b)
    return 0


def strncmp(s1: str, s2: str, n: int) -> int:
    """Compare at most ``n`` characters; the sign tells the ordering.

    The result is the code difference of the first differing characters,
    with the end of a string counting as code 0.
    """
    _non_negative(n, "n")
    return _compare(s1[:n], s2[:n])


def strcmp(s1: str, s2: str) -> int:
    """Compare two strings; the sign tells the ordering."""
    return _compare(s1, s2)


def strndup(s: str, n: int) -> str:
    """Return a copy of at most the first ``n`` characters of ``s``."""
    _non_negative(n, "n")
    return s[:n]


def countchar(s: str, c: str | int) -> int:
    """Number of times ``c`` occurs in ``s``; NUL never counts."""
    target = _char(c)
    if target == _NUL:
        return 0
    return s.count(target)


def strmapi(s: str, f: Callable[[int, str], str]) -> str:
    """Build a string from ``f(index, char)`` for every character of ``s``."""
    return "".join(f(index, ch) for index, ch in enumerate(s))


def reverse_string(s: str) -> str:
    """Return ``s`` with its characters in reverse order."""
    return s[::-1]