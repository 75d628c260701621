"""Shell environment table with export, unset and env behaviour.

Entries are strings of the form ``KEY=value`` or a bare ``KEY``. The
special entry ``?=<status>`` holds the status of the last builtin.
Keys are compared over the key length of the stored entry, as the shell
does.
"""

from __future__ import annotations

import sys
from collections.abc import Iterable
from typing import TextIO

from minishkit.chars import is_alnum, is_alpha
from minishkit.strings import strncmp

SHELL_PREFIX = "minishell: "
INVALID_IDENTIFIER = "': not a valid identifier"


def key_len(text: str) -> int:
    """Length of the key at the start of ``text``.

    A leading ``$`` is counted. ``$`` followed by a double quote has key
    length 1. A ``+`` counts only when it is directly followed by ``=``.
    """
    if text[:1] == "$" and text[1:2] == '"':
        return 1
    pos = 1 if text[:1] == "$" else 0
    length = len(text)
    while pos < length:
        ch = text[pos]
        if ch == "=":
            break
        if not (
            is_alnum(ch)
            or ch in "_?"
            or (ch == "+" and text[pos + 1:pos + 2] == "=")
        ):
            break
        pos += 1
    return pos


def valid_export(text: str) -> bool:
    """Whether ``text`` is an acceptable argument to ``export``.

    The key must start with a letter or underscore and hold only letters,
    digits and underscores, optionally ending in ``+`` before ``=``.
    """
    for pos, ch in enumerate(text):
        if ch == "=" and pos != 0:
            break
        bad_start = not is_alpha(text[0]) and text[0] != "_"
        bad_char = not is_alnum(ch) and ch not in "_+"
        bad_plus = ch == "+" and text[pos + 1:pos + 2] != "="
        if bad_start or bad_char or bad_plus:
            return False
    return True


class Environment:
    """An ordered table of environment entries."""

    def __init__(self, entries: Iterable[str] = ()) -> None:
        self.entries: list[str] = list(entries)

    def _set_status(self, code: int) -> None:
        self.replace(f"?={code}")

    def _lookup(self, key: str) -> str | None:
        if key.startswith("$"):
            key = key[1:]
        for var in self.entries:
            length = max(key_len(var), key_len(key))
            if strncmp(key, var, length) == 0:
                return var
        return None

    def find(self, key: str) -> str:
        """Value stored for ``key`` (a leading ``$`` is ignored), or ``""``.

        The key ``$`` alone expands to ``$``.
        """
        if key == "$":
            return "$"
        var = self._lookup(key)
        if var is None:
            return ""
        return var[key_len(var) + 1:]

    def contains(self, key: str) -> bool:
        """Whether an entry with this key exists; ``$`` alone counts as found."""
        if key == "$":
            return True
        return self._lookup(key) is not None

    def add(self, entry: str) -> None:
        """Append ``entry`` to the table."""
        self.entries.append(entry)

    def replace(self, entry: str) -> None:
        """Replace the first entry whose key prefixes ``entry``, else append it."""
        for index, var in enumerate(self.entries):
            if strncmp(entry, var, key_len(var)) == 0:
                self.entries[index] = entry
                return
        self.add(entry)

    def export_addition(self, command: str) -> None:
        """Handle ``KEY+=value`` by appending ``value`` to the current value."""
        length = key_len(command)
        key = command[:length - 1]
        value = self.find(key) + command[length + 1:]
        self.replace(f"{key}={value}")

    def make_export(self, command: str, out: TextIO | None = None) -> None:
        """Apply one ``export`` argument; an empty one lists the exports."""
        if command == "":
            stream = sys.stdout if out is None else out
            for line in self.declare_lines():
                stream.write(line + "\n")
        elif key_len(command) > 0 and command[key_len(command) - 1] == "+":
            self.export_addition(command)
        elif self.contains(command):
            self.replace(command)
        else:
            self.add(command)
        self._set_status(0)

    def check_exports(self, exports: Iterable[str], err: TextIO | None = None) -> bool:
        """Validate every argument; report the first invalid one to ``err``.

        On failure the status becomes 1 and False is returned.
        """
        stream = sys.stderr if err is None else err
        for export in exports:
            if not valid_export(export):
                stream.write(f"{SHELL_PREFIX}export: `{export}{INVALID_IDENTIFIER}\n")
                self._set_status(1)
                return False
        return True

    def unset(self, key: str) -> None:
        """Remove the first entry whose key prefixes ``key``.

        The status becomes 0 only when an entry was removed.
        """
        for index, var in enumerate(self.entries):
            if strncmp(key, var, key_len(var)) == 0:
                del self.entries[index]
                self._set_status(0)
                return

    def sorted_exports(self) -> list[str]:
        """All entries in character-code order."""
        return sorted(self.entries)

    def declare_lines(self) -> list[str]:
        """Lines ``export`` prints with no arguments; sets the status to 0.

        The status entry and keys starting with ``_`` are left out.
        """
        lines = []
        for entry in self.sorted_exports():
            if entry.startswith("?=") or entry.startswith("_"):
                continue
            length = key_len(entry)
            line = "declare -x " + entry[:length + 1]
            rest = entry[length:]
            if rest:
                line += f'"{rest[1:]}"'
            lines.append(line)
        self._set_status(0)
        return lines

    def env_lines(self) -> list[str]:
        """Lines the ``env`` builtin prints; sets the status to 0.

        Only entries holding ``=`` are shown, never the status entry.
        """
        lines = [
            entry
            for entry in self.entries
            if not entry.startswith("?=") and "=" in entry
        ]
        self._set_status(0)
        return lines

    def __repr__(self) -> str:
        return f"Environment({self.entries!r})"