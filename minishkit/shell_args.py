"""Argument checks for the echo and exit builtins."""

from __future__ import annotations

from minishkit.chars import is_alpha, is_space
from minishkit.conversions import exit_atoi

SHELL_PREFIX = "minishell: "


class TooManyArgumentsError(ValueError):
    """``exit`` got more than one numeric argument; the shell keeps running."""

    status = 1

    def __init__(self) -> None:
        super().__init__(f"{SHELL_PREFIX}exit: too many arguments")


class NumericArgumentError(ValueError):
    """``exit`` got a non-numeric or out-of-range argument; the shell exits."""

    status = 2

    def __init__(self, word: str) -> None:
        self.word = word
        super().__init__(f"{SHELL_PREFIX}exit: {word}: numeric argument required")


def echo_option_length(text: str, quoted: bool) -> int | None:
    """Length of an ``echo -n`` option in ``text``, or None if it is not one.

    Unquoted options may carry trailing whitespace, which is counted.
    """
    if not text or text[0] != "-" or len(text) == 1:
        return None
    pos = 1
    while pos < len(text) and text[pos] == "n":
        pos += 1
    if pos < len(text):
        if quoted:
            return None
        while pos < len(text) and is_space(text[pos]):
            pos += 1
        if pos < len(text):
            return None
    return pos


def _first_word(text: str) -> str:
    words = text.split(maxsplit=1)
    return words[0] if words else ""


def _check_arg_count(args: str) -> None:
    alpha = False
    for here, after in zip(args, args[1:]):
        if is_alpha(here):
            alpha = True
        if is_space(here) and not is_space(after):
            if alpha:
                raise NumericArgumentError(_first_word(args))
            raise TooManyArgumentsError()


def parse_exit(text: str) -> int:
    """Exit status for an ``exit`` command line such as ``"exit 42"``.

    ``text`` starts with the word ``exit``; what follows its separator is
    the argument. No argument gives 0. Raises NumericArgumentError or
    TooManyArgumentsError for bad arguments.
    """
    if len(text) <= len("exit"):
        return 0
    args = text[len("exit") + 1:]
    if args == "":
        raise NumericArgumentError("")
    args = args.lstrip(" \t\n\v\f\r")
    _check_arg_count(args)
    try:
        value = exit_atoi(args)
    except ValueError:
        raise NumericArgumentError(_first_word(args)) from None
    return value & 0xFF