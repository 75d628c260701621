"""Character, number, string, formatting, line-reading, memory and linked-list
helpers, with environment and argument logic for shell builtins."""

__version__ = "0.1.0"

__all__ = [
    "chars",
    "conversions",
    "strings",
    "formatting",
    "reader",
    "memory",
    "linked",
    "environment",
    "shell_args",
]