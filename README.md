# minishkit

Small helpers with no dependencies. The package covers:

- character classification
- number parsing with C integer limits
- string functions with C string-library semantics
- printf-style formatting
- buffered line reading
- byte-buffer operations
- a singly linked list
- the environment and argument logic behind the shell builtins `export`, `unset`, `env`, `echo` and `exit`

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Modules

- `minishkit.chars` has `is_alpha`, `is_digit`, `is_alnum`, `is_ascii`,
  `is_print`, `is_space`, `to_upper` and `to_lower`.
  - Each accepts a one-character string or an integer code.
  - The case conversions return the same kind of value they were given.
- `minishkit.conversions` has `atoi`, `atof`, `atol`, `is_int`, `itoa`,
  `exit_atoi` and `exit_status`.
  - `atoi` wraps around to a 32-bit int.
  - `atol` returns 0 on 64-bit overflow.
  - `is_int` checks whether the whole text is one integer that fits in 32 bits.
  - `itoa` raises `OverflowError` outside the 32-bit range.
  - `exit_atoi` raises `ValueError` on trailing text or overflow.
  - `exit_status` gives the value modulo 256, or 0 when the text is invalid.
- `minishkit.strings` has `split`, `strtrim`, `substr`, `strnstr`, `strchr`,
  `strrchr`, `strncmp`, `strcmp`, `strndup`, `countchar`, `strmapi` and
  `reverse_string`.
  - The searches return an index, or `None` when nothing is found.
  - Searching for `"\0"` finds the position just past the last character.
- `minishkit.formatting` has `format_string`, `printf`, `fprintf`, `putchar`,
  `putstr`, `putendl`, `putnbr` and `uputnbr`.
  - The supported conversions are `%c %s %p %x %X %d %i %u %%`, with no
    flags, widths or precisions.
  - An unknown or dangling conversion raises `ValueError`, and so do too few
    arguments.
  - When the stream is `None`, output goes to standard output.
- `minishkit.reader` has `LineReader(stream, buffer_size=42)`.
  - It reads a text or binary stream one buffer at a time.
  - It yields lines with their newline kept.
  - `read_line()` returns `None` at the end of the stream.
- `minishkit.memory` has `memset`, `bzero`, `memcpy`, `memmove`, `memchr`,
  `memcmp` and `calloc`, which work on `bytearray` buffers.
  - A length that reaches past the end of a buffer raises `IndexError`.
  - In `memmove`, the source and destination are offsets into the same buffer.
- `minishkit.linked` has `LinkedList`. Its methods are:
  - `add_front` and `add_back`
  - `last`
  - `clear(delete=None)`
  - `iterate`
  - `map`, which returns a new list

  It also supports `len()` and iteration.
- `minishkit.environment` has `Environment`, `key_len` and `valid_export`.
  - An `Environment` holds ordered `KEY=value` entries, together with the
    status entry `?=<code>`.
  - Lookup and update: `find`, `contains`, `add`, `replace` and `unset`.
  - Exporting: `export_addition` handles `KEY+=value`, and `make_export`
    and `check_exports` apply and validate `export` arguments.
  - Listing: `sorted_exports`, `declare_lines` (what `export` with no
    arguments prints) and `env_lines` (what `env` prints).
- `minishkit.shell_args` has `echo_option_length`, `parse_exit`,
  `TooManyArgumentsError` and `NumericArgumentError`.
  - `echo_option_length` recognises `echo -n` style options.
  - `parse_exit` turns an `exit ...` command line into an exit status.
  - `parse_exit` raises one of the two errors; each carries the `status`
    that the shell would use.

## Examples

```python
from minishkit.conversions import atoi, itoa
from minishkit.strings import split
from minishkit.formatting import format_string

atoi("  -42abc")                        # -42
itoa(-2147483648)                       # "-2147483648"
split("  hello  world ", " ")           # ["hello", "world"]
format_string("%d%% of %s", 50, "it")   # "50% of it"
```

Reading lines from a stream:

```python
import io
from minishkit.reader import LineReader

reader = LineReader(io.StringIO("one\ntwo\nthree"), 42)
for line in reader:
    print(repr(line))   # 'one\n', 'two\n', 'three'
```

Working with a shell-style environment:

```python
from minishkit.environment import Environment

env = Environment(["HOME=/home/user", "PATH=/bin"])
env.find("$HOME")           # "/home/user"
env.replace("PATH=/usr/bin")
env.unset("HOME")
env.env_lines()             # ["PATH=/usr/bin"]
```

Checking `exit` arguments:

```python
from minishkit.shell_args import parse_exit, NumericArgumentError

parse_exit("exit 300")      # 44
try:
    parse_exit("exit abc")
except NumericArgumentError as err:
    print(err.status)       # 2
```

## What this package does not do

This is a library, not a shell. It has no command to run, and it has no
interactive prompt. It does not:

- tokenise or parse command lines
- expand variables inside commands
- run programs, pipelines, redirections or here-documents
- change directory or handle signals

`Environment` keeps its entries in memory only. It never reads from or
writes to the process environment.