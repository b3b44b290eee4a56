# ftformat

A compact printf-style formatter together with small helpers for
characters, numbers, strings, bytes and a singly linked list. It has no
dependencies outside the standard library.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Formatting

`ftformat.formatter` provides `sformat(fmt, *args)`, which returns the
formatted text, and `printf(fmt, *args, stream=None)`, which writes it to
`stream` (standard output when `None`) and returns the number of characters
written.

Supported conversions are `%c`, `%s`, `%p`, `%d`, `%i`, `%u`, `%x`, `%X`
and `%%`. Each may be preceded by a decimal minimum field width and a
`.precision`; the field is padded on the left with spaces.

```python
from ftformat.formatter import sformat, printf

sformat("[%5d]", 42)          # '[   42]'
sformat("[%.4d]", -7)         # '[-0007]'
sformat("%.3s", "abcdef")     # 'abc'
sformat("%x / %X", 255, 255)  # 'ff / FF'
sformat("%s", None)           # '(null)'
sformat("%p", 255)            # '0xff'

count = printf("%s, %c!\n", "hello", "w")
```

Behaviour worth knowing:

- `%d`/`%i` take an integer and wrap it to a 32-bit signed value; `%u`,
  `%x` and `%X` wrap it to 32-bit unsigned. `%p` prints an integer (or
  `None` as 0) in lower-case hex with a `0x` prefix.
- `%c` takes a one-character string or an integer character code.
- `%s` takes a string or `None`, which prints as `(null)`; a precision
  truncates the string.
- With a precision of 0, the number 0 prints no digits.
- A character after `%` that is not a known conversion is copied literally,
  and any width or precision read before it carries over to the next
  conversion. A lone `%` at the end of the format is dropped. A NUL
  character ends the format.
- Too few arguments, or an argument of the wrong type, raises `TypeError`.

The flags `-`, `0`, `+`, `#` and space, `*` widths, length modifiers and
floating-point conversions are not supported.

## Helpers

- `ftformat.numconv`: `itoa`, `itoa_base` (digits taken from a given
  alphabet, value treated as 64-bit unsigned), `numlen`, `numlen_u`, and
  `atoi` (skips leading whitespace, one optional sign, stops at the first
  non-digit, wraps to 32-bit signed).
- `ftformat.chars`: `isalpha`, `isdigit`, `isalnum`, `isascii`, `isprint`,
  `toupper`, `tolower`; each accepts a one-character string or an integer
  code. The case functions return the same kind they were given.
- `ftformat.output`: `put_char`, `put_str`, `put_endl`, `put_nbr`; each
  writes to a text stream (standard output by default) and returns the
  number of characters written.
- `ftformat.textutils`: `split`, `strchr`, `strrchr`, `strncmp`, `strnstr`,
  `substr`, `strjoin`, `strtrim`, `strmapi`, and the byte helpers `memchr`
  and `memcmp`. Search functions return an index, or `None` when nothing is
  found.
- `ftformat.linkedlist`: `Node` and `LinkedList`, a singly linked list with
  `push_front`, `push_back`, `last`, `each`, `map`, `clear`, a `head`
  property, `len()` and iteration.

```python
from ftformat.numconv import itoa_base, atoi
from ftformat.textutils import split, strtrim
from ftformat.linkedlist import LinkedList

itoa_base(255, "0123456789abcdef")  # 'ff'
atoi("  -42abc")                    # -42
split("  a  b c ", " ")             # ['a', 'b', 'c']
strtrim("xxhixx", "x")              # 'hi'

items = LinkedList([1, 2, 3])
list(items.map(lambda x: x * 2))    # [2, 4, 6]
items.last()                        # 3
```