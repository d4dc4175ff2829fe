"""Writing characters, strings and numbers to a text stream.

Each function returns the number of characters it wrote. Without a stream
they write to standard output.
"""

import sys
from typing import Optional, TextIO, Union

Char = Union[str, int]


def _target(stream: Optional[TextIO]) -> TextIO:
    return sys.stdout if stream is None else stream


def _write(text: str, stream: Optional[TextIO]) -> int:
    if text:
        _target(stream).write(text)
    return len(text)


def put_char(c: Char, stream: Optional[TextIO] = None) -> int:
    """Write one character; an integer code is taken modulo 256."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        ch = c
    elif isinstance(c, int):
        ch = chr(c & 0xFF)
    else:
        raise TypeError(f"expected a character or an integer code, got {type(c).__name__}")
    return _write(ch, stream)


def put_str(s: str, stream: Optional[TextIO] = None) -> int:
    """Write s up to its first NUL."""
    return _write(s.partition("\0")[0], stream)


def put_endl(s: str, stream: Optional[TextIO] = None) -> int:
    """Write s up to its first NUL, then a newline."""
    return put_str(s, stream) + put_char("\n", stream)


def put_nbr(n: int, stream: Optional[TextIO] = None) -> int:
    """Write n in decimal, with a minus sign when negative."""
    if not isinstance(n, int):
        raise TypeError(f"expected an integer, got {type(n).__name__}")
    return _write(str(n), stream)