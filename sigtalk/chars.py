"""ASCII character classification and case conversion.

Every function takes either a one-character string or an integer code.
The classifiers return booleans. The case converters return the same kind
of value they were given.
"""

from typing import Union

Char = Union[str, int]


def _code(c: Char) -> int:
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c)
    if isinstance(c, int):
        return c
    raise TypeError(f"expected a character or an integer code, got {type(c).__name__}")


def isdigit(c: Char) -> bool:
    """True for the decimal digits 0 to 9."""
    return ord("0") <= _code(c) <= ord("9")


def isalpha(c: Char) -> bool:
    """True for the ASCII letters a-z and A-Z."""
    code = _code(c)
    return ord("a") <= code <= ord("z") or ord("A") <= code <= ord("Z")


def isalnum(c: Char) -> bool:
    """True for ASCII letters and decimal digits."""
    return isalpha(c) or isdigit(c)


def isascii(c: Char) -> bool:
    """True for codes 0 to 127."""
    return 0 <= _code(c) <= 127


def isprint(c: Char) -> bool:
    """True for printable ASCII, space included."""
    return ord(" ") <= _code(c) <= ord("~")


def _convert(c: Char, low: str, high: str, shift: int) -> Char:
    code = _code(c)
    if ord(low) <= code <= ord(high):
        code += shift
    return chr(code) if isinstance(c, str) else code


def toupper(c: Char) -> Char:
    """Turn an ASCII lower-case letter into upper case; leave anything else."""
    return _convert(c, "a", "z", -32)


def tolower(c: Char) -> Char:
    """Turn an ASCII upper-case letter into lower case; leave anything else."""
    return _convert(c, "A", "Z", 32)