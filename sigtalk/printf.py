"""Formatted output with the conversions c, s, p, d, i, u, x, X and %.

Integers are taken as the fixed-width values the conversions name: %d, %i
as signed 32-bit, %u, %x, %X as unsigned 32-bit and %p as an unsigned
64-bit address.
"""

import sys
from typing import Any, Iterator, Optional, TextIO

from sigtalk.output import put_char, put_nbr, put_str

_SPECIFIERS = "cspdiuxX%"
_UINT32 = 0xFFFFFFFF
_UINT64 = 0xFFFFFFFFFFFFFFFF


def _check_int(value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"expected an integer, got {type(value).__name__}")
    return value


def _write(text: str, stream: Optional[TextIO]) -> int:
    (sys.stdout if stream is None else stream).write(text)
    return len(text)


def put_unsigned(nb: int, stream: Optional[TextIO] = None) -> int:
    """Write nb as an unsigned 32-bit decimal number."""
    return _write(str(_check_int(nb) & _UINT32), stream)


def put_hex(nb: int, placeholder: str, stream: Optional[TextIO] = None) -> int:
    """Write nb as unsigned 32-bit hexadecimal.

    The digits are lower case when placeholder is "x", upper case otherwise.
    """
    digits = format(_check_int(nb) & _UINT32, "x")
    if placeholder != "x":
        digits = digits.upper()
    return _write(digits, stream)


def put_pointer(address: Optional[int], stream: Optional[TextIO] = None) -> int:
    """Write an address as "0x" and lower-case hexadecimal; None counts as 0."""
    value = 0 if address is None else _check_int(address) & _UINT64
    return _write("0x" + format(value, "x"), stream)


def _to_int32(value: int) -> int:
    return ((value + 2**31) & _UINT32) - 2**31


def _next_value(values: Iterator[Any], spec: str) -> Any:
    try:
        return next(values)
    except StopIteration:
        raise TypeError(f"not enough arguments for %{spec}") from None


def _convert(spec: str, values: Iterator[Any], stream: Optional[TextIO]) -> int:
    if spec == "%":
        return put_char("%", stream)
    value = _next_value(values, spec)
    if spec == "c":
        return put_char(value, stream)
    if spec == "s":
        if value is None:
            return put_str("(null)", stream)
        if not isinstance(value, str):
            raise TypeError(f"%s expects a string, got {type(value).__name__}")
        return put_str(value, stream)
    if spec in "di":
        return put_nbr(_to_int32(_check_int(value)), stream)
    if spec == "u":
        return put_unsigned(value, stream)
    if spec == "p":
        return put_pointer(value, stream)
    return put_hex(value, spec, stream)


def printf(fmt: Optional[str], *args: Any, stream: Optional[TextIO] = None) -> int:
    """Write fmt with its conversions filled from args; return the count written.

    A "%" before a character that names no conversion is dropped and the
    character is written as it is; a "%" at the very end writes nothing.
    Extra arguments are ignored.
    """
    if fmt is None:
        return 0
    values = iter(args)
    chars = iter(fmt.partition("\0")[0])
    written = 0
    for ch in chars:
        if ch != "%":
            written += put_char(ch, stream)
            continue
        spec = next(chars, None)
        if spec is None:
            break
        if spec in _SPECIFIERS:
            written += _convert(spec, values, stream)
        else:
            written += put_char(spec, stream)
    return written