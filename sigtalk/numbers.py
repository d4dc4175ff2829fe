"""Conversions between integers and decimal text."""

from itertools import takewhile

from sigtalk.chars import isdigit

_SPACES = " \t\n\v\f\r"


def atoi(text: str) -> int:
    """Read a leading decimal integer from text.

    Leading blanks are skipped and one sign is accepted; reading stops at the
    first non-digit. Text without digits reads as 0.
    """
    rest = text.lstrip(_SPACES)
    sign = 1
    if rest[:1] in ("-", "+"):
        if rest[0] == "-":
            sign = -1
        rest = rest[1:]
    digits = "".join(takewhile(isdigit, rest))
    return sign * int(digits) if digits else 0


def nbrlen(n: int) -> int:
    """Count the characters of n in decimal, sign included; zero counts as 0."""
    return len(str(n)) if n else 0


def itoa(n: int) -> str:
    """Decimal text of n, sized by nbrlen, so zero gives the empty string."""
    if not isinstance(n, int):
        raise TypeError(f"expected an integer, got {type(n).__name__}")
    return str(n) if nbrlen(n) else ""