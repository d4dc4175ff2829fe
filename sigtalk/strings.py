"""String building, copying and splitting.

Every function treats a NUL character as the end of the string it is
given. Results come back as new strings; nothing is changed in place.
"""

from typing import Callable, List, Optional, Tuple, Union

Char = Union[str, int]


def _cstr(s: str) -> str:
    return s.partition("\0")[0]


def _char(c: Char) -> str:
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    if isinstance(c, int):
        return chr(c)
    raise TypeError(f"expected a character or an integer code, got {type(c).__name__}")


def _check_size(name: str, n: int) -> None:
    if n < 0:
        raise ValueError(f"{name} must not be negative, got {n}")


def strlen(s: str) -> int:
    """Number of characters before the first NUL."""
    return len(_cstr(s))


def strlcpy(src: str, dstsize: int) -> Tuple[str, int]:
    """Copy src into a buffer of dstsize characters, terminator included.

    Returns the copied text, at most dstsize - 1 characters long, and the
    full length of src, which tells whether the copy was cut short.
    """
    _check_size("dstsize", dstsize)
    text = _cstr(src)
    if dstsize == 0:
        return "", len(text)
    return text[: dstsize - 1], len(text)


def strlcat(dst: str, src: str, dstsize: int) -> Tuple[str, int]:
    """Append src to dst within a buffer of dstsize characters.

    Returns the resulting text and the length the full result would need.
    When dstsize does not exceed the length of dst, dst is left as it is and
    the needed length is dstsize plus the length of src.
    """
    _check_size("dstsize", dstsize)
    head = _cstr(dst)
    tail = _cstr(src)
    if dstsize <= len(head):
        return head, dstsize + len(tail)
    room = dstsize - len(head) - 1
    return head + tail[:room], len(head) + len(tail)


def strdup(s: str) -> str:
    """A copy of s up to its first NUL."""
    return _cstr(s)


def strjoin(s1: str, s2: str) -> str:
    """s1 followed by s2."""
    return _cstr(s1) + _cstr(s2)


def strtrim(s: str, charset: str) -> str:
    """s with every leading and trailing character found in charset removed."""
    text = _cstr(s)
    chars = _cstr(charset)
    if not chars:
        return text
    return text.strip(chars)


def striteri(s: str, func: Callable[[int, str], Optional[str]]) -> str:
    """Call func(index, char) for each character of s.

    func returns the character to put in that place, or None to keep it.
    Returns the resulting string.
    """
    result = []
    for index, ch in enumerate(_cstr(s)):
        replacement = func(index, ch)
        result.append(ch if replacement is None else _char(replacement))
    return "".join(result)


def strmapi(s: str, func: Callable[[int, str], str]) -> str:
    """Build a mapped string in a fresh, zero-filled buffer.

    The mapping runs only while the new buffer holds characters, and a fresh
    buffer holds none, so func is never called and the result is empty.
    """
    _cstr(s)
    if not callable(func):
        raise TypeError("func must be callable")
    return ""


def substr(s: str, start: int, length: int) -> str:
    """At most length characters of s from index start.

    A start past the end of s gives the empty string.
    """
    _check_size("start", start)
    _check_size("length", length)
    return _cstr(s)[start : start + length]


def split(s: str, sep: Char) -> List[str]:
    """The non-empty words of s between occurrences of sep."""
    text = _cstr(s)
    separator = _char(sep)
    if separator == "\0":
        return [text] if text else []
    return [word for word in text.split(separator) if word]