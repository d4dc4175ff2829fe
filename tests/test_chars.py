import string

import pytest

from sigtalk.chars import (
    isalnum,
    isalpha,
    isascii,
    isdigit,
    isprint,
    tolower,
    toupper,
)


def test_digits_are_digits():
    assert all(isdigit(ch) for ch in string.digits)
    assert all(isdigit(ord(ch)) for ch in string.digits)


def test_non_digits_are_not_digits():
    others = string.ascii_letters + string.punctuation + string.whitespace
    assert not any(isdigit(ch) for ch in others)
    assert not isdigit("٣")


def test_letters_are_alpha():
    assert all(isalpha(ch) for ch in string.ascii_letters)
    assert not any(isalpha(ch) for ch in string.digits + string.punctuation)
    assert not isalpha("é")


@pytest.mark.parametrize("code", range(-5, 300))
def test_alnum_is_alpha_or_digit(code):
    assert isalnum(code) == (isalpha(code) or isdigit(code))


def test_ascii_bounds():
    assert isascii(0)
    assert isascii(127)
    assert not isascii(128)
    assert not isascii(-1)
    assert not isascii("é")


def test_printable_bounds():
    assert isprint(" ")
    assert isprint("~")
    assert not isprint(127)
    assert not isprint("\t")
    assert not isprint("\n")
    assert all(isprint(ch) for ch in string.ascii_letters + string.digits + string.punctuation)


def test_toupper_letters():
    for ch in string.ascii_lowercase:
        assert toupper(ch) == ch.upper()
    for ch in string.ascii_uppercase:
        assert toupper(ch) == ch


def test_tolower_letters():
    for ch in string.ascii_uppercase:
        assert tolower(ch) == ch.lower()
    for ch in string.ascii_lowercase:
        assert tolower(ch) == ch


@pytest.mark.parametrize("ch", list(string.digits + string.punctuation + " é"))
def test_case_conversion_leaves_others(ch):
    assert toupper(ch) == ch
    assert tolower(ch) == ch


@pytest.mark.parametrize("ch", list(string.ascii_letters))
def test_integer_codes_convert_like_characters(ch):
    assert toupper(ord(ch)) == ord(toupper(ch))
    assert tolower(ord(ch)) == ord(tolower(ch))


def test_case_round_trip():
    for ch in string.ascii_lowercase:
        assert tolower(toupper(ch)) == ch


def test_bad_arguments():
    with pytest.raises(ValueError):
        isdigit("12")
    with pytest.raises(ValueError):
        toupper("")
    with pytest.raises(TypeError):
        isalpha(1.5)