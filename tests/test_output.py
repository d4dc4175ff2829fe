import io

import pytest

from sigtalk.output import put_char, put_endl, put_nbr, put_str


def test_put_char_writes_one():
    out = io.StringIO()
    assert put_char("x", out) == 1
    assert out.getvalue() == "x"


def test_put_char_integer_code():
    out = io.StringIO()
    put_char(ord("A"), out)
    assert out.getvalue() == "A"


def test_put_char_wraps_to_byte():
    out = io.StringIO()
    put_char(256 + ord("z"), out)
    assert out.getvalue() == "z"


def test_put_char_rejects_long_string():
    with pytest.raises(ValueError):
        put_char("ab", io.StringIO())


def test_put_char_rejects_other_types():
    with pytest.raises(TypeError):
        put_char(1.5, io.StringIO())


def test_put_str_stops_at_nul():
    out = io.StringIO()
    count = put_str("ab\0cd", out)
    assert out.getvalue() == "ab"
    assert count == len(out.getvalue())


def test_put_str_empty_writes_nothing():
    out = io.StringIO()
    assert put_str("", out) == 0
    assert out.getvalue() == ""


def test_put_endl_adds_newline():
    out = io.StringIO()
    count = put_endl("line", out)
    assert out.getvalue() == "line\n"
    assert count == len("line\n")


@pytest.mark.parametrize("n", [0, 7, -7, 42, 2147483647, -2147483648])
def test_put_nbr_round_trip(n):
    out = io.StringIO()
    count = put_nbr(n, out)
    assert int(out.getvalue()) == n
    assert count == len(out.getvalue())


def test_put_nbr_negative_has_sign():
    out = io.StringIO()
    put_nbr(-15, out)
    assert out.getvalue().startswith("-")


def test_put_nbr_rejects_non_integer():
    with pytest.raises(TypeError):
        put_nbr("12", io.StringIO())


def test_default_stream_is_stdout(capsys):
    put_str("hello")
    put_nbr(5)
    assert capsys.readouterr().out == "hello5"


def test_writes_accumulate_in_order():
    out = io.StringIO()
    total = put_str("pid: ", out) + put_nbr(1234, out) + put_endl("", out)
    assert out.getvalue() == "pid: 1234\n"
    assert total == len(out.getvalue())