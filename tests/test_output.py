import io

import pytest

from pushswap.output import put_char, put_endl, put_nbr, put_str


def test_put_char_string():
    buf = io.StringIO()
    put_char("x", buf)
    assert buf.getvalue() == "x"


def test_put_char_code():
    buf = io.StringIO()
    put_char(ord("Q"), buf)
    assert buf.getvalue() == "Q"


def test_put_char_rejects_long_string():
    with pytest.raises(ValueError):
        put_char("ab", io.StringIO())


def test_put_str_writes_text():
    buf = io.StringIO()
    put_str("hello world", buf)
    assert buf.getvalue() == "hello world"


def test_put_str_empty():
    buf = io.StringIO()
    put_str("", buf)
    assert buf.getvalue() == ""


def test_put_endl_appends_newline():
    buf = io.StringIO()
    put_endl("line", buf)
    assert buf.getvalue() == "line\n"


def test_put_endl_leading_newline_doubled():
    buf = io.StringIO()
    put_endl("\nabc", buf)
    assert buf.getvalue() == "\n\nabc\n"


@pytest.mark.parametrize("n", [0, 7, 42, -42, 2147483647])
def test_put_nbr_round_trip(n):
    buf = io.StringIO()
    put_nbr(n, buf)
    assert int(buf.getvalue()) == n


def test_put_nbr_int_min():
    buf = io.StringIO()
    put_nbr(-2147483648, buf)
    assert buf.getvalue() == "-2147483648"


def test_put_nbr_default_stream(capsys):
    put_nbr(123)
    assert capsys.readouterr().out == "123"