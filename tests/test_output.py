import io

import pytest

from ftkit.output import print_error, put_char, put_endl, put_nbr, put_str


def test_put_char_string():
    out = io.StringIO()
    put_char("x", out)
    assert out.getvalue() == "x"


def test_put_char_code_point():
    out = io.StringIO()
    put_char(ord("Q"), out)
    assert out.getvalue() == "Q"


def test_put_char_rejects_long_string():
    with pytest.raises(TypeError):
        put_char("ab", io.StringIO())


def test_put_char_defaults_to_stdout(capsys):
    put_char("z")
    assert capsys.readouterr().out == "z"


def test_put_str_writes_text():
    out = io.StringIO()
    put_str("hello world", out)
    assert out.getvalue() == "hello world"


def test_put_str_rejects_none():
    with pytest.raises(TypeError):
        put_str(None, io.StringIO())


def test_put_endl_appends_newline():
    out = io.StringIO()
    put_endl("line", out)
    assert out.getvalue() == "line\n"


def test_put_endl_none_writes_nothing():
    out = io.StringIO()
    put_endl(None, out)
    assert out.getvalue() == ""


@pytest.mark.parametrize(
    "n, expected",
    [(0, "0"), (42, "42"), (-7, "-7"), (-2147483648, "-2147483648"), (147483648, "147483648")],
)
def test_put_nbr(n, expected):
    out = io.StringIO()
    put_nbr(n, out)
    assert out.getvalue() == expected


def test_put_nbr_rejects_non_integer():
    with pytest.raises(TypeError):
        put_nbr("12", io.StringIO())


def test_print_error_writes_and_exits():
    out = io.StringIO()
    with pytest.raises(SystemExit) as excinfo:
        print_error("Error\n", out)
    assert excinfo.value.code == 1
    assert out.getvalue() == "Error\n"


def test_print_error_defaults_to_stderr(capsys):
    with pytest.raises(SystemExit) as excinfo:
        print_error("bad input")
    captured = capsys.readouterr()
    assert excinfo.value.code == 1
    assert captured.err == "bad input"
    assert captured.out == ""