import io

import pytest

from okeyshell.output import put_char, put_endl, put_nbr, put_str


def test_put_char_writes_one_character():
    buffer = io.StringIO()
    put_char("x", buffer)
    put_char("y", buffer)
    assert buffer.getvalue() == "xy"


def test_put_char_rejects_longer_strings():
    with pytest.raises(ValueError):
        put_char("xy", io.StringIO())


def test_put_str_writes_text_unchanged():
    buffer = io.StringIO()
    put_str("Error: ", buffer)
    assert buffer.getvalue() == "Error: "


def test_put_str_empty_writes_nothing():
    buffer = io.StringIO()
    put_str("", buffer)
    assert buffer.getvalue() == ""


def test_put_endl_appends_newline():
    buffer = io.StringIO()
    put_endl("Cleand up and Goodbye!", buffer)
    assert buffer.getvalue() == "Cleand up and Goodbye!\n"


@pytest.mark.parametrize("value", [0, 9, -9, 2147483647, -2147483648])
def test_put_nbr_writes_decimal(value):
    buffer = io.StringIO()
    put_nbr(value, buffer)
    assert buffer.getvalue() == str(value)


def test_defaults_to_stdout(capsys):
    put_endl("hello")
    put_nbr(-3)
    assert capsys.readouterr().out == "hello\n-3"