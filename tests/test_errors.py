import pytest

from okeyshell.errors import ShellError, error_handler, format_error


def test_error_handler_raises_with_message_and_status():
    with pytest.raises(ShellError) as info:
        error_handler("getcwd failed", 3)
    assert info.value.message == "getcwd failed"
    assert info.value.status == 3


def test_error_handler_default_status_is_one():
    with pytest.raises(ShellError) as info:
        error_handler("ft_lstnew failed")
    assert info.value.status == 1


def test_shell_error_str_is_message():
    error = ShellError("ft_strjoin failed", 2)
    assert str(error) == "ft_strjoin failed"
    assert error.status == 2


def test_format_error_prefix():
    assert format_error("getcwd failed") == "Error: getcwd failed"


def test_format_error_keeps_message_intact():
    message = "line one\nline two"
    result = format_error(message)
    assert result.endswith(message)
    assert result.startswith("Error: ")