import pytest

from minishkit.shell_args import (
    NumericArgumentError,
    TooManyArgumentsError,
    echo_option_length,
    parse_exit,
)


@pytest.mark.parametrize("text", ["-n", "-nnnn"])
def test_echo_option_valid(text):
    assert echo_option_length(text, False) == len(text)
    assert echo_option_length(text, True) == len(text)


@pytest.mark.parametrize("text", ["", "-", "hello", "-nx", "-x", "n"])
def test_echo_option_invalid(text):
    assert echo_option_length(text, False) is None


def test_echo_option_trailing_space_unquoted():
    assert echo_option_length("-n  ", False) == len("-n  ")


def test_echo_option_trailing_space_quoted():
    assert echo_option_length("-n ", True) is None


def test_exit_without_argument():
    assert parse_exit("exit") == 0


def test_exit_with_number():
    assert parse_exit("exit 42") == 42


def test_exit_wraps_to_byte():
    assert parse_exit("exit -1") == 255
    assert parse_exit("exit 256") == 0


def test_exit_leading_spaces():
    assert parse_exit("exit    42") == parse_exit("exit 42")


def test_exit_too_many_arguments():
    with pytest.raises(TooManyArgumentsError) as info:
        parse_exit("exit 1 2")
    assert info.value.status == 1
    assert "too many arguments" in str(info.value)


def test_exit_non_numeric():
    with pytest.raises(NumericArgumentError) as info:
        parse_exit("exit abc")
    assert info.value.status == 2
    assert info.value.word == "abc"
    assert "numeric argument required" in str(info.value)


def test_exit_alpha_with_more_arguments():
    with pytest.raises(NumericArgumentError) as info:
        parse_exit("exit abc def")
    assert info.value.word == "abc"


def test_exit_overflow():
    with pytest.raises(NumericArgumentError) as info:
        parse_exit("exit 99999999999999999999")
    assert info.value.word == "99999999999999999999"


def test_exit_empty_argument():
    with pytest.raises(NumericArgumentError) as info:
        parse_exit("exit ")
    assert info.value.word == ""