import string

import pytest

from minishkit.chars import (
    is_alnum,
    is_alpha,
    is_ascii,
    is_digit,
    is_print,
    is_space,
    to_lower,
    to_upper,
)

ASCII = [chr(i) for i in range(128)]


@pytest.mark.parametrize("ch", ASCII)
def test_classification_matches_ascii_sets(ch):
    assert is_alpha(ch) == (ch in string.ascii_letters)
    assert is_digit(ch) == (ch in string.digits)
    assert is_alnum(ch) == (ch in string.ascii_letters + string.digits)
    assert is_space(ch) == (ch in " \t\n\v\f\r")
    assert is_print(ch) == (ch in string.printable and ch not in "\t\n\v\f\r")


@pytest.mark.parametrize("ch", ASCII)
def test_int_and_str_agree(ch):
    code = ord(ch)
    assert is_alpha(code) == is_alpha(ch)
    assert is_digit(code) == is_digit(ch)
    assert is_alnum(code) == is_alnum(ch)
    assert is_print(code) == is_print(ch)
    assert is_space(code) == is_space(ch)


def test_is_ascii_bounds():
    assert is_ascii(0)
    assert is_ascii(127)
    assert not is_ascii(128)
    assert not is_ascii(-1)
    assert not is_ascii("é")


def test_non_ascii_letters_are_not_alpha():
    assert not is_alpha("é")
    assert not is_digit("٣")
    assert not is_alnum("ß")


def test_is_space_truncates_integer_codes_to_a_byte():
    assert is_space(256 + ord(" "))
    assert is_space(512 + ord("\t"))
    assert not is_space(256 + ord("a"))


def test_is_space_does_not_treat_bell_as_space():
    assert not is_space("\a")
    assert not is_space("\b")


@pytest.mark.parametrize("ch", string.ascii_lowercase)
def test_to_upper_letters(ch):
    assert to_upper(ch) == ch.upper()
    assert to_upper(ord(ch)) == ord(ch.upper())


@pytest.mark.parametrize("ch", string.ascii_uppercase)
def test_to_lower_letters(ch):
    assert to_lower(ch) == ch.lower()
    assert to_lower(ord(ch)) == ord(ch.lower())


@pytest.mark.parametrize("ch", string.digits + string.punctuation + " ")
def test_case_conversion_leaves_others_unchanged(ch):
    assert to_upper(ch) == ch
    assert to_lower(ch) == ch


def test_case_conversion_leaves_non_ascii_unchanged():
    assert to_upper("é") == "é"
    assert to_lower("É") == "É"


@pytest.mark.parametrize("ch", string.ascii_letters)
def test_case_round_trip(ch):
    assert to_lower(to_upper(ch)) == ch.lower()
    assert to_upper(to_lower(ch)) == ch.upper()


def test_rejects_multi_character_strings():
    with pytest.raises(ValueError):
        is_alpha("ab")
    with pytest.raises(ValueError):
        to_upper("")


def test_rejects_other_types():
    with pytest.raises(TypeError):
        is_digit(1.5)