import string

import pytest

from pushswap.chars import (
    atoi,
    is_alnum,
    is_alpha,
    is_ascii,
    is_digit,
    is_print,
    itoa,
    to_lower,
    to_upper,
)

ASCII_RANGE = range(0, 128)


@pytest.mark.parametrize("code", ASCII_RANGE)
def test_is_alpha_matches_ascii_letters(code):
    assert is_alpha(code) == (chr(code) in string.ascii_letters)


@pytest.mark.parametrize("code", ASCII_RANGE)
def test_is_digit_matches_ascii_digits(code):
    assert is_digit(code) == (chr(code) in string.digits)


@pytest.mark.parametrize("code", ASCII_RANGE)
def test_is_alnum_is_letter_or_digit(code):
    assert is_alnum(code) == (is_alpha(code) or is_digit(code))


def test_classifiers_accept_characters():
    assert is_alpha("q") and not is_alpha("5")
    assert is_digit("5") and not is_digit("q")
    assert is_alnum("Z") and not is_alnum("-")


def test_is_ascii_bounds():
    assert is_ascii(0)
    assert is_ascii(127)
    assert not is_ascii(128)
    assert not is_ascii(-1)


def test_is_print_bounds():
    assert is_print(" ")
    assert is_print("~")
    assert not is_print(127)
    assert not is_print("\n")


def test_classifier_rejects_long_string():
    with pytest.raises(ValueError):
        is_alpha("ab")


@pytest.mark.parametrize("letter", string.ascii_lowercase)
def test_case_round_trip_lower(letter):
    upper = to_upper(letter)
    assert upper == letter.upper()
    assert to_lower(upper) == letter


@pytest.mark.parametrize("letter", string.ascii_uppercase)
def test_case_round_trip_upper(letter):
    lower = to_lower(letter)
    assert lower == letter.lower()
    assert to_upper(lower) == letter


@pytest.mark.parametrize("char", string.digits + string.punctuation + " ")
def test_case_mapping_leaves_non_letters(char):
    assert to_lower(char) == char
    assert to_upper(char) == char


def test_case_mapping_preserves_int_type():
    assert to_upper(ord("a")) == ord("A")
    assert to_lower(ord("A")) == ord("a")


@pytest.mark.parametrize(
    "text, expected",
    [
        ("42", 42),
        ("   -42abc", -42),
        ("\t\n+17", 17),
        ("", 0),
        ("abc", 0),
        ("--5", 0),
        ("-", 0),
        ("12 34", 12),
    ],
)
def test_atoi_parses_leading_number(text, expected):
    assert atoi(text) == expected


def test_atoi_limits():
    assert atoi("2147483647") == 2147483647
    assert atoi("-2147483648") == -2147483648


def test_atoi_wraps_past_int_range():
    assert atoi("2147483648") == -2147483648


@pytest.mark.parametrize("n", [0, 7, -7, 2147483647, -2147483648, 100000, -909])
def test_itoa_atoi_round_trip(n):
    assert atoi(itoa(n)) == n
    assert itoa(n) == str(n)