import pytest

from pipex.chars import (
    is_alnum,
    is_alpha,
    is_ascii,
    is_digit,
    is_print,
    to_lower,
    to_upper,
)

ASCII_CODES = range(128)


def test_is_alpha_matches_ascii_letters():
    for code in ASCII_CODES:
        assert is_alpha(code) == chr(code).isalpha()


def test_is_digit_matches_ascii_digits():
    for code in ASCII_CODES:
        assert is_digit(code) == chr(code).isdigit()


def test_is_alnum_matches_ascii_alnum():
    for code in ASCII_CODES:
        assert is_alnum(code) == chr(code).isalnum()


def test_is_print_matches_ascii_printable():
    for code in ASCII_CODES:
        expected = chr(code).isprintable()
        assert is_print(code) == expected


@pytest.mark.parametrize("code", [-1, 128, 200, 255, 1000])
def test_outside_ascii_is_rejected(code):
    assert is_ascii(code) is False
    assert is_alpha(code) is False
    assert is_digit(code) is False
    assert is_print(code) is False


def test_is_ascii_accepts_whole_range():
    assert all(is_ascii(code) for code in ASCII_CODES)


def test_accepts_single_character_strings():
    assert is_alpha("q") is True
    assert is_digit("7") is True
    assert is_digit("x") is False


def test_multi_character_string_raises():
    with pytest.raises(ValueError):
        is_alpha("ab")


def test_case_conversion_matches_str_methods():
    for code in ASCII_CODES:
        ch = chr(code)
        assert to_lower(ch) == ch.lower()
        assert to_upper(ch) == ch.upper()
        assert to_lower(code) == ord(ch.lower())
        assert to_upper(code) == ord(ch.upper())


@pytest.mark.parametrize("code", [-5, 128, 196, 300])
def test_case_conversion_leaves_non_ascii(code):
    assert to_lower(code) == code
    assert to_upper(code) == code


def test_case_round_trip_for_letters():
    for code in range(ord("a"), ord("z") + 1):
        assert to_lower(to_upper(code)) == code