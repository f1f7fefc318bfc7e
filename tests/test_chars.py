import string

import pytest
from hypothesis import given
from hypothesis import strategies as st

from ftkit.chars import (
    is_alnum,
    is_alpha,
    is_ascii,
    is_digit,
    is_print,
    to_lower,
    to_upper,
)

ASCII = [chr(i) for i in range(128)]


@pytest.mark.parametrize("c", ASCII)
def test_is_alpha_matches_ascii_letters(c):
    assert is_alpha(c) == (c in string.ascii_letters)


@pytest.mark.parametrize("c", ASCII)
def test_is_digit_matches_ascii_digits(c):
    assert is_digit(c) == (c in string.digits)


@pytest.mark.parametrize("c", ASCII)
def test_is_alnum_is_letter_or_digit(c):
    assert is_alnum(c) == (c in string.ascii_letters + string.digits)


@pytest.mark.parametrize("c", ASCII)
def test_is_print_matches_printable_range(c):
    assert is_print(c) == (c.isprintable() and c in string.printable)


def test_punctuation_between_cases_is_not_alpha():
    assert [is_alpha(c) for c in "[\\]^_`"] == [False] * 6


@given(st.integers(min_value=-1000, max_value=1000))
def test_is_ascii_range(code):
    assert is_ascii(code) == (0 <= code <= 127)


@given(st.characters())
def test_int_and_str_agree(c):
    code = ord(c)
    assert is_alpha(c) == is_alpha(code)
    assert is_digit(c) == is_digit(code)
    assert is_print(c) == is_print(code)
    assert to_upper(code) == ord(to_upper(c))
    assert to_lower(code) == ord(to_lower(c))


@pytest.mark.parametrize("c", string.ascii_lowercase)
def test_to_upper_lowercase(c):
    assert to_upper(c) == c.upper()
    assert to_lower(to_upper(c)) == c


@pytest.mark.parametrize("c", string.ascii_uppercase)
def test_to_lower_uppercase(c):
    assert to_lower(c) == c.lower()
    assert to_upper(to_lower(c)) == c


@pytest.mark.parametrize("c", string.digits + string.punctuation + " \t\n")
def test_case_conversion_leaves_non_letters(c):
    assert to_upper(c) == c
    assert to_lower(c) == c


@pytest.mark.parametrize("c", ["é", "ß", "Ω", "ñ"])
def test_non_ascii_letters_are_untouched(c):
    assert to_upper(c) == c
    assert to_lower(c) == c
    assert is_alpha(c) is False


def test_int_conversion_returns_int():
    assert to_upper(ord("q")) == ord("Q")
    assert to_lower(ord("Q")) == ord("q")


@pytest.mark.parametrize("bad", ["", "ab", 1.5, None, True])
def test_rejects_non_characters(bad):
    with pytest.raises(TypeError):
        is_alpha(bad)