import pytest
from hypothesis import given
from hypothesis import strategies as st

from ftkit.numbers import atoi, count_digits, is_number, itoa

INT32 = st.integers(min_value=-(2**31), max_value=2**31 - 1)


@given(INT32)
def test_atoi_round_trips_with_itoa(n):
    assert atoi(itoa(n)) == n


@given(INT32)
def test_itoa_matches_str(n):
    assert itoa(n) == str(n)


@given(st.integers(min_value=-(10**30), max_value=10**30))
def test_count_digits_is_length_of_text(n):
    assert count_digits(n) == len(itoa(n))


@pytest.mark.parametrize(
    "text",
    ["42", "  42", "\t\n\v\f\r 7", "+15", "-15", "00123", "-0", "12abc", "  -9 9"],
)
def test_atoi_matches_leading_integer(text):
    stripped = text.lstrip(" \t\n\v\f\r")
    end = 1 if stripped[:1] in "+-" else 0
    while end < len(stripped) and stripped[end].isdigit():
        end += 1
    assert atoi(text) == int(stripped[:end])


@pytest.mark.parametrize("text", ["+-5", "-+5", "--5", "++5"])
def test_atoi_double_sign_is_zero(text):
    assert atoi(text) == 0


@pytest.mark.parametrize("text", ["", "   ", "abc", "-", "+", " x12"])
def test_atoi_without_digits_is_zero(text):
    assert atoi(text) == 0


def test_atoi_int32_limits():
    assert atoi("-2147483648") == -2147483648
    assert atoi("2147483647") == 2**31 - 1


def test_atoi_wraps_past_int32():
    assert atoi("2147483648") == -2147483648


def test_itoa_zero_and_extremes():
    assert itoa(0) == "0"
    assert itoa(-2147483648) == "-2147483648"
    assert count_digits(-2147483648) == len("-2147483648")


@given(INT32)
def test_is_number_accepts_itoa_output(n):
    assert is_number(itoa(n))
    assert is_number("+" + itoa(abs(n)))


@pytest.mark.parametrize("text", ["", "+", "-", "12a", "a12", "1 2", "--1", "+-1", " 1", "1.0", "٣"])
def test_is_number_rejects(text):
    assert is_number(text) is False


@given(st.text(alphabet="0123456789", min_size=1))
def test_is_number_accepts_digit_strings(text):
    assert is_number(text)
    assert is_number("-" + text)