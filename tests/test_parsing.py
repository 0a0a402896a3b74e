"""Tests for raw input parsing."""

import math

import pytest

from eyepiece_calculator.parsing import is_positive_finite, parse_number


def test_parse_plain_numbers():
    """Test that numbers pass through as floats."""
    assert parse_number(7) == 7.0
    assert isinstance(parse_number(7), float)
    assert parse_number(2.86) == 2.86


def test_parse_numeric_strings():
    """Test parsing of numeric text."""
    assert parse_number("1200") == 1200.0
    assert parse_number("  42 ") == 42.0
    assert parse_number("2.86") == 2.86
    assert parse_number(".5") == 0.5
    assert parse_number("-3") == -3.0
    assert parse_number("1e3") == 1000.0


def test_parse_leading_number_prefix():
    """Test that trailing text after a number is ignored."""
    assert parse_number("12.5mm") == 12.5
    assert parse_number("52°") == 52.0
    assert parse_number("5e") == 5.0


def test_parse_infinity():
    """Test that Infinity parses but is not a valid positive value."""
    assert parse_number("Infinity") == math.inf
    assert parse_number("-Infinity") == -math.inf
    assert not is_positive_finite(parse_number("Infinity"))


@pytest.mark.parametrize("raw", ["", "   ", "abc", "mm12", None, True, False, [1]])
def test_parse_invalid_gives_nan(raw):
    """Test that unparseable values give NaN instead of raising."""
    assert math.isnan(parse_number(raw))


@pytest.mark.parametrize(
    "value, expected",
    [(1.0, True), (0.001, True), (0.0, False), (-1.0, False), (math.nan, False), (math.inf, False)],
)
def test_is_positive_finite(value, expected):
    """Test the positive finite check."""
    assert is_positive_finite(value) is expected


def test_parse_huge_int():
    """Test integers beyond float range parse to signed infinity."""
    assert parse_number(10**400) == math.inf
    assert parse_number(-(10**400)) == -math.inf
    assert not is_positive_finite(parse_number(10**400))


@pytest.mark.parametrize("raw", ["٣", "１２", "۴.5"])
def test_parse_non_ascii_digits_gives_nan(raw):
    """Test only ASCII digits are accepted."""
    assert math.isnan(parse_number(raw))
