"""Tests for result display formatting."""

import math

import pytest

from eyepiece_calculator.calculator import compute
from eyepiece_calculator.formatting import (
    format_exit_pupil,
    format_fixed,
    format_magnification,
    format_results,
    format_true_fov,
    max_magnification_status,
)


def test_format_fixed_rounds_half_away_from_zero():
    """Test exact halves round up."""
    assert format_fixed(2.5, 0) == "3"
    assert format_fixed(0.125, 2) == "0.13"
    assert format_fixed(120.0, 0) == "120"


def test_format_fixed_uses_exact_binary_value():
    """Test values just below a half round down."""
    # 1.005 is stored as 1.00499999...
    assert format_fixed(1.005, 2) == "1.00"


def test_format_individual_values():
    """Test units and suffixes."""
    assert format_magnification(174.825) == "175×"
    assert format_exit_pupil(0.286) == "0.29 mm"
    assert format_true_fov(52 / 120) == "0.43°"


def test_format_undefined_values():
    """Test undefined values render as a placeholder."""
    assert format_magnification(None) == "---"
    assert format_exit_pupil(None) == "---"
    assert format_true_fov(None) == "---"


def test_format_results_within_limit():
    """Test formatting of a normal configuration."""
    formatted = format_results(compute(1200, 114, 10, 52))

    assert formatted.magnification == "120×"
    assert formatted.exit_pupil == "0.95 mm"
    assert formatted.max_useful_magnification == "228×"
    assert formatted.true_fov == "0.43°"
    assert formatted.max_magnification_status == "Within limit"


def test_format_results_limit_exceeded():
    """Test formatting of an over-magnified configuration without AFOV."""
    formatted = format_results(compute(500, 50, 2.86).results)

    assert formatted.magnification == "175×"
    assert formatted.exit_pupil == "0.29 mm"
    assert formatted.max_useful_magnification == "100×"
    assert formatted.true_fov == "---"
    assert formatted.max_magnification_status == "Limit exceeded"


def test_format_results_invalid_inputs():
    """Test every card shows the placeholder for invalid input."""
    formatted = format_results(compute(1000, -50, 25, 52))

    assert formatted.magnification == "---"
    assert formatted.exit_pupil == "---"
    assert formatted.max_useful_magnification == "---"
    assert formatted.true_fov == "---"
    assert formatted.max_magnification_status == ""


def test_max_magnification_status_at_limit():
    """Test magnification equal to the maximum is within the limit."""
    assert max_magnification_status(compute(1000, 50, 10).results) == "Within limit"


@pytest.mark.parametrize(
    "value, digits, expected",
    [
        (1e30, 0, "1000000000000000019884624838656"),
        (1e22, 2, "10000000000000000000000.00"),
        (1e-300, 2, "0.00"),
        (math.inf, 2, "inf"),
    ],
)
def test_format_fixed_extreme_values(value, digits, expected):
    """Test very large and very small values format without raising."""
    assert format_fixed(value, digits) == expected


def test_format_results_huge_magnification():
    """Test formatting results of a very high magnification."""
    formatted = format_results(compute(1e30, 114, 1))

    assert formatted.magnification == "1000000000000000019884624838656×"
    assert formatted.exit_pupil == "0.00 mm"
    assert formatted.max_magnification_status == "Limit exceeded"
