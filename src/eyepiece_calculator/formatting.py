"""Display formatting for calculator results."""

import math
from decimal import ROUND_HALF_UP, Context, Decimal
from typing import Optional, Union

from eyepiece_calculator.constants import (
    EXIT_PUPIL_UNIT,
    LIMIT_EXCEEDED_STATUS,
    MAGNIFICATION_SUFFIX,
    TRUE_FOV_UNIT,
    UNDEFINED_PLACEHOLDER,
    WITHIN_LIMIT_STATUS,
)
from eyepiece_calculator.types import (
    CalculationOutcome,
    CalculationResults,
    FormattedResults,
)

__all__ = [
    'format_fixed',
    'format_magnification',
    'format_exit_pupil',
    'format_true_fov',
    'max_magnification_status',
    'format_results',
]


def format_fixed(value: float, digits: int) -> str:
    """
    Format a value with a fixed number of decimals.

    Rounds half away from zero on the exact binary value, so 0.125 gives
    "0.13" and 2.5 gives "3".

    Args:
        value: Number to format
        digits: Number of decimal places

    Returns:
        Formatted string
    """
    if not math.isfinite(value):
        return f"{value:.{digits}f}"

    exact = Decimal(value)
    # Enough significant digits for every integer digit plus the decimals
    context = Context(prec=max(28, exact.adjusted() + digits + 2))
    exponent = Decimal(1).scaleb(-digits)
    return str(exact.quantize(exponent, rounding=ROUND_HALF_UP, context=context))


def format_magnification(value: Optional[float]) -> str:
    if value is None:
        return UNDEFINED_PLACEHOLDER
    return f"{format_fixed(value, 0)}{MAGNIFICATION_SUFFIX}"


def format_exit_pupil(value: Optional[float]) -> str:
    if value is None:
        return UNDEFINED_PLACEHOLDER
    return f"{format_fixed(value, 2)} {EXIT_PUPIL_UNIT}"


def format_true_fov(value: Optional[float]) -> str:
    if value is None:
        return UNDEFINED_PLACEHOLDER
    return f"{format_fixed(value, 2)}{TRUE_FOV_UNIT}"


def max_magnification_status(results: CalculationResults) -> str:
    """Status line shown under the maximum useful magnification."""
    if results.magnification is None or results.max_useful_magnification is None:
        return ""
    if results.magnification <= results.max_useful_magnification:
        return WITHIN_LIMIT_STATUS
    return LIMIT_EXCEEDED_STATUS


def format_results(
    outcome: Union[CalculationOutcome, CalculationResults],
) -> FormattedResults:
    """
    Render each result as its display string.

    Args:
        outcome: Calculator outcome, or its results alone

    Returns:
        FormattedResults with one string per result card
    """
    results = outcome.results if isinstance(outcome, CalculationOutcome) else outcome
    return FormattedResults(
        magnification=format_magnification(results.magnification),
        exit_pupil=format_exit_pupil(results.exit_pupil),
        max_useful_magnification=format_magnification(results.max_useful_magnification),
        true_fov=format_true_fov(results.true_fov),
        max_magnification_status=max_magnification_status(results),
    )
