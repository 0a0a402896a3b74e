"""Parsing of raw form values into floats."""

import logging
import math
import re
from typing import Union

logger = logging.getLogger(__name__)

__all__ = ['parse_number', 'is_positive_finite']

RawValue = Union[str, int, float, None]

# Longest leading decimal literal, as typed into a numeric form field
_LEADING_NUMBER = re.compile(
    r"[+-]?(?:Infinity|(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)", re.ASCII
)


def parse_number(raw: RawValue) -> float:
    """
    Parse a raw input value to a float.

    Numbers pass through unchanged. Strings are parsed from their leading
    numeric prefix, ignoring surrounding whitespace, so ``"12.5mm"`` gives
    12.5. Anything that cannot be parsed gives NaN.

    Args:
        raw: Raw form value (text or number), or None when the field is absent

    Returns:
        Parsed float, or NaN when the value is not numeric
    """
    if raw is None or isinstance(raw, bool):
        return math.nan

    if isinstance(raw, (int, float)):
        try:
            return float(raw)
        except OverflowError:
            return math.inf if raw > 0 else -math.inf

    if not isinstance(raw, str):
        logger.debug(f"Unsupported input type: {type(raw).__name__}")
        return math.nan

    match = _LEADING_NUMBER.match(raw.strip())
    if match is None:
        logger.debug(f"Could not parse {raw!r} as a number")
        return math.nan

    text = match.group(0)
    if text.lstrip("+-") == "Infinity":
        return -math.inf if text.startswith("-") else math.inf
    return float(text)


def is_positive_finite(value: float) -> bool:
    """Check that a parsed value is a real finite number strictly above zero."""
    return math.isfinite(value) and value > 0
