"""Eyepiece Calculator - telescope/eyepiece performance metrics"""

__version__ = "0.1.0"

from .calculator import OpticalCalculator, TelescopeInputs, compute, compute_inputs
from .formatting import format_results
from .presets import QUICK_SETTINGS, get_recommendation
from .types import CalculationOutcome, CalculationResults

__all__ = [
    "OpticalCalculator",
    "TelescopeInputs",
    "compute",
    "compute_inputs",
    "format_results",
    "QUICK_SETTINGS",
    "get_recommendation",
    "CalculationOutcome",
    "CalculationResults",
]
