"""Optical Calculator - telescope/eyepiece performance metrics.

Derives, from the telescope and eyepiece parameters:
1. Magnification (scope focal length / eyepiece focal length)
2. Exit pupil (aperture / magnification)
3. Maximum useful magnification (2x aperture in mm)
4. True field of view (apparent FOV / magnification)

and flags an exit pupil wider than the eye's pupil or a magnification above
the useful maximum. Malformed input never raises: results it prevents from
being computed are reported as None.
"""

import logging
import math
from typing import List, Optional, Tuple

from pydantic import Field, field_validator
from pydantic.dataclasses import dataclass

from eyepiece_calculator.constants import (
    EXIT_PUPIL_WARNING,
    MAX_EYE_PUPIL_MM,
    MAX_USEFUL_MAGNIFICATION_PER_MM,
    OVER_MAGNIFICATION_WARNING,
)
from eyepiece_calculator.parsing import RawValue, is_positive_finite, parse_number
from eyepiece_calculator.types import (
    UNDEFINED_RESULTS,
    CalculationOutcome,
    CalculationResults,
)

logger = logging.getLogger(__name__)

__all__ = ['TelescopeInputs', 'OpticalCalculator', 'compute', 'compute_inputs']


@dataclass
class TelescopeInputs:
    """Telescope and eyepiece parameters, parsed from raw form values.

    Raw strings are accepted as-is; anything non-numeric becomes NaN so that
    construction never fails on user input.
    """

    focal_length_scope: float = Field(default=math.nan)  # mm
    aperture_diameter: float = Field(default=math.nan)  # mm
    focal_length_eyepiece: float = Field(default=math.nan)  # mm
    eyepiece_apparent_fov: float = Field(default=math.nan)  # degrees, optional

    @field_validator("*", mode="before")
    @classmethod
    def parse_raw_value(cls, v: RawValue) -> float:
        """Parse text or numbers to float, NaN when not numeric."""
        return parse_number(v)

    def as_tuple(self) -> Tuple[float, float, float, float]:
        return (
            self.focal_length_scope,
            self.aperture_diameter,
            self.focal_length_eyepiece,
            self.eyepiece_apparent_fov,
        )

    @property
    def is_valid(self) -> bool:
        """True when all required parameters are finite and positive."""
        return (
            is_positive_finite(self.focal_length_scope)
            and is_positive_finite(self.aperture_diameter)
            and is_positive_finite(self.focal_length_eyepiece)
        )


def compute_inputs(inputs: TelescopeInputs) -> CalculationOutcome:
    """
    Compute the optical metrics and warnings for parsed inputs.

    Args:
        inputs: Parsed telescope and eyepiece parameters

    Returns:
        CalculationOutcome with results (None where undefined) and warnings
    """
    if not inputs.is_valid:
        logger.debug(f"Required inputs invalid, results undefined: {inputs}")
        return CalculationOutcome(results=UNDEFINED_RESULTS, warnings=())

    magnification = inputs.focal_length_scope / inputs.focal_length_eyepiece
    if not is_positive_finite(magnification):
        logger.debug(f"Magnification out of float range: {magnification}")
        return CalculationOutcome(results=UNDEFINED_RESULTS, warnings=())

    exit_pupil = inputs.aperture_diameter / magnification
    max_useful_magnification = MAX_USEFUL_MAGNIFICATION_PER_MM * inputs.aperture_diameter
    if not (is_positive_finite(exit_pupil) and is_positive_finite(max_useful_magnification)):
        logger.debug(
            f"Derived values out of float range: exit_pupil={exit_pupil}, "
            f"max_useful_magnification={max_useful_magnification}"
        )
        return CalculationOutcome(results=UNDEFINED_RESULTS, warnings=())

    true_fov: Optional[float] = None
    if is_positive_finite(inputs.eyepiece_apparent_fov):
        true_fov = inputs.eyepiece_apparent_fov / magnification
        if not is_positive_finite(true_fov):
            true_fov = None

    warnings: List[str] = []
    if exit_pupil > MAX_EYE_PUPIL_MM:
        warnings.append(EXIT_PUPIL_WARNING)
    if magnification > max_useful_magnification:
        warnings.append(OVER_MAGNIFICATION_WARNING)

    return CalculationOutcome(
        results=CalculationResults(
            magnification=magnification,
            exit_pupil=exit_pupil,
            max_useful_magnification=max_useful_magnification,
            true_fov=true_fov,
        ),
        warnings=tuple(warnings),
    )


def compute(
    focal_length_scope: RawValue,
    aperture_diameter: RawValue,
    focal_length_eyepiece: RawValue,
    eyepiece_apparent_fov: RawValue = None,
) -> CalculationOutcome:
    """
    Compute the optical metrics and warnings from raw form values.

    Args:
        focal_length_scope: Telescope focal length (mm)
        aperture_diameter: Telescope aperture (mm)
        focal_length_eyepiece: Eyepiece focal length (mm)
        eyepiece_apparent_fov: Eyepiece apparent field of view (degrees), optional

    Returns:
        CalculationOutcome with results (None where undefined) and warnings
    """
    inputs = TelescopeInputs(
        focal_length_scope=focal_length_scope,
        aperture_diameter=aperture_diameter,
        focal_length_eyepiece=focal_length_eyepiece,
        eyepiece_apparent_fov=eyepiece_apparent_fov,
    )
    return compute_inputs(inputs)


@dataclass
class OpticalCalculator:
    """
    Calculator host for interactive front ends.

    Recomputes on every call; when cache_last is set, an input identical to
    the previous one returns the previous outcome.
    """

    cache_last: bool = Field(default=True)

    def __post_init__(self):
        """Initialize the last-call cache."""
        self._last_key: Optional[Tuple[float, float, float, float]] = None
        self._last_outcome: Optional[CalculationOutcome] = None

    def analyze(self, inputs: TelescopeInputs) -> CalculationOutcome:
        """
        Compute the outcome for one set of inputs.

        Args:
            inputs: Parsed telescope and eyepiece parameters

        Returns:
            CalculationOutcome for the inputs
        """
        key = inputs.as_tuple()
        if self.cache_last and self._last_outcome is not None and key == self._last_key:
            logger.debug("Inputs unchanged, reusing last outcome")
            return self._last_outcome

        outcome = compute_inputs(inputs)

        if outcome.is_complete:
            logger.info(
                f"Calculation complete: magnification={outcome.results.magnification:.1f}, "
                f"exit_pupil={outcome.results.exit_pupil:.2f}, "
                f"num_warnings={len(outcome.warnings)}"
            )
        else:
            logger.info("Calculation skipped: required inputs are invalid or missing")

        if self.cache_last:
            self._last_key = key
            self._last_outcome = outcome

        return outcome

    def batch_analyze(self, inputs_list: List[TelescopeInputs]) -> List[CalculationOutcome]:
        """
        Compute outcomes for several input sets, in order.

        Args:
            inputs_list: List of parsed input sets

        Returns:
            List of CalculationOutcome objects
        """
        logger.info(f"Batch analyzing {len(inputs_list)} input sets")
        return [self.analyze(inputs) for inputs in inputs_list]

    def clear_cache(self) -> None:
        self._last_key = None
        self._last_outcome = None
