"""Shared types for the optical calculator."""

from typing import NamedTuple, Optional, Tuple


class CalculationResults(NamedTuple):
    """Derived metrics. None means the value could not be computed."""

    magnification: Optional[float]  # Scope focal / eyepiece focal
    exit_pupil: Optional[float]  # mm
    max_useful_magnification: Optional[float]  # 2 x aperture
    true_fov: Optional[float]  # degrees, only with a valid apparent FOV


class CalculationOutcome(NamedTuple):
    """Complete calculator output."""

    results: CalculationResults
    warnings: Tuple[str, ...]  # Exit-pupil check first, then magnification check

    @property
    def is_complete(self) -> bool:
        """True when the required inputs were valid."""
        return self.results.magnification is not None


class FormattedResults(NamedTuple):
    """Display strings for each result card."""

    magnification: str
    exit_pupil: str
    max_useful_magnification: str
    true_fov: str
    max_magnification_status: str


class QuickSetting(NamedTuple):
    """Static observing preset."""

    key: str
    label: str
    recommendation: str


UNDEFINED_RESULTS = CalculationResults(
    magnification=None,
    exit_pupil=None,
    max_useful_magnification=None,
    true_fov=None,
)
