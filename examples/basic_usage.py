"""Basic usage example for the Optical Calculator."""

import logging

from eyepiece_calculator.calculator import OpticalCalculator, TelescopeInputs, compute
from eyepiece_calculator.formatting import format_results
from eyepiece_calculator.presets import list_quick_settings

# Configure logging
logging.basicConfig(level=logging.INFO)


# Example: Compute a single configuration
def analyze_single_setup():
    """Compute metrics for a 114/1200 reflector with a 10 mm eyepiece."""
    outcome = compute("1200", "114", "10", "52")
    formatted = format_results(outcome)

    print("\nResults for 114/1200 with a 10 mm, 52° eyepiece:")
    print(f"Magnification: {formatted.magnification}")
    print(f"Exit pupil: {formatted.exit_pupil}")
    print(f"Max. useful magnification: {formatted.max_useful_magnification} "
          f"({formatted.max_magnification_status})")
    print(f"True field of view: {formatted.true_fov}")
    for warning in outcome.warnings:
        print(f"  ! {warning}")


# Example: Compare an eyepiece set on one telescope
def compare_eyepieces():
    """Compute metrics for several eyepieces in batch."""
    calculator = OpticalCalculator()
    eyepieces = [40, 25, 10, 6, 2]

    inputs_list = [
        TelescopeInputs(
            focal_length_scope=1200,
            aperture_diameter=114,
            focal_length_eyepiece=focal,
            eyepiece_apparent_fov=52,
        )
        for focal in eyepieces
    ]
    outcomes = calculator.batch_analyze(inputs_list)

    print("Eyepiece Comparison:")
    print("-" * 60)
    for focal, outcome in zip(eyepieces, outcomes):
        formatted = format_results(outcome)
        print(
            f"{focal:5.1f} mm | "
            f"{formatted.magnification:>6s} | "
            f"{formatted.exit_pupil:>8s} | "
            f"{formatted.true_fov:>6s} | "
            f"warnings: {len(outcome.warnings)}"
        )


if __name__ == "__main__":
    print("=" * 60)
    print("Optical Calculator - Basic Usage Example")
    print("=" * 60)

    analyze_single_setup()

    print("\n" + "=" * 60)
    print("\n")

    compare_eyepieces()

    print("\nQuick settings:")
    for setting in list_quick_settings():
        print(f"  {setting.label}: {setting.recommendation}")
