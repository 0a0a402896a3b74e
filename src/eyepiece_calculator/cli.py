#!/usr/bin/env python3
"""CLI tool for telescope/eyepiece calculations.

Usage:
    eyepiece-calc 1200 114 10 --afov 52
    eyepiece-calc 1200 114 2 --afov 52 --preset planetary
    eyepiece-calc --list-presets
"""

import argparse
import logging
import sys
from typing import List, Optional

from eyepiece_calculator.calculator import OpticalCalculator, TelescopeInputs
from eyepiece_calculator.formatting import format_results
from eyepiece_calculator.presets import QUICK_SETTINGS, get_quick_setting, list_quick_settings

logger = logging.getLogger(__name__)

# Starting values of the calculator form
DEFAULT_FOCAL_LENGTH_SCOPE = "1200"
DEFAULT_APERTURE_DIAMETER = "114"
DEFAULT_FOCAL_LENGTH_EYEPIECE = "10"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="eyepiece-calc",
        description="Compute magnification, exit pupil and field of view for a telescope and eyepiece",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  eyepiece-calc 1200 114 10 --afov 52
  eyepiece-calc 500 50 2.86
  eyepiece-calc 1200 114 10 --preset deepSky
        """,
    )

    # Raw strings: validation belongs to the calculator
    parser.add_argument(
        "focal_length_scope",
        nargs="?",
        default=DEFAULT_FOCAL_LENGTH_SCOPE,
        help=f"Telescope focal length in mm (default: {DEFAULT_FOCAL_LENGTH_SCOPE})",
    )

    parser.add_argument(
        "aperture_diameter",
        nargs="?",
        default=DEFAULT_APERTURE_DIAMETER,
        help=f"Telescope aperture in mm (default: {DEFAULT_APERTURE_DIAMETER})",
    )

    parser.add_argument(
        "focal_length_eyepiece",
        nargs="?",
        default=DEFAULT_FOCAL_LENGTH_EYEPIECE,
        help=f"Eyepiece focal length in mm (default: {DEFAULT_FOCAL_LENGTH_EYEPIECE})",
    )

    parser.add_argument(
        "--afov",
        default=None,
        help="Eyepiece apparent field of view in degrees (optional)",
    )

    parser.add_argument(
        "--preset",
        choices=list(QUICK_SETTINGS),
        help="Show the recommended exit pupil for an observing target",
    )

    parser.add_argument(
        "--list-presets",
        action="store_true",
        help="List the observing presets and exit",
    )

    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable debug logging",
    )

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point."""
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    if args.list_presets:
        for setting in list_quick_settings():
            print(f"{setting.key:10s} | {setting.label:20s} | {setting.recommendation}")
        return 0

    inputs = TelescopeInputs(
        focal_length_scope=args.focal_length_scope,
        aperture_diameter=args.aperture_diameter,
        focal_length_eyepiece=args.focal_length_eyepiece,
        eyepiece_apparent_fov=args.afov,
    )

    outcome = OpticalCalculator(cache_last=False).analyze(inputs)
    formatted = format_results(outcome)

    print("Results")
    print("=" * 60)
    print(f"{'Magnification':30s} {formatted.magnification}")
    print(f"{'Exit pupil':30s} {formatted.exit_pupil}")
    print(f"{'Max. useful magnification':30s} {formatted.max_useful_magnification}")
    if formatted.max_magnification_status:
        print(f"{'':30s} {formatted.max_magnification_status}")
    print(f"{'True field of view (TFOV)':30s} {formatted.true_fov}")

    for warning in outcome.warnings:
        print(f"WARNING: {warning}")

    if args.preset:
        print(f"\n{get_quick_setting(args.preset).recommendation}")

    if not outcome.is_complete:
        logger.error(
            "Focal lengths and aperture must be positive numbers "
            f"(got {args.focal_length_scope!r}, {args.aperture_diameter!r}, "
            f"{args.focal_length_eyepiece!r})"
        )
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
