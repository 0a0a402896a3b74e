"""Quick-setting presets: recommended exit pupil per observing target."""

from typing import Dict, List

from eyepiece_calculator.types import QuickSetting

__all__ = ['QUICK_SETTINGS', 'get_quick_setting', 'get_recommendation', 'list_quick_settings']

# Display order is insertion order
QUICK_SETTINGS: Dict[str, QuickSetting] = {
    "planetary": QuickSetting(
        key="planetary",
        label="Planetary",
        recommendation="Recommended exit pupil: 0.7 - 2 mm",
    ),
    "lunar": QuickSetting(
        key="lunar",
        label="Moon / Terrestrial",
        recommendation="Recommended exit pupil: 1 - 3 mm",
    ),
    "deepSky": QuickSetting(
        key="deepSky",
        label="Deep Sky",
        recommendation="Recommended exit pupil: 1.5 - 4 mm (up to 7 mm)",
    ),
}


def get_quick_setting(key: str) -> QuickSetting:
    """
    Look up a preset by identifier.

    Raises:
        ValueError: If the identifier is not one of the fixed presets
    """
    try:
        return QUICK_SETTINGS[key]
    except KeyError:
        raise ValueError(
            f"Unknown preset: {key!r} (expected one of {', '.join(QUICK_SETTINGS)})"
        ) from None


def get_recommendation(key: str) -> str:
    """Recommended exit-pupil range for a preset."""
    return get_quick_setting(key).recommendation


def list_quick_settings() -> List[QuickSetting]:
    return list(QUICK_SETTINGS.values())
