"""Shared constants for the optical calculator."""

# Threshold Constants
MAX_EYE_PUPIL_MM = 7.0  # Dark-adapted human pupil diameter
MAX_USEFUL_MAGNIFICATION_PER_MM = 2.0  # Empirical ceiling: 2x per mm of aperture

# Warning Messages
EXIT_PUPIL_WARNING = (
    "The exit pupil (> 7 mm) is larger than the pupil of the eye: light is being wasted."
)
OVER_MAGNIFICATION_WARNING = (
    "The magnification exceeds the maximum useful magnification: the image will be blurry."
)

# Display Constants
UNDEFINED_PLACEHOLDER = "---"
MAGNIFICATION_SUFFIX = "×"
EXIT_PUPIL_UNIT = "mm"
TRUE_FOV_UNIT = "°"
WITHIN_LIMIT_STATUS = "Within limit"
LIMIT_EXCEEDED_STATUS = "Limit exceeded"
