"""
Constants and enums for the taste engine.

No magic strings - use enums for constrained values.
"""

from enum import Enum


class ThemeMode(str, Enum):
    """Light or dark presentation mode of a theme pack."""

    DARK = "dark"
    LIGHT = "light"


class PageContext(str, Enum):
    """
    Usage context that selects which recipe subtree applies.

    Same primitives, different behavior based on page intent.
    """

    OPERATIONAL = "operational"  # Dense, restrained accent
    NARRATIVE = "narrative"  # Expressive, accent can breathe


class ColorTemperature(str, Enum):
    """Perceived color temperature of a taste profile."""

    WARM = "warm"
    COOL = "cool"
    NEUTRAL = "neutral"


class TasteSourceKind(str, Enum):
    """Where a taste observation came from."""

    REFERENCE = "reference"  # Named reference (linear, stripe, ...)
    URL = "url"
    DESCRIPTION = "description"


# Tuner fields, in serialization order
TUNER_FIELDS: tuple[str, ...] = ("abstraction", "density", "motion", "contrast", "narrative")
DEFAULT_TUNER_VALUE = 0.5

# Discrete tuner bands: low < LOW_BAND_MAX <= medium < HIGH_BAND_MIN <= high
LOW_BAND_MAX = 0.3
HIGH_BAND_MIN = 0.7

# Motion switches off entirely below this value
MOTION_DISABLED_BELOW = 0.05

# Unrecognized taste sources still participate, at a reduced weight
UNKNOWN_SOURCE_DISCOUNT = 0.25

# Exact-tie resolution order for color temperature (first wins)
COLOR_TEMPERATURE_TIE_ORDER: tuple[ColorTemperature, ...] = (
    ColorTemperature.COOL,
    ColorTemperature.NEUTRAL,
    ColorTemperature.WARM,
)

# Style parameter prefixes
STYLE_PREFIX = "--ds-"
TUNER_PREFIX = "--ds-tune-"

DEFAULT_THEME = "chronicle-dark"


class ErrorMessages:
    """Standardized error messages."""

    THEME_NOT_FOUND = "Theme '{name}' not found."
    INVALID_CONTEXT = "Invalid context: {context!r}. Expected one of: {expected}."
    EMPTY_OBSERVATIONS = "Cannot blend an empty list of taste observations."
    ZERO_TOTAL_WEIGHT = "Taste observations must have a positive total weight."
    INFINITE_TOTAL_WEIGHT = "Taste observation weights must sum to a finite total."
    UNKNOWN_PARAMETER = "Unknown parameter: '{parameter}'. Available: {available}."
    UNKNOWN_REFERENCE = "Unknown reference: '{reference}'. Available: {available}."
