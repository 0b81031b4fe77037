"""
Physical and Photographic Constants

Constants used by the astrophotography calculators.
"""

from typing import Final


__all__ = [
    "ARCMIN_PER_DEGREE",
    "ARCSEC_PER_RADIAN_PER_MICRON_MM",
    "DEGREES_PER_RADIAN",
    "NPF_APERTURE_COEFFICIENT",
    "NPF_PIXEL_COEFFICIENT",
    "SAMPLING_FAIR_THRESHOLD_ARCSEC",
    "SAMPLING_GOOD_THRESHOLD_ARCSEC",
    "SAMPLING_POOR_THRESHOLD_ARCSEC",
]


# Conversion factors
ARCSEC_PER_RADIAN_PER_MICRON_MM: Final[float] = 206.265
"""206265 arcsec per radian, scaled for pixel size in microns over focal length in mm."""

DEGREES_PER_RADIAN: Final[float] = 57.2958
"""Degrees per radian (small-angle field of view)."""

ARCMIN_PER_DEGREE: Final[float] = 60.0
"""Arcminutes per degree."""

# NPF rule coefficients: t = (35 * N + 30 * p) / f
NPF_APERTURE_COEFFICIENT: Final[float] = 35.0
"""Seconds-millimeters per f-stop in the NPF rule."""

NPF_PIXEL_COEFFICIENT: Final[float] = 30.0
"""Seconds-millimeters per micron of pixel pitch in the NPF rule."""

# Sampling thresholds (arcsec/pixel), lower-inclusive
SAMPLING_GOOD_THRESHOLD_ARCSEC: Final[float] = 1.0
"""Pixel scale at which sampling becomes Good."""

SAMPLING_FAIR_THRESHOLD_ARCSEC: Final[float] = 2.0
"""Pixel scale at which sampling becomes Fair."""

SAMPLING_POOR_THRESHOLD_ARCSEC: Final[float] = 3.0
"""Pixel scale at which sampling becomes Poor."""
