"""
Pixel Scale and Field of View Calculations

Calculates pixel scale (arcseconds per pixel) and field of view for a
telescope and camera combination, and rates the sampling against typical
atmospheric seeing (1-3 arcsec).
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Final

import deal

from astro_tools.api.core.constants import (
    ARCMIN_PER_DEGREE,
    ARCSEC_PER_RADIAN_PER_MICRON_MM,
    DEGREES_PER_RADIAN,
    SAMPLING_FAIR_THRESHOLD_ARCSEC,
    SAMPLING_GOOD_THRESHOLD_ARCSEC,
    SAMPLING_POOR_THRESHOLD_ARCSEC,
)
from astro_tools.api.core.enums import SamplingQuality
from astro_tools.api.core.exceptions import InvalidInputError
from astro_tools.api.core.utils import format_number, is_positive, round2


logger = logging.getLogger(__name__)


__all__ = [
    "SAMPLING_GUIDELINES",
    "FieldOfView",
    "PixelScaleInput",
    "PixelScaleResult",
    "calculate_pixel_scale_arcsec",
    "classify_sampling",
    "compute_pixel_scale",
    "format_pixel_scale_formula",
]


SAMPLING_GUIDELINES: Final[dict[SamplingQuality, str]] = {
    SamplingQuality.EXCELLENT: f"< 1 arcsec/pixel: {SamplingQuality.EXCELLENT.guideline}",
    SamplingQuality.GOOD: f"1-2 arcsec/pixel: {SamplingQuality.GOOD.guideline}",
    SamplingQuality.FAIR: f"2-3 arcsec/pixel: {SamplingQuality.FAIR.guideline}",
    SamplingQuality.POOR: f"> 3 arcsec/pixel: {SamplingQuality.POOR.guideline}",
}


@dataclass(frozen=True, slots=True)
class PixelScaleInput:
    """Telescope and camera parameters for pixel scale and field of view."""

    focal_length_mm: float  # Telescope focal length in mm
    pixel_size_microns: float  # Sensor pixel pitch in micrometers
    sensor_width_mm: float  # Sensor width in mm
    sensor_height_mm: float  # Sensor height in mm


@dataclass(frozen=True, slots=True)
class FieldOfView:
    """Angular field of view, each value rounded to 2 decimals."""

    width_degrees: float
    height_degrees: float
    width_arcmin: float  # From the unrounded width
    height_arcmin: float  # From the unrounded height

    @classmethod
    def from_degrees(cls, width_degrees: float, height_degrees: float) -> FieldOfView:
        """Build a rounded field of view from unrounded angles in degrees."""
        return cls(
            width_degrees=round2(width_degrees),
            height_degrees=round2(height_degrees),
            width_arcmin=round2(width_degrees * ARCMIN_PER_DEGREE),
            height_arcmin=round2(height_degrees * ARCMIN_PER_DEGREE),
        )


@dataclass(frozen=True, slots=True)
class PixelScaleResult:
    """Result of a pixel scale calculation."""

    pixel_scale_arcsec_per_pixel: float  # Rounded to 2 decimals
    field_of_view: FieldOfView
    sampling: SamplingQuality  # Classified from the unrounded scale
    formula_text: str


def calculate_pixel_scale_arcsec(pixel_size_microns: float, focal_length_mm: float) -> float:
    """
    Calculate the unrounded pixel scale.

    Formula: scale = 206.265 × p / f

    Args:
        pixel_size_microns: Pixel pitch in micrometers
        focal_length_mm: Focal length in mm

    Returns:
        Pixel scale in arcseconds per pixel
    """
    return (ARCSEC_PER_RADIAN_PER_MICRON_MM * pixel_size_microns) / focal_length_mm


def classify_sampling(pixel_scale_arcsec: float) -> SamplingQuality:
    """
    Rate a pixel scale against typical seeing.

    Thresholds are lower-inclusive: exactly 1.0 is Good, 2.0 is Fair and
    3.0 is Poor. Pass the unrounded scale; a value such as 0.996 is
    Excellent even though it displays as 1.00.

    Args:
        pixel_scale_arcsec: Pixel scale in arcseconds per pixel

    Returns:
        Sampling quality class
    """
    if pixel_scale_arcsec < SAMPLING_GOOD_THRESHOLD_ARCSEC:
        return SamplingQuality.EXCELLENT
    if pixel_scale_arcsec < SAMPLING_FAIR_THRESHOLD_ARCSEC:
        return SamplingQuality.GOOD
    if pixel_scale_arcsec < SAMPLING_POOR_THRESHOLD_ARCSEC:
        return SamplingQuality.FAIR
    return SamplingQuality.POOR


def format_pixel_scale_formula(inputs: PixelScaleInput) -> str:
    """
    Render the pixel scale formula with the input values substituted.

    The trailing value is always shown with exactly 2 decimals.

    Example:
        >>> format_pixel_scale_formula(PixelScaleInput(1000, 4.5, 36, 24))
        'Pixel Scale = (206.265 × 4.5) / 1000 = 0.93 arcsec/pixel'

    Args:
        inputs: Pixel scale inputs

    Returns:
        Formula string
    """
    scale = calculate_pixel_scale_arcsec(inputs.pixel_size_microns, inputs.focal_length_mm)
    return (
        f"Pixel Scale = (206.265 × {format_number(inputs.pixel_size_microns)}) / "
        f"{format_number(inputs.focal_length_mm)} = {scale:.2f} arcsec/pixel"
    )


@deal.pre(
    lambda inputs: is_positive(inputs.focal_length_mm),
    message="Focal length must be greater than 0",
    exception=InvalidInputError,
)  # type: ignore[misc,arg-type]
@deal.pre(
    lambda inputs: is_positive(inputs.pixel_size_microns),
    message="Pixel size must be greater than 0",
    exception=InvalidInputError,
)  # type: ignore[misc,arg-type]
@deal.pre(
    lambda inputs: is_positive(inputs.sensor_width_mm) and is_positive(inputs.sensor_height_mm),
    message="Sensor dimensions must be greater than 0",
    exception=InvalidInputError,
)  # type: ignore[misc,arg-type]
@deal.post(lambda result: result.pixel_scale_arcsec_per_pixel >= 0, message="Pixel scale must not be negative")
def compute_pixel_scale(inputs: PixelScaleInput) -> PixelScaleResult:
    """
    Calculate pixel scale, field of view and sampling quality.

    Field of view uses the small-angle approximation (sensor size over focal
    length, in degrees), valid for telescope focal lengths.

    Args:
        inputs: Focal length, pixel size and sensor dimensions

    Returns:
        Pixel scale and field of view (2 decimals), sampling class and formula

    Raises:
        InvalidInputError: If any input is not a finite positive number
    """
    scale = calculate_pixel_scale_arcsec(inputs.pixel_size_microns, inputs.focal_length_mm)
    sampling = classify_sampling(scale)

    field_of_view = FieldOfView.from_degrees(
        width_degrees=(inputs.sensor_width_mm * DEGREES_PER_RADIAN) / inputs.focal_length_mm,
        height_degrees=(inputs.sensor_height_mm * DEGREES_PER_RADIAN) / inputs.focal_length_mm,
    )

    logger.debug(
        f"Pixel scale: f={inputs.focal_length_mm}mm p={inputs.pixel_size_microns}um "
        f"sensor={inputs.sensor_width_mm}x{inputs.sensor_height_mm}mm -> {scale:.4f} arcsec/px ({sampling.value})"
    )

    return PixelScaleResult(
        pixel_scale_arcsec_per_pixel=round2(scale),
        field_of_view=field_of_view,
        sampling=sampling,
        formula_text=format_pixel_scale_formula(inputs),
    )
