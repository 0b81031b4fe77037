"""
NPF Rule Exposure Calculations

Calculates the maximum exposure time before stars start to trail, using the
NPF rule (aperture N, pixel size P, focal length F). The NPF rule is more
accurate than the traditional 500 rule, especially for modern cameras with
small pixels.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Final

import deal

from astro_tools.api.core.constants import NPF_APERTURE_COEFFICIENT, NPF_PIXEL_COEFFICIENT
from astro_tools.api.core.exceptions import InvalidInputError
from astro_tools.api.core.utils import format_number, is_positive, round2


logger = logging.getLogger(__name__)


__all__ = [
    "CONSERVATIVE_FRACTION_RANGE",
    "EXPOSURE_TIPS",
    "ExposureInput",
    "ExposureResult",
    "compute_exposure",
    "format_exposure_formula",
]


EXPOSURE_TIPS: Final[tuple[str, ...]] = (
    "This is the maximum exposure time before stars start to trail",
    "For sharper stars, use 70-80% of this time",
    "Higher declination (closer to poles) allows longer exposures",
    "Consider using a star tracker for longer exposures",
)

CONSERVATIVE_FRACTION_RANGE: Final[tuple[float, float]] = (0.7, 0.8)
"""Fraction of the NPF time recommended for pin-point stars."""


@dataclass(frozen=True, slots=True)
class ExposureInput:
    """Camera and target parameters for the NPF rule."""

    focal_length_mm: float  # Lens/telescope focal length in mm
    aperture_f_number: float  # Aperture as f-number (N)
    pixel_size_microns: float  # Sensor pixel pitch in micrometers (p)
    declination_degrees: float = 0.0  # Target declination, clamped to -90..+90

    def __post_init__(self) -> None:
        """Clamp declination to the celestial sphere."""
        if math.isfinite(self.declination_degrees):
            object.__setattr__(
                self,
                "declination_degrees",
                max(-90.0, min(90.0, self.declination_degrees)),
            )


@dataclass(frozen=True, slots=True)
class ExposureResult:
    """Result of an NPF rule calculation."""

    exposure_time_seconds: float  # Maximum exposure, rounded to 2 decimals
    formula_text: str  # Formula with the input values substituted

    @property
    def conservative_range_seconds(self) -> tuple[float, float]:
        """
        Recommended exposure range for sharper stars (70-80% of the maximum).

        Returns:
            Tuple of (low, high) exposure times in seconds, rounded to 2 decimals
        """
        low, high = CONSERVATIVE_FRACTION_RANGE
        return round2(self.exposure_time_seconds * low), round2(self.exposure_time_seconds * high)


def format_exposure_formula(inputs: ExposureInput) -> str:
    """
    Render the NPF formula with the input values substituted.

    Example:
        >>> format_exposure_formula(ExposureInput(50, 2.8, 4.5, 0))
        't = (35 × 2.8 + 30 × 4.5) / 50 × cos(0°)'

    Args:
        inputs: Exposure inputs

    Returns:
        Formula string
    """
    return (
        f"t = (35 × {format_number(inputs.aperture_f_number)} + "
        f"30 × {format_number(inputs.pixel_size_microns)}) / "
        f"{format_number(inputs.focal_length_mm)} × "
        f"cos({format_number(inputs.declination_degrees)}°)"
    )


@deal.pre(
    lambda inputs: is_positive(inputs.focal_length_mm),
    message="Focal length must be greater than 0",
    exception=InvalidInputError,
)  # type: ignore[misc,arg-type]
@deal.pre(
    lambda inputs: is_positive(inputs.aperture_f_number),
    message="Aperture f-number must be greater than 0",
    exception=InvalidInputError,
)  # type: ignore[misc,arg-type]
@deal.pre(
    lambda inputs: is_positive(inputs.pixel_size_microns),
    message="Pixel size must be greater than 0",
    exception=InvalidInputError,
)  # type: ignore[misc,arg-type]
@deal.pre(
    lambda inputs: math.isfinite(inputs.declination_degrees),
    message="Declination must be a finite number",
    exception=InvalidInputError,
)  # type: ignore[misc,arg-type]
@deal.post(lambda result: result.exposure_time_seconds >= 0, message="Exposure time must not be negative")
def compute_exposure(inputs: ExposureInput) -> ExposureResult:
    """
    Calculate the maximum star-trail-free exposure time.

    Formula: t = (35 × N + 30 × p) / f × cos(δ)

    The declination factor widens the allowable exposure near the celestial
    poles, where the apparent rotation of the sky is slower. At ±90° the
    factor is 0 and so is the result.

    Args:
        inputs: Focal length, aperture, pixel size and declination

    Returns:
        Exposure time in seconds (2 decimals) and the substituted formula

    Raises:
        InvalidInputError: If a linear input is not a finite positive number
            or the declination is not finite
    """
    declination_factor = math.cos(inputs.declination_degrees * math.pi / 180)
    base_time_seconds = (
        NPF_APERTURE_COEFFICIENT * inputs.aperture_f_number + NPF_PIXEL_COEFFICIENT * inputs.pixel_size_microns
    ) / inputs.focal_length_mm

    # cos(±90°) is ~6e-17 rather than 0; round2 takes it to 0.0
    exposure_time_seconds = round2(base_time_seconds * declination_factor)

    logger.debug(
        f"NPF exposure: f={inputs.focal_length_mm}mm N={inputs.aperture_f_number} "
        f"p={inputs.pixel_size_microns}um dec={inputs.declination_degrees}° -> {exposure_time_seconds}s"
    )

    return ExposureResult(
        exposure_time_seconds=exposure_time_seconds,
        formula_text=format_exposure_formula(inputs),
    )
