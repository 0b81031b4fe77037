"""
Calculator State

Each calculator owns its current input values and last result. Input and
preset changes only assign fields; a result is produced by an explicit
``calculate()`` call, which snapshots the fields into an immutable input
record and hands it to the pure calculation function.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from astro_tools.api.exposure import ExposureInput, ExposureResult, compute_exposure
from astro_tools.api.pixel_scale import PixelScaleInput, PixelScaleResult, compute_pixel_scale
from astro_tools.api.presets import CameraModel, TelescopePreset, get_camera_specs, get_telescope_specs


logger = logging.getLogger(__name__)


__all__ = [
    "ExposureTimeCalculator",
    "PixelScaleCalculator",
]


@dataclass
class ExposureTimeCalculator:
    """State for the NPF exposure calculator."""

    focal_length_mm: float = 50.0
    aperture_f_number: float = 2.8
    pixel_size_microns: float = 4.5
    declination_degrees: float = 0.0  # 0° = celestial equator, 90° = north pole
    result: ExposureResult | None = None

    def apply_camera_preset(self, model: CameraModel | str) -> None:
        """Set the pixel size from a camera preset."""
        self.pixel_size_microns = get_camera_specs(model).pixel_size_microns

    def snapshot(self) -> ExposureInput:
        """Current field values as an immutable input record."""
        return ExposureInput(
            focal_length_mm=self.focal_length_mm,
            aperture_f_number=self.aperture_f_number,
            pixel_size_microns=self.pixel_size_microns,
            declination_degrees=self.declination_degrees,
        )

    def calculate(self) -> ExposureResult:
        """
        Calculate the maximum exposure time from the current fields.

        Returns:
            The new result, also kept in ``result``

        Raises:
            InvalidInputError: If a field is outside its valid domain
        """
        self.result = compute_exposure(self.snapshot())
        return self.result


@dataclass
class PixelScaleCalculator:
    """State for the pixel scale and field of view calculator."""

    focal_length_mm: float = 1000.0
    pixel_size_microns: float = 4.5
    sensor_width_mm: float = 36.0
    sensor_height_mm: float = 24.0
    result: PixelScaleResult | None = None

    def apply_camera_preset(self, model: CameraModel | str) -> None:
        """Set sensor width, height and pixel size from a camera preset."""
        specs = get_camera_specs(model)
        self.sensor_width_mm = specs.sensor_width_mm
        self.sensor_height_mm = specs.sensor_height_mm
        self.pixel_size_microns = specs.pixel_size_microns
        logger.debug(f"Applied camera preset {specs.label}")

    def apply_telescope_preset(self, preset: TelescopePreset | str) -> None:
        """Set the focal length from a telescope preset."""
        specs = get_telescope_specs(preset)
        self.focal_length_mm = specs.focal_length_mm
        logger.debug(f"Applied telescope preset {specs.label}")

    def snapshot(self) -> PixelScaleInput:
        """Current field values as an immutable input record."""
        return PixelScaleInput(
            focal_length_mm=self.focal_length_mm,
            pixel_size_microns=self.pixel_size_microns,
            sensor_width_mm=self.sensor_width_mm,
            sensor_height_mm=self.sensor_height_mm,
        )

    def calculate(self) -> PixelScaleResult:
        """
        Calculate pixel scale and field of view from the current fields.

        Returns:
            The new result, also kept in ``result``

        Raises:
            InvalidInputError: If a field is outside its valid domain
        """
        self.result = compute_pixel_scale(self.snapshot())
        return self.result
