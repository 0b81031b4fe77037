"""
astro-tools - Astrophotography Calculators

Calculators for planning astrophotography sessions:

- NPF rule maximum exposure time before stars trail
- Pixel scale, field of view and sampling quality for a telescope and camera

Example:
    >>> from astro_tools import ExposureInput, compute_exposure
    >>> result = compute_exposure(ExposureInput(focal_length_mm=50, aperture_f_number=2.8, pixel_size_microns=4.5))
    >>> result.exposure_time_seconds
    4.66
    >>> from astro_tools import PixelScaleInput, compute_pixel_scale
    >>> compute_pixel_scale(PixelScaleInput(1000, 4.5, 36, 24)).sampling
    <SamplingQuality.EXCELLENT: 'Excellent (undersampled)'>
"""

from astro_tools.api.calculators import ExposureTimeCalculator, PixelScaleCalculator
from astro_tools.api.core.enums import SamplingQuality
from astro_tools.api.core.exceptions import (
    AstroToolsError,
    InvalidInputError,
    PresetNotFoundError,
)
from astro_tools.api.exposure import ExposureInput, ExposureResult, compute_exposure
from astro_tools.api.pixel_scale import FieldOfView, PixelScaleInput, PixelScaleResult, compute_pixel_scale
from astro_tools.api.presets import CameraModel, TelescopePreset, get_camera_specs, get_telescope_specs


__version__ = "0.1.0"

__all__ = [
    "AstroToolsError",
    "CameraModel",
    "ExposureInput",
    "ExposureResult",
    "ExposureTimeCalculator",
    "FieldOfView",
    "InvalidInputError",
    "PixelScaleCalculator",
    "PixelScaleInput",
    "PixelScaleResult",
    "PresetNotFoundError",
    "SamplingQuality",
    "TelescopePreset",
    "__version__",
    "compute_exposure",
    "compute_pixel_scale",
    "get_camera_specs",
    "get_telescope_specs",
]
