"""
Camera and Telescope Presets

Reference data used to pre-fill calculator inputs. Values are approximate
manufacturer specifications.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from astro_tools.api.core.exceptions import PresetNotFoundError


__all__ = [
    "CAMERA_SPECS",
    "TELESCOPE_SPECS",
    "CameraModel",
    "CameraSpecs",
    "TelescopePreset",
    "TelescopeSpecs",
    "get_camera_specs",
    "get_telescope_specs",
]


class CameraModel(str, Enum):
    """Cameras with known sensor specifications."""

    CANON_EOS_R5 = "canon_eos_r5"
    SONY_A7R_IV = "sony_a7r_iv"
    CANON_EOS_R6 = "canon_eos_r6"
    NIKON_Z6 = "nikon_z6"
    ZWO_ASI533MC = "zwo_asi533mc"

    @property
    def display_name(self) -> str:
        """Human-readable name."""
        names = {
            CameraModel.CANON_EOS_R5: "Canon EOS R5",
            CameraModel.SONY_A7R_IV: "Sony A7R IV",
            CameraModel.CANON_EOS_R6: "Canon EOS R6",
            CameraModel.NIKON_Z6: "Nikon Z6",
            CameraModel.ZWO_ASI533MC: "ASI533MC",
        }
        return names[self]


class TelescopePreset(str, Enum):
    """Common telescope configurations."""

    APERTURE_80_F5 = "80mm_f5"
    APERTURE_80_F7 = "80mm_f7"
    APERTURE_100_F10 = "100mm_f10"
    APERTURE_120_F10 = "120mm_f10"
    APERTURE_200_F10 = "200mm_f10"


@dataclass(frozen=True, slots=True)
class CameraSpecs:
    """Camera sensor specifications."""

    model: CameraModel
    sensor_width_mm: float
    sensor_height_mm: float
    pixel_size_microns: float

    @property
    def display_name(self) -> str:
        """Human-readable model name."""
        return self.model.display_name

    @property
    def label(self) -> str:
        """Name with sensor size and pixel pitch, e.g. "Canon EOS R5 (36×24mm, 4.5μm)"."""
        return f"{self.display_name} ({self.sensor_width_mm:g}×{self.sensor_height_mm:g}mm, {self.pixel_size_microns:g}μm)"


@dataclass(frozen=True, slots=True)
class TelescopeSpecs:
    """Telescope optical specifications."""

    preset: TelescopePreset
    aperture_mm: float  # Objective/mirror diameter in mm
    focal_ratio: float  # f-ratio (focal_length / aperture)
    focal_length_mm: float  # Focal length in mm

    @property
    def display_name(self) -> str:
        """Name such as "80mm f/5"."""
        return f"{self.aperture_mm:g}mm f/{self.focal_ratio:g}"

    @property
    def label(self) -> str:
        """Name with focal length, e.g. "80mm f/5 (400mm)"."""
        return f"{self.display_name} ({self.focal_length_mm:g}mm)"


# Camera specifications keyed by model enum
CAMERA_SPECS: dict[CameraModel, CameraSpecs] = {
    CameraModel.CANON_EOS_R5: CameraSpecs(
        model=CameraModel.CANON_EOS_R5,
        sensor_width_mm=36.0,
        sensor_height_mm=24.0,
        pixel_size_microns=4.5,
    ),
    CameraModel.SONY_A7R_IV: CameraSpecs(
        model=CameraModel.SONY_A7R_IV,
        sensor_width_mm=35.9,
        sensor_height_mm=24.0,
        pixel_size_microns=3.76,
    ),
    CameraModel.CANON_EOS_R6: CameraSpecs(
        model=CameraModel.CANON_EOS_R6,
        sensor_width_mm=36.0,
        sensor_height_mm=24.0,
        pixel_size_microns=5.9,
    ),
    CameraModel.NIKON_Z6: CameraSpecs(
        model=CameraModel.NIKON_Z6,
        sensor_width_mm=35.9,
        sensor_height_mm=23.9,
        pixel_size_microns=4.6,
    ),
    CameraModel.ZWO_ASI533MC: CameraSpecs(
        model=CameraModel.ZWO_ASI533MC,
        sensor_width_mm=17.3,
        sensor_height_mm=13.0,
        pixel_size_microns=3.45,
    ),
}


# Telescope specifications keyed by preset enum
TELESCOPE_SPECS: dict[TelescopePreset, TelescopeSpecs] = {
    TelescopePreset.APERTURE_80_F5: TelescopeSpecs(
        preset=TelescopePreset.APERTURE_80_F5,
        aperture_mm=80,
        focal_ratio=5,
        focal_length_mm=400,
    ),
    TelescopePreset.APERTURE_80_F7: TelescopeSpecs(
        preset=TelescopePreset.APERTURE_80_F7,
        aperture_mm=80,
        focal_ratio=7,
        focal_length_mm=560,
    ),
    TelescopePreset.APERTURE_100_F10: TelescopeSpecs(
        preset=TelescopePreset.APERTURE_100_F10,
        aperture_mm=100,
        focal_ratio=10,
        focal_length_mm=1000,
    ),
    TelescopePreset.APERTURE_120_F10: TelescopeSpecs(
        preset=TelescopePreset.APERTURE_120_F10,
        aperture_mm=120,
        focal_ratio=10,
        focal_length_mm=1200,
    ),
    TelescopePreset.APERTURE_200_F10: TelescopeSpecs(
        preset=TelescopePreset.APERTURE_200_F10,
        aperture_mm=200,
        focal_ratio=10,
        focal_length_mm=2000,
    ),
}


def get_camera_specs(model: CameraModel | str) -> CameraSpecs:
    """
    Get specifications for a camera model.

    Args:
        model: Camera model enum or its value (e.g. "canon_eos_r5")

    Returns:
        Camera specifications

    Raises:
        PresetNotFoundError: If the model is not known
    """
    try:
        return CAMERA_SPECS[CameraModel(model)]
    except ValueError as e:
        valid = ", ".join(m.value for m in CameraModel)
        raise PresetNotFoundError(f"Unknown camera '{model}'. Must be one of: {valid}") from e


def get_telescope_specs(preset: TelescopePreset | str) -> TelescopeSpecs:
    """
    Get specifications for a telescope preset.

    Args:
        preset: Telescope preset enum or its value (e.g. "80mm_f5")

    Returns:
        Telescope specifications

    Raises:
        PresetNotFoundError: If the preset is not known
    """
    try:
        return TELESCOPE_SPECS[TelescopePreset(preset)]
    except ValueError as e:
        valid = ", ".join(p.value for p in TelescopePreset)
        raise PresetNotFoundError(f"Unknown telescope '{preset}'. Must be one of: {valid}") from e
