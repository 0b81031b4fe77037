"""Core subpackage for shared constants, enums, utilities, and exceptions."""

from astro_tools.api.core.enums import SamplingQuality
from astro_tools.api.core.exceptions import (
    AstroToolsError,
    InvalidInputError,
    PresetNotFoundError,
)
from astro_tools.api.core.utils import format_number, is_positive, round2


__all__ = [
    "AstroToolsError",
    "InvalidInputError",
    "PresetNotFoundError",
    "SamplingQuality",
    "format_number",
    "is_positive",
    "round2",
]
