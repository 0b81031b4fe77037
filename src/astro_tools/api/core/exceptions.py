"""
Custom exception classes for astro-tools.

This module defines specific exceptions for the errors that can occur
while validating calculator inputs and looking up presets.
"""

from __future__ import annotations


__all__ = [
    # Base exception
    "AstroToolsError",
    # Calculation exceptions
    "InvalidInputError",
    # Preset exceptions
    "PresetNotFoundError",
]


class AstroToolsError(Exception):
    """
    Base exception for all astro-tools errors.

    All custom exceptions in this library inherit from this base class,
    making it easy to catch all calculator-related errors.
    """

    pass


class InvalidInputError(AstroToolsError, ValueError):
    """
    Raised when calculator inputs are outside their valid domain.

    This occurs when:
    - Focal length is zero or negative
    - Aperture (f-number) is zero or negative
    - Pixel size or sensor dimensions are zero or negative
    - Any input is NaN or infinite
    """

    pass


class PresetNotFoundError(AstroToolsError, KeyError):
    """
    Raised when a camera or telescope preset name is not known.
    """

    def __str__(self) -> str:
        # KeyError quotes its message; keep it readable
        return str(self.args[0]) if self.args else ""

