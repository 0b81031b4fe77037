"""
astro-tools API - Calculation Layer

This package contains the astrophotography calculations, separated from
CLI presentation concerns.

- exposure: NPF rule maximum exposure time
- pixel_scale: Pixel scale, field of view and sampling quality
- presets: Camera and telescope reference data
- calculators: Stateful calculator controllers (current inputs + last result)
- core: Constants, enums, utilities and exceptions
"""

# Activate deal contracts for runtime validation
import deal


deal.activate()

__all__ = [
    # Package is organized into modules - import directly from them:
    # from astro_tools.api.exposure import compute_exposure
    # from astro_tools.api.pixel_scale import compute_pixel_scale
    # etc.
]
