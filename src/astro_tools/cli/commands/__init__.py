"""
CLI Commands Module

This module contains the CLI command implementations:

- exposure: NPF rule maximum exposure time
- pixel_scale: Pixel scale and field of view
- presets: Camera and telescope reference data
"""
