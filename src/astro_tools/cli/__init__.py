"""astro-tools command-line interface."""

from astro_tools import __version__


__all__ = ["__version__"]
