"""
Common Enums

Enumerations used throughout the astro-tools API.
"""

from enum import StrEnum


__all__ = [
    "SamplingQuality",
]


class SamplingQuality(StrEnum):
    """Sampling quality of a pixel scale compared to typical seeing (1-3 arcsec)."""

    EXCELLENT = "Excellent (undersampled)"  # < 1 arcsec/pixel
    GOOD = "Good"  # 1-2 arcsec/pixel
    FAIR = "Fair (oversampled)"  # 2-3 arcsec/pixel
    POOR = "Poor (heavily oversampled)"  # >= 3 arcsec/pixel

    @property
    def short_name(self) -> str:
        """First word of the label, lower-cased (e.g. "excellent")."""
        return self.value.split(" ")[0].lower()

    @property
    def guideline(self) -> str:
        """Guidance text for this sampling class."""
        guidelines = {
            SamplingQuality.EXCELLENT: (
                "Undersampled - captures fine detail but may need longer exposures"
            ),
            SamplingQuality.GOOD: "Well-sampled for most seeing conditions",
            SamplingQuality.FAIR: "Oversampled - good for poor seeing conditions",
            SamplingQuality.POOR: (
                "Heavily oversampled - consider shorter focal length or smaller pixels"
            ),
        }
        return guidelines[self]
