"""
Unit tests for enums module.

Tests the sampling quality enumeration.
"""

import unittest

from astro_tools.api.core.enums import SamplingQuality


class TestSamplingQuality(unittest.TestCase):
    """Test suite for SamplingQuality enum"""

    def test_enum_values(self):
        """Test all SamplingQuality enum values"""
        self.assertEqual(SamplingQuality.EXCELLENT, "Excellent (undersampled)")
        self.assertEqual(SamplingQuality.GOOD, "Good")
        self.assertEqual(SamplingQuality.FAIR, "Fair (oversampled)")
        self.assertEqual(SamplingQuality.POOR, "Poor (heavily oversampled)")

    def test_enum_membership(self):
        """Test enum membership"""
        self.assertIs(SamplingQuality("Good"), SamplingQuality.GOOD)
        self.assertEqual(len(SamplingQuality), 4)

    def test_enum_string_representation(self):
        """Test string representation"""
        self.assertEqual(str(SamplingQuality.GOOD), "Good")
        self.assertEqual(f"{SamplingQuality.FAIR}", "Fair (oversampled)")

    def test_short_name(self):
        """Test short names"""
        self.assertEqual(SamplingQuality.EXCELLENT.short_name, "excellent")
        self.assertEqual(SamplingQuality.GOOD.short_name, "good")
        self.assertEqual(SamplingQuality.FAIR.short_name, "fair")
        self.assertEqual(SamplingQuality.POOR.short_name, "poor")

    def test_guideline(self):
        """Test every class has guidance text"""
        for quality in SamplingQuality:
            self.assertTrue(quality.guideline)
        self.assertIn("Undersampled", SamplingQuality.EXCELLENT.guideline)
        self.assertIn("shorter focal length", SamplingQuality.POOR.guideline)


if __name__ == "__main__":
    unittest.main()
