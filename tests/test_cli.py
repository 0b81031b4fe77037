"""
Unit tests for the command-line interface.
Tests the calculator and preset commands end to end.
"""

import json
import logging
import os
import tempfile
import unittest
from pathlib import Path
from unittest.mock import patch

import click
from typer.testing import CliRunner

from astro_tools.cli.main import app


class CLITestCase(unittest.TestCase):
    """Base class running commands with a temporary home directory."""

    def setUp(self):
        """Set up test fixtures."""
        self.runner = CliRunner()
        self._tmp = tempfile.TemporaryDirectory()
        self.home_dir = Path(self._tmp.name)
        self._env = patch.dict(os.environ, {"HOME": str(self.home_dir)})
        self._env.start()

    def tearDown(self):
        """Clean up after each test."""
        self._env.stop()
        self._tmp.cleanup()

    def invoke(self, *args: str):
        return self.runner.invoke(app, list(args))

    def invoke_json(self, *args: str) -> dict:
        """Run a command with --json and decode its output."""
        result = self.invoke(*args, "--json")
        self.assertEqual(result.exit_code, 0, result.output)
        return json.loads(click.unstyle(result.output))


class TestNpfCommand(CLITestCase):
    """Test suite for the npf command."""

    def test_defaults(self):
        """Test the default setup prints result, range and formula."""
        result = self.invoke("npf")

        self.assertEqual(result.exit_code, 0, result.output)
        self.assertIn("Maximum exposure: 4.66 seconds", click.unstyle(result.output))
        self.assertIn("For sharper stars: 3.26-3.73 seconds", click.unstyle(result.output))
        self.assertIn("t = (35 × 2.8 + 30 × 4.5) / 50 × cos(0°)", click.unstyle(result.output))
        self.assertIn("Tips:", click.unstyle(result.output))

    def test_json_output(self):
        """Test JSON output."""
        data = self.invoke_json("npf", "-f", "24", "-a", "1.4", "-p", "3.76")

        self.assertEqual(data["exposure_time_seconds"], 6.74)
        self.assertEqual(data["inputs"]["focal_length_mm"], 24)
        self.assertEqual(data["formula"], "t = (35 × 1.4 + 30 × 3.76) / 24 × cos(0°)")
        self.assertEqual(len(data["conservative_range_seconds"]), 2)

    def test_declination_clamped(self):
        """Test out-of-range declination is clamped to the pole."""
        data = self.invoke_json("npf", "--declination", "120")

        self.assertEqual(data["inputs"]["declination_degrees"], 90)
        self.assertEqual(data["exposure_time_seconds"], 0.0)

    def test_camera_preset(self):
        """Test a camera preset fills the pixel size."""
        data = self.invoke_json("npf", "--camera", "canon_eos_r6")

        self.assertEqual(data["inputs"]["pixel_size_microns"], 5.9)
        self.assertEqual(data["exposure_time_seconds"], 5.5)

    def test_explicit_value_overrides_preset(self):
        """Test an explicit pixel size wins over the camera preset."""
        data = self.invoke_json("npf", "--camera", "canon_eos_r6", "--pixel-size", "4.5")

        self.assertEqual(data["exposure_time_seconds"], 4.66)

    def test_focal_length_below_minimum(self):
        """Test focal lengths below 1mm are refused."""
        result = self.invoke("npf", "--focal-length", "0")
        self.assertEqual(result.exit_code, 2)

    def test_unknown_camera(self):
        """Test an unknown camera preset is refused."""
        result = self.invoke("npf", "--camera", "brownie")
        self.assertNotEqual(result.exit_code, 0)


class TestPixelScaleCommand(CLITestCase):
    """Test suite for the pixel-scale command."""

    def test_defaults(self):
        """Test the default setup prints scale, sampling and formula."""
        result = self.invoke("pixel-scale")

        self.assertEqual(result.exit_code, 0, result.output)
        self.assertIn("0.93 arcsec/pixel", click.unstyle(result.output))
        self.assertIn("Excellent (undersampled)", click.unstyle(result.output))
        self.assertIn("Pixel Scale = (206.265 × 4.5) / 1000 = 0.93 arcsec/pixel", click.unstyle(result.output))
        self.assertIn("Sampling Guidelines:", click.unstyle(result.output))

    def test_presets_json(self):
        """Test telescope and camera presets."""
        data = self.invoke_json("pixel-scale", "--telescope", "80mm_f5", "--camera", "zwo_asi533mc")

        self.assertEqual(data["pixel_scale_arcsec_per_pixel"], 1.78)
        self.assertEqual(data["field_of_view"], {"width_degrees": 2.48, "height_degrees": 1.86})
        self.assertEqual(data["sampling"], "Good")
        self.assertEqual(data["inputs"]["focal_length_mm"], 400)

    def test_explicit_values(self):
        """Test explicit values override presets."""
        data = self.invoke_json("pixel-scale", "-t", "200mm_f10", "-f", "400", "-p", "5.9")

        self.assertEqual(data["pixel_scale_arcsec_per_pixel"], 3.04)
        self.assertEqual(data["sampling"], "Poor (heavily oversampled)")

    def test_sensor_below_minimum(self):
        """Test sensor sizes below 1mm are refused."""
        result = self.invoke("pixel-scale", "--sensor-width", "0.5")
        self.assertEqual(result.exit_code, 2)


class TestPresetsCommand(CLITestCase):
    """Test suite for the presets commands."""

    def test_cameras(self):
        """Test listing camera presets."""
        result = self.invoke("presets", "cameras")

        self.assertEqual(result.exit_code, 0, result.output)
        self.assertIn("Canon EOS R5", click.unstyle(result.output))
        self.assertIn("ASI533MC", click.unstyle(result.output))

    def test_cameras_json(self):
        """Test listing camera presets as JSON."""
        data = self.invoke_json("presets", "cameras")

        self.assertEqual(data["sony_a7r_iv"]["pixel_size_microns"], 3.76)
        self.assertEqual(len(data), 5)

    def test_telescopes(self):
        """Test listing telescope presets."""
        result = self.invoke("presets", "telescopes")

        self.assertEqual(result.exit_code, 0, result.output)
        self.assertIn("80mm f/5", click.unstyle(result.output))
        self.assertIn("2000mm", click.unstyle(result.output))

    def test_telescopes_json(self):
        """Test listing telescope presets as JSON."""
        data = self.invoke_json("presets", "telescopes")

        self.assertEqual(data["120mm_f10"]["focal_length_mm"], 1200)


class TestIndependentRuns(CLITestCase):
    """Test suite for runs not influencing each other."""

    def test_camera_preset_not_remembered(self):
        """Test a preset applies to one run only."""
        self.invoke_json("npf", "--camera", "sony_a7r_iv")

        data = self.invoke_json("npf")
        self.assertEqual(data["inputs"]["pixel_size_microns"], 4.5)
        self.assertEqual(data["exposure_time_seconds"], 4.66)

    def test_telescope_preset_not_remembered(self):
        """Test a telescope preset applies to one run only."""
        self.invoke_json("pixel-scale", "--telescope", "80mm_f5", "--camera", "canon_eos_r6")

        data = self.invoke_json("pixel-scale")
        self.assertEqual(data["inputs"]["focal_length_mm"], 1000)
        self.assertEqual(data["pixel_scale_arcsec_per_pixel"], 0.93)

    def test_no_files_written(self):
        """Test commands leave the home directory untouched."""
        with self.runner.isolated_filesystem(temp_dir=self.home_dir) as work_dir:
            self.invoke("npf", "--camera", "nikon_z6")
            self.invoke("pixel-scale", "-t", "200mm_f10")
            self.invoke("presets", "cameras")

            self.assertEqual(list(Path(work_dir).iterdir()), [])
        self.assertEqual(list(self.home_dir.iterdir()), [])

    def test_no_config_command(self):
        """Test there is no command for saving equipment."""
        result = self.invoke("config", "show")
        self.assertEqual(result.exit_code, 2)


class TestMainApp(CLITestCase):
    """Test suite for the top-level app."""

    def test_version(self):
        """Test the version command."""
        result = self.invoke("version")

        self.assertEqual(result.exit_code, 0, result.output)
        self.assertIn("0.1.0", click.unstyle(result.output))

    def test_verbose_enables_debug_logging(self):
        """Test --verbose configures DEBUG logging."""
        with patch("astro_tools.cli.main.logging.basicConfig") as mock_basic_config:
            result = self.invoke("--verbose", "npf")

        self.assertEqual(result.exit_code, 0, result.output)
        mock_basic_config.assert_called_once_with(level=logging.DEBUG)


if __name__ == "__main__":
    unittest.main()
