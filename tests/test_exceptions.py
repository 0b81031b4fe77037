"""
Unit tests for exceptions module.

Tests all custom exception classes used throughout the API.
"""

import unittest

from astro_tools.api.core.exceptions import (
    AstroToolsError,
    InvalidInputError,
    PresetNotFoundError,
)


class TestAstroToolsError(unittest.TestCase):
    """Test suite for AstroToolsError base exception"""

    def test_is_exception(self):
        """Test that AstroToolsError is an Exception"""
        self.assertTrue(issubclass(AstroToolsError, Exception))

    def test_instantiation(self):
        """Test creating an AstroToolsError instance"""
        error = AstroToolsError("Test error message")
        self.assertEqual(str(error), "Test error message")

    def test_with_no_message(self):
        """Test creating an AstroToolsError with no message"""
        self.assertEqual(str(AstroToolsError()), "")


class TestInvalidInputError(unittest.TestCase):
    """Test suite for InvalidInputError"""

    def test_inheritance(self):
        """Test that InvalidInputError is both an AstroToolsError and a ValueError"""
        self.assertTrue(issubclass(InvalidInputError, AstroToolsError))
        self.assertTrue(issubclass(InvalidInputError, ValueError))

    def test_can_be_caught_as_value_error(self):
        """Test catching InvalidInputError as ValueError"""
        with self.assertRaises(ValueError):
            raise InvalidInputError("Focal length must be greater than 0")


class TestPresetNotFoundError(unittest.TestCase):
    """Test suite for PresetNotFoundError"""

    def test_inheritance(self):
        """Test that PresetNotFoundError is both an AstroToolsError and a KeyError"""
        self.assertTrue(issubclass(PresetNotFoundError, AstroToolsError))
        self.assertTrue(issubclass(PresetNotFoundError, KeyError))

    def test_message_is_not_quoted(self):
        """Test the message reads like a normal exception"""
        error = PresetNotFoundError("Unknown camera 'foo'")
        self.assertEqual(str(error), "Unknown camera 'foo'")

    def test_with_no_message(self):
        """Test PresetNotFoundError with no message"""
        self.assertEqual(str(PresetNotFoundError()), "")


if __name__ == "__main__":
    unittest.main()
