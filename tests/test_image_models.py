"""
Tests for the image data models.

Tests cover:
- PixelBuffer construction and validation
- Pixel reads and copy-on-write pixel writes
- Channel clamping
- Filter and generator parameter validation
"""

import unittest

import numpy as np

from IP_Libs.errors import InvalidParameterError, OutOfBoundsError
from IP_Libs.ImageEditingLib.image_models import (
    CheckerboardSpec,
    FilterKind,
    FilterRequest,
    Orientation,
    PixelBuffer,
    RainbowSpec,
)


class TestPixelBufferConstruction(unittest.TestCase):
    """Test building buffers."""

    def test_filled_dimensions(self):
        buffer = PixelBuffer.filled(5, 3, (1, 2, 3))

        self.assertEqual(buffer.width, 5)
        self.assertEqual(buffer.height, 3)
        self.assertEqual(buffer.size, (5, 3))
        self.assertEqual(buffer.get(4, 2), (1, 2, 3))

    def test_filled_clamps_color(self):
        buffer = PixelBuffer.filled(1, 1, (-20, 300, 128))

        self.assertEqual(buffer.get(0, 0), (0, 255, 128))

    def test_zero_width_rejected(self):
        with self.assertRaises(InvalidParameterError):
            PixelBuffer.filled(0, 3)

    def test_zero_height_array_rejected(self):
        with self.assertRaises(InvalidParameterError):
            PixelBuffer.from_array(np.zeros((0, 4, 3)))

    def test_wrong_channel_count_rejected(self):
        with self.assertRaises(InvalidParameterError):
            PixelBuffer.from_array(np.zeros((2, 2, 4)))

    def test_from_array_copies_input(self):
        source = np.zeros((2, 2, 3), dtype=np.uint8)
        buffer = PixelBuffer.from_array(source)

        source[0, 0] = (9, 9, 9)

        self.assertEqual(buffer.get(0, 0), (0, 0, 0))

    def test_from_array_clamps(self):
        buffer = PixelBuffer.from_array([[[-5, 128, 999]]])

        self.assertEqual(buffer.get(0, 0), (0, 128, 255))

    def test_to_array_is_a_copy(self):
        buffer = PixelBuffer.filled(2, 2, (10, 10, 10))
        array = buffer.to_array()

        array[0, 0] = (0, 0, 0)

        self.assertEqual(buffer.get(0, 0), (10, 10, 10))


class TestPixelAccess(unittest.TestCase):
    """Test get and with_pixel."""

    def setUp(self):
        self.buffer = PixelBuffer.filled(4, 3, (50, 60, 70))

    def test_with_pixel_then_get(self):
        updated = self.buffer.with_pixel(3, 2, 1, 2, 3)

        self.assertEqual(updated.get(3, 2), (1, 2, 3))

    def test_with_pixel_leaves_original_unchanged(self):
        self.buffer.with_pixel(0, 0, 255, 255, 255)

        self.assertEqual(self.buffer.get(0, 0), (50, 60, 70))

    def test_with_pixel_clamps_channels(self):
        updated = self.buffer.with_pixel(1, 1, 400, -1, 255)

        self.assertEqual(updated.get(1, 1), (255, 0, 255))

    def test_get_out_of_bounds(self):
        for x, y in [(4, 0), (0, 3), (-1, 0), (0, -1)]:
            with self.assertRaises(OutOfBoundsError):
                self.buffer.get(x, y)

    def test_with_pixel_out_of_bounds(self):
        with self.assertRaises(OutOfBoundsError):
            self.buffer.with_pixel(4, 3, 0, 0, 0)

    def test_out_of_bounds_is_an_index_error(self):
        with self.assertRaises(IndexError):
            self.buffer.get(10, 10)

    def test_equality_is_pixelwise(self):
        same = PixelBuffer.filled(4, 3, (50, 60, 70))
        different = self.buffer.with_pixel(0, 0, 0, 0, 0)

        self.assertEqual(self.buffer, same)
        self.assertNotEqual(self.buffer, different)

    def test_storage_is_read_only(self):
        with self.assertRaises(AttributeError):
            self.buffer.width = 10


class TestParameterModels(unittest.TestCase):
    """Test inline parameters of filters and generators."""

    def test_mosaic_requires_seed_count(self):
        with self.assertRaises(InvalidParameterError):
            FilterRequest(FilterKind.MOSAIC)

    def test_mosaic_rejects_non_positive_seed_count(self):
        with self.assertRaises(InvalidParameterError):
            FilterRequest(FilterKind.MOSAIC, 0)

    def test_simple_filter_rejects_seed_count(self):
        with self.assertRaises(InvalidParameterError):
            FilterRequest(FilterKind.BLUR, 5)

    def test_orientation_parse_is_case_insensitive(self):
        self.assertIs(Orientation.parse("VERTICAL"), Orientation.VERTICAL)
        self.assertIs(Orientation.parse(" Horizontal "), Orientation.HORIZONTAL)

    def test_orientation_parse_rejects_unknown(self):
        with self.assertRaises(InvalidParameterError):
            Orientation.parse("diagonal")

    def test_rainbow_rejects_non_positive_dimensions(self):
        with self.assertRaises(InvalidParameterError):
            RainbowSpec(Orientation.HORIZONTAL, 0, 10)
        with self.assertRaises(InvalidParameterError):
            RainbowSpec(Orientation.VERTICAL, 10, -1)

    def test_checkerboard_rejects_non_positive_size(self):
        with self.assertRaises(InvalidParameterError):
            CheckerboardSpec(0)

    def test_invalid_parameter_is_a_value_error(self):
        with self.assertRaises(ValueError):
            CheckerboardSpec(-3)


if __name__ == "__main__":
    unittest.main()
