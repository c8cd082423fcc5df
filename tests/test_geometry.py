"""
Tests for the geometry types and the coordinate transform.
"""

import math
import unittest

from svg_writer.models.geometry import (
    Dimensions, Layout, Origin, Point, almost_equal, get_max_point, get_min_point,
    offset_points, transform_scale, transform_x, transform_y, valid_num
)


def inverse_x(value, layout):
    if layout.origin in (Origin.TOP_RIGHT, Origin.BOTTOM_RIGHT):
        return (layout.dimensions.width - value) / layout.scale - layout.origin_offset.x
    return value / layout.scale - layout.origin_offset.x


def inverse_y(value, layout):
    if layout.origin in (Origin.BOTTOM_LEFT, Origin.BOTTOM_RIGHT):
        return (layout.dimensions.height - value) / layout.scale - layout.origin_offset.y
    return value / layout.scale - layout.origin_offset.y


class TestLayout(unittest.TestCase):
    """Tests for Layout and the transform functions."""

    def test_defaults(self):
        """Test the default layout."""
        layout = Layout()
        self.assertEqual(layout.dimensions, Dimensions(400, 300))
        self.assertEqual(layout.origin, Origin.BOTTOM_LEFT)
        self.assertEqual(layout.scale, 1.0)
        self.assertEqual(layout.origin_offset, Point(0, 0))

    def test_bottom_left_flips_y(self):
        """Test that a bottom-left origin mirrors y against the height."""
        layout = Layout(Dimensions(400, 300), Origin.BOTTOM_LEFT, 1)
        self.assertEqual(transform_x(50, layout), 50.0)
        self.assertEqual(transform_y(50, layout), 250.0)

    def test_right_origin_flips_x(self):
        """Test that right origins mirror x against the width."""
        layout = Layout(Dimensions(400, 300), Origin.TOP_RIGHT, 2, Point(5, 5))
        self.assertEqual(transform_x(10, layout), 400 - 30)
        self.assertEqual(transform_y(10, layout), 30)

    def test_transform_scale(self):
        """Test that lengths are only scaled."""
        layout = Layout(Dimensions(10, 10), Origin.BOTTOM_RIGHT, 2.5, Point(100, 100))
        self.assertEqual(transform_scale(4, layout), 10.0)

    def test_inverse_recovers_input(self):
        """Test that the transform can be inverted for every origin."""
        for origin in Origin:
            for scale in (1.0, 0.5, 3.0, -2.0):
                layout = Layout(Dimensions(640, 480), origin, scale, Point(-12.5, 7))
                for x, y in ((0, 0), (13.25, -4), (600, 470)):
                    with self.subTest(origin=origin, scale=scale, x=x, y=y):
                        self.assertAlmostEqual(inverse_x(transform_x(x, layout), layout), x)
                        self.assertAlmostEqual(inverse_y(transform_y(y, layout), layout), y)

    def test_invalid_scale_is_logged(self):
        """Test that a non-finite scale is reported but kept."""
        with self.assertLogs("svg_writer", "WARNING") as cm:
            layout = Layout(scale=float("inf"))
        self.assertTrue(math.isinf(layout.scale))
        self.assertIn("Layout()", cm.output[0])


class TestGeometryHelpers(unittest.TestCase):
    """Tests for points, dimensions and numeric helpers."""

    def test_dimensions_combined(self):
        """Test that a single value sets both sides."""
        dims = Dimensions(7)
        self.assertEqual((dims.width, dims.height), (7, 7))
        self.assertEqual(Dimensions(), Dimensions(0, 0))

    def test_dimensions_nan_logged(self):
        """Test that NaN dimensions produce a warning."""
        with self.assertLogs("svg_writer", "WARNING"):
            Dimensions(float("nan"), 1)

    def test_min_max_point(self):
        """Test component-wise extrema."""
        points = [Point(1, 5), Point(-2, 7), Point(3, -1)]
        self.assertEqual(get_min_point(points), Point(-2, -1))
        self.assertEqual(get_max_point(points), Point(3, 7))
        self.assertIsNone(get_min_point([]))
        self.assertIsNone(get_max_point([]))

    def test_offset_points(self):
        """Test moving a list of points."""
        self.assertEqual(offset_points([Point(1, 1), Point(2, 3)], Point(1, -1)),
                         [Point(2, 0), Point(3, 2)])

    def test_numeric_helpers(self):
        """Test finite checks and approximate comparison."""
        self.assertTrue(valid_num(1e300))
        self.assertFalse(valid_num(float("nan")))
        self.assertFalse(valid_num(float("-inf")))
        self.assertTrue(almost_equal(1.0, 1.0 + 1e-12))
        self.assertFalse(almost_equal(1.0, 1.0 + 1e-6))
        self.assertTrue(almost_equal(1.0, 1.05, eps=0.1))


if __name__ == "__main__":
    unittest.main()
