"""
Tests for points and bounding boxes.
"""

import unittest

from composedoc.core.geometry import Point, BoundingBox, union_all


class TestPoint(unittest.TestCase):
    """Test Point class."""

    def test_arithmetic(self):
        """Test point addition and subtraction."""
        self.assertEqual(Point(1, 2) + Point(3, 4), Point(4, 6))
        self.assertEqual(Point(5, 5) - Point(2, 3), Point(3, 2))

    def test_coerce_tuple(self):
        """Test coercing a tuple to a Point."""
        self.assertEqual(Point.coerce((5, 10)), Point(5, 10))

    def test_coerce_point_is_identity(self):
        """Test coercing a Point returns it unchanged."""
        p = Point(1, 1)
        self.assertIs(Point.coerce(p), p)

    def test_unpack(self):
        """Test unpacking a point into x and y."""
        x, y = Point(7, 8)
        self.assertEqual((x, y), (7, 8))


class TestBoundingBox(unittest.TestCase):
    """Test BoundingBox class."""

    def setUp(self):
        self.box = BoundingBox.from_rect(10, 20, 100, 50)

    def test_from_rect(self):
        """Test creating a box from origin and size."""
        self.assertEqual(self.box.min_x, 10)
        self.assertEqual(self.box.max_y, 70)
        self.assertEqual(self.box.width, 100)
        self.assertEqual(self.box.height, 50)

    def test_contains_is_half_open(self):
        """Left/top edges are inside, right/bottom edges are outside."""
        self.assertTrue(self.box.contains(Point(10, 20)))
        self.assertTrue(self.box.contains(Point(109, 69)))
        self.assertFalse(self.box.contains(Point(110, 20)))
        self.assertFalse(self.box.contains(Point(10, 70)))
        self.assertFalse(self.box.contains(Point(9, 30)))

    def test_empty_box_contains_nothing(self):
        """Test a zero-width box contains no point."""
        empty = BoundingBox.from_rect(0, 0, 0, 10)
        self.assertTrue(empty.is_empty)
        self.assertFalse(empty.contains(Point(0, 0)))

    def test_union_all(self):
        """Test union of boxes skipping None."""
        other = BoundingBox.from_rect(0, 0, 5, 5)
        result = union_all([self.box, None, other])
        self.assertEqual(result, BoundingBox(0, 0, 110, 70))

    def test_union_all_empty(self):
        """Test union of nothing is None."""
        self.assertIsNone(union_all([]))
        self.assertIsNone(union_all([None]))


if __name__ == '__main__':
    unittest.main()
