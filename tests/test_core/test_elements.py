"""
Tests for the leaf elements: text, image and chart.

Text bounds are checked against the approximate measurer:
width = 0.6 * size per character, ascent = 0.8 * size, height = size.
"""

import math
import unittest

from composedoc.core.elements import (
    TextElement, ImageElement, ChartElement, round_half_up, validate_resize_factor
)
from composedoc.core.errors import InvalidResizeFactorError, CompositionError
from composedoc.core.geometry import Point, BoundingBox
from composedoc.core.measure import TextMeasurer, TextMetrics, set_text_measurer
from composedoc.core.render import RecordingSurface, TextCommand, ImageCommand, ChartCommand


class FixedMeasurer(TextMeasurer):
    """Measurer returning the same extent for any text."""

    def __init__(self, width, height, ascent):
        self.metrics = TextMetrics(width, height, ascent)
        self.calls = []

    def measure(self, text, size):
        self.calls.append((text, size))
        return self.metrics


class TestResizeHelpers(unittest.TestCase):

    def test_round_half_up(self):
        """Test rounding to nearest with halves going up."""
        self.assertEqual(round_half_up(4.5), 5)
        self.assertEqual(round_half_up(4.49), 4)
        self.assertEqual(round_half_up(2.5), 3)
        self.assertEqual(round_half_up(7.0), 7)

    def test_validate_accepts_positive(self):
        """Test validation with valid factors."""
        self.assertEqual(validate_resize_factor(2), 2.0)
        self.assertEqual(validate_resize_factor(0.5), 0.5)

    def test_validate_rejects_invalid(self):
        """Test validation with non-positive, non-finite and non-numeric factors."""
        for factor in (0, -1, -0.5, math.nan, math.inf, -math.inf, True, "2"):
            with self.subTest(factor=factor):
                with self.assertRaises(InvalidResizeFactorError):
                    validate_resize_factor(factor)

    def test_error_is_value_error(self):
        """Test resize errors are both ValueError and CompositionError."""
        with self.assertRaises(ValueError):
            validate_resize_factor(0)
        with self.assertRaises(CompositionError):
            validate_resize_factor(0)


class TestTextElement(unittest.TestCase):
    """Test TextElement class."""

    def setUp(self):
        self.text = TextElement(0, 0, "Title", 24)

    def test_creation(self):
        """Test creating a text element."""
        self.assertEqual(self.text.position, Point(0, 0))
        self.assertEqual(self.text.text, "Title")
        self.assertEqual(self.text.size, 24.0)
        self.assertIsNone(self.text.owner)

    def test_rejects_non_positive_size(self):
        """Test creation with zero or negative size."""
        with self.assertRaises(ValueError):
            TextElement(0, 0, "x", 0)
        with self.assertRaises(ValueError):
            TextElement(0, 0, "x", -3)

    def test_move_is_relative(self):
        """Test moves add up as deltas."""
        self.text.move(5, 10)
        self.text.move(-2, 3)
        self.assertEqual(self.text.position, Point(3, 13))

    def test_resize_scales_size_exactly(self):
        """Test text size scaling without rounding."""
        self.text.resize(2.0)
        self.assertEqual(self.text.size, 48.0)
        self.text.resize(0.25)
        self.assertEqual(self.text.size, 12.0)

    def test_invalid_resize_leaves_size(self):
        """Test a rejected factor keeps the size."""
        with self.assertRaises(InvalidResizeFactorError):
            self.text.resize(-1)
        self.assertEqual(self.text.size, 24.0)

    def test_resize_overflow_rejected(self):
        """Test a factor that would make the size infinite."""
        self.assertFalse(self.text.can_resize(1e307))
        with self.assertRaises(InvalidResizeFactorError):
            self.text.resize(1e307)
        self.assertEqual(self.text.size, 24.0)

    def test_resize_underflow_rejected(self):
        """Test the size never shrinks to zero."""
        self.text.resize(5e-324)
        smallest = self.text.size
        self.assertGreater(smallest, 0)

        self.assertFalse(self.text.can_resize(5e-324))
        with self.assertRaises(InvalidResizeFactorError):
            self.text.resize(5e-324)
        self.assertEqual(self.text.size, smallest)

    def test_can_resize(self):
        """Test can_resize for valid and invalid factors."""
        self.assertTrue(self.text.can_resize(2.0))
        self.assertFalse(self.text.can_resize(0))
        self.assertFalse(self.text.can_resize(math.nan))
        self.assertEqual(self.text.size, 24.0)

    def test_set_text(self):
        """Test replacing the text content."""
        self.text.set_text("Heading")
        self.assertEqual(self.text.text, "Heading")

    def test_editable_capability(self):
        """Test text elements expose themselves as editable text."""
        self.assertIs(self.text.as_editable_text(), self.text)

    def test_bounds_from_measurement(self):
        """Test bounds start one ascent above the baseline."""
        bounds = self.text.bounds()
        self.assertAlmostEqual(bounds.min_x, 0)
        self.assertAlmostEqual(bounds.min_y, -19.2)
        self.assertAlmostEqual(bounds.width, 72.0)
        self.assertAlmostEqual(bounds.height, 24.0)

    def test_contains(self):
        """Test point containment against measured bounds."""
        self.assertTrue(self.text.contains(Point(0, 0)))
        self.assertTrue(self.text.contains(Point(71, -19)))
        self.assertFalse(self.text.contains(Point(72, 0)))
        self.assertFalse(self.text.contains(Point(10, 5)))
        self.assertFalse(self.text.contains(Point(-1, 0)))

    def test_bounds_follow_content(self):
        """Test bounds grow with longer text."""
        self.text.set_text("A much longer title")
        self.assertTrue(self.text.contains(Point(200, 0)))

    def test_empty_text_contains_nothing(self):
        """Test empty text has no hit area."""
        self.text.set_text("")
        self.assertFalse(self.text.contains(Point(0, 0)))

    def test_element_measurer_override(self):
        """Test a per-element measurer is used for bounds."""
        measurer = FixedMeasurer(width=10, height=10, ascent=5)
        text = TextElement(100, 100, "Title", 24, measurer=measurer)
        self.assertEqual(text.bounds(), BoundingBox(100, 95, 110, 105))
        self.assertEqual(measurer.calls, [("Title", 24.0)])

    def test_environment_measurer(self):
        """Test the installed measurer is used when no override is set."""
        set_text_measurer(FixedMeasurer(width=4, height=4, ascent=2))
        self.assertTrue(self.text.contains(Point(3, 1)))
        self.assertFalse(self.text.contains(Point(4, 1)))

    def test_draw_does_not_mutate(self):
        """Test drawing emits one text command and keeps geometry."""
        surface = RecordingSurface()
        self.text.draw(surface)
        self.assertEqual(surface.commands, [TextCommand(Point(0, 0), "Title", 24.0)])
        self.assertEqual(self.text.position, Point(0, 0))
        self.assertEqual(self.text.size, 24.0)


class TestBoxElements(unittest.TestCase):
    """Test ImageElement and ChartElement."""

    def setUp(self):
        self.image = ImageElement(300, 20, 100, 50, "logo.png")
        self.chart = ChartElement(50, 150, 400, 300, "Sales Data")

    def test_creation(self):
        """Test creating image and chart elements."""
        self.assertEqual(self.image.source, "logo.png")
        self.assertEqual(self.chart.title, "Sales Data")
        self.assertEqual((self.image.width, self.image.height), (100, 50))

    def test_rejects_negative_dimensions(self):
        """Test creation with a negative width."""
        with self.assertRaises(ValueError):
            ImageElement(0, 0, -1, 10, "a.png")

    def test_not_editable(self):
        """Test images and charts have no editable text."""
        self.assertIsNone(self.image.as_editable_text())
        self.assertIsNone(self.chart.as_editable_text())

    def test_move(self):
        """Test moving an image."""
        self.image.move(5, 10)
        self.assertEqual(self.image.position, Point(305, 30))

    def test_resize_rounds_to_nearest(self):
        """Test resized dimensions round to the nearest integer."""
        chart = ChartElement(0, 0, 3, 5, "t")
        chart.resize(1.5)
        self.assertEqual((chart.width, chart.height), (5, 8))

    def test_resize_keeps_position(self):
        """Test resize scales dimensions around a fixed origin."""
        self.image.resize(2.0)
        self.assertEqual((self.image.width, self.image.height), (200, 100))
        self.assertEqual(self.image.position, Point(300, 20))

    def test_repeated_resize_diverges_from_product(self):
        """Rounding after every step makes resize(a); resize(b) differ from resize(a * b)."""
        stepped = ImageElement(0, 0, 3, 5, "a.png")
        stepped.resize(1.5)
        stepped.resize(1.5)

        direct = ImageElement(0, 0, 3, 5, "a.png")
        direct.resize(1.5 * 1.5)

        self.assertEqual((stepped.width, stepped.height), (8, 12))
        self.assertEqual((direct.width, direct.height), (7, 11))
        self.assertEqual(stepped.width - direct.width, 1)
        self.assertEqual(stepped.height - direct.height, 1)

    def test_invalid_resize_leaves_dimensions(self):
        """Test rejected factors keep width and height."""
        for factor in (0, -2, math.nan):
            with self.subTest(factor=factor):
                with self.assertRaises(InvalidResizeFactorError):
                    self.chart.resize(factor)
                self.assertEqual((self.chart.width, self.chart.height), (400, 300))

    def test_resize_overflow_rejected(self):
        """Test a factor that would make the dimensions infinite."""
        self.assertFalse(self.image.can_resize(1e307))
        with self.assertRaises(InvalidResizeFactorError):
            self.image.resize(1e307)
        self.assertEqual((self.image.width, self.image.height), (100, 50))

    def test_contains(self):
        """Test half-open rectangle containment."""
        self.assertTrue(self.image.contains(Point(300, 20)))
        self.assertTrue(self.image.contains(Point(399, 69)))
        self.assertFalse(self.image.contains(Point(400, 20)))
        self.assertFalse(self.image.contains(Point(299, 20)))

    def test_draw(self):
        """Test image and chart draw commands."""
        surface = RecordingSurface()
        self.image.draw(surface)
        self.chart.draw(surface)
        self.assertEqual(surface.commands, [
            ImageCommand(BoundingBox(300, 20, 400, 70), "logo.png"),
            ChartCommand(BoundingBox(50, 150, 450, 450), "Sales Data"),
        ])

    def test_unique_ids(self):
        """Test every element gets its own id."""
        self.assertNotEqual(self.image.id, self.chart.id)


if __name__ == '__main__':
    unittest.main()
