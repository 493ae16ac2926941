"""
Unit tests for the Image model.

Tests cover construction, pixel access, freezing, crop and the
edge-clamped window extraction used by kernel filters.
"""

import unittest

import pytest

from IP_Libs.ImageCoreLib.color import BLACK, Color
from IP_Libs.ImageCoreLib.image_models import Image
from IP_Libs.errors import BoundsError, FrozenImageError


def make_gradient(width=4, height=3):
    return Image.from_colors(
        width,
        height,
        [Color(10 * x, 10 * y, x + y) for y in range(height) for x in range(width)],
    )


class TestImageConstruction(unittest.TestCase):
    """Tests for Image constructors."""

    def test_black_image(self):
        """black() should create a writable image filled with black."""
        image = Image.black(3, 2)

        self.assertEqual(image.size, (3, 2))
        self.assertFalse(image.frozen)
        self.assertTrue(all(color == BLACK for color in image.colors()))

    def test_from_colors_is_frozen(self):
        """from_colors() should return a frozen image."""
        image = Image.from_colors(1, 1, [Color(1, 2, 3)])
        self.assertTrue(image.frozen)

    def test_from_colors_wrong_length(self):
        """A color count different from width * height should fail."""
        with self.assertRaises(ValueError):
            Image.from_colors(2, 2, [BLACK] * 3)

    def test_non_positive_dimensions(self):
        """Zero or negative dimensions should fail."""
        with self.assertRaises(ValueError):
            Image.black(0, 5)
        with self.assertRaises(ValueError):
            Image.black(5, -1)

    def test_constructor_copies_pixels(self):
        """Changing the caller's list afterwards should not change the image."""
        pixels = [BLACK, Color(1, 2, 3)]
        image = Image(2, 1, pixels)
        frozen = Image.from_colors(2, 1, pixels)

        pixels[0] = Color(200, 200, 200)

        self.assertEqual(image.get_color(0, 0), BLACK)
        self.assertEqual(frozen.get_color(0, 0), BLACK)

    def test_constructor_accepts_iterables(self):
        """Any iterable of colors should be accepted, not only lists."""
        image = Image(2, 1, (color for color in [BLACK, Color(1, 2, 3)]))
        self.assertEqual(image.get_color(1, 0), Color(1, 2, 3))


class TestPixelAccess(unittest.TestCase):
    """Tests for get_color / set_color."""

    def setUp(self):
        self.image = make_gradient()

    def test_row_major_layout(self):
        """Pixel (x, y) should be at index y * width + x."""
        self.assertEqual(self.image.get_color(2, 1), Color(20, 10, 3))
        self.assertEqual(self.image.colors()[1 * 4 + 2], Color(20, 10, 3))

    def test_get_out_of_bounds(self):
        """Reading outside the image should raise BoundsError."""
        with self.assertRaises(BoundsError):
            self.image.get_color(4, 0)
        with self.assertRaises(BoundsError):
            self.image.get_color(0, -1)

    def test_set_on_frozen_image(self):
        """Writing to a frozen image should raise FrozenImageError."""
        with self.assertRaises(FrozenImageError):
            self.image.set_color(0, 0, BLACK)

    def test_set_on_new_image(self):
        """Writing to a black image should work until it is frozen."""
        image = Image.black(2, 2)
        image.set_color(1, 1, Color(9, 9, 9))
        image.freeze()

        self.assertEqual(image.get_color(1, 1), Color(9, 9, 9))
        with self.assertRaises(FrozenImageError):
            image.set_color(0, 0, Color(1, 1, 1))

    def test_colors_returns_copy(self):
        """Mutating the returned list should not affect the image."""
        colors = self.image.colors()
        colors[0] = Color(255, 255, 255)

        self.assertEqual(self.image.get_color(0, 0), Color(0, 0, 0))

    def test_equality(self):
        """Images with the same size and pixels should be equal."""
        self.assertEqual(self.image, make_gradient())
        self.assertNotEqual(self.image, make_gradient(3, 4))


class TestCrop(unittest.TestCase):
    """Tests for Image.crop."""

    def setUp(self):
        self.image = make_gradient()

    def test_crop_pixels(self):
        """Pixel (i, j) of the crop should be source pixel (x + i, y + j)."""
        cropped = self.image.crop(1, 1, 2, 2)

        self.assertEqual(cropped.size, (2, 2))
        for j in range(2):
            for i in range(2):
                self.assertEqual(cropped.get_color(i, j), self.image.get_color(1 + i, 1 + j))

    def test_full_crop(self):
        """Cropping the whole image should give an equal image."""
        self.assertEqual(self.image.crop(0, 0, 4, 3), self.image)

    def test_crop_is_frozen(self):
        """The cropped image should be frozen."""
        self.assertTrue(self.image.crop(0, 0, 1, 1).frozen)

    def test_crop_out_of_bounds(self):
        """Rectangles exceeding the image should raise BoundsError."""
        for rect in [(3, 0, 2, 1), (0, 2, 1, 2), (-1, 0, 1, 1), (0, 0, 0, 1), (0, 0, 5, 3)]:
            with self.assertRaises(BoundsError):
                self.image.crop(*rect)


class TestWindow:
    """Tests for Image.window edge-clamp extraction."""

    def test_interior_window(self, gradient_image):
        """A window away from the border should be the 3 x 3 neighborhood."""
        window = gradient_image.window(1, 1, 3, 3)

        expected = [gradient_image.get_color(x, y) for y in range(3) for x in range(3)]
        assert (window.width, window.height) == (3, 3)
        assert list(window.values) == expected

    def test_top_left_corner_repeats_edge(self, gradient_image):
        """Samples left of / above the image should repeat row 0 and column 0."""
        window = gradient_image.window(0, 0, 3, 3)

        coords = [(0, 0), (0, 0), (1, 0),
                  (0, 0), (0, 0), (1, 0),
                  (0, 1), (0, 1), (1, 1)]
        assert list(window.values) == [gradient_image.get_color(x, y) for x, y in coords]

    def test_bottom_right_corner_repeats_edge(self, gradient_image):
        """Samples past the last row / column should repeat them."""
        window = gradient_image.window(3, 2, 3, 3)

        coords = [(2, 1), (3, 1), (3, 1),
                  (2, 2), (3, 2), (3, 2),
                  (2, 2), (3, 2), (3, 2)]
        assert list(window.values) == [gradient_image.get_color(x, y) for x, y in coords]

    def test_single_pixel_image(self):
        """Every sample of a 1 x 1 image should be its only pixel."""
        image = Image.from_colors(1, 1, [Color(7, 8, 9)])

        window = image.window(0, 0, 5, 3)
        assert list(window.values) == [Color(7, 8, 9)] * 15

    def test_even_sized_window(self, gradient_image):
        """Even sizes should start at x - w // 2, y - h // 2."""
        window = gradient_image.window(2, 1, 2, 2)

        coords = [(1, 0), (2, 0), (1, 1), (2, 1)]
        assert list(window.values) == [gradient_image.get_color(x, y) for x, y in coords]

    def test_invalid_window_size(self, gradient_image):
        """Non-positive window sizes should fail."""
        with pytest.raises(ValueError):
            gradient_image.window(0, 0, 0, 3)


if __name__ == "__main__":
    unittest.main()
