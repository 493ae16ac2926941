"""
Pytest configuration and shared fixtures for Image Processor tests.

This module provides shared test fixtures and configuration
used across multiple test modules.
"""

import pytest
from PIL import Image as PILImage

from IP_Libs.ImageCoreLib.color import Color
from IP_Libs.ImageCoreLib.image_models import Image


@pytest.fixture
def sample_colors():
    """
    Provide a list of sample RGB colors for testing.

    Returns:
        List of Color values with common test colors
    """
    return [
        Color(255, 0, 0),      # Red
        Color(0, 255, 0),      # Green
        Color(0, 0, 255),      # Blue
        Color(255, 255, 255),  # White
        Color(0, 0, 0),        # Black
        Color(128, 128, 128),  # Gray
        Color(12, 200, 77),
        Color(254, 1, 130),
    ]


@pytest.fixture
def gradient_image():
    """
    Provide a 4 x 3 image where pixel (x, y) is Color(10 * x, 10 * y, x + y).

    Returns:
        Frozen Image
    """
    width, height = 4, 3
    return Image.from_colors(
        width,
        height,
        [Color(10 * x, 10 * y, x + y) for y in range(height) for x in range(width)],
    )


@pytest.fixture
def png_path(tmp_path):
    """
    Write a 2 x 2 PNG with four distinct colors.

    Returns:
        Path to the PNG file
    """
    path = tmp_path / "sample.png"
    img = PILImage.new("RGB", (2, 2))
    img.putpixel((0, 0), (255, 0, 0))
    img.putpixel((1, 0), (0, 255, 0))
    img.putpixel((0, 1), (0, 0, 255))
    img.putpixel((1, 1), (10, 20, 30))
    img.save(path)
    return path
