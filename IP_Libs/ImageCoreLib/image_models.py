"""
Image data model for Image Processor.

An Image is a width x height grid of Color values stored in a flat,
row-major list indexed by ``y * width + x``.

Images handed out to callers are frozen: every constructor except
``Image.black`` freezes its result, and transformations build a fresh
black image, fill it, then freeze it before returning.

Classes:
    Image: Grid of colors with crop and window extraction
"""

from typing import Iterable, List, Tuple

from IP_Libs.ImageCoreLib.color import BLACK, Color
from IP_Libs.ImageCoreLib.kernels import Window
from IP_Libs.errors import BoundsError, FrozenImageError


class Image:
    """
    Row-major grid of colors.

    Example:
        >>> image = Image.black(4, 4)
        >>> image.set_color(0, 0, Color(255, 0, 0))
        >>> image.freeze()
        >>> image.get_color(0, 0)
        Color(red=255, green=0, blue=0)
    """

    def __init__(self, width: int, height: int, pixels: Iterable[Color]):
        pixels = list(pixels)
        if width <= 0 or height <= 0:
            raise ValueError(f"Image dimensions must be positive, got {width} x {height}")

        if len(pixels) != width * height:
            raise ValueError(
                f"Expected {width * height} colors for a {width} x {height} image, "
                f"got {len(pixels)}"
            )

        self._width = width
        self._height = height
        self._pixels = pixels
        self._frozen = False

    @classmethod
    def black(cls, width: int, height: int) -> "Image":
        """Create a writable image filled with black."""
        return cls(width, height, [BLACK] * (width * height))

    @classmethod
    def from_colors(cls, width: int, height: int, colors: Iterable[Color]) -> "Image":
        """
        Create a frozen image from colors in row-major order.

        Args:
            width: Image width in pixels
            height: Image height in pixels
            colors: Exactly width * height colors, row by row

        Returns:
            Frozen Image

        Raises:
            ValueError: If the number of colors does not match the dimensions
        """
        image = cls(width, height, colors)
        image.freeze()
        return image

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def size(self) -> Tuple[int, int]:
        return self._width, self._height

    @property
    def frozen(self) -> bool:
        return self._frozen

    def freeze(self) -> "Image":
        """Make the image read-only. Returns the image for chaining."""
        self._frozen = True
        return self

    def _index(self, x: int, y: int) -> int:
        if not (0 <= x < self._width and 0 <= y < self._height):
            raise BoundsError(
                f"Pixel ({x}, {y}) is outside a {self._width} x {self._height} image"
            )
        return y * self._width + x

    def get_color(self, x: int, y: int) -> Color:
        return self._pixels[self._index(x, y)]

    def set_color(self, x: int, y: int, color: Color) -> None:
        """
        Write one pixel of an image under construction.

        Raises:
            FrozenImageError: If the image has been frozen
            BoundsError: If (x, y) is outside the image
        """
        if self._frozen:
            raise FrozenImageError("Cannot modify a frozen image")
        self._pixels[self._index(x, y)] = color

    def colors(self) -> List[Color]:
        """Return a copy of the pixels in row-major order."""
        return list(self._pixels)

    def crop(self, x: int, y: int, w: int, h: int) -> "Image":
        """
        Extract the w x h rectangle whose top-left corner is (x, y).

        Returns:
            New frozen Image where pixel (i, j) is source pixel (x + i, y + j)

        Raises:
            BoundsError: If the rectangle does not lie inside the image
        """
        if x < 0 or y < 0 or w <= 0 or h <= 0 or x + w > self._width or y + h > self._height:
            raise BoundsError(
                f"Crop rectangle ({x}, {y}, {w}, {h}) exceeds image bounds "
                f"{self._width} x {self._height}"
            )

        pixels = []
        for row in range(y, y + h):
            start = row * self._width + x
            pixels.extend(self._pixels[start:start + w])
        return Image.from_colors(w, h, pixels)

    def window(self, x: int, y: int, w: int, h: int) -> Window:
        """
        Extract the w x h patch centered on (x, y) for convolution.

        The patch's top-left sample is (x - w // 2, y - h // 2). Samples
        that fall outside the image are clamped to the nearest edge
        row or column, so border pixels repeat the edge of the image.

        Raises:
            ValueError: If w or h is not positive
        """
        if w <= 0 or h <= 0:
            raise ValueError(f"Window dimensions must be positive, got {w} x {h}")

        max_x = self._width - 1
        max_y = self._height - 1
        left = x - w // 2
        top = y - h // 2

        values = []
        for row in range(top, top + h):
            clamped_row = min(max(row, 0), max_y) * self._width
            for column in range(left, left + w):
                values.append(self._pixels[clamped_row + min(max(column, 0), max_x)])
        return Window(w, h, tuple(values))

    def __eq__(self, other):
        if not isinstance(other, Image):
            return NotImplemented
        return self.size == other.size and self._pixels == other._pixels

    def __repr__(self):
        return f"Image(width={self._width}, height={self._height})"
